#!/usr/bin/env python3
"""
Pixel Monsters - battle core demo

Thin wrapper around the terminal demo in pixelmonsters.cli. The battle
resolver itself lives in pixelmonsters.battle and has no terminal dependency.

To run: python main.py [--seed N] [--auto] [--fast] [--trainer]
"""

from pixelmonsters.cli import run

if __name__ == "__main__":
    run()

"""
Centralized path helpers.
"""
from __future__ import annotations
from pathlib import Path

# This file lives at pixelmonsters/core/paths.py
PACKAGE = Path(__file__).resolve().parents[1]
DATA = PACKAGE / "data"
SKILLS = DATA / "skills.json"

"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class PixelMonstersError(Exception):
    pass

class DataLoadError(PixelMonstersError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed to load {path}: {detail}")
        self.path = path
        self.detail = detail

class ValidationError(PixelMonstersError):
    """Raised at the battle boundary when a caller breaks the engine's contract."""

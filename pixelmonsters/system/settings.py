from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Callable, List, Optional
from pixelmonsters.core.logging import logger

SETTINGS_FILENAME = ".pixelmonsters_settings.json"
LOG_LEVELS = {"DEBUG","INFO","WARN","ERROR"}

@dataclass
class SettingsData:
    pacing_ms: int = 500           # pause between applied actions in the terminal demo
    log_level: str = "INFO"        # DEBUG / INFO / WARN / ERROR
    debug: bool = False            # Verbose battle/debug prints
    seed: Optional[int] = None     # Fixed RNG seed for reproducible battles

    def normalize(self):
        try:
            self.pacing_ms = max(0, int(self.pacing_ms))
        except (TypeError, ValueError):
            self.pacing_ms = 500
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            self.log_level = "INFO"
        self.log_level = self.log_level.upper()
        self.debug = bool(self.debug)
        if self.seed is not None:
            try:
                self.seed = int(self.seed)
            except (TypeError, ValueError):
                self.seed = None

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path
        self._listeners: List[Callable[[SettingsData], None]] = []

    @property
    def pacing_seconds(self) -> float:
        return self.data.pacing_ms / 1000.0

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = path or cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Unknown keys are dropped, missing ones take defaults
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def update(self, **changes):
        for name, value in changes.items():
            if not hasattr(self.data, name):
                raise AttributeError(f"Unknown setting: {name}")
            setattr(self.data, name, value)
        self.data.normalize()
        self._notify()

    def on_change(self, fn: Callable[[SettingsData], None]):
        self._listeners.append(fn)

    def _notify(self):
        for fn in self._listeners:
            fn(self.data)

    def apply_log_level(self):
        from pixelmonsters.core.logging import logger as global_logger
        # Quiet INFO chatter unless debug is on
        if not self.data.debug and self.data.log_level in {"INFO","DEBUG"}:
            global_logger.set_level("WARN")
        else:
            global_logger.set_level(self.data.log_level)  # type: ignore[arg-type]

import json

import pytest

from pixelmonsters.core.logging import logger
from pixelmonsters.system.settings import Settings, SettingsData


def test_defaults_when_missing(tmp_path):
    s = Settings.load(tmp_path / "settings.json")
    assert s.data == SettingsData()
    assert s.pacing_seconds == 0.5


def test_round_trip(tmp_path):
    path = tmp_path / "settings.json"
    s = Settings.load(path)
    s.update(pacing_ms=120, seed=7)
    s.save()
    again = Settings.load(path)
    assert again.data.pacing_ms == 120
    assert again.data.seed == 7


def test_corrupt_file_falls_back(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{oops")
    assert Settings.load(path).data == SettingsData()


def test_values_are_normalized(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"pacing_ms": -40, "log_level": "loud", "seed": "12", "extra": 1}))
    data = Settings.load(path).data
    assert data.pacing_ms == 0
    assert data.log_level == "INFO"
    assert data.seed == 12


def test_update_notifies_and_rejects_unknown(tmp_path):
    s = Settings.load(tmp_path / "settings.json")
    seen = []
    s.on_change(lambda data: seen.append(data.pacing_ms))
    s.update(pacing_ms=0)
    assert seen == [0]
    with pytest.raises(AttributeError):
        s.update(volume=3)


def test_apply_log_level(tmp_path):
    s = Settings.load(tmp_path / "settings.json")
    try:
        s.apply_log_level()
        assert not logger.enabled("INFO")
        s.update(debug=True, log_level="DEBUG")
        s.apply_log_level()
        assert logger.enabled("DEBUG")
    finally:
        logger.set_level("INFO")

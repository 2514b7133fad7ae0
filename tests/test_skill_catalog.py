import json

import pytest

from pixelmonsters.battle.models import SkillCategory, SkillTarget
from pixelmonsters.core.errors import DataLoadError
from pixelmonsters.data.skills import SkillCatalog, default_catalog, get_skill


def test_default_catalog_loads():
    catalog = default_catalog()
    assert len(catalog) >= 5
    fireball = catalog.lookup("fireball")
    assert fireball.mp_cost == 8
    assert fireball.category == SkillCategory.MAGICAL
    assert "heal" in catalog
    assert catalog.lookup("heal").accuracy is None
    assert catalog.lookup("blizzard").target == SkillTarget.ALL_ENEMIES


def test_lookup_and_get_skill():
    assert default_catalog().lookup("nope") is None
    assert get_skill("tackle").power == 40
    with pytest.raises(KeyError):
        get_skill("nope")


def test_catalog_from_custom_file(tmp_path):
    path = tmp_path / "skills.json"
    path.write_text(json.dumps([{"id": "zap", "category": "magical", "power": 30, "mp_cost": 4}]))
    catalog = SkillCatalog.from_file(path)
    zap = catalog.lookup("zap")
    assert zap.name == "Zap"
    assert zap.target == SkillTarget.SINGLE_ENEMY
    assert zap.accuracy == 100
    assert [s.id for s in catalog] == ["zap"]


@pytest.mark.parametrize("content", [
    "{not json",
    json.dumps({"id": "zap"}),
    json.dumps([{"name": "No id"}]),
    json.dumps([{"id": "zap", "category": "cosmic"}]),
])
def test_bad_files_raise_data_load_error(tmp_path, content):
    path = tmp_path / "skills.json"
    path.write_text(content)
    with pytest.raises(DataLoadError) as exc:
        SkillCatalog.from_file(path)
    assert exc.value.path == str(path)


def test_missing_file(tmp_path):
    with pytest.raises(DataLoadError):
        SkillCatalog.from_file(tmp_path / "missing.json")

from rich.text import Text

from pixelmonsters.core.types import ABBREVIATION_TYPES, MonsterType, format_types, type_abbreviation


def test_type_abbreviations_primary():
    assert type_abbreviation(MonsterType.FIRE) == 'FIR'
    assert type_abbreviation(MonsterType.GROUND) == 'GRN'
    assert ABBREVIATION_TYPES['GRN'] is MonsterType.GROUND


def test_format_types_dual():
    out = format_types(MonsterType.FIRE, MonsterType.FLYING)
    assert Text.from_markup(out).plain == 'FIR/FLY'


def test_parse_is_forgiving_about_case():
    assert MonsterType.parse(' Fire ') is MonsterType.FIRE

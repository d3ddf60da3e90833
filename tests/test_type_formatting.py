import pytest

from pokecards.core.types import (
    TYPE_COLORS_HEX, format_types, type_abbreviation, type_color, type_style,
)


def test_type_abbreviations_primary():
    assert type_abbreviation('fire') == 'FIR'
    assert type_abbreviation('ground') == 'GRN'
    assert type_abbreviation('Shadow') == 'SHA'


def test_format_types_dual():
    assert format_types(('fire', 'flying')) == 'FIR/FLY'


def test_unknown_type_uses_normal_color():
    assert type_color('shadow') == TYPE_COLORS_HEX['normal']
    assert type_color('FAIRY') == TYPE_COLORS_HEX['fairy']


def test_type_style_contrast():
    assert type_style('fire') == f"bold white on {TYPE_COLORS_HEX['fire']}"
    assert type_style('electric').startswith('bold black on')


def test_color_table_is_read_only():
    with pytest.raises(TypeError):
        TYPE_COLORS_HEX['fire'] = '#000000'  # type: ignore[index]

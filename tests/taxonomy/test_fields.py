import pytest

from milsidc.taxonomy.fields import CODING_SCHEMES, STANDARD_IDENTITIES, \
    BATTLE_DIMENSIONS, STATUSES, FIELD_VALUES, get_field_values, field_name


def test_enumerations():
    assert list(CODING_SCHEMES.keys()) == ['S', 'G', 'W', 'I', 'E']
    assert list(STANDARD_IDENTITIES.keys()) == ['P', 'U', 'F', 'N', 'H', 'S', 'J']
    assert list(BATTLE_DIMENSIONS.keys()) == ['Z', 'P', 'A', 'G', 'S', 'U', 'F']
    assert list(STATUSES.keys()) == ['P', 'A', 'D', 'X']


def test_single_character_codes():
    for kind, values in FIELD_VALUES.items():
        for code in values:
            assert len(code) == 1, '{} code {!r}'.format(kind, code)


@pytest.mark.parametrize('kind, value, name', [
    ('CodingScheme', 'S', 'Warfighting'),
    ('StandardIdentity', 'J', 'Joker'),
    ('BattleDimension', 'U', 'Subsurface'),
    ('Status', 'X', 'Destroyed'),
    ('Status', 'Q', None),
])
def test_field_name(kind, value, name):
    assert field_name(kind, value) == name


def test_unknown_kind():
    with pytest.raises(KeyError):
        get_field_values('FunctionID')

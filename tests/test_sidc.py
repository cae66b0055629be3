import unittest

import pytest

from milsidc.base import FormatError
from milsidc.sidc import SIDCType, SIDC_LENGTH, parse_sidc, serialize_sidc


class TestSIDCParsing(unittest.TestCase):
    def test_positional_mapping(self):
        sidc = parse_sidc('SFGPUCII-------')
        with self.subTest(msg='single character fields'):
            self.assertEqual(sidc.CodingScheme, 'S')
            self.assertEqual(sidc.StandardIdentity, 'F')
            self.assertEqual(sidc.BattleDimension, 'G')
            self.assertEqual(sidc.Status, 'P')

        with self.subTest(msg='function id'):
            self.assertEqual(sidc.FunctionID, 'UCII--')

        with self.subTest(msg='modifier'):
            self.assertEqual(sidc.Modifier, '-----')

    def test_surrounding_whitespace(self):
        sidc = parse_sidc('  SHAPMFF--------\n')
        self.assertEqual(serialize_sidc(sidc), 'SHAPMFF--------')

    def test_bytes_input(self):
        sidc = parse_sidc(b'SUAPMFU---12345')
        self.assertEqual(sidc.Modifier, '12345')

    def test_structural_only(self):
        # values outside the standard still parse
        sidc = parse_sidc('XQZZXXXXXX?????')
        self.assertEqual(sidc.CodingScheme, 'X')
        self.assertEqual(sidc.FunctionID, 'XXXXXX')
        self.assertEqual(sidc.Modifier, '?????')


@pytest.mark.parametrize('text', ['SFGP', 'SFGPUCII----------', '', '   ', 'SFGPUCII------'])
def test_length_rejection(text):
    with pytest.raises(FormatError) as info:
        parse_sidc(text)
    assert info.value.expected == SIDC_LENGTH
    assert info.value.actual == len(text.strip())


@pytest.mark.parametrize(
    'text', ['SFGPUCII-------', 'SHAPMFF--------', 'SUAPMFU---12345', 'SFGPXXXXXX-----', 'GFGP------12345'])
def test_round_trip(text):
    out = serialize_sidc(parse_sidc(text))
    assert out == text
    assert len(out) == SIDC_LENGTH


def test_construction_symmetry():
    sidc = SIDCType(
        CodingScheme='S', StandardIdentity='H', BattleDimension='A', Status='P',
        FunctionID='MFF---', Modifier='-----')
    assert serialize_sidc(sidc) == 'SHAPMFF--------'
    assert parse_sidc('SHAPMFF--------') == sidc


def test_modifier_passthrough():
    sidc = SIDCType(
        CodingScheme='S', StandardIdentity='U', BattleDimension='A', Status='P',
        FunctionID='MFU---', Modifier='12345')
    assert serialize_sidc(sidc) == 'SUAPMFU---12345'


def test_default_is_filler():
    assert SIDCType().to_string() == '-'*SIDC_LENGTH
    assert SIDCType(CodingScheme='S').to_string() == 'S' + '-'*(SIDC_LENGTH - 1)


def test_serialize_performs_no_validation():
    sidc = SIDCType(CodingScheme='S', FunctionID='MFF')
    assert serialize_sidc(sidc) == 'S---MFF-----'
    with pytest.raises(FormatError):
        parse_sidc(serialize_sidc(sidc))


def test_replace():
    sidc = parse_sidc('SFGPUCII-------')
    planned = sidc.replace(Status='A')
    assert serialize_sidc(planned) == 'SFGAUCII-------'
    assert sidc.Status == 'P'


def test_to_json():
    sidc = parse_sidc('SUAPMFU---12345')
    assert list(sidc.to_json().items()) == [
        ('CodingScheme', 'S'), ('StandardIdentity', 'U'), ('BattleDimension', 'A'),
        ('Status', 'P'), ('FunctionID', 'MFU---'), ('Modifier', '12345')]
    assert SIDCType.from_dict(sidc.to_dict()) == sidc


def test_repr():
    assert repr(parse_sidc('SFGPUCII-------')) == "SIDCType.from_string('SFGPUCII-------')"


def test_field_slices():
    assert list(SIDCType.field_slices().values()) == [
        (0, 1), (1, 2), (2, 3), (3, 4), (4, 10), (10, 15)]
    assert SIDCType.minimum_length() == SIDC_LENGTH


def test_non_ascii_bytes():
    with pytest.raises(FormatError, match='ASCII'):
        parse_sidc(b'SFGPUCII-----\xff-')


def test_interior_characters_kept():
    # only surrounding white space is trimmed
    sidc = parse_sidc('SFGPUCII---\n---')
    assert sidc.Modifier == '-\n---'
    assert serialize_sidc(sidc) == 'SFGPUCII---\n---'

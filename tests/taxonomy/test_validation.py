import logging
import unittest

import pytest

from milsidc.base import FormatError
from milsidc.sidc import SIDCType, parse_sidc, serialize_sidc
from milsidc.taxonomy.validation import ValidationResult, TaxonomyValidator, \
    DEFAULT_FILLER_SCHEMES, validate, is_valid_field, is_valid_function_id, \
    set_filler_policy, get_default_validator


class TestFieldValidation(unittest.TestCase):
    def test_is_valid_field(self):
        with self.subTest(msg='members'):
            self.assertTrue(is_valid_field('CodingScheme', 'W'))
            self.assertTrue(is_valid_field('StandardIdentity', 'J'))
            self.assertTrue(is_valid_field('BattleDimension', 'Z'))
            self.assertTrue(is_valid_field('Status', 'D'))

        with self.subTest(msg='non-members'):
            self.assertFalse(is_valid_field('CodingScheme', 'X'))
            self.assertFalse(is_valid_field('StandardIdentity', 's'))
            self.assertFalse(is_valid_field('BattleDimension', '-'))
            self.assertFalse(is_valid_field('Status', 'PP'))

        with self.assertRaises(KeyError, msg='unknown field kind'):
            is_valid_field('Modifier', '-----')

    def test_is_valid_function_id(self):
        self.assertTrue(is_valid_function_id('S', 'G', 'UCIC--'))
        self.assertTrue(is_valid_function_id('S', 'S', 'CLCC--'))
        self.assertFalse(is_valid_function_id('S', 'G', 'XXXXXX'))
        self.assertFalse(is_valid_function_id('S', 'S', 'UCIC--'))


@pytest.mark.parametrize('text', [
    'SFGPUCII-------',
    'SHAPMFF--------',
    'SUAPMFU---12345',
    'SFSPCL---------',
    'SFUPSU---------',
    'SUZP-----------',
    'IHGPSRE--------',
    'GFGP------12345',
    'EUUP------12345',
    'WPAP------ABCDE',
])
def test_valid(text, default_filler_policy):
    result = validate(text)
    assert result.ok
    assert result.reasons == []
    assert bool(result)


def test_invalid_function_id(default_filler_policy, caplog):
    sidc = parse_sidc('SFGPXXXXXX-----')
    # still structurally fine
    assert serialize_sidc(sidc) == 'SFGPXXXXXX-----'

    with caplog.at_level(logging.WARNING, logger='validation'):
        ok, reasons = validate(sidc)
    assert not ok
    assert len(reasons) == 1
    assert reasons[0].startswith("FunctionID: 'XXXXXX'")
    assert 'SFGPXXXXXX-----' in caplog.text


@pytest.mark.parametrize('field, value', [
    ('CodingScheme', 'X'),
    ('StandardIdentity', 'Q'),
    ('BattleDimension', 'Q'),
    ('Status', 'Q'),
    ('FunctionID', 'QQQQQQ'),
])
def test_field_independence(field, value, default_filler_policy):
    sidc = parse_sidc('SFGPUCII-------').replace(**{field: value})
    result = validate(sidc)
    assert not result.ok
    assert result.fields == [field]
    assert len(result.reasons) == 1
    assert result.reasons[0].startswith('{}: '.format(field))


def test_multiple_failures(default_filler_policy):
    result = validate('SQGQXXXXXX-----')
    assert result.fields == ['StandardIdentity', 'Status', 'FunctionID']
    assert len(result.reasons) == 3


def test_function_id_scoped_by_dimension(default_filler_policy):
    # UCII-- is a ground unit, not an air track
    result = validate('SFAPUCII-------')
    assert result.fields == ['FunctionID']
    assert "battle dimension 'A'" in result.reasons[0]


def test_modifier_unchecked(default_filler_policy):
    assert validate('SFGPUCII---?!@#').ok


def test_malformed_text():
    with pytest.raises(FormatError):
        validate('SFGP')


def test_filler_policy(default_filler_policy):
    assert get_default_validator().filler_schemes == DEFAULT_FILLER_SCHEMES

    set_filler_policy('E', False)
    result = validate('EUUP------12345')
    assert result.fields == ['FunctionID']
    assert validate('GFGP------12345').ok

    set_filler_policy('E', True)
    assert validate('EUUP------12345').ok


def test_filler_not_accepted_without_catalogue(default_filler_policy):
    # operations has no catalogue, so any other function id is rejected
    result = validate('GFGPUCII-------')
    assert result.fields == ['FunctionID']


class TestTaxonomyValidator(unittest.TestCase):
    def test_custom_policy(self):
        validator = TaxonomyValidator(filler_schemes=['W'])
        self.assertTrue(validator.accepts_filler('W'))
        self.assertFalse(validator.accepts_filler('G'))
        self.assertTrue(validator.validate('WPAP------ABCDE').ok)
        self.assertEqual(validator.validate('GFGP------12345').fields, ['FunctionID'])

    def test_no_filler(self):
        validator = TaxonomyValidator(filler_schemes=())
        self.assertFalse(validator.validate('WPAP------ABCDE').ok)
        # warfighting lists the filler function id in its catalogue
        self.assertTrue(validator.validate('SUZP-----------').ok)

    def test_unknown_scheme(self):
        with self.assertRaises(ValueError):
            TaxonomyValidator(filler_schemes=['X'])

    def test_does_not_change_module_default(self):
        TaxonomyValidator(filler_schemes=())
        self.assertEqual(get_default_validator().filler_schemes, DEFAULT_FILLER_SCHEMES)

    def test_record_input(self):
        sidc = SIDCType(
            CodingScheme='S', StandardIdentity='H', BattleDimension='A', Status='P',
            FunctionID='MFF---')
        self.assertTrue(TaxonomyValidator().validate(sidc).ok)


class TestValidationResult(unittest.TestCase):
    def test_ok(self):
        result = ValidationResult()
        self.assertTrue(result.ok)
        self.assertEqual(result.reasons, [])
        self.assertEqual(result.fields, [])

    def test_failure(self):
        result = ValidationResult(reasons=['Status: bad'], fields=['Status'])
        self.assertFalse(result.ok)
        self.assertFalse(result)
        ok, reasons = result
        self.assertFalse(ok)
        self.assertEqual(reasons, ['Status: bad'])

    def test_equality(self):
        self.assertEqual(
            ValidationResult(reasons=['a'], fields=['Status']),
            ValidationResult(reasons=['a'], fields=['Status']))
        self.assertNotEqual(ValidationResult(), ValidationResult(reasons=['a'], fields=['Status']))

    def test_mismatched(self):
        with self.assertRaises(ValueError):
            ValidationResult(reasons=['a'], fields=[])


@pytest.mark.parametrize('text, field', [
    ('SFGPUCII---\n---', 'Modifier'),
    ('SFGPUCII----\r\n-', 'Modifier'),
    ('SFGPUC\nI-------', 'FunctionID'),
    ('SF\nPUCII-------', 'BattleDimension'),
])
def test_line_break_rejected(text, field, default_filler_policy):
    sidc = parse_sidc(text)
    result = validate(sidc)
    assert not result.ok
    assert result.fields == [field]
    assert 'line break' in result.reasons[0]


def test_function_id_non_text_keys():
    assert is_valid_function_id('S', 'G', None) is False
    assert is_valid_function_id(None, 'G', 'UCII--') is False
    assert is_valid_function_id('S', 'G', b'UCII\xff-') is False
    assert is_valid_function_id('S', 'G', b'UCII--') is True


def test_line_break_reported_without_scope(default_filler_policy):
    result = validate('XFGPUC\nI-------')
    assert result.fields == ['CodingScheme', 'FunctionID']
    assert 'line break' in result.reasons[1]

import logging
from collections import OrderedDict
from unittest import TestCase

import pytest

from milsidc.base import FILLER, SIDCError, FormatError, FixedWidthElement, \
    bytes_to_string, _StringDescriptor


class _Pair(FixedWidthElement):
    _ordering = ('First', 'Second')
    _lengths = {'First': 2, 'Second': 3}
    First = _StringDescriptor('First', 2)
    Second = _StringDescriptor('Second', 3, default_value='XYZ')


class Test_bytes_to_string(TestCase):
    def setUp(self):
        self.text_string = "SFGPUCII-------"
        self.byte_data = self.text_string.encode('ascii')

    def testStringInputSuccess(self):
        self.assertEqual(self.text_string, bytes_to_string(self.text_string))

    def testByteInputSuccess(self):
        self.assertEqual(self.text_string, bytes_to_string(self.byte_data))

    def testBadInputFail(self):
        with self.assertRaisesRegex(TypeError, 'Input is required to be bytes. Got type*'):
            bytes_to_string(11)


def test_format_error():
    err = FormatError(15, 4)
    assert isinstance(err, SIDCError)
    assert isinstance(err, ValueError)
    assert err.expected == 15
    assert err.actual == 4
    assert str(err) == 'SIDC must be exactly 15 characters, got 4'
    assert str(FormatError(15, 4, msg='custom')) == 'custom'


def test_defaults():
    pair = _Pair()
    assert pair.First == FILLER*2
    assert pair.Second == 'XYZ'
    assert pair.to_string() == '--XYZ'


def test_layout():
    assert _Pair.minimum_length() == 5
    assert _Pair.field_slices() == OrderedDict([('First', (0, 2)), ('Second', (2, 5))])


def test_from_string_offset():
    pair = _Pair.from_string(b'..ABCDE', start=2)
    assert pair.First == 'AB'
    assert pair.Second == 'CDE'
    assert pair.to_string() == 'ABCDE'


def test_from_string_too_short():
    with pytest.raises(FormatError) as info:
        _Pair.from_string('ABCDE', start=1)
    assert info.value.expected == 6
    assert info.value.actual == 5


def test_unexpected_field():
    with pytest.raises(TypeError, match='unexpected fields'):
        _Pair(Third='x')


def test_non_string_field():
    with pytest.raises(TypeError, match='requires str or bytes input'):
        _Pair(First=12)


def test_width_mismatch_kept(caplog):
    with caplog.at_level(logging.WARNING, logger='milsidc.base'):
        pair = _Pair(First='A')
    assert pair.First == 'A'
    assert pair.get_length() == 4
    assert pair.to_string() == 'AXYZ'
    assert 'not the declared width' in caplog.text


def test_dict_and_json():
    pair = _Pair(First='AB', Second='CDE')
    assert pair.to_tuple() == ('AB', 'CDE')
    assert pair.to_dict() == {'First': 'AB', 'Second': 'CDE'}
    assert list(pair.to_json().keys()) == ['First', 'Second']
    assert _Pair.from_dict({'First': 'AB'}) == _Pair(First='AB')


def test_replace_is_a_copy():
    pair = _Pair(First='AB', Second='CDE')
    other = pair.replace(Second='FGH')
    assert other.to_string() == 'ABFGH'
    assert pair.to_string() == 'ABCDE'


def test_equality():
    assert _Pair(First='AB') == _Pair(First='AB')
    assert _Pair(First='AB') != _Pair(First='BA')
    assert _Pair(First='AB') != 'AB---'
    with pytest.raises(TypeError):
        hash(_Pair())


def test_str_and_repr():
    pair = _Pair(First='AB', Second='CDE')
    assert str(pair) == 'ABCDE'
    assert repr(pair) == "_Pair.from_string('ABCDE')"


def test_descriptor_docstring():
    assert 'Width 3.' in _Pair.Second.__doc__
    assert 'XYZ' in _Pair.Second.__doc__

"""
Vectorized symbol identification code handling over numpy arrays.

Codes are held in a structured array with one unicode field per SIDC field,
using :data:`SIDC_DTYPE`. This is intended for bulk track data, where parsing
codes one at a time would be the bottleneck.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "milsidc developers"


import logging
from typing import List, Sequence, Union

import numpy

from milsidc.base import FormatError
from milsidc.sidc import SIDCType, SIDC_LENGTH
from milsidc.taxonomy.fields import FIELD_VALUES
from milsidc.taxonomy.registration import all_function_ids
from milsidc.taxonomy.validation import TaxonomyValidator, FILLER_FUNCTION_ID, \
    LINE_BREAKS, get_default_validator

logger = logging.getLogger(__name__)

SIDC_DTYPE = numpy.dtype(
    [(fld, 'U{}'.format(SIDCType._lengths[fld])) for fld in SIDCType._ordering])
"""
The structured dtype for parsed codes.
"""


def _as_code_array(codes):
    """
    Get a unicode array of codes, stripped of surrounding white space.

    Parameters
    ----------
    codes : Sequence[str]|Sequence[bytes]|numpy.ndarray

    Returns
    -------
    numpy.ndarray
    """

    arr = numpy.asarray(codes)
    if arr.size == 0:
        return numpy.zeros(arr.shape, dtype='U{}'.format(SIDC_LENGTH))
    if arr.dtype.kind == 'S':
        try:
            arr = numpy.char.decode(arr, 'ascii')
        except UnicodeDecodeError as e:
            raise FormatError(
                SIDC_LENGTH, arr.dtype.itemsize, msg='SIDC must be ASCII text: {}'.format(e)) from e
    elif arr.dtype.kind == 'O':
        if not all(isinstance(entry, str) for entry in arr.ravel()):
            raise TypeError('codes must all be strings')
        arr = arr.astype('U')
    elif arr.dtype.kind != 'U':
        raise TypeError('codes must be an array of strings, got dtype {}'.format(arr.dtype))
    return numpy.char.strip(arr)


def _check_structured(records):
    records = numpy.asarray(records)
    names = records.dtype.names
    if names is None or any(fld not in names for fld in SIDCType._ordering):
        raise ValueError(
            'records must be a structured array with fields {}'.format(SIDCType._ordering))
    return records


def parse_array(codes):
    """
    Parse an array of codes into a structured array. This is purely
    positional, like :func:`milsidc.sidc.parse_sidc`.

    .. note::
        numpy unicode arrays drop trailing NUL characters, so a code padded
        with trailing `\\x00` is seen as short here and rejected, although
        :func:`milsidc.sidc.parse_sidc` accepts it. Codes carrying NUL
        characters should be handled one at a time.

    Parameters
    ----------
    codes : Sequence[str]|Sequence[bytes]|numpy.ndarray

    Returns
    -------
    numpy.ndarray
        Of dtype :data:`SIDC_DTYPE`, and the same shape as `codes`.

    Raises
    ------
    FormatError
        If any trimmed entry is not exactly 15 characters. No partial result
        is produced.
    """

    arr = _as_code_array(codes)
    shape = arr.shape
    flat = arr.ravel()
    out = numpy.empty(flat.shape, dtype=SIDC_DTYPE)
    if flat.size == 0:
        return out.reshape(shape)

    lengths = numpy.char.str_len(flat)
    bad = numpy.nonzero(lengths != SIDC_LENGTH)[0]
    if bad.size > 0:
        index = int(bad[0])
        raise FormatError(
            SIDC_LENGTH, int(lengths[index]),
            msg='SIDC must be exactly {} characters, got {} for entry {} ({} malformed '
                'entries in total)'.format(SIDC_LENGTH, int(lengths[index]), index, bad.size))

    chars = numpy.ascontiguousarray(flat.astype('U{}'.format(SIDC_LENGTH))).view('U1').reshape((-1, SIDC_LENGTH))
    for fld, (start, stop) in SIDCType.field_slices().items():
        out[fld] = numpy.ascontiguousarray(chars[:, start:stop]).view('U{}'.format(stop - start)).ravel()
    return out.reshape(shape)


def serialize_array(records):
    """
    Concatenate the fields of a structured array of codes. Like
    :func:`milsidc.sidc.serialize_sidc`, this performs no validation.

    Parameters
    ----------
    records : numpy.ndarray
        Structured array with (at least) the fields of :data:`SIDC_DTYPE`.

    Returns
    -------
    numpy.ndarray
        Unicode array of the same shape as `records`.
    """

    records = _check_structured(records)
    out = records[SIDCType._ordering[0]].astype('U{}'.format(SIDC_LENGTH))
    for fld in SIDCType._ordering[1:]:
        out = numpy.char.add(out, records[fld])
    return out


def validate_array(records, validator=None):
    """
    Validate every entry of a structured array of codes. The element-wise
    result agrees with :meth:`TaxonomyValidator.validate`.

    Parameters
    ----------
    records : numpy.ndarray
        Structured array with (at least) the fields of :data:`SIDC_DTYPE`.
    validator : None|TaxonomyValidator
        Used for the filler function id policy. The module default is used if
        not provided.

    Returns
    -------
    numpy.ndarray
        Boolean array of the same shape as `records`.
    """

    records = _check_structured(records)
    if validator is None:
        validator = get_default_validator()
    if not isinstance(validator, TaxonomyValidator):
        raise TypeError('validator must be a TaxonomyValidator, got {}'.format(type(validator)))

    valid = numpy.ones(records.shape, dtype='bool')
    field_ok = {}
    for kind, values in FIELD_VALUES.items():
        field_ok[kind] = numpy.isin(records[kind], numpy.array(list(values.keys()), dtype='U1'))
        valid &= field_ok[kind]
    scoped = field_ok['CodingScheme'] & field_ok['BattleDimension']

    known = numpy.array(
        [scheme + dimension + function_id for scheme, dimension, function_id, _ in all_function_ids()],
        dtype='U8')
    keys = numpy.char.add(numpy.char.add(records['CodingScheme'], records['BattleDimension']), records['FunctionID'])
    function_ok = numpy.isin(keys, known)
    filler_schemes = numpy.array(sorted(validator.filler_schemes), dtype='U1')
    function_ok |= (records['FunctionID'] == FILLER_FUNCTION_ID) & numpy.isin(records['CodingScheme'], filler_schemes)
    valid &= (function_ok | ~scoped)

    for fld in SIDCType._ordering:
        for char in LINE_BREAKS:
            valid &= (numpy.char.find(records[fld], char) < 0)

    if valid.size > 0:
        logger.info('{} of {} codes are valid'.format(int(numpy.count_nonzero(valid)), valid.size))
    return valid


def to_sidc_list(records):
    # type: (numpy.ndarray) -> List[SIDCType]
    """
    Convert a structured array of codes into a list of :class:`SIDCType`.

    Parameters
    ----------
    records : numpy.ndarray

    Returns
    -------
    List[SIDCType]
    """

    records = _check_structured(records)
    return [
        SIDCType(**dict((fld, str(entry[fld])) for fld in SIDCType._ordering))
        for entry in records.ravel()]


def from_sidc_list(sidcs):
    # type: (Sequence[Union[SIDCType, str]]) -> numpy.ndarray
    """
    Convert a collection of :class:`SIDCType` (or text codes) into a
    structured array.

    Parameters
    ----------
    sidcs : Sequence[SIDCType|str]

    Returns
    -------
    numpy.ndarray
    """

    return parse_array([entry.to_string() if isinstance(entry, SIDCType) else entry for entry in sidcs])

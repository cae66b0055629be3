"""
The symbol identification code (SIDC) definition, and its text codec.

A MIL-STD-2525C SIDC is 15 characters, laid out as

====================  ======  =====
Field                 Offset  Width
====================  ======  =====
Coding Scheme         0       1
Standard Identity     1       1
Battle Dimension      2       1
Status                3       1
Function ID           4       6
Modifier              10      5
====================  ======  =====

Parsing is purely positional, so the resulting fields are not checked
against the standard. Use :func:`milsidc.taxonomy.validation.validate` for
that.

Examples
--------

.. code-block:: python

    from milsidc.sidc import parse_sidc, serialize_sidc

    sidc = parse_sidc('SFGPUCII-------')
    print(sidc.FunctionID)  # 'UCII--'
    print(serialize_sidc(sidc.replace(Status='A')))  # 'SFGAUCII-------'
"""

__classification__ = "UNCLASSIFIED"
__author__ = "milsidc developers"


import logging
from typing import Union

from milsidc.base import FixedWidthElement, FormatError, bytes_to_string, \
    _StringDescriptor, _CodeDescriptor
from milsidc.taxonomy.fields import CODING_SCHEMES, STANDARD_IDENTITIES, \
    BATTLE_DIMENSIONS, STATUSES


logger = logging.getLogger(__name__)

SIDC_LENGTH = 15


class SIDCType(FixedWidthElement):
    """
    A MIL-STD-2525C symbol identification code.
    """

    _ordering = (
        'CodingScheme', 'StandardIdentity', 'BattleDimension', 'Status',
        'FunctionID', 'Modifier')
    _lengths = {
        'CodingScheme': 1, 'StandardIdentity': 1, 'BattleDimension': 1,
        'Status': 1, 'FunctionID': 6, 'Modifier': 5}
    CodingScheme = _CodeDescriptor(
        'CodingScheme', 1, CODING_SCHEMES,
        docstring='The symbol set governing the remaining fields.')  # type: str
    StandardIdentity = _CodeDescriptor(
        'StandardIdentity', 1, STANDARD_IDENTITIES,
        docstring='The affiliation or threat posture.')  # type: str
    BattleDimension = _CodeDescriptor(
        'BattleDimension', 1, BATTLE_DIMENSIONS,
        docstring='The mission domain.')  # type: str
    Status = _CodeDescriptor(
        'Status', 1, STATUSES,
        docstring='The operational state.')  # type: str
    FunctionID = _StringDescriptor(
        'FunctionID', 6,
        docstring='The entity type or role, within the coding scheme and '
                  'battle dimension.')  # type: str
    Modifier = _StringDescriptor(
        'Modifier', 5,
        docstring='The amplifying modifier, interpreted per coding scheme.')  # type: str

    def __init__(self, CodingScheme=None, StandardIdentity=None, BattleDimension=None,
                 Status=None, FunctionID=None, Modifier=None):
        """

        Parameters
        ----------
        CodingScheme : None|str
        StandardIdentity : None|str
        BattleDimension : None|str
        Status : None|str
        FunctionID : None|str
        Modifier : None|str

        Any field not provided is filled with the filler character.
        """

        super(SIDCType, self).__init__(
            CodingScheme=CodingScheme, StandardIdentity=StandardIdentity,
            BattleDimension=BattleDimension, Status=Status,
            FunctionID=FunctionID, Modifier=Modifier)

    @classmethod
    def from_string(cls, value, start=0):
        """
        Parse the 15 character code. Surrounding white space is ignored.

        Parameters
        ----------
        value : str|bytes
        start : int
            Ignored, present for signature compatibility. The entire
            trimmed input must be the code.

        Returns
        -------
        SIDCType

        Raises
        ------
        FormatError
            If the trimmed input is not exactly 15 characters, or bytes input
            is not ASCII.
        """

        try:
            code = bytes_to_string(value)
        except UnicodeDecodeError as e:
            raise FormatError(
                SIDC_LENGTH, len(value), msg='SIDC must be ASCII text: {}'.format(e)) from e
        code = code.strip()
        if len(code) != SIDC_LENGTH:
            raise FormatError(SIDC_LENGTH, len(code))
        return cls(**cls._parse_fields(code, 0))


def parse_sidc(text):
    # type: (Union[str, bytes]) -> SIDCType
    """
    Parse the text representation of a symbol identification code.

    Parameters
    ----------
    text : str|bytes

    Returns
    -------
    SIDCType

    Raises
    ------
    FormatError
        If the trimmed input is not exactly 15 characters, or bytes input
        is not ASCII.
    """

    return SIDCType.from_string(text)


def serialize_sidc(sidc):
    # type: (SIDCType) -> str
    """
    Get the text representation of the symbol identification code. This is
    simple concatenation of the fields, and performs no validation.

    Parameters
    ----------
    sidc : SIDCType

    Returns
    -------
    str
    """

    return sidc.to_string()

"""
Validation of symbol identification codes against the MIL-STD-2525C taxonomy.

Parsing is purely structural, so a parsed code may still be semantically
meaningless (for instance, function id `XXXXXX`). The functions here decide
semantic validity. A rejected code is ordinary output: the result carries one
reason per failing field, and nothing is raised.

The function id catalogue is keyed on coding scheme and battle dimension, so
the function id is only checked when both of those are valid. The modifier is
free form, apart from the rule that no field may contain a line break.

Filler function id policy
-------------------------
Some coding schemes define no fixed function id catalogue here, and carry their
semantics in the modifier instead. For those schemes an all filler function id
(`------`) is accepted. By default these are Operations (`G`), METOC (`W`) and
Emergency Management (`E`). The policy is configurable per validator, and the
module level default may be changed with :func:`set_filler_policy`.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "milsidc developers"


import logging
from typing import Union

from milsidc.base import FILLER
from milsidc.sidc import SIDCType, parse_sidc
from milsidc.taxonomy.fields import FIELD_VALUES, FIELD_LABELS, get_field_values, \
    CODING_SCHEMES, CODING_SCHEME_OPERATIONS, CODING_SCHEME_METOC, CODING_SCHEME_EMERGENCY
from milsidc.taxonomy.registration import find_function_id

logger = logging.getLogger(__name__)
valid_logger = logging.getLogger('validation')

DEFAULT_FILLER_SCHEMES = frozenset(
    [CODING_SCHEME_OPERATIONS, CODING_SCHEME_METOC, CODING_SCHEME_EMERGENCY])
"""
The coding schemes which accept an all filler function id by default.
"""

FILLER_FUNCTION_ID = FILLER*6

LINE_BREAKS = ('\n', '\r')
"""
No field may contain these, the modifier included.
"""


class ValidationResult(object):
    """
    The outcome of validating a symbol identification code.
    """

    __slots__ = ('_ok', '_reasons', '_fields')

    def __init__(self, reasons=None, fields=None):
        """

        Parameters
        ----------
        reasons : None|List[str]
            One message per failing field.
        fields : None|List[str]
            The names of the failing fields, in the same order as `reasons`.
        """

        self._reasons = tuple(reasons) if reasons is not None else ()
        self._fields = tuple(fields) if fields is not None else ()
        if len(self._reasons) != len(self._fields):
            raise ValueError('reasons and fields must have the same length')
        self._ok = (len(self._reasons) == 0)

    @property
    def ok(self):
        """
        bool: Did every check pass?
        """

        return self._ok

    @property
    def reasons(self):
        """
        List[str]: The failure messages, empty when `ok`.
        """

        return list(self._reasons)

    @property
    def fields(self):
        """
        List[str]: The names of the failing fields, empty when `ok`.
        """

        return list(self._fields)

    def __bool__(self):
        return self._ok

    def __iter__(self):
        # allows `ok, reasons = validate(sidc)`
        yield self.ok
        yield self.reasons

    def __eq__(self, other):
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return self._reasons == other._reasons and self._fields == other._fields

    __hash__ = None

    def __repr__(self):
        return 'ValidationResult(ok={}, reasons={})'.format(self.ok, self.reasons)


class TaxonomyValidator(object):
    """
    Validates symbol identification codes against the closed field enumerations
    and the registered function id catalogue.
    """

    def __init__(self, filler_schemes=None):
        """

        Parameters
        ----------
        filler_schemes : None|Iterable[str]
            The coding schemes for which an all filler function id is accepted.
            Defaults to :data:`DEFAULT_FILLER_SCHEMES`.
        """

        if filler_schemes is None:
            filler_schemes = DEFAULT_FILLER_SCHEMES
        filler_schemes = frozenset(filler_schemes)
        unknown = filler_schemes.difference(CODING_SCHEMES.keys())
        if len(unknown) > 0:
            raise ValueError('Unknown coding schemes {} in filler_schemes'.format(sorted(unknown)))
        self._filler_schemes = filler_schemes

    @property
    def filler_schemes(self):
        """
        frozenset: The coding schemes which accept an all filler function id.
        """

        return self._filler_schemes

    def accepts_filler(self, coding_scheme):
        """
        Does this validator accept an all filler function id for the given
        coding scheme?

        Parameters
        ----------
        coding_scheme : str

        Returns
        -------
        bool
        """

        return coding_scheme in self._filler_schemes

    @staticmethod
    def is_valid_field(kind, value):
        """
        Is the value a member of the closed enumeration for the field kind?

        Parameters
        ----------
        kind : str
            One of `CodingScheme`, `StandardIdentity`, `BattleDimension`, `Status`.
        value : str

        Returns
        -------
        bool

        Raises
        ------
        KeyError
            For an unknown field kind.
        """

        return value in get_field_values(kind)

    @staticmethod
    def is_valid_function_id(coding_scheme, battle_dimension, function_id):
        """
        Is the function id a member of the catalogue for the coding scheme and
        battle dimension? This is exact match.

        Parameters
        ----------
        coding_scheme : str
        battle_dimension : str
        function_id : str

        Returns
        -------
        bool
        """

        return find_function_id(coding_scheme, battle_dimension, function_id) is not None

    def validate(self, sidc):
        """
        Validate every field of the symbol identification code.

        Parameters
        ----------
        sidc : SIDCType|str|bytes
            Text input is parsed first.

        Returns
        -------
        ValidationResult

        Raises
        ------
        milsidc.base.FormatError
            If text input is not a well formed code.
        """

        if not isinstance(sidc, SIDCType):
            sidc = parse_sidc(sidc)

        reasons = []
        fields = []

        def fail(field, msg):
            fields.append(field)
            reasons.append(msg)
            valid_logger.warning('{}: {}'.format(sidc.to_string(), msg))

        broken = set()
        for fld in sidc._ordering:
            value = getattr(sidc, fld)
            if any(char in value for char in LINE_BREAKS):
                broken.add(fld)

        for kind, values in FIELD_VALUES.items():
            value = getattr(sidc, kind)
            if kind in broken:
                fail(kind, '{}: {!r} contains a line break'.format(kind, value))
            elif not self.is_valid_field(kind, value):
                fail(kind, '{}: {!r} is not a valid {}, expected one of {}'.format(
                    kind, value, FIELD_LABELS[kind], ''.join(values.keys())))

        if 'FunctionID' in broken:
            fail('FunctionID', 'FunctionID: {!r} contains a line break'.format(sidc.FunctionID))
        elif 'CodingScheme' in fields or 'BattleDimension' in fields:
            # the catalogue is keyed on both, so the function id can not be scoped
            pass
        elif sidc.FunctionID == FILLER_FUNCTION_ID and self.accepts_filler(sidc.CodingScheme):
            pass
        elif not self.is_valid_function_id(sidc.CodingScheme, sidc.BattleDimension, sidc.FunctionID):
            fail('FunctionID', 'FunctionID: {!r} is not a valid function id for coding scheme {!r} '
                               'and battle dimension {!r}'.format(
                                    sidc.FunctionID, sidc.CodingScheme, sidc.BattleDimension))

        if 'Modifier' in broken:
            fail('Modifier', 'Modifier: {!r} contains a line break'.format(sidc.Modifier))

        return ValidationResult(reasons=reasons, fields=fields)


_default_validator = TaxonomyValidator()


def get_default_validator():
    """
    The module level validator, used by the module level functions.

    Returns
    -------
    TaxonomyValidator
    """

    return _default_validator


def set_filler_policy(coding_scheme, allowed):
    """
    Set whether the module level validator accepts an all filler function id
    for the given coding scheme.

    Parameters
    ----------
    coding_scheme : str
    allowed : bool

    Returns
    -------
    None
    """

    global _default_validator
    schemes = set(_default_validator.filler_schemes)
    if allowed:
        schemes.add(coding_scheme)
    else:
        schemes.discard(coding_scheme)
    # replaced, never mutated
    _default_validator = TaxonomyValidator(filler_schemes=schemes)
    logger.info('Filler function id accepted for coding schemes {}'.format(sorted(schemes)))


def reset_filler_policy():
    """
    Restore the default filler function id policy for the module level validator.
    """

    global _default_validator
    _default_validator = TaxonomyValidator()


def is_valid_field(kind, value):
    # type: (str, str) -> bool
    """
    Is the value a member of the closed enumeration for the field kind? See
    :meth:`TaxonomyValidator.is_valid_field`.
    """

    return TaxonomyValidator.is_valid_field(kind, value)


def is_valid_function_id(coding_scheme, battle_dimension, function_id):
    # type: (str, str, str) -> bool
    """
    Is the function id in the catalogue for the coding scheme and battle
    dimension? See :meth:`TaxonomyValidator.is_valid_function_id`.
    """

    return TaxonomyValidator.is_valid_function_id(coding_scheme, battle_dimension, function_id)


def validate(sidc):
    # type: (Union[SIDCType, str, bytes]) -> ValidationResult
    """
    Validate the symbol identification code using the module level validator.
    See :meth:`TaxonomyValidator.validate`.
    """

    return _default_validator.validate(sidc)

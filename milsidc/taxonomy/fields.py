"""
The closed enumerations for the single character fields of a symbol
identification code, following MIL-STD-2525C.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "milsidc developers"


from collections import OrderedDict


# Coding scheme, position 1
CODING_SCHEME_WARFIGHTING = 'S'
CODING_SCHEME_OPERATIONS = 'G'
CODING_SCHEME_METOC = 'W'
CODING_SCHEME_SIGINT = 'I'
CODING_SCHEME_EMERGENCY = 'E'

CODING_SCHEMES = OrderedDict([
    (CODING_SCHEME_WARFIGHTING, 'Warfighting'),
    (CODING_SCHEME_OPERATIONS, 'Operations'),
    (CODING_SCHEME_METOC, 'METOC'),
    (CODING_SCHEME_SIGINT, 'SIGINT'),
    (CODING_SCHEME_EMERGENCY, 'Emergency'),
])
"""
Coding scheme code to name. The coding scheme selects the symbol set which
governs the remaining fields.
"""

# Standard identity, position 2
STANDARD_IDENTITY_PENDING = 'P'
STANDARD_IDENTITY_UNKNOWN = 'U'
STANDARD_IDENTITY_FRIEND = 'F'
STANDARD_IDENTITY_NEUTRAL = 'N'
STANDARD_IDENTITY_HOSTILE = 'H'
STANDARD_IDENTITY_SUSPECT = 'S'
STANDARD_IDENTITY_JOKER = 'J'  # exercise hostile

STANDARD_IDENTITIES = OrderedDict([
    (STANDARD_IDENTITY_PENDING, 'Pending'),
    (STANDARD_IDENTITY_UNKNOWN, 'Unknown'),
    (STANDARD_IDENTITY_FRIEND, 'Friend'),
    (STANDARD_IDENTITY_NEUTRAL, 'Neutral'),
    (STANDARD_IDENTITY_HOSTILE, 'Hostile'),
    (STANDARD_IDENTITY_SUSPECT, 'Suspect'),
    (STANDARD_IDENTITY_JOKER, 'Joker'),
])

# Battle dimension, position 3
BATTLE_DIMENSION_UNKNOWN = 'Z'
BATTLE_DIMENSION_SPACE = 'P'
BATTLE_DIMENSION_AIR = 'A'
BATTLE_DIMENSION_GROUND = 'G'
BATTLE_DIMENSION_SEA_SURFACE = 'S'
BATTLE_DIMENSION_SUBSURFACE = 'U'
BATTLE_DIMENSION_SOF = 'F'

BATTLE_DIMENSIONS = OrderedDict([
    (BATTLE_DIMENSION_UNKNOWN, 'Unknown'),
    (BATTLE_DIMENSION_SPACE, 'Space'),
    (BATTLE_DIMENSION_AIR, 'Air'),
    (BATTLE_DIMENSION_GROUND, 'Ground'),
    (BATTLE_DIMENSION_SEA_SURFACE, 'Sea Surface'),
    (BATTLE_DIMENSION_SUBSURFACE, 'Subsurface'),
    (BATTLE_DIMENSION_SOF, 'SOF'),
])

# Status, position 4
STATUS_PRESENT = 'P'
STATUS_PLANNED = 'A'
STATUS_DAMAGED = 'D'
STATUS_DESTROYED = 'X'

STATUSES = OrderedDict([
    (STATUS_PRESENT, 'Present'),
    (STATUS_PLANNED, 'Planned'),
    (STATUS_DAMAGED, 'Damaged'),
    (STATUS_DESTROYED, 'Destroyed'),
])

FIELD_VALUES = OrderedDict([
    ('CodingScheme', CODING_SCHEMES),
    ('StandardIdentity', STANDARD_IDENTITIES),
    ('BattleDimension', BATTLE_DIMENSIONS),
    ('Status', STATUSES),
])
"""
Field kind to the code/name mapping of its closed enumeration.
"""

FIELD_LABELS = {
    'CodingScheme': 'coding scheme',
    'StandardIdentity': 'standard identity',
    'BattleDimension': 'battle dimension',
    'Status': 'status',
    'FunctionID': 'function id',
    'Modifier': 'modifier',
}


def get_field_values(kind):
    """
    Get the closed enumeration for a single character field.

    Parameters
    ----------
    kind : str
        One of `CodingScheme`, `StandardIdentity`, `BattleDimension`, `Status`.

    Returns
    -------
    OrderedDict
        code to name

    Raises
    ------
    KeyError
        For an unknown field kind.
    """

    try:
        return FIELD_VALUES[kind]
    except KeyError:
        raise KeyError(
            'Unknown field kind {}, expected one of {}'.format(kind, list(FIELD_VALUES.keys())))


def field_name(kind, value):
    """
    The descriptive name of a coded value, or `None` if it's not a member.

    Parameters
    ----------
    kind : str
    value : str

    Returns
    -------
    None|str
    """

    return get_field_values(kind).get(value, None)

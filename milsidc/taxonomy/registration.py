"""
Module for maintaining the function id registry.

The function id catalogue is held in plain data modules, one per coding
scheme and battle dimension pair. Each such module defines

* `CODING_SCHEME` - the single character coding scheme,
* `BATTLE_DIMENSION` - the single character battle dimension,
* `FUNCTION_IDS` - a sequence of `(function_id, label)` pairs.

The default catalogue package is walked once, on first use, and every such
module is registered. Additional packages may be registered using
:func:`parse_package`.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "milsidc developers"


import logging
import pkgutil
import threading
from importlib import import_module
from typing import Dict, Tuple

from milsidc.base import bytes_to_string
from milsidc.taxonomy.fields import CODING_SCHEMES, BATTLE_DIMENSIONS, \
    STANDARD_IDENTITIES, STATUSES

logger = logging.getLogger(__name__)

###############
# module variables
_FUNCTION_ID_Registry = {}  # type: Dict[Tuple[str, str], Dict[str, str]]
_parsed_package = False
_parse_lock = threading.RLock()
_default_catalogue_packages = 'milsidc.taxonomy.catalogue'


def _check_key(coding_scheme, battle_dimension):
    if coding_scheme not in CODING_SCHEMES:
        raise ValueError(
            'coding_scheme must be one of {}, got {!r}'.format(list(CODING_SCHEMES.keys()), coding_scheme))
    if battle_dimension not in BATTLE_DIMENSIONS:
        raise ValueError(
            'battle_dimension must be one of {}, got {!r}'.format(list(BATTLE_DIMENSIONS.keys()), battle_dimension))


def register_function_ids(coding_scheme, battle_dimension, entries, replace=False):
    """
    Register function ids in the registry.

    Parameters
    ----------
    coding_scheme : str
    battle_dimension : str
    entries : Sequence[Tuple[str, str]]|dict
        The `(function_id, label)` pairs.
    replace : bool
        Should we replace the label of a function id which is already registered?

    Returns
    -------
    int
        The number of entries added or replaced.
    """

    _check_key(coding_scheme, battle_dimension)
    if isinstance(entries, dict):
        entries = entries.items()

    count = 0
    with _parse_lock:
        table = _FUNCTION_ID_Registry.setdefault((coding_scheme, battle_dimension), {})
        for function_id, label in entries:
            if not isinstance(function_id, str) or len(function_id) != 6:
                raise ValueError(
                    'function_id must be a string of length 6, got {!r} for '
                    'coding scheme {} and battle dimension {}'.format(
                        function_id, coding_scheme, battle_dimension))

            if function_id in table:
                if replace:
                    logger.warning(
                        'Function id {} is already registered for coding scheme {} and '
                        'battle dimension {}.\n\tWe are replacing the definition.'.format(
                            function_id, coding_scheme, battle_dimension))
                else:
                    logger.warning(
                        'Function id {} is already registered for coding scheme {} and '
                        'battle dimension {}.\n\tWe are NOT replacing the definition.'.format(
                            function_id, coding_scheme, battle_dimension))
                    continue
            table[function_id] = label
            count += 1
    return count


def parse_package(packages=None):
    """
    Walk the packages contained in `packages`, find all catalogue modules, and
    register their function ids.

    Parameters
    ----------
    packages : None|str|List[str]
        The default catalogue package is used if not provided, and is only
        walked once.

    Returns
    -------
    None
    """

    def evaluate(the_module):
        entries = getattr(the_module, 'FUNCTION_IDS', None)
        if entries is None:
            return
        register_function_ids(
            the_module.CODING_SCHEME, the_module.BATTLE_DIMENSION, entries, replace=False)

    global _parsed_package
    with _parse_lock:
        default = packages is None
        if default:
            if _parsed_package:
                return  # already parsed the default packages
            packages = _default_catalogue_packages

        if isinstance(packages, str):
            packages = [packages, ]

        logger.info('Finding and registering function ids contained in packages {}'.format(packages))
        for start_package in packages:
            module = import_module(start_package)
            evaluate(module)
            for details in pkgutil.walk_packages(module.__path__, start_package + '.'):
                _, module_name, is_pkg = details
                sub_module = import_module(module_name)
                evaluate(sub_module)

        if default:
            # set only once the default tables are fully populated
            _parsed_package = True
        logger.info(
            'We now have {} registered function ids'.format(
                sum(len(table) for table in _FUNCTION_ID_Registry.values())))


def _normalize(value):
    # anything which is not ascii text matches nothing
    if isinstance(value, bytes):
        try:
            return bytes_to_string(value)
        except UnicodeDecodeError:
            return None
    if not isinstance(value, str):
        return None
    return value


def find_function_id(coding_scheme, battle_dimension, function_id):
    """
    Try to find the label of a function id in our registry. This is exact
    match of the function id. Return `None` if not found, including for keys
    which are not text.

    Parameters
    ----------
    coding_scheme : str|bytes
    battle_dimension : str|bytes
    function_id : str|bytes

    Returns
    -------
    None|str
    """

    if not _parsed_package:
        parse_package()

    table = _FUNCTION_ID_Registry.get(
        (_normalize(coding_scheme), _normalize(battle_dimension)), None)
    function_id = _normalize(function_id)
    if table is None or function_id is None:
        return None
    return table.get(function_id, None)


def get_function_ids(coding_scheme, battle_dimension):
    """
    Get a copy of the registered function ids for the given coding scheme and
    battle dimension.

    Parameters
    ----------
    coding_scheme : str
    battle_dimension : str

    Returns
    -------
    Dict[str, str]
        function id to label, empty if nothing is registered.
    """

    if not _parsed_package:
        parse_package()
    return dict(_FUNCTION_ID_Registry.get((coding_scheme, battle_dimension), {}))


def has_catalogue(coding_scheme):
    """
    Does the coding scheme have any registered function ids?

    Parameters
    ----------
    coding_scheme : str

    Returns
    -------
    bool
    """

    if not _parsed_package:
        parse_package()
    return any(key[0] == coding_scheme and len(table) > 0 for key, table in _FUNCTION_ID_Registry.items())


def search_function_ids(text, coding_scheme=None, battle_dimension=None):
    """
    Case insensitive search of the function id labels.

    Parameters
    ----------
    text : str
    coding_scheme : None|str
        Restrict to this coding scheme, if provided.
    battle_dimension : None|str
        Restrict to this battle dimension, if provided.

    Returns
    -------
    List[Tuple[str, str, str, str]]
        The `(coding_scheme, battle_dimension, function_id, label)` entries,
        sorted.
    """

    if not _parsed_package:
        parse_package()

    text = text.lower()
    out = []
    for (scheme, dimension), table in _FUNCTION_ID_Registry.items():
        if coding_scheme is not None and scheme != coding_scheme:
            continue
        if battle_dimension is not None and dimension != battle_dimension:
            continue
        for function_id, label in table.items():
            if text in label.lower():
                out.append((scheme, dimension, function_id, label))
    return sorted(out)


def describe(sidc):
    """
    Human-readable description of a symbol identification code.

    Fields which are not members of their enumeration are shown by their raw
    value, and an unknown function id is shown by its code.

    Parameters
    ----------
    sidc : milsidc.sidc.SIDCType

    Returns
    -------
    str
    """

    parts = [
        STANDARD_IDENTITIES.get(sidc.StandardIdentity, sidc.StandardIdentity),
        BATTLE_DIMENSIONS.get(sidc.BattleDimension, sidc.BattleDimension),
        STATUSES.get(sidc.Status, sidc.Status)]
    scheme = CODING_SCHEMES.get(sidc.CodingScheme, sidc.CodingScheme)
    label = find_function_id(sidc.CodingScheme, sidc.BattleDimension, sidc.FunctionID)
    if label is None:
        label = sidc.FunctionID
    return '{} {}: {}'.format(scheme, ' '.join(parts), label)


def all_function_ids():
    """
    Every registered entry.

    Returns
    -------
    List[Tuple[str, str, str, str]]
        The `(coding_scheme, battle_dimension, function_id, label)` entries,
        sorted.
    """

    if not _parsed_package:
        parse_package()
    return sorted(
        (scheme, dimension, function_id, label)
        for (scheme, dimension), table in _FUNCTION_ID_Registry.items()
        for function_id, label in table.items())

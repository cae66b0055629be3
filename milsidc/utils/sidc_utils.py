"""
A utility for dumping symbol identification code details to the console.

To dump the fields and validity of some codes from the command-line

>>> python -m milsidc.utils.sidc_utils SFGPUCII------- SHAPMFF--------

To check a file of codes, one per line, and fail on any invalid code

>>> python -m milsidc.utils.sidc_utils -f <path to codes file> --strict

For a basic help on the command-line, check

>>> python -m milsidc.utils.sidc_utils --help

"""

__classification__ = "UNCLASSIFIED"
__author__ = "milsidc developers"


import argparse
import functools
import logging
import os
import sys
from io import StringIO

from milsidc.base import FormatError
from milsidc.sidc import SIDCType, parse_sidc
from milsidc.taxonomy.fields import FIELD_VALUES, field_name
from milsidc.taxonomy.registration import describe, find_function_id
from milsidc.taxonomy.validation import TaxonomyValidator, get_default_validator

logger = logging.getLogger(__name__)

# Custom print function
print_func = print


############
# helper methods

def read_codes_file(file_name):
    """
    Read codes from a text file, one per line. Blank lines and lines starting
    with `#` are skipped.

    Parameters
    ----------
    file_name : str

    Returns
    -------
    List[str]
    """

    codes = []
    with open(file_name, 'r') as fi:
        for line in fi:
            line = line.strip()
            if len(line) == 0 or line.startswith('#'):
                continue
            codes.append(line)
    return codes


def _print_sidc(sidc, validator):
    # type: (SIDCType, TaxonomyValidator) -> bool
    for fld in sidc._ordering:
        value = getattr(sidc, fld)
        if fld in FIELD_VALUES:
            name = field_name(fld, value)
        elif fld == 'FunctionID':
            name = find_function_id(sidc.CodingScheme, sidc.BattleDimension, value)
        else:
            name = None
        if name is None:
            print_func('{} = {}'.format(fld, value))
        else:
            print_func('{} = {} ({})'.format(fld, value, name))
    print_func('Description = {}'.format(describe(sidc)))

    result = validator.validate(sidc)
    if result.ok:
        print_func('Valid = True')
    else:
        print_func('Valid = False')
        for reason in result.reasons:
            print_func('    {}'.format(reason))
    return result.ok


def print_sidcs(codes, dest=sys.stdout, validator=None):
    """
    Worker function to dump the details of the codes to the provided destination.

    Parameters
    ----------
    codes : Sequence[str]
    dest : TextIO
    validator : None|TaxonomyValidator

    Returns
    -------
    bool
        Were all codes well formed and valid?
    """

    # Configure print function for desired destination
    #    - e.g., stdout, string buffer, file
    global print_func
    print_func = functools.partial(print, file=dest)

    if validator is None:
        validator = get_default_validator()

    all_valid = True
    for code in codes:
        print_func('----- {} -----'.format(code.strip()))
        try:
            sidc = parse_sidc(code)
        except FormatError as e:
            print_func('Format error: {}'.format(e))
            all_valid = False
        else:
            all_valid &= _print_sidc(sidc, validator)
        print_func('')
    return all_valid


def dump_sidcs(codes, dest, over_write=True, validator=None):
    """
    Utility to dump the details of the codes to a configurable destination.

    Parameters
    ----------
    codes : Sequence[str]
    dest : str
        'stdout', 'string', or the path to an output file.
    over_write : bool
        If `True`, then overwrite the destination file, otherwise append to the
        file.
    validator : None|TaxonomyValidator

    Returns
    -------
    bool|str
        The text if `dest=='string'`, otherwise whether all codes were well
        formed and valid.
    """

    if dest == 'stdout':
        return print_sidcs(codes, dest=sys.stdout, validator=validator)
    if dest == 'string':
        out = StringIO()
        print_sidcs(codes, dest=out, validator=validator)
        value = out.getvalue()
        out.close()  # free the buffer
        return value

    if not os.path.exists(dest) or over_write:
        with open(dest, 'w') as the_file:
            return print_sidcs(codes, dest=the_file, validator=validator)
    else:
        with open(dest, 'a') as the_file:
            return print_sidcs(codes, dest=the_file, validator=validator)


def main(args=None):
    parser = argparse.ArgumentParser(
        description='Utility to dump and validate MIL-STD-2525C symbol identification codes.',
        formatter_class=argparse.RawTextHelpFormatter)
    parser.add_argument(
        'codes', nargs='*', metavar='code',
        help='The 15 character codes to check.')
    parser.add_argument(
        '-f', '--file', default=None,
        help='Path to a text file of codes, one per line.\n'
             'Blank lines and lines starting with # are skipped.')
    parser.add_argument(
        '-o', '--output', default='stdout',
        help="'stdout', or the path for an output file, which will be overwritten.")
    parser.add_argument(
        '--no-filler', action='append', default=[], metavar='SCHEME',
        help='Coding scheme for which an all filler function id should NOT be accepted.\n'
             'May be given more than once.')
    parser.add_argument(
        '--strict', action='store_true',
        help='Exit with status 1 if any code is malformed or invalid.')
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='Verbose (level="INFO") logging?')
    args = parser.parse_args(args)
    if args.output == 'string':
        parser.error("'string' is only an output destination for dump_sidcs, use 'stdout' or a file path.")

    level = 'INFO' if args.verbose else 'WARNING'
    logging.basicConfig(level=level)

    codes = list(args.codes)
    if args.file is not None:
        codes.extend(read_codes_file(args.file))
    if len(codes) == 0:
        parser.error('No codes provided.')

    validator = get_default_validator()
    if len(args.no_filler) > 0:
        validator = TaxonomyValidator(
            filler_schemes=validator.filler_schemes.difference(args.no_filler))

    all_valid = dump_sidcs(codes, args.output, validator=validator)
    if args.strict and not all_valid:
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())

"""
Base fixed-width element functionality.

The elements defined here describe a record as an ordered collection of
character fields, each with a declared width, laid out back to back in a
single string. Parsing is purely positional and serializing is pure
concatenation; no semantic interpretation happens at this level.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "milsidc developers"


import logging
from collections import OrderedDict
from typing import Union, Dict, Tuple


logger = logging.getLogger(__name__)

FILLER = '-'
"""
The character used to pad unused field positions.
"""


class SIDCError(Exception):
    """The base exception class for milsidc."""


class FormatError(SIDCError, ValueError):
    """
    Raised when text can not be sliced into the declared fixed-width layout.
    """

    def __init__(self, expected, actual, msg=None):
        """

        Parameters
        ----------
        expected : int
            The required length.
        actual : int
            The length actually provided.
        msg : None|str
            Override for the default message.
        """

        self.expected = expected
        self.actual = actual
        if msg is None:
            msg = 'SIDC must be exactly {} characters, got {}'.format(expected, actual)
        super(FormatError, self).__init__(msg)


def bytes_to_string(bytes_in, encoding='ascii'):
    """
    Ensure that the input bytes is mapped to a string.

    Parameters
    ----------
    bytes_in : bytes|str
    encoding : str
        The encoding to apply, if necessary.

    Returns
    -------
    str
    """

    if isinstance(bytes_in, str):
        return bytes_in

    if not isinstance(bytes_in, bytes):
        raise TypeError('Input is required to be bytes. Got type {}'.format(type(bytes_in)))

    return bytes_in.decode(encoding)


def _parse_str(val, length, name, instance):
    """
    Validate the string input. The value is never padded or truncated, so a
    value of unexpected width is kept as given.

    Parameters
    ----------
    val : str|bytes
    length : int
    name : str
    instance : object

    Returns
    -------
    str
    """

    if isinstance(val, bytes):
        val = bytes_to_string(val)
    elif not isinstance(val, str):
        raise TypeError(
            'Attribute {} of class {} requires str or bytes input, '
            'got type {}'.format(name, instance.__class__.__name__, type(val)))

    if len(val) != length:
        logger.warning(
            'Got string input value {!r} of length {} for attribute {} of class {}, '
            'which is not the declared width {}. The value is kept as given, so '
            'serialization will not be canonical.'.format(
                val, len(val), name, instance.__class__.__name__, length))
    return val


###########
# descriptors

class _BasicDescriptor(object):
    """
    A descriptor object for a fixed-width field. The value is stored in the
    instance dictionary under the field name.
    """

    _typ_string = None

    def __init__(self, name, length, docstring=''):
        self.name = name
        self.length = length

        self.__doc__ = docstring
        self._format_docstring()

    def _format_docstring(self):
        docstring = self.__doc__
        if docstring is None:
            docstring = ''
        if (self._typ_string is not None) and (not docstring.startswith(self._typ_string)):
            docstring = '{} {}'.format(self._typ_string, docstring)

        suff = self._docstring_suffix()
        if suff is not None:
            docstring = '{} {}'.format(docstring, suff)
        self.__doc__ = '{} Width {}.'.format(docstring, self.length)

    def _docstring_suffix(self):
        return None

    def _get_default(self, instance):
        return None

    def __get__(self, instance, owner):
        """The getter.

        Parameters
        ----------
        instance : object
            the calling class instance
        owner : object
            the type of the class - that is, the actual object to which this descriptor is assigned

        Returns
        -------
        object
            the return value
        """

        if instance is None:
            # this has been access on the class, so return the descriptor
            return self

        try:
            return instance.__dict__[self.name]
        except KeyError:
            raise AttributeError(
                'Field {} of class {} is not populated.'.format(self.name, instance.__class__.__name__))

    def __set__(self, instance, value):
        """The setter method.

        Parameters
        ----------
        instance : object
            the calling class instance
        value
            the value to use in setting - the type depends of the specific extension of this base class

        Returns
        -------
        bool
            True if the value was `None` and the default was applied, False otherwise.
        """

        if value is None:
            instance.__dict__[self.name] = self._get_default(instance)
            return True
        return False


class _StringDescriptor(_BasicDescriptor):
    """A descriptor for a fixed-width string field, defaulting to filler"""
    _typ_string = 'str:'

    def __init__(self, name, length, default_value=None, docstring=None):
        if default_value is None:
            default_value = FILLER*length
        self._default_value = default_value
        super(_StringDescriptor, self).__init__(name, length, docstring=docstring)

    def _get_default(self, instance):
        return self._default_value

    def _docstring_suffix(self):
        return 'Default value is :code:`{}`.'.format(self._default_value)

    def __set__(self, instance, value):
        if super(_StringDescriptor, self).__set__(instance, value):
            return
        instance.__dict__[self.name] = _parse_str(value, self.length, self.name, instance)


class _CodeDescriptor(_StringDescriptor):
    """
    A descriptor for a single coded character drawn from a documented
    enumeration. Membership is deliberately **not** enforced on assignment,
    since parsing is structural; see :mod:`milsidc.taxonomy.validation`.
    """

    def __init__(self, name, length, values, default_value=None, docstring=None):
        self.values = values
        super(_CodeDescriptor, self).__init__(
            name, length, default_value=default_value, docstring=docstring)

    def _docstring_suffix(self):
        suff = 'Standard values are :code:`{}`.'.format(tuple(self.values))
        return '{} {}'.format(suff, super(_CodeDescriptor, self)._docstring_suffix())


###########
# the fixed-width element

class FixedWidthElement(object):
    """
    An ordered collection of fixed-width string fields. Extensions declare
    `_ordering`, the field names in serialization order, and `_lengths`, the
    width of each field.
    """

    _ordering = ()
    _lengths = {}

    def __init__(self, **kwargs):
        unexpected = set(kwargs.keys()).difference(self._ordering)
        if len(unexpected) > 0:
            raise TypeError(
                'Class {} got unexpected fields {}'.format(self.__class__.__name__, sorted(unexpected)))

        for fld in self._ordering:
            try:
                setattr(self, fld, kwargs.get(fld, None))
            except Exception:
                logger.critical('Failed setting attribute {} for class {}'.format(fld, self.__class__))
                raise

    @classmethod
    def minimum_length(cls):
        """
        The length of the canonical serialized form.

        Returns
        -------
        int
        """

        return sum(cls._lengths[fld] for fld in cls._ordering)

    @classmethod
    def field_slices(cls):
        """
        The (start, stop) offsets of each field in the canonical form.

        Returns
        -------
        Dict[str, Tuple[int, int]]
        """

        out = OrderedDict()
        loc = 0
        for fld in cls._ordering:
            out[fld] = (loc, loc + cls._lengths[fld])
            loc += cls._lengths[fld]
        return out

    def get_length(self):
        """
        Get the length of the serialized string. This only differs from
        :meth:`minimum_length` for a hand built element with fields of
        unexpected width.

        Returns
        -------
        int
        """

        return sum(len(getattr(self, fld)) for fld in self._ordering)

    def to_string(self):
        """
        Write the object to its serialized string, by concatenating the fields
        in order.

        Returns
        -------
        str
        """

        return ''.join(getattr(self, fld) for fld in self._ordering)

    @classmethod
    def _parse_fields(cls, value, start):
        """
        Slice `value` into the declared fields.

        Parameters
        ----------
        value : str
            The string to slice.
        start : int
            The beginning location in the string.

        Returns
        -------
        dict
        """

        end = start + cls.minimum_length()
        if len(value) < end:
            raise FormatError(
                end, len(value),
                msg='Class {} requires {} characters from position {}, '
                    'but input has length {}'.format(cls.__name__, cls.minimum_length(), start, len(value)))

        fields = {}
        loc = start
        for fld in cls._ordering:
            fields[fld] = value[loc:loc + cls._lengths[fld]]
            loc += cls._lengths[fld]
        return fields

    @classmethod
    def from_string(cls, value, start=0):
        """

        Parameters
        ----------
        value: str|bytes
            the string to scrape
        start : int
            the beginning location in the string

        Returns
        -------
        FixedWidthElement
        """

        return cls(**cls._parse_fields(bytes_to_string(value), start))

    def to_tuple(self):
        """
        The field values in order.

        Returns
        -------
        Tuple[str, ...]
        """

        return tuple(getattr(self, fld) for fld in self._ordering)

    def to_dict(self):
        """
        The field values keyed by field name.

        Returns
        -------
        Dict[str, str]
        """

        return dict((fld, getattr(self, fld)) for fld in self._ordering)

    @classmethod
    def from_dict(cls, input_dict):
        """
        Construct from a dictionary keyed by field name. Missing fields are
        set to filler.

        Parameters
        ----------
        input_dict : dict

        Returns
        -------
        FixedWidthElement
        """

        return cls(**input_dict)

    def to_json(self):
        """
        Serialize element to a json representation. This is intended to allow
        a simple presentation of the element.

        Returns
        -------
        OrderedDict
        """

        out = OrderedDict()
        for fld in self._ordering:
            out[fld] = getattr(self, fld)
        return out

    def replace(self, **kwargs):
        """
        Get a copy of this element, with the given fields replaced.

        Returns
        -------
        FixedWidthElement
        """

        fields = self.to_dict()
        fields.update(kwargs)
        return self.__class__(**fields)

    def __eq__(self, other):
        if not isinstance(other, FixedWidthElement) or other._ordering != self._ordering:
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return '{}.from_string({!r})'.format(self.__class__.__name__, self.to_string())

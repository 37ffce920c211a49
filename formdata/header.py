# -*- coding: utf-8; -*-

"""Header fields of a ``multipart/form-data`` body part.

A :class:`HeaderField` is a fixed field name (a class attribute),
a value, and an ordered list of :class:`HeaderParameter`.
It knows how to render itself as::

  value; key1="value1"; key2="value2"

Deciding *what* goes into the parameters (for example, percent-encoding)
is up to the subclasses and their constructors,
see :mod:`formdata.disposition`.
"""

from collections import namedtuple

from formdata.structure import FieldName, MediaType, ParamName
from formdata.util.text import force_bytes


class HeaderParameter(namedtuple('HeaderParameter', ('key', 'value'))):

    """A single ``key=value`` parameter of a header field."""

    __slots__ = ()

    def __new__(cls, key, value):
        return super(HeaderParameter, cls).__new__(cls, ParamName(key),
                                                   str(value))

    def render(self):
        r"""
        >>> print(HeaderParameter('name', 'a"b').render())
        name="a\"b"
        """
        return '%s=%s' % (self.key, quote_string(self.value))


def quote_string(s):
    r"""Render `s` as an RFC 7230 ``quoted-string``.

    >>> print(quote_string('foo bar'))
    "foo bar"
    >>> print(quote_string('C:\\"x"'))
    "C:\\\"x\""
    """
    return '"%s"' % s.replace('\\', '\\\\').replace('"', '\\"')


class HeaderField(object):

    """Base class for header fields with a value and parameters."""

    name = None

    def __init__(self, value, parameters=None):
        self.value = value
        self.parameters = list(parameters or [])

    def __repr__(self):
        return '%s(%r, %r)' % (self.__class__.__name__,
                               self.value, self.parameters)

    def __str__(self):
        return '%s: %s' % (self.name, self.render())

    def __eq__(self, other):
        if isinstance(other, HeaderField):
            return (type(self) is type(other) and
                    self.value == other.value and
                    self.parameters == other.parameters)
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    __hash__ = None

    def get_param(self, key, default=None):
        for param in self.parameters:
            if param.key == key:
                return param.value
        return default

    def render(self):
        return '; '.join([self.value] +
                         [param.render() for param in self.parameters])

    def to_bytes(self):
        return force_bytes(str(self))


class ContentType(HeaderField):

    name = FieldName('Content-Type')

    def __init__(self, media_type, parameters=None):
        super(ContentType, self).__init__(MediaType(media_type), parameters)

    @classmethod
    def of(cls, media_type, **params):
        """
        >>> print(ContentType.of('text/plain', charset='utf-8'))
        Content-Type: text/plain; charset="utf-8"
        """
        return cls(media_type,
                   [HeaderParameter(key, value)
                    for key, value in sorted(params.items())])

    @property
    def media_type(self):
        return self.value

# -*- coding: utf-8; -*-

"""Classes for representing various elements of the protocol."""


###############################################################################
# Commonly useful structures


def okay(x):
    """Whether `x` is a successfully built value.

    Functions that can fail (such as
    :meth:`formdata.disposition.ContentDisposition.build`)
    return the failure object instead of raising it.
    This tells the two outcomes apart.
    """
    return (x is not None) and not isinstance(x, Exception)


class ProtocolString(str):

    """Base class for various constant strings used in HTTP."""

    __slots__ = ()

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, str.__repr__(self))


class CaseInsensitive(ProtocolString):

    __slots__ = ()

    def __eq__(self, other):
        if isinstance(other, str):
            return self.lower() == other.lower()
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.lower())

    def startswith(self, other):
        return self.lower().startswith(other.lower())

    def endswith(self, other):
        return self.lower().endswith(other.lower())


###############################################################################
# Representations of specific protocol elements


class FieldName(CaseInsensitive):

    __slots__ = ()


class ParamName(CaseInsensitive):

    __slots__ = ()


class MediaType(CaseInsensitive):

    __slots__ = ()

    @property
    def type(self):
        return self.lower().partition('/')[0]

    @property
    def subtype(self):
        return self.lower().partition('/')[2]

    @property
    def is_multipart(self):
        return self.type == 'multipart'


class Boundary(ProtocolString):

    """A ``multipart`` boundary (case-sensitive)."""

    __slots__ = ()

    @property
    def delimiter(self):
        return b'--' + self.encode('ascii')

    @property
    def close_delimiter(self):
        return self.delimiter + b'--'

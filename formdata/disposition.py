# -*- coding: utf-8; -*-

"""The ``Content-Disposition`` header of a ``multipart/form-data`` part.

The field's ``name`` and ``filename`` are percent-encoded
with the set of characters allowed in a URL path,
so that the rendered header can't be misread by the server
(no raw quotes, semicolons, or line breaks in the parameters).
Encoding can be turned off with ``encode_parameters=False``,
in which case the values are used as is.

Building a header can fail, because some strings
(those with lone surrogates) have no UTF-8 representation
and therefore can't be percent-encoded.
Such failures are returned, not raised:

>>> disp = ContentDisposition.build('field', 'my file.txt')
>>> okay(disp)
True
>>> print(disp)
Content-Disposition: form-data; name="field"; filename="my%20file.txt"
>>> failure = ContentDisposition.build('bad\\ud800')
>>> okay(failure)
False
>>> print(failure)
'bad\\ud800' can not be percent-encoded (contains U+D800)
"""

from urllib.parse import quote

from formdata.header import HeaderField, HeaderParameter
from formdata.structure import FieldName, okay
from formdata.util.text import describe_unencodable, ellipsize


# RFC 3986 ``pchar`` plus the slash, minus ``;``.
# ASCII letters, digits, and ``-._~`` are always safe for `quote`.
url_path_allowed = "!$&'()*+,/:=@"


def percent_encode(text):
    """Percent-encode `text` for use in a URL path.

    Return `None` if `text` has no UTF-8 representation.

    >>> print(percent_encode('a b'))
    a%20b
    >>> print(percent_encode('path/to;x'))
    path/to%3Bx
    >>> print(percent_encode('naïve "quote"'))
    na%C3%AFve%20%22quote%22
    >>> print(percent_encode('\\udc80'))
    None
    """
    try:
        return quote(text, safe=url_path_allowed)
    except UnicodeEncodeError:
        return None


class PercentEncodingError(Exception):

    """A value that can not be percent-encoded.

    Returned (not raised) by :meth:`ContentDisposition.build`.
    """

    def __init__(self, initial_value):
        super(PercentEncodingError, self).__init__(initial_value)
        self.initial_value = initial_value

    def __repr__(self):
        return 'PercentEncodingError(%r)' % self.initial_value

    def __str__(self):
        message = '%s can not be percent-encoded' % \
            ellipsize(repr(self.initial_value))
        bad = describe_unencodable(self.initial_value)
        if bad:
            message += ' (contains %s)' % bad
        return message


class ContentDisposition(HeaderField):

    """The ``Content-Disposition`` header of one body part.

    The ``name`` and ``filename`` elements of :attr:`parameters`
    should not be modified after construction,
    but other parameters may be appended.
    Use :meth:`build` or :meth:`literal` to construct.
    """

    name = FieldName('Content-Disposition')

    FORM_DATA = 'form-data'

    def __init__(self, parameters):
        super(ContentDisposition, self).__init__(self.FORM_DATA, parameters)

    @classmethod
    def build(cls, name, filename=None, encode_parameters=True):
        """Build the header for a field called `name`.

        :param name: The value for the ``name`` parameter.
        :param filename:
            The value for the ``filename`` parameter,
            or `None` to omit it.
        :param encode_parameters:
            Whether to percent-encode `name` and `filename`.
            If `False`, they are used as is,
            and the caller is responsible for their safety.
        :return:
            A :class:`ContentDisposition`, or a :exc:`PercentEncodingError`
            for the first value that could not be encoded.
            Use :func:`~formdata.structure.okay` to tell them apart.
        """
        if encode_parameters:
            encoded_name = percent_encode(name)
            if encoded_name is None:
                return PercentEncodingError(name)
            if filename is not None:
                encoded_filename = percent_encode(filename)
                if encoded_filename is None:
                    return PercentEncodingError(filename)
            else:
                encoded_filename = None
        else:
            (encoded_name, encoded_filename) = (name, filename)

        parameters = [HeaderParameter('name', encoded_name)]
        if encoded_filename is not None:
            parameters.append(HeaderParameter('filename', encoded_filename))
        return cls(parameters)

    @classmethod
    def literal(cls, name, filename=None, encode_parameters=True):
        """Like :meth:`build`, but for values written in the source code.

        String literals in the source are always encodable,
        so this never returns a failure.
        Passing anything that can't be encoded is a programming error
        and raises :exc:`AssertionError`.

        >>> print(ContentDisposition.literal('avatar', 'me.png'))
        Content-Disposition: form-data; name="avatar"; filename="me.png"
        """
        result = cls.build(name, filename, encode_parameters)
        if not okay(result):
            raise AssertionError(
                'literal value %s' % result) from result
        return result

    @property
    def field_name(self):
        return self.get_param('name')

    @property
    def filename(self):
        return self.get_param('filename')

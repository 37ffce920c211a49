# -*- coding: utf-8; -*-

"""A single part of a ``multipart/form-data`` body."""

from functools import singledispatch
import io

from formdata.disposition import ContentDisposition
from formdata.header import ContentType
from formdata.known import media_type_for
from formdata.structure import okay
from formdata.util.text import force_bytes


CRLF = b'\r\n'


@singledispatch
def body_bytes(value):
    return force_bytes(str(value))

@body_bytes.register(bytes)
@body_bytes.register(bytearray)
@body_bytes.register(memoryview)
def _bytes_body(value):
    return bytes(value)

@body_bytes.register(str)
def _text_body(value):
    return force_bytes(value)

@body_bytes.register(io.IOBase)
def _file_body(f):
    return body_bytes(f.read())


class Subpart(object):

    __slots__ = ('content_disposition', 'content_type', 'body')

    def __init__(self, content_disposition, content_type=None, body=b''):
        """
        :param content_disposition:
            A :class:`~formdata.disposition.ContentDisposition`.
        :param content_type:
            A :class:`~formdata.header.ContentType`, or `None` to omit
            the ``Content-Type`` header (which means ``text/plain``).
        :param body: The contents of the part, as bytes.
        """
        self.content_disposition = content_disposition
        self.content_type = content_type
        self.body = body

    def __repr__(self):
        return '<Subpart %s>' % self.content_disposition.field_name

    def __eq__(self, other):
        if isinstance(other, Subpart):
            return (self.content_disposition == other.content_disposition and
                    self.content_type == other.content_type and
                    self.body == other.body)
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    __hash__ = None

    @property
    def headers(self):
        return [hdr for hdr in [self.content_disposition, self.content_type]
                if hdr is not None]

    def to_bytes(self):
        return b''.join([hdr.to_bytes() + CRLF for hdr in self.headers] +
                        [CRLF, self.body])


def field(name, value, encode_parameters=True):
    """Make a part for a plain form field.

    :param value:
        Text (encoded as UTF-8), bytes, or anything else
        accepted by :func:`body_bytes`.
    :return:
        A :class:`Subpart`, or a
        :exc:`~formdata.disposition.PercentEncodingError`.
    """
    disposition = ContentDisposition.build(name,
                                           encode_parameters=encode_parameters)
    if not okay(disposition):
        return disposition
    return Subpart(disposition, body=body_bytes(value))


def file(name, filename, data, content_type=None, encode_parameters=True):
    """Make a part for an uploaded file.

    :param data: The contents of the file, as bytes or a binary file.
    :param content_type:
        A :class:`~formdata.header.ContentType` or a media type string.
        If `None`, it is guessed from the extension of `filename`.
    :return:
        A :class:`Subpart`, or a
        :exc:`~formdata.disposition.PercentEncodingError`.
    """
    disposition = ContentDisposition.build(name, filename,
                                           encode_parameters=encode_parameters)
    if not okay(disposition):
        return disposition
    if content_type is None:
        content_type = media_type_for(filename)
    if not isinstance(content_type, ContentType):
        content_type = ContentType(content_type)
    return Subpart(disposition, content_type, body_bytes(data))

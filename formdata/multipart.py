# -*- coding: utf-8; -*-

"""A complete ``multipart/form-data`` body (RFC 7578)."""

from formdata.boundary import make_boundary, random_boundary
from formdata.header import ContentType, HeaderParameter
from formdata.known import media
from formdata.structure import Boundary, okay
from formdata.subpart import CRLF


class MultipartFormData(object):

    """An ordered collection of :class:`~formdata.subpart.Subpart`.

    >>> from formdata.subpart import field
    >>> body = MultipartFormData([field('id', '123')], boundary=Boundary('xyz'))
    >>> print(body.content_type)
    Content-Type: multipart/form-data; boundary="xyz"
    >>> body.to_bytes()
    b'--xyz\\r\\nContent-Disposition: form-data; name="id"\\r\\n\\r\\n123\\r\\n--xyz--\\r\\n'
    """

    def __init__(self, parts=None, boundary=None):
        """
        :param parts: An iterable of :class:`~formdata.subpart.Subpart`.
        :param boundary:
            A boundary string, checked with
            :func:`~formdata.boundary.make_boundary`,
            or `None` to generate a random one.
        :raise formdata.boundary.BoundaryError:
            If `boundary` is not a valid boundary
            (or is itself a :exc:`~formdata.boundary.BoundaryError`).
        :raise formdata.disposition.PercentEncodingError:
            If one of the `parts` is a failure instead of a part.
        """
        if boundary is None:
            boundary = random_boundary()
        elif isinstance(boundary, Exception):
            raise boundary
        checked = make_boundary(boundary)
        if not okay(checked):
            raise checked
        self.boundary = checked
        self.parts = []
        self.extend(parts or [])

    def __repr__(self):
        return 'MultipartFormData(%r, %r)' % (self.parts, self.boundary)

    def __len__(self):
        return len(self.parts)

    def __iter__(self):
        return iter(self.parts)

    def append(self, part):
        """Add `part` at the end.

        `part` may come straight from :func:`~formdata.subpart.field`
        or :func:`~formdata.subpart.file`: if it is a failure,
        it is raised here and the body is left unchanged.
        """
        if not okay(part):
            raise part
        self.parts.append(part)

    def extend(self, parts):
        parts = list(parts)
        for part in parts:
            if not okay(part):
                raise part
        self.parts.extend(parts)

    @property
    def content_type(self):
        """The ``Content-Type`` header for the request carrying this body."""
        return ContentType(media.multipart_form_data,
                           [HeaderParameter('boundary', self.boundary)])

    def to_bytes(self):
        delimiter = self.boundary.delimiter
        chunks = []
        for part in self.parts:
            chunks.extend([delimiter, CRLF, part.to_bytes(), CRLF])
        chunks.extend([self.boundary.close_delimiter, CRLF])
        return b''.join(chunks)

# -*- coding: utf-8; -*-

from formdata.__metadata__ import version as __version__
from formdata.boundary import BoundaryError, make_boundary, random_boundary
from formdata.disposition import (ContentDisposition, PercentEncodingError,
                                  percent_encode)
from formdata.header import ContentType, HeaderField, HeaderParameter
from formdata.known import media, media_type_for
from formdata.multipart import MultipartFormData
from formdata.structure import Boundary, MediaType, okay
from formdata.subpart import Subpart, field, file

__all__ = [
    'Boundary',
    'BoundaryError',
    'ContentDisposition',
    'ContentType',
    'HeaderField',
    'HeaderParameter',
    'MediaType',
    'MultipartFormData',
    'PercentEncodingError',
    'Subpart',
    'field',
    'file',
    'make_boundary',
    'media',
    'media_type_for',
    'okay',
    'percent_encode',
    'random_boundary',
]

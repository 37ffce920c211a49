# -*- coding: utf-8; -*-

"""Protocol elements known to this library.

For example, ``media.application_json`` is
``MediaType('application/json')``.
This makes code visually nicer and prevents typos.
"""

import posixpath

from formdata.known import media_type


media = media_type.known


def media_type_for(filename, default=media.application_octet_stream):
    """Guess the media type of a file from its `filename` extension.

    >>> media_type_for('report.PDF')
    MediaType('application/pdf')
    >>> media_type_for('README')
    MediaType('application/octet-stream')
    """
    ext = posixpath.splitext(filename.replace('\\', '/'))[1]
    return media_type.for_extension(ext) or default

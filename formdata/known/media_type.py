# -*- coding: utf-8; -*-

from formdata.citation import RFC, Citation
from formdata.known.base import KnownDict
from formdata.structure import MediaType


def extensions(media_type):
    return known.get_info(media_type).get('extensions', [])

def for_extension(ext):
    ext = ext.lower().lstrip('.')
    return _by_extension.get(ext)


class KnownMediaTypes(KnownDict):

    def __init__(self, *args, **kwargs):
        super(KnownMediaTypes, self).__init__(MediaType, *args, **kwargs)


# ``extensions`` are lowercase, without the leading dot.
# The first one is the preferred extension for that type.

known = KnownMediaTypes([
 {'_': MediaType('application/gzip'), '_citations': [RFC(6713)],
  'extensions': ['gz']},
 {'_': MediaType('application/json'), '_citations': [RFC(8259)],
  'extensions': ['json']},
 {'_': MediaType('application/octet-stream'),
  '_citations': [RFC(2046, section=(4, 5, 1))],
  'extensions': ['bin']},
 {'_': MediaType('application/pdf'), '_citations': [RFC(8118)],
  'extensions': ['pdf']},
 {'_': MediaType('application/x-www-form-urlencoded'),
  '_citations': [Citation('URL Standard',
                          'https://url.spec.whatwg.org/'
                          '#application/x-www-form-urlencoded')]},
 {'_': MediaType('application/xml'), '_citations': [RFC(7303)],
  'extensions': ['xml']},
 {'_': MediaType('application/zip'),
  '_citations': [Citation('IANA: application/zip',
                          'https://www.iana.org/assignments/media-types/'
                          'application/zip')],
  'extensions': ['zip']},
 {'_': MediaType('audio/mpeg'), '_citations': [RFC(3003)],
  'extensions': ['mp3']},
 {'_': MediaType('image/gif'), '_citations': [RFC(2046, section=(4, 2))],
  'extensions': ['gif']},
 {'_': MediaType('image/jpeg'), '_citations': [RFC(2046, section=(4, 2))],
  'extensions': ['jpg', 'jpeg']},
 {'_': MediaType('image/png'),
  '_citations': [Citation('W3C Recommendation: PNG',
                          'https://www.w3.org/TR/png/')],
  'extensions': ['png']},
 {'_': MediaType('image/svg+xml'),
  '_citations': [Citation('W3C Recommendation: SVG',
                          'https://www.w3.org/TR/SVG/')],
  'extensions': ['svg']},
 {'_': MediaType('image/webp'), '_citations': [RFC(9649)],
  'extensions': ['webp']},
 {'_': MediaType('multipart/form-data'), '_citations': [RFC(7578)]},
 {'_': MediaType('multipart/mixed'),
  '_citations': [RFC(2046, section=(5, 1, 3))]},
 {'_': MediaType('text/css'), '_citations': [RFC(2318)],
  'extensions': ['css']},
 {'_': MediaType('text/csv'), '_citations': [RFC(4180)],
  'extensions': ['csv']},
 {'_': MediaType('text/html'),
  '_citations': [Citation('HTML Living Standard',
                          'https://html.spec.whatwg.org/')],
  'extensions': ['html', 'htm']},
 {'_': MediaType('text/javascript'), '_citations': [RFC(9239)],
  'extensions': ['js', 'mjs']},
 {'_': MediaType('text/markdown'), '_citations': [RFC(7763)],
  'extensions': ['md']},
 {'_': MediaType('text/plain'), '_citations': [RFC(2046, section=(4, 1, 3))],
  'extensions': ['txt']},
 {'_': MediaType('video/mp4'), '_citations': [RFC(4337)],
  'extensions': ['mp4']},
], extra_info=['extensions'])


_by_extension = {
    ext: media_type
    for media_type in known
    for ext in extensions(media_type)
}

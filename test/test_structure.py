# -*- coding: utf-8; -*-

import doctest

import formdata.header
import formdata.known
from formdata.citation import RFC
from formdata.header import ContentType, HeaderField, HeaderParameter
from formdata.known import media, media_type_for
from formdata.structure import (Boundary, CaseInsensitive, FieldName,
                                MediaType, ParamName, okay)


def test_doctests():
    for module in [formdata.header, formdata.known]:
        (failed, attempted) = doctest.testmod(module)
        assert attempted > 0
        assert failed == 0


def test_common_structures():
    assert CaseInsensitive('foo') == CaseInsensitive('Foo')
    assert CaseInsensitive('foo') != CaseInsensitive('bar')
    assert CaseInsensitive('foo') == 'Foo'
    assert CaseInsensitive('foo') != 'bar'
    assert hash(FieldName('Content-Type')) == hash(FieldName('content-type'))
    assert repr(FieldName('Content-Type')) == "FieldName('Content-Type')"
    assert FieldName('Content-Type').startswith('content-')


def test_okay():
    assert okay('')
    assert okay(HeaderParameter('a', 'b'))
    assert not okay(None)
    assert not okay(ValueError('x'))


def test_media_type():
    mt = MediaType('Multipart/Form-Data')
    assert mt == 'multipart/form-data'
    assert mt.type == 'multipart'
    assert mt.subtype == 'form-data'
    assert mt.is_multipart
    assert not MediaType('text/plain').is_multipart


def test_boundary():
    b = Boundary('abc')
    assert b.delimiter == b'--abc'
    assert b.close_delimiter == b'--abc--'
    assert Boundary('abc') != Boundary('ABC')


def test_header_parameter():
    param = HeaderParameter('Name', 'value')
    assert isinstance(param.key, ParamName)
    assert param == ('name', 'value')
    assert param.render() == 'Name="value"'
    assert HeaderParameter('k', 'a\\b"c').render() == 'k="a\\\\b\\"c"'
    assert HeaderParameter('k', '').render() == 'k=""'


def test_header_field():
    class XCustom(HeaderField):
        name = FieldName('X-Custom')

    hdr = XCustom('foo', [HeaderParameter('a', '1'), HeaderParameter('b', '2')])
    assert hdr.render() == 'foo; a="1"; b="2"'
    assert str(hdr) == 'X-Custom: foo; a="1"; b="2"'
    assert hdr.to_bytes() == b'X-Custom: foo; a="1"; b="2"'
    assert hdr.get_param('B') == '2'
    assert hdr.get_param('c') is None
    assert XCustom('foo').render() == 'foo'
    assert XCustom('foo').parameters == []


def test_content_type():
    ct = ContentType('text/plain')
    assert isinstance(ct.media_type, MediaType)
    assert str(ct) == 'Content-Type: text/plain'
    assert ContentType.of('text/plain', charset='utf-8') == \
        ContentType('text/plain', [HeaderParameter('charset', 'utf-8')])
    assert ContentType('text/plain') != ContentType('text/html')


def test_known_media_types():
    assert media.application_json == 'application/json'
    assert media.image_svg_xml == 'image/svg+xml'
    assert media.application_x_www_form_urlencoded == \
        'application/x-www-form-urlencoded'
    assert media.multipart_form_data in media
    assert RFC(7578) in media.get_info(media.multipart_form_data)['_citations']


def test_media_type_for():
    assert media_type_for('photo.JPG') == 'image/jpeg'
    assert media_type_for('photo.jpeg') == media.image_jpeg
    assert media_type_for('dir.d/archive.tar.gz') == 'application/gzip'
    assert media_type_for('C:\\Users\\me\\notes.txt') == 'text/plain'
    assert media_type_for('Makefile') == 'application/octet-stream'
    assert media_type_for('data.unknownext') == 'application/octet-stream'
    assert media_type_for('x.bin', default=None) == media.application_octet_stream
    assert media_type_for('x.qqq', default=None) is None


def test_citation():
    assert str(RFC(7578)) == 'RFC 7578'
    assert RFC(2046, section=(5, 1, 1)).url == \
        'https://tools.ietf.org/html/rfc2046#section-5.1.1'

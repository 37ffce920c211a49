# -*- coding: utf-8; -*-

"""The command-line interface to MultipartFormData."""

import argparse
import io
import logging
import os
import sys
import traceback

import formdata
from formdata import subpart
from formdata.boundary import make_boundary
from formdata.multipart import MultipartFormData
from formdata.structure import okay
from formdata.util.text import stdio_as_bytes


logger = logging.getLogger(__name__)


class InputError(Exception):

    pass


def parse_args(argv):
    parser = argparse.ArgumentParser(
        prog='formdata',
        description='Build a multipart/form-data body and write it to stdout.')
    parser.add_argument('--version', action='version',
                        version='MultipartFormData %s' % formdata.__version__)
    parser.add_argument('-F', '--form', metavar='NAME=VALUE',
                        action='append', default=[], dest='fields',
                        help='add a form field; use NAME=@PATH '
                             'to upload the file at PATH')
    parser.add_argument('--boundary',
                        help='use this boundary instead of a random one')
    parser.add_argument('--no-encode', dest='encode_parameters',
                        action='store_false',
                        help='do not percent-encode names and filenames')
    parser.add_argument('--print-content-type', action='store_true',
                        help='write the Content-Type header for the request '
                             'to stderr')
    parser.add_argument('--full-traceback', action='store_true',
                        help='do not hide the traceback on exceptions')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log what is being done to stderr')
    return parser.parse_args(argv[1:])


def make_part(spec, encode_parameters=True):
    (name, sep, value) = spec.partition('=')
    if not sep or not name:
        raise InputError('bad field %r: expected NAME=VALUE or NAME=@PATH' %
                         spec)
    if value.startswith('@'):
        path = value[1:]
        with io.open(path, 'rb') as f:
            data = f.read()
        logger.debug('field %r: %d bytes from %s', name, len(data), path)
        part = subpart.file(name, os.path.basename(path), data,
                            encode_parameters=encode_parameters)
    else:
        logger.debug('field %r: %d characters', name, len(value))
        part = subpart.field(name, value, encode_parameters=encode_parameters)
    if not okay(part):
        raise InputError(str(part))
    return part


def run_cli(args, stdout, stderr):
    try:
        if args.boundary is None:
            boundary = None
        else:
            boundary = make_boundary(args.boundary)
            if not okay(boundary):
                raise InputError(str(boundary))
        body = MultipartFormData(
            [make_part(spec, args.encode_parameters) for spec in args.fields],
            boundary)
        logger.debug('%d parts, boundary %r', len(body), body.boundary)
        if args.print_content_type:
            stderr.write('%s\n' % body.content_type)
        # The body is bytes (files may be binary), so bypass text stdout.
        stdio_as_bytes(stdout).write(body.to_bytes())
    except (EnvironmentError, UnicodeError, InputError) as exc:
        if args.full_traceback:
            traceback.print_exc(file=stderr)
        stderr.write('formdata: %s\n' % exc)
        return 1
    return 0


def excepthook(_type, exc, _traceback):     # pragma: no cover
    sys.stderr.write('formdata: unhandled exception: %r\n' % exc)


def main():     # pragma: no cover
    args = parse_args(sys.argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(name)s: %(message)s')
    if not args.full_traceback:
        sys.excepthook = excepthook
    sys.exit(run_cli(args, sys.stdout, sys.stderr))

if __name__ == '__main__':
    main()

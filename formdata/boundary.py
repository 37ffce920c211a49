# -*- coding: utf-8; -*-

"""Boundaries that delimit the parts of a ``multipart`` body."""

import secrets
import string

from formdata.structure import Boundary
from formdata.util.text import ellipsize


# RFC 2046 Section 5.1.1.
bcharsnospace = string.digits + string.ascii_letters + "'()+_,-./:=?"
bchars = bcharsnospace + ' '

max_length = 70


class BoundaryError(Exception):

    """A string that can not be used as a boundary.

    Returned (not raised) by :func:`make_boundary`.
    """

    def __init__(self, initial_value, reason):
        super(BoundaryError, self).__init__(initial_value, reason)
        self.initial_value = initial_value
        self.reason = reason

    def __repr__(self):
        return 'BoundaryError(%r, %r)' % (self.initial_value, self.reason)

    def __str__(self):
        return 'bad boundary %s: %s' % (ellipsize(repr(self.initial_value)),
                                        self.reason)


def make_boundary(text):
    """Check that `text` is a valid boundary.

    :return:
        A :class:`~formdata.structure.Boundary`,
        or a :exc:`BoundaryError` explaining why `text` is not one.
    """
    if not text:
        return BoundaryError(text, 'must not be empty')
    if len(text) > max_length:
        return BoundaryError(text,
                             'must be at most %d characters long' % max_length)
    bad = [c for c in text if c not in bchars]
    if bad:
        return BoundaryError(text, 'contains disallowed character %r' % bad[0])
    if text.endswith(' '):
        return BoundaryError(text, 'must not end with a space')
    return Boundary(text)


def random_boundary():
    return Boundary('formdata-' + secrets.token_hex(16))

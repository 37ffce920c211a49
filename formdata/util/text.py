# -*- coding: utf-8; -*-

import io


def force_bytes(x):
    """
    >>> force_bytes(b'abc')
    b'abc'
    >>> force_bytes('Liberté')
    b'Libert\\xc3\\xa9'
    """
    if isinstance(x, bytes):
        return x
    else:
        return x.encode('utf-8', 'surrogateescape')


def stdio_as_bytes(f):
    return f.buffer if hasattr(f, 'buffer') else f


def ellipsize(s, max_length=60):
    """
    >>> print(ellipsize('lorem ipsum dolor sit amet', 40))
    lorem ipsum dolor sit amet
    >>> print(ellipsize('lorem ipsum dolor sit amet', 20))
    lorem ipsum dolor...
    """
    if len(s) > max_length:
        ellipsis = '...'
        return s[:(max_length - len(ellipsis))] + ellipsis
    else:
        return s


def unencodable_chars(s):
    """Code points of `s` that have no UTF-8 representation, in order.

    >>> unencodable_chars('abc')
    []
    >>> unencodable_chars('a\\ud800b\\udfff\\ud800')
    ['\\ud800', '\\udfff']
    """
    seen = []
    for c in s:
        if '\ud800' <= c <= '\udfff' and c not in seen:
            seen.append(c)
    return seen


def describe_unencodable(s):
    """
    >>> print(describe_unencodable('a\\ud800b\\udc01'))
    U+D800 and U+DC01
    >>> print(describe_unencodable('x\\udfff'))
    U+DFFF
    """
    return nicely_join(['U+%04X' % ord(c) for c in unencodable_chars(s)])


def nicely_join(strings):
    """
    >>> print(nicely_join(['foo']))
    foo
    >>> print(nicely_join(['foo', 'bar baz']))
    foo and bar baz
    >>> print(nicely_join(['foo', 'bar baz', 'qux']))
    foo, bar baz, and qux
    """
    joined = ''
    for i, s in enumerate(strings):
        if i == len(strings) - 1:
            if len(strings) > 2:
                joined += 'and '
            elif len(strings) > 1:
                joined += ' and '
        joined += s
        if len(strings) > 2 and i < len(strings) - 1:
            joined += ', '
    return joined


class MockStdio(object):

    """Suitable as a mock stdout/stderr for tests."""

    def __init__(self):
        self.buffer = io.BytesIO()

    def write(self, s):
        self.buffer.write(s.encode('utf-8'))

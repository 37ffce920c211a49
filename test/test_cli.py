# -*- coding: utf-8; -*-

import formdata.cli
from formdata.util.text import MockStdio


def run(options):
    argv = ['formdata'] + options
    stdout = MockStdio()
    stderr = MockStdio()
    args = formdata.cli.parse_args(argv)
    exit_status = formdata.cli.run_cli(args, stdout, stderr)
    return (exit_status, stdout.buffer.getvalue(), stderr.buffer.getvalue())


def test_basic():
    (code, stdout, stderr) = run(['-F', 'title=Hello world',
                                  '--boundary', 'xyz'])
    assert code == 0
    assert stdout == (b'--xyz\r\n'
                      b'Content-Disposition: form-data; name="title"\r\n'
                      b'\r\n'
                      b'Hello world\r\n'
                      b'--xyz--\r\n')
    assert stderr == b''


def test_no_fields():
    (code, stdout, stderr) = run(['--boundary', 'xyz'])
    assert code == 0
    assert stdout == b'--xyz--\r\n'


def test_file(tmp_path):
    path = tmp_path / 'my notes.txt'
    path.write_bytes(b'line 1\nline 2\n')
    (code, stdout, stderr) = run(['-F', 'notes=@%s' % path,
                                  '--boundary', 'xyz'])
    assert code == 0
    assert (b'Content-Disposition: form-data; name="notes"; '
            b'filename="my%20notes.txt"\r\n'
            b'Content-Type: text/plain\r\n'
            b'\r\n'
            b'line 1\nline 2\n\r\n') in stdout
    assert stderr == b''


def test_no_encode():
    (code, stdout, _) = run(['-F', 'a b=c', '--no-encode',
                             '--boundary', 'xyz'])
    assert code == 0
    assert b'name="a b"' in stdout
    (code, stdout, _) = run(['-F', 'a b=c', '--boundary', 'xyz'])
    assert code == 0
    assert b'name="a%20b"' in stdout


def test_print_content_type():
    (code, _, stderr) = run(['-F', 'a=b', '--boundary', 'xyz',
                             '--print-content-type'])
    assert code == 0
    assert stderr == b'Content-Type: multipart/form-data; boundary="xyz"\n'


def test_random_boundary():
    (code, stdout, _) = run(['-F', 'a=b'])
    assert code == 0
    assert stdout.startswith(b'--formdata-')


def test_bad_field():
    (code, stdout, stderr) = run(['-F', 'novalue'])
    assert code == 1
    assert stdout == b''
    assert stderr.startswith(b'formdata: bad field')


def test_bad_boundary():
    (code, stdout, stderr) = run(['-F', 'a=b', '--boundary', 'semi;colon'])
    assert code == 1
    assert stdout == b''
    assert b'formdata: bad boundary' in stderr


def test_unencodable_name():
    (code, stdout, stderr) = run(['-F', 'caf\udce9=1'])
    assert code == 1
    assert stdout == b''
    assert b'can not be percent-encoded' in stderr


def test_missing_file(tmp_path):
    (code, stdout, stderr) = run(['-F', 'f=@%s' % (tmp_path / 'nope.bin')])
    assert code == 1
    assert stdout == b''
    assert b'formdata: ' in stderr
    assert b'Traceback' not in stderr


def test_full_traceback(tmp_path):
    (code, _, stderr) = run(['--full-traceback',
                             '-F', 'f=@%s' % (tmp_path / 'nope.bin')])
    assert code == 1
    assert b'Traceback' in stderr

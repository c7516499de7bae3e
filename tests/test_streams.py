import io

import pytest

from pngme.exceptions import TruncatedBufferException
from pngme.streams import Stream


def test_bytes_stream_read_exactly():
    stream = Stream(b'\x01\x02\x03\x04\x05')

    assert stream.read_exactly(2, 'first') == b'\x01\x02'
    assert stream.remaining() == 3
    assert stream.tell() == 2

    with pytest.raises(TruncatedBufferException) as excinfo:
        stream.read_exactly(4, 'second')

    assert excinfo.value.expected == 4
    assert excinfo.value.available == 3
    assert stream.at_eof()


@pytest.mark.parametrize('obj', [bytearray(b'\x01\x02'), memoryview(b'\x01\x02')])
def test_bytes_like_stream(obj):
    stream = Stream(obj)

    assert stream.read() == b'\x01\x02'


def test_file_stream(tmp_path):
    path = tmp_path / 'auaua'
    path.write_bytes(b'\x01\x02\x03')

    with Stream(path) as stream:
        assert stream.read_exactly(1, 'first') == b'\x01'
        assert stream.remaining() == 2

    with Stream(str(path), flags='wb') as stream:
        stream.write(b'kebab')

    assert path.read_bytes() == b'kebab'


def test_wrong_stream_object():
    with pytest.raises(ValueError):
        Stream(42)


def test_stream_seek():
    stream = Stream(b'\x01\x02\x03\x04')

    stream.seek(3)
    assert stream.remaining() == 1
    assert stream.tell() == 3

    stream.seek(-2, io.SEEK_END)
    assert stream.read() == b'\x03\x04'

    with pytest.raises(ValueError):
        stream.seek('3')

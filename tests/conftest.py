import struct

import pytest
from PIL import Image


MESSAGE = b'This is where your secret message will be!'


@pytest.fixture
def rust_chunk_bytes():
    """A 'RuSt' chunk carrying MESSAGE, built field by field."""
    def _build(crc=2882656334, trailing=b''):
        return (
            struct.pack('>I', len(MESSAGE)) +
            b'RuSt' +
            MESSAGE +
            struct.pack('>I', crc) +
            trailing
        )

    return _build


@pytest.fixture
def png_bytes(tmp_path):
    """A real PNG file written by Pillow."""
    path = tmp_path / 'red.png'
    Image.new('RGB', (5, 10), 'red').save(path, format='PNG')

    return path.read_bytes()


@pytest.fixture
def png_path(tmp_path, png_bytes):
    path = tmp_path / 'image.png'
    path.write_bytes(png_bytes)

    return path

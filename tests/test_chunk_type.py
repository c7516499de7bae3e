import pytest

from pngme.chunk_type import ChunkType
from pngme.enum import ChunkTypeFlag
from pngme.exceptions import InvalidByteException, InvalidLengthException


def test_chunk_type_from_bytes():
    chunk_type = ChunkType(bytes([82, 117, 83, 116]))

    assert chunk_type.raw == bytes([82, 117, 83, 116])
    assert bytes(chunk_type) == b'RuSt'


def test_chunk_type_from_str():
    assert ChunkType.from_str('RuSt') == ChunkType.from_bytes(bytes([82, 117, 83, 116]))


def test_chunk_type_properties():
    chunk_type = ChunkType.from_str('RuSt')

    assert chunk_type.is_critical
    assert not chunk_type.is_public
    assert chunk_type.is_reserved_bit_valid
    assert chunk_type.is_safe_to_copy
    assert chunk_type.is_valid


@pytest.mark.parametrize('code,prop,expected', [
    ('ruSt', 'is_critical', False),
    ('RUSt', 'is_public', True),
    ('Rust', 'is_reserved_bit_valid', False),
    ('Rust', 'is_valid', False),
    ('RuST', 'is_safe_to_copy', False),
])
def test_chunk_type_single_bit(code, prop, expected):
    assert getattr(ChunkType.from_str(code), prop) is expected


def test_chunk_type_flags():
    assert ChunkType.from_str('IHDR').flags == ChunkTypeFlag.NONE
    assert ChunkType.from_str('tEXt').flags == ChunkTypeFlag.ANCILLARY | ChunkTypeFlag.SAFE_TO_COPY
    assert ChunkType.from_str('ruSt').flags == (
        ChunkTypeFlag.ANCILLARY | ChunkTypeFlag.PRIVATE | ChunkTypeFlag.SAFE_TO_COPY
    )
    assert ChunkTypeFlag.RESERVED in ChunkType.from_str('Rust').flags


def test_chunk_type_invalid_byte():
    with pytest.raises(InvalidByteException) as excinfo:
        ChunkType.from_str('Ru1t')

    assert excinfo.value.byte == ord('1')


@pytest.mark.parametrize('byte', [0, 64, 91, 96, 123, 255])
def test_chunk_type_bytes_outside_letters(byte):
    with pytest.raises(InvalidByteException) as excinfo:
        ChunkType(bytes([65, 65, byte, 65]))

    assert excinfo.value.byte == byte


def test_chunk_type_every_letter_is_accepted():
    letters = list(range(65, 91)) + list(range(97, 123))

    for letter in letters:
        assert ChunkType(bytes([letter] * 4)).raw == bytes([letter] * 4)


def test_chunk_type_first_invalid_byte_is_reported():
    with pytest.raises(InvalidByteException) as excinfo:
        ChunkType(b'A#1A')

    assert excinfo.value.byte == ord('#')


@pytest.mark.parametrize('value', ['', 'RuS', 'RuStX'])
def test_chunk_type_invalid_length(value):
    with pytest.raises(InvalidLengthException) as excinfo:
        ChunkType.from_str(value)

    assert excinfo.value.length == len(value)


def test_chunk_type_string():
    chunk_type = ChunkType.from_str('RuSt')

    assert str(chunk_type) == 'RuSt'
    assert repr(chunk_type) == '<ChunkType(RuSt)>'


def test_chunk_type_equality():
    assert ChunkType.from_str('RuSt') == ChunkType(b'RuSt')
    assert ChunkType.from_str('RuSt') != ChunkType(b'RUST')
    assert len({ChunkType(b'RuSt'), ChunkType.from_str('RuSt')}) == 1


def test_chunk_type_property_bits_follow_letter_case():
    """Every property bit is the case of its letter, read from the bits of the code."""
    for letter in list(range(65, 91)) + list(range(97, 123)):
        lowercase = letter >= 97
        chunk_type = ChunkType(bytes([letter] * 4))

        assert chunk_type.is_critical is not lowercase
        assert chunk_type.is_public is not lowercase
        assert chunk_type.is_reserved_bit_valid is not lowercase
        assert chunk_type.is_safe_to_copy is lowercase

'''
# Chunk type code

Four bytes restricted to the uppercase and lowercase ASCII letters (65-90
and 97-122). Encoders/decoders should treat them as fixed binary values
rather than character strings.

Bit 5 of each byte (the one that makes the difference between uppercase and
lowercase) carries a property of the chunk:

 1. ancillary bit (first byte): 0 means critical, 1 ancillary
 2. private bit (second byte): 0 means public, 1 private
 3. reserved bit (third byte): must be 0 in files conforming to this version of PNG
 4. safe-to-copy bit (fourth byte): 0 means unsafe to copy, 1 safe to copy

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
from bitstring import Bits

from .enum import ChunkTypeFlag
from .exceptions import InvalidByteException, InvalidLengthException


CHUNK_TYPE_SIZE = 4
PROPERTY_BIT = 5


def is_valid_byte(byte: int) -> bool:
    return 65 <= byte <= 90 or 97 <= byte <= 122


class ChunkType(object):
    """A 4-byte PNG chunk type code.

    Construction is the only validation: an instance always holds four
    ASCII letters. The reserved bit is reported, never rejected."""

    def __init__(self, raw: bytes):
        raw = bytes(raw)

        if len(raw) != CHUNK_TYPE_SIZE:
            raise InvalidLengthException(len(raw))

        for byte in raw:
            if not is_valid_byte(byte):
                raise InvalidByteException(byte)

        self._raw = raw
        self._bits = Bits(raw)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "ChunkType":
        return cls(raw)

    @classmethod
    def from_str(cls, value: str) -> "ChunkType":
        return cls(value.encode('utf-8'))

    @property
    def raw(self) -> bytes:
        return self._raw

    def __bytes__(self):
        return self._raw

    def __str__(self):
        # only ASCII letters survive the constructor
        return self._raw.decode('ascii')

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self)

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def _is_property_bit_set(self, index: int) -> bool:
        # bitstring counts from the most significant bit
        return self._bits[index * 8 + (7 - PROPERTY_BIT)]

    @property
    def is_critical(self) -> bool:
        return not self._is_property_bit_set(0)

    @property
    def is_public(self) -> bool:
        return not self._is_property_bit_set(1)

    @property
    def is_reserved_bit_valid(self) -> bool:
        return not self._is_property_bit_set(2)

    @property
    def is_safe_to_copy(self) -> bool:
        return self._is_property_bit_set(3)

    @property
    def is_valid(self) -> bool:
        '''Validity only depends on whether reserved bit is valid.'''
        return self.is_reserved_bit_valid

    @property
    def flags(self) -> ChunkTypeFlag:
        value = ChunkTypeFlag.NONE
        for index, flag in enumerate((
            ChunkTypeFlag.ANCILLARY,
            ChunkTypeFlag.PRIVATE,
            ChunkTypeFlag.RESERVED,
            ChunkTypeFlag.SAFE_TO_COPY,
        )):
            if self._is_property_bit_set(index):
                value |= flag

        return value

'''
# PNG chunk

This is the main data structure of the format: the 4 fields represent
a chunk into the file. Each integer is intended big-endian.

  .--------.------------.--------------.--------.
  | length | chunk type |  chunk data  |  crc   |
  '--------'------------'--------------'--------'
    4 bytes    4 bytes    length bytes   4 bytes

The length counts only the bytes of the data field, so zero is a valid value.
The crc field is network-byte-order CRC-32 computed over the chunk type and
chunk data, but not the length.
'''
import logging
import struct

from .chunk_type import ChunkType, CHUNK_TYPE_SIZE
from .common.crc import crc32
from .exceptions import (
    ChecksumMismatchException,
    LengthTooLargeException,
    NotUtf8Exception,
)
from .streams import Stream


logger = logging.getLogger(__name__)

LENGTH_FORMAT = '>I'
CRC_FORMAT = '>I'
MAX_LENGTH = (1 << 31) - 1
# length + type + crc
CHUNK_OVERHEAD = struct.calcsize(LENGTH_FORMAT) + CHUNK_TYPE_SIZE + struct.calcsize(CRC_FORMAT)


class Chunk(object):
    """A single chunk: once built it cannot be changed, and its crc always
    matches its type and data."""

    def __init__(self, chunk_type: ChunkType, data: bytes):
        length = len(data)
        if length > MAX_LENGTH:
            raise LengthTooLargeException(length)

        self._chunk_type = chunk_type
        self._data = bytes(data)
        self._length = length
        self._crc = crc32(chunk_type.raw, self._data)

    @classmethod
    def unpack(cls, stream: Stream) -> "Chunk":
        '''Read a chunk from the actual position of the stream. The stream is
        left just after the crc.'''
        length = struct.unpack(LENGTH_FORMAT, stream.read_exactly(struct.calcsize(LENGTH_FORMAT), 'length'))[0]
        logger.debug('unpacking chunk with declared length %d' % length)

        if length > MAX_LENGTH:
            raise LengthTooLargeException(length)

        chunk_type = ChunkType(stream.read_exactly(CHUNK_TYPE_SIZE, 'type'))
        data = stream.read_exactly(length, 'data')
        supplied = struct.unpack(CRC_FORMAT, stream.read_exactly(struct.calcsize(CRC_FORMAT), 'crc'))[0]

        expected = crc32(chunk_type.raw, data)
        if supplied != expected:
            raise ChecksumMismatchException(supplied, expected)

        chunk = cls.__new__(cls)
        chunk._chunk_type = chunk_type
        chunk._data = data
        chunk._length = length
        chunk._crc = supplied

        logger.debug('unpacked %r' % chunk)

        return chunk

    @classmethod
    def from_bytes(cls, data: bytes) -> "Chunk":
        '''Decode the chunk at the start of data, trailing bytes are ignored.'''
        return cls.unpack(Stream(data))

    @property
    def length(self) -> int:
        return self._length

    @property
    def chunk_type(self) -> ChunkType:
        return self._chunk_type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def crc(self) -> int:
        return self._crc

    @property
    def size(self) -> int:
        return CHUNK_OVERHEAD + self._length

    def data_as_string(self) -> str:
        try:
            return self._data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise NotUtf8Exception(e) from e

    @property
    def raw(self) -> bytes:
        return b''.join([
            struct.pack(LENGTH_FORMAT, self._length),
            self._chunk_type.raw,
            self._data,
            struct.pack(CRC_FORMAT, self._crc),
        ])

    def as_bytes(self) -> bytes:
        return self.raw

    def __bytes__(self):
        return self.raw

    def pack(self, stream=None):
        '''Write the chunk into the stream (a new one if not given) and
        return the stream.'''
        stream = Stream(b'') if stream is None else stream
        stream.write(self.raw)

        return stream

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented

        return (
            self._length == other._length
            and self._chunk_type == other._chunk_type
            and self._data == other._data
            and self._crc == other._crc
        )

    def __hash__(self):
        return hash((self._chunk_type, self._data))

    def __repr__(self):
        return '<%s(type=%s,length=%d,crc=0x%08x)>' % (
            self.__class__.__name__,
            self._chunk_type,
            self._length,
            self._crc,
        )

    def __str__(self):
        return 'Chunk {type: %s, length: %d, crc: %08x, data: %s}' % (
            self._chunk_type,
            self._length,
            self._crc,
            self._data[:16].hex() + ('...' if self._length > 16 else ''),
        )

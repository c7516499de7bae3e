'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html>.

A file is the 8 bytes signature followed by a sequence of chunks; the
first one is IHDR and the last one IEND.

# Critical chunks

 1. IHDR: contains image's width, height, bit depth, color type, compression method, filter method and interlace method
 2. PLTE: contains the palette data
 3. IDAT: contains the actual image data (compressed)
 4. IEND: is the terminator chunk

Here the chunks are never interpreted: we only need to locate, add and
remove them.
'''
import logging
from typing import List, Optional

from .chunk import Chunk
from .enum import Compliant
from .exceptions import (
    ChunkException,
    ChunkNotFoundException,
    ChunkTypeException,
    ChunkUnpackException,
    MagicException,
    ReservedBitException,
)
from .streams import Stream


logger = logging.getLogger(__name__)

PNG_SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'


class Png(object):

    def __init__(self, chunks: Optional[List[Chunk]] = None):
        self._header = PNG_SIGNATURE
        self._chunks = list(chunks) if chunks else []

    @classmethod
    def unpack(cls, stream: Stream, compliant=Compliant.MAGIC) -> "Png":
        signature = stream.read(len(PNG_SIGNATURE))

        if signature != PNG_SIGNATURE:
            logger.warning('the magic doesn\'t correspond: %r' % signature)
            if compliant & Compliant.MAGIC:
                raise MagicException(signature, chain=['header'])

        png = cls()
        png._header = signature

        while not stream.at_eof():
            index = len(png._chunks)
            logger.debug('unpacking chunk #%d' % index)

            try:
                chunk = Chunk.unpack(stream)
            except (ChunkException, ChunkTypeException) as e:
                raise ChunkUnpackException(chain=[f'chunks[{index}]'] + e.chain) from e

            if not chunk.chunk_type.is_reserved_bit_valid:
                logger.warning("chunk type '%s' has the reserved bit set" % chunk.chunk_type)
                if compliant & Compliant.RESERVED:
                    raise ReservedBitException(str(chunk.chunk_type), chain=[f'chunks[{index}]'])

            png._chunks.append(chunk)

        return png

    @classmethod
    def from_bytes(cls, data: bytes, compliant=Compliant.MAGIC) -> "Png":
        return cls.unpack(Stream(data), compliant=compliant)

    @classmethod
    def from_file(cls, path, compliant=Compliant.MAGIC) -> "Png":
        with Stream(path) as stream:
            return cls.unpack(stream, compliant=compliant)

    @property
    def header(self) -> bytes:
        return self._header

    @property
    def chunks(self) -> List[Chunk]:
        return list(self._chunks)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self):
        return iter(self._chunks)

    def append_chunk(self, chunk: Chunk) -> None:
        self._chunks.append(chunk)

    def insert_chunk(self, index: int, chunk: Chunk) -> None:
        self._chunks.insert(index, chunk)

    def chunks_by_type(self, chunk_type: str) -> List[Chunk]:
        return [_ for _ in self._chunks if str(_.chunk_type) == chunk_type]

    def chunk_by_type(self, chunk_type: str) -> Optional[Chunk]:
        chunks = self.chunks_by_type(chunk_type)

        return chunks[0] if chunks else None

    def remove_first_chunk(self, chunk_type: str) -> Chunk:
        for index, chunk in enumerate(self._chunks):
            if str(chunk.chunk_type) == chunk_type:
                logger.debug('removing chunk #%d (%s)' % (index, chunk_type))
                return self._chunks.pop(index)

        raise ChunkNotFoundException(chunk_type)

    @property
    def raw(self) -> bytes:
        return self._header + b''.join([_.raw for _ in self._chunks])

    def as_bytes(self) -> bytes:
        return self.raw

    def __bytes__(self):
        return self.raw

    def pack(self, stream=None):
        stream = Stream(b'') if stream is None else stream
        stream.write(self._header)

        for chunk in self._chunks:
            chunk.pack(stream)

        return stream

    def save(self, path) -> None:
        with Stream(path, flags='wb') as stream:
            self.pack(stream)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join([repr(_) for _ in self._chunks]))

    def __str__(self):
        msg = 'PNG with %d chunks\n' % len(self._chunks)
        for idx, chunk in enumerate(self._chunks):
            msg += '[%02d] %s\n' % (idx, chunk)
        return msg

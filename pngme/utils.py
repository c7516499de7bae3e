import logging

from .chunk import Chunk
from .chunk_type import ChunkType
from .exceptions import ChunkNotFoundException


logger = logging.getLogger(__name__)


def get_chunk_by_name(chunks, name):
    chunk = list(filter(lambda x: str(x.chunk_type) == name, chunks))

    if len(chunk) == 0:
        raise ChunkNotFoundException(name)

    return chunk if len(chunk) > 1 else chunk[0]


def encode_message(png, chunk_type, message):
    '''Hide message into a new chunk of the given type.

    The chunk is placed just before IEND so that the file stays well formed,
    if there is no IEND it is appended.'''
    chunk = Chunk(ChunkType.from_str(chunk_type), message.encode('utf-8'))

    for index, existing in enumerate(png):
        if str(existing.chunk_type) == 'IEND':
            logger.debug(f'inserting {chunk!r} at index {index}')
            png.insert_chunk(index, chunk)
            break
    else:
        logger.debug(f'appending {chunk!r}')
        png.append_chunk(chunk)

    return chunk


def decode_message(png, chunk_type):
    chunk = png.chunk_by_type(chunk_type)

    if chunk is None:
        raise ChunkNotFoundException(chunk_type)

    return chunk.data_as_string()


def remove_message(png, chunk_type):
    return png.remove_first_chunk(chunk_type)

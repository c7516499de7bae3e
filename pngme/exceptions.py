class PngmeException(Exception):
    '''Base class to extend in order to throw exception in pngme.

    It takes an optional keyword argument that represents the chain of the
    layer that caused the exception.
    '''

    def __init__(self, *args, chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(*args)


class ChunkTypeException(PngmeException):
    pass


class InvalidByteException(ChunkTypeException):
    '''A chunk type byte is not an ASCII letter.'''

    def __init__(self, byte, **kwargs):
        self.byte = byte
        super().__init__(f'invalid byte {byte} (0b{byte:08b}) in chunk type', **kwargs)


class InvalidLengthException(ChunkTypeException):

    def __init__(self, length, **kwargs):
        self.length = length
        super().__init__(f'chunk type has length {length} (expected 4)', **kwargs)


class ChunkException(PngmeException):
    pass


class LengthTooLargeException(ChunkException):

    def __init__(self, length, **kwargs):
        self.length = length
        super().__init__(f'chunk length {length} is larger than 2^31 - 1', **kwargs)


class ChecksumMismatchException(ChunkException):

    def __init__(self, supplied, expected, **kwargs):
        self.supplied = supplied
        self.expected = expected
        super().__init__(f'crc mismatch: supplied 0x{supplied:08x}, expected 0x{expected:08x}', **kwargs)


class TruncatedBufferException(ChunkException):
    '''Not enough bytes left to read the field named `field`.'''

    def __init__(self, field, expected, available, **kwargs):
        self.field = field
        self.expected = expected
        self.available = available
        super().__init__(f"field '{field}' needs {expected} bytes but only {available} are available", **kwargs)


class NotUtf8Exception(ChunkException):

    def __init__(self, error, **kwargs):
        self.error = error
        super().__init__(f'chunk data is not valid UTF-8: {error}', **kwargs)


class PngException(PngmeException):
    pass


class MagicException(PngException):

    def __init__(self, signature, **kwargs):
        self.signature = signature
        super().__init__(f'wrong PNG signature {signature!r}', **kwargs)


class ReservedBitException(PngException):
    '''This is raised only when the reserved bit compliance is requested.'''

    def __init__(self, chunk_type, **kwargs):
        self.chunk_type = chunk_type
        super().__init__(f"chunk type '{chunk_type}' has the reserved bit set", **kwargs)


class ChunkUnpackException(PngException):

    def __str__(self):
        return 'failed to unpack %s' % '.'.join(self.chain)


class ChunkNotFoundException(PngException):

    def __init__(self, chunk_type, **kwargs):
        self.chunk_type = chunk_type
        super().__init__(f"no chunk with type '{chunk_type}'", **kwargs)

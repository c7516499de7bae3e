import io
import logging

from .exceptions import TruncatedBufferException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/file object to
    uniform its properties: mainly we need a read() that fails loudly
    when the data is not enough.'''
    def __init__(self, obj, flags='rb'):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.flags = flags
        self.obj = obj
        self.history = []

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to use as stream' % self._type.__name__)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.obj.close()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        self.obj = open(self.obj, self.flags)

    def init_PosixPath(self):
        self.obj = str(self.obj)
        self.init_str()

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    init_bytearray = init_bytes

    def init_memoryview(self):
        self.obj = io.BytesIO(self.obj.tobytes())

    def seek(self, offset, whence=io.SEEK_SET):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        return self.obj.seek(offset, whence)

    def read_exactly(self, size, field):
        '''Read exactly size bytes for the field named field, otherwise
        raise TruncatedBufferException.'''
        data = self.obj.read(size)

        if len(data) != size:
            raise TruncatedBufferException(field, size, len(data))

        return data

    def remaining(self):
        '''Number of bytes between the actual position and the end of the stream.'''
        self.save()
        start = self.obj.tell()
        end = self.seek(0, io.SEEK_END)
        self.restore()

        return end - start

    def at_eof(self):
        return self.remaining() == 0

    def write(self, data):
        return self.obj.write(data)

    def getvalue(self):
        return self.obj.getvalue()

    def save(self):
        self.history.append(self.obj.tell())

    def restore(self):
        old_seek = self.history.pop()
        self.seek(old_seek)

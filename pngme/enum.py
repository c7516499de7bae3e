from enum import Flag


class Compliant(Flag):
    '''It indicates which degree of compliantness the data must reflect the format'''
    NONE     = 0
    MAGIC    = 1 << 0
    RESERVED = 1 << 1


class ChunkTypeFlag(Flag):
    '''Property bits of a chunk type code, one for each of its bytes.

    A flag is present when bit 5 of the corresponding byte is set, i.e. when
    the letter is lowercase.'''
    NONE         = 0
    ANCILLARY    = 1 << 0
    PRIVATE      = 1 << 1
    RESERVED     = 1 << 2
    SAFE_TO_COPY = 1 << 3

"""
# pngme: hide messages into PNG files.

A PNG file is a signature followed by a sequence of chunks, each one
self-describing its length, type, data and integrity via a CRC.

Two basic main operations are defined for a chunk:

 1. unpack(): reading the binary data and build a high-level representation
    of that, checking along the way that the data respects the format
    (length bounds, type code letters and crc).

 2. pack(): encode the high-level representation into binary data; this
    can never fail since a chunk is validated when built.

The messages are stored as the data of a chunk with a type code of choice,
ancillary and private chunk types like "ruSt" are the ones a decoder
is allowed to ignore.
"""

# MIT License
#
# Copyright (c) 2024 R. Dunbar Poor <rdpoor # gmail.com>
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Table-driven CRC-16 computation.

update() is the single routine that folds bytes into a running crc.  It
complements the crc on the way in and again on the way out, so the value it
returns can be handed straight back to the next call:

    update(update(0, tab, a), tab, b) == update(0, tab, a + b)

Everything else in this module (checksum(), the Crc16 digest object and its
constructors) is a thin layer over update().
"""

from abc import ABC, abstractmethod

from crc16.table import ANSI_TABLE, CCITT_TABLE

# The size of a CRC-16 checksum in bytes.
SIZE = 2
CHECKSUM_SIZE_BYTES = SIZE

# Bytes are folded in one at a time.
BLOCK_SIZE = 1


def as_bytes(data):
    """
    Return data as bytes.  Accepts bytes-like objects and iterables of ints in
    0..255; anything else raises TypeError or ValueError.
    """
    if isinstance(data, int):
        raise TypeError('data must be bytes-like or an iterable of ints, not int')
    return bytes(data)


def update(crc, table, data):
    """
    Return the result of adding the bytes in data to crc, using table.
    """
    data = as_bytes(data)
    crc = ~crc & 0xffff
    for b in data:
        crc = table[(crc & 0xff) ^ b] ^ (crc >> 8)
    return ~crc & 0xffff


def checksum(data, table):
    """Return the CRC-16 of data using the polynomial behind table."""
    return update(0, table, data)


def checksum_ansi(data):
    """Return the CRC-16 of data using the ANSI polynomial."""
    return update(0, ANSI_TABLE, data)


def checksum_ccitt(data):
    """Return the CRC-16 of data using the CCITT polynomial."""
    return update(0, CCITT_TABLE, data)


class Hash16(ABC):
    """
    Common interface for 16-bit hash functions.  Code that only needs to
    reset, feed and read a checksum can accept any Hash16 without caring
    which algorithm sits behind it.

    write() consumes every byte it is given and returns the count; sum()
    appends the big-endian checksum to a caller-supplied prefix.
    """

    @abstractmethod
    def reset(self):
        pass

    @abstractmethod
    def write(self, data):
        pass

    @abstractmethod
    def sum16(self):
        pass

    @abstractmethod
    def block_size(self):
        pass

    @abstractmethod
    def size(self):
        pass

    def sum(self, prefix=b''):
        """
        Return prefix followed by the current checksum, high byte first.
        prefix itself is left untouched.
        """
        return bytes(prefix) + self.sum16().to_bytes(self.size(), 'big')

    # hashlib-style spellings.  block_size and size stay methods, so this is
    # not a drop-in hashlib object; digest_size is the int hashlib expects.

    digest_size = SIZE

    def update(self, data):
        self.write(data)

    def digest(self):
        return self.sum()

    def hexdigest(self):
        return self.sum().hex()


class Crc16(Hash16):
    """
    Running CRC-16 over a fixed table.  The table is shared, the crc is not:
    one Crc16 belongs to one caller at a time.
    """

    name = 'crc16'

    def __init__(self, table):
        self.crc = 0
        self.table = table

    def reset(self):
        self.crc = 0

    def write(self, data):
        data = as_bytes(data)
        self.crc = update(self.crc, self.table, data)
        return len(data)

    def sum16(self):
        return self.crc

    def block_size(self):
        return BLOCK_SIZE

    def size(self):
        return SIZE

    def copy(self):
        """Return an independent Crc16 with the same table and crc."""
        other = Crc16(self.table)
        other.crc = self.crc
        return other

    def __repr__(self):
        return f'Crc16(crc=0x{self.crc:04x})'


def new_digest(table):
    """Return a Crc16 digest using the polynomial behind table."""
    return Crc16(table)


def new_ansi_digest():
    """Return a Crc16 digest using the ANSI polynomial."""
    return Crc16(ANSI_TABLE)


def new_ccitt_digest():
    """Return a Crc16 digest using the CCITT polynomial."""
    return Crc16(CCITT_TABLE)

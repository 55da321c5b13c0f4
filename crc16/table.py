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
Lookup tables for the table-driven CRC-16.

A table maps each byte value 0..255 to its partial CRC contribution for one
generator polynomial.  The polynomial is given in the bit-reversed form used
by the least-significant-bit-first algorithm in crc16.digest.

Tables are tuples and are never modified once built, so a single table may
be shared by any number of digests.
"""

# Bisync, Modbus, USB, ANSI X3.28, SIA DC-07, many others
ANSI = 0x8005
# X.25, V.41, HDLC FCS, XMODEM, Bluetooth, PACTOR, SD, many others
CCITT = 0x1021

ANSI_POLY = ANSI
CCITT_POLY = CCITT

TABLE_SIZE = 256


def build_table(poly):
    """
    Build the 256-entry table for poly.  Each entry is the result of shifting
    its byte value right eight times, xor-ing in poly whenever a one bit
    falls off the low end.
    """
    if not 0 <= poly <= 0xffff:
        raise ValueError(f'polynomial 0x{poly:x} does not fit in 16 bits')
    table = []
    for i in range(TABLE_SIZE):
        crc = i
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ poly
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


ANSI_TABLE = build_table(ANSI)
CCITT_TABLE = build_table(CCITT)


def make_table(poly):
    """
    Return the table for poly.  The ANSI and CCITT tables are built once at
    import time and returned as-is; any other polynomial gets a fresh table.
    """
    if poly == ANSI:
        return ANSI_TABLE
    if poly == CCITT:
        return CCITT_TABLE
    return build_table(poly)


table_for = make_table

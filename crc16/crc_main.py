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

import argparse
import sys

from crc16.digest import new_digest
from crc16.table import ANSI, CCITT, make_table

NAMED_POLYS = {'ansi': ANSI, 'ccitt': CCITT}

DEFAULT_CHUNK = 4096


def parse_poly(x):
    """Accept a polynomial name (ansi, ccitt) or a hex or decimal integer."""
    name = x.lower()
    if name in NAMED_POLYS:
        return NAMED_POLYS[name]
    try:
        poly = int(x, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f'unrecognized polynomial {x!r}')
    if not 0 <= poly <= 0xffff:
        raise argparse.ArgumentTypeError(f'polynomial {x} does not fit in 16 bits')
    return poly


def auto_int(x):
    """Accept hex or decimal argument"""
    return int(x, 0)


class CrcMain:

    def __init__(self, files=None, poly=ANSI, chunk=DEFAULT_CHUNK,
                 verbose=False):
        self.files = files or ['-']
        self.poly = poly
        self.chunk = chunk
        self.verbose = verbose
        self.table = make_table(poly)

    def crc_stream(self, f):
        """
        Compute the CRC of everything readable from binary stream f, reading
        self.chunk bytes at a time.
        """
        digest = new_digest(self.table)
        total = 0
        while True:
            buf = f.read(self.chunk)
            if not buf:
                break
            total += digest.write(buf)
        self.vprint(f'read {total} bytes')
        return digest.sum16()

    def crc_file(self, filename):
        """Compute the CRC of a file, or of stdin if filename is '-'."""
        if filename == '-':
            return self.crc_stream(sys.stdin.buffer)
        with open(filename, 'rb') as f:
            return self.crc_stream(f)

    def run(self):
        """
        Print the CRC of each input.  Returns 0 if every input was read, 1 if
        any could not be.
        """
        self.vprint(f'Using polynomial 0x{self.poly:04x}')
        status = 0
        for filename in self.files:
            self.vprint(f'Computing CRC of {filename}')
            try:
                crc = self.crc_file(filename)
            except OSError as e:
                print(f'crc16: {filename}: {e.strerror or e}', file=sys.stderr)
                status = 1
                continue
            print(f'0x{crc:04x}  {filename}', flush=True)
        return status

    # helper functions

    def vprint(self, *args):
        if self.verbose:
            print(*args, flush=True)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='crc16', description='Print the CRC-16 of files.')
    parser.add_argument('files', nargs='*', metavar='FILE',
                        help="files to checksum, '-' or none for stdin")
    parser.add_argument('-p', '--poly', type=parse_poly, default=ANSI,
                        help='ansi, ccitt or a 16 bit polynomial (default ansi)')
    parser.add_argument('-c', '--chunk', type=auto_int, default=DEFAULT_CHUNK,
                        help=f'read size in bytes (default {DEFAULT_CHUNK})')
    parser.add_argument('-v', '--verbose', action='store_true', help='enable debug printing')
    args = parser.parse_args(argv)

    if args.chunk <= 0:
        parser.error('chunk must be positive')

    crm = CrcMain(args.files, args.poly, args.chunk, args.verbose)
    return crm.run()


if __name__ == '__main__':
    sys.exit(main())

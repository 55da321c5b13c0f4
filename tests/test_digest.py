import pytest

from crc16 import (ANSI_TABLE, CCITT_TABLE, CHECKSUM_SIZE_BYTES, Crc16,
                   Hash16, build_table, checksum, checksum_ansi,
                   checksum_ccitt, make_table, new_ansi_digest,
                   new_ccitt_digest, new_digest, update)

CHECK = b'123456789'


# Reference values for the update() convention: complement on entry and exit,
# least significant bit first.  0x8005 and 0x1021 are used un-reflected in the
# LSB-first loop, so these are not the CRC-16/ARC or XMODEM catalogue values.

def test_ansi_check_value():
    assert checksum_ansi(CHECK) == 0xc284


def test_ccitt_check_value():
    assert checksum_ccitt(CHECK) == 0xe245


def test_crc16_usb_check_value():
    # Reflected IBM polynomial, complemented in and out: CRC-16/USB.
    assert checksum(CHECK, make_table(0xa001)) == 0xb4c8


def test_crc16_x25_check_value():
    # Reflected CCITT polynomial, complemented in and out: CRC-16/X-25.
    assert checksum(CHECK, make_table(0x8408)) == 0x906e


@pytest.mark.parametrize('data, ansi, ccitt', [
    (b'a', 0xc501, 0xfe42),
    (b'abc', 0x60ee, 0xf14c),
    (b'hello world', 0x47d6, 0xe1a8),
])
def test_short_strings(data, ansi, ccitt):
    assert checksum_ansi(data) == ansi
    assert checksum_ccitt(data) == ccitt


@pytest.mark.parametrize('table', [ANSI_TABLE, CCITT_TABLE, build_table(0xbeef)])
def test_empty_input(table):
    assert checksum(b'', table) == 0
    assert update(0, table, b'') == 0


def test_update_with_empty_data_is_identity():
    for crc in (0, 1, 0x1234, 0xffff):
        assert update(crc, ANSI_TABLE, b'') == crc


def test_checksum_matches_named_helpers():
    assert checksum(CHECK, ANSI_TABLE) == checksum_ansi(CHECK)
    assert checksum(CHECK, CCITT_TABLE) == checksum_ccitt(CHECK)


def test_update_chains():
    crc = update(0, ANSI_TABLE, b'1234')
    assert crc == 0x75b7
    assert update(crc, ANSI_TABLE, b'56789') == 0xc284
    crc = update(0, CCITT_TABLE, b'1234')
    assert crc == 0xe01e
    assert update(crc, CCITT_TABLE, b'56789') == 0xe245


def test_bytes_like_inputs():
    expected = checksum_ansi(CHECK)
    assert checksum_ansi(bytearray(CHECK)) == expected
    assert checksum_ansi(memoryview(CHECK)) == expected
    assert checksum_ansi(list(CHECK)) == expected


def test_polynomials_differ():
    for data in (CHECK, b'a', b'The quick brown fox'):
        assert checksum_ansi(data) != checksum_ccitt(data)


@pytest.mark.parametrize('table', [ANSI_TABLE, CCITT_TABLE])
def test_incremental_matches_one_shot(table):
    data = b'The quick brown fox jumps over the lazy dog'
    expected = checksum(data, table)
    for split in range(len(data) + 1):
        d = new_digest(table)
        d.write(data[:split])
        d.write(data[split:])
        assert d.sum16() == expected


def test_byte_at_a_time():
    d = new_ccitt_digest()
    for b in CHECK:
        d.write(bytes([b]))
    assert d.sum16() == 0xe245


def test_new_digest_starts_at_zero():
    for d in (new_digest(build_table(0xa001)), new_ansi_digest(),
              new_ccitt_digest()):
        assert d.sum16() == 0
        assert d.sum() == b'\x00\x00'


def test_named_constructors_use_cached_tables():
    assert new_ansi_digest().table is ANSI_TABLE
    assert new_ccitt_digest().table is CCITT_TABLE


def test_write_returns_byte_count():
    d = new_ansi_digest()
    assert d.write(b'') == 0
    assert d.write(CHECK) == len(CHECK)
    assert d.write(bytes(1000)) == 1000


def test_reset():
    d = new_ansi_digest()
    d.write(CHECK)
    assert d.sum16() == 0xc284
    d.reset()
    assert d.sum16() == 0
    assert d.table is ANSI_TABLE
    d.write(CHECK)
    assert d.sum16() == 0xc284


def test_sum16_does_not_mutate():
    d = new_ansi_digest()
    d.write(CHECK)
    assert d.sum16() == d.sum16() == 0xc284
    d.write(b'')
    assert d.sum16() == 0xc284


@pytest.mark.parametrize('prefix', [b'', b'\x01', b'header:'])
def test_sum_appends_big_endian(prefix):
    d = new_ansi_digest()
    d.write(CHECK)
    assert d.sum(prefix) == prefix + b'\xc2\x84'


def test_sum_leaves_prefix_alone():
    prefix = bytearray(b'ab')
    d = new_ccitt_digest()
    d.write(CHECK)
    assert d.sum(prefix) == b'ab\xe2\x45'
    assert prefix == bytearray(b'ab')


def test_sizes():
    d = new_ansi_digest()
    assert d.size() == CHECKSUM_SIZE_BYTES == 2
    assert d.block_size() == 1
    assert len(d.sum()) == d.size()


def test_hashlib_style_interface():
    d = new_ansi_digest()
    assert d.update(b'1234') is None
    d.update(b'56789')
    assert d.digest() == b'\xc2\x84'
    assert d.hexdigest() == 'c284'
    assert d.name == 'crc16'


def test_copy_is_independent():
    d = new_ansi_digest()
    d.write(b'1234')
    c = d.copy()
    c.write(b'56789')
    assert c.sum16() == 0xc284
    assert d.sum16() == 0x75b7
    assert c.table is d.table


def test_crc16_is_a_hash16():
    assert isinstance(new_ansi_digest(), Hash16)
    assert isinstance(Crc16(CCITT_TABLE), Hash16)


def test_hash16_is_abstract():
    with pytest.raises(TypeError):
        Hash16()


def test_repr():
    d = new_ansi_digest()
    d.write(CHECK)
    assert repr(d) == 'Crc16(crc=0xc284)'


@pytest.mark.parametrize('data', [[-1], [256], [-1, 5], [5, 300]])
def test_out_of_range_byte_values(data):
    with pytest.raises(ValueError):
        update(0, ANSI_TABLE, data)
    with pytest.raises(ValueError):
        checksum_ccitt(data)


@pytest.mark.parametrize('data', [5, 'abc', None])
def test_non_byte_data(data):
    with pytest.raises(TypeError):
        update(0, ANSI_TABLE, data)


def test_write_accepts_generators():
    d = new_ansi_digest()
    assert d.write(b for b in CHECK) == len(CHECK)
    assert d.sum16() == 0xc284


@pytest.mark.parametrize('data', [[1, 256], [-1], 7, 'abc'])
def test_failed_write_leaves_state_alone(data):
    d = new_ansi_digest()
    d.write(b'1234')
    with pytest.raises((TypeError, ValueError)):
        d.write(data)
    assert d.sum16() == 0x75b7


def test_digest_size_attribute():
    d = new_ccitt_digest()
    assert d.digest_size == 2
    assert len(d.digest()) == d.digest_size

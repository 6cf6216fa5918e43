"""Tests for digest serialization and the append-to-buffer contract."""

from fletcher4 import BLOCK_SIZE, SIZE, Fletcher4

EXPECTED_SUM = bytes([
    8, 12, 16, 20, 0, 0, 0, 0,
    15, 22, 29, 36, 0, 0, 0, 0,
    23, 34, 45, 56, 0, 0, 0, 0,
    32, 48, 64, 80, 0, 0, 0, 0,
])


def twelve_byte_checksum():
    ck = Fletcher4()
    ck.write(bytes([1, 2, 3, 4, 5, 6, 7, 8]))
    ck.write(bytes([2, 4, 6, 8]))
    return ck


def test_sum_layout():
    assert twelve_byte_checksum().sum() == EXPECTED_SUM


def test_sum_appends():
    ck = twelve_byte_checksum()
    words = ck.sum_words()
    buf = ck.sum(bytearray())
    buf = ck.sum(buf)
    assert buf == EXPECTED_SUM + EXPECTED_SUM
    assert ck.sum_words() == words


def test_sum_extends_bytearray_in_place():
    buf = bytearray(b"hdr:")
    out = twelve_byte_checksum().sum(buf)
    assert out is buf
    assert bytes(buf) == b"hdr:" + EXPECTED_SUM


def test_sum_copies_immutable_prefix():
    prefix = b"hdr:"
    out = twelve_byte_checksum().sum(prefix)
    assert isinstance(out, bytearray)
    assert out == prefix + EXPECTED_SUM
    assert prefix == b"hdr:"


def test_sum_of_fresh_accumulator_is_zero():
    assert Fletcher4().sum() == bytes(SIZE)


def test_digest_and_hexdigest():
    ck = twelve_byte_checksum()
    assert ck.digest() == EXPECTED_SUM
    assert isinstance(ck.digest(), bytes)
    assert ck.hexdigest() == EXPECTED_SUM.hex()


def test_size_constants():
    ck = Fletcher4()
    assert ck.size == SIZE == 32
    assert ck.block_size == BLOCK_SIZE == 4
    assert ck.digest_size == 32
    assert ck.name == "fletcher4"

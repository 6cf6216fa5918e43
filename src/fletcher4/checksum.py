"""Streaming Fletcher-4 checksum.

The input is consumed as little-endian 32-bit words. For each word ``w``
the four running sums are updated as::

    a += w
    b += a
    c += b
    d += c

with every sum kept modulo 2**64, so later words weigh more heavily on
``b``, ``c`` and ``d`` than earlier ones. This is the checksum ZFS uses for
block integrity; it is not a cryptographic hash.
"""

from __future__ import annotations

import struct

from loguru import logger

from fletcher4.constants import BLOCK_SIZE, DIGEST_FORMAT, SIZE, UINT64_MASK, WORD_FORMAT
from fletcher4.digest import Fletcher4Digest
from fletcher4.hasher import MisalignedWriteError, WordHasher

_word = struct.Struct(WORD_FORMAT)
_digest = struct.Struct(DIGEST_FORMAT)


class Fletcher4(WordHasher):
    """Fletcher-4 accumulator.

    Every write must be a whole number of 4-byte words. Callers that receive
    data in arbitrary chunks have to buffer the trailing partial word
    themselves; the accumulator never pads or truncates.

    Not thread-safe: use one accumulator per writer.
    """

    name = "fletcher4"
    digest_size = SIZE

    def __init__(self, data: bytes | bytearray | memoryview | None = None):
        self._a = self._b = self._c = self._d = 0
        if data is not None:
            self.write(data)

    @property
    def size(self) -> int:
        return SIZE

    @property
    def block_size(self) -> int:
        return BLOCK_SIZE

    def reset(self) -> None:
        self._a = self._b = self._c = self._d = 0
        logger.debug("fletcher4 accumulator reset")

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Feed word-aligned ``data`` into the checksum, returning its size in bytes.

        Raises MisalignedWriteError, leaving the state untouched, when the
        length is not a multiple of the block size.
        """
        view = memoryview(data).cast("B")
        length = view.nbytes
        if length % BLOCK_SIZE:
            logger.debug("rejected misaligned write of {} bytes", length)
            raise MisalignedWriteError(length, BLOCK_SIZE)

        a, b, c, d = self._a, self._b, self._c, self._d
        for (w,) in _word.iter_unpack(view):
            a = (a + w) & UINT64_MASK
            b = (b + a) & UINT64_MASK
            c = (c + b) & UINT64_MASK
            d = (d + c) & UINT64_MASK
        self._a, self._b, self._c, self._d = a, b, c, d
        return length

    def update(self, data: bytes | bytearray | memoryview) -> None:
        self.write(data)

    def sum_words(self) -> tuple[int, int, int, int]:
        return self._a, self._b, self._c, self._d

    def sum(self, buf: bytearray | bytes | None = None) -> bytearray:
        if buf is None:
            buf = bytearray()
        elif not isinstance(buf, bytearray):
            buf = bytearray(buf)
        buf += _digest.pack(self._a, self._b, self._c, self._d)
        return buf

    def snapshot(self) -> Fletcher4Digest:
        return Fletcher4Digest.from_words(self.sum_words())

    def copy(self) -> Fletcher4:
        other = Fletcher4()
        other._a, other._b, other._c, other._d = self.sum_words()
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fletcher4):
            return NotImplemented
        return self.sum_words() == other.sum_words()

    def __repr__(self) -> str:
        return "Fletcher4(a=0x{:x}, b=0x{:x}, c=0x{:x}, d=0x{:x})".format(*self.sum_words())


def new(data: bytes | bytearray | memoryview | None = None) -> Fletcher4:
    """Return a fresh accumulator, optionally fed with ``data``."""
    return Fletcher4(data)


def fletcher4(data: bytes | bytearray | memoryview) -> Fletcher4Digest:
    """Compute the Fletcher-4 checksum of word-aligned ``data`` in one call."""
    return Fletcher4(data).snapshot()

"""Fletcher-4 digest snapshot and its 32-byte wire encoding."""

from __future__ import annotations

import struct
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from fletcher4.constants import DIGEST_FORMAT, SIZE, UINT64_MASK

UInt64 = Annotated[int, Field(ge=0, le=UINT64_MASK)]


class Fletcher4Digest(BaseModel):
    """Four running sums of a Fletcher-4 checksum.

    Wire layout (little-endian, 32 bytes):
        Bytes  0..8:  uint64 a
        Bytes  8..16: uint64 b
        Bytes 16..24: uint64 c
        Bytes 24..32: uint64 d
    """

    model_config = ConfigDict(frozen=True)

    a: UInt64 = 0
    b: UInt64 = 0
    c: UInt64 = 0
    d: UInt64 = 0

    @property
    def words(self) -> tuple[int, int, int, int]:
        return self.a, self.b, self.c, self.d

    def encode(self) -> bytes:
        return struct.pack(DIGEST_FORMAT, self.a, self.b, self.c, self.d)

    def encode_into(self, buf: bytearray, offset: int = 0) -> None:
        struct.pack_into(DIGEST_FORMAT, buf, offset, self.a, self.b, self.c, self.d)

    def hex(self) -> str:
        return self.encode().hex()

    @classmethod
    def from_words(cls, words: tuple[int, int, int, int]) -> Fletcher4Digest:
        a, b, c, d = words
        return cls(a=a, b=b, c=c, d=d)

    @classmethod
    def decode(cls, data: bytes | bytearray, offset: int = 0) -> Fletcher4Digest | None:
        if len(data) - offset < SIZE:
            return None
        return cls.from_words(struct.unpack_from(DIGEST_FORMAT, data, offset))

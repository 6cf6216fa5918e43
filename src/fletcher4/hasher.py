"""Abstract hash interfaces implemented by the checksum accumulators."""

from __future__ import annotations

from abc import ABCMeta, abstractmethod


class MisalignedWriteError(ValueError):
    """Raised when a write is not a whole number of input words."""

    def __init__(self, length: int, block_size: int):
        self.length = length
        self.block_size = block_size
        super().__init__(
            f"Write to checksummer must be a multiple of {block_size} bytes, got {length}"
        )


class Hasher(metaclass=ABCMeta):
    """Minimal streaming hash contract.

    Generic code that only needs to feed bytes and collect a digest should
    depend on this interface rather than a concrete accumulator.
    """

    @property
    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError()

    @property
    @abstractmethod
    def block_size(self) -> int:
        raise NotImplementedError()

    @abstractmethod
    def reset(self) -> None:
        raise NotImplementedError()

    @abstractmethod
    def write(self, data: bytes | bytearray | memoryview) -> int:
        raise NotImplementedError()

    @abstractmethod
    def sum(self, buf: bytearray | bytes | None = None) -> bytearray:
        """Append the current digest to ``buf`` and return it."""
        raise NotImplementedError()

    def digest(self) -> bytes:
        return bytes(self.sum())

    def hexdigest(self) -> str:
        return self.digest().hex()


class WordHasher(Hasher):
    """Hasher that also exposes its state as native 64-bit words."""

    @abstractmethod
    def sum_words(self) -> tuple[int, ...]:
        raise NotImplementedError()

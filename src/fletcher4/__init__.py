"""Fletcher-4 streaming checksum with a generic hash interface."""

from loguru import logger

from fletcher4.checksum import Fletcher4, fletcher4, new
from fletcher4.digest import Fletcher4Digest
from fletcher4.hasher import Hasher, MisalignedWriteError, WordHasher
from fletcher4.constants import (
    SIZE,
    BLOCK_SIZE,
    WORD_COUNT,
)

logger.disable("fletcher4")

__all__ = [
    "Fletcher4",
    "fletcher4",
    "new",
    "Fletcher4Digest",
    "Hasher",
    "WordHasher",
    "MisalignedWriteError",
    "SIZE",
    "BLOCK_SIZE",
    "WORD_COUNT",
]

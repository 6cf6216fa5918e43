"""Fletcher-4 digest constants."""

SIZE = 32  # digest size in bytes: four little-endian uint64 words
BLOCK_SIZE = 4  # input word size in bytes; writes must be a multiple of this
WORD_COUNT = 4
UINT64_MASK = 0xFFFFFFFFFFFFFFFF

WORD_FORMAT = "<I"  # one input word
DIGEST_FORMAT = "<4Q"  # a, b, c, d

"""Width constants for the flat tree index space.

Indices are unsigned 64-bit integers. Python integers are unbounded, so every
public function range-checks its arguments and results against these values.
"""

WORD_BITS = 64
U64_MAX = (1 << WORD_BITS) - 1

# depth(U64_MAX) == 64: all 64 bits set are 64 trailing ones.
MAX_DEPTH = WORD_BITS

LEAF_DEPTH = 0

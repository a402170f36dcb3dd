from __future__ import annotations

from collections.abc import Iterable

UINT32_MASK = 0xFFFFFFFF
GOLDEN_RATIO_32 = 0x9E3779B9
INDEX_OFFSET_32 = 0x85EBCA6B

_MURMUR_C1 = 0xCC9E2D51
_MURMUR_C2 = 0x1B873593
_MURMUR_N = 0xE6546B64
_FMIX_M1 = 0x85EBCA6B
_FMIX_M2 = 0xC2B2AE35


def normalize_u32(value: int, *, field_name: str = "seed") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer")
    return value & UINT32_MASK


def _rotl32(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & UINT32_MASK


def fmix32(value: int) -> int:
    """Murmur3 finalizer: full avalanche of a 32-bit word."""
    h = value & UINT32_MASK
    h ^= h >> 16
    h = (h * _FMIX_M1) & UINT32_MASK
    h ^= h >> 13
    h = (h * _FMIX_M2) & UINT32_MASK
    h ^= h >> 16
    return h


def hash_words(words: Iterable[int], seed: int = 0) -> int:
    """MurmurHash3 (x86, 32-bit) over the little-endian byte image of 32-bit words.

    Equivalent to hashing ``struct.pack("<%dI" % len(words), *words)``, so the
    result is identical on every platform and interpreter.
    """
    h = seed & UINT32_MASK
    length = 0
    for word in words:
        k = ((word & UINT32_MASK) * _MURMUR_C1) & UINT32_MASK
        k = _rotl32(k, 15)
        k = (k * _MURMUR_C2) & UINT32_MASK
        h ^= k
        h = _rotl32(h, 13)
        h = (h * 5 + _MURMUR_N) & UINT32_MASK
        length += 4
    return fmix32(h ^ length)


def mix_nonzero(base_seed: int, index: int) -> int:
    """Mix a base seed and an index/digest into a non-zero 32-bit seed."""
    # Offset both lanes so adjacent seeds and indices do not share structure.
    lane_a = (base_seed & UINT32_MASK) ^ GOLDEN_RATIO_32
    lane_b = (index + INDEX_OFFSET_32) & UINT32_MASK
    mixed = hash_words((lane_a, lane_b))
    return 1 if mixed == 0 else mixed

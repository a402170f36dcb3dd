from __future__ import annotations

from seedgen.seeds.hash import hash_name
from seedgen.seeds.mix import mix_nonzero, normalize_u32


def derive_stream_seed(master_seed: int, stream_name: str | None) -> int:
    """Derive a deterministic non-zero child seed from (master_seed, stream_name)."""
    return mix_nonzero(normalize_u32(master_seed, field_name="master_seed"), hash_name(stream_name))

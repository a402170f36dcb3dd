from __future__ import annotations

import hashlib

from seedgen.seeds.mix import hash_words

EMPTY_NAME_DIGEST = 0
NAME_DIGEST_SIZE = 16


def name_digest_words(name: str) -> tuple[int, int, int, int]:
    digest = hashlib.blake2b(name.encode("utf-8"), digest_size=NAME_DIGEST_SIZE).digest()
    return (
        int.from_bytes(digest[0:4], byteorder="big", signed=False),
        int.from_bytes(digest[4:8], byteorder="big", signed=False),
        int.from_bytes(digest[8:12], byteorder="big", signed=False),
        int.from_bytes(digest[12:16], byteorder="big", signed=False),
    )


def hash_name(name: str | None) -> int:
    """Map a name to a stable 32-bit digest; empty or missing names map to 0."""
    if name is None:
        return EMPTY_NAME_DIGEST
    if not isinstance(name, str):
        raise ValueError("name must be a string or None")
    if not name:
        return EMPTY_NAME_DIGEST
    return hash_words(name_digest_words(name))

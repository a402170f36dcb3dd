from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from seedgen.seeds.mix import UINT32_MASK, normalize_u32
from seedgen.seeds.rng import derive_stream_seed
from seedgen.seeds.runtime import make_runtime_seed

logger = logging.getLogger(__name__)

MASTER_SEED_FIELD = "master_seed"
LAST_MASTER_SEED_FIELD = "last_master_seed"


def _validate_seed_field(payload: dict[str, Any], field_name: str) -> int:
    if field_name not in payload:
        raise ValueError(f"seed state missing field: {field_name}")
    value = payload[field_name]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"seed state.{field_name} must be an integer")
    if value < 0 or value > UINT32_MASK:
        raise ValueError(f"seed state.{field_name} must be an unsigned 32-bit integer")
    return value


def _validate_state_payload(payload: dict[str, Any]) -> tuple[int, int]:
    if not isinstance(payload, dict):
        raise ValueError("seed state must be an object")
    master_seed = _validate_seed_field(payload, MASTER_SEED_FIELD)
    last_master_seed = _validate_seed_field(payload, LAST_MASTER_SEED_FIELD)
    if master_seed == 0:
        raise ValueError("seed state.master_seed must be non-zero")
    return master_seed, last_master_seed


class SeedGenerator:
    """Deterministic sub-seed derivation from a single master seed.

    A zero master seed, whether passed at construction or to ``regenerate``,
    is replaced by a runtime-generated value. ``derive`` is a pure function of
    the current master seed and the name, and never returns zero.
    """

    def __init__(self, master_seed: int = 0, *, frame_counter: Callable[[], int] | None = None) -> None:
        self._frame_counter = frame_counter
        self._lock = threading.Lock()
        self._master_seed = self._resolve_master_seed(master_seed)
        self._last_master_seed = self._master_seed

    @property
    def master_seed(self) -> int:
        return self._master_seed

    @property
    def last_master_seed(self) -> int:
        return self._last_master_seed

    def _resolve_master_seed(self, master_seed: int) -> int:
        normalized = normalize_u32(master_seed, field_name="master_seed")
        if normalized != 0:
            return normalized
        frame_count = self._frame_counter() if self._frame_counter is not None else 0
        return make_runtime_seed(frame_count)

    def regenerate(self, master_seed: int = 0) -> None:
        resolved = self._resolve_master_seed(master_seed)
        with self._lock:
            self._last_master_seed = self._master_seed
            self._master_seed = resolved
            logger.info("Generated new master seed: %d", resolved)

    def derive(self, name: str | None) -> int:
        return derive_stream_seed(master_seed=self._master_seed, stream_name=name)

    def state_payload(self) -> dict[str, int]:
        with self._lock:
            return {
                MASTER_SEED_FIELD: self._master_seed,
                LAST_MASTER_SEED_FIELD: self._last_master_seed,
            }

    @classmethod
    def from_state_payload(
        cls,
        payload: dict[str, Any],
        *,
        frame_counter: Callable[[], int] | None = None,
    ) -> SeedGenerator:
        master_seed, last_master_seed = _validate_state_payload(payload)
        generator = cls(master_seed, frame_counter=frame_counter)
        generator._last_master_seed = last_master_seed
        return generator

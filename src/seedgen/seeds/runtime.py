from __future__ import annotations

import time

from seedgen.seeds.mix import UINT32_MASK


def make_runtime_seed(frame_count: int = 0) -> int:
    """Build a non-zero, non-reproducible seed from process and wall-clock ticks."""
    tick_count = int(time.monotonic() * 1000)
    wall_ticks = time.time_ns() // 100
    seed = (tick_count ^ int(frame_count) ^ wall_ticks) & UINT32_MASK
    return 1 if seed == 0 else seed

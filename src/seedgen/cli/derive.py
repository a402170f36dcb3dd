from __future__ import annotations

import argparse
import logging
import os
from typing import Sequence

from seedgen.seeds.core import SeedGenerator

MASTER_SEED_ENV_VAR = "SEEDGEN_MASTER_SEED"


def _seed_value(value: str) -> int:
    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid seed value: {value!r}") from exc


def _env_master_seed() -> int:
    raw = os.environ.get(MASTER_SEED_ENV_VAR, "").strip()
    if not raw:
        return 0
    try:
        return int(raw, 0)
    except ValueError as exc:
        raise ValueError(f"{MASTER_SEED_ENV_VAR} must be an integer, got {raw!r}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seedgen-derive",
        description=(
            "Derive deterministic non-zero 32-bit sub-seeds from a master seed and names. "
            "A master seed of 0 selects a runtime-generated (non-reproducible) seed. "
            "Seeds outside the unsigned 32-bit range wrap modulo 2**32, so -1 means 0xFFFFFFFF."
        ),
    )
    parser.add_argument("names", nargs="*", help="Names to derive sub-seeds for")
    parser.add_argument(
        "--master-seed",
        type=_seed_value,
        default=None,
        help=f"Master seed (default: ${MASTER_SEED_ENV_VAR}, else 0 for a runtime seed)",
    )
    parser.add_argument(
        "--regenerate",
        type=_seed_value,
        default=None,
        metavar="SEED",
        help="Regenerate the master seed once before deriving (0 for a runtime seed)",
    )
    parser.add_argument("--print-state", action="store_true", help="Print current and previous master seed")
    parser.add_argument("--verbose", action="store_true", help="Show INFO log records")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")

    try:
        master_seed = args.master_seed if args.master_seed is not None else _env_master_seed()
        generator = SeedGenerator(master_seed)
        if args.regenerate is not None:
            generator.regenerate(args.regenerate)

        if args.print_state:
            print(f"master_seed={generator.master_seed} last_master_seed={generator.last_master_seed}")

        for name in args.names:
            print(f"seed name={name} value={generator.derive(name)}")
    except Exception as exc:
        print(f"error: {exc}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Seed handling.

Maps a caller supplied seed (int or str) onto a bounded integer used to seed
``random.Random``. Mapping rules:

  * int               -> value % MAX_SEED
  * integer string    -> int(value) % MAX_SEED
  * any other string  -> first 8 bytes (big-endian) of sha256(value) % MAX_SEED

The empty string is hashed like any other string so that it stays
deterministic. Random-seed mode substitutes the local wall-clock timestamp
string for the seed before coercion.
"""
from __future__ import annotations

import hashlib
import random
from datetime import datetime
from typing import Tuple, Union

MAX_SEED = 9223372036854775807


def coerce_seed(seed: Union[int, str]) -> int:
    """Convert provided seed (int or str) into bounded 64-bit signed int."""
    if isinstance(seed, int):
        return seed % MAX_SEED
    s = seed.strip()
    if s.isdecimal() or (s[:1] == "-" and s[1:].isdecimal()):
        return int(s) % MAX_SEED
    h = hashlib.sha256(s.encode("utf-8")).digest()
    return int.from_bytes(h[:8], "big") % MAX_SEED


def clock_seed() -> str:
    return datetime.now().isoformat()


def resolve_seed(seed: Union[int, str], use_random_seed: bool = False) -> Tuple[str, int]:
    """Return (effective_seed_string, numeric_seed)."""
    if use_random_seed:
        seed = clock_seed()
    return str(seed), coerce_seed(seed)


def make_rng(numeric_seed: int) -> random.Random:
    # Local RNG so external random usage does not affect generation
    return random.Random(numeric_seed)


__all__ = ["MAX_SEED", "coerce_seed", "clock_seed", "resolve_seed", "make_rng"]

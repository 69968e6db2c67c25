import time

import pytest

from cavegen.cave import Cave, CaveConfig

# Simple performance guardrail. Not a strict micro-benchmark; aims to catch large regressions.


@pytest.mark.performance
def test_default_size_generation():
    seeds = ["cave", "292372", "730727"]
    max_seconds_per = 5.0  # generous threshold; tune as needed
    for s in seeds:
        start = time.perf_counter()
        cave = Cave(CaveConfig(seed=s, wall_size_minimum=10, room_size_minimum=10))
        elapsed = time.perf_counter() - start
        assert cave.mesh.triangle_count > 0
        assert elapsed < max_seconds_per, f"Seed {s} took {elapsed:.3f}s (> {max_seconds_per}s)"

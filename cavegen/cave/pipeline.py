"""Pipeline orchestration for cave generation.

``Cave`` runs every phase on construction (noise -> smoothing -> pruning ->
rooms -> connection -> triangulation) and keeps the products for callers:
grid, rooms, passages, mesh and metrics. ``generate`` is the flat entry point
returning only the mesh buffer for a mesh consumer.
"""
from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from flask import current_app, has_app_context

from ..logging_utils import get_logger
from .automaton import smooth
from .cells import Grid, count_tiles
from .config import CaveConfig
from .connectivity import Passage, connect_rooms
from .errors import NoViableRoomsError
from .mesh import MeshBuffer, triangulate
from .metrics import init_metrics
from .noise import fill_noise
from .regions import prune_room_regions, prune_wall_regions
from .rooms import Room, build_rooms
from .seeding import make_rng, resolve_seed
from .tiles import FLOOR, WALL

log = get_logger("cavegen.pipeline")


def metrics_enabled(default: bool) -> bool:
    """Environment then Flask app config may override the config flag."""
    enabled = default
    env = os.environ.get("CAVEGEN_ENABLE_GENERATION_METRICS")
    if env is not None:
        enabled = env.lower() not in {"0", "false", "no", ""}
    if has_app_context() and "CAVEGEN_ENABLE_GENERATION_METRICS" in current_app.config:
        enabled = bool(current_app.config["CAVEGEN_ENABLE_GENERATION_METRICS"])
    return enabled


@dataclass
class Cave:
    config: CaveConfig = field(default_factory=CaveConfig)

    def __post_init__(self):
        self.config.validate()
        self.enable_metrics = metrics_enabled(self.config.enable_metrics)
        self.seed, self.numeric_seed = resolve_seed(self.config.seed, self.config.use_random_seed)
        self.metrics: Dict[str, Any] = init_metrics() if self.enable_metrics else {}
        self.grid: Grid = []
        self.rooms: List[Room] = []
        self.passages: List[Passage] = []
        self.mesh = MeshBuffer()
        self._run_pipeline()

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def main_room(self) -> Room:
        return self.rooms[0]

    def _run_pipeline(self):
        """Execute ordered generation phases with lightweight per-phase timing.

        When metrics are enabled ``phase_ms`` maps phase name -> duration (ms).
        """
        start = time.perf_counter()
        phase_times: Dict[str, int] = {}

        def _phase(label, fn, *a, **k):
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = int((time.perf_counter() - ps) * 1000)
            log.debug(event="phase_done", phase=label, ms=phase_times[label])
            return r

        cfg = self.config
        rng = make_rng(self.numeric_seed)
        self.grid = _phase("noise", fill_noise, cfg.width, cfg.height, cfg.fill_percentage, rng)
        _phase("smoothing", smooth, self.grid, cfg.smoothing_iterations)
        walls_pruned = _phase("prune_walls", prune_wall_regions, self.grid, cfg.wall_size_minimum)
        regions, rooms_pruned = _phase("prune_rooms", prune_room_regions, self.grid, cfg.room_size_minimum)
        if not regions:
            log.warn(event="no_viable_rooms", seed=self.seed, width=cfg.width, height=cfg.height)
            raise NoViableRoomsError(
                f"no open region of at least {cfg.room_size_minimum} tiles survived (seed={self.seed!r})"
            )
        self.rooms = _phase("build_rooms", build_rooms, self.grid, regions)
        radius_range = (cfg.corridor_radius_min, cfg.corridor_radius_max)
        self.passages = _phase("connect_rooms", connect_rooms, self.grid, self.rooms, rng, radius_range)
        self.mesh = _phase("triangulate", triangulate, self.grid, cfg.square_size)

        runtime_ms = int((time.perf_counter() - start) * 1000)
        if self.enable_metrics:
            self.metrics.update(
                rooms=len(self.rooms),
                wall_regions_pruned=walls_pruned,
                room_regions_pruned=rooms_pruned,
                passages_carved=len(self.passages),
                tiles_wall=count_tiles(self.grid, WALL),
                tiles_floor=count_tiles(self.grid, FLOOR),
                vertices=self.mesh.vertex_count,
                triangles=self.mesh.triangle_count,
                runtime_ms=runtime_ms,
                phase_ms=phase_times,
            )
        log.info(
            event="cave_generated",
            seed=self.seed,
            width=cfg.width,
            height=cfg.height,
            rooms=len(self.rooms),
            passages=len(self.passages),
            vertices=self.mesh.vertex_count,
            runtime_ms=runtime_ms,
        )

    def to_dict(self, include_mesh: bool = True) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "seed": self.seed,
            "numeric_seed": self.numeric_seed,
            "width": self.width,
            "height": self.height,
            "rooms": [r.to_dict() for r in self.rooms],
            "metrics": self.metrics,
        }
        if include_mesh:
            data["mesh"] = self.mesh.to_dict()
        return data


def generate(
    width: int,
    height: int,
    fill_percentage: float,
    smoothing_iterations: int,
    wall_size_minimum: int,
    room_size_minimum: int,
    seed: Union[int, str] = "cave",
    use_random_seed: bool = False,
    config: Optional[CaveConfig] = None,
) -> MeshBuffer:
    """Generate a cave and return its mesh buffer.

    ``config`` may carry the optional knobs (corridor radius, square size);
    the positional arguments always take precedence over it.
    """
    base = config or CaveConfig()
    cfg = CaveConfig(
        width=width,
        height=height,
        fill_percentage=fill_percentage,
        smoothing_iterations=smoothing_iterations,
        wall_size_minimum=wall_size_minimum,
        room_size_minimum=room_size_minimum,
        seed=seed,
        use_random_seed=use_random_seed,
        corridor_radius_min=base.corridor_radius_min,
        corridor_radius_max=base.corridor_radius_max,
        square_size=base.square_size,
        enable_metrics=base.enable_metrics,
    )
    return Cave(cfg).mesh


__all__ = ["Cave", "generate", "metrics_enabled"]

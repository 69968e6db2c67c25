"""
project: CaveGen
module: cave_api.py
License: MIT

Cave generation API routes.

`POST /api/cave/generate` runs the pipeline (the "regenerate" trigger) and
returns the mesh buffer plus room summary and metrics. `GET /api/cave/map`
returns the debug views of the same cave: an ASCII overlay of the final grid
and world-space segments for every carved passage.
"""

import threading

from flask import Blueprint, current_app, jsonify, request

from cavegen.cave import Cave, CaveConfig, ConfigError, NoViableRoomsError
from cavegen.cave.debug import connection_segments, render_ascii
from cavegen.cave.pipeline import metrics_enabled
from cavegen.logging_utils import get_logger
from cavegen.validation import validate

log = get_logger("cavegen.api")

MAX_DIMENSION = 512

GENERATE_SCHEMA = {
    "width": ("int", False, {"min": 1, "max": MAX_DIMENSION}),
    "height": ("int", False, {"min": 1, "max": MAX_DIMENSION}),
    "fill_percentage": ("number", False, {"min": 0, "max": 100}),
    "smoothing_iterations": ("int", False, {"min": 0, "max": 64}),
    "wall_size_minimum": ("int", False, {"min": 0}),
    "room_size_minimum": ("int", False, {"min": 0}),
    "seed": ("seed", False, {"max_len": 256}),
    "use_random_seed": ("bool", False, {}),
    "corridor_radius_min": ("int", False, {"min": 0, "max": 16}),
    "corridor_radius_max": ("int", False, {"min": 0, "max": 16}),
    "square_size": ("number", False, {"min": 0.001}),
}

# Simple in-process cache config-key -> Cave instance. Lock guards concurrent requests under threaded servers.
_cave_cache = {}
_cave_cache_lock = threading.Lock()


def get_cached_cave(config: CaveConfig) -> Cave:
    """Return a generated cave for ``config``, reusing a cached one when allowed.

    Random-seed requests always regenerate and are never stored.
    """
    if config.use_random_seed or current_app.config.get("CAVEGEN_DISABLE_CACHE"):
        return Cave(config)
    # env and app config can flip the metrics toggle between requests
    key = (config.cache_key(), metrics_enabled(config.enable_metrics))
    with _cave_cache_lock:
        cave = _cave_cache.get(key)
        if cave is not None:
            return cave
    cave = Cave(config)
    cache_max = current_app.config.get("CAVEGEN_CACHE_MAX", 8)
    with _cave_cache_lock:
        _cave_cache[key] = cave
        while len(_cave_cache) > cache_max:
            first_key = next(iter(_cave_cache.keys()))
            _cave_cache.pop(first_key, None)
    return cave


def clear_cave_cache():
    with _cave_cache_lock:
        _cave_cache.clear()


def _config_from(payload, coerce_strings: bool):
    """Validate ``payload`` and build a CaveConfig. Returns (config, error_response)."""
    ok, data = validate(payload, GENERATE_SCHEMA, coerce_strings=coerce_strings)
    if not ok:
        return None, (jsonify(data), 400)
    try:
        config = CaveConfig(**data).validate()
    except ConfigError as e:
        return None, (jsonify(e.to_dict()), 400)
    return config, None


def _generate_or_error(config: CaveConfig):
    try:
        return get_cached_cave(config), None
    except NoViableRoomsError as e:
        log.warn(event="generate_rejected", code=e.code, seed=config.seed)
        return None, (jsonify({"error": str(e), "code": e.code}), 422)


bp_cave = Blueprint("cave", __name__)


@bp_cave.route("/api/cave/generate", methods=["POST"])
def generate_cave():
    """Generate (or fetch cached) cave for the posted parameters.

    Body JSON (all optional, CaveConfig defaults otherwise):
      { "width": int, "height": int, "fill_percentage": number, "smoothing_iterations": int,
        "wall_size_minimum": int, "room_size_minimum": int, "seed": int|str,
        "use_random_seed": bool, "corridor_radius_min": int, "corridor_radius_max": int,
        "square_size": number }

    Response: { seed, numeric_seed, width, height, rooms, metrics, mesh: {vertices, triangles} }
    """
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    config, err = _config_from(payload, coerce_strings=False)
    if err:
        return err
    cave, err = _generate_or_error(config)
    if err:
        return err
    return jsonify(cave.to_dict())


@bp_cave.route("/api/cave/map")
def cave_map():
    """Debug overlay for the cave described by the query string parameters.

    Response: { seed, width, height, rows: [str, ...], segments: [[[x,y,z],[x,y,z]], ...] }
    """
    config, err = _config_from(request.args.to_dict(), coerce_strings=True)
    if err:
        return err
    cave, err = _generate_or_error(config)
    if err:
        return err
    return jsonify(
        {
            "seed": cave.seed,
            "width": cave.width,
            "height": cave.height,
            "rows": render_ascii(cave.grid),
            "segments": [[list(a), list(b)] for a, b in connection_segments(cave)],
        }
    )

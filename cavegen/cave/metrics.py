from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'rooms': 0,
        'wall_regions_pruned': 0,
        'room_regions_pruned': 0,
        'passages_carved': 0,
        'tiles_wall': 0,
        'tiles_floor': 0,
        'vertices': 0,
        'triangles': 0,
        'runtime_ms': 0.0,
    }

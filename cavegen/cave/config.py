import math
from dataclasses import asdict, dataclass
from typing import Union

from .errors import ConfigError


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class CaveConfig:
    width: int = 80
    height: int = 60
    fill_percentage: float = 47
    smoothing_iterations: int = 5
    wall_size_minimum: int = 50
    room_size_minimum: int = 50
    seed: Union[int, str] = "cave"
    use_random_seed: bool = False
    corridor_radius_min: int = 0
    corridor_radius_max: int = 4
    square_size: float = 1.0
    enable_metrics: bool = True

    def validate(self) -> "CaveConfig":
        """Reject malformed parameters before any grid is allocated.

        Raises ConfigError naming the first offending field. Returns self so
        callers can chain ``CaveConfig(...).validate()``.
        """
        for name in ("width", "height"):
            value = getattr(self, name)
            if not _is_int(value):
                raise ConfigError(name, "must be an integer", "type")
            if value <= 0:
                raise ConfigError(name, "must be greater than 0", "min")
        if not _is_number(self.fill_percentage):
            raise ConfigError("fill_percentage", "must be a number", "type")
        if not 0 <= self.fill_percentage <= 100:
            raise ConfigError("fill_percentage", "must be between 0 and 100", "range")
        for name in ("smoothing_iterations", "wall_size_minimum", "room_size_minimum", "corridor_radius_min"):
            value = getattr(self, name)
            if not _is_int(value):
                raise ConfigError(name, "must be an integer", "type")
            if value < 0:
                raise ConfigError(name, "must not be negative", "min")
        if not _is_int(self.corridor_radius_max):
            raise ConfigError("corridor_radius_max", "must be an integer", "type")
        if self.corridor_radius_max < self.corridor_radius_min:
            raise ConfigError("corridor_radius_max", "must be >= corridor_radius_min", "range")
        if not _is_number(self.square_size) or not math.isfinite(self.square_size) or self.square_size <= 0:
            raise ConfigError("square_size", "must be a positive number", "min")
        if not isinstance(self.seed, (int, str)) or isinstance(self.seed, bool):
            raise ConfigError("seed", "must be a string or integer", "type")
        return self

    def cache_key(self):
        return tuple(sorted(asdict(self).items()))


__all__ = ["CaveConfig"]

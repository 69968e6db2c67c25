"""Public cave package interface."""

from .cells import Coord, Grid  # noqa: F401
from .config import CaveConfig  # noqa: F401
from .connectivity import Passage, RoomGraph  # noqa: F401
from .errors import CaveGenerationError, ConfigError, NoViableRoomsError  # noqa: F401
from .mesh import MeshBuffer, triangulate  # noqa: F401
from .pipeline import Cave, generate  # noqa: F401
from .rooms import Room  # noqa: F401
from .tiles import FLOOR, WALL  # noqa: F401

__all__ = [
    "Cave",
    "CaveConfig",
    "CaveGenerationError",
    "ConfigError",
    "Coord",
    "FLOOR",
    "Grid",
    "MeshBuffer",
    "NoViableRoomsError",
    "Passage",
    "Room",
    "RoomGraph",
    "WALL",
    "generate",
    "triangulate",
]

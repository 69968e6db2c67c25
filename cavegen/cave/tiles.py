# Tile constants centralized for modular imports
WALL = "W"
FLOOR = "F"

# ASCII overlay characters (debug rendering / CLI)
TILE_CHARS = {WALL: "#", FLOOR: "."}

__all__ = ["WALL", "FLOOR", "TILE_CHARS"]

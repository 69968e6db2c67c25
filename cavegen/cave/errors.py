"""Error types raised by the cave generation pipeline.

ConfigError follows the field/message/code shape used by request validation so
the HTTP layer can return it unchanged.
"""


class CaveGenerationError(Exception):
    """Base class for generation failures (including logic defects)."""


class ConfigError(CaveGenerationError):
    def __init__(self, field: str, message: str, code: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
        self.code = code

    def to_dict(self):
        return {"field": self.field, "error": self.message, "code": self.code}


class NoViableRoomsError(CaveGenerationError):
    """Pruning left no open region large enough to become a room.

    Callers may retry with a different seed or fill percentage.
    """

    code = "no_viable_rooms"


__all__ = ["CaveGenerationError", "ConfigError", "NoViableRoomsError"]

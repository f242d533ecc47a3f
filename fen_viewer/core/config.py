"""
Renderer configuration.

The tile size and the color of the dark squares are the only knobs. Light squares, the castling markers and the
en passant highlight are derived from / fixed next to them. Configuration is frozen: if you want other settings,
create a new renderer (its tile cache is only valid for the configuration it was built with).
"""

import os
from typing import Self

from pydantic import BaseModel, ConfigDict, field_validator

RGBA = tuple[int, int, int, int]

DEFAULT_TILE_SIZE = 25
DEFAULT_RGBA: RGBA = (128, 64, 255, 255)

EN_PASSANT_RGBA: RGBA = (255, 64, 64, 255)
CASTLING_MARKER_RGBA: RGBA = (255, 213, 0, 255)

TILE_SIZE_ENV = "FEN_VIEWER_TILE_SIZE"
RGBA_ENV = "FEN_VIEWER_RGBA"


class RendererConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    tile_size: int = DEFAULT_TILE_SIZE
    rgba: RGBA = DEFAULT_RGBA

    @field_validator("tile_size")
    @classmethod
    def validate_tile_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError(f"Tile size must be a positive number of pixels, got {value}.")
        return value

    @field_validator("rgba")
    @classmethod
    def validate_rgba(cls, value: RGBA) -> RGBA:
        if not all(0 <= channel <= 255 for channel in value):
            raise ValueError(f"Color channels must lie within 0-255, got {value}.")
        return value

    @property
    def board_size(self) -> int:
        """Width (and height) of the rendered board in pixels"""
        return 8 * self.tile_size

    @property
    def light_rgba(self) -> RGBA:
        """Light squares: every channel of the dark color halved, alpha included."""
        red, green, blue, alpha = self.rgba
        return (red // 2, green // 2, blue // 2, alpha // 2)

    @property
    def marker_size(self) -> int:
        """Castling markers are a quarter of a tile (but never vanish for tiny tiles)"""
        return max(1, round(self.tile_size / 4))

    @classmethod
    def from_env(cls) -> Self:
        """
        Read the configuration from the environment, falling back to the defaults.

        FEN_VIEWER_TILE_SIZE=32
        FEN_VIEWER_RGBA=128,64,255,255
        """
        tile_size = int(os.environ.get(TILE_SIZE_ENV, DEFAULT_TILE_SIZE))
        rgba_str = os.environ.get(RGBA_ENV)
        rgba = (
            tuple(int(channel) for channel in rgba_str.split(","))
            if rgba_str
            else DEFAULT_RGBA
        )
        return cls(tile_size=tile_size, rgba=rgba)

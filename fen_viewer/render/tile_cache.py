"""
Generated tiles that look the same for every board: the checkered background, the light square, the castling
marker and the en passant highlight.

Every entry is created on first use and then shared by all renders of the owning renderer. Entries must never be
drawn on: copy them (or composite them onto your own image).
"""

import logging
import threading
from enum import Enum, auto
from typing import Callable

from PIL import Image

from fen_viewer.chess.square import BOARD_DIMENSIONS
from fen_viewer.core.config import CASTLING_MARKER_RGBA, EN_PASSANT_RGBA, RGBA, RendererConfig

_log = logging.getLogger(__name__)


class Tile(Enum):
    BACKGROUND = auto()
    LIGHT_SQUARE = auto()
    CASTLING_MARKER = auto()
    EN_PASSANT = auto()


def solid_tile(size: int, rgba: RGBA) -> Image.Image:
    return Image.new("RGBA", (size, size), rgba)


class TileCache:
    """
    Memoized tiles for one renderer configuration.

    Two threads populating the same entry at the same time both compute it, but only the first result gets stored
    and both get that one back. The computations are deterministic, so it does not matter who wins.
    """

    def __init__(self, config: RendererConfig) -> None:
        self.config = config
        self._tiles: dict[Tile, Image.Image] = {}
        self._lock = threading.Lock()

    def get_or_compute(self, key: Tile, compute: Callable[[], Image.Image]) -> Image.Image:
        with self._lock:
            tile = self._tiles.get(key)
        if tile is not None:
            return tile

        # compute outside of the lock: the background needs the light square tile
        tile = compute()
        with self._lock:
            stored = self._tiles.setdefault(key, tile)
        if stored is tile:
            _log.debug("Created %s tile (%sx%s px)", key.name, *tile.size)
        return stored

    def __contains__(self, key: Tile) -> bool:
        with self._lock:
            return key in self._tiles

    # -- The entries --
    def light_tile(self) -> Image.Image:
        return self.get_or_compute(
            Tile.LIGHT_SQUARE,
            lambda: solid_tile(self.config.tile_size, self.config.light_rgba),
        )

    def castling_marker(self) -> Image.Image:
        return self.get_or_compute(
            Tile.CASTLING_MARKER,
            lambda: solid_tile(self.config.marker_size, CASTLING_MARKER_RGBA),
        )

    def en_passant_tile(self) -> Image.Image:
        return self.get_or_compute(
            Tile.EN_PASSANT,
            lambda: solid_tile(self.config.tile_size, EN_PASSANT_RGBA),
        )

    def background(self) -> Image.Image:
        return self.get_or_compute(Tile.BACKGROUND, self._create_background)

    def _create_background(self) -> Image.Image:
        """Dark board, with the light square composited wherever (rank + file) is odd"""
        tile_size = self.config.tile_size
        background = solid_tile(self.config.board_size, self.config.rgba)
        light_tile = self.light_tile()
        num_files, num_ranks = BOARD_DIMENSIONS
        for rank in range(num_ranks):
            for file in range((rank + 1) % 2, num_files, 2):
                background.alpha_composite(light_tile, dest=(file * tile_size, rank * tile_size))
        return background

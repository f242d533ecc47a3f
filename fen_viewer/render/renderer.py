"""Render a Board as a PNG image, base64 encoded so it can be embedded in markdown/html."""

import base64
import logging
from io import BytesIO
from typing import Optional

from PIL import Image

from fen_viewer.chess.board import Board
from fen_viewer.chess.castling import CASTLING_CORNERS, CASTLING_ORDER
from fen_viewer.chess.square import Square
from fen_viewer.core.config import RendererConfig
from fen_viewer.render.assets import AssetTable
from fen_viewer.render.tile_cache import TileCache

_log = logging.getLogger(__name__)


class BoardRenderer:
    """
    Composites a board from layers, in this order:

    1. the checkered background
    2. the en passant highlight (a full tile), if the board has an en passant square
    3. a castling marker in the corner of every rook that may still castle
    4. the piece glyphs

    The tiles of layers 1-3 are cached for the lifetime of the renderer. Every call to render works on its own copy,
    so a renderer can be shared between threads.
    """

    def __init__(
        self, config: Optional[RendererConfig] = None, assets: Optional[AssetTable] = None
    ) -> None:
        self.config = config or RendererConfig()
        self.assets = assets or AssetTable.default()
        self.tiles = TileCache(self.config)

    def render(self, board: Board) -> bytes:
        """PNG image of the board, base64 encoded (ascii)"""
        return base64.b64encode(self.render_png(board))

    def render_png(self, board: Board) -> bytes:
        buffer = BytesIO()
        self.render_image(board).save(buffer, format="PNG")
        return buffer.getvalue()

    def render_image(self, board: Board) -> Image.Image:
        image = self.tiles.background().copy()
        self._draw_en_passant(image, board.en_passant)
        self._draw_castling_markers(image, board)
        self._draw_pieces(image, board)
        return image

    # -- Layers --
    def _draw_en_passant(self, image: Image.Image, en_passant: Optional[Square]) -> None:
        if en_passant is None:
            return
        if not en_passant.is_within_bounds():
            # square decoding accepts things like 'z9'. Nothing sensible to highlight then.
            _log.debug("En passant square %s lies outside the board, not highlighted", en_passant)
            return
        image.alpha_composite(self.tiles.en_passant_tile(), dest=self._offset(en_passant))

    def _draw_castling_markers(self, image: Image.Image, board: Board) -> None:
        castling_rights = board.castling_rights()
        for direction in CASTLING_ORDER:
            if direction in castling_rights:
                corner = CASTLING_CORNERS[direction]
                image.alpha_composite(self.tiles.castling_marker(), dest=self._offset(corner))

    def _draw_pieces(self, image: Image.Image, board: Board) -> None:
        tile_size = self.config.tile_size
        for square, piece in board.occupied_squares():
            glyph = self.assets.decode(piece, tile_size)
            image.alpha_composite(glyph, dest=self._offset(square))

    def _offset(self, square: Square) -> tuple[int, int]:
        """Pixel offset (left, top) of the top left corner of a square"""
        return (square.file * self.config.tile_size, square.rank * self.config.tile_size)

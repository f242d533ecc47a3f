"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from io import BytesIO

import pytest
from PIL import Image

from fen_viewer.chess.pieces import ALL_PIECES, Piece, PieceColor
from fen_viewer.core.config import RGBA, RendererConfig
from fen_viewer.render.assets import AssetTable
from fen_viewer.render.renderer import BoardRenderer

TILE_SIZE = 10
DARK_RGBA: RGBA = (128, 64, 255, 255)


def glyph_color(piece: Piece) -> RGBA:
    """Every piece gets its own, fully opaque color, so tests can tell from a pixel which glyph was drawn where"""
    idx = ALL_PIECES.index(piece)
    shade = 20 * (idx % 6) + 10
    return (shade, 0, 0, 255) if piece.color == PieceColor.WHITE else (0, shade, 0, 255)


def png_bytes(image: Image.Image) -> bytes:
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def config() -> RendererConfig:
    return RendererConfig(tile_size=TILE_SIZE, rgba=DARK_RGBA)


@pytest.fixture
def solid_assets() -> AssetTable:
    """Solid squares instead of real glyphs (already at tile size)"""
    return AssetTable(
        {
            piece: png_bytes(Image.new("RGBA", (TILE_SIZE, TILE_SIZE), glyph_color(piece)))
            for piece in ALL_PIECES
        }
    )


@pytest.fixture
def renderer(config: RendererConfig, solid_assets: AssetTable) -> BoardRenderer:
    return BoardRenderer(config, solid_assets)

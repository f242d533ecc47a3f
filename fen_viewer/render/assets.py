"""
The piece glyphs: one PNG per piece type / color combination.

The table is exhaustive by construction: creating it with a missing piece raises, so a lookup never needs a fallback.
"""

import threading
from io import BytesIO
from pathlib import Path
from typing import Mapping, Self

from PIL import Image

from fen_viewer.chess.pieces import ALL_PIECES, Piece, PieceColor
from fen_viewer.core.exceptions import MissingGlyphError

# Absolute path resolved at import time, so it does not depend on the working directory.
GLYPH_DIR = Path(__file__).parent / "glyphs"


def glyph_filename(piece: Piece) -> str:
    """ex) white king -> 'wk.png', black knight -> 'bn.png'"""
    color_prefix = "w" if piece.color == PieceColor.WHITE else "b"
    return f"{color_prefix}{piece.to_fen().lower()}.png"


class AssetTable:
    """Raw glyph bytes for all 12 pieces, plus decoded (and resized) versions on demand."""

    def __init__(self, glyphs: Mapping[Piece, bytes]) -> None:
        missing = [piece for piece in ALL_PIECES if piece not in glyphs]
        if missing:
            names = ", ".join(f"{piece.color.name} {piece.type.name}" for piece in missing)
            raise MissingGlyphError(f"No glyph supplied for: {names}")
        self._glyphs: dict[Piece, bytes] = {piece: glyphs[piece] for piece in ALL_PIECES}
        self._decoded: dict[tuple[Piece, int], Image.Image] = {}
        self._lock = threading.Lock()

    @classmethod
    def default(cls) -> Self:
        """The glyphs shipped with the package"""
        return cls.from_directory(GLYPH_DIR)

    @classmethod
    def from_directory(cls, directory: Path) -> Self:
        """Read `wk.png`, `bq.png`, etc. from the given directory"""
        glyphs: dict[Piece, bytes] = {}
        for piece in ALL_PIECES:
            path = directory / glyph_filename(piece)
            if not path.is_file():
                raise MissingGlyphError(f"Glyph file not found: {path}")
            glyphs[piece] = path.read_bytes()
        return cls(glyphs)

    def glyph(self, piece: Piece) -> bytes:
        return self._glyphs[piece]

    def decode(self, piece: Piece, size: int) -> Image.Image:
        """
        The glyph as an RGBA image of size x size pixels.

        NOTE: the returned image is shared between renders. Composite it onto something, never draw on it.
        """
        key = (piece, size)
        with self._lock:
            cached = self._decoded.get(key)
        if cached is not None:
            return cached

        image = Image.open(BytesIO(self._glyphs[piece])).convert("RGBA")
        if image.size != (size, size):
            image = image.resize((size, size), Image.Resampling.LANCZOS)

        with self._lock:
            return self._decoded.setdefault(key, image)

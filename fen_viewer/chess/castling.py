"""Castling rights and where they get marked on the board. Need to be imported by multiple sources"""

from enum import Enum

from fen_viewer.chess.square import BOARD_DIMENSIONS, Square


class CastlingDirection(Enum):
    """The four castling directions. Values represent their encodings in FEN string."""

    WHITE_KING_SIDE = "K"
    WHITE_QUEEN_SIDE = "Q"
    BLACK_KING_SIDE = "k"
    BLACK_QUEEN_SIDE = "q"


CASTLING_ORDER: tuple[CastlingDirection, ...] = (
    CastlingDirection.WHITE_KING_SIDE,
    CastlingDirection.WHITE_QUEEN_SIDE,
    CastlingDirection.BLACK_KING_SIDE,
    CastlingDirection.BLACK_QUEEN_SIDE,
)

_LAST_FILE = BOARD_DIMENSIONS[0] - 1
_LAST_RANK = BOARD_DIMENSIONS[1] - 1

# The rook's corner for every direction. Black's back rank is drawn at the top (row 0), white's at the bottom.
CASTLING_CORNERS: dict[CastlingDirection, Square] = {
    CastlingDirection.BLACK_QUEEN_SIDE: Square(0, 0),
    CastlingDirection.BLACK_KING_SIDE: Square(0, _LAST_FILE),
    CastlingDirection.WHITE_QUEEN_SIDE: Square(_LAST_RANK, 0),
    CastlingDirection.WHITE_KING_SIDE: Square(_LAST_RANK, _LAST_FILE),
}


def castling_from_fen(castle_fen: str) -> set[CastlingDirection]:
    """parse the part of the FEN string that encodes castling rights. Unknown characters are ignored."""
    return {direction for direction in CastlingDirection if direction.value in castle_fen}

"""Unit tests for /fen_viewer/chess/castling.py"""

import pytest

from fen_viewer.chess.castling import CASTLING_CORNERS, CastlingDirection, castling_from_fen
from fen_viewer.chess.square import Square


@pytest.mark.parametrize(
    "fen, expected_rights",
    [
        ("KQkq", set(CastlingDirection)),
        (
            "KQk",
            {
                CastlingDirection.WHITE_KING_SIDE,
                CastlingDirection.WHITE_QUEEN_SIDE,
                CastlingDirection.BLACK_KING_SIDE,
            },
        ),
        ("q", {CastlingDirection.BLACK_QUEEN_SIDE}),
        ("-", set()),
        ("", set()),
        ("XqY", {CastlingDirection.BLACK_QUEEN_SIDE}),  # not validated: unknown characters are just ignored
    ],
)
def test_castling_from_fen(fen: str, expected_rights: set[CastlingDirection]) -> None:
    assert castling_from_fen(fen) == expected_rights


@pytest.mark.parametrize(
    "direction, corner",
    [
        (CastlingDirection.BLACK_QUEEN_SIDE, Square(0, 0)),
        (CastlingDirection.BLACK_KING_SIDE, Square(0, 7)),
        (CastlingDirection.WHITE_QUEEN_SIDE, Square(7, 0)),
        (CastlingDirection.WHITE_KING_SIDE, Square(7, 7)),
    ],
)
def test_castling_corners(direction: CastlingDirection, corner: Square) -> None:
    """Black's back rank is the top row, white's the bottom row. Queen side on the a-file."""
    assert CASTLING_CORNERS[direction] == corner

"""The Board: everything the renderer needs to know about a position, produced by the FEN parser."""

from dataclasses import dataclass
from typing import Optional, Self

from fen_viewer.chess.castling import CastlingDirection, castling_from_fen
from fen_viewer.chess.pieces import Piece, PieceColor
from fen_viewer.chess.square import BOARD_DIMENSIONS, Square

# One row of the grid, indexed by file. None denotes an empty square.
Rank = tuple[Optional[Piece], ...]


@dataclass(frozen=True)
class Board:
    """
    Immutable 8x8 grid of optional pieces, plus the two attributes of the FEN string that show up in the picture.

    * `pieces[rank][file]`, rank 0 is the top row as drawn (the 8th rank in chess terms), file 0 the a-file.
    * `castling` is the castling field of the FEN string, copied verbatim (e.g. "KQkq" or "-").
    * `en_passant` is the en passant target square, if any.
    """

    pieces: tuple[Rank, ...]
    castling: str = "-"
    en_passant: Optional[Square] = None

    def __post_init__(self) -> None:
        num_files, num_ranks = BOARD_DIMENSIONS
        if len(self.pieces) != num_ranks or any(
            len(rank) != num_files for rank in self.pieces
        ):
            raise ValueError(f"A board needs exactly {num_ranks} ranks of {num_files} squares.")

    @classmethod
    def empty(cls) -> Self:
        num_files, num_ranks = BOARD_DIMENSIONS
        return cls(tuple((None,) * num_files for _ in range(num_ranks)))

    def piece(self, square: Square) -> Optional[Piece]:
        return self.pieces[square.rank][square.file]

    def occupied_squares(self) -> list[tuple[Square, Piece]]:
        """All pieces on the board, row by row from the top left."""
        return [
            (Square(rank_idx, file_idx), piece)
            for rank_idx, rank in enumerate(self.pieces)
            for file_idx, piece in enumerate(rank)
            if piece is not None
        ]

    def locate_color(self, color: PieceColor) -> list[Square]:
        return [square for square, piece in self.occupied_squares() if piece.color == color]

    def castling_rights(self) -> set[CastlingDirection]:
        return castling_from_fen(self.castling)

"""
Parse a FEN string into a Board.
----

FEN, or Forsyth-Edwards Notation, is a standard notation for describing a particular board position of a chess game.

<board position string> <active color> <castling rights> <en passant square> <# half move clock> <number turns played>

* The board position lists the ranks from the 8th down to the 1st, separated by slashes. Within a rank, letters denote
    pieces (PNBRQK, capital letters for white, small letters for black) and digits 1-8 a run of empty squares.
* Only the castling rights and the en passant square end up in the picture. Active color and both counters must be
    present, but are not interpreted.

ex) The standard starting position has a FEN
rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1

The parser is strict: the first violation raises an InvalidFENError subclass, a partially read board is never returned.
It does not check whether the position is legal (missing kings, nine queens, etc. are all fine).
"""

from typing import Optional

from fen_viewer.chess.board import Board, Rank
from fen_viewer.chess.pieces import FEN_TO_PIECE, Piece
from fen_viewer.chess.square import BOARD_DIMENSIONS, Square
from fen_viewer.core.exceptions import (
    IncompleteRowError,
    InvalidCharacterError,
    InvalidEnPassantError,
    MalformedSegmentsError,
    RowOverflowError,
)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
NUM_ATTRIBUTES = 5
NO_SQUARE = "-"
EMPTY_RUN_DIGITS = "12345678"


def parse_fen(fen: str) -> Board:
    """Parse the full FEN string (position + 5 attributes) into a Board"""

    # the position is separated from the attributes by the first space only
    parts = fen.split(" ", 1)
    if len(parts) != 2:
        raise MalformedSegmentsError(f"No attributes found after the board position: {fen!r}")
    position, attributes_str = parts

    attributes = attributes_str.split(" ")
    if len(attributes) != NUM_ATTRIBUTES:
        raise MalformedSegmentsError(
            f"Expected {NUM_ATTRIBUTES} space-separated attributes after the board position, got {len(attributes)}: {fen!r}"
        )

    rank_fens = position.split("/")
    num_ranks = BOARD_DIMENSIONS[1]
    if len(rank_fens) != num_ranks:
        raise MalformedSegmentsError(
            f"Expected {num_ranks} ranks separated by '/', got {len(rank_fens)}: {position!r}"
        )

    # active color, half move clock and number of turns only need to be present
    _, castling, en_passant_str, _, _ = attributes
    en_passant = parse_en_passant(en_passant_str)
    pieces = tuple(parse_rank(rank_fen) for rank_fen in rank_fens)
    return Board(pieces, castling, en_passant)


def parse_rank(rank_fen: str) -> Rank:
    """Decode a single rank. It should describe exactly 8 squares."""
    num_files = BOARD_DIMENSIONS[0]
    squares: list[Optional[Piece]] = []
    for character in rank_fen:
        if character.lower() in FEN_TO_PIECE:
            if len(squares) >= num_files:
                raise RowOverflowError(f"Rank describes more than {num_files} squares: {rank_fen!r}")
            squares.append(Piece.from_fen(character))
        elif character in EMPTY_RUN_DIGITS:
            if len(squares) + int(character) > num_files:
                raise RowOverflowError(f"Rank describes more than {num_files} squares: {rank_fen!r}")
            squares.extend([None] * int(character))
        else:
            raise InvalidCharacterError(f"Invalid character {character!r} in rank: {rank_fen!r}")

    if len(squares) != num_files:
        raise IncompleteRowError(
            f"Rank describes {len(squares)} instead of {num_files} squares: {rank_fen!r}"
        )
    return tuple(squares)


def parse_en_passant(en_passant: str) -> Optional[Square]:
    """'-' if there is no en passant square, otherwise file letter + rank digit"""
    if en_passant == NO_SQUARE:
        return None
    if len(en_passant) != 2:
        raise InvalidEnPassantError(f"En passant square should be '-' or 2 characters long, got {en_passant!r}")
    try:
        return Square.from_algebraic(en_passant)
    except ValueError as err:
        raise InvalidEnPassantError(f"Cannot interpret en passant square {en_passant!r}") from err

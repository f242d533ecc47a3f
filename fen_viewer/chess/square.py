"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8: (files, ranks)
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    """
    Zero-based grid coordinate, in the order the board is drawn: `rank` is the row (0 = top), `file` is the column.
    """

    rank: int
    file: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """
        Two character notation, e.g. 'e3'.

        The file letter is read as a base-36 digit minus 10 ('a' -> 0, ..., 'h' -> 7) and the rank digit minus 1.
        NOTE: The rank is used as-is as the row index, so 'e3' ends up on the third row from the top.
        Other letters/digits are not rejected here: they produce coordinates outside the board (see is_within_bounds).
        Raises ValueError if either character cannot be read as a number at all.
        """
        file = int(sq[0], 36) - 10
        rank = int(sq[1]) - 1
        return cls(rank, file)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a'))}{self.rank + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.file < BOARD_DIMENSIONS[0]) and (
            0 <= self.rank < BOARD_DIMENSIONS[1]
        )

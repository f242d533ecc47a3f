"""
Find the string literal the cursor is hovering over.

Only double-quoted literals on a single line are supported. A backslash escapes the next character, so `\\"` does not
open or close a literal.
"""

from dataclasses import dataclass
from typing import Optional

from fen_viewer.core.exceptions import NotInStringError, UnterminatedStringError

QUOTE = '"'
ESCAPE = "\\"


@dataclass(frozen=True)
class QuoteScan:
    """Unescaped quotes found in a slice of a line. Indices refer to the full line."""

    num_quotes: int = 0
    first_quote_idx: Optional[int] = None
    last_quote_idx: Optional[int] = None

    @property
    def inside_string(self) -> bool:
        """An odd number of quotes means the end of the slice lies within a literal"""
        return self.num_quotes % 2 == 1


def scan_quotes(line: str, begin: int, end: int) -> QuoteScan:
    """Count the unescaped quotes in line[begin:end]"""
    num_quotes = 0
    first_quote_idx: Optional[int] = None
    last_quote_idx: Optional[int] = None
    escape = False
    for idx in range(begin, end):
        if escape:
            escape = False
            continue
        character = line[idx]
        if character == ESCAPE:
            escape = True
        elif character == QUOTE:
            if first_quote_idx is None:
                first_quote_idx = idx
            last_quote_idx = idx
            num_quotes += 1
    return QuoteScan(num_quotes, first_quote_idx, last_quote_idx)


def locate_string(line: str, search_start: int, cursor: int) -> str:
    """
    Return the contents of the string literal that contains the cursor.

    * search_start: where to start counting quotes, typically the first non-whitespace character of the line.
    * cursor: character offset of the cursor within the line.

    Raises NotInStringError if the cursor is not within a literal, UnterminatedStringError if the literal is not
    closed before the end of the line.
    """
    cursor = min(max(cursor, 0), len(line))
    search_start = min(max(search_start, 0), cursor)

    before_cursor = scan_quotes(line, search_start, cursor)
    if not before_cursor.inside_string:
        raise NotInStringError(f"Cursor at {cursor} is not inside a string literal.")

    # the literal was opened by the last quote before the cursor ...
    assert before_cursor.last_quote_idx is not None
    begin_str = before_cursor.last_quote_idx + 1

    # ... and gets closed by the first quote after it (a match at the cursor itself counts)
    after_cursor = scan_quotes(line, cursor, len(line))
    if after_cursor.first_quote_idx is None:
        raise UnterminatedStringError(
            f"String literal opened at {before_cursor.last_quote_idx} is not closed on this line."
        )
    return line[begin_str : after_cursor.first_quote_idx]

"""
Exceptions raised across layers.

Everything derives from FenViewerError, so a host can catch one type and simply not show an image.
"""


class FenViewerError(Exception):
    """Base class for all domain errors of the FEN viewer."""


# --- Locating the hovered string ---
class LocateError(FenViewerError):
    """The cursor does not point into a usable string literal."""


class NotInStringError(LocateError):
    """Even number of (unescaped) quotes before the cursor: we are not inside a string literal."""


class UnterminatedStringError(LocateError):
    """No closing quote between the cursor and the end of the line. Multi-line strings are not supported."""


# --- Parsing the FEN string ---
class InvalidFENError(FenViewerError):
    """The located string cannot be interpreted as a FEN string."""


class MalformedSegmentsError(InvalidFENError):
    """Wrong number of ranks, or wrong number of space-separated fields."""


class InvalidCharacterError(InvalidFENError):
    """A rank contains a character that is neither a piece letter nor a digit 1-8."""


class RowOverflowError(InvalidFENError):
    """A rank describes more than 8 squares."""


class IncompleteRowError(InvalidFENError):
    """A rank describes fewer than 8 squares."""


class InvalidEnPassantError(InvalidFENError):
    """The en passant field is neither '-' nor a two character square."""


# --- Rendering ---
class MissingGlyphError(FenViewerError):
    """The asset table does not provide a glyph for every piece type / color combination."""


# --- Boundary layer ---
class InvalidRequestError(FenViewerError):
    """A request to the service does not pass validation."""

"""Orchestration of a hover: from the editor's line of text to an image of the board (and failures in between)."""

import logging
from typing import Optional

from fen_viewer.api.models import HoverRequest, HoverResponse
from fen_viewer.chess.board import Board
from fen_viewer.chess.fen import parse_fen
from fen_viewer.core.exceptions import FenViewerError
from fen_viewer.render.renderer import BoardRenderer
from fen_viewer.text.locator import locate_string

_log = logging.getLogger(__name__)


def markdown_image(image_base64: str) -> str:
    """Inline PNG image, the way hover tooltips can display it"""
    return f"![](data:image/png;base64,{image_base64})"


class FenHoverService:
    """Locate -> parse -> render. One instance (hence one tile cache) serves all hovers."""

    def __init__(self, renderer: Optional[BoardRenderer] = None) -> None:
        self.renderer = renderer or BoardRenderer()

    def hover(self, request: HoverRequest) -> HoverResponse:
        """
        Render the board described by the string under the cursor.
        ----
        Raises a FenViewerError (NotInStringError, IncompleteRowError, ...) if there is nothing to show.
        The host should simply not show a tooltip in that case.
        """
        fen, board = self._board_from_line(
            request.line, request.first_character, request.character
        )

        image_base64 = self.renderer.render(board).decode("ascii")
        _log.info("Rendered board for %r", fen)
        return HoverResponse(
            fen=fen, image_base64=image_base64, markdown=markdown_image(image_base64)
        )

    def board_at(self, line: str, first_character: int, character: int) -> Board:
        """The board described by the string literal under the cursor (without rendering it)"""
        _, board = self._board_from_line(line, first_character, character)
        return board

    # -- Internal helpers --
    def _board_from_line(
        self, line: str, first_character: int, character: int
    ) -> tuple[str, Board]:
        try:
            fen = locate_string(line, first_character, character)
            return fen, parse_fen(fen)
        except FenViewerError as err:
            _log.debug("No board at character %s of %r: %s", character, line, err)
            raise

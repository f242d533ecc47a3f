"""Requests and Response models"""

from pydantic import BaseModel, field_validator

from fen_viewer.core.exceptions import InvalidRequestError


# --- REQUEST MODELS ---
class HoverRequest(BaseModel):
    """
    What the editor knows when the user hovers: the text of the line, and two character offsets within it.

    * first_character: the first non-whitespace character of the line. Quotes are counted from here.
    * character: the cursor position.
    """

    line: str
    first_character: int = 0
    character: int

    @field_validator(*["first_character", "character"])
    @classmethod
    def validate_offset(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Character offsets cannot be negative, got {value}.")
        return value


# --- RESPONSE MODELS ---
class HoverResponse(BaseModel):
    fen: str
    image_base64: str
    markdown: str

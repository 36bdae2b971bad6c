"""
Google Docs request builders.

Small helpers that produce the request dictionaries accepted by
`documents().batchUpdate`.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)

FONT_SIZE_UNIT = "PT"


def utf16_len(text: str) -> int:
    """Length of `text` in UTF-16 code units, the unit Docs indexes are counted in."""
    return len(text.encode("utf-16-le")) // 2


class Utf16Offsets:
    """
    Converts string indices within `text` into UTF-16 code-unit offsets.

    Characters outside the Basic Multilingual Plane (most emoji) occupy two
    code units in a Google Doc but one index in a Python string.
    """

    def __init__(self, text: str) -> None:
        self._prefix = [0]
        for char in text:
            self._prefix.append(self._prefix[-1] + (2 if ord(char) > 0xFFFF else 1))

    def __call__(self, position: int) -> int:
        return self._prefix[position]


def build_text_style(
    bold: bool | None = None,
    italic: bool | None = None,
    font_size: int | float | None = None,
) -> tuple[dict[str, Any], list[str]]:
    """
    Build a textStyle object and the matching field mask entries.

    Returns:
        Tuple of (text_style_dict, list_of_field_names)
    """
    text_style: dict[str, Any] = {}
    fields: list[str] = []

    if bold is not None:
        text_style["bold"] = bold
        fields.append("bold")

    if italic is not None:
        text_style["italic"] = italic
        fields.append("italic")

    if font_size is not None:
        text_style["fontSize"] = {"magnitude": font_size, "unit": FONT_SIZE_UNIT}
        fields.append("fontSize")

    return text_style, fields


def create_insert_text_request(index: int, text: str) -> dict[str, Any]:
    """Create an insertText request."""
    return {"insertText": {"location": {"index": index}, "text": text}}


def create_delete_range_request(start_index: int, end_index: int) -> dict[str, Any]:
    """Create a deleteContentRange request."""
    return {"deleteContentRange": {"range": {"startIndex": start_index, "endIndex": end_index}}}


def create_format_text_request(
    start_index: int,
    end_index: int,
    bold: bool | None = None,
    italic: bool | None = None,
    font_size: int | float | None = None,
) -> dict[str, Any] | None:
    """
    Create an updateTextStyle request.

    Returns:
        The request dict, or None when no style attribute was given.
    """
    text_style, fields = build_text_style(bold, italic, font_size)
    if not text_style:
        return None

    return {
        "updateTextStyle": {
            "range": {"startIndex": start_index, "endIndex": end_index},
            "textStyle": text_style,
            "fields": ",".join(fields),
        }
    }


def create_named_style_request(start_index: int, end_index: int, named_style: str) -> dict[str, Any]:
    """Create an updateParagraphStyle request applying a named style (HEADING_1, ...)."""
    return {
        "updateParagraphStyle": {
            "range": {"startIndex": start_index, "endIndex": end_index},
            "paragraphStyle": {"namedStyleType": named_style},
            "fields": "namedStyleType",
        }
    }

"""
Data model shared by the markup compiler.

Blocks and style annotations are anchored to string indices in the content buffer;
DocumentCursor anchors the buffer to an absolute position in the document.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

# Google Docs body indices start at 1 (index 0 is the implicit section break)
DOCS_BODY_ORIGIN = 1


class BlockKind(str, Enum):
    PARAGRAPH = "paragraph"
    HEADER = "header"
    BULLET = "bullet"
    BLANK = "blank"


class AnnotationKind(str, Enum):
    HEADING = "heading"
    BULLET_FONT = "bullet_font"
    BOLD = "bold"
    ITALIC = "italic"


@dataclass(frozen=True)
class Block:
    """One classified input line.

    Attributes:
        kind: Line classification.
        text: The text as rendered into the buffer (markers stripped or replaced).
        buffer_start: Offset of the first character in the content buffer.
        buffer_end: Offset one past the last character.
        level: Heading level (1-6) for HEADER blocks, None otherwise.
    """

    kind: BlockKind
    text: str
    buffer_start: int
    buffer_end: int
    level: int | None = None


@dataclass(frozen=True)
class StyleAnnotation:
    """A style intent over the content buffer range [start, end)."""

    kind: AnnotationKind
    start: int
    end: int
    level: int | None = None

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Annotation start {self.start} is past its end {self.end}")


@dataclass(frozen=True)
class DocumentCursor:
    """The insertion point of an append: the document's current end.

    Attributes:
        index: Absolute position new content is inserted at.
        origin: Position of an empty document's end. 0 for abstract
            documents, DOCS_BODY_ORIGIN for Google Docs bodies.
    """

    index: int
    origin: int = 0

    @property
    def is_empty(self) -> bool:
        return self.index <= self.origin

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> DocumentCursor:
        """Build a cursor from a `documents().get` response."""
        content = document.get("body", {}).get("content", [])
        if not content:
            return cls(index=DOCS_BODY_ORIGIN, origin=DOCS_BODY_ORIGIN)
        # The body always ends with a newline the API won't let us insert past
        end_index = content[-1].get("endIndex", DOCS_BODY_ORIGIN + 1)
        return cls(index=max(end_index - 1, DOCS_BODY_ORIGIN), origin=DOCS_BODY_ORIGIN)

"""
Edit batch construction.

`EditBatchBuilder` turns a content buffer and its style annotations into an
ordered list of absolute-offset edit operations for one append:

1. a single insertText of the whole content (plus a separator when the
   document already has content),
2. heading paragraph styles,
3. bullet font sizes,
4. bold and italic text styles on the inner text of each span,
5. removal of the bold/italic delimiter characters.

Step 5 must never invalidate the styles from steps 2-4. Delimiters are
removed character by character, either folded into the batch before it is
emitted (`StripMode.FOLD`: the inserted text is already delimiter-free and
every range is remapped through an `OffsetMap`) or appended as trailing
deleteContentRange requests in descending order (`StripMode.SURGICAL`).

Annotations carry string indices into the buffer. Emitted offsets are UTF-16
code units, which is how Google Docs addresses document text.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from gdocs.docs_helpers import (
    Utf16Offsets,
    create_delete_range_request,
    create_format_text_request,
    create_insert_text_request,
    create_named_style_request,
    utf16_len,
)
from gdocs.inline_spans import delimiter_ranges, strip_ranges
from gdocs.markup_model import AnnotationKind, DocumentCursor, StyleAnnotation

logger = logging.getLogger(__name__)

# Visually delimits successive appends to the same document
APPEND_SEPARATOR = "\n\n"

BULLET_FONT_SIZE_PT = 12

# Named style mappings for headings (1 -> HEADING_1, etc.)
HEADING_STYLE_MAP: dict[int, str] = {level: f"HEADING_{level}" for level in range(1, 7)}

# Emission order of style operations after the insertion
STYLE_ORDER: tuple[AnnotationKind, ...] = (
    AnnotationKind.HEADING,
    AnnotationKind.BULLET_FONT,
    AnnotationKind.BOLD,
    AnnotationKind.ITALIC,
)


class StripMode(str, Enum):
    FOLD = "fold"
    SURGICAL = "surgical"


# =============================================================================
# Edit operations
# =============================================================================


@dataclass(frozen=True)
class InsertText:
    index: int
    text: str

    def to_request(self) -> dict[str, Any]:
        return create_insert_text_request(self.index, self.text)


@dataclass(frozen=True)
class UpdateParagraphStyle:
    start: int
    end: int
    named_style: str

    def to_request(self) -> dict[str, Any]:
        return create_named_style_request(self.start, self.end, self.named_style)


@dataclass(frozen=True)
class UpdateTextStyle:
    start: int
    end: int
    bold: bool | None = None
    italic: bool | None = None
    font_size: int | float | None = None

    def to_request(self) -> dict[str, Any]:
        return create_format_text_request(self.start, self.end, self.bold, self.italic, self.font_size)


@dataclass(frozen=True)
class DeleteText:
    start: int
    end: int

    def to_request(self) -> dict[str, Any]:
        return create_delete_range_request(self.start, self.end)


EditOperation = InsertText | UpdateParagraphStyle | UpdateTextStyle | DeleteText


def to_requests(operations: Iterable[EditOperation]) -> list[dict[str, Any]]:
    """Render operations as Google Docs batchUpdate request dicts."""
    return [operation.to_request() for operation in operations]


# =============================================================================
# Offset recomputation
# =============================================================================


class OffsetMap:
    """
    Maps buffer offsets to offsets after a set of ranges has been deleted.

    A position inside a deleted range maps to where that range collapsed to.

    Args:
        deletions: Sorted, non-overlapping (start, end) ranges.
    """

    def __init__(self, deletions: list[tuple[int, int]]) -> None:
        self._starts = [start for start, _ in deletions]
        self._ends = [end for _, end in deletions]
        self._removed_before: list[int] = [0]
        for start, end in deletions:
            self._removed_before.append(self._removed_before[-1] + (end - start))

    def map(self, position: int) -> int:
        # Ranges that end at or before `position` are fully removed in front of it
        done = bisect.bisect_right(self._ends, position)
        shifted = position - self._removed_before[done]
        if done < len(self._starts) and self._starts[done] < position:
            shifted -= position - self._starts[done]
        return shifted


# =============================================================================
# Builder
# =============================================================================


class EditBatchBuilder:
    """
    Builds the ordered edit operations for appending a content buffer.

    Args:
        strip_mode: How bold/italic delimiter characters are removed.
        bullet_font_size: Font size (PT) applied to bullet lines.
    """

    def __init__(self, strip_mode: StripMode = StripMode.FOLD, bullet_font_size: int | float = BULLET_FONT_SIZE_PT):
        self.strip_mode = StripMode(strip_mode)
        self.bullet_font_size = bullet_font_size

    def build(
        self,
        cursor: DocumentCursor | int,
        buffer: str,
        annotations: Iterable[StyleAnnotation],
    ) -> list[EditOperation]:
        if not buffer:
            return []
        if isinstance(cursor, int):
            cursor = DocumentCursor(cursor)

        annotations = list(annotations)
        separator = "" if cursor.is_empty else APPEND_SEPARATOR
        # Every offset below is computed against this one pre-batch value
        base = cursor.index + utf16_len(separator)
        delimiters = delimiter_ranges(annotations)

        if self.strip_mode is StripMode.FOLD:
            offset_map = OffsetMap(delimiters)
            text = strip_ranges(buffer, delimiters)
            to_units = Utf16Offsets(text)
            operations: list[EditOperation] = [InsertText(cursor.index, separator + text)]
            operations += self._style_operations(annotations, base, lambda position: to_units(offset_map.map(position)))
        else:
            to_units = Utf16Offsets(buffer)
            operations = [InsertText(cursor.index, separator + buffer)]
            operations += self._style_operations(annotations, base, to_units)
            # Right to left, so no deletion moves a range that is still to be deleted
            operations += [
                DeleteText(base + to_units(start), base + to_units(end)) for start, end in reversed(delimiters)
            ]

        logger.debug(
            f"Built {len(operations)} operations at index {cursor.index} "
            f"({len(delimiters)} delimiter runs, strip_mode={self.strip_mode.value})"
        )
        return operations

    def _style_operations(
        self,
        annotations: list[StyleAnnotation],
        base: int,
        remap: Callable[[int], int],
    ) -> list[EditOperation]:
        operations: list[EditOperation] = []
        for kind in STYLE_ORDER:
            for annotation in annotations:
                if annotation.kind is not kind:
                    continue
                start = base + remap(annotation.start)
                end = base + remap(annotation.end)
                operations.append(self._style_operation(annotation, start, end))
        return operations

    def _style_operation(self, annotation: StyleAnnotation, start: int, end: int) -> EditOperation:
        if annotation.kind is AnnotationKind.HEADING:
            # Paragraph styles must cover the paragraph's trailing newline
            return UpdateParagraphStyle(start, end + 1, HEADING_STYLE_MAP[annotation.level])
        if annotation.kind is AnnotationKind.BULLET_FONT:
            return UpdateTextStyle(start, end, font_size=self.bullet_font_size)
        if annotation.kind is AnnotationKind.BOLD:
            return UpdateTextStyle(start, end, bold=True)
        return UpdateTextStyle(start, end, italic=True)

"""
Bold and italic span resolution over a parsed content buffer.

Bold spans (`**text**`) are matched first. Italic spans (`*text*`) are matched
on a copy of the buffer where every bold match has been overwritten with mask
characters of the same length, so a bold delimiter can never open or close an
italic span and italic offsets line up with the original buffer.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from gdocs.markup_model import AnnotationKind, StyleAnnotation

logger = logging.getLogger(__name__)

BOLD_DELIMITER = "**"
ITALIC_DELIMITER = "*"

# Never appears in italic text, so an italic span can't straddle a masked bold span
MASK_CHAR = "\x00"

BOLD_PATTERN = re.compile(r"\*\*([^*]+?)\*\*")
ITALIC_PATTERN = re.compile(r"\*([^*\n\x00]+?)\*")

DELIMITER_WIDTHS: dict[AnnotationKind, int] = {
    AnnotationKind.BOLD: len(BOLD_DELIMITER),
    AnnotationKind.ITALIC: len(ITALIC_DELIMITER),
}


def mask_bold_spans(buffer: str) -> str:
    """Return `buffer` with every bold match (delimiters included) masked out."""
    return BOLD_PATTERN.sub(lambda match: MASK_CHAR * len(match.group(0)), buffer)


class InlineSpanResolver:
    """Finds bold and italic spans; offsets cover the inner text only."""

    def resolve(self, buffer: str) -> list[StyleAnnotation]:
        if not buffer:
            return []

        bold = [StyleAnnotation(AnnotationKind.BOLD, m.start(1), m.end(1)) for m in BOLD_PATTERN.finditer(buffer)]
        masked = mask_bold_spans(buffer)
        italic = [StyleAnnotation(AnnotationKind.ITALIC, m.start(1), m.end(1)) for m in ITALIC_PATTERN.finditer(masked)]

        logger.debug(f"Resolved {len(bold)} bold and {len(italic)} italic spans")
        return bold + italic


def delimiter_ranges(annotations: Iterable[StyleAnnotation]) -> list[tuple[int, int]]:
    """
    Buffer ranges occupied by the delimiters of resolved inline spans.

    Only delimiters that belong to a bold or italic annotation are listed, so
    unmatched asterisks in the text are left alone. Ranges are sorted and
    never overlap.
    """
    ranges: list[tuple[int, int]] = []
    for annotation in annotations:
        width = DELIMITER_WIDTHS.get(annotation.kind)
        if width is None:
            continue
        ranges.append((annotation.start - width, annotation.start))
        ranges.append((annotation.end, annotation.end + width))
    return sorted(ranges)


def strip_ranges(text: str, ranges: list[tuple[int, int]]) -> str:
    """Remove the given sorted, non-overlapping ranges from `text`."""
    pieces = []
    position = 0
    for start, end in ranges:
        pieces.append(text[position:start])
        position = end
    pieces.append(text[position:])
    return "".join(pieces)

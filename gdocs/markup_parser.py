"""
Line-oriented markup parser.

Turns loosely structured markup (as produced by LLM report generators) into a
single content buffer plus block-level style annotations. Only four line kinds
are recognized: headers, bullets, blank lines and everything else. Inline
bold/italic spans are left in the buffer for `gdocs.inline_spans`.

Example:
    >>> parsed = MarkupParser().parse("# Title\\n- item")
    >>> parsed.buffer
    'Title\\n• item'
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from functools import reduce

from gdocs.markup_model import AnnotationKind, Block, BlockKind, StyleAnnotation

logger = logging.getLogger(__name__)

HEADER_PATTERN = re.compile(r"^(#{1,6})\s+(\S.*)$")
BULLET_PATTERN = re.compile(r"^[-*]\s+(\S.*)$")

BULLET_GLYPH = "•"
ESCAPED_NEWLINE = "\\n"


@dataclass(frozen=True)
class LineMatch:
    """Result of classifying one input line."""

    kind: BlockKind
    text: str
    level: int | None = None


@dataclass(frozen=True)
class ParsedMarkup:
    """Output of MarkupParser.parse."""

    buffer: str = ""
    blocks: tuple[Block, ...] = ()
    annotations: tuple[StyleAnnotation, ...] = ()


def _match_header(line: str) -> LineMatch | None:
    match = HEADER_PATTERN.match(line)
    if not match:
        return None
    return LineMatch(BlockKind.HEADER, match.group(2), level=len(match.group(1)))


def _match_bullet(line: str) -> LineMatch | None:
    match = BULLET_PATTERN.match(line)
    if not match:
        return None
    return LineMatch(BlockKind.BULLET, f"{BULLET_GLYPH} {match.group(1)}")


def _match_blank(line: str) -> LineMatch | None:
    if line.strip():
        return None
    return LineMatch(BlockKind.BLANK, "")


def _match_paragraph(line: str) -> LineMatch | None:
    return LineMatch(BlockKind.PARAGRAPH, line)


# Tried in order; the first matcher that accepts a line classifies it.
LINE_MATCHERS: tuple[Callable[[str], LineMatch | None], ...] = (
    _match_header,
    _match_bullet,
    _match_blank,
    _match_paragraph,
)


def classify_line(line: str) -> LineMatch:
    """Classify a single line using the ordered LINE_MATCHERS."""
    for matcher in LINE_MATCHERS:
        result = matcher(line)
        if result is not None:
            return result
    raise AssertionError("paragraph matcher accepts every line")


def _should_skip_blank(blocks: tuple[Block, ...]) -> bool:
    # Leading blanks, repeated blanks and blanks right after a header add no content
    if not blocks:
        return True
    return blocks[-1].kind in (BlockKind.BLANK, BlockKind.HEADER)


def _append_line(state: ParsedMarkup, line: str) -> ParsedMarkup:
    """Fold step: classify `line` and return the state with its block appended."""
    match = classify_line(line)
    if match.kind is BlockKind.BLANK and _should_skip_blank(state.blocks):
        return state

    start = len(state.buffer) + (1 if state.blocks else 0)
    end = start + len(match.text)
    block = Block(match.kind, match.text, start, end, level=match.level)
    buffer = f"{state.buffer}\n{match.text}" if state.blocks else match.text

    annotations = state.annotations
    if match.kind is BlockKind.HEADER:
        annotations += (StyleAnnotation(AnnotationKind.HEADING, start, end, level=match.level),)
    elif match.kind is BlockKind.BULLET:
        annotations += (StyleAnnotation(AnnotationKind.BULLET_FONT, start, end),)

    return replace(state, buffer=buffer, blocks=state.blocks + (block,), annotations=annotations)


class MarkupParser:
    """
    Parses markup into a content buffer, blocks and header/bullet annotations.

    Args:
        unescape_newlines: Convert literal backslash-n sequences into line
            breaks before parsing. Upstream generators frequently double-escape
            newlines when the markup travels through SQL or JSON.
    """

    def __init__(self, unescape_newlines: bool = True) -> None:
        self.unescape_newlines = unescape_newlines

    def normalize(self, markup: str | None) -> str:
        if not markup:
            return ""
        text = markup.replace("\r\n", "\n")
        if self.unescape_newlines:
            text = text.replace(ESCAPED_NEWLINE, "\n")
        return text

    def parse(self, markup: str | None) -> ParsedMarkup:
        text = self.normalize(markup)
        if not text:
            return ParsedMarkup()

        parsed = reduce(_append_line, text.split("\n"), ParsedMarkup())
        logger.debug(
            f"Parsed {len(parsed.blocks)} blocks, {len(parsed.annotations)} block annotations, "
            f"buffer length {len(parsed.buffer)}"
        )
        return parsed

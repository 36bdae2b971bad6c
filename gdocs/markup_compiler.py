"""
Markup to Google Docs edit compiler.

Runs the parser, the inline span resolver and the batch builder in one pass
with no remote calls.

Example:
    >>> batch = MarkupCompiler().compile("# Sales\\n\\nRevenue is **up** 6%.", cursor=0)
    >>> batch.text
    'Sales\\nRevenue is up 6%.'
    >>> len(batch.operations)  # insertText + updateParagraphStyle + updateTextStyle
    3
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from gdocs.edit_batch import BULLET_FONT_SIZE_PT, EditBatchBuilder, EditOperation, StripMode, to_requests
from gdocs.inline_spans import InlineSpanResolver, delimiter_ranges, strip_ranges
from gdocs.markup_model import Block, DocumentCursor, StyleAnnotation
from gdocs.markup_parser import MarkupParser, ParsedMarkup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledBatch:
    """Everything produced for one append.

    Attributes:
        buffer: The parsed content buffer, inline delimiters still present.
        text: The delimiter-free text the document ends up storing.
        blocks: Parsed blocks in input order.
        annotations: Block and inline annotations, buffer-relative.
        operations: Ordered absolute-offset edit operations.
    """

    buffer: str = ""
    text: str = ""
    blocks: tuple[Block, ...] = ()
    annotations: tuple[StyleAnnotation, ...] = ()
    operations: list[EditOperation] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.operations

    def to_requests(self) -> list[dict[str, Any]]:
        return to_requests(self.operations)


class MarkupCompiler:
    """Composes MarkupParser, InlineSpanResolver and EditBatchBuilder."""

    def __init__(
        self,
        strip_mode: StripMode = StripMode.FOLD,
        unescape_newlines: bool = True,
        bullet_font_size: int | float = BULLET_FONT_SIZE_PT,
    ) -> None:
        self.parser = MarkupParser(unescape_newlines=unescape_newlines)
        self.resolver = InlineSpanResolver()
        self.builder = EditBatchBuilder(strip_mode=strip_mode, bullet_font_size=bullet_font_size)

    def compile(self, markup: str | None, cursor: DocumentCursor | int = 0) -> CompiledBatch:
        return self.compile_parsed(self.parser.parse(markup), cursor)

    def compile_parsed(self, parsed: ParsedMarkup, cursor: DocumentCursor | int = 0) -> CompiledBatch:
        """Resolve inline spans and build the batch for already parsed markup."""
        if not parsed.buffer:
            logger.debug("Markup is empty after parsing; nothing to append")
            return CompiledBatch()

        inline = self.resolver.resolve(parsed.buffer)
        annotations = parsed.annotations + tuple(inline)
        operations = self.builder.build(cursor, parsed.buffer, annotations)

        return CompiledBatch(
            buffer=parsed.buffer,
            text=strip_ranges(parsed.buffer, delimiter_ranges(inline)),
            blocks=parsed.blocks,
            annotations=annotations,
            operations=operations,
        )


def compile_markup(markup: str | None, cursor: DocumentCursor | int = 0, **options: Any) -> CompiledBatch:
    """Compile `markup` into an append batch at `cursor`. See MarkupCompiler."""
    return MarkupCompiler(**options).compile(markup, cursor)

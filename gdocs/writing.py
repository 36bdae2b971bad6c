"""
Google Docs Writing Tools

This module provides the markup append entry point and its MCP tool.
"""

import asyncio
import json
import logging
import traceback
from datetime import datetime
from typing import Any

from pydantic import Field

from auth.config import ExportConfig, get_export_config
from auth.service_account import build_docs_service
from core.errors import DocsExportError, ValidationError
from core.server import server
from core.utils import validate_document_id
from gdocs.batch_executor import DocsBatchExecutor
from gdocs.markup_compiler import MarkupCompiler

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def _timestamp() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


def _document_link(document_id: str) -> str:
    return f"https://docs.google.com/document/d/{document_id}"


def success_result(document_id: str | None, operations_executed: int) -> dict[str, Any]:
    return {
        "status": "success",
        "document_id": document_id,
        "action": "appended",
        "operations_executed": operations_executed,
        "timestamp": _timestamp(),
        "url": _document_link(document_id) if document_id else None,
    }


def error_result(error: Exception) -> dict[str, Any]:
    details = getattr(error, "details", None) or traceback.format_exc()
    return {
        "status": "error",
        "error": str(error),
        "details": details.replace("\n", " | ").replace("\r", " "),
        "timestamp": _timestamp(),
    }


def export_markdown_to_doc(
    markdown_content: str | None,
    document_id: str | None = None,
    service: Any = None,
    config: ExportConfig | None = None,
) -> dict[str, Any]:
    """
    Append markup to an existing Google Doc.

    Reads the document's end, compiles the markup against it and applies the
    result in a single batchUpdate. Never raises: every failure is returned
    as an error result.

    Args:
        markdown_content: Markup to append. Empty input is a successful no-op.
        document_id: Target document (default: GOOGLE_DOCS_DEFAULT_DOCUMENT_ID).
        service: Authenticated Docs service; built from the service account when omitted.
        config: Export configuration (default: the global instance).

    Returns:
        dict: {"status": "success", "document_id", "action", "operations_executed", "timestamp", "url"}
        or {"status": "error", "error", "details", "timestamp"}.
    """
    try:
        config = config or get_export_config()
        document_id = document_id or config.default_document_id

        compiler = MarkupCompiler(**config.compiler_options())
        parsed = compiler.parser.parse(markdown_content)
        if not parsed.buffer:
            logger.info(f"[export_markdown_to_doc] Nothing to append to {document_id}")
            return success_result(document_id, 0)

        document_id = validate_document_id(document_id)
        executor = DocsBatchExecutor(service or build_docs_service(config))
        cursor = executor.read_cursor(document_id)
        batch = compiler.compile_parsed(parsed, cursor)
        executed = executor.apply(document_id, batch.operations)

        logger.info(
            f"[export_markdown_to_doc] Appended {len(batch.text)} characters to {document_id} "
            f"at index {cursor.index} with {executed} requests"
        )
        return success_result(document_id, executed)

    except ValidationError as e:
        logger.warning(f"[export_markdown_to_doc] Input error: {e}")
        return error_result(e)
    except DocsExportError as e:
        logger.error(f"[export_markdown_to_doc] {type(e).__name__}: {e}")
        return error_result(e)
    except Exception as e:
        logger.exception(f"[export_markdown_to_doc] Unexpected error: {e}")
        return error_result(e)


@server.tool()
async def append_markdown_to_doc(
    markdown_content: str = Field(..., description="Markup to append: # headers, - bullets, **bold**, *italic*."),
    document_id: str | None = Field(
        default=None, description="Target Google Doc ID. Defaults to GOOGLE_DOCS_DEFAULT_DOCUMENT_ID."
    ),
) -> str:
    """
    Appends formatted markup to an existing Google Doc shared with the service account.

    Returns:
        str: JSON result with status, document_id, operations_executed and timestamp,
        or status, error, details and timestamp on failure.
    """
    logger.info(f"[append_markdown_to_doc] Doc={document_id}, length={len(markdown_content or '')}")
    result = await asyncio.to_thread(export_markdown_to_doc, markdown_content, document_id)
    return json.dumps(result)

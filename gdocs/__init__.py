"""
Google Docs Markup Export Package

This package compiles loosely structured markup into Google Docs batchUpdate
requests and appends it to existing documents.
"""

from gdocs.markup_compiler import CompiledBatch, MarkupCompiler, compile_markup
from gdocs.writing import append_markdown_to_doc, export_markdown_to_doc

__all__ = [
    "CompiledBatch",
    "MarkupCompiler",
    "compile_markup",
    "export_markdown_to_doc",
    "append_markdown_to_doc",
]

"""FastMCP server instance shared by all tool modules."""

from fastmcp import FastMCP

from auth.config import DOCS_EXPORT_APP_NAME

server = FastMCP(name=DOCS_EXPORT_APP_NAME)

"""
Google Docs Export OAuth Scopes

This module centralizes OAuth scope definitions for the service account.
"""

# Google Docs scopes
DOCS_WRITE_SCOPE = "https://www.googleapis.com/auth/documents"

# Google Drive scopes
DRIVE_FILE_SCOPE = "https://www.googleapis.com/auth/drive.file"

# Scopes requested when appending markup to an existing document
DOCS_EXPORT_SCOPES = [DOCS_WRITE_SCOPE, DRIVE_FILE_SCOPE]

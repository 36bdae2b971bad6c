"""Unit tests for DocsBatchExecutor against a mocked Docs service."""

import httplib2
import pytest
from google.auth.exceptions import RefreshError, TransportError

from core.errors import APIError, AuthenticationError, BatchApplyError, DocumentNotFoundError
from gdocs.batch_executor import DocsBatchExecutor
from gdocs.edit_batch import InsertText, UpdateTextStyle
from gdocs.markup_model import DocumentCursor


class TestReadCursor:
    def test_empty_document(self, mock_docs_service):
        cursor = DocsBatchExecutor(mock_docs_service).read_cursor("doc123")

        assert cursor == DocumentCursor(1, origin=1)
        assert cursor.is_empty
        mock_docs_service.documents.return_value.get.assert_called_with(documentId="doc123")

    def test_document_with_content(self, mock_docs_service, document_factory):
        mock_docs_service.documents.return_value.get.return_value.execute.return_value = document_factory(58)
        cursor = DocsBatchExecutor(mock_docs_service).read_cursor("doc123")

        assert cursor.index == 57
        assert not cursor.is_empty

    def test_not_found(self, mock_docs_service, http_error):
        mock_docs_service.documents.return_value.get.return_value.execute.side_effect = http_error(404)

        with pytest.raises(DocumentNotFoundError) as exc_info:
            DocsBatchExecutor(mock_docs_service).read_cursor("missing")
        assert exc_info.value.document_id == "missing"

    def test_permission_denied(self, mock_docs_service, http_error):
        mock_docs_service.documents.return_value.get.return_value.execute.side_effect = http_error(403)

        with pytest.raises(AuthenticationError):
            DocsBatchExecutor(mock_docs_service).read_cursor("doc123")

    def test_rejected_credentials(self, mock_docs_service):
        mock_docs_service.documents.return_value.get.return_value.execute.side_effect = RefreshError(
            "invalid_grant: Invalid JWT Signature."
        )

        with pytest.raises(AuthenticationError, match="credentials were rejected"):
            DocsBatchExecutor(mock_docs_service).read_cursor("doc123")

    @pytest.mark.parametrize(
        "failure", [httplib2.ServerNotFoundError("Unable to find the server"), TransportError("connection reset")]
    )
    def test_network_failure(self, mock_docs_service, failure):
        mock_docs_service.documents.return_value.get.return_value.execute.side_effect = failure

        with pytest.raises(APIError) as exc_info:
            DocsBatchExecutor(mock_docs_service).read_cursor("doc123")
        assert str(exc_info.value).startswith("Could not reach Google Docs for document doc123")


class TestApply:
    def test_empty_batch_makes_no_call(self, mock_docs_service):
        assert DocsBatchExecutor(mock_docs_service).apply("doc123", []) == 0
        mock_docs_service.documents.return_value.batchUpdate.assert_not_called()

    def test_single_batch_update(self, mock_docs_service):
        operations = [InsertText(1, "bold"), UpdateTextStyle(1, 5, bold=True)]
        executed = DocsBatchExecutor(mock_docs_service).apply("doc123", operations)

        assert executed == 2
        mock_docs_service.documents.return_value.batchUpdate.assert_called_once()
        kwargs = mock_docs_service.documents.return_value.batchUpdate.call_args.kwargs
        assert kwargs["documentId"] == "doc123"
        assert [next(iter(r)) for r in kwargs["body"]["requests"]] == ["insertText", "updateTextStyle"]

    def test_remote_failure_is_batch_apply_error(self, mock_docs_service, http_error):
        mock_docs_service.documents.return_value.batchUpdate.return_value.execute.side_effect = http_error(
            400, "Invalid requests[1].updateTextStyle"
        )

        with pytest.raises(BatchApplyError) as exc_info:
            DocsBatchExecutor(mock_docs_service).apply("doc123", [InsertText(1, "x")])
        assert exc_info.value.status_code == 400

    def test_network_failure_is_batch_apply_error(self, mock_docs_service):
        mock_docs_service.documents.return_value.batchUpdate.return_value.execute.side_effect = TimeoutError("timed out")

        with pytest.raises(BatchApplyError):
            DocsBatchExecutor(mock_docs_service).apply("doc123", [InsertText(1, "x")])

    def test_server_not_found_is_batch_apply_error(self, mock_docs_service):
        mock_docs_service.documents.return_value.batchUpdate.return_value.execute.side_effect = (
            httplib2.ServerNotFoundError("Unable to find the server at docs.googleapis.com")
        )

        with pytest.raises(BatchApplyError, match="Unable to find the server"):
            DocsBatchExecutor(mock_docs_service).apply("doc123", [InsertText(1, "x")])

    def test_rejected_credentials_while_applying(self, mock_docs_service):
        mock_docs_service.documents.return_value.batchUpdate.return_value.execute.side_effect = RefreshError(
            "invalid_grant: account not found"
        )

        with pytest.raises(AuthenticationError):
            DocsBatchExecutor(mock_docs_service).apply("doc123", [InsertText(1, "x")])

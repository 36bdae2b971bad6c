"""Tests for service-account Docs service construction."""

import json
from unittest.mock import MagicMock, patch

import pytest

from auth.config import ExportConfig
from auth.scopes import DOCS_EXPORT_SCOPES
from auth.service_account import build_docs_service
from core.errors import AuthenticationError, ServiceConfigurationError


@pytest.fixture
def configured(env_override, sample_service_account):
    env_override(GOOGLE_DOCS_SERVICE_ACCOUNT_JSON=json.dumps(sample_service_account))
    return ExportConfig()


def test_builds_docs_v1_service(configured, sample_service_account):
    credentials = MagicMock()
    with (
        patch("auth.service_account.service_account.Credentials.from_service_account_info", return_value=credentials) as from_info,
        patch("auth.service_account.build") as build,
    ):
        service = build_docs_service(configured)

    from_info.assert_called_once_with(sample_service_account, scopes=DOCS_EXPORT_SCOPES)
    build.assert_called_once_with("docs", "v1", credentials=credentials, cache_discovery=False)
    assert service is build.return_value


def test_rejected_key_is_authentication_error(configured):
    with patch(
        "auth.service_account.service_account.Credentials.from_service_account_info",
        side_effect=ValueError("Could not deserialize key data"),
    ):
        with pytest.raises(AuthenticationError, match="Authentication failed"):
            build_docs_service(configured)


def test_missing_configuration():
    with pytest.raises(ServiceConfigurationError):
        build_docs_service(ExportConfig())

"""Tests for settings, logging configuration and error payloads."""

from neo_dualwrite.config.logging_config import (
    LoggingConfig,
    get_format_string,
    get_log_level_from_verbosity,
)
from neo_dualwrite.config.settings import DualWriteSettings
from neo_dualwrite.core.exceptions import LegacyQueryError, create_error_response


class TestDualWriteSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DUALWRITE_AUTHZ_URL", raising=False)
        settings = DualWriteSettings(_env_file=None)

        assert settings.sql_dialect == "postgres"
        assert settings.authz_namespace == "default"
        assert settings.managed_role_prefix == "managed:"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DUALWRITE_AUTHZ_URL", "http://authz.local:8080/")
        monkeypatch.setenv("DUALWRITE_SQL_DIALECT", " MySQL ")
        monkeypatch.setenv("DUALWRITE_AUTHZ_PAGE_SIZE", "500")

        settings = DualWriteSettings(_env_file=None)

        assert settings.authz_url == "http://authz.local:8080"
        assert settings.sql_dialect == "mysql"
        assert settings.authz_page_size == 500


class TestLoggingConfig:
    def test_verbosity_levels(self):
        assert get_log_level_from_verbosity("quiet") == "ERROR"
        assert get_log_level_from_verbosity("VERBOSE") == "INFO"
        assert get_log_level_from_verbosity("debug") == "DEBUG"
        assert get_log_level_from_verbosity("unknown") == "WARNING"

    def test_format_fallback(self):
        assert get_format_string("unknown") == get_format_string("simple")
        assert "%(name)s" in get_format_string("detailed")

    def test_build_config(self, monkeypatch):
        monkeypatch.setenv("LOG_VERBOSITY", "VERBOSE")
        monkeypatch.delenv("ENABLE_SQL_LOGGING", raising=False)

        config = LoggingConfig.build_config()

        assert config["loggers"]["neo_dualwrite"]["level"] == "INFO"
        assert config["loggers"]["asyncpg"]["level"] == "WARNING"
        assert config["loggers"]["httpx"]["level"] == "ERROR"


class TestErrorResponse:
    def test_legacy_query_error_payload(self):
        error = LegacyQueryError("SELECT   uid\n FROM folder", "boom", collector="folder_tree")

        payload = create_error_response(error)

        assert payload["error"]["code"] == "LegacyQueryError"
        assert payload["error"]["details"] == {"collector": "folder_tree", "error": "boom"}
        assert "SELECT uid FROM folder" in payload["error"]["message"]

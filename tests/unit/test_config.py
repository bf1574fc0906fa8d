"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from votp.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("AUTH__JWT_EXPIRY_HOURS", raising=False)
        monkeypatch.delenv("CANONICALIZATION__TRACKING_POLICY", raising=False)

        settings = Settings(_env_file=None)

        assert settings.auth.jwt_expiry_hours == 24
        assert settings.canonicalization.tracking_policy == "v1"
        assert settings.database_url == settings.database.url

    def test_nested_environment_override(self, monkeypatch):
        monkeypatch.setenv("COMMENTS__SEARCH_MAX_LIMIT", "10")

        settings = Settings(_env_file=None)

        assert settings.comments.search_max_limit == 10

    def test_unknown_tracking_policy_rejected(self, monkeypatch):
        monkeypatch.setenv("CANONICALIZATION__TRACKING_POLICY", "v9")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

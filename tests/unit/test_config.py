"""Unit tests for kudos.config."""

from __future__ import annotations

import pytest

from kudos.config import ConfigError, KudosConfig

_ENV_VARS = (
    "KUDOS_WEBHOOK_SECRET",
    "WEBHOOK_SECRET",
    "WEBHOOK-SECRET",
    "KUDOS_ENVIRONMENT",
    "KUDOS_TABLE_NAME",
    "KUDOS_DYNAMODB_ENDPOINT_URL",
    "KUDOS_AWS_REGION",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every Kudos variable so host settings cannot leak in."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    """KudosConfig without any environment."""

    def test_default_table_name(self) -> None:
        """The default table is ecskudos-test-kudos."""
        assert KudosConfig().table_name == "ecskudos-test-kudos"

    def test_from_env_matches_defaults(self) -> None:
        """An empty environment yields the default configuration."""
        assert KudosConfig.from_env() == KudosConfig()

    def test_signatures_not_validated_without_secret(self) -> None:
        """An empty secret turns signature validation off."""
        assert KudosConfig().validates_signatures is False


class TestFromEnv:
    """KudosConfig.from_env."""

    def test_reads_every_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Each documented variable populates its field."""
        monkeypatch.setenv("KUDOS_WEBHOOK_SECRET", "s3cret")
        monkeypatch.setenv("KUDOS_ENVIRONMENT", "prod")
        monkeypatch.setenv("KUDOS_TABLE_NAME", "kudos_v2")
        monkeypatch.setenv("KUDOS_DYNAMODB_ENDPOINT_URL", "http://localhost:8000")
        monkeypatch.setenv("KUDOS_AWS_REGION", "eu-west-2")

        config = KudosConfig.from_env()

        assert config.webhook_secret == "s3cret"
        assert config.validates_signatures is True
        assert config.table_name == "ecskudos-prod-kudos_v2"
        assert config.dynamodb_endpoint_url == "http://localhost:8000"
        assert config.aws_region == "eu-west-2"

    def test_unprefixed_secret_is_a_fallback(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """WEBHOOK_SECRET is read when KUDOS_WEBHOOK_SECRET is unset."""
        monkeypatch.setenv("WEBHOOK_SECRET", "legacy")
        assert KudosConfig.from_env().webhook_secret == "legacy"

    def test_hyphenated_secret_is_the_last_fallback(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """WEBHOOK-SECRET, as older deployments set it, enables validation."""
        monkeypatch.setenv("WEBHOOK-SECRET", "s3cret")

        config = KudosConfig.from_env()

        assert config.webhook_secret == "s3cret"
        assert config.validates_signatures is True

    def test_underscored_secret_beats_hyphenated(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """WEBHOOK_SECRET is preferred over WEBHOOK-SECRET."""
        monkeypatch.setenv("WEBHOOK_SECRET", "legacy")
        monkeypatch.setenv("WEBHOOK-SECRET", "older")
        assert KudosConfig.from_env().webhook_secret == "legacy"

    def test_prefixed_secret_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """KUDOS_WEBHOOK_SECRET takes precedence, even when empty."""
        monkeypatch.setenv("WEBHOOK_SECRET", "legacy")
        monkeypatch.setenv("KUDOS_WEBHOOK_SECRET", "")
        assert KudosConfig.from_env().webhook_secret == ""

    def test_blank_optional_values_are_none(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Whitespace-only endpoint and region are treated as unset."""
        monkeypatch.setenv("KUDOS_DYNAMODB_ENDPOINT_URL", "  ")
        monkeypatch.setenv("KUDOS_AWS_REGION", "")

        config = KudosConfig.from_env()

        assert config.dynamodb_endpoint_url is None
        assert config.aws_region is None

    @pytest.mark.parametrize(
        ("env_var", "value"),
        [("KUDOS_ENVIRONMENT", "prod env"), ("KUDOS_TABLE_NAME", "kudos/2")],
    )
    def test_rejects_invalid_table_segment(
        self, monkeypatch: pytest.MonkeyPatch, env_var: str, value: str
    ) -> None:
        """Characters DynamoDB rejects in table names raise ConfigError."""
        monkeypatch.setenv(env_var, value)

        with pytest.raises(ConfigError, match=env_var):
            KudosConfig.from_env()

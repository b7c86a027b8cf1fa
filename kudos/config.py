"""Environment configuration for the Kudos service.

Usage
-----
Build a configuration with defaults:

>>> config = KudosConfig()
>>> config.table_name
'ecskudos-test-kudos'

Or load it from the environment:

>>> import os
>>> os.environ["KUDOS_ENVIRONMENT"] = "prod"
>>> KudosConfig.from_env().table_name
'ecskudos-prod-kudos'

"""

from __future__ import annotations

import dataclasses as dc
import os
import re

# Table names follow ecskudos-<environment>-<name>
TABLE_NAME_PATTERN = "ecskudos-{environment}-{name}"

# DynamoDB table names: 3-255 chars of [a-zA-Z0-9_.-]
_TABLE_SEGMENT_RE = re.compile(r"^[A-Za-z0-9_.-]+$")

# First variable that is set wins, even when empty
_WEBHOOK_SECRET_VARS = ("KUDOS_WEBHOOK_SECRET", "WEBHOOK_SECRET", "WEBHOOK-SECRET")


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""

    @classmethod
    def invalid_table_segment(cls, env_var: str, value: str) -> ConfigError:
        """Return an error for a table name segment DynamoDB would reject."""
        return cls(
            f"{env_var} must contain only letters, digits, '_', '-' or '.', "
            f"got: {value!r}"
        )


@dc.dataclass(frozen=True, slots=True)
class KudosConfig:
    """Settings shared by the webhook intake and the record store.

    Attributes
    ----------
    webhook_secret
        Shared secret used to validate GitHub webhook signatures. An empty
        secret disables validation, which is only suitable for local use.
    environment
        Environment segment of the DynamoDB table name.
    table
        Final segment of the DynamoDB table name.
    dynamodb_endpoint_url
        Optional endpoint override, for example a local DynamoDB.
    aws_region
        Optional region override. When ``None`` the boto3 provider chain
        resolves the region alongside credentials.

    """

    webhook_secret: str = ""
    environment: str = "test"
    table: str = "kudos"
    dynamodb_endpoint_url: str | None = None
    aws_region: str | None = None

    @property
    def table_name(self) -> str:
        """Return the fully qualified DynamoDB table name."""
        return TABLE_NAME_PATTERN.format(environment=self.environment, name=self.table)

    @property
    def validates_signatures(self) -> bool:
        """Return whether webhook signatures are checked."""
        return bool(self.webhook_secret)

    @staticmethod
    def _optional(env_var: str) -> str | None:
        raw = os.environ.get(env_var, "").strip()
        return raw or None

    @staticmethod
    def _table_segment(env_var: str, default: str) -> str:
        raw = os.environ.get(env_var, "").strip()
        if not raw:
            return default
        if _TABLE_SEGMENT_RE.match(raw) is None:
            raise ConfigError.invalid_table_segment(env_var, raw)
        return raw

    @classmethod
    def from_env(cls) -> KudosConfig:
        """Create configuration from environment variables.

        Reads the following environment variables:

        - ``KUDOS_WEBHOOK_SECRET``: webhook shared secret. ``WEBHOOK_SECRET``
          and then ``WEBHOOK-SECRET`` are read when the prefixed variable is
          unset.
        - ``KUDOS_ENVIRONMENT``: table name environment segment.
        - ``KUDOS_TABLE_NAME``: table name final segment.
        - ``KUDOS_DYNAMODB_ENDPOINT_URL``: optional DynamoDB endpoint.
        - ``KUDOS_AWS_REGION``: optional AWS region.

        Raises
        ------
        ConfigError
            If a table name segment contains characters DynamoDB rejects.

        """
        secret = next(
            (
                value
                for name in _WEBHOOK_SECRET_VARS
                if (value := os.environ.get(name)) is not None
            ),
            "",
        )

        return cls(
            webhook_secret=secret,
            environment=cls._table_segment("KUDOS_ENVIRONMENT", "test"),
            table=cls._table_segment("KUDOS_TABLE_NAME", "kudos"),
            dynamodb_endpoint_url=cls._optional("KUDOS_DYNAMODB_ENDPOINT_URL"),
            aws_region=cls._optional("KUDOS_AWS_REGION"),
        )


__all__ = ["TABLE_NAME_PATTERN", "ConfigError", "KudosConfig"]

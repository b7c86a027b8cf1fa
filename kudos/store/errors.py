"""Errors raised by the kudos record store."""

from __future__ import annotations


class StoreError(RuntimeError):
    """Raised when a record cannot be written to or read from DynamoDB.

    The message carries the underlying failure verbatim so the HTTP layer can
    surface it unchanged; the original exception is chained as ``__cause__``.
    """

    @classmethod
    def serialization(cls, detail: object) -> StoreError:
        """Return an error for a record that cannot become a DynamoDB item."""
        return cls(f"could not serialize contribution record: {detail}")

    @classmethod
    def deserialization(cls, detail: object) -> StoreError:
        """Return an error for a stored item that is not a valid record."""
        return cls(f"could not deserialize contribution record: {detail}")

    @classmethod
    def request(cls, operation: str, detail: object) -> StoreError:
        """Return an error for a failed DynamoDB call."""
        return cls(f"DynamoDB {operation} failed: {detail}")

"""Errors raised while accepting GitHub webhook deliveries."""

from __future__ import annotations


class WebhookSignatureError(RuntimeError):
    """Raised when a delivery's HMAC signature cannot be verified."""

    @classmethod
    def missing(cls) -> WebhookSignatureError:
        """Return an error for a delivery without a signature header."""
        return cls("missing signature")

    @classmethod
    def malformed(cls, header: str) -> WebhookSignatureError:
        """Return an error for a header not shaped like ``algo=hexdigest``."""
        return cls(f"error parsing signature {header!r}")

    @classmethod
    def unsupported_algorithm(cls, algorithm: str) -> WebhookSignatureError:
        """Return an error for a digest algorithm GitHub never sends."""
        return cls(f"unsupported signature algorithm {algorithm!r}")

    @classmethod
    def mismatch(cls) -> WebhookSignatureError:
        """Return an error for a signature that does not match the body."""
        return cls("payload signature check failed")


class WebhookPayloadError(ValueError):
    """Raised when a delivery body cannot be parsed into a webhook event."""

    @classmethod
    def unsupported_content_type(cls, content_type: str | None) -> WebhookPayloadError:
        """Return an error for a body that is neither JSON nor form encoded."""
        return cls(f"webhook request has unsupported Content-Type {content_type!r}")

    @classmethod
    def missing_form_payload(cls) -> WebhookPayloadError:
        """Return an error for a form body without a ``payload`` field."""
        return cls("form encoded webhook request has no payload field")

    @classmethod
    def missing_event_type(cls) -> WebhookPayloadError:
        """Return an error for a delivery without ``X-GitHub-Event``."""
        return cls("missing X-GitHub-Event header")

    @classmethod
    def invalid(cls, event_type: str, detail: object) -> WebhookPayloadError:
        """Return an error for a payload that does not decode."""
        return cls(f"could not parse {event_type} payload: {detail}")

"""GitHub webhook intake: signature checks and typed event parsing."""

from __future__ import annotations

from .errors import WebhookPayloadError, WebhookSignatureError
from .events import (
    ISSUES_EVENT,
    PULL_REQUEST_EVENT,
    GitHubUser,
    Issue,
    IssuesEvent,
    PullRequest,
    PullRequestEvent,
    UnsupportedEvent,
    WebhookEvent,
    parse_webhook,
)
from .signature import (
    SIGNATURE_HEADER,
    SIGNATURE_SHA256_HEADER,
    compute_signature,
    extract_payload,
    verify_signature,
)

__all__ = [
    "ISSUES_EVENT",
    "PULL_REQUEST_EVENT",
    "SIGNATURE_HEADER",
    "SIGNATURE_SHA256_HEADER",
    "GitHubUser",
    "Issue",
    "IssuesEvent",
    "PullRequest",
    "PullRequestEvent",
    "UnsupportedEvent",
    "WebhookEvent",
    "WebhookPayloadError",
    "WebhookSignatureError",
    "compute_signature",
    "extract_payload",
    "parse_webhook",
    "verify_signature",
]

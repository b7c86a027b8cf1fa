"""Unit tests for webhook signature validation and body extraction."""

from __future__ import annotations

import urllib.parse

import pytest

from kudos.github.errors import WebhookPayloadError, WebhookSignatureError
from kudos.github.signature import (
    SIGNATURE_HEADER,
    SIGNATURE_SHA256_HEADER,
    compute_signature,
    extract_payload,
    verify_signature,
)

SECRET = "It's a Secret to Everybody"
BODY = b"Hello, World!"


def test_compute_signature_matches_github_documentation() -> None:
    """The digest matches GitHub's published SHA-256 example."""
    assert compute_signature(BODY, SECRET) == (
        "sha256=757107ea0eb2509fc211221cce984b8a37570b6d7586c22c46f4379c8b043e17"
    )


class TestVerifySignature:
    """Tests for verify_signature."""

    @pytest.mark.parametrize("algorithm", ["sha1", "sha256", "sha512"])
    def test_accepts_valid_signature(self, algorithm: str) -> None:
        """Every algorithm GitHub uses is accepted."""
        header = compute_signature(BODY, SECRET, algorithm)
        verify_signature(BODY, SECRET, {SIGNATURE_SHA256_HEADER: header})

    def test_falls_back_to_legacy_header(self) -> None:
        """X-Hub-Signature is used when the SHA-256 header is absent."""
        headers = {
            SIGNATURE_SHA256_HEADER: None,
            SIGNATURE_HEADER: compute_signature(BODY, SECRET, "sha1"),
        }
        verify_signature(BODY, SECRET, headers)

    def test_prefers_sha256_header(self) -> None:
        """A valid SHA-256 header wins over a stale legacy header."""
        headers = {
            SIGNATURE_SHA256_HEADER: compute_signature(BODY, SECRET),
            SIGNATURE_HEADER: "sha1=0000",
        }
        verify_signature(BODY, SECRET, headers)

    def test_rejects_tampered_body(self) -> None:
        """A signature over a different body fails."""
        header = compute_signature(BODY, SECRET)
        with pytest.raises(WebhookSignatureError, match="signature check failed"):
            verify_signature(b"Hello, World?", SECRET, {SIGNATURE_SHA256_HEADER: header})

    def test_rejects_wrong_secret(self) -> None:
        """A signature made with another secret fails."""
        header = compute_signature(BODY, "not the secret")
        with pytest.raises(WebhookSignatureError):
            verify_signature(BODY, SECRET, {SIGNATURE_SHA256_HEADER: header})

    def test_rejects_missing_header(self) -> None:
        """Deliveries without a signature are refused."""
        with pytest.raises(WebhookSignatureError, match="missing signature"):
            verify_signature(BODY, SECRET, {})

    @pytest.mark.parametrize("header", ["sha256", "sha256=", "deadbeef"])
    def test_rejects_malformed_header(self, header: str) -> None:
        """Headers not shaped like algo=hexdigest are refused."""
        with pytest.raises(WebhookSignatureError, match="error parsing signature"):
            verify_signature(BODY, SECRET, {SIGNATURE_SHA256_HEADER: header})

    def test_accepts_upper_case_hex_digest(self) -> None:
        """Hex digits are matched regardless of case."""
        algorithm, _, digest = compute_signature(BODY, SECRET).partition("=")
        header = f"{algorithm}={digest.upper()}"
        verify_signature(BODY, SECRET, {SIGNATURE_SHA256_HEADER: header})

    def test_rejects_non_hex_digest(self) -> None:
        """A digest that is not hexadecimal is malformed, not a mismatch."""
        with pytest.raises(WebhookSignatureError, match="error parsing signature"):
            verify_signature(BODY, SECRET, {SIGNATURE_SHA256_HEADER: "sha256=xyz"})

    def test_rejects_unknown_algorithm(self) -> None:
        """Only sha1, sha256 and sha512 are accepted."""
        with pytest.raises(WebhookSignatureError, match="md5"):
            verify_signature(BODY, SECRET, {SIGNATURE_SHA256_HEADER: "md5=abc"})

    def test_empty_secret_skips_validation(self) -> None:
        """Without a configured secret any delivery is accepted."""
        verify_signature(BODY, "", {})


class TestExtractPayload:
    """Tests for extract_payload."""

    @pytest.mark.parametrize(
        "content_type", ["application/json", "application/json; charset=utf-8"]
    )
    def test_json_body_is_returned_unchanged(self, content_type: str) -> None:
        """JSON deliveries are passed through."""
        assert extract_payload(b'{"a": 1}', content_type) == b'{"a": 1}'

    def test_form_body_yields_payload_field(self) -> None:
        """Form encoded deliveries carry JSON in the payload field."""
        body = urllib.parse.urlencode({"payload": '{"action": "opened"}'}).encode()
        assert (
            extract_payload(body, "application/x-www-form-urlencoded")
            == b'{"action": "opened"}'
        )

    def test_form_body_without_payload(self) -> None:
        """Form bodies must include the payload field."""
        with pytest.raises(WebhookPayloadError, match="no payload field"):
            extract_payload(b"other=1", "application/x-www-form-urlencoded")

    @pytest.mark.parametrize("content_type", [None, "text/plain"])
    def test_unsupported_content_type(self, content_type: str | None) -> None:
        """Other content types are refused."""
        with pytest.raises(WebhookPayloadError, match="unsupported Content-Type"):
            extract_payload(b"{}", content_type)

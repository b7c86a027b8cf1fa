"""HMAC signature validation and body extraction for webhook deliveries.

GitHub signs each delivery with the webhook's shared secret and sends the
digest as ``X-Hub-Signature-256`` (SHA-256) and, for older hooks,
``X-Hub-Signature`` (SHA-1). The signature always covers the raw request
body, whichever content type the hook was configured with.
"""

from __future__ import annotations

import hashlib
import hmac
import typing as typ
import urllib.parse

from kudos.github.errors import WebhookPayloadError, WebhookSignatureError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

__all__ = [
    "SIGNATURE_HEADER",
    "SIGNATURE_SHA256_HEADER",
    "compute_signature",
    "extract_payload",
    "verify_signature",
]

SIGNATURE_SHA256_HEADER = "X-Hub-Signature-256"
SIGNATURE_HEADER = "X-Hub-Signature"

_JSON_CONTENT_TYPE = "application/json"
_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_DIGESTS: dict[str, typ.Callable[[], typ.Any]] = {
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
}


def compute_signature(body: bytes, secret: str, algorithm: str = "sha256") -> str:
    """Return the ``algo=hexdigest`` header value GitHub would send."""
    digest = hmac.new(secret.encode("utf-8"), body, _DIGESTS[algorithm]).hexdigest()
    return f"{algorithm}={digest}"


def _select_header(headers: cabc.Mapping[str, str | None]) -> str:
    for name in (SIGNATURE_SHA256_HEADER, SIGNATURE_HEADER):
        value = headers.get(name)
        if value:
            return value
    raise WebhookSignatureError.missing()


def verify_signature(
    body: bytes,
    secret: str,
    headers: cabc.Mapping[str, str | None],
) -> None:
    """Check the delivery signature against ``secret``.

    ``headers`` maps header names, as spelled in the module constants, to
    their values. An empty ``secret`` skips validation entirely.

    Raises
    ------
    WebhookSignatureError
        If the header is absent, malformed, uses an unknown algorithm, or
        does not match the body.

    """
    if not secret:
        return

    header = _select_header(headers)
    algorithm, sep, received = header.partition("=")
    if not sep or not received:
        raise WebhookSignatureError.malformed(header)
    if algorithm not in _DIGESTS:
        raise WebhookSignatureError.unsupported_algorithm(algorithm)

    # Hex digits are compared as bytes so their case does not matter.
    try:
        received_digest = bytes.fromhex(received)
    except ValueError as exc:
        raise WebhookSignatureError.malformed(header) from exc

    expected = hmac.new(secret.encode("utf-8"), body, _DIGESTS[algorithm]).digest()
    if not hmac.compare_digest(expected, received_digest):
        raise WebhookSignatureError.mismatch()


def extract_payload(body: bytes, content_type: str | None) -> bytes:
    """Return the JSON document carried by a delivery body.

    JSON bodies are returned unchanged; form encoded bodies yield their
    ``payload`` field.

    Raises
    ------
    WebhookPayloadError
        If the content type is unsupported or a form body lacks ``payload``.

    """
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    if media_type == _JSON_CONTENT_TYPE:
        return body
    if media_type == _FORM_CONTENT_TYPE:
        form = urllib.parse.parse_qs(body.decode("utf-8", errors="replace"))
        values = form.get("payload")
        if not values:
            raise WebhookPayloadError.missing_form_payload()
        return values[0].encode("utf-8")
    raise WebhookPayloadError.unsupported_content_type(content_type)

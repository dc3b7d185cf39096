"""Unpadded base64url codec used for every JWT segment."""

from __future__ import annotations

import base64
import binascii
import re

from jwtcodec.core.exceptions import Base64DecodeError

_ALPHABET = re.compile(rb"[A-Za-z0-9_-]*")


def encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def decode(data: str | bytes) -> bytes:
    """Decode an unpadded base64url segment.

    Padding is restored before decoding. Characters outside the base64url
    alphabet, including ``=``, are rejected instead of being skipped.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if not _ALPHABET.fullmatch(raw):
        raise Base64DecodeError("illegal character in base64url input")
    padding = b"=" * (-len(raw) % 4)
    try:
        return base64.b64decode(raw + padding, altchars=b"-_", validate=True)
    except binascii.Error as exc:
        raise Base64DecodeError(f"invalid base64url input: {exc}") from exc

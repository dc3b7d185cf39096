"""Compact JWT serialization (RFC 7519 / RFC 7515).

A token is ``base64url(header) "." base64url(claims) "." base64url(signature)``
where the signature covers the first two segments exactly as they appear in
the token.
"""

from __future__ import annotations

import json
import logging
import time
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from jwtcodec.algorithms.base import Signer, Verifier, key_id_of
from jwtcodec.core import base64url
from jwtcodec.core.exceptions import (
    AlgorithmNotAvailable,
    Base64DecodeError,
    InvalidSigner,
    JwtError,
    MalformedToken,
    SigningError,
    TokenDecodeError,
    TokenEncodeError,
    TokenExpired,
    TokenNotReady,
)
from jwtcodec.models.token import TemporalClaims, TokenHeader

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _json_compact(value: Any) -> bytes:
    jsonable = to_jsonable_python(value, by_alias=True)
    return json.dumps(jsonable, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode("utf-8")


def _as_bytes(token: str | bytes) -> bytes:
    return token.encode("utf-8") if isinstance(token, str) else bytes(token)


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _load_segment(segment: bytes, part: str) -> Any:
    try:
        raw = base64url.decode(segment)
    except Base64DecodeError as exc:
        raise TokenDecodeError(f"cannot base64 decode {part}: {exc}") from exc
    try:
        return json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise TokenDecodeError(f"cannot JSON decode {part}: {exc}") from exc


def _validate(data: Any, target: Any, part: str) -> Any:
    try:
        return _adapter(target).validate_python(data)
    except ValidationError as exc:
        raise TokenDecodeError(f"cannot JSON decode {part}: {exc.error_count()} invalid field(s)") from exc


def encode_json(value: Any) -> str:
    """Serialize ``value`` to compact JSON and return it as an unpadded base64url segment."""
    try:
        raw = _json_compact(value)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise TokenEncodeError(str(exc)) from exc
    return base64url.encode(raw)


def encode(signer: Signer, claims: Any) -> str:
    """Return ``claims`` serialized as a signed JWT.

    When the signer exposes a non-empty key id it is written to the header as
    ``kid``.
    """
    header: dict[str, str] = {"typ": "JWT", "alg": signer.algorithm}
    key_id = key_id_of(signer)
    if key_id:
        header["kid"] = key_id

    try:
        header_segment = encode_json(header)
    except TokenEncodeError as exc:
        raise TokenEncodeError(f"cannot encode header: {exc}") from exc
    try:
        payload_segment = encode_json(claims)
    except TokenEncodeError as exc:
        raise TokenEncodeError(f"cannot encode claims: {exc}") from exc

    signing_input = f"{header_segment}.{payload_segment}"
    try:
        signature = signer.sign(signing_input.encode("ascii"))
    except AlgorithmNotAvailable:
        raise
    except JwtError as exc:
        raise SigningError(f"cannot sign: {exc}") from exc

    return f"{signing_input}.{base64url.encode(signature)}"


def decode_claims(
    token: str | bytes,
    verifier: Verifier,
    claims_type: Any = None,
    *,
    now: int | float | None = None,
) -> Any:
    """Verify ``token`` and return its claims.

    Claims are returned only when every check passed: segment count, header
    and payload decoding, algorithm and key id agreement with ``verifier``,
    the signature, and the ``exp``/``nbf`` window. Any failure raises, so data
    from an untrusted payload never reaches the caller.

    ``claims_type`` is anything pydantic can validate into (a model, a
    dataclass, a ``TypedDict``...). Without it a plain ``dict`` is returned.
    ``now`` overrides the current Unix time.
    """
    raw = _as_bytes(token)
    chunks = raw.split(b".")
    if len(chunks) != 3:
        logger.debug("Rejected token with %d segment(s)", len(chunks))
        raise MalformedToken()

    header = _validate(_load_segment(chunks[0], "header"), TokenHeader, "header")

    payload = _load_segment(chunks[1], "claims")
    claims = payload if claims_type is None else _validate(payload, claims_type, "claims")
    lifetime = _validate(payload, TemporalClaims, "claims")

    if header.alg != verifier.algorithm:
        logger.debug("Rejected token: alg=%r does not match verifier alg=%r", header.alg, verifier.algorithm)
        raise InvalidSigner()
    # kid is only compared when both the token and the verifier state one
    expected_key_id = key_id_of(verifier)
    if expected_key_id and header.kid and header.kid != expected_key_id:
        logger.debug("Rejected token: kid=%r does not match verifier kid=%r", header.kid, expected_key_id)
        raise InvalidSigner()

    try:
        signature = base64url.decode(chunks[2])
    except Base64DecodeError as exc:
        raise TokenDecodeError(f"cannot base64 decode signature: {exc}") from exc
    signing_input = raw[: len(raw) - len(chunks[2]) - 1]
    verifier.verify(signature, signing_input)

    current = int(time.time()) if now is None else int(now)
    if lifetime.expires_at and lifetime.expires_at < current:
        raise TokenExpired()
    if lifetime.not_before and lifetime.not_before > current:
        raise TokenNotReady()

    return claims


def decode_header(token: str | bytes, header_type: Any = None) -> Any:
    """Decode the header segment of ``token`` WITHOUT verifying anything.

    The result is untrusted. Use it only to pick the algorithm or key for the
    verifier that is then passed to :func:`decode_claims`.
    """
    first = _as_bytes(token).split(b".", 1)[0]
    data = _load_segment(first, "header")
    if header_type is None:
        return data
    return _validate(data, header_type, "header")

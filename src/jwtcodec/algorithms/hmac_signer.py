from __future__ import annotations

import hashlib
import hmac

from jwtcodec.core.exceptions import AlgorithmNotAvailable, InvalidSignature, SigningError


class HmacSigner:
    """Symmetric signer; the same shared secret signs and verifies."""

    __slots__ = ("_alg", "_key", "_key_id", "_hash_name")

    def __init__(self, alg: str, key: bytes | str, hash_name: str, key_id: str = "") -> None:
        # bytes() copies mutable buffers so later edits by the caller are not seen here
        self._key = key.encode("utf-8") if isinstance(key, str) else bytes(key)
        self._alg = alg
        self._key_id = key_id
        self._hash_name = hash_name

    @property
    def algorithm(self) -> str:
        return self._alg

    @property
    def key_id(self) -> str:
        return self._key_id

    def _digest(self, data: bytes) -> bytes:
        if self._hash_name not in hashlib.algorithms_available:
            raise AlgorithmNotAvailable(f"{self._hash_name} is not available for {self._alg}")
        try:
            return hmac.new(self._key, data, self._hash_name).digest()
        except (TypeError, ValueError) as exc:
            raise SigningError(f"cannot hash data: {exc}") from exc

    def sign(self, data: bytes) -> bytes:
        return self._digest(data)

    def verify(self, signature: bytes, data: bytes) -> None:
        if not hmac.compare_digest(bytes(signature), self._digest(data)):
            raise InvalidSignature()

    def __repr__(self) -> str:
        return f"HmacSigner(alg={self._alg!r}, key_id={self._key_id!r})"


def hmac256(key: bytes | str, key_id: str = "") -> HmacSigner:
    return HmacSigner("HS256", key, "sha256", key_id)


def hmac384(key: bytes | str, key_id: str = "") -> HmacSigner:
    return HmacSigner("HS384", key, "sha384", key_id)


def hmac512(key: bytes | str, key_id: str = "") -> HmacSigner:
    return HmacSigner("HS512", key, "sha512", key_id)

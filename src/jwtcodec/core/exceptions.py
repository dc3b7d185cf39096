from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    ALGORITHM_NOT_AVAILABLE = "algorithm_not_available"
    INVALID_SIGNATURE = "invalid_signature"
    MALFORMED_TOKEN = "malformed_token"
    INVALID_SIGNER = "invalid_signer"
    EXPIRED = "expired"
    NOT_READY = "not_ready"
    INVALID_CLAIMS = "invalid_claims"
    DECODE = "decode"
    ENCODE = "encode"
    SIGNING = "signing"


class JwtError(ValueError):
    """Base class for every failure raised while encoding or validating a token."""

    kind: ErrorKind = ErrorKind.DECODE
    default_message = "invalid token"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class AlgorithmNotAvailable(JwtError):
    """Raised when the runtime does not provide the selected hash implementation."""

    kind = ErrorKind.ALGORITHM_NOT_AVAILABLE
    default_message = "algorithm not available"


class InvalidSignature(JwtError):
    """Raised when a signature does not match the signed data."""

    kind = ErrorKind.INVALID_SIGNATURE
    default_message = "invalid signature"


class MalformedToken(JwtError):
    """Raised when a token does not split into exactly three segments."""

    kind = ErrorKind.MALFORMED_TOKEN
    default_message = "malformed token"


class InvalidSigner(JwtError):
    """Raised when the token algorithm or key id does not match the verifier."""

    kind = ErrorKind.INVALID_SIGNER
    default_message = "invalid signer"


class TokenExpired(JwtError):
    kind = ErrorKind.EXPIRED
    default_message = "expired"


class TokenNotReady(JwtError):
    kind = ErrorKind.NOT_READY
    default_message = "token not yet active"


class InvalidClaims(JwtError):
    """Raised when a verified token carries claims the application rejects."""

    kind = ErrorKind.INVALID_CLAIMS
    default_message = "invalid claims"


class TokenDecodeError(JwtError):
    """Raised when a token segment cannot be base64 or JSON decoded."""

    kind = ErrorKind.DECODE
    default_message = "cannot decode token"


class Base64DecodeError(TokenDecodeError):
    default_message = "invalid base64url encoding"


class TokenEncodeError(JwtError):
    kind = ErrorKind.ENCODE
    default_message = "cannot encode token"


class SigningError(JwtError):
    kind = ErrorKind.SIGNING
    default_message = "cannot sign"

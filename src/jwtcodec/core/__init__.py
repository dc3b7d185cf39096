from jwtcodec.core.config import Settings, get_settings
from jwtcodec.core.exceptions import (
    AlgorithmNotAvailable,
    Base64DecodeError,
    ErrorKind,
    InvalidClaims,
    InvalidSignature,
    InvalidSigner,
    JwtError,
    MalformedToken,
    SigningError,
    TokenDecodeError,
    TokenEncodeError,
    TokenExpired,
    TokenNotReady,
)
from jwtcodec.core.logging import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "AlgorithmNotAvailable",
    "Base64DecodeError",
    "ErrorKind",
    "InvalidClaims",
    "InvalidSignature",
    "InvalidSigner",
    "JwtError",
    "MalformedToken",
    "SigningError",
    "TokenDecodeError",
    "TokenEncodeError",
    "TokenExpired",
    "TokenNotReady",
    "configure_logging",
]

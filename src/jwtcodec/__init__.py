"""Signed compact JSON Web Tokens with HMAC and RSA algorithms."""

from jwtcodec.algorithms import (
    HmacSigner,
    KeyIdentified,
    RsaSigner,
    RsaVerifier,
    Signer,
    UnsafeNoneSigner,
    Verifier,
    hmac256,
    hmac384,
    hmac512,
    load_rsa_private_key,
    load_rsa_public_key,
    rsa256_signer,
    rsa256_verifier,
    rsa384_signer,
    rsa384_verifier,
    rsa512_signer,
    rsa512_verifier,
)
from jwtcodec.core.exceptions import (
    AlgorithmNotAvailable,
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
from jwtcodec.core.token import decode_claims, decode_header, encode, encode_json

__all__ = [
    "HmacSigner",
    "KeyIdentified",
    "RsaSigner",
    "RsaVerifier",
    "Signer",
    "UnsafeNoneSigner",
    "Verifier",
    "hmac256",
    "hmac384",
    "hmac512",
    "load_rsa_private_key",
    "load_rsa_public_key",
    "rsa256_signer",
    "rsa256_verifier",
    "rsa384_signer",
    "rsa384_verifier",
    "rsa512_signer",
    "rsa512_verifier",
    "AlgorithmNotAvailable",
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
    "decode_claims",
    "decode_header",
    "encode",
    "encode_json",
]

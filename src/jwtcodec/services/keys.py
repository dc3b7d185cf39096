from __future__ import annotations

import logging
from pathlib import Path

from jwtcodec.algorithms.base import Signer, Verifier
from jwtcodec.algorithms.hmac_signer import hmac256, hmac384, hmac512
from jwtcodec.algorithms.rsa_signer import (
    load_rsa_private_key,
    load_rsa_public_key,
    rsa256_signer,
    rsa256_verifier,
    rsa384_signer,
    rsa384_verifier,
    rsa512_signer,
    rsa512_verifier,
)
from jwtcodec.core.config import Settings
from jwtcodec.core.exceptions import AlgorithmNotAvailable

logger = logging.getLogger(__name__)

_HMAC_FACTORIES = {
    "HS256": hmac256,
    "HS384": hmac384,
    "HS512": hmac512,
}
_RSA_SIGNER_FACTORIES = {
    "RS256": rsa256_signer,
    "RS384": rsa384_signer,
    "RS512": rsa512_signer,
}
_RSA_VERIFIER_FACTORIES = {
    "RS256": rsa256_verifier,
    "RS384": rsa384_verifier,
    "RS512": rsa512_verifier,
}

SUPPORTED_ALGORITHMS = frozenset(_HMAC_FACTORIES) | frozenset(_RSA_SIGNER_FACTORIES)


def _read_pem(path: str, setting: str) -> bytes:
    if not path:
        raise ValueError(f"{setting} must be set for RSA algorithms.")
    return Path(path).expanduser().read_bytes()


def signer_from_settings(settings: Settings) -> Signer:
    alg = settings.jwt_algorithm
    if alg in _HMAC_FACTORIES:
        if not settings.jwt_secret_key:
            raise ValueError("JWT_SECRET_KEY must be set for HMAC algorithms.")
        return _HMAC_FACTORIES[alg](settings.jwt_secret_key, settings.jwt_key_id)
    if alg in _RSA_SIGNER_FACTORIES:
        pem = _read_pem(settings.jwt_private_key_path, "JWT_PRIVATE_KEY_PATH")
        logger.debug("Loaded RSA private key for alg=%s from %s", alg, settings.jwt_private_key_path)
        return _RSA_SIGNER_FACTORIES[alg](load_rsa_private_key(pem), settings.jwt_key_id)
    raise AlgorithmNotAvailable(f"unsupported JWT algorithm: {alg!r}")


def verifier_from_settings(settings: Settings) -> Verifier:
    """Build the verifier for ``settings``.

    HMAC verifiers share the signer object. RSA verifiers read the public key
    file and fall back to the private key file when only that one is set.
    """
    alg = settings.jwt_algorithm
    if alg in _HMAC_FACTORIES:
        return signer_from_settings(settings)
    if alg in _RSA_VERIFIER_FACTORIES:
        if settings.jwt_public_key_path:
            public_key = load_rsa_public_key(_read_pem(settings.jwt_public_key_path, "JWT_PUBLIC_KEY_PATH"))
        else:
            pem = _read_pem(settings.jwt_private_key_path, "JWT_PUBLIC_KEY_PATH or JWT_PRIVATE_KEY_PATH")
            public_key = load_rsa_private_key(pem).public_key()
        return _RSA_VERIFIER_FACTORIES[alg](public_key, settings.jwt_key_id)
    raise AlgorithmNotAvailable(f"unsupported JWT algorithm: {alg!r}")

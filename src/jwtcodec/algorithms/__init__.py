from jwtcodec.algorithms.base import KeyIdentified, Signer, Verifier, key_id_of
from jwtcodec.algorithms.hmac_signer import HmacSigner, hmac256, hmac384, hmac512
from jwtcodec.algorithms.none_signer import UnsafeNoneSigner
from jwtcodec.algorithms.rsa_signer import (
    RsaSigner,
    RsaVerifier,
    load_rsa_private_key,
    load_rsa_public_key,
    rsa256_signer,
    rsa256_verifier,
    rsa384_signer,
    rsa384_verifier,
    rsa512_signer,
    rsa512_verifier,
)

__all__ = [
    "KeyIdentified",
    "Signer",
    "Verifier",
    "key_id_of",
    "HmacSigner",
    "hmac256",
    "hmac384",
    "hmac512",
    "UnsafeNoneSigner",
    "RsaSigner",
    "RsaVerifier",
    "load_rsa_private_key",
    "load_rsa_public_key",
    "rsa256_signer",
    "rsa256_verifier",
    "rsa384_signer",
    "rsa384_verifier",
    "rsa512_signer",
    "rsa512_verifier",
]

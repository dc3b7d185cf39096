"""RSA PKCS#1 v1.5 signers (RS256, RS384, RS512).

Signing needs the private key, so signers and verifiers are separate objects.
A signer can still verify its own tokens through the derived public key.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature as _CryptoInvalidSignature
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from jwtcodec.core.exceptions import AlgorithmNotAvailable, InvalidSignature, SigningError

_HASHES: dict[str, type[hashes.HashAlgorithm]] = {
    "RS256": hashes.SHA256,
    "RS384": hashes.SHA384,
    "RS512": hashes.SHA512,
}


def _hash_for(alg: str) -> hashes.HashAlgorithm:
    try:
        return _HASHES[alg]()
    except KeyError as exc:
        raise AlgorithmNotAvailable(f"unsupported RSA algorithm: {alg}") from exc


def _verify(public_key: rsa.RSAPublicKey, alg: str, hash_algorithm: hashes.HashAlgorithm, signature: bytes, data: bytes) -> None:
    try:
        public_key.verify(bytes(signature), data, padding.PKCS1v15(), hash_algorithm)
    except UnsupportedAlgorithm as exc:
        raise AlgorithmNotAvailable(f"{hash_algorithm.name} is not available for {alg}") from exc
    except _CryptoInvalidSignature as exc:
        raise InvalidSignature() from exc


class RsaSigner:
    __slots__ = ("_alg", "_key", "_key_id", "_hash")

    def __init__(self, alg: str, private_key: rsa.RSAPrivateKey, key_id: str = "") -> None:
        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise TypeError("RSA signer requires an RSAPrivateKey")
        self._hash = _hash_for(alg)
        self._alg = alg
        self._key = private_key
        self._key_id = key_id

    @property
    def algorithm(self) -> str:
        return self._alg

    @property
    def key_id(self) -> str:
        return self._key_id

    def sign(self, data: bytes) -> bytes:
        try:
            return self._key.sign(data, padding.PKCS1v15(), self._hash)
        except UnsupportedAlgorithm as exc:
            raise AlgorithmNotAvailable(f"{self._hash.name} is not available for {self._alg}") from exc
        except (TypeError, ValueError) as exc:
            raise SigningError(f"cannot sign data: {exc}") from exc

    def verify(self, signature: bytes, data: bytes) -> None:
        _verify(self._key.public_key(), self._alg, self._hash, signature, data)

    def __repr__(self) -> str:
        return f"RsaSigner(alg={self._alg!r}, key_id={self._key_id!r}, key_size={self._key.key_size})"


class RsaVerifier:
    __slots__ = ("_alg", "_key", "_key_id", "_hash")

    def __init__(self, alg: str, public_key: rsa.RSAPublicKey, key_id: str = "") -> None:
        if not isinstance(public_key, rsa.RSAPublicKey):
            raise TypeError("RSA verifier requires an RSAPublicKey")
        self._hash = _hash_for(alg)
        self._alg = alg
        self._key = public_key
        self._key_id = key_id

    @property
    def algorithm(self) -> str:
        return self._alg

    @property
    def key_id(self) -> str:
        return self._key_id

    def verify(self, signature: bytes, data: bytes) -> None:
        _verify(self._key, self._alg, self._hash, signature, data)

    def __repr__(self) -> str:
        return f"RsaVerifier(alg={self._alg!r}, key_id={self._key_id!r}, key_size={self._key.key_size})"


def rsa256_signer(private_key: rsa.RSAPrivateKey, key_id: str = "") -> RsaSigner:
    return RsaSigner("RS256", private_key, key_id)


def rsa384_signer(private_key: rsa.RSAPrivateKey, key_id: str = "") -> RsaSigner:
    return RsaSigner("RS384", private_key, key_id)


def rsa512_signer(private_key: rsa.RSAPrivateKey, key_id: str = "") -> RsaSigner:
    return RsaSigner("RS512", private_key, key_id)


def rsa256_verifier(public_key: rsa.RSAPublicKey, key_id: str = "") -> RsaVerifier:
    return RsaVerifier("RS256", public_key, key_id)


def rsa384_verifier(public_key: rsa.RSAPublicKey, key_id: str = "") -> RsaVerifier:
    return RsaVerifier("RS384", public_key, key_id)


def rsa512_verifier(public_key: rsa.RSAPublicKey, key_id: str = "") -> RsaVerifier:
    return RsaVerifier("RS512", public_key, key_id)


def _as_bytes(pem: bytes | str) -> bytes:
    return pem.encode("ascii") if isinstance(pem, str) else bytes(pem)


def load_rsa_private_key(pem: bytes | str, password: bytes | None = None) -> rsa.RSAPrivateKey:
    """Load a PEM private key (PKCS#1 or PKCS#8) and check that it is RSA."""
    key = serialization.load_pem_private_key(_as_bytes(pem).strip(), password=password)
    if not isinstance(key, rsa.RSAPrivateKey):
        raise TypeError(f"expected an RSA private key, got {type(key).__name__}")
    return key


def load_rsa_public_key(pem: bytes | str) -> rsa.RSAPublicKey:
    """Load a PEM public key, either SubjectPublicKeyInfo or PKCS#1 ``RSA PUBLIC KEY``."""
    key = serialization.load_pem_public_key(_as_bytes(pem).strip())
    if not isinstance(key, rsa.RSAPublicKey):
        raise TypeError(f"expected an RSA public key, got {type(key).__name__}")
    return key

import time

import pytest

from jwtcodec.algorithms import (
    HmacSigner,
    KeyIdentified,
    RsaSigner,
    Signer,
    UnsafeNoneSigner,
    Verifier,
    hmac256,
    hmac384,
    hmac512,
    key_id_of,
    rsa256_signer,
    rsa256_verifier,
    rsa384_signer,
    rsa384_verifier,
    rsa512_signer,
    rsa512_verifier,
)
from jwtcodec.core.exceptions import AlgorithmNotAvailable, ErrorKind, InvalidSignature

DATA = str(time.time()).encode("ascii")


def _signer_pairs(private_key, public_key):
    return [
        (hmac256(b"top secret 3215125", "keyid-hr21o"), hmac256(b"top secret 3215125")),
        (hmac384(b"top secret 8199421", "keyid-901u4"), hmac384(b"top secret 8199421")),
        (hmac512(b"top secret 0024142", "keyid-8r109"), hmac512(b"top secret 0024142")),
        (rsa256_signer(private_key, "rsa-key"), rsa256_verifier(public_key)),
        (rsa384_signer(private_key), rsa384_verifier(public_key)),
        (rsa512_signer(private_key), rsa512_verifier(public_key)),
    ]


def test_every_algorithm_verifies_its_own_signature(rsa_private_key, rsa_public_key):
    for signer, verifier in _signer_pairs(rsa_private_key, rsa_public_key):
        signature = signer.sign(DATA)
        signer.verify(signature, DATA)
        verifier.verify(signature, DATA)
        assert signer.algorithm == verifier.algorithm


def test_every_algorithm_rejects_tampered_data(rsa_private_key, rsa_public_key):
    for signer, verifier in _signer_pairs(rsa_private_key, rsa_public_key):
        signature = signer.sign(DATA)
        with pytest.raises(InvalidSignature):
            verifier.verify(signature, DATA + b"x")


def test_every_algorithm_rejects_tampered_signature(rsa_private_key, rsa_public_key):
    for signer, verifier in _signer_pairs(rsa_private_key, rsa_public_key):
        signature = bytearray(signer.sign(DATA))
        signature[0] ^= 0x01
        with pytest.raises(InvalidSignature) as exc:
            verifier.verify(bytes(signature), DATA)
        assert exc.value.kind is ErrorKind.INVALID_SIGNATURE


def test_algorithm_names():
    assert hmac256(b"k").algorithm == "HS256"
    assert hmac384(b"k").algorithm == "HS384"
    assert hmac512(b"k").algorithm == "HS512"
    assert UnsafeNoneSigner().algorithm == "none"


def test_rsa_algorithm_names(rsa_private_key, rsa_public_key):
    assert [rsa256_signer(rsa_private_key).algorithm, rsa384_signer(rsa_private_key).algorithm] == ["RS256", "RS384"]
    assert rsa512_verifier(rsa_public_key).algorithm == "RS512"


def test_rsa_signature_is_deterministic(rsa_private_key):
    signer = rsa256_signer(rsa_private_key)
    assert signer.sign(DATA) == signer.sign(DATA)
    assert len(signer.sign(DATA)) == rsa_private_key.key_size // 8


def test_hmac_copies_key_at_construction():
    key = bytearray(b"shared secret")
    signer = hmac256(key)
    expected = hmac256(b"shared secret").sign(DATA)
    key[:] = b"something else"
    assert signer.sign(DATA) == expected


def test_hmac_accepts_text_key():
    assert hmac256("secret").sign(DATA) == hmac256(b"secret").sign(DATA)


def test_hmac_keys_do_not_cross_verify():
    with pytest.raises(InvalidSignature):
        hmac256(b"one").verify(hmac256(b"two").sign(DATA), DATA)


def test_hmac_missing_hash_is_not_available():
    signer = HmacSigner("HS999", b"key", "no-such-hash")
    with pytest.raises(AlgorithmNotAvailable):
        signer.sign(DATA)
    with pytest.raises(AlgorithmNotAvailable):
        signer.verify(b"", DATA)


def test_rsa_unknown_algorithm_is_not_available(rsa_private_key):
    with pytest.raises(AlgorithmNotAvailable):
        RsaSigner("RS1", rsa_private_key)


def test_rsa_constructors_reject_wrong_key_type(rsa_private_key, rsa_public_key):
    with pytest.raises(TypeError):
        rsa256_verifier(rsa_private_key)
    with pytest.raises(TypeError):
        rsa256_signer(rsa_public_key)


def test_none_signer_signs_empty_and_accepts_anything():
    signer = UnsafeNoneSigner()
    assert signer.sign(DATA) == b""
    assert signer.verify(b"garbage", DATA) is None


def test_capability_protocols(rsa_private_key, rsa_public_key):
    assert isinstance(hmac256(b"k"), Signer)
    assert isinstance(rsa256_signer(rsa_private_key), Signer)
    assert isinstance(rsa256_verifier(rsa_public_key), Verifier)
    assert not isinstance(rsa256_verifier(rsa_public_key), Signer)
    assert not isinstance(UnsafeNoneSigner(), KeyIdentified)


def test_key_id_of_only_reports_non_empty_ids(rsa_public_key):
    assert key_id_of(hmac256(b"k", "kid-1")) == "kid-1"
    assert key_id_of(hmac256(b"k")) == ""
    assert key_id_of(rsa256_verifier(rsa_public_key, "pub-1")) == "pub-1"
    assert key_id_of(UnsafeNoneSigner()) == ""
    assert key_id_of(object()) == ""


def test_repr_does_not_leak_secret():
    assert "hunter2" not in repr(hmac256(b"hunter2", "kid"))

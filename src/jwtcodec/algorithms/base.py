"""Signing capabilities consumed by the token encoder and decoder.

A :class:`Verifier` can only check signatures. A :class:`Signer` can also
create them; asymmetric algorithms keep the two apart because only the
private key signs. The ``alg`` value is bound when the object is built and is
never taken from token content.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Verifier(Protocol):
    @property
    def algorithm(self) -> str:
        """JWS ``alg`` value as defined in RFC 7518, section 3.1."""
        ...

    def verify(self, signature: bytes, data: bytes) -> None:
        """Raise ``InvalidSignature`` when ``signature`` was not computed over ``data``."""
        ...


@runtime_checkable
class Signer(Verifier, Protocol):
    def sign(self, data: bytes) -> bytes:
        ...


@runtime_checkable
class KeyIdentified(Protocol):
    @property
    def key_id(self) -> str:
        ...


def key_id_of(capability: object) -> str:
    """Return the key id exposed by ``capability``, or ``""`` when it has none."""
    if isinstance(capability, KeyIdentified):
        return capability.key_id or ""
    return ""

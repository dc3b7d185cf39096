from __future__ import annotations


class UnsafeNoneSigner:
    """The ``none`` algorithm: empty signatures, and every signature verifies.

    UNSAFE. Tokens checked with this object are not authenticated at all. It
    exists as a test double for exercising the codec and must never be used to
    make trust decisions.
    """

    __slots__ = ()

    @property
    def algorithm(self) -> str:
        return "none"

    def sign(self, data: bytes) -> bytes:
        return b""

    def verify(self, signature: bytes, data: bytes) -> None:
        return None

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from jwtcodec.algorithms.base import Signer, Verifier
from jwtcodec.core.config import Settings
from jwtcodec.core.exceptions import InvalidClaims, JwtError
from jwtcodec.core.token import decode_claims, encode
from jwtcodec.services.keys import signer_from_settings, verifier_from_settings

logger = logging.getLogger(__name__)


class TokenService:
    def __init__(
        self,
        settings: Settings,
        signer: Signer | None = None,
        verifier: Verifier | None = None,
    ) -> None:
        self._settings = settings
        self._signer = signer if signer is not None else signer_from_settings(settings)
        if verifier is not None:
            self._verifier = verifier
        elif signer is not None:
            self._verifier = signer
        else:
            self._verifier = verifier_from_settings(settings)

    @property
    def token_ttl_seconds(self) -> int:
        return self._settings.jwt_access_token_ttl_seconds

    @property
    def algorithm(self) -> str:
        return self._signer.algorithm

    def issue(
        self,
        claims: Mapping[str, Any],
        ttl_seconds: int | None = None,
        now: int | None = None,
    ) -> str:
        issued_at = int(time.time()) if now is None else int(now)
        ttl = self.token_ttl_seconds if ttl_seconds is None else ttl_seconds
        payload = dict(claims)
        payload.setdefault("iss", self._settings.jwt_issuer)
        payload["iat"] = issued_at
        payload["exp"] = issued_at + ttl
        if self._settings.jwt_issue_not_before:
            payload["nbf"] = issued_at
        token = encode(self._signer, payload)
        logger.info("Issued token alg=%s sub=%s ttl=%ss", self.algorithm, payload.get("sub"), ttl)
        return token

    def validate(self, token: str | bytes, claims_type: Any = None, now: int | None = None) -> Any:
        """Verify ``token`` and check its issuer; return the claims as ``claims_type`` or ``dict``."""
        try:
            payload = decode_claims(token, self._verifier, now=now)
        except JwtError as exc:
            logger.warning("Token rejected kind=%s: %s", exc.kind.value, exc)
            raise
        if payload.get("iss") != self._settings.jwt_issuer:
            logger.warning("Token rejected: issuer mismatch expected=%s", self._settings.jwt_issuer)
            raise InvalidClaims("Token issuer mismatch.")
        if claims_type is None:
            return payload
        try:
            return TypeAdapter(claims_type).validate_python(payload)
        except ValidationError as exc:
            raise InvalidClaims(f"Token claims do not match {getattr(claims_type, '__name__', claims_type)}.") from exc

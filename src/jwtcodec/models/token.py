from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


class TokenHeader(BaseModel):
    """Fields of the JOSE header that the decoder reads."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    typ: str = Field(default="", description="Media type, always JWT for tokens produced here.")
    alg: str = Field(default="", description="Algorithm the token claims to be signed with.")
    kid: str = Field(default="", description="Key id of the signing key, empty when absent.")

    @field_validator("typ", "alg", "kid", mode="before")
    @classmethod
    def null_is_absent(cls, value: Any) -> Any:
        return "" if value is None else value


class TemporalClaims(BaseModel):
    """Registered time claims (RFC 7519, section 4.1). Zero or missing means unset."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    exp: StrictInt | None = None
    nbf: StrictInt | None = None

    @property
    def expires_at(self) -> int:
        return self.exp or 0

    @property
    def not_before(self) -> int:
        return self.nbf or 0

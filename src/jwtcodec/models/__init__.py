from jwtcodec.models.token import TemporalClaims, TokenHeader

__all__ = [
    "TemporalClaims",
    "TokenHeader",
]

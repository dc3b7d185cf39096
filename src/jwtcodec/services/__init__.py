from jwtcodec.services.keys import SUPPORTED_ALGORITHMS, signer_from_settings, verifier_from_settings
from jwtcodec.services.token_service import TokenService

__all__ = [
    "SUPPORTED_ALGORITHMS",
    "TokenService",
    "signer_from_settings",
    "verifier_from_settings",
]

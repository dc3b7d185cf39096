from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    jwt_algorithm: str = "HS256"
    jwt_secret_key: str = "change-me-in-env"
    jwt_key_id: str = ""
    jwt_private_key_path: str = ""
    jwt_public_key_path: str = ""
    jwt_access_token_ttl_seconds: int = 3600
    jwt_issuer: str = "jwtcodec"
    jwt_issue_not_before: bool = False


def _strip_wrapping_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        return value[1:-1]
    return value


def _load_dotenv_if_present() -> None:
    env_paths = [
        Path.cwd() / ".env",
        Path(__file__).resolve().parents[3] / ".env",
    ]
    for env_path in env_paths:
        if not env_path.exists():
            continue
        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            value = _strip_wrapping_quotes(value.strip())
            if key:
                os.environ.setdefault(key, value)
        break


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


def get_settings() -> Settings:
    _load_dotenv_if_present()
    return Settings(
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256").strip().upper(),
        jwt_secret_key=os.getenv("JWT_SECRET_KEY", "change-me-in-env"),
        jwt_key_id=os.getenv("JWT_KEY_ID", ""),
        jwt_private_key_path=os.getenv("JWT_PRIVATE_KEY_PATH", ""),
        jwt_public_key_path=os.getenv("JWT_PUBLIC_KEY_PATH", ""),
        jwt_access_token_ttl_seconds=int(os.getenv("JWT_ACCESS_TOKEN_TTL_SECONDS", "3600")),
        jwt_issuer=os.getenv("JWT_ISSUER", "jwtcodec"),
        jwt_issue_not_before=_env_bool("JWT_ISSUE_NBF", False),
    )


get_settings = lru_cache(maxsize=1)(get_settings)


def clear_settings_cache() -> None:
    get_settings.cache_clear()  # type: ignore[attr-defined]

import pytest

from jwtcodec.core.config import Settings, get_settings

ENV_VARS = [
    "JWT_ALGORITHM",
    "JWT_SECRET_KEY",
    "JWT_KEY_ID",
    "JWT_PRIVATE_KEY_PATH",
    "JWT_PUBLIC_KEY_PATH",
    "JWT_ACCESS_TOKEN_TTL_SECONDS",
    "JWT_ISSUER",
    "JWT_ISSUE_NBF",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        # setenv first so teardown also removes values the .env loader writes
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env):
    settings = get_settings()
    assert settings.jwt_algorithm == "HS256"
    assert settings.jwt_secret_key == "change-me-in-env"
    assert settings.jwt_key_id == ""
    assert settings.jwt_access_token_ttl_seconds == 3600
    assert settings.jwt_issue_not_before is False


def test_environment_overrides(clean_env):
    clean_env.setenv("JWT_ALGORITHM", "rs384")
    clean_env.setenv("JWT_KEY_ID", "key-2024")
    clean_env.setenv("JWT_ACCESS_TOKEN_TTL_SECONDS", "60")
    clean_env.setenv("JWT_ISSUE_NBF", "yes")
    settings = get_settings()
    assert settings.jwt_algorithm == "RS384"
    assert settings.jwt_key_id == "key-2024"
    assert settings.jwt_access_token_ttl_seconds == 60
    assert settings.jwt_issue_not_before is True


def test_unrecognized_bool_falls_back_to_default(clean_env):
    clean_env.setenv("JWT_ISSUE_NBF", "maybe")
    assert get_settings().jwt_issue_not_before is False


def test_dotenv_file_is_loaded_without_overriding_environment(clean_env, tmp_path):
    (tmp_path / ".env").write_text(
        "# local settings\nJWT_ISSUER='issuer-from-file'\nJWT_KEY_ID=file-kid\n",
        encoding="utf-8",
    )
    clean_env.setenv("JWT_KEY_ID", "env-kid")
    settings = get_settings()
    assert settings.jwt_issuer == "issuer-from-file"
    assert settings.jwt_key_id == "env-kid"


def test_settings_are_cached(clean_env):
    assert get_settings() is get_settings()


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(AttributeError):
        settings.jwt_algorithm = "none"  # type: ignore[misc]

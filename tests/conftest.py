import pytest

from jwtcodec.algorithms import load_rsa_private_key, load_rsa_public_key
from jwtcodec.core.config import clear_settings_cache

from rsa_keys import RSA_PRIVATE_KEY_PEM, RSA_PUBLIC_KEY_PEM


@pytest.fixture(scope="session")
def rsa_private_key():
    return load_rsa_private_key(RSA_PRIVATE_KEY_PEM)


@pytest.fixture(scope="session")
def rsa_public_key():
    return load_rsa_public_key(RSA_PUBLIC_KEY_PEM)


@pytest.fixture(autouse=True)
def _fresh_settings():
    clear_settings_cache()
    yield
    clear_settings_cache()

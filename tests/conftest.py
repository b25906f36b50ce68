"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (no database)
    ├── integration/       # In-memory SQLite via aiosqlite, API via TestClient
    └── shared/            # Shared fixtures and utilities

Secrets are never read from the environment in tests: every fixture
builds ``Settings`` explicitly.
"""

import pytest
from pydantic import SecretStr

from piiguard_config import Settings, clear_settings_cache

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105
TEST_CRYPTO_SECRET = "test-crypto-secret-for-testing-only"  # NOQA: S105
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Low bcrypt work factor for fast tests
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Make sure no cached settings leak between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with explicit test secrets."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        crypto_secret_key=SecretStr(TEST_CRYPTO_SECRET),
        database_url=TEST_DATABASE_URL,
        password_hash_rounds=TEST_BCRYPT_ROUNDS,
        api_debug=True,
    )

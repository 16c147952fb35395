"""Shared test fixtures for the callguard test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from callguard.privacy.encryption import FieldCipher

TEST_KEY = "k" * 32
OTHER_KEY = "z" * 32


@pytest.fixture
def cipher() -> FieldCipher:
    """Cipher with a valid 32-byte key."""
    return FieldCipher(TEST_KEY)


@pytest.fixture
def other_cipher() -> FieldCipher:
    """Cipher with a different valid key."""
    return FieldCipher(OTHER_KEY)


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "environment = 'development'",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear cached settings and cipher before and after each test."""
    from callguard.config import get_settings
    from callguard.privacy.encryption import get_cipher

    get_settings.cache_clear()
    get_cipher.cache_clear()
    yield
    get_settings.cache_clear()
    get_cipher.cache_clear()

"""TOML configuration loader with layered environment overrides."""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "CALLGUARD_CONFIG_DIR"
ENVIRONMENT_ENV = "CALLGUARD_ENV"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    ``CALLGUARD_CONFIG_DIR`` wins when set and must exist. Otherwise the
    nearest ``config/`` directory holding a ``default.toml`` is used, searching
    from the working directory up to four parents.

    Returns:
        Path to the configuration directory, ``config/`` if none was found

    Raises:
        FileNotFoundError: If ``CALLGUARD_CONFIG_DIR`` is not a directory
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    current = Path.cwd()
    for candidate in (current, *current.parents[:4]):
        config_path = candidate / "config"
        if (config_path / "default.toml").exists():
            return config_path

    return Path("config")


def get_environment() -> str:
    """Get the current environment from CALLGUARD_ENV.

    Defaults to 'development' if not set.
    """
    return os.environ.get(ENVIRONMENT_ENV, "development")


def load_toml(file_path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary.

    Args:
        file_path: Path to the TOML file

    Returns:
        Dictionary containing the TOML data

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence.

    For nested dictionaries, values are merged recursively.
    For other values, override replaces base. Neither input is modified.

    Args:
        base: Base dictionary
        override: Override dictionary (takes precedence)

    Returns:
        Merged dictionary
    """
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(
    config_dir: Path | None = None,
    environment: str | None = None,
) -> dict[str, Any]:
    """Load ``default.toml`` then ``{environment}.toml`` from the config dir.

    Both files are optional: a deployment configured purely through
    ``CALLGUARD_*`` variables gets an empty mapping here.

    Args:
        config_dir: Directory to read, defaults to ``get_config_dir()``
        environment: Environment overlay to apply, defaults to
            ``get_environment()``

    Returns:
        Merged configuration dictionary
    """
    config_dir = config_dir or get_config_dir()
    environment = environment or get_environment()

    config: dict[str, Any] = {}

    default_path = config_dir / "default.toml"
    if default_path.exists():
        config = load_toml(default_path)

    env_path = config_dir / f"{environment}.toml"
    if env_path.exists():
        config = deep_merge(config, load_toml(env_path))

    return config

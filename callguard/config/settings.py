"""Root settings model for callguard configuration."""

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from callguard.config.models.api import APIConfig
from callguard.config.models.billing import BillingConfig
from callguard.config.models.crypto import CryptoConfig
from callguard.config.models.observability import ObservabilityConfig

Environment = Literal["development", "staging", "production", "test"]

# TOML values handed to the settings source by get_settings()
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration consumed by the next Settings()."""
    global _toml_config
    _toml_config = config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by the merged TOML configuration."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        value = _toml_config.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return _toml_config.copy()


class Settings(BaseSettings):
    """Root configuration object.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml
    3. config/{CALLGUARD_ENV}.toml
    4. CALLGUARD_* environment variables, e.g.
       ``CALLGUARD_CRYPTO__TRANSCRIPT_KEY``
    """

    model_config = SettingsConfigDict(
        env_prefix="CALLGUARD_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="callguard", description="Application name for logging")
    environment: Environment = Field(default="development", description="Deployment environment")

    crypto: CryptoConfig = Field(
        default_factory=CryptoConfig,
        description="Content encryption configuration",
    )
    api: APIConfig = Field(default_factory=APIConfig, description="API server configuration")
    billing: BillingConfig = Field(
        default_factory=BillingConfig,
        description="Seat billing configuration",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Constructor arguments, then environment, then TOML."""
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )

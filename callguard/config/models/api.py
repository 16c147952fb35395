"""API server configuration models."""

from pydantic import BaseModel, Field


class APIConfig(BaseModel):
    """HTTP surface configuration."""

    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=False,
        description="Allow credentials on CORS requests",
    )
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    expose_error_details: bool = Field(
        default=False,
        description="Include underlying exception text in error responses",
    )

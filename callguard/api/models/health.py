"""Health check response models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: Literal["healthy", "degraded"]
    version: str
    environment: str
    encryption_configured: bool
    timestamp: datetime

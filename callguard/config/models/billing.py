"""Seat billing configuration."""

from pydantic import BaseModel, Field


class BillingConfig(BaseModel):
    """Pricing inputs for seat upgrade quotes."""

    seat_price: int = Field(
        default=300,
        gt=0,
        description="Monthly price of one seat in major currency units",
    )
    currency: str = Field(default="INR", description="ISO currency code")
    billing_period_days: int = Field(
        default=30,
        gt=0,
        description="Length of a full billing month in days",
    )

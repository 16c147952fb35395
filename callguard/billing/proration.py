"""Seat upgrade proration.

Adding seats mid-cycle is charged for the days left until the next billing
date. Trials and subscriptions without a billing date pay a full month.
"""

import math
from datetime import UTC, datetime, timedelta
from typing import Literal

from pydantic import BaseModel, Field

from callguard.config import get_settings
from callguard.errors import InvalidSeatCountError, SubscriptionInactiveError
from callguard.observability.logging import get_logger

logger = get_logger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60
MINIMUM_CHARGE = 1
MINOR_UNITS_PER_MAJOR = 100

SubscriptionStatus = Literal["active", "trial", "past_due", "cancelled", "expired", "pending"]


class SeatSubscription(BaseModel):
    """The parts of a client's seat subscription that pricing depends on."""

    client_id: str
    seats_count: int = Field(ge=0)
    status: SubscriptionStatus = "active"
    is_trial: bool = False
    trial_ends_at: datetime | None = None
    next_billing_date: datetime | None = None
    last_payment_date: datetime | None = None


class SeatUpgradeQuote(BaseModel):
    """Amount due for adding seats to a subscription."""

    additional_seats: int
    current_seats: int
    new_total_seats: int
    prorated_amount: int
    """Charge in major currency units, at least 1."""

    amount_minor: int
    """Charge in minor units (paise) as payment gateways expect it."""

    currency: str
    full_monthly_price: int
    savings_amount: int
    days_remaining: int
    total_days: int
    prorated: bool
    billing_period_start: datetime
    billing_period_end: datetime


def _days_ceil(delta: timedelta) -> int:
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def quote_seat_upgrade(
    subscription: SeatSubscription,
    additional_seats: int,
    *,
    now: datetime | None = None,
    seat_price: int | None = None,
    currency: str | None = None,
) -> SeatUpgradeQuote:
    """Price ``additional_seats`` against the current billing period.

    Args:
        subscription: The client's seat subscription
        additional_seats: Seats to add, must be positive
        now: Pricing instant, defaults to the current UTC time
        seat_price: Monthly seat price, defaults to ``settings.billing``
        currency: Currency code, defaults to ``settings.billing``

    Raises:
        InvalidSeatCountError: additional_seats is not positive
        SubscriptionInactiveError: subscription status is not active
    """
    if additional_seats <= 0:
        raise InvalidSeatCountError("Invalid number of additional seats")
    if subscription.status != "active":
        raise SubscriptionInactiveError(
            "Subscription is not active. Please activate your subscription first."
        )

    billing = get_settings().billing
    seat_price = seat_price if seat_price is not None else billing.seat_price
    currency = currency or billing.currency
    period_days = billing.billing_period_days
    now = _aware(now or datetime.now(UTC))

    full_monthly_price = additional_seats * seat_price
    prorated = False

    if subscription.is_trial and subscription.trial_ends_at:
        # Seats bought during (or right after) a trial start a full month
        amount = full_monthly_price
        days_remaining = total_days = period_days
    elif subscription.next_billing_date:
        next_billing = _aware(subscription.next_billing_date)
        last_payment = (
            _aware(subscription.last_payment_date)
            if subscription.last_payment_date
            else next_billing - timedelta(days=period_days)
        )
        total_days = max(1, _days_ceil(next_billing - last_payment))
        days_remaining = max(1, _days_ceil(next_billing - now))
        daily_rate = seat_price / total_days
        amount = math.ceil(additional_seats * daily_rate * days_remaining)
        prorated = True
    else:
        amount = full_monthly_price
        days_remaining = total_days = period_days

    amount = max(amount, MINIMUM_CHARGE)

    billing_period_end = (
        _aware(subscription.next_billing_date)
        if subscription.next_billing_date
        else now + timedelta(days=period_days)
    )

    logger.info(
        "seat_upgrade_quoted",
        client_id=subscription.client_id,
        additional_seats=additional_seats,
        days_remaining=days_remaining,
        total_days=total_days,
        amount=amount,
        prorated=prorated,
    )

    return SeatUpgradeQuote(
        additional_seats=additional_seats,
        current_seats=subscription.seats_count,
        new_total_seats=subscription.seats_count + additional_seats,
        prorated_amount=amount,
        amount_minor=amount * MINOR_UNITS_PER_MAJOR,
        currency=currency,
        full_monthly_price=full_monthly_price,
        savings_amount=full_monthly_price - amount,
        days_remaining=days_remaining,
        total_days=total_days,
        prorated=prorated,
        billing_period_start=now,
        billing_period_end=billing_period_end,
    )

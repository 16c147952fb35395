"""Seat billing calculations."""

from callguard.billing.proration import SeatSubscription, SeatUpgradeQuote, quote_seat_upgrade

__all__ = ["SeatSubscription", "SeatUpgradeQuote", "quote_seat_upgrade"]

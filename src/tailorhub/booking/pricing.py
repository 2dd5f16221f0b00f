"""Illustrative price breakdown shown next to a booking.

None of these add-ons or discounts are charged: the order always stores the
service price as its total.
"""

from dataclasses import dataclass

PICKUP_AND_DELIVERY_FEE = 50.0
FIRST_ORDER_DISCOUNT = 100.0
ONLINE_PAYMENT_DISCOUNT_RATE = 0.05


@dataclass(frozen=True)
class PriceLine:
    label: str
    amount: float


@dataclass(frozen=True)
class PriceBreakdown:
    lines: tuple[PriceLine, ...]

    @property
    def total(self) -> float:
        return round(max(sum(line.amount for line in self.lines), 0.0), 2)


def price_breakdown(service_price: float, payment_method: str = "online", first_order: bool = True) -> PriceBreakdown:
    lines = [
        PriceLine("Service charge", service_price),
        PriceLine("Pickup & delivery", PICKUP_AND_DELIVERY_FEE),
    ]
    if first_order:
        lines.append(PriceLine("First order discount", -FIRST_ORDER_DISCOUNT))
    if payment_method == "online":
        lines.append(PriceLine("Online payment discount", -round(service_price * ONLINE_PAYMENT_DISCOUNT_RATE, 2)))
    return PriceBreakdown(lines=tuple(lines))

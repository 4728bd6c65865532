"""
Revenue pricing for flight offers.

Upstream prices are marked up and grossed up for the payment processor fee
exactly once, after offers are received and before they reach callers.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from src.booking_gateway.config import DEFAULT_PRICING, PricingConfig
from src.booking_gateway.schemas.offers import Offer, PricedOffer

Amount = Union[Decimal, str, int, float]


def calculate_final_price(
    base_amount: Amount,
    config: PricingConfig = DEFAULT_PRICING,
) -> Decimal:
    """
    Apply markup and processing fee gross-up to a base amount.

    Args:
        base_amount: Upstream price. Floats go through ``str`` first so
            ``100.1`` means 100.10, not its binary approximation.
        config: Pricing parameters.

    Returns:
        Final price rounded half-up to the configured quantum.

    Example:
        >>> calculate_final_price("100.00")
        Decimal('105.05')
    """
    base = base_amount if isinstance(base_amount, Decimal) else Decimal(str(base_amount))
    marked_up = base * (Decimal(1) + config.markup_rate)
    grossed_up = marked_up / (Decimal(1) - config.processing_fee_rate)
    return grossed_up.quantize(config.quantum, rounding=ROUND_HALF_UP)


def apply_pricing(offer: Offer, config: PricingConfig = DEFAULT_PRICING) -> PricedOffer:
    """
    Turn an upstream offer into a priced offer.

    Args:
        offer: Offer exactly as returned by Duffel.
        config: Pricing parameters.

    Returns:
        PricedOffer with ``original_amount`` set to the upstream amount and
        ``total_amount``/``display_price`` set to the final price.

    Raises:
        ValueError: If the offer has already been priced.
    """
    if isinstance(offer, PricedOffer):
        raise ValueError(f"Offer {offer.id} is already priced")

    final_price = calculate_final_price(offer.total_amount, config)
    fields = offer.model_dump()
    fields.update(
        original_amount=offer.total_amount,
        total_amount=str(final_price),
        display_price=final_price,
    )
    return PricedOffer.model_validate(fields)

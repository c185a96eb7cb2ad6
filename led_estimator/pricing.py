# pricing.py
# Sell price resolution for catalog items under the three pricing policies.

import logging
from enum import Enum

from led_estimator.errors import InvalidInput, require_number

logger = logging.getLogger(__name__)

DEFAULT_GLOBAL_MARKUP = 20.0
DEFAULT_BESPOKE_MARKUP = 20.0


class PricingMethod(str, Enum):
    GLOBAL = "global"         # shop-wide markup over cost
    BESPOKE = "bespoke"       # per-item markup over cost
    MANUAL = "manual"         # sell price typed in by hand


def parse_method(method) -> PricingMethod:
    try:
        return PricingMethod(method)
    except ValueError:
        options = ", ".join(m.value for m in PricingMethod)
        raise InvalidInput(f"unknown pricing method {method!r} (expected one of: {options})") from None


def apply_markup(unit_cost: float, markup_percent: float) -> float:
    return unit_cost * (1 + markup_percent / 100.0)


def resolve_sell_price(unit_cost, method, global_markup_percent=DEFAULT_GLOBAL_MARKUP,
                       bespoke_markup_percent=None, manual_sell_price=None) -> float:
    """
    Resolve the customer-facing unit price of an item.

    The global markup is passed in by the caller (normally from
    EstimatorSettings). Negative markups are accepted as discount pricing.
    """
    method = parse_method(method)

    if method is PricingMethod.MANUAL:
        if manual_sell_price is None:
            raise InvalidInput("manual pricing requires a sell price")
        price = require_number(manual_sell_price, "manual sell price", minimum=0)
        logger.debug("Manual sell price %.2f", price)
        return price

    cost = require_number(unit_cost, "unit cost", minimum=0)
    if method is PricingMethod.GLOBAL:
        markup = require_number(global_markup_percent, "global markup %")
    else:
        if bespoke_markup_percent is None:
            bespoke_markup_percent = DEFAULT_BESPOKE_MARKUP
        markup = require_number(bespoke_markup_percent, "bespoke markup %")

    price = apply_markup(cost, markup)
    logger.debug("%s markup %.1f%% on cost %.2f -> %.2f", method.value, markup, cost, price)
    return price

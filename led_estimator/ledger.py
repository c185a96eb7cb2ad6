# ledger.py
# Running quote: ordered line items with quantity edits, removal and
# cost / buy / sell totals with markup, fees and profit tracking.

import logging
import threading
from dataclasses import dataclass, replace
from typing import List, Optional

from led_estimator.errors import InvalidInput, NotFound, require_number
from led_estimator.models import DisplayResult, Product
from led_estimator.pricing import resolve_sell_price
from led_estimator.settings import EstimatorSettings

logger = logging.getLogger(__name__)


# -----------------------
# Line items
# -----------------------

@dataclass
class QuoteItemInput:
    """
    What a caller hands the ledger. With ``pricing_method`` set the sell
    price is resolved from ``unit_cost`` (``unit_price`` is the hand-typed
    price for manual pricing); without it ``unit_price`` is used as-is,
    falling back to ``unit_cost``.
    """
    name: str
    category: str
    quantity: int = 1
    manufacturer: Optional[str] = None
    unit_cost: Optional[float] = None
    buy_price: Optional[float] = None
    unit_price: Optional[float] = None
    pricing_method: Optional[str] = None
    bespoke_markup: Optional[float] = None


@dataclass
class QuoteItem:
    id: int
    name: str
    category: str
    quantity: int
    sell_price: float
    total_price: float
    manufacturer: Optional[str] = None
    unit_cost: Optional[float] = None
    buy_price: Optional[float] = None

    @property
    def unit_price(self) -> float:
        return self.sell_price

    @property
    def effective_buy_price(self) -> float:
        # buy price, else cost, else what we sell it for
        if self.buy_price is not None:
            return self.buy_price
        if self.unit_cost is not None:
            return self.unit_cost
        return self.unit_price

    @property
    def effective_sell_price(self) -> float:
        return self.sell_price


def _require_quantity(quantity) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidInput(f"quantity must be a whole number, got {quantity!r}")
    if quantity < 0:
        raise InvalidInput(f"quantity cannot be negative, got {quantity}")
    return quantity


# -----------------------
# Quote aggregate
# -----------------------

@dataclass(frozen=True)
class CustomerInfo:
    customer_name: str
    project_name: str
    customer_email: str = ""
    description: str = ""
    markup_percentage: float = 25.0
    fees: float = 0.0

    def __post_init__(self):
        if not (self.customer_name or "").strip():
            raise InvalidInput("customer name is required")
        if not (self.project_name or "").strip():
            raise InvalidInput("project name is required")
        require_number(self.markup_percentage, "markup %")
        require_number(self.fees, "fees", minimum=0)


@dataclass(frozen=True)
class Quote:
    subtotal: float
    markup_percentage: float
    markup_amount: float
    fees: float
    total: float
    buy_total: float
    sell_total: float
    profit_margin: float
    profit_percentage: float
    item_count: int
    customer: Optional[CustomerInfo] = None


# -----------------------
# Ledger
# -----------------------

class QuoteLedger:
    """
    The line items of one quote-building session.

    Ids start at 1 and are never reused, even after removal. Mutations are
    serialized by a lock and either apply completely or not at all.
    """

    def __init__(self, settings: Optional[EstimatorSettings] = None):
        self.settings = settings or EstimatorSettings()
        self._items: List[QuoteItem] = []
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self):
        return len(self._items)

    @property
    def items(self) -> List[QuoteItem]:
        with self._lock:
            return [replace(item) for item in self._items]

    def get_item(self, item_id: int) -> QuoteItem:
        with self._lock:
            return replace(self._find(item_id))

    def _find(self, item_id):
        for item in self._items:
            if item.id == item_id:
                return item
        raise NotFound(f"no quote item with id {item_id!r}")

    def _sell_price(self, item: QuoteItemInput) -> float:
        if item.pricing_method is not None:
            return resolve_sell_price(
                item.unit_cost,
                item.pricing_method,
                global_markup_percent=self.settings.global_markup_percent,
                bespoke_markup_percent=(item.bespoke_markup if item.bespoke_markup is not None
                                        else self.settings.bespoke_markup_percent),
                manual_sell_price=item.unit_price,
            )
        price = item.unit_price if item.unit_price is not None else item.unit_cost
        if price is None:
            raise InvalidInput(f"{item.name!r} needs a unit price or a unit cost")
        return require_number(price, "unit price", minimum=0)

    def add_item(self, item: QuoteItemInput) -> int:
        if not (item.name or "").strip():
            raise InvalidInput("item name is required")
        quantity = _require_quantity(item.quantity)
        sell_price = self._sell_price(item)
        unit_cost = None if item.unit_cost is None else require_number(item.unit_cost, "unit cost", minimum=0)
        buy_price = None if item.buy_price is None else require_number(item.buy_price, "buy price", minimum=0)

        with self._lock:
            item_id = self._next_id
            self._next_id += 1
            self._items.append(QuoteItem(
                id=item_id,
                name=item.name,
                category=str(getattr(item.category, "value", item.category)),
                quantity=quantity,
                sell_price=sell_price,
                total_price=sell_price * quantity,
                manufacturer=item.manufacturer,
                unit_cost=unit_cost,
                buy_price=buy_price,
            ))

        logger.info("Added quote item #%d %s x%d @ $%.2f", item_id, item.name, quantity, sell_price,
                    extra={"item_id": item_id, "total": sell_price * quantity})
        return item_id

    def _product_input(self, product: Product, quantity=1, nickname=None) -> QuoteItemInput:
        tile = product.tile
        buy_price = product.unit_cost
        if buy_price is None and tile is not None:
            buy_price = tile.buy_price
        unit_price = product.unit_price
        if unit_price is None and tile is not None:
            unit_price = tile.sell_price

        name = product.name + (f" ({nickname})" if nickname else "")
        return QuoteItemInput(
            name=name,
            category=product.category.value,
            quantity=quantity,
            manufacturer=product.manufacturer,
            unit_cost=product.unit_cost,
            buy_price=buy_price,
            unit_price=unit_price,
            pricing_method=product.pricing_method,
            bespoke_markup=product.bespoke_markup,
        )

    def product_sell_price(self, product: Product) -> float:
        """
        The unit sell price ``add_product`` would record for ``product``
        under the current settings. Size displays with this price so the
        estimate matches the line that lands in the quote.
        """
        return self._sell_price(self._product_input(product))

    def add_product(self, product: Product, quantity: int = 1, nickname: Optional[str] = None) -> int:
        """Add a catalog product, priced by the product's own pricing method."""
        return self.add_item(self._product_input(product, quantity, nickname))

    def add_display(self, result: DisplayResult, product: Product) -> int:
        """Add a sized wall as ``total_tiles`` of its LED tile product."""
        if product.tile is None:
            raise InvalidInput(f"{product.name!r} is not an LED tile product")
        if result.total_tiles == 0:
            raise InvalidInput("the display has no tiles; enlarge the requested size")
        return self.add_product(product, result.total_tiles, nickname=result.nickname)

    def remove_item(self, item_id: int) -> None:
        with self._lock:
            before = len(self._items)
            self._items = [item for item in self._items if item.id != item_id]
            removed = before != len(self._items)
        if removed:
            logger.info("Removed quote item #%s", item_id, extra={"item_id": item_id})

    def update_quantity(self, item_id: int, quantity: int) -> None:
        quantity = _require_quantity(quantity)
        with self._lock:
            item = self._find(item_id)
            item.quantity = quantity
            item.total_price = item.unit_price * quantity
        logger.info("Quote item #%s quantity -> %d", item_id, quantity, extra={"item_id": item_id})

    def clear(self) -> None:
        with self._lock:
            self._items = []

    def compute_totals(self, markup_percentage, fees, customer: Optional[CustomerInfo] = None) -> Quote:
        markup_percentage = require_number(markup_percentage, "markup %")
        fees = require_number(fees, "fees", minimum=0)
        items = self.items

        subtotal = sum(item.total_price for item in items)
        markup_amount = subtotal * markup_percentage / 100.0
        buy_total = sum(item.effective_buy_price * item.quantity for item in items)
        sell_total = sum(item.effective_sell_price * item.quantity for item in items)
        profit = sell_total - buy_total
        profit_pct = (profit / buy_total * 100.0) if buy_total > 0 else 0.0

        return Quote(
            subtotal=subtotal,
            markup_percentage=markup_percentage,
            markup_amount=markup_amount,
            fees=fees,
            total=subtotal + markup_amount + fees,
            buy_total=buy_total,
            sell_total=sell_total,
            profit_margin=profit,
            profit_percentage=profit_pct,
            item_count=len(items),
            customer=customer,
        )

    def submit(self, store, customer: CustomerInfo):
        """Total the quote with the customer's markup and fees and save it."""
        quote = self.compute_totals(customer.markup_percentage, customer.fees, customer=customer)
        quote_id = store.save_quote(quote, self.items)
        logger.info("Saved quote %s for %s: %d items, total $%.2f",
                    quote_id, customer.project_name, quote.item_count, quote.total,
                    extra={"quote_id": quote_id, "total": quote.total})
        return quote_id

# catalog.py
# In-memory product catalog and quote store standing in for the relational
# backend. Seeded with the stock product list; can also be loaded from CSV.

import itertools
import logging
from typing import Dict, Iterable, List, Optional

import pandas as pd

from led_estimator.errors import InvalidInput, NotFound
from led_estimator.models import (
    PowerEquipmentSpec,
    ProcessorSpec,
    Product,
    ProductCategory,
    ReceivingCardType,
    TileSpec,
)

logger = logging.getLogger(__name__)


# -----------------------
# Seed data
# -----------------------

SEED_PRODUCTS = [
    Product(
        id=1, name="P2.5 LED Tile", category=ProductCategory.LED_TILE,
        manufacturer="NovaStar", model_number="NS-P2.5-500x500",
        unit_cost=450.0, unit_price=650.0, power_w=120, pricing_method="manual",
        spec=TileSpec(
            pixel_pitch_mm=2.5, physical_width_mm=500, physical_height_mm=500,
            pixel_width=192, pixel_height=192, weight_kg=8.5,
            max_power_w=120, avg_power_w=40, brightness_nits=5000, refresh_rate_hz=3840,
            receiving_card_type=ReceivingCardType.NOVASTAR, scan_rate=16,
            buy_price=450.0, sell_price=650.0,
        ),
    ),
    Product(
        id=2, name="P3 LED Tile", category=ProductCategory.LED_TILE,
        manufacturer="NovaStar", model_number="NS-P3-500x500",
        unit_cost=380.0, unit_price=550.0, power_w=100, pricing_method="manual",
        spec=TileSpec(
            pixel_pitch_mm=3.0, physical_width_mm=500, physical_height_mm=500,
            pixel_width=160, pixel_height=160, weight_kg=8.0,
            max_power_w=100, avg_power_w=35, brightness_nits=4500, refresh_rate_hz=3840,
            receiving_card_type=ReceivingCardType.NOVASTAR, scan_rate=16,
            buy_price=380.0, sell_price=550.0,
        ),
    ),
    Product(
        id=3, name="VX1000 LED Processor", category=ProductCategory.LED_PROCESSOR,
        manufacturer="NovaStar", model_number="NS-VX1000",
        unit_cost=1200.0, unit_price=1800.0, power_w=25, pricing_method="manual",
        spec=ProcessorSpec(inputs=4, outputs=8, max_res_w=7680, max_res_h=4320, scaling=True),
    ),
    Product(
        id=4, name="5kW Power Supply", category=ProductCategory.POWER_EQUIPMENT,
        manufacturer="Mean Well", model_number="SP-5000-48",
        unit_cost=800.0, unit_price=1200.0, power_w=5000, pricing_method="manual",
        spec=PowerEquipmentSpec(capacity_w=5000, phase="Single", redundancy=False),
    ),
    Product(id=5, name="Media Server Pro", category=ProductCategory.COMPUTING,
            manufacturer="HP", model_number="HP-Z2-G9", unit_cost=2500.0, unit_price=3500.0,
            power_w=300, pricing_method="global"),
    Product(id=6, name="LED Wash Light", category=ProductCategory.LIGHTING,
            manufacturer="Chauvet", model_number="CH-WASH-FX", unit_cost=450.0, unit_price=650.0,
            power_w=150, pricing_method="global"),
    Product(id=7, name="Active Speaker", category=ProductCategory.AUDIO,
            manufacturer="JBL", model_number="JBL-PRX812", unit_cost=800.0, unit_price=1200.0,
            power_w=1200, pricing_method="global"),
    Product(id=8, name="PTZ Camera", category=ProductCategory.CAMERA,
            manufacturer="Sony", model_number="SRG-X400", unit_cost=1200.0, unit_price=1800.0,
            power_w=25, pricing_method="bespoke", bespoke_markup=35),
    Product(id=9, name="Gigabit Switch", category=ProductCategory.NETWORKING,
            manufacturer="Cisco", model_number="SG350-28", unit_cost=300.0, unit_price=450.0,
            power_w=35, pricing_method="global"),
    Product(id=10, name="Cat6 Cable", category=ProductCategory.CABLE,
            manufacturer="Belden", model_number="CAT6-100M", unit_cost=120.0, unit_price=180.0,
            power_w=0, pricing_method="global"),
    Product(id=11, name="Mounting Bracket", category=ProductCategory.HARDWARE,
            manufacturer="Generic", model_number="MB-500x500", unit_cost=25.0, unit_price=35.0,
            power_w=0, pricing_method="bespoke", bespoke_markup=40),
]


# -----------------------
# Catalog
# -----------------------

class InMemoryCatalog:
    """Product lookups in insertion order. Empty results are never errors."""

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: Dict[int, Product] = {}
        for product in products if products is not None else SEED_PRODUCTS:
            if product.id in self._products:
                raise InvalidInput(f"duplicate product id {product.id}")
            self._products[product.id] = product

    def __len__(self):
        return len(self._products)

    def find_products(self, category=None, search=None) -> List[Product]:
        if category is not None:
            try:
                category = ProductCategory(category)
            except ValueError:
                raise InvalidInput(f"unknown product category {category!r}") from None
        return [
            p for p in self._products.values()
            if (category is None or p.category is category) and (not search or p.matches(search))
        ]

    def find_tile_products(self, search=None) -> List[Product]:
        return [p for p in self.find_products(ProductCategory.LED_TILE, search) if p.tile is not None]

    def find_tile_specs(self, search=None) -> List[TileSpec]:
        return [p.tile for p in self.find_tile_products(search)]

    def find_product_by_id(self, product_id: int) -> Product:
        try:
            return self._products[product_id]
        except KeyError:
            logger.warning("Catalog lookup miss for product id %r", product_id,
                           extra={"product_id": product_id})
            raise NotFound(f"no product with id {product_id!r}") from None


# -----------------------
# CSV loading
# -----------------------

REQUIRED_COLUMNS = ["id", "name", "category", "unit_cost"]
TILE_COLUMNS = [
    "pixel_pitch_mm", "physical_width_mm", "physical_height_mm", "pixel_width",
    "pixel_height", "weight_kg", "max_power_w", "avg_power_w", "brightness_nits",
    "refresh_rate_hz",
]
INT_TILE_FIELDS = {"pixel_width", "pixel_height", "brightness_nits", "refresh_rate_hz", "scan_rate"}


def _cell(row, column):
    value = row.get(column)
    if value is None or pd.isna(value):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _tile_from_row(row) -> TileSpec:
    values = {}
    for column in TILE_COLUMNS:
        value = _cell(row, "tile_" + column)
        if value is None:
            raise InvalidInput(f"LED tile row {row.get('id')!r} is missing tile_{column}")
        values[column] = int(value) if column in INT_TILE_FIELDS else float(value)

    scan_rate = _cell(row, "tile_scan_rate")
    card = _cell(row, "tile_receiving_card_type") or ReceivingCardType.NOVASTAR.value
    try:
        card = ReceivingCardType(str(card).upper())
    except ValueError:
        raise InvalidInput(f"unknown receiving card type {card!r}") from None

    return TileSpec(
        receiving_card_type=card,
        scan_rate=int(scan_rate) if scan_rate is not None else None,
        buy_price=float(_cell(row, "tile_buy_price") or 0.0),
        sell_price=float(_cell(row, "tile_sell_price") or 0.0),
        **values,
    )


def load_catalog_csv(path) -> InMemoryCatalog:
    """
    Build a catalog from a flat CSV export. LED_TILE rows need the
    ``tile_*`` columns; every other category ignores them.
    """
    df = pd.read_csv(path)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise InvalidInput(f"catalog CSV is missing columns: {', '.join(missing)}")

    products = []
    for row in df.to_dict("records"):
        category = str(row["category"]).strip().upper()
        unit_cost = _cell(row, "unit_cost")
        unit_price = _cell(row, "unit_price")
        power_w = _cell(row, "power_w")
        bespoke = _cell(row, "bespoke_markup")
        products.append(Product(
            id=int(row["id"]),
            name=str(row["name"]),
            category=category,
            unit_cost=float(unit_cost) if unit_cost is not None else None,
            unit_price=float(unit_price) if unit_price is not None else None,
            manufacturer=_cell(row, "manufacturer"),
            model_number=_cell(row, "model_number"),
            power_w=float(power_w) if power_w is not None else None,
            pricing_method=_cell(row, "pricing_method"),
            bespoke_markup=float(bespoke) if bespoke is not None else None,
            spec=_tile_from_row(row) if category == ProductCategory.LED_TILE.value else None,
        ))

    logger.info("Loaded %d products from %s", len(products), path)
    return InMemoryCatalog(products)


# -----------------------
# Quote store
# -----------------------

class InMemoryQuoteStore:
    """Write-only quote persistence: keeps (quote, items) under sequential ids."""

    def __init__(self):
        self.saved = {}
        self._ids = itertools.count(1)

    def save_quote(self, quote, items) -> int:
        quote_id = next(self._ids)
        self.saved[quote_id] = (quote, list(items))
        return quote_id

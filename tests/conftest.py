"""
Shared pytest fixtures for the estimator test suite.
"""
import logging

import pytest

from led_estimator.ledger import QuoteLedger
from led_estimator.models import Product, ProductCategory, ReceivingCardType, TileSpec
from led_estimator.settings import EstimatorSettings


@pytest.fixture
def tile():
    """500 x 500 mm, 192 x 192 px cabinet; 120 W max / 40 W avg."""
    return TileSpec(
        pixel_pitch_mm=2.6, physical_width_mm=500, physical_height_mm=500,
        pixel_width=192, pixel_height=192, weight_kg=8.5,
        max_power_w=120, avg_power_w=40, brightness_nits=5000, refresh_rate_hz=3840,
        receiving_card_type=ReceivingCardType.NOVASTAR,
        buy_price=450.0, sell_price=650.0,
    )


@pytest.fixture
def tile_product(tile):
    return Product(
        id=1, name="P2.6 LED Tile", category=ProductCategory.LED_TILE,
        manufacturer="NovaStar", model_number="NS-P2.6", unit_cost=450.0,
        unit_price=650.0, pricing_method="manual", spec=tile,
    )


@pytest.fixture
def ledger():
    return QuoteLedger(EstimatorSettings())


@pytest.fixture
def restore_root_logger():
    """setup_logging() replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)

# led_estimator
# Display sizing, power planning and quote aggregation for LED video walls.

from led_estimator.errors import EstimatorError, InvalidInput, NotFound
from led_estimator.ledger import CustomerInfo, Quote, QuoteItem, QuoteItemInput, QuoteLedger
from led_estimator.models import (
    DisplayRequest,
    DisplayResult,
    PowerEquipmentSpec,
    ProcessorSpec,
    Product,
    ProductCategory,
    ReceivingCardType,
    TileSpec,
)
from led_estimator.power import PowerInputs, PowerPlan, plan_power
from led_estimator.pricing import PricingMethod, resolve_sell_price
from led_estimator.processors import ProcessorTier, recommend_processor
from led_estimator.settings import EstimatorSettings, load_settings
from led_estimator.tiles import calculate_grid, size_display
from led_estimator.units import LengthUnit, meters_to_feet_inches, to_meters, watts_to_btu_per_hour

__version__ = "0.3.0"

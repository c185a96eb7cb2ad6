# models.py
# Catalog and sizing data shapes: tile specs, the tagged product union,
# display requests and their computed results.

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from led_estimator.errors import InvalidInput


class ProductCategory(str, Enum):
    LED_TILE = "LED_TILE"
    LED_PROCESSOR = "LED_PROCESSOR"
    POWER_EQUIPMENT = "POWER_EQUIPMENT"
    COMPUTING = "COMPUTING"
    LIGHTING = "LIGHTING"
    AUDIO = "AUDIO"
    CAMERA = "CAMERA"
    GRIP_EQUIPMENT = "GRIP_EQUIPMENT"
    STRUCTURAL_ITEM = "STRUCTURAL_ITEM"
    GRIP_ITEM = "GRIP_ITEM"
    NETWORKING = "NETWORKING"
    CABLE = "CABLE"
    HARDWARE = "HARDWARE"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class ReceivingCardType(str, Enum):
    NOVASTAR = "NOVASTAR"
    COLORLIGHT = "COLORLIGHT"
    LINSN = "LINSN"
    BROMPTON = "BROMPTON"
    MEGAPIXEL = "MEGAPIXEL"


# -----------------------
# Category specs
# -----------------------

@dataclass(frozen=True)
class TileSpec:
    pixel_pitch_mm: float
    physical_width_mm: float
    physical_height_mm: float
    pixel_width: int
    pixel_height: int
    weight_kg: float
    max_power_w: float
    avg_power_w: float
    brightness_nits: int
    refresh_rate_hz: int
    receiving_card_type: ReceivingCardType = ReceivingCardType.NOVASTAR
    scan_rate: Optional[int] = None
    buy_price: float = 0.0
    sell_price: float = 0.0

    @property
    def width_m(self) -> float:
        return self.physical_width_mm / 1000.0

    @property
    def height_m(self) -> float:
        return self.physical_height_mm / 1000.0

    @property
    def pixels(self) -> int:
        return self.pixel_width * self.pixel_height


@dataclass(frozen=True)
class ProcessorSpec:
    inputs: int
    outputs: int
    max_res_w: int
    max_res_h: int
    scaling: bool = False


@dataclass(frozen=True)
class PowerEquipmentSpec:
    capacity_w: float
    phase: str = "Single"
    redundancy: bool = False


CategorySpec = Union[TileSpec, ProcessorSpec, PowerEquipmentSpec]

# Only these categories carry a spec, and only of the listed type.
SPEC_TYPES = {
    ProductCategory.LED_TILE: TileSpec,
    ProductCategory.LED_PROCESSOR: ProcessorSpec,
    ProductCategory.POWER_EQUIPMENT: PowerEquipmentSpec,
}


@dataclass(frozen=True)
class Product:
    """
    A catalog product. ``category`` is the tag of the union: an LED_TILE
    carries a TileSpec, an LED_PROCESSOR a ProcessorSpec, POWER_EQUIPMENT a
    PowerEquipmentSpec, and every other category carries no spec at all.
    """
    id: int
    name: str
    category: ProductCategory
    unit_cost: Optional[float]
    unit_price: Optional[float] = None
    manufacturer: Optional[str] = None
    model_number: Optional[str] = None
    power_w: Optional[float] = None
    pricing_method: Optional[str] = None
    bespoke_markup: Optional[float] = None
    spec: Optional[CategorySpec] = None

    def __post_init__(self):
        try:
            category = ProductCategory(self.category)
        except ValueError:
            raise InvalidInput(f"unknown product category {self.category!r}") from None
        object.__setattr__(self, "category", category)

        expected = SPEC_TYPES.get(category)
        if self.spec is None:
            return
        if expected is None:
            raise InvalidInput(f"{category.value} products carry no category spec")
        if not isinstance(self.spec, expected):
            raise InvalidInput(
                f"{category.value} spec must be {expected.__name__}, got {type(self.spec).__name__}"
            )

    @property
    def tile(self) -> Optional[TileSpec]:
        return self.spec if isinstance(self.spec, TileSpec) else None

    def matches(self, search: str) -> bool:
        needle = search.strip().lower()
        if not needle:
            return True
        fields = (self.name, self.manufacturer or "", self.model_number or "")
        return any(needle in f.lower() for f in fields)


# -----------------------
# Display sizing
# -----------------------

@dataclass(frozen=True)
class DisplayRequest:
    width_value: float
    height_value: float
    unit: str
    tile: TileSpec
    nickname: Optional[str] = None


@dataclass(frozen=True)
class DisplayResult:
    tiles_x: int
    tiles_y: int
    total_tiles: int
    actual_width_m: float
    actual_height_m: float
    total_area_m2: float
    total_power_max_w: float
    total_power_avg_w: float
    total_resolution_w: int
    total_resolution_h: int
    recommended_processor: str
    estimated_cost: float
    max_btu_per_hour: float = 0.0
    avg_btu_per_hour: float = 0.0
    total_weight_kg: float = 0.0
    nickname: Optional[str] = field(default=None, compare=False)

    @property
    def total_pixels(self) -> int:
        return self.total_resolution_w * self.total_resolution_h

    @property
    def is_empty(self) -> bool:
        return self.total_tiles == 0

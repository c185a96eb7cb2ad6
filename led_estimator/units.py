# units.py
# Length and power unit normalization for display sizing.

import math
from enum import Enum

from led_estimator.errors import InvalidInput, require_number

METERS_PER_FOOT = 0.3048
INCHES_PER_METER = 39.3701
BTU_PER_WATT_HOUR = 3.412141


class LengthUnit(str, Enum):
    FEET = "feet"
    METERS = "meters"
    TILE_COUNT = "tileCount"


def parse_unit(unit) -> LengthUnit:
    try:
        return LengthUnit(unit)
    except ValueError:
        options = ", ".join(u.value for u in LengthUnit)
        raise InvalidInput(f"unknown length unit {unit!r} (expected one of: {options})") from None


def feet_to_meters(feet: float) -> float:
    return feet * METERS_PER_FOOT


def meters_to_feet(meters: float) -> float:
    return meters / METERS_PER_FOOT


def to_meters(value, unit, tile=None, axis="width") -> float:
    """
    Normalize a requested length to meters.

    A tile count is multiplied by the tile's physical width (axis="width")
    or height (axis="height"), so it needs the tile spec.
    """
    unit = parse_unit(unit)
    number = require_number(value, "length")

    if unit is LengthUnit.FEET:
        return feet_to_meters(number)
    if unit is LengthUnit.METERS:
        return number

    if tile is None:
        raise InvalidInput("a tile spec is required to convert a tile count to meters")
    if axis == "width":
        return number * tile.width_m
    if axis == "height":
        return number * tile.height_m
    raise InvalidInput(f"axis must be 'width' or 'height', got {axis!r}")


def watts_to_btu_per_hour(watts: float) -> float:
    return watts * BTU_PER_WATT_HOUR


def meters_to_feet_inches(meters: float) -> str:
    """Render meters as feet and inches to the nearest half inch, e.g. 4' 3.5"."""
    total_inches = meters * INCHES_PER_METER
    feet = math.floor(total_inches / 12)
    inches = total_inches - feet * 12

    # half-up, like a tape measure reading
    rounded = math.floor(inches * 2 + 0.5) / 2

    if rounded == 0:
        return f"{feet}'"
    if rounded == 12:
        return f"{feet + 1}'"
    return f"{feet}' {rounded:g}\""

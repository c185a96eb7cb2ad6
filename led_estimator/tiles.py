# tiles.py
# Tile grid sizing: snaps a requested wall size down to whole tiles and
# derives resolution, power, heat load, processor class and cost.

import logging
import math

from led_estimator.errors import InvalidInput, require_number
from led_estimator.models import DisplayRequest, DisplayResult, TileSpec
from led_estimator.processors import recommend_processor
from led_estimator.units import to_meters, watts_to_btu_per_hour

logger = logging.getLogger(__name__)

# Absorbs float noise so a size that is already a whole number of tiles
# (e.g. a previous result fed back in) keeps its tile count.
TILE_SNAP_TOLERANCE = 1e-9


def _whole_tiles(requested_m: float, tile_m: float) -> int:
    return math.floor(requested_m / tile_m + TILE_SNAP_TOLERANCE)


def calculate_grid(width_m, height_m, tile: TileSpec, unit_price=None, nickname=None) -> DisplayResult:
    """
    Size a wall from a requested footprint in meters.

    Tiles are floored, never rounded up, so the built wall always fits the
    requested space. A footprint smaller than one tile gives a zero-tile
    result rather than an error; callers decide what to tell the user.
    """
    width_m = require_number(width_m, "requested width", minimum=0, exclusive=True)
    height_m = require_number(height_m, "requested height", minimum=0, exclusive=True)
    if tile is None:
        raise InvalidInput("a tile spec is required")
    require_number(tile.physical_width_mm, "tile physical width", minimum=0, exclusive=True)
    require_number(tile.physical_height_mm, "tile physical height", minimum=0, exclusive=True)

    if unit_price is None:
        unit_price = tile.sell_price
    unit_price = require_number(unit_price, "tile unit price", minimum=0)

    tile_w = tile.width_m
    tile_h = tile.height_m
    tiles_x = _whole_tiles(width_m, tile_w)
    tiles_y = _whole_tiles(height_m, tile_h)
    total_tiles = tiles_x * tiles_y

    # a snapped count can overshoot the request by float noise
    actual_w = min(tiles_x * tile_w, width_m)
    actual_h = min(tiles_y * tile_h, height_m)

    power_max = total_tiles * tile.max_power_w
    power_avg = total_tiles * tile.avg_power_w
    res_w = tiles_x * tile.pixel_width
    res_h = tiles_y * tile.pixel_height

    result = DisplayResult(
        tiles_x=tiles_x,
        tiles_y=tiles_y,
        total_tiles=total_tiles,
        actual_width_m=actual_w,
        actual_height_m=actual_h,
        total_area_m2=actual_w * actual_h,
        total_power_max_w=power_max,
        total_power_avg_w=power_avg,
        total_resolution_w=res_w,
        total_resolution_h=res_h,
        recommended_processor=recommend_processor(res_w * res_h).value,
        estimated_cost=total_tiles * unit_price,
        max_btu_per_hour=watts_to_btu_per_hour(power_max),
        avg_btu_per_hour=watts_to_btu_per_hour(power_avg),
        total_weight_kg=total_tiles * tile.weight_kg,
        nickname=nickname,
    )

    if total_tiles == 0:
        logger.debug("Requested %.3fm x %.3fm is smaller than one %.0fx%.0fmm tile",
                     width_m, height_m, tile.physical_width_mm, tile.physical_height_mm)
    return result


def size_display(request: DisplayRequest, unit_price=None) -> DisplayResult:
    """Normalize a DisplayRequest to meters and size it."""
    width_m = to_meters(request.width_value, request.unit, request.tile, axis="width")
    height_m = to_meters(request.height_value, request.unit, request.tile, axis="height")
    return calculate_grid(width_m, height_m, request.tile,
                          unit_price=unit_price, nickname=request.nickname)

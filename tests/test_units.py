"""
test_units.py: length/power conversions and the feet-and-inches label
"""
import pytest

from led_estimator.errors import InvalidInput
from led_estimator.models import TileSpec
from led_estimator.units import (
    INCHES_PER_METER,
    LengthUnit,
    meters_to_feet,
    meters_to_feet_inches,
    to_meters,
    watts_to_btu_per_hour,
)


class TestToMeters:

    def test_feet(self):
        assert to_meters(10, "feet") == pytest.approx(3.048)

    def test_meters_identity(self):
        assert to_meters(5, LengthUnit.METERS) == 5.0

    def test_numeric_string_accepted(self):
        assert to_meters("2.5", "meters") == 2.5

    def test_tile_count_uses_axis_dimension(self, tile):
        wide = TileSpec(
            pixel_pitch_mm=3.9, physical_width_mm=500, physical_height_mm=1000,
            pixel_width=128, pixel_height=256, weight_kg=12, max_power_w=200,
            avg_power_w=70, brightness_nits=4500, refresh_rate_hz=3840,
        )
        assert to_meters(4, "tileCount", wide, axis="width") == pytest.approx(2.0)
        assert to_meters(4, "tileCount", wide, axis="height") == pytest.approx(4.0)

    def test_tile_count_without_tile(self):
        with pytest.raises(InvalidInput):
            to_meters(4, "tileCount")

    def test_unknown_unit(self):
        with pytest.raises(InvalidInput, match="unknown length unit"):
            to_meters(4, "yards")

    def test_non_numeric_value(self):
        with pytest.raises(InvalidInput):
            to_meters("wide", "meters")

    def test_bad_axis(self, tile):
        with pytest.raises(InvalidInput):
            to_meters(2, "tileCount", tile, axis="depth")

    def test_meters_to_feet(self):
        assert meters_to_feet(3.048) == pytest.approx(10.0)


class TestBtu:

    def test_conversion_factor(self):
        assert watts_to_btu_per_hour(1000) == pytest.approx(3412.141)

    def test_zero(self):
        assert watts_to_btu_per_hour(0) == 0


class TestFeetInches:

    def test_whole_feet(self):
        assert meters_to_feet_inches(3.6576) == "12'"

    def test_feet_and_inches(self):
        assert meters_to_feet_inches(1.2954) == "4' 3\""

    def test_half_inch(self):
        assert meters_to_feet_inches(51.5 / INCHES_PER_METER) == "4' 3.5\""

    def test_rounds_to_nearest_half_inch(self):
        # 4' 3.2" -> 4' 3", 4' 3.3" -> 4' 3.5"
        assert meters_to_feet_inches(51.2 / INCHES_PER_METER) == "4' 3\""
        assert meters_to_feet_inches(51.3 / INCHES_PER_METER) == "4' 3.5\""

    def test_twelve_inches_rolls_over(self):
        assert meters_to_feet_inches(59.8 / INCHES_PER_METER) == "5'"

    def test_zero(self):
        assert meters_to_feet_inches(0) == "0'"

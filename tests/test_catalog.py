"""
test_catalog.py: tagged product union, catalog queries, CSV loading, quote store
"""
import pytest

from led_estimator.catalog import SEED_PRODUCTS, InMemoryCatalog, InMemoryQuoteStore, load_catalog_csv
from led_estimator.errors import InvalidInput, NotFound
from led_estimator.models import (
    ProcessorSpec,
    Product,
    ProductCategory,
    ReceivingCardType,
    TileSpec,
)


class TestProductVariants:

    def test_category_string_is_coerced(self, tile):
        p = Product(id=1, name="Tile", category="LED_TILE", unit_cost=10, spec=tile)
        assert p.category is ProductCategory.LED_TILE
        assert p.tile is tile

    def test_tile_category_rejects_processor_spec(self):
        with pytest.raises(InvalidInput, match="TileSpec"):
            Product(id=1, name="Odd", category=ProductCategory.LED_TILE, unit_cost=10,
                    spec=ProcessorSpec(inputs=2, outputs=2, max_res_w=1920, max_res_h=1080))

    def test_specless_category_rejects_spec(self, tile):
        with pytest.raises(InvalidInput, match="no category spec"):
            Product(id=1, name="Camera", category=ProductCategory.CAMERA, unit_cost=10, spec=tile)

    def test_unknown_category(self):
        with pytest.raises(InvalidInput):
            Product(id=1, name="Thing", category="GADGET", unit_cost=10)

    def test_non_tile_has_no_tile(self):
        p = Product(id=1, name="Switch", category=ProductCategory.NETWORKING, unit_cost=300)
        assert p.tile is None

    def test_category_label(self):
        assert ProductCategory.POWER_EQUIPMENT.label == "Power Equipment"


class TestCatalogQueries:

    def test_seeded_by_default(self):
        assert len(InMemoryCatalog()) == len(SEED_PRODUCTS)

    def test_tile_specs(self):
        specs = InMemoryCatalog().find_tile_specs()
        assert len(specs) == 2
        assert all(isinstance(s, TileSpec) for s in specs)

    def test_filter_by_category(self):
        audio = InMemoryCatalog().find_products(category="AUDIO")
        assert [p.name for p in audio] == ["Active Speaker"]

    def test_search_matches_name_manufacturer_and_model(self):
        catalog = InMemoryCatalog()
        assert len(catalog.find_products(search="novastar")) == 3
        assert [p.name for p in catalog.find_products(search="sg350")] == ["Gigabit Switch"]
        assert [p.name for p in catalog.find_products(search="wash")] == ["LED Wash Light"]

    def test_search_and_category_combined(self):
        tiles = InMemoryCatalog().find_tile_specs(search="P3")
        assert len(tiles) == 1
        assert tiles[0].pixel_pitch_mm == 3.0

    def test_no_results_is_empty_list(self):
        assert InMemoryCatalog().find_products(search="hologram") == []
        assert InMemoryCatalog([]).find_tile_specs() == []

    def test_find_by_id(self):
        assert InMemoryCatalog().find_product_by_id(3).name == "VX1000 LED Processor"

    def test_find_missing_id(self):
        with pytest.raises(NotFound):
            InMemoryCatalog().find_product_by_id(999)

    def test_unknown_category_filter(self):
        with pytest.raises(InvalidInput):
            InMemoryCatalog().find_products(category="GADGET")

    def test_duplicate_ids_rejected(self):
        with pytest.raises(InvalidInput):
            InMemoryCatalog([SEED_PRODUCTS[0], SEED_PRODUCTS[0]])


HEADER = [
    "id", "name", "category", "manufacturer", "model_number", "unit_cost", "unit_price",
    "pricing_method", "bespoke_markup",
    "tile_pixel_pitch_mm", "tile_physical_width_mm", "tile_physical_height_mm",
    "tile_pixel_width", "tile_pixel_height", "tile_weight_kg", "tile_max_power_w",
    "tile_avg_power_w", "tile_brightness_nits", "tile_refresh_rate_hz",
    "tile_receiving_card_type", "tile_scan_rate", "tile_buy_price", "tile_sell_price",
]
TILE_ROW = [
    "1", "P1.9 Tile", "LED_TILE", "Absen", "AX1.9", "700", "950", "manual", "",
    "1.9", "500", "500", "256", "256", "7.5", "150", "50", "1200", "3840",
    "colorlight", "32", "700", "950",
]
CLAMP_ROW = ["2", "Truss Clamp", "hardware", "Generic", "TC-50", "12", "", "bespoke", "30"] + [""] * 14


def _write_csv(path, rows):
    path.write_text("\n".join(",".join(r) for r in rows) + "\n")
    return path


class TestCsvLoading:

    def test_loads_tiles_and_other_products(self, tmp_path):
        catalog = load_catalog_csv(_write_csv(tmp_path / "catalog.csv", [HEADER, TILE_ROW, CLAMP_ROW]))
        assert len(catalog) == 2

        tile = catalog.find_product_by_id(1).tile
        assert tile.pixel_width == 256
        assert tile.physical_width_mm == 500
        assert tile.receiving_card_type is ReceivingCardType.COLORLIGHT
        assert tile.scan_rate == 32
        assert tile.sell_price == 950

        clamp = catalog.find_product_by_id(2)
        assert clamp.category is ProductCategory.HARDWARE
        assert clamp.spec is None
        assert clamp.unit_price is None
        assert clamp.bespoke_markup == 30

    def test_tile_row_missing_spec_values(self, tmp_path):
        row = TILE_ROW[:]
        row[HEADER.index("tile_pixel_width")] = ""
        with pytest.raises(InvalidInput, match="tile_pixel_width"):
            load_catalog_csv(_write_csv(tmp_path / "catalog.csv", [HEADER, row]))

    def test_missing_required_column(self, tmp_path):
        with pytest.raises(InvalidInput, match="unit_cost"):
            load_catalog_csv(_write_csv(tmp_path / "catalog.csv", [["id", "name", "category"], ["1", "X", "CABLE"]]))


class TestQuoteStore:

    def test_sequential_ids(self):
        store = InMemoryQuoteStore()
        assert store.save_quote("q1", []) == 1
        assert store.save_quote("q2", ["item"]) == 2
        assert store.saved[2] == ("q2", ["item"])

# led_wall_estimator.py
# Streamlit app: LED Video Wall Estimator with tile-snapped sizing, power
# planning and a running quote tally with markup and profit tracking.
#
# Usage:
#   1) pip install -e .
#   2) streamlit run led_wall_estimator.py
#
# Notes:
# - Walls are sized down to whole tiles of the selected product, so the built
#   wall never exceeds the requested footprint.
# - Pricing defaults come from LED_ESTIMATOR_* environment variables (or .env)
#   and can be adjusted per session in the sidebar.

from dataclasses import replace

import streamlit as st

from led_estimator.catalog import InMemoryCatalog, InMemoryQuoteStore
from led_estimator.errors import InvalidInput, NotFound
from led_estimator.ledger import CustomerInfo, QuoteLedger
from led_estimator.logging_config import setup_logging
from led_estimator.models import DisplayRequest
from led_estimator.power import PowerInputs, plan_power
from led_estimator.render import (
    display_spec_frame,
    grid_figure,
    ledger_frame,
    money,
    money_cents,
    power_plan_frame,
)
from led_estimator.settings import load_settings
from led_estimator.tiles import size_display
from led_estimator.units import LengthUnit

st.set_page_config(page_title="LED Video Wall Estimator", layout="wide")

# -----------------------
# Session state
# -----------------------

if "settings" not in st.session_state:
    settings = load_settings()
    setup_logging(settings.log_level)
    st.session_state["settings"] = settings
    st.session_state["catalog"] = InMemoryCatalog()
    st.session_state["store"] = InMemoryQuoteStore()
    st.session_state["ledger"] = QuoteLedger(settings)

catalog = st.session_state["catalog"]
ledger = st.session_state["ledger"]

# -----------------------
# Sidebar Controls
# -----------------------

st.sidebar.title("Estimator Controls")

st.sidebar.subheader("Pricing Defaults")
global_markup = st.sidebar.number_input("Global markup (%)", step=1.0,
                                        value=float(ledger.settings.global_markup_percent))
bespoke_markup = st.sidebar.number_input("Default bespoke markup (%)", step=1.0,
                                         value=float(ledger.settings.bespoke_markup_percent))
ledger.settings = replace(ledger.settings, global_markup_percent=global_markup,
                          bespoke_markup_percent=bespoke_markup)

st.sidebar.subheader("Customer & Project")
customer_name = st.sidebar.text_input("Customer name *")
customer_email = st.sidebar.text_input("Customer email")
project_name = st.sidebar.text_input("Project name *")
description = st.sidebar.text_area("Description")
quote_markup = st.sidebar.number_input("Quote markup (%)", step=1.0,
                                       value=float(ledger.settings.quote_markup_percent))
fees = st.sidebar.number_input("Fees", min_value=0.0, step=25.0,
                               value=float(ledger.settings.quote_fees), format="%.2f")

# -----------------------
# Main: Display Sizing
# -----------------------

st.title("LED Video Wall Estimator")

tile_products = catalog.find_tile_products()
if not tile_products:
    st.warning("No LED tiles in the catalog.")
    st.stop()

left, right = st.columns([1, 1])

with left:
    st.subheader("Size the Display")
    product = st.selectbox(
        "LED tile", tile_products,
        format_func=lambda p: f"{p.name}, P{p.tile.pixel_pitch_mm:g} "
                              f"{p.tile.physical_width_mm:g}×{p.tile.physical_height_mm:g}mm",
    )
    unit = st.radio("Enter size in", [u.value for u in LengthUnit], horizontal=True,
                    format_func={"feet": "Feet", "meters": "Meters", "tileCount": "Tiles"}.get)
    width_value = st.number_input("Width", min_value=0.0, step=0.5, value=5.0)
    height_value = st.number_input("Height", min_value=0.0, step=0.5, value=3.0)
    nickname = st.text_input("Display nickname (optional)")

    result = None
    try:
        request = DisplayRequest(width_value, height_value, unit, product.tile, nickname or None)
        result = size_display(request, unit_price=ledger.product_sell_price(product))
    except InvalidInput as e:
        st.error(str(e))

    if result is not None and result.is_empty:
        st.warning("That size is smaller than one tile. Enter larger dimensions.")
    elif result is not None:
        st.plotly_chart(grid_figure(result, product.tile), use_container_width=True)

with right:
    if result is not None and not result.is_empty:
        st.subheader("Specs")
        st.metric("Tiles", f"{result.tiles_x} × {result.tiles_y}")
        st.metric("Estimated display cost", money(result.estimated_cost))
        st.dataframe(display_spec_frame(result), use_container_width=True, height=560)

        if st.button("Add display to quote"):
            try:
                ledger.add_display(result, product)
                st.success(f"Added {result.total_tiles} × {product.name}")
            except InvalidInput as e:
                st.error(str(e))

# -----------------------
# Power Planning
# -----------------------

st.markdown("---")
st.subheader("Power Planning")

p1, p2, p3 = st.columns(3)
default_display_w = result.total_power_max_w if result is not None else 0.0
with p1:
    display_w = st.number_input("Display power (W)", min_value=0.0, step=100.0, value=float(default_display_w))
    processor_w = st.number_input("Processor power (W)", min_value=0.0, step=25.0, value=0.0)
with p2:
    computing_w = st.number_input("Computing power (W)", min_value=0.0, step=50.0, value=0.0)
    lighting_w = st.number_input("Lighting power (W)", min_value=0.0, step=50.0, value=0.0)
with p3:
    audio_w = st.number_input("Audio power (W)", min_value=0.0, step=50.0, value=0.0)
    safety_factor = st.number_input("Safety factor", min_value=0.1, step=0.1,
                                    value=float(ledger.settings.safety_factor))

try:
    plan = plan_power(PowerInputs(display_w, processor_w, computing_w, lighting_w, audio_w,
                                  safety_factor=safety_factor))
    st.dataframe(power_plan_frame(plan), use_container_width=True)
except InvalidInput as e:
    st.error(str(e))

# -----------------------
# Products & Quote Tally
# -----------------------

st.markdown("---")
st.subheader("Add Products")

s1, s2, s3 = st.columns([2, 1, 1])
with s1:
    search = st.text_input("Search products")
    matches = catalog.find_products(search=search)
with s2:
    picked = st.selectbox("Product", matches, format_func=lambda p: f"{p.name} ({p.category.label})") \
        if matches else None
with s3:
    qty = st.number_input("Quantity", min_value=1, step=1, value=1)
    if picked is not None and st.button("Add to quote"):
        try:
            ledger.add_product(picked, int(qty))
        except InvalidInput as e:
            st.error(str(e))

st.subheader("Quote Tally")

if len(ledger) == 0:
    st.caption("No items in quote yet. Add displays or products to see running totals.")
else:
    st.dataframe(ledger_frame(ledger), use_container_width=True)

    e1, e2, e3 = st.columns([1, 1, 1])
    with e1:
        item_id = st.selectbox("Line item", [item.id for item in ledger.items])
    with e2:
        new_qty = st.number_input("New quantity", min_value=0, step=1, value=1)
        if st.button("Update quantity"):
            try:
                ledger.update_quantity(item_id, int(new_qty))
            except NotFound:
                st.warning("That line item is gone. Refreshing.")
            st.rerun()
    with e3:
        if st.button("Remove item"):
            ledger.remove_item(item_id)
            st.rerun()

    quote = ledger.compute_totals(quote_markup, fees)
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Subtotal", money_cents(quote.subtotal))
    m2.metric(f"Markup ({quote.markup_percentage:g}%)", money_cents(quote.markup_amount))
    m3.metric("Fees", money_cents(quote.fees))
    m4.metric("Total", money_cents(quote.total))

    b1, b2, b3 = st.columns(3)
    b1.metric("Buy total", money_cents(quote.buy_total))
    b2.metric("Sell total", money_cents(quote.sell_total))
    b3.metric("Profit", money_cents(quote.profit_margin), f"{quote.profit_percentage:.1f}%")

    if st.button("Save quote"):
        try:
            customer = CustomerInfo(customer_name, project_name, customer_email, description,
                                    quote_markup, fees)
            quote_id = ledger.submit(st.session_state["store"], customer)
            st.success(f"Saved quote #{quote_id}")
        except InvalidInput as e:
            st.error(str(e))

st.markdown("---")
st.caption("For rapid estimating purposes only.")

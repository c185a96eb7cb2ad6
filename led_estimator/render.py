# render.py
# Tables and grid preview for the estimator page: pandas frames for specs,
# power plans and the quote tally, and a plotly drawing of the tile grid.

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from led_estimator.models import DisplayResult, TileSpec
from led_estimator.power import PowerPlan
from led_estimator.units import meters_to_feet_inches


def money(x):
    return f"${x:,.0f}"


def money_cents(x):
    return f"${x:,.2f}"


def grid_figure(result: DisplayResult, tile: TileSpec):
    """Draw the wall's tile grid using Plotly, one cell per tile."""
    tile_w = tile.width_m
    tile_h = tile.height_m
    width_m = result.actual_width_m
    height_m = result.actual_height_m

    fig = go.Figure()
    # Draw outer rectangle
    fig.add_shape(type="rect", x0=0, y0=0, x1=width_m, y1=height_m, line=dict(width=2))

    # Internal tile boundaries
    for x in np.arange(1, result.tiles_x) * tile_w:
        fig.add_shape(type="line", x0=float(x), y0=0, x1=float(x), y1=height_m, line=dict(width=1))
    for y in np.arange(1, result.tiles_y) * tile_h:
        fig.add_shape(type="line", x0=0, y0=float(y), x1=width_m, y1=float(y), line=dict(width=1))

    fig.update_xaxes(range=[-0.05, max(tile_w, width_m) + 0.05], title_text="Width (m)",
                     showgrid=False, zeroline=False)
    fig.update_yaxes(range=[-0.05, max(tile_h, height_m) + 0.05], title_text="Height (m)",
                     scaleanchor="x", scaleratio=1, showgrid=False, zeroline=False)
    fig.update_layout(margin=dict(l=10, r=10, t=10, b=10), height=420, dragmode=False)
    return fig


def display_spec_frame(result: DisplayResult) -> pd.DataFrame:
    data = {
        "Metric": [
            "Array size (tiles)", "Total tiles", "Width (m)", "Height (m)",
            "Width (ft/in)", "Height (ft/in)", "Resolution (px)", "Area (m²)",
            "Max power (W)", "Avg power (W)", "Max BTU/hr", "Avg BTU/hr",
            "Weight (kg)", "Processor", "Estimated cost",
        ],
        "Value": [
            f"{result.tiles_x} × {result.tiles_y}", f"{result.total_tiles}",
            f"{result.actual_width_m:.2f}", f"{result.actual_height_m:.2f}",
            meters_to_feet_inches(result.actual_width_m), meters_to_feet_inches(result.actual_height_m),
            f"{result.total_resolution_w} × {result.total_resolution_h}",
            f"{result.total_area_m2:.2f}",
            f"{result.total_power_max_w:,.0f}", f"{result.total_power_avg_w:,.0f}",
            f"{result.max_btu_per_hour:,.0f}", f"{result.avg_btu_per_hour:,.0f}",
            f"{result.total_weight_kg:,.1f}", result.recommended_processor,
            money_cents(result.estimated_cost),
        ],
    }
    return pd.DataFrame(data)


def power_plan_frame(plan: PowerPlan) -> pd.DataFrame:
    return pd.DataFrame({
        "Metric": ["Total load (W)", "Recommended capacity (W)", "Phase", "Redundancy", "Estimated cost"],
        "Value": [
            f"{plan.total_power_w:,.0f}", f"{plan.recommended_capacity_w:,}",
            plan.phase_label, "Yes" if plan.redundant else "No", money_cents(plan.estimated_cost),
        ],
    })


LEDGER_COLUMNS = ["ID", "Item", "Category", "Manufacturer", "Qty",
                  "Buy price", "Sell price", "Line total"]


def ledger_frame(ledger) -> pd.DataFrame:
    """One row per quote line item; numeric columns stay numeric."""
    rows = [
        {
            "ID": item.id,
            "Item": item.name,
            "Category": item.category.replace("_", " ").title(),
            "Manufacturer": item.manufacturer or "",
            "Qty": item.quantity,
            "Buy price": item.effective_buy_price,
            "Sell price": item.effective_sell_price,
            "Line total": item.total_price,
        }
        for item in ledger.items
    ]
    return pd.DataFrame(rows, columns=LEDGER_COLUMNS)

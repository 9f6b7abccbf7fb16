"""
Chart tab renderer: indicator time series and the supply/demand diagram.
"""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go

from econsim.series import find_equilibrium

TIME_SERIES_LINES = (
    ("gdp", "GDP", "#2563eb"),
    ("employment", "Employment", "#10b981"),
    ("inflation", "Inflation", "#f59e0b"),
    ("revenue", "Revenue", "#8b5cf6"),
)


def build_time_series_figure(time_series: Any) -> go.Figure:
    """
    Line chart of the four indicator paths over the projection periods.
    """
    periods = [point.period for point in time_series]
    fig = go.Figure()
    for attr, name, color in TIME_SERIES_LINES:
        fig.add_trace(
            go.Scatter(
                x=periods,
                y=[getattr(point, attr) for point in time_series],
                mode="lines",
                name=name,
                line=dict(color=color, width=2),
            )
        )
    fig.update_layout(
        title="Economic Indicators Over Time",
        xaxis_title="Period",
        hovermode="x unified",
        height=380,
        margin=dict(t=50, b=40),
    )
    return fig


def build_supply_demand_figure(demand_curve: Any, supply_curve: Any) -> go.Figure:
    """
    Demand and supply lines with dashed guides at the equilibrium marker.
    """
    eq_quantity, eq_price = find_equilibrium(demand_curve, supply_curve)

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=[point.x for point in demand_curve],
            y=[point.y for point in demand_curve],
            mode="lines",
            name="Demand",
            line=dict(color="#2563eb", width=2),
        )
    )
    fig.add_trace(
        go.Scatter(
            x=[point.x for point in supply_curve],
            y=[point.y for point in supply_curve],
            mode="lines",
            name="Supply",
            line=dict(color="#ef4444", width=2),
        )
    )
    fig.add_vline(x=eq_quantity, line_dash="dash", line_color="gray")
    fig.add_hline(y=eq_price, line_dash="dash", line_color="gray")
    fig.update_layout(
        title="Supply & Demand Equilibrium",
        xaxis_title="Quantity",
        yaxis_title="Price",
        height=380,
        margin=dict(t=50, b=40),
    )
    return fig


def render_charts_tab(st_module: Any, result: Any) -> None:
    """
    Render both charts for a result.
    """
    outputs = result.outputs
    col1, col2 = st_module.columns(2)

    with col1:
        st_module.plotly_chart(build_time_series_figure(outputs.time_series), use_container_width=True)

    with col2:
        st_module.plotly_chart(
            build_supply_demand_figure(outputs.demand_curve, outputs.supply_curve),
            use_container_width=True,
        )
        eq_quantity, eq_price = find_equilibrium(outputs.demand_curve, outputs.supply_curve)
        st_module.caption(f"Equilibrium: Q = {eq_quantity:g}, P = ${eq_price:.2f}")
        st_module.caption("Illustrative curves; shifts indicate the direction of the policy, not its size.")

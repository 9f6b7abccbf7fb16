"""
Impact analysis tab renderer: metric cards plus the four impact sections.
"""

from __future__ import annotations

from typing import Any

from ..styles import LEVEL_COLORS, LEVEL_ICONS

METRIC_CARDS = (
    ("GDP Change", "gdp_change", "%", "Change in gross domestic product"),
    ("Employment", "employment_change", "%", "Change in employment rate"),
    ("Inflation", "inflation_change", "%", "Change in price levels"),
    ("Revenue", "revenue_change", "B$", "Government revenue impact"),
    ("Welfare", "welfare_change", "%", "Net welfare change"),
)


def format_metric(value: float, unit: str) -> str:
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.2f} {unit}"


def render_metrics_grid(st_module: Any, outputs: Any) -> None:
    """
    Render the five headline deltas as Streamlit metrics.
    """
    columns = st_module.columns(len(METRIC_CARDS))
    for column, (label, attr, unit, description) in zip(columns, METRIC_CARDS):
        value = getattr(outputs, attr)
        with column:
            st_module.metric(label, format_metric(value, unit), help=description)


def impact_section_html(section: Any) -> str:
    """HTML card for one impact section."""
    rows = []
    for item in section.items:
        color = LEVEL_COLORS[item.level]
        icon = LEVEL_ICONS[item.level]
        rows.append(
            f'<div class="impact-item" style="color: {color};">{icon} {item.effect}</div>'
        )
    return (
        f'<div class="impact-card"><strong>{section.title}</strong>'
        f'{"".join(rows)}'
        f'<div class="impact-insight">{section.recommendation}</div></div>'
    )


def render_impact_tab(st_module: Any, result: Any) -> None:
    """
    Render the impact narrative and the metric cards for a result.
    """
    st_module.header(f"📋 {result.impacts.policy_name}")
    render_metrics_grid(st_module, result.outputs)

    st_module.markdown("---")
    st_module.subheader("Policy Impact Analysis")

    sections = result.impacts.sections
    for row_start in range(0, len(sections), 2):
        columns = st_module.columns(2)
        for column, section in zip(columns, sections[row_start:row_start + 2]):
            with column:
                st_module.markdown(impact_section_html(section), unsafe_allow_html=True)

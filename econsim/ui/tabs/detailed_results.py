"""
Detailed results tab renderer.
"""

from __future__ import annotations

from typing import Any

import pandas as pd


def build_results_table(time_series: Any) -> pd.DataFrame:
    """Period-by-period table formatted for display."""
    return pd.DataFrame(
        {
            "Period": [point.period for point in time_series],
            "GDP": [f"{point.gdp:.2f}" for point in time_series],
            "Employment %": [f"{point.employment:.2f}%" for point in time_series],
            "Inflation %": [f"{point.inflation:.2f}%" for point in time_series],
            "Revenue (B$)": [f"${point.revenue:.2f}" for point in time_series],
        }
    )


def render_detailed_results_tab(st_module: Any, result: Any) -> None:
    """
    Render the period table and simulation metadata.
    """
    st_module.subheader("Simulation Results by Period")
    st_module.dataframe(
        build_results_table(result.outputs.time_series),
        use_container_width=True,
        hide_index=True,
    )

    st_module.subheader("Simulation Metadata")
    col1, col2, col3, col4 = st_module.columns(4)
    with col1:
        st_module.markdown(f"**Policy:** {result.impacts.policy_name}")
    with col2:
        st_module.markdown(f"**Simulation ID:** `{result.short_id}`")
    with col3:
        st_module.markdown(f"**Timestamp:** {result.timestamp.strftime('%Y-%m-%d %H:%M:%S %Z')}")
    with col4:
        st_module.markdown(f"**Periods:** {len(result.outputs.time_series)}")

    with st_module.expander("Raw JSON", expanded=False):
        st_module.json(result.to_dict())

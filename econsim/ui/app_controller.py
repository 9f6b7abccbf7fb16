"""
Top-level Streamlit app orchestration.
"""

from __future__ import annotations

from typing import Any

from .calculation_controller import (
    ensure_results_state,
    execute_simulation_if_requested,
    render_sidebar_inputs,
)
from .controller_utils import compute_run_id
from .tabs_controller import build_main_tabs, render_footer, render_result_tabs


def run_main_app(st_module: Any, deps: Any) -> None:
    """
    Render and orchestrate the full Streamlit app flow.
    """
    deps.apply_app_styles(st_module)
    st_module.markdown('<div class="main-header">EconSim Policy Simulator</div>', unsafe_allow_html=True)
    st_module.caption(
        "Configure a tax, subsidy, price control or trade policy and see who is affected and how."
    )

    # Sidebar Inputs
    with st_module.sidebar:
        st_module.header("⚙️ Policy Configuration")
        calc_context = render_sidebar_inputs(st_module=st_module, deps=deps)

    calc_context["run_id"] = compute_run_id(calc_context=calc_context)
    st_module.session_state.current_run_id = calc_context["run_id"]

    # Main Area Results
    tabs = build_main_tabs(st_module=st_module)

    ensure_results_state(st_module=st_module)
    execute_simulation_if_requested(st_module=st_module, deps=deps, calc_context=calc_context)

    render_result_tabs(st_module=st_module, deps=deps, tabs=tabs)
    render_footer(st_module=st_module)

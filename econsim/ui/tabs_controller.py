"""
Tab wiring and render orchestration helpers.
"""

from __future__ import annotations

from typing import Any

TAB_LABELS = ["📋 Impacts", "📈 Charts", "🧾 Details", "📄 Report", "🤖 Advisor", "ℹ️ Methodology"]
STALE_WARNING = "Inputs changed since the last run. Click **🚀 Run Simulation** to refresh results."


def build_main_tabs(st_module: Any) -> dict[str, Any]:
    """
    Create main result tabs layout and return named tab references.
    """
    tabs = st_module.tabs(TAB_LABELS)
    tab_map = dict(zip(TAB_LABELS, tabs))

    return {
        "tab_impacts": tab_map["📋 Impacts"],
        "tab_charts": tab_map["📈 Charts"],
        "tab_details": tab_map["🧾 Details"],
        "tab_report": tab_map["📄 Report"],
        "tab_chat": tab_map["🤖 Advisor"],
        "tab_methodology": tab_map["ℹ️ Methodology"],
    }


def render_result_tabs(st_module: Any, deps: Any, tabs: dict[str, Any]) -> None:
    """
    Render post-simulation tabs (impacts, charts, details, report, advisor, methodology).
    """
    current_run_id = getattr(st_module.session_state, "current_run_id", None)
    results_run_id = getattr(st_module.session_state, "results_run_id", None)
    is_stale = bool(results_run_id and current_run_id and results_run_id != current_run_id)

    with tabs["tab_methodology"]:
        deps.render_methodology_tab(st_module=st_module)

    result = st_module.session_state.results

    with tabs["tab_chat"]:
        deps.render_chat_panel(st_module=st_module, deps=deps, result=result)

    if not result:
        with tabs["tab_impacts"]:
            st_module.info("👈 Configure a policy in the sidebar and click 'Run Simulation' to see results.")
        for key in ("tab_charts", "tab_details", "tab_report"):
            with tabs[key]:
                st_module.info("👈 Run a simulation to unlock this view.")
        return

    with tabs["tab_impacts"]:
        if is_stale:
            st_module.warning(STALE_WARNING)
        deps.render_impact_tab(st_module=st_module, result=result)

    with tabs["tab_charts"]:
        if is_stale:
            st_module.warning(STALE_WARNING)
        deps.render_charts_tab(st_module=st_module, result=result)

    with tabs["tab_details"]:
        deps.render_detailed_results_tab(st_module=st_module, result=result)

    with tabs["tab_report"]:
        deps.render_report_tab(st_module=st_module, deps=deps, result=result)


def render_footer(st_module: Any) -> None:
    """
    Render app footer.
    """
    st_module.markdown("---")
    st_module.caption(
        """
**EconSim Policy Impact Simulator** | Built with Streamlit |
Rule-based educational model: qualitative impacts scored into indicative deltas
"""
    )

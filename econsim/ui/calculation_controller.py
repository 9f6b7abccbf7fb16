"""
Simulation workflow helpers.
"""

from __future__ import annotations

from typing import Any

from .controller_utils import run_with_spinner_feedback


def render_sidebar_inputs(st_module: Any, deps: Any) -> dict[str, Any]:
    """
    Render policy input controls in the sidebar and return interaction context.
    """
    configs = {deps.policy_type_label(config): config for config in deps.POLICY_CONFIGS}
    choice = st_module.radio(
        "Select policy type",
        list(configs.keys()),
        help="Choose the policy instrument to simulate",
    )
    config = configs[choice]

    parameters = deps.render_policy_inputs(st_module, config)

    st_module.markdown("---")

    run = st_module.button("🚀 Run Simulation", type="primary", use_container_width=True)

    if st_module.button("🔄 Reset", use_container_width=True):
        for key in ("results", "results_run_id", "quick_questions", "chat_history"):
            if key in st_module.session_state:
                del st_module.session_state[key]
        st_module.rerun()

    return {
        "policy_type": config.type,
        "parameters": parameters,
        "run": run,
    }


def ensure_results_state(st_module: Any) -> None:
    """
    Initialize results slots in session state when missing.
    """
    if "results" not in st_module.session_state:
        st_module.session_state.results = None
    if "quick_questions" not in st_module.session_state:
        st_module.session_state.quick_questions = []


def execute_simulation_if_requested(st_module: Any, deps: Any, calc_context: dict[str, Any]) -> None:
    """
    Run the simulation when requested and write the result to session state.
    """
    if not calc_context["run"]:
        return

    def _run() -> None:
        result = deps.run_simulation(calc_context["policy_type"], calc_context["parameters"])
        st_module.session_state.results = result
        st_module.session_state.results_run_id = calc_context.get("run_id")
        st_module.session_state.quick_questions = deps.generate_quick_questions(result)

    run_with_spinner_feedback(
        st_module=st_module,
        spinner_message="Running policy simulation...",
        success_message="✅ Simulation complete!",
        error_prefix="❌ Error running simulation",
        action_fn=_run,
    )

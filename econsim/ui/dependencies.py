"""
Dependency assembly for Streamlit app bootstrap.
"""

from __future__ import annotations

from types import SimpleNamespace

from econsim import POLICY_CONFIGS, SimulationReport, run_simulation
from econsim.chat import GREETING, ChatError, PolicyChatClient, build_chat_messages
from econsim.config import ChatSettings
from econsim.questions import generate_quick_questions

from .app_controller import run_main_app
from .chat_panel import render_chat_panel
from .policy_input import policy_type_label, render_policy_inputs
from .styles import apply_app_styles
from .tabs import (
    render_charts_tab,
    render_detailed_results_tab,
    render_impact_tab,
    render_methodology_tab,
    render_report_tab,
)


def build_app_dependencies() -> SimpleNamespace:
    """
    Build all runtime dependencies needed by the app controller.
    """
    return SimpleNamespace(
        POLICY_CONFIGS=POLICY_CONFIGS,
        CHAT_GREETING=GREETING,
        run_simulation=run_simulation,
        generate_quick_questions=generate_quick_questions,
        SimulationReport=SimulationReport,
        PolicyChatClient=PolicyChatClient,
        ChatSettings=ChatSettings,
        ChatError=ChatError,
        build_chat_messages=build_chat_messages,
        policy_type_label=policy_type_label,
        render_policy_inputs=render_policy_inputs,
        render_impact_tab=render_impact_tab,
        render_charts_tab=render_charts_tab,
        render_detailed_results_tab=render_detailed_results_tab,
        render_report_tab=render_report_tab,
        render_methodology_tab=render_methodology_tab,
        render_chat_panel=render_chat_panel,
        apply_app_styles=apply_app_styles,
        run_main_app=run_main_app,
    )

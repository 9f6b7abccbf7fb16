"""
UI helper utilities for Streamlit app composition.
"""

from .styles import APP_STYLES, apply_app_styles
from .policy_input import policy_type_label, render_policy_inputs
from .chat_panel import render_chat_panel
from .app_controller import run_main_app
from .dependencies import build_app_dependencies

__all__ = [
    "APP_STYLES",
    "apply_app_styles",
    "policy_type_label",
    "render_policy_inputs",
    "render_chat_panel",
    "run_main_app",
    "build_app_dependencies",
]

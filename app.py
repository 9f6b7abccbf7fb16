"""
EconSim Policy Simulator - Main Streamlit App

A web application for exploring the qualitative and indicative numeric
effects of taxes, subsidies, price controls and trade measures.
"""

import logging
import sys
from pathlib import Path

import streamlit as st

# Configure page
st.set_page_config(
    page_title="EconSim Policy Simulator",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="expanded"
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Import simulator
sys.path.insert(0, str(Path(__file__).parent))

from econsim.ui import build_app_dependencies  # noqa: E402

deps = build_app_dependencies()
deps.run_main_app(st_module=st, deps=deps)

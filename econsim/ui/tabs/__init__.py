"""
Tab renderer modules for Streamlit app.
"""

from .charts import render_charts_tab
from .detailed_results import render_detailed_results_tab
from .impact_analysis import render_impact_tab
from .methodology import render_methodology_tab
from .report_export import render_report_tab

__all__ = [
    "render_charts_tab",
    "render_detailed_results_tab",
    "render_impact_tab",
    "render_methodology_tab",
    "render_report_tab",
]

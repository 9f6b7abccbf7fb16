"""
Centralized Streamlit style definitions.
"""

from econsim.impacts import ImpactLevel

LEVEL_COLORS = {
    ImpactLevel.STRONG_POSITIVE: "#047857",
    ImpactLevel.POSITIVE: "#10b981",
    ImpactLevel.NEUTRAL: "#6b7280",
    ImpactLevel.NEGATIVE: "#ef4444",
    ImpactLevel.STRONG_NEGATIVE: "#b91c1c",
}

LEVEL_ICONS = {
    ImpactLevel.STRONG_POSITIVE: "⏫",
    ImpactLevel.POSITIVE: "🔼",
    ImpactLevel.NEUTRAL: "➖",
    ImpactLevel.NEGATIVE: "🔽",
    ImpactLevel.STRONG_NEGATIVE: "⏬",
}

APP_STYLES = """
<style>
    .main-header {
        font-size: 2.2rem;
        font-weight: 700;
        color: #1f2937;
        margin-bottom: 0.25rem;
    }
    .impact-card {
        background-color: #f8fafc;
        border: 1px solid #e5e7eb;
        padding: 1rem;
        border-radius: 0.5rem;
        margin: 0.5rem 0;
    }
    .impact-item {
        font-size: 0.9rem;
        margin: 0.25rem 0;
    }
    .impact-insight {
        font-size: 0.8rem;
        font-style: italic;
        color: #6b7280;
        border-top: 1px solid #e5e7eb;
        padding-top: 0.5rem;
        margin-top: 0.5rem;
    }
</style>
"""


def apply_app_styles(st_module) -> None:
    """Apply shared CSS style block to the Streamlit app."""
    st_module.markdown(APP_STYLES, unsafe_allow_html=True)

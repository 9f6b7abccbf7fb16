"""
Report and export tab renderer.
"""

from __future__ import annotations

from typing import Any

OVERVIEW_PROMPT = (
    "Write a concise executive summary (one paragraph, under 150 words) of the current "
    "simulation: the policy, who gains and who loses, and the headline macro effects."
)


def request_ai_overview(deps: Any, result: Any) -> str:
    """Ask the chat model for an executive summary of a result."""
    client = deps.PolicyChatClient(deps.ChatSettings.from_env())
    messages = deps.build_chat_messages([{"role": "user", "content": OVERVIEW_PROMPT}], simulation=result)
    return client.complete(messages).strip()


def render_report_tab(st_module: Any, deps: Any, result: Any) -> None:
    """
    Render report preview and download buttons for a result.
    """
    st_module.subheader("📄 Simulation Report")

    overviews = st_module.session_state.setdefault("report_overviews", {})
    settings = deps.ChatSettings.from_env()

    if settings.is_configured:
        if st_module.button("✨ Generate AI executive summary"):
            try:
                with st_module.spinner("Asking the policy advisor for a summary..."):
                    overviews[result.id] = request_ai_overview(deps, result)
            except deps.ChatError as e:
                st_module.error(f"❌ Could not generate summary: {e}")
    else:
        st_module.caption("Set AI_API_URL and AI_API_KEY to include an AI-written executive summary.")

    report = deps.SimulationReport(result, overview=overviews.get(result.id))

    with st_module.expander("Preview", expanded=False):
        st_module.code(report.generate_text_report(), language=None)

    col1, col2, col3 = st_module.columns(3)
    with col1:
        st_module.download_button(
            "⬇️ PDF report",
            data=report.to_pdf_bytes(),
            file_name=report.pdf_filename,
            mime="application/pdf",
            use_container_width=True,
        )
    with col2:
        st_module.download_button(
            "⬇️ Time series (CSV)",
            data=report.to_dataframe().to_csv(index=False),
            file_name=f"econsim_{result.short_id}.csv",
            mime="text/csv",
            use_container_width=True,
        )
    with col3:
        st_module.download_button(
            "⬇️ Full result (JSON)",
            data=result.to_json(),
            file_name=f"econsim_{result.short_id}.json",
            mime="application/json",
            use_container_width=True,
        )

"""
Chat panel: follow-up questions answered by the policy advisor model.
"""

from __future__ import annotations

from typing import Any


def ensure_chat_state(st_module: Any) -> None:
    if "chat_history" not in st_module.session_state:
        st_module.session_state.chat_history = []


def submit_chat_message(st_module: Any, deps: Any, prompt: str, result: Any = None) -> None:
    """
    Append a user turn, stream the reply into the panel and store it.

    Failures are shown with ``st.error``; the failed user turn stays in the
    history so it can be resent.
    """
    history = st_module.session_state.chat_history
    history.append({"role": "user", "content": prompt})

    with st_module.chat_message("user"):
        st_module.markdown(prompt)

    client = deps.PolicyChatClient(deps.ChatSettings.from_env())
    messages = deps.build_chat_messages(history, simulation=result)

    with st_module.chat_message("assistant"):
        try:
            reply = st_module.write_stream(client.stream(messages))
        except deps.ChatError as e:
            st_module.error(str(e))
            return

    if reply:
        history.append({"role": "assistant", "content": reply})


def render_chat_panel(st_module: Any, deps: Any, result: Any = None) -> None:
    """
    Render the advisor chat with quick questions for the current result.
    """
    ensure_chat_state(st_module)

    st_module.subheader("🤖 AI Policy Advisor")
    settings = deps.ChatSettings.from_env()
    if not settings.is_configured:
        st_module.info("Set AI_API_URL and AI_API_KEY to enable the policy advisor.")
        return

    with st_module.chat_message("assistant"):
        st_module.markdown(deps.CHAT_GREETING)

    for turn in st_module.session_state.chat_history:
        with st_module.chat_message(turn["role"]):
            st_module.markdown(turn["content"])

    pending = None
    questions = st_module.session_state.get("quick_questions") or []
    if result is not None and questions:
        st_module.caption("Quick questions")
        columns = st_module.columns(len(questions))
        for index, (column, question) in enumerate(zip(columns, questions)):
            with column:
                if st_module.button(question.label, key=f"quick_question_{index}", use_container_width=True):
                    pending = question.prompt

    typed = st_module.chat_input("Ask about the policy impacts...")
    prompt = typed or pending
    if prompt:
        submit_chat_message(st_module, deps, prompt, result=result)

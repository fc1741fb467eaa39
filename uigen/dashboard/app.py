"""UIGen: Streamlit UI for signing in and reviewing chat tool activity."""

import sys
from pathlib import Path

# Add project root to path so 'uigen' package is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

import asyncio

import streamlit as st

from uigen.auth.coordinator import AuthCompletionCoordinator
from uigen.chat.invocations import message_tool_invocations
from uigen.chat.tool_status import project_invocation
from uigen.clients.api import UIGenClient
from uigen.graph import has_actionable_anon_work
from uigen.state import Activity, AuthResult, DisplayStatus, IconKind
from uigen.utils.anon_work import AnonWorkStore
from uigen.utils.validator import validate_credentials

_ICONS = {
    IconKind.DOCUMENT: ":material/description:",
    IconKind.EDIT: ":material/edit:",
    IconKind.FOLDER: ":material/folder_open:",
    IconKind.TRASH: ":material/delete:",
}

_ACTIVITY = {
    Activity.SPINNER: ":blue[:material/progress_activity:]",
    Activity.SUCCESS: ":green[●]",
}

st.set_page_config(page_title="UIGen", layout="wide")
st.title("UIGen")


# ---------------------------------------------------------------------------
# Helper renderers
# ---------------------------------------------------------------------------


def _render_status_line(status: DisplayStatus) -> str:
    """Build the markdown for one tool-call status line."""
    return f"{_ACTIVITY[status['activity']]} {_ICONS[status['icon']]} `{status['message']}`"


def _render_chat(messages: list[dict]) -> None:
    for message in messages:
        if not isinstance(message, dict):
            continue
        with st.chat_message(message.get("role", "assistant")):
            content = message.get("content")
            if content:
                st.markdown(content)
            for invocation in message_tool_invocations(message):
                st.markdown(_render_status_line(project_invocation(invocation)))


# ---------------------------------------------------------------------------
# Auth flow
# ---------------------------------------------------------------------------


def _navigate(path: str) -> None:
    st.session_state["project_path"] = path
    st.query_params["project"] = path.lstrip("/")


def _set_loading(is_loading: bool) -> None:
    st.session_state["auth_loading"] = is_loading


async def _authenticate(action: str, email: str, password: str) -> AuthResult:
    async with UIGenClient() as client:
        coordinator = AuthCompletionCoordinator(
            verifier=client,
            projects=client,
            anon_work=AnonWorkStore(),
            navigate=_navigate,
        )
        coordinator.subscribe(_set_loading)
        if action == "sign_up":
            return await coordinator.sign_up(email, password)
        return await coordinator.sign_in(email, password)


def _render_auth_form(action: str, label: str) -> None:
    """Show a credential form and run the coordinator on submission."""
    with st.form(f"{action}_form"):
        email = st.text_input("Email", key=f"{action}_email")
        password = st.text_input("Password", type="password", key=f"{action}_password")
        submitted = st.form_submit_button(
            label, type="primary", disabled=st.session_state.get("auth_loading", False)
        )

    if not submitted:
        return

    try:
        email, password = validate_credentials(email, password)
    except ValueError as exc:
        st.error(str(exc))
        st.stop()

    with st.spinner(f"{label}..."):
        result = asyncio.run(_authenticate(action, email, password))

    if not result["success"]:
        st.error(result.get("error") or "Authentication failed.")
        return
    st.rerun()


# ---------------------------------------------------------------------------
# Page logic
# ---------------------------------------------------------------------------

project_path = st.session_state.get("project_path")

if project_path:
    st.success(f"Signed in. Current project: `{project_path}`")
    if st.button("Sign out"):
        st.session_state.pop("project_path", None)
        st.query_params.clear()
        st.rerun()
else:
    sign_in_tab, sign_up_tab = st.tabs(["Sign In", "Sign Up"])
    with sign_in_tab:
        _render_auth_form("sign_in", "Sign In")
    with sign_up_tab:
        _render_auth_form("sign_up", "Sign Up")

    anon_work = AnonWorkStore().get()
    if has_actionable_anon_work(anon_work):
        st.divider()
        st.subheader("Unsaved work")
        st.caption("This conversation will be saved to a new project when you sign in.")
        _render_chat(anon_work["messages"])

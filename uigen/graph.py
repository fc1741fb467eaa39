"""LangGraph StateGraph for post-authentication project reconciliation.

    read_anon_work ──adopt──▶ adopt_anonymous ─────────────┐
          │                                                 ▼
          └──list──▶ list_projects ──reuse──▶ reuse_existing ──▶ navigate ──▶ END
                          │                                 ▲
                          └──create_default──▶ create_default ┘

Exactly one of adopt_anonymous / reuse_existing / create_default runs per
reconciliation, and every path ends in a single navigate step.
"""

import logging
import random
from datetime import datetime
from typing import Callable

from langgraph.graph import END, StateGraph

from uigen.auth.collaborators import (
    AnonWorkSource,
    Navigator,
    ProjectRepository,
    resolve,
)
from uigen.state import AnonymousWork, ReconcileState
from uigen.utils.naming import adopted_project_name, default_project_name

logger = logging.getLogger(__name__)


def has_actionable_anon_work(anon_work: AnonymousWork | None) -> bool:
    """True only if the anonymous work carries at least one chat message.

    The file-system map is not inspected: a session with
    messages but no files is still adopted.
    """
    if not anon_work:
        return False
    messages = anon_work.get("messages")
    return isinstance(messages, (list, tuple)) and len(messages) > 0


def _route_after_anon_read(state: ReconcileState) -> str:
    """Conditional edge after reading anonymous work.

    Anonymous work takes priority over existing projects, so projects are
    only listed when there is nothing to adopt.
    """
    if has_actionable_anon_work(state["anon_work"]):
        return "adopt"
    return "list"


def _route_after_listing(state: ReconcileState) -> str:
    """Conditional edge after listing projects: reuse the first one, or create a default."""
    if state["projects"]:
        return "reuse"
    return "create_default"


def initial_state() -> ReconcileState:
    return {"anon_work": None, "projects": [], "outcome": None, "project_id": ""}


def build_reconcile_graph(
    anon_work: AnonWorkSource,
    projects: ProjectRepository,
    navigate: Navigator,
    clock: Callable[[], datetime] = datetime.now,
    rng: Callable[[], float] = random.random,
):
    """Compile a reconciliation graph bound to the given collaborators."""

    async def _read_anon_work(state: ReconcileState) -> dict:
        return {"anon_work": await resolve(anon_work.get())}

    async def _adopt_anonymous(state: ReconcileState) -> dict:
        work = state["anon_work"]
        created = await resolve(projects.create_project({
            "name": adopted_project_name(clock),
            "messages": work["messages"],
            "data": work.get("file_system_data") or {},
        }))

        # Clearing is best-effort: the project already exists either way.
        try:
            await resolve(anon_work.clear())
        except Exception:
            logger.warning("Could not clear anonymous work after adopting it", exc_info=True)

        return {"outcome": "adopt_anonymous", "project_id": created["id"]}

    async def _list_projects(state: ReconcileState) -> dict:
        return {"projects": list(await resolve(projects.list_projects()))}

    def _reuse_existing(state: ReconcileState) -> dict:
        return {"outcome": "reuse_existing", "project_id": state["projects"][0]["id"]}

    async def _create_default(state: ReconcileState) -> dict:
        created = await resolve(projects.create_project({
            "name": default_project_name(rng),
            "messages": [],
            "data": {},
        }))
        return {"outcome": "create_default", "project_id": created["id"]}

    async def _navigate(state: ReconcileState) -> dict:
        await resolve(navigate(f"/{state['project_id']}"))
        return {}

    workflow = StateGraph(ReconcileState)

    workflow.add_node("read_anon_work", _read_anon_work)
    workflow.add_node("adopt_anonymous", _adopt_anonymous)
    workflow.add_node("list_projects", _list_projects)
    workflow.add_node("reuse_existing", _reuse_existing)
    workflow.add_node("create_default", _create_default)
    workflow.add_node("navigate", _navigate)

    workflow.set_entry_point("read_anon_work")

    workflow.add_conditional_edges(
        "read_anon_work",
        _route_after_anon_read,
        {
            "adopt": "adopt_anonymous",
            "list": "list_projects",
        },
    )
    workflow.add_conditional_edges(
        "list_projects",
        _route_after_listing,
        {
            "reuse": "reuse_existing",
            "create_default": "create_default",
        },
    )

    workflow.add_edge("adopt_anonymous", "navigate")
    workflow.add_edge("reuse_existing", "navigate")
    workflow.add_edge("create_default", "navigate")
    workflow.add_edge("navigate", END)

    return workflow.compile()

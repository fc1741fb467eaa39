"""Auth completion coordinator: sign in / sign up, then land the user on a project.

After successful verification the reconciliation graph decides, in priority
order, between adopting anonymous work, reusing the most relevant existing
project, or creating a fresh one, and finally navigates there.
"""

import logging
import random
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Callable

from uigen.auth.collaborators import (
    AnonWorkSource,
    CredentialVerifier,
    Navigator,
    ProjectRepository,
    resolve,
)
from uigen.graph import build_reconcile_graph, initial_state
from uigen.state import AuthResult, ReconcileState

logger = logging.getLogger(__name__)

LoadingListener = Callable[[bool], None]


class AuthCompletionCoordinator:
    """Coordinates credential submission with post-login project reconciliation.

    ``is_loading`` is scoped to this instance. It is true while any
    ``sign_in``/``sign_up`` call is in flight and is reset on every exit path,
    including when verification or reconciliation raises.
    """

    def __init__(
        self,
        verifier: CredentialVerifier,
        projects: ProjectRepository,
        anon_work: AnonWorkSource,
        navigate: Navigator,
        clock: Callable[[], datetime] = datetime.now,
        rng: Callable[[], float] = random.random,
    ):
        self._verifier = verifier
        self._graph = build_reconcile_graph(anon_work, projects, navigate, clock=clock, rng=rng)
        self._in_flight = 0
        self._listeners: list[LoadingListener] = []

    @property
    def is_loading(self) -> bool:
        return self._in_flight > 0

    def subscribe(self, listener: LoadingListener) -> Callable[[], None]:
        """Call ``listener(is_loading)`` on every loading transition. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _set_in_flight(self, count: int) -> None:
        was_loading = self.is_loading
        self._in_flight = count
        if self.is_loading != was_loading:
            # A failing listener must not leave the count (and is_loading) stuck.
            for listener in list(self._listeners):
                try:
                    listener(self.is_loading)
                except Exception:
                    logger.exception("Loading listener %r failed", listener)

    @asynccontextmanager
    async def _loading(self):
        self._set_in_flight(self._in_flight + 1)
        try:
            yield
        finally:
            self._set_in_flight(self._in_flight - 1)

    async def sign_in(self, identifier: str, secret: str) -> AuthResult:
        return await self._authenticate(self._verifier.sign_in, identifier, secret)

    async def sign_up(self, identifier: str, secret: str) -> AuthResult:
        return await self._authenticate(self._verifier.sign_up, identifier, secret)

    async def _authenticate(self, action, identifier: str, secret: str) -> AuthResult:
        async with self._loading():
            result = await resolve(action(identifier, secret))
            if result.get("success"):
                await self.reconcile()
            return result

    async def reconcile(self) -> ReconcileState:
        """Run the reconciliation graph once and return its final state.

        Collaborator exceptions propagate unchanged.
        """
        final_state = await self._graph.ainvoke(initial_state())
        logger.debug(
            "Reconciled to project %s (%s)", final_state["project_id"], final_state["outcome"]
        )
        return final_state

"""Interfaces the coordinator relies on.

Any method may be a plain function or a coroutine function; the coordinator
awaits whatever is awaitable.
"""

import inspect
from typing import Any, Awaitable, Protocol, TypeVar

from uigen.state import (
    AnonymousWork,
    AuthResult,
    CreatedProject,
    ProjectCreationRequest,
    ProjectSummary,
)

T = TypeVar("T")


class CredentialVerifier(Protocol):
    def sign_in(self, identifier: str, secret: str) -> Awaitable[AuthResult] | AuthResult: ...

    def sign_up(self, identifier: str, secret: str) -> Awaitable[AuthResult] | AuthResult: ...


class AnonWorkSource(Protocol):
    def get(self) -> Awaitable[AnonymousWork | None] | AnonymousWork | None: ...

    def clear(self) -> Awaitable[None] | None: ...


class ProjectRepository(Protocol):
    def list_projects(self) -> Awaitable[list[ProjectSummary]] | list[ProjectSummary]: ...

    def create_project(
        self, request: ProjectCreationRequest
    ) -> Awaitable[CreatedProject] | CreatedProject: ...


class Navigator(Protocol):
    def __call__(self, path: str) -> Any: ...


async def resolve(value: Awaitable[T] | T) -> T:
    """Await ``value`` if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value

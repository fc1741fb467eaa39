"""Shared record shapes passed between the coordinator, its collaborators and the chat UI."""

from enum import Enum
from typing import Any, Literal, NotRequired, TypedDict

ChatMessage = dict[str, Any]
FileSystemEntry = dict[str, Any]

Outcome = Literal["adopt_anonymous", "reuse_existing", "create_default"]
LifecycleState = Literal["pending", "result"]


class AuthResult(TypedDict):
    success: bool
    error: NotRequired[str]  # Only meaningful when success is False.


class AnonymousWork(TypedDict):
    messages: list[ChatMessage]
    file_system_data: dict[str, FileSystemEntry]  # path -> entry


class ProjectSummary(TypedDict):
    id: str
    name: str


class ProjectCreationRequest(TypedDict):
    name: str
    messages: list[ChatMessage]
    data: dict[str, FileSystemEntry]


class CreatedProject(TypedDict):
    id: str


class ReconcileState(TypedDict):
    anon_work: AnonymousWork | None  # As read once from the anonymous-work store.
    projects: list[ProjectSummary]  # Only populated when anonymous work is not adopted.
    outcome: Outcome | None
    project_id: str  # Destination; navigation goes to f"/{project_id}".


class ToolInvocation(TypedDict):
    tool_name: str
    state: LifecycleState
    args: NotRequired[dict | None]
    result: NotRequired[Any]


class IconKind(str, Enum):
    DOCUMENT = "document"
    EDIT = "edit"
    FOLDER = "folder"
    TRASH = "trash"


class Activity(str, Enum):
    SPINNER = "spinner"
    SUCCESS = "success"


class DisplayStatus(TypedDict):
    message: str
    icon: IconKind
    activity: Activity

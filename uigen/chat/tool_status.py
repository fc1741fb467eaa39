"""Tool status projection: maps a tool invocation to the status line shown in chat.

Pure and stateless. Unknown tools, unknown commands and missing or malformed
arguments all resolve to a fallback message; nothing here raises.
"""

from enum import Enum

from uigen.state import Activity, DisplayStatus, IconKind, ToolInvocation


class ToolKind(Enum):
    FILE_EDIT = "str_replace_editor"
    FILE_MANAGER = "file_manager"
    OTHER = None

    @classmethod
    def parse(cls, tool_name: str) -> "ToolKind":
        for kind in (cls.FILE_EDIT, cls.FILE_MANAGER):
            if tool_name == kind.value:
                return kind
        return cls.OTHER


class EditorCommand(Enum):
    CREATE = "create"
    STR_REPLACE = "str_replace"
    VIEW = "view"
    INSERT = "insert"


class ManagerCommand(Enum):
    RENAME = "rename"
    DELETE = "delete"


def _parse_command(enum_cls, value):
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return None


def _describe_editor(args: dict) -> tuple[str, IconKind]:
    command = _parse_command(EditorCommand, args.get("command"))
    path = args.get("path")

    if command is EditorCommand.CREATE:
        return f"Creating file: {path or 'new file'}", IconKind.DOCUMENT
    if command is EditorCommand.STR_REPLACE:
        return f"Editing file: {path or 'file'}", IconKind.EDIT
    if command is EditorCommand.VIEW:
        return f"Viewing file: {path or 'file'}", IconKind.DOCUMENT
    if command is EditorCommand.INSERT:
        return f"Inserting into file: {path or 'file'}", IconKind.EDIT
    return "Working with file", IconKind.DOCUMENT


def _describe_manager(args: dict) -> tuple[str, IconKind]:
    command = _parse_command(ManagerCommand, args.get("command"))
    path = args.get("path")

    if command is ManagerCommand.RENAME:
        new_path = args.get("new_path")
        return f"Renaming: {path or 'file'} → {new_path or 'new name'}", IconKind.FOLDER
    if command is ManagerCommand.DELETE:
        return f"Deleting: {path or 'file'}", IconKind.TRASH
    return "Managing files", IconKind.FOLDER


def describe_tool_call(tool_name: str, args: dict | None = None) -> tuple[str, IconKind]:
    """Return the (message, icon) pair for a tool call, ignoring its lifecycle."""
    if not isinstance(args, dict):
        args = {}

    kind = ToolKind.parse(tool_name)
    if kind is ToolKind.FILE_EDIT:
        return _describe_editor(args)
    if kind is ToolKind.FILE_MANAGER:
        return _describe_manager(args)
    return f"Running {tool_name}", IconKind.DOCUMENT


def project_tool_status(tool_name: str, state: str, args: dict | None = None) -> DisplayStatus:
    """Project a tool call onto a display status.

    ``state`` is the invocation lifecycle: "result" shows the success
    indicator, anything else (normally "pending") shows a spinner.
    """
    message, icon = describe_tool_call(tool_name, args)
    activity = Activity.SUCCESS if state == "result" else Activity.SPINNER
    return {"message": message, "icon": icon, "activity": activity}


def project_invocation(invocation: ToolInvocation) -> DisplayStatus:
    return project_tool_status(
        invocation["tool_name"], invocation["state"], invocation.get("args")
    )

"""Anonymous-work store: chat messages and generated files produced before login.

Backed by a single JSON file so the work survives until the user signs in
and the coordinator adopts it into a project.
"""

import json
from pathlib import Path

from uigen.config import get_config
from uigen.graph import has_actionable_anon_work
from uigen.state import AnonymousWork, ChatMessage, FileSystemEntry


class AnonWorkStore:
    def __init__(self, path: Path | str | None = None):
        if path is None:
            path = get_config().get("anon_work_path", "./.uigen/anon_work.json")
        self.path = Path(path)

    def set_has_anon_work(
        self,
        messages: list[ChatMessage],
        file_system_data: dict[str, FileSystemEntry],
    ) -> bool:
        """Persist the session if it holds anything worth keeping.

        A file system containing only the root entry counts as empty.
        Returns True if the work was written.
        """
        if not messages and len(file_system_data) <= 1:
            return False

        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"messages": list(messages), "file_system_data": dict(file_system_data)}
        self.path.write_text(json.dumps(payload), encoding="utf-8")
        return True

    def has_anon_work(self) -> bool:
        """True if the stored work would be adopted at sign-in (it has chat messages)."""
        return has_actionable_anon_work(self.get())

    def get(self) -> AnonymousWork | None:
        """Return the stored work, or None if nothing (readable) is stored."""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (FileNotFoundError, json.JSONDecodeError, UnicodeDecodeError):
            return None

        if not isinstance(data, dict):
            return None
        return data

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)

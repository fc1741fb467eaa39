"""Entry point: sign in / sign up from the terminal, or preview tool-call status lines."""

import asyncio
import getpass
import sys

from uigen.auth.coordinator import AuthCompletionCoordinator
from uigen.chat.tool_status import project_tool_status
from uigen.clients.api import UIGenClient
from uigen.state import Activity, AuthResult
from uigen.utils.anon_work import AnonWorkStore
from uigen.utils.validator import validate_credentials

USAGE = """\
usage:
  uigen sign-in EMAIL
  uigen sign-up EMAIL
  uigen tool-status TOOL_NAME [key=value ...] [--pending]\
"""

_ACTIVITY_MARKERS = {
    Activity.SPINNER: "…",
    Activity.SUCCESS: "●",
}


def _print_navigation(path: str) -> None:
    print(f"[UIGen] Open {path}")


async def authenticate(action: str, email: str, password: str) -> AuthResult:
    """Run sign-in or sign-up against the configured backend and reconcile projects."""
    async with UIGenClient() as client:
        coordinator = AuthCompletionCoordinator(
            verifier=client,
            projects=client,
            anon_work=AnonWorkStore(),
            navigate=_print_navigation,
        )
        if action == "sign-up":
            return await coordinator.sign_up(email, password)
        return await coordinator.sign_in(email, password)


def format_tool_status(tool_name: str, args: dict, pending: bool = False) -> str:
    """Render a single status line as it would appear in the chat."""
    status = project_tool_status(tool_name, "pending" if pending else "result", args)
    return f"{_ACTIVITY_MARKERS[status['activity']]} [{status['icon'].value}] {status['message']}"


def _parse_key_values(pairs: list[str]) -> dict:
    args = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise ValueError(f"Expected key=value, got '{pair}'.")
        args[key] = value
    return args


def main() -> None:
    """CLI entry point."""
    args = sys.argv[1:]
    if not args or args[0] not in ("sign-in", "sign-up", "tool-status"):
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    command, rest = args[0], args[1:]

    if command == "tool-status":
        pending = "--pending" in rest
        if pending:
            rest.remove("--pending")
        if not rest:
            print(USAGE, file=sys.stderr)
            sys.exit(2)
        try:
            tool_args = _parse_key_values(rest[1:])
        except ValueError as exc:
            print(f"[UIGen] {exc}", file=sys.stderr)
            sys.exit(2)
        print(format_tool_status(rest[0], tool_args, pending=pending))
        return

    email = rest[0] if rest else input("Email: ")
    password = getpass.getpass("Password: ")
    try:
        email, password = validate_credentials(email, password)
    except ValueError as exc:
        print(f"[UIGen] {exc}", file=sys.stderr)
        sys.exit(2)

    result = asyncio.run(authenticate(command, email, password))
    if not result["success"]:
        print(f"[UIGen] {result.get('error') or 'Authentication failed.'}", file=sys.stderr)
        sys.exit(1)
    print("[UIGen] Signed in.")


if __name__ == "__main__":
    main()

"""Adapters turning chat-stream records into ToolInvocation records for the status projector."""

from langchain_core.messages import AIMessage, BaseMessage, ToolMessage

from uigen.state import ToolInvocation


def tool_invocation_from_dict(raw: dict) -> ToolInvocation:
    """Normalize a tool invocation as sent by the chat UI stream.

    Accepts both ``toolName`` and ``tool_name``. Any state other than
    "result" is reported as pending.
    """
    tool_name = raw.get("toolName") or raw.get("tool_name") or ""
    state = "result" if raw.get("state") == "result" else "pending"

    invocation: ToolInvocation = {"tool_name": tool_name, "state": state}
    if "args" in raw:
        invocation["args"] = raw["args"]
    if "result" in raw:
        invocation["result"] = raw["result"]
    return invocation


def collect_tool_invocations(messages: list[BaseMessage]) -> list[ToolInvocation]:
    """Build one ToolInvocation per tool call found in a LangChain message history.

    A call is "result" once a ToolMessage answering its id appears anywhere
    in the history, otherwise it is still pending.
    """
    results = {
        message.tool_call_id: message.content
        for message in messages
        if isinstance(message, ToolMessage)
    }

    invocations = []
    for message in messages:
        if not isinstance(message, AIMessage):
            continue
        for call in message.tool_calls:
            invocation: ToolInvocation = {
                "tool_name": call["name"],
                "state": "pending",
                "args": call.get("args") or {},
            }
            if call.get("id") in results:
                invocation["state"] = "result"
                invocation["result"] = results[call["id"]]
            invocations.append(invocation)
    return invocations


def message_tool_invocations(message: dict) -> list[ToolInvocation]:
    """Tool invocations attached to a stored chat message dict, if any."""
    raw_invocations = message.get("tool_invocations") or message.get("toolInvocations") or []
    return [tool_invocation_from_dict(raw) for raw in raw_invocations if isinstance(raw, dict)]

"""
Pytest configuration and shared fixtures.
Puts the project root on sys.path and provides stub chat models.
"""

import sys
from pathlib import Path

import pytest
from langchain_core.messages import AIMessage

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from agent import ChatAgent  # noqa: E402


class StubChatModel:
    """Stands in for the provider model: returns a canned reply or raises."""

    def __init__(self, reply=None, error=None):
        self.reply = reply if reply is not None else AIMessage(content="")
        self.error = error
        self.bound_tools = None
        self.calls = []

    def bind_tools(self, tools):
        self.bound_tools = list(tools)
        return self

    def invoke(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.reply


def tool_call(name, args=None, call_id="call_1"):
    return {"name": name, "args": args or {}, "id": call_id, "type": "tool_call"}


@pytest.fixture
def make_agent():
    """Build a ChatAgent around a StubChatModel; returns (agent, model)."""

    def _make(reply=None, error=None):
        model = StubChatModel(reply=reply, error=error)
        return ChatAgent(model), model

    return _make

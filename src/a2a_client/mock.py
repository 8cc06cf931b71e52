"""In-process stand-in for a remote agent."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)

NO_MOCK_MESSAGE = "No remote agent configured and no mock found for tool: {tool_name}"


class MockTool(str, Enum):
    """Tools the mock responder knows how to answer."""

    ECHO = "echo"
    LIST_TOOLS = "list_tools"

    @classmethod
    def lookup(cls, tool_name: str) -> Optional["MockTool"]:
        try:
            return cls(tool_name)
        except ValueError:
            return None


# Advertised by list_tools; "health" is answered by RemoteToolClient.health_check.
MOCK_CATALOG = ["echo", "health", "list_tools"]


class MockResponder:
    """Return canned results so callers can run without a live remote.

    Unknown tool names are not an error: they get an informative message
    back as a normal result.
    """

    def respond(self, tool_name: str, args: Any) -> Dict[str, Any]:
        tool = MockTool.lookup(tool_name)
        LOGGER.debug("Mock dispatch: %s -> %s", tool_name, tool.name if tool else "none")

        if tool is MockTool.ECHO:
            return {"echoed": args}
        if tool is MockTool.LIST_TOOLS:
            return {"tools": list(MOCK_CATALOG)}
        return {"message": NO_MOCK_MESSAGE.format(tool_name=tool_name)}

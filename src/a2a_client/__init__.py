"""Client for invoking named tools on a remote agent.

This module provides:
- RemoteToolClient: HTTP tool calls with timeout, retry and a local mock mode
- ClientConfig / load_config: client settings
- MockResponder: canned results when no remote is configured
- Exceptions for error handling
"""

from __future__ import annotations

from a2a_client.client import RemoteToolClient
from a2a_client.config import load_config
from a2a_client.exceptions import (
    A2AClientError,
    AttemptError,
    ConfigError,
    RemoteCallError,
    RemoteStatusError,
    RemoteTimeoutError,
    ResponseDecodeError,
    TransportError,
)
from a2a_client.mock import MockResponder, MockTool
from a2a_client.models import ClientConfig, ToolCall

__all__ = [
    "RemoteToolClient",
    "ClientConfig",
    "ToolCall",
    "load_config",
    "MockResponder",
    "MockTool",
    # Exceptions
    "A2AClientError",
    "AttemptError",
    "ConfigError",
    "RemoteCallError",
    "RemoteStatusError",
    "RemoteTimeoutError",
    "ResponseDecodeError",
    "TransportError",
]

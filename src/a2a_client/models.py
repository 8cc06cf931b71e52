"""Data models for remote tool calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_TIMEOUT_MS = 5000
DEFAULT_MAX_RETRIES = 2


@dataclass(frozen=True)
class ClientConfig:
    """Settings owned by a single client instance."""

    base_url: str | None = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    max_retries: int = DEFAULT_MAX_RETRIES

    def __post_init__(self) -> None:
        if isinstance(self.timeout_ms, bool) or not isinstance(self.timeout_ms, int):
            raise ValueError(f"timeout_ms must be an integer, got {self.timeout_ms!r}")
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {self.timeout_ms}")
        if isinstance(self.max_retries, bool) or not isinstance(self.max_retries, int):
            raise ValueError(f"max_retries must be an integer, got {self.max_retries!r}")
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be non-negative, got {self.max_retries}")
        if self.base_url is not None and not isinstance(self.base_url, str):
            raise ValueError(f"base_url must be a string, got {self.base_url!r}")
        # Posted to exactly as given; an empty string means no remote
        if not self.base_url:
            object.__setattr__(self, "base_url", None)

    @property
    def max_attempts(self) -> int:
        """Total HTTP attempts allowed per call."""
        return self.max_retries + 1

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


@dataclass
class ToolCall:
    """A single invocation of a named tool."""

    tool_name: str
    args: Any = field(default_factory=dict)
    endpoint_override: str | None = None

    def payload(self) -> dict[str, Any]:
        """Return the JSON request body."""
        return {"tool": self.tool_name, "args": self.args}

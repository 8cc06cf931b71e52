"""Exceptions raised by the remote tool client."""

from __future__ import annotations

from typing import Optional


class A2AClientError(Exception):
    """Base exception for the remote tool client."""


class ConfigError(A2AClientError):
    """Client configuration could not be loaded."""


class AttemptError(A2AClientError):
    """A single HTTP attempt failed. Always retried until the budget is spent."""


class RemoteTimeoutError(AttemptError, TimeoutError):
    """The attempt did not complete within the configured timeout."""

    def __init__(self, url: str, timeout_ms: int) -> None:
        self.url = url
        self.timeout_ms = timeout_ms
        super().__init__(f"Agent call to {url} timed out after {timeout_ms}ms")


class TransportError(AttemptError):
    """Connection-level failure (DNS, refused, reset)."""


class RemoteStatusError(AttemptError):
    """The peer answered with a non-success status."""

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"Agent call failed: {status_code} {reason} - {body}")


class ResponseDecodeError(AttemptError):
    """A success response carried a body that is not JSON."""


class RemoteCallError(A2AClientError):
    """Raised once the retry budget is exhausted."""

    def __init__(self, last_error: AttemptError, attempts: int) -> None:
        self.last_error = last_error
        self.attempts = attempts
        super().__init__(str(last_error))

    @property
    def status_code(self) -> Optional[int]:
        """Status of the final attempt, if it got a response."""
        if isinstance(self.last_error, RemoteStatusError):
            return self.last_error.status_code
        return None

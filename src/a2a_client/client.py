"""HTTP client for calling tools on a remote agent."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Optional

import requests
from requests import Response
from requests.exceptions import ConnectionError, RequestException, Timeout

from .exceptions import (
    AttemptError,
    RemoteCallError,
    RemoteStatusError,
    RemoteTimeoutError,
    ResponseDecodeError,
    TransportError,
)
from .mock import MockResponder
from .models import ClientConfig, ToolCall

LOGGER = logging.getLogger(__name__)

# Linear backoff: attempt n waits n * BACKOFF_STEP_SECONDS before retrying.
BACKOFF_STEP_SECONDS = 0.2


def is_success(status_code: int) -> bool:
    """Only 2xx counts; 3xx responses left over after redirects are failures."""
    return 200 <= status_code < 300


def _discard_response(future: Future) -> None:
    if future.exception() is None:
        future.result().close()


class RemoteToolClient:
    """Call named tools on a remote agent, or a local mock when none is configured.

    Calls share nothing but the read-only config and the `requests.Session`.
    A session is not guaranteed thread-safe, so threaded callers should give
    each thread its own client (or its own session).
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
        mock: Optional[MockResponder] = None,
    ):
        self.config = config or ClientConfig()
        self._session = session or requests.Session()
        self._mock = mock or MockResponder()

    def call_tool(
        self,
        tool_name: str,
        args: Any = None,
        endpoint: Optional[str] = None,
    ) -> Any:
        """Invoke `tool_name` and return the decoded result.

        Raises RemoteCallError once every attempt has failed.
        """

        call = ToolCall(
            tool_name=tool_name,
            args={} if args is None else args,
            endpoint_override=endpoint,
        )
        url = self.resolve_url(call)
        if url is None:
            LOGGER.info("Tool call: %s (mock)", tool_name)
            return self._mock.respond(call.tool_name, call.args)

        LOGGER.info("Tool call: %s -> %s", tool_name, url)
        return self._post_with_retry(url, call)

    def resolve_url(self, call: ToolCall) -> Optional[str]:
        """Per-call override first, then the configured base URL."""
        return call.endpoint_override or self.config.base_url

    def health_check(self, endpoint: Optional[str] = None) -> bool:
        """Return True if the agent's `/health` endpoint answers with a success status."""

        url = endpoint or self.config.base_url
        if url is None:
            return True
        try:
            resp = self._session.get(f"{url.rstrip('/')}/health", timeout=self.config.timeout_seconds)
            return is_success(resp.status_code)
        except RequestException:
            return False

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "RemoteToolClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _post_with_retry(self, url: str, call: ToolCall) -> Any:
        max_attempts = self.config.max_attempts
        last_error: Optional[AttemptError] = None

        for attempt in range(1, max_attempts + 1):
            try:
                return self._attempt(url, call)
            except AttemptError as exc:
                last_error = exc
                if attempt == max_attempts:
                    break
                delay = BACKOFF_STEP_SECONDS * attempt
                LOGGER.warning(
                    "Tool call %s attempt %d/%d failed: %s; retrying in %.1fs",
                    call.tool_name,
                    attempt,
                    max_attempts,
                    exc,
                    delay,
                )
                time.sleep(delay)

        LOGGER.error(
            "Tool call %s failed after %d attempt(s): %s",
            call.tool_name,
            max_attempts,
            last_error,
        )
        raise RemoteCallError(last_error, attempts=max_attempts) from last_error

    def _attempt(self, url: str, call: ToolCall) -> Any:
        try:
            response = self._send(url, call)
        except Timeout as exc:
            raise RemoteTimeoutError(url, self.config.timeout_ms) from exc
        except ConnectionError as exc:
            raise TransportError(f"Cannot connect to {url}: {exc}") from exc
        except RequestException as exc:
            raise TransportError(f"Request failed: {exc}") from exc

        if not is_success(response.status_code):
            raise RemoteStatusError(response.status_code, response.reason or "", response.text)

        try:
            return response.json()
        except ValueError as exc:
            raise ResponseDecodeError(f"Malformed response from {url}: {exc}") from exc

    def _send(self, url: str, call: ToolCall) -> Response:
        """POST on a worker thread, waiting at most timeout_ms wall-clock.

        requests applies its timeout per socket operation, so a peer that
        trickles bytes could hold the attempt open indefinitely. On expiry the
        request is abandoned and its response closed once it arrives.
        """
        future: Future = Future()

        def run() -> None:
            try:
                response = self._session.post(
                    url,
                    json=call.payload(),
                    headers={"Content-Type": "application/json"},
                    timeout=self.config.timeout_seconds,
                )
            except Exception as exc:
                future.set_exception(exc)
            else:
                future.set_result(response)

        threading.Thread(target=run, name=f"a2a-{call.tool_name}", daemon=True).start()
        try:
            return future.result(timeout=self.config.timeout_seconds)
        except FutureTimeoutError:
            future.add_done_callback(_discard_response)
            raise RemoteTimeoutError(url, self.config.timeout_ms) from None

"""Toggl API client.

Requests are dispatched either synchronously, blocking the caller until the
response is in, or asynchronously as a task on the running asyncio loop. In
both modes the outcome is a :class:`Success` or :class:`Failure` and exactly
one of the supplied callbacks is invoked with its payload. Each request is
attempted once; nothing is retried.
"""

import asyncio
import base64
import logging
from dataclasses import dataclass
from typing import Any, Callable

import httpx

from toggl_clock.toggl.errors import HTTPStatusError, ParseError, TogglError, TransportError

logger = logging.getLogger(__name__)


def basic_auth_header(api_token: str) -> tuple[str, str]:
    """Build the Authorization header for a Toggl API token.

    Args:
        api_token: Toggl API token.

    Returns:
        Header name and value.
    """
    credentials = base64.b64encode(f"{api_token}:api_token".encode()).decode("ascii")
    return "Authorization", f"Basic {credentials}"


@dataclass
class DeleteResponse:
    """Successful DELETE outcome; the status code is the signal, not the body."""

    status_code: int
    response: httpx.Response


@dataclass
class Success:
    value: Any


@dataclass
class Failure:
    error: TogglError


Result = Success | Failure
SuccessCallback = Callable[[Any], None]
FailureCallback = Callable[[TogglError], None]


class TogglClient:
    """Client for the workspace-scoped Toggl API."""

    BASE_URL = "https://api.track.toggl.com/api/v9/workspaces/"
    DEFAULT_TIMEOUT = 20.0

    def __init__(
        self,
        api_token: str,
        workspace_id: int,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = BASE_URL,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Toggl client.

        Args:
            api_token: Toggl API token.
            workspace_id: Workspace all resources are scoped to.
            timeout: Default timeout in seconds, used when a call gives none.
            base_url: Service root that the workspace ID is appended to.
            transport: Transport for synchronous requests (tests use httpx.MockTransport).
            async_transport: Transport for asynchronous requests.
        """
        self.workspace_id = workspace_id
        self.timeout = timeout
        self.base_url = base_url
        self.async_transport = async_transport

        name, value = basic_auth_header(api_token)
        self.headers = {name: value}
        self.client = httpx.Client(headers=self.headers, transport=transport)
        self._pending: set[asyncio.Task] = set()

    def build_url(self, path: str) -> str:
        """Build the full URL for a workspace resource path."""
        return f"{self.base_url}{self.workspace_id}{path}"

    def get(self, path: str, **kwargs: Any) -> "Result | asyncio.Task[Result]":
        """Send a GET request. See :meth:`request` for keyword arguments."""
        return self.request("GET", path, **kwargs)

    def post(self, path: str, data: Any = None, **kwargs: Any) -> "Result | asyncio.Task[Result]":
        """Send a POST request with a JSON body."""
        return self.request("POST", path, data, **kwargs)

    def patch(self, path: str, data: Any = None, **kwargs: Any) -> "Result | asyncio.Task[Result]":
        """Send a PATCH request with a JSON body."""
        return self.request("PATCH", path, data, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> "Result | asyncio.Task[Result]":
        """Send a DELETE request; success yields a :class:`DeleteResponse`."""
        return self.request("DELETE", path, **kwargs)

    def request(
        self,
        method: str,
        path: str,
        data: Any = None,
        *,
        sync: bool = False,
        on_success: SuccessCallback | None = None,
        on_failure: FailureCallback | None = None,
        timeout: float | None = None,
    ) -> "Result | asyncio.Task[Result]":
        """Dispatch a request to the Toggl API.

        Args:
            method: HTTP method.
            path: Resource path below the workspace, e.g. ``/projects``.
            data: JSON-encodable body, sent as application/json when not None.
            sync: Block until the response is in instead of scheduling a task.
            on_success: Called with decoded JSON (or a DeleteResponse for DELETE).
            on_failure: Called with a TogglError.
            timeout: Timeout in seconds overriding the client default.

        Returns:
            The Result in sync mode, otherwise the scheduled asyncio.Task.

        Raises:
            RuntimeError: In async mode when no event loop is running.
        """
        options = self._build_options(method, path, data, timeout)

        if sync:
            result = self._send(method, options)
            self._deliver(method, path, result, on_success, on_failure)
            return result

        loop = asyncio.get_running_loop()
        task = loop.create_task(self._send_async(method, path, options, on_success, on_failure))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def wait_pending(self) -> None:
        """Wait until every scheduled request has delivered its callback."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def _build_options(self, method: str, path: str, data: Any, timeout: float | None) -> dict[str, Any]:
        options: dict[str, Any] = {
            "url": self.build_url(path),
            "timeout": self.timeout if timeout is None else timeout,
        }
        if data is not None:
            options["json"] = data
        logger.debug(f"{method} {options['url']}")
        return options

    def _send(self, method: str, options: dict[str, Any]) -> Result:
        try:
            response = self.client.request(method, **options)
        except httpx.TimeoutException as e:
            return Failure(TransportError(f"Request timed out: {e}", timed_out=True))
        except httpx.HTTPError as e:
            return Failure(TransportError(f"Request failed: {e}"))
        return self._interpret(method, response)

    async def _send_async(
        self,
        method: str,
        path: str,
        options: dict[str, Any],
        on_success: SuccessCallback | None,
        on_failure: FailureCallback | None,
    ) -> Result:
        try:
            async with httpx.AsyncClient(headers=self.headers, transport=self.async_transport) as client:
                response = await client.request(method, **options)
        except httpx.TimeoutException as e:
            result: Result = Failure(TransportError(f"Request timed out: {e}", timed_out=True))
        except httpx.HTTPError as e:
            result = Failure(TransportError(f"Request failed: {e}"))
        else:
            result = self._interpret(method, response)

        self._deliver(method, path, result, on_success, on_failure)
        return result

    def _interpret(self, method: str, response: httpx.Response) -> Result:
        if not response.is_success:
            return Failure(HTTPStatusError(response.status_code, response.text))

        if method == "DELETE":
            return Success(DeleteResponse(status_code=response.status_code, response=response))

        try:
            return Success(response.json())
        except ValueError as e:
            return Failure(ParseError(f"Invalid JSON in response: {e}"))

    def _deliver(
        self,
        method: str,
        path: str,
        result: Result,
        on_success: SuccessCallback | None,
        on_failure: FailureCallback | None,
    ) -> None:
        if isinstance(result, Failure):
            logger.warning(f"{method} {path} failed: {result.error}")

        try:
            if isinstance(result, Success):
                if on_success:
                    on_success(result.value)
            elif on_failure:
                on_failure(result.error)
        except Exception as e:
            logger.error(f"Callback for {method} {path} raised: {e}", exc_info=True)

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self) -> "TogglClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

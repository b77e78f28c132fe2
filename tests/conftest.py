"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path
from typing import Any

import httpx
import pytest

from toggl_clock.clock import TogglSession
from toggl_clock.config import Config
from toggl_clock.toggl import TogglClient, TogglTimeEntry
from toggl_clock.utils import StorageManager

WORKSPACE_ID = 42
BASE_URL = "https://toggl.test/api/v9/workspaces/"


class FakeTogglAPI:
    """Serves canned responses for workspace resources and records requests."""

    def __init__(self) -> None:
        self.prefix = f"/api/v9/workspaces/{WORKSPACE_ID}"
        self.routes: dict[tuple[str, str], Any] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        resource: str,
        status: int = 200,
        json_body: Any = None,
        text: str | None = None,
        error: Exception | None = None,
    ) -> None:
        self.routes[(method, resource)] = (status, json_body, text, error)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        resource = request.url.path.removeprefix(self.prefix)
        route = self.routes.get((request.method, resource))
        if route is None:
            return httpx.Response(404, text="Not Found")

        status, json_body, text, error = route
        if error is not None:
            raise error
        if text is not None:
            return httpx.Response(status, text=text)
        return httpx.Response(status, json=json_body)

    def body_of(self, request: httpx.Request) -> Any:
        return json.loads(request.content)


@pytest.fixture
def temp_config_dir() -> Path:
    """Create a temporary configuration directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def storage_manager(temp_config_dir: Path) -> StorageManager:
    """Create a storage manager with temporary directory."""
    return StorageManager(temp_config_dir)


@pytest.fixture
def config(temp_config_dir: Path) -> Config:
    """Create a config instance with temporary directory."""
    return Config(temp_config_dir)


@pytest.fixture
def toggl_api() -> FakeTogglAPI:
    """Create a fake Toggl API."""
    return FakeTogglAPI()


@pytest.fixture
def client(toggl_api: FakeTogglAPI) -> TogglClient:
    """Create a Toggl client served by the fake API."""
    transport = httpx.MockTransport(toggl_api.handler)
    toggl_client = TogglClient(
        api_token="secret-token",
        workspace_id=WORKSPACE_ID,
        base_url=BASE_URL,
        transport=transport,
        async_transport=transport,
    )
    yield toggl_client
    toggl_client.close()


@pytest.fixture
def notifications() -> list[tuple[str, int]]:
    """Collect notifications as (message, level) pairs."""
    return []


@pytest.fixture
def session(client: TogglClient, notifications: list[tuple[str, int]]) -> TogglSession:
    """Create a clock session with a collecting notifier."""
    return TogglSession(client, notifier=lambda message, level: notifications.append((message, level)))


@pytest.fixture
def running_entry() -> TogglTimeEntry:
    """Create a running time entry as returned by a start request."""
    return TogglTimeEntry(
        id=555,
        description="Write report",
        project_id=7,
        start="2024-01-02T09:30:00+02:00",
        wid=WORKSPACE_ID,
        tags=["work"],
        duration=-1,
        created_with="toggl-clock",
    )


@pytest.fixture
def sample_projects() -> list[dict[str, Any]]:
    """Create a project list as returned by the projects resource."""
    return [
        {"id": 7, "name": "Reports", "workspace_id": WORKSPACE_ID, "active": True},
        {"id": 8, "name": "Internal", "workspace_id": WORKSPACE_ID, "active": True},
    ]

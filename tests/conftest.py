"""Pytest configuration and fixtures for user directory tests."""

from typing import Callable, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from user_directory.api.deps import get_users_source
from user_directory.main import create_app
from user_directory.services.users_source import UsersSource

BASE_URL = "https://users.test"

USER_NAMES = [
    "Leanne Graham",
    "Ervin Howell",
    "Clementine Bauch",
    "Patricia Lebsack",
    "Chelsey Dietrich",
    "Mrs. Dennis Schulist",
    "Kurtis Weissnat",
    "Nicholas Runolfsdottir V",
    "Glenna Reichert",
    "Clementina DuBuque",
]


def make_users(names: list[str]) -> list[dict]:
    """Build remote user payloads, including fields the directory ignores."""
    return [
        {
            "id": index,
            "name": name,
            "username": (name.split() or ["user"])[0],
            "email": f"user{index}@example.com",
            "phone": f"1-770-736-80{index:02d}",
            "website": "example.org",
        }
        for index, name in enumerate(names, start=1)
    ]


SAMPLE_USERS = make_users(USER_NAMES)


class FakeUsersApi:
    """In-memory stand-in for the remote /users endpoint."""

    def __init__(
        self,
        users: list[dict],
        send_total_header: bool = True,
        status_code: int = 200,
    ):
        self.users = users
        self.send_total_header = send_total_header
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path != "/users":
            return httpx.Response(404, json={})
        if self.status_code >= 400:
            return httpx.Response(self.status_code, json={"error": "unavailable"})

        params = request.url.params
        if "_page" not in params:
            return httpx.Response(200, json=self.users)

        page = int(params["_page"])
        limit = int(params["_limit"])
        start = (page - 1) * limit
        headers = {"X-Total-Count": str(len(self.users))} if self.send_total_header else {}
        return httpx.Response(200, json=self.users[start:start + limit], headers=headers)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def make_source(handler: Callable[[httpx.Request], httpx.Response]) -> UsersSource:
    return UsersSource(base_url=BASE_URL, transport=httpx.MockTransport(handler))


PROXY_ENV_VARS = ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy")


@pytest.fixture(scope="session", autouse=True)
def no_proxy_env():
    """Keep proxy mounts from bypassing the mock transport."""
    patcher = pytest.MonkeyPatch()
    for name in PROXY_ENV_VARS:
        patcher.delenv(name, raising=False)
    yield
    patcher.undo()


@pytest.fixture
def app():
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client_for(app) -> Callable[[Optional[FakeUsersApi]], TestClient]:
    """Return a factory building a TestClient wired to a fake users API."""

    def factory(api: Optional[FakeUsersApi] = None) -> TestClient:
        api = api or FakeUsersApi(SAMPLE_USERS)
        app.dependency_overrides[get_users_source] = lambda: UsersSource(
            base_url=BASE_URL, transport=api.transport()
        )
        return TestClient(app)

    return factory

"""Pytest configuration and fixtures for dashboard-writer tests.

This module provides a FakeTracker that stands in for the ``Http`` client so
the writer can be exercised without a network.

IMPORTANT: Environment variables must be set BEFORE importing dashboard_writer
modules, as ``constants`` reads them at import time.
"""

from __future__ import annotations

import os

os.environ.setdefault("DEPENDENCY_DASHBOARD_URL", "https://dashboard.example.com/api/")
os.environ.setdefault("REPOSITORY", "group/project")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest

from dashboard_writer import state
from dashboard_writer.dashboard import DashboardWriter
from dashboard_writer.errors import TransportError
from dashboard_writer.http import HttpResponse
from dashboard_writer.sanitize import clear_secrets

BASE_URL = "https://dashboard.example.com/api/"
REPOSITORY = "group/project"

_UNSET = object()


class FakeTracker:
    """An in-memory tracker exposing the ``Http`` JSON methods.

    This is ONLY for testing.  Every call is recorded in ``calls`` as
    ``(method, path, body)``.  Setting ``errors["PUT"]`` (or GET/POST) makes
    the next calls of that method raise the given exception.
    """

    def __init__(self, repository: str = REPOSITORY) -> None:
        self.repository = repository
        self.issues: dict[int, dict[str, object]] = {}
        self.calls: list[tuple[str, str, object]] = []
        self.errors: dict[str, Exception] = {}
        self.list_body: object = _UNSET
        self.closed = False

    def add_issue(self, iid: int, title: str, description: str | None = "") -> None:
        self.issues[iid] = {"iid": iid, "title": title, "description": description, "state": "opened"}

    def mutations(self) -> list[tuple[str, str, object]]:
        return [call for call in self.calls if call[0] != "GET"]

    def _raise_if_failing(self, method: str) -> None:
        if method in self.errors:
            raise self.errors[method]

    def _issue_number(self, path: str) -> int:
        return int(path.rstrip("/").rsplit("/", 1)[1])

    async def get_json(self, path: str, *, base_url: str | None = None, use_cache: bool = False) -> HttpResponse:
        self.calls.append(("GET", path, None))
        self._raise_if_failing("GET")
        if path.rstrip("/").endswith("/issues"):
            if self.list_body is not _UNSET:
                return HttpResponse(status_code=200, body=self.list_body)
            body = [{"iid": i["iid"], "title": i["title"]} for i in self.issues.values()]
            return HttpResponse(status_code=200, body=body)
        number = self._issue_number(path)
        if number not in self.issues:
            raise TransportError("404 Not found", status_code=404)
        return HttpResponse(status_code=200, body={"description": self.issues[number]["description"]})

    async def post_json(self, path: str, *, body: dict[str, object], base_url: str | None = None) -> HttpResponse:
        self.calls.append(("POST", path, body))
        self._raise_if_failing("POST")
        iid = max(self.issues, default=0) + 1
        self.add_issue(iid, str(body["title"]), body["description"])
        return HttpResponse(status_code=201, body=self.issues[iid])

    async def put_json(self, path: str, *, body: dict[str, object], base_url: str | None = None) -> HttpResponse:
        self.calls.append(("PUT", path, body))
        self._raise_if_failing("PUT")
        issue = self.issues[self._issue_number(path)]
        if body.get("state_event") == "close":
            issue["state"] = "closed"
        else:
            issue.update(title=body["title"], description=body["description"])
        return HttpResponse(status_code=200, body=issue)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def tracker() -> FakeTracker:
    return FakeTracker()


@pytest.fixture
def writer(tracker: FakeTracker) -> DashboardWriter:
    return DashboardWriter(REPOSITORY, BASE_URL, tracker)  # type: ignore[arg-type]


@pytest.fixture(autouse=True)
def reset_shared_state(monkeypatch):
    """Start every test without a shared writer or registered secrets."""
    monkeypatch.setattr(state, "WRITER", None)
    clear_secrets()
    yield
    clear_secrets()

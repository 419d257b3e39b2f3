"""Shared pytest fixtures for fastapi-action-results tests."""

from __future__ import annotations

from typing import Any

import pytest
from starlette.requests import Request

from fastapi_action_results.response import ResultResponse


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
        }
        return Request(scope)

    return _make


class CountingContext:
    """Request source that records how often its request was read."""

    def __init__(self, request: Request | None = None) -> None:
        self.current = request
        self.reads = 0

    @property
    def request(self) -> Request | None:
        self.reads += 1
        return self.current


@pytest.fixture
def counting_context() -> CountingContext:
    return CountingContext()


@pytest.fixture
def tracked_responses() -> Any:
    """Response class that remembers every instance it allocates."""

    class TrackedResponse(ResultResponse):
        instances: list[TrackedResponse] = []

        def __init__(self, *args: Any, **kwargs: Any) -> None:
            super().__init__(*args, **kwargs)
            TrackedResponse.instances.append(self)

    return TrackedResponse

"""ResultResponse — disposable response descriptor produced by action results."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType
from typing import Any

from starlette.requests import Request
from starlette.responses import Response


class ResultResponse(Response):
    """Starlette response that references the request it answers.

    The response owns its cleanup callbacks, not the request: ``close()``
    drops the reference but never closes or mutates the request itself.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.request: Request | None = None
        self.closed = False
        self._cleanups: list[Callable[[], None]] = []

    def add_cleanup(self, callback: Callable[[], None]) -> None:
        self._cleanups.append(callback)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.request = None
        cleanups, self._cleanups = self._cleanups, []
        for callback in reversed(cleanups):
            callback()

    def __enter__(self) -> ResultResponse:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

"""ActionResult abstract base class and StatusCodeResult."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import ExitStack

from starlette.requests import Request
from starlette.responses import Response

from fastapi_action_results._types import CancellationToken, RequestSource
from fastapi_action_results.providers import (
    DeferredRequestProvider,
    DirectRequestProvider,
    RequestProvider,
)
from fastapi_action_results.response import ResultResponse

logger = logging.getLogger(__name__)


class ActionResult(ABC):
    """Something an endpoint returns and the framework turns into a response."""

    __slots__ = ()

    @abstractmethod
    async def execute(
        self, cancellation: CancellationToken | None = None
    ) -> Response: ...


class StatusCodeResult(ActionResult):
    """Responds with a fixed status code to the request that produced it."""

    __slots__ = ("_status_code", "_provider", "_response_class")

    def __init__(
        self,
        status_code: int,
        request: Request,
        *,
        response_class: type[ResultResponse] = ResultResponse,
    ) -> None:
        self._init(status_code, DirectRequestProvider(request), response_class)

    @classmethod
    def from_context(
        cls,
        status_code: int,
        context: RequestSource,
        *,
        response_class: type[ResultResponse] = ResultResponse,
    ) -> StatusCodeResult:
        """Build a result whose request is read from ``context`` when first needed."""
        result = cls.__new__(cls)
        result._init(status_code, DeferredRequestProvider(context), response_class)
        return result

    def _init(
        self,
        status_code: int,
        provider: RequestProvider,
        response_class: type[ResultResponse],
    ) -> None:
        self._status_code = status_code
        self._provider = provider
        self._response_class = response_class

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def request(self) -> Request:
        return self._provider.request

    async def execute(
        self, cancellation: CancellationToken | None = None
    ) -> ResultResponse:
        # Nothing here suspends, so there is nothing for cancellation to interrupt
        return self._build_response()

    def _build_response(self) -> ResultResponse:
        with ExitStack() as stack:
            response = self._response_class(status_code=self._status_code)
            stack.callback(self._discard, response)

            response.request = self._provider.request

            stack.pop_all()
        return response

    @staticmethod
    def _discard(response: ResultResponse) -> None:
        logger.debug(
            "Closing partially built %s (status %d)",
            type(response).__name__,
            response.status_code,
        )
        response.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self._status_code})"

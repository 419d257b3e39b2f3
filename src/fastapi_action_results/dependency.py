"""FastAPI integration — controller dependencies and result execution."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar

from fastapi import HTTPException
from starlette.requests import Request
from starlette.responses import Response

from fastapi_action_results._types import CancellationToken
from fastapi_action_results.context import RequestContext
from fastapi_action_results.controller import ApiController
from fastapi_action_results.exceptions import InvalidState
from fastapi_action_results.result import ActionResult

ControllerT = TypeVar("ControllerT", bound=ApiController)


def controller_dependency(
    controller_class: type[ControllerT] = ApiController,  # type: ignore[assignment]
) -> Callable[..., Awaitable[ControllerT]]:
    """Return a FastAPI dependency yielding a controller bound to the request."""

    async def dependency(request: Request) -> ControllerT:
        return controller_class(RequestContext().bind(request))

    return dependency


async def execute_result(
    result: ActionResult, cancellation: CancellationToken | None = None
) -> Response:
    """Execute ``result``, mapping a missing request to a 500 response."""
    try:
        return await result.execute(cancellation)
    except InvalidState as exc:
        raise HTTPException(status_code=500, detail=exc.detail) from exc

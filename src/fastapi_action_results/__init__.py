"""FastAPI Action Results - deferred, resource-safe status code results for FastAPI."""

from fastapi_action_results._types import CancellationToken, RequestSource
from fastapi_action_results.context import RequestContext
from fastapi_action_results.controller import ApiController
from fastapi_action_results.dependency import controller_dependency, execute_result
from fastapi_action_results.exceptions import (
    ActionResultException,
    InvalidArgument,
    InvalidState,
)
from fastapi_action_results.providers import (
    DeferredRequestProvider,
    DirectRequestProvider,
    RequestProvider,
)
from fastapi_action_results.response import ResultResponse
from fastapi_action_results.result import ActionResult, StatusCodeResult

__all__ = [
    "ActionResult",
    "ActionResultException",
    "ApiController",
    "CancellationToken",
    "DeferredRequestProvider",
    "DirectRequestProvider",
    "InvalidArgument",
    "InvalidState",
    "RequestContext",
    "RequestProvider",
    "RequestSource",
    "ResultResponse",
    "StatusCodeResult",
    "controller_dependency",
    "execute_result",
]

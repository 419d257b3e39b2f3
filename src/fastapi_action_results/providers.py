"""Request providers — direct and deferred acquisition of the originating request."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

from starlette.requests import Request

from fastapi_action_results._types import RequestSource
from fastapi_action_results.exceptions import InvalidArgument, InvalidState

logger = logging.getLogger(__name__)


class RequestProvider(ABC):
    """Supplies the request a result was produced for."""

    @property
    @abstractmethod
    def request(self) -> Request: ...


class DirectRequestProvider(RequestProvider):
    """Wraps an already-known request."""

    __slots__ = ("_request",)

    def __init__(self, request: Request) -> None:
        if request is None:
            raise InvalidArgument("request")
        self._request = request

    @property
    def request(self) -> Request:
        return self._request


class DeferredRequestProvider(RequestProvider):
    """Looks up the context's current request on first access.

    A successful lookup is cached and never repeated, even if the context
    later holds a different request. A failed lookup is not cached, so the
    next access queries the context again.
    """

    __slots__ = ("_context", "_resolved", "_lock")

    def __init__(self, context: RequestSource) -> None:
        if context is None:
            raise InvalidArgument("context")
        self._context = context
        self._resolved: DirectRequestProvider | None = None
        self._lock = threading.Lock()

    @property
    def resolved(self) -> bool:
        return self._resolved is not None

    @property
    def request(self) -> Request:
        return self._ensure_resolved().request

    def _ensure_resolved(self) -> DirectRequestProvider:
        resolved = self._resolved
        if resolved is not None:
            return resolved

        with self._lock:
            if self._resolved is None:
                request = self._context.request
                if request is None:
                    logger.debug(
                        "Request context %r has no request yet", type(self._context)
                    )
                    raise InvalidState()
                self._resolved = DirectRequestProvider(request)
                logger.debug("Resolved request from %r", type(self._context))
            return self._resolved

"""RequestContext — per-request state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from starlette.requests import Request


@dataclass
class RequestContext:
    """Per-request state container whose request may be bound late."""

    request: Request | None = None
    user: Any | None = None
    state: dict[str, Any] = field(default_factory=dict)

    def bind(self, request: Request) -> RequestContext:
        self.request = request
        return self

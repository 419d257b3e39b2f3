"""Shared type aliases and protocols."""

from __future__ import annotations

import asyncio
from typing import Protocol, runtime_checkable

from starlette.requests import Request

# Accepted by ActionResult.execute for interface uniformity, never observed
CancellationToken = asyncio.Event


@runtime_checkable
class RequestSource(Protocol):
    """Anything exposing the current request, or None if it has none yet."""

    @property
    def request(self) -> Request | None: ...

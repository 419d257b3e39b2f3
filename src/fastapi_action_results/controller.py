"""ApiController — controller-like owner of a RequestContext with result helpers."""

from __future__ import annotations

from starlette.requests import Request

from fastapi_action_results.context import RequestContext
from fastapi_action_results.result import StatusCodeResult


class ApiController:
    """Base for endpoint controllers.

    Results created through the helpers read the request from the
    controller's context when they are executed, not when they are created.
    """

    def __init__(self, context: RequestContext | None = None) -> None:
        self.context = context if context is not None else RequestContext()

    @property
    def request(self) -> Request | None:
        return self.context.request

    def status_code(self, code: int) -> StatusCodeResult:
        return StatusCodeResult.from_context(code, self.context)

    def ok(self) -> StatusCodeResult:
        return self.status_code(200)

    def no_content(self) -> StatusCodeResult:
        return self.status_code(204)

    def bad_request(self) -> StatusCodeResult:
        return self.status_code(400)

    def unauthorized(self) -> StatusCodeResult:
        return self.status_code(401)

    def not_found(self) -> StatusCodeResult:
        return self.status_code(404)

    def conflict(self) -> StatusCodeResult:
        return self.status_code(409)

    def internal_server_error(self) -> StatusCodeResult:
        return self.status_code(500)

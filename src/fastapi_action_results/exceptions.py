"""ActionResultException hierarchy for result construction and execution."""

from __future__ import annotations


class ActionResultException(Exception):
    """Base for all action result exceptions."""


class InvalidArgument(ActionResultException, ValueError):
    """A required dependency was None at construction."""

    def __init__(self, argument: str, detail: str | None = None) -> None:
        self.argument = argument
        self.detail = detail or f"'{argument}' must not be None"
        super().__init__(self.detail)


class InvalidState(ActionResultException, RuntimeError):
    """The request context cannot supply a request yet."""

    def __init__(
        self,
        detail: str = (
            "RequestContext.request must not be None before the result is executed."
        ),
    ) -> None:
        super().__init__(detail)
        self.detail = detail

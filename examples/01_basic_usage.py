"""
Basic usage example of fastapi-action-results.

Demonstrates:
- Returning a status code result built directly from the request
- Using a controller whose results read the request when executed
- Letting execute_result map a missing request to a 500 response
"""

from fastapi import Depends, FastAPI
from starlette.requests import Request
from starlette.responses import Response

from fastapi_action_results import (
    ApiController,
    StatusCodeResult,
    controller_dependency,
    execute_result,
)

app = FastAPI(title="Basic Action Results Example")

# In-memory store (replace with a real repository)
TICKETS = {1: "Printer on fire", 2: "Coffee machine empty"}


class TicketController(ApiController):
    def delete(self, ticket_id: int) -> StatusCodeResult:
        if TICKETS.pop(ticket_id, None) is None:
            return self.not_found()
        return self.no_content()


@app.get("/health")
async def health(request: Request) -> Response:
    """Direct form: the request is known up front."""
    return await execute_result(StatusCodeResult(204, request))


@app.delete("/tickets/{ticket_id}")
async def delete_ticket(
    ticket_id: int,
    controller: TicketController = Depends(controller_dependency(TicketController)),
) -> Response:
    """Deferred form: the result reads the controller's request on execute."""
    return await execute_result(controller.delete(ticket_id))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

"""HTTP error mapping shared by every router."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from tailorhub.ordering.order.lifecycle import InvalidStatusTransition


async def _invalid_transition_handler(request: Request, exc: InvalidStatusTransition) -> JSONResponse:
    return JSONResponse(
        status_code=409,
        content={
            "error": exc.message,
            "current_status": exc.current,
            "target_status": exc.target,
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Protean's validation/not-found mapping plus 409 for lifecycle conflicts."""
    register_exception_handlers(app)
    app.add_exception_handler(InvalidStatusTransition, _invalid_transition_handler)

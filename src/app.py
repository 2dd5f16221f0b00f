"""TailorHub FastAPI application.

Processes commands synchronously via HTTP. Every request runs inside the
tailorhub domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml:
#   - "test"       → memory providers, sync processing
#   - "production" → PostgreSQL from DATABASE_URL
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tailorhub.domain import tailorhub
from tailorhub.utils.logging import add_context, clear_context, get_logger

tailorhub.init()

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="TailorHub API",
    description="Tailoring marketplace: catalogue, booking, order tracking and reviews",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the tailorhub domain context and bind request details to logs."""
    add_context(method=request.method, path=request.url.path)
    try:
        with tailorhub.domain_context():
            return await call_next(request)
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from tailorhub.booking.api import booking_router  # noqa: E402
from tailorhub.catalogue.api import service_router, tailor_router  # noqa: E402
from tailorhub.identity.api import auth_router, user_router  # noqa: E402
from tailorhub.ordering.api import order_router  # noqa: E402
from tailorhub.reviews.api import review_router  # noqa: E402
from tailorhub.utils.http import register_error_handlers  # noqa: E402

app.include_router(auth_router)
app.include_router(user_router)
app.include_router(tailor_router)
app.include_router(service_router)
app.include_router(order_router)
app.include_router(booking_router)
app.include_router(review_router)

register_error_handlers(app)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", path=request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": tailorhub.name})

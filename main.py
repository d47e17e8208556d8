# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
PeopleFinder Service
====================
Queries the university PeopleFinder JSON endpoint and extracts a single
datum (surname, email, phone, ...) for the person a query matched.

A lookup fails with a specific reason rather than an empty value:
    empty result set ─► position out of bounds ─► multiple results ─► field undefined
plus transport failure when the directory cannot be reached or decoded.

Port: 8010
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from peoplefinder.controllers import lookup_controller, system_controller
from peoplefinder.core.config import settings
from peoplefinder.core.logging import get_logger
from peoplefinder.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    logger.info("Starting %s v%s, directory=%s",
                settings.SERVICE_NAME, settings.SERVICE_VERSION, settings.PEOPLEFINDER_URL)
    yield
    logger.info("Shutting down")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="PeopleFinder Service",
    description="Extracts a single field from the PeopleFinder directory for a matched person.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")
    return JSONResponse(status_code=500, content={"error": "internal_server_error", "detail": str(exc)})


app.include_router(system_controller.router)
app.include_router(lookup_controller.router)


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")

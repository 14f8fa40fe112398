"""FastAPI app entry point for the TyreWise alternative size service."""

import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import router
from app.config import get_settings
from app.core.logging import log_error, log_request, log_response, setup_logging

settings = get_settings()
setup_logging(settings.log_level)

app = FastAPI(
    title="TyreWise API",
    description="Geometry-only safe alternative tyre sizes for a vehicle's OEM size",
    version="1.0.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    log_request(request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception as e:
        log_error("unhandled", e, path=request.url.path)
        raise
    log_response(
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - start) * 1000,
    )
    return response


# Routes
app.include_router(router, prefix="/api")


@app.get("/health")
async def health():
    return {"status": "ok", "service": "tyrewise"}

"""Crochet Pattern Studio: FastAPI application entry point."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import load_settings
from .routers import generate
from .services import pattern_service
from .services.providers import build_providers

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    names = [p.name for p in build_providers(load_settings())]
    if names:
        logger.info(f"Pattern providers configured: {', '.join(names)}")
    else:
        logger.warning("No provider API key configured: every request will get a fallback pattern")
    yield


app = FastAPI(
    title="Crochet Pattern Studio",
    description="AI-assisted crochet pattern generator with skill-level fallbacks",
    version="1.0.0",
    lifespan=lifespan,
)


# Browser clients call from any origin; OPTIONS preflights are answered by the router
@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in generate.CORS_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


@app.exception_handler(RequestValidationError)
async def invalid_request_fallback(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Invalid pattern request on {request.url.path}: {exc.errors()}")
    result = pattern_service.error_result("Used fallback pattern because the request was invalid")
    return JSONResponse(status_code=200, content=result.to_response())


@app.exception_handler(StarletteHTTPException)
async def unreadable_request_fallback(request: Request, exc: StarletteHTTPException):
    # Bodies that cannot even be decoded surface as a 400 before validation
    if exc.status_code != 400 or request.url.path not in generate.GENERATE_PATHS:
        return await http_exception_handler(request, exc)
    logger.warning(f"Unreadable pattern request on {request.url.path}: {exc.detail}")
    result = pattern_service.error_result("Used fallback pattern because the request was invalid")
    return JSONResponse(status_code=200, content=result.to_response())


app.include_router(generate.router)


@app.get("/health")
async def health() -> dict:
    providers = build_providers(load_settings())
    return {
        "status": "ok",
        "providers": [p.name for p in providers],
    }


@app.get("/")
async def root() -> dict:
    return {"message": "Crochet Pattern Studio API", "docs": "/docs"}

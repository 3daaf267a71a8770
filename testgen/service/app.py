"""FastAPI application exposing test generation over HTTP."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Sequence

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from ..config import DEFAULT_HOST, DEFAULT_PORT
from ..errors import GenerationError
from ..logging import get_logger, route_server_logs
from ..orchestrator import GenerationEngine

GENERATE_PATH = "/api/test-generator/generate"

logger = get_logger("service")


class HealthResponse(BaseModel):
    status: str


def _default_engine() -> GenerationEngine:
    return GenerationEngine()


def create_app(
    engine_factory: Callable[[], GenerationEngine] = _default_engine,
    *,
    cors_origins: Sequence[str] = ("*",),
) -> FastAPI:
    """Create the FastAPI application wrapping the generation engine."""

    app = FastAPI(title="TestGen Service", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    async def get_engine() -> GenerationEngine:
        return engine_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post(GENERATE_PATH, response_class=PlainTextResponse)
    async def generate_tests(
        request: Request,
        engine: GenerationEngine = Depends(get_engine),
    ) -> PlainTextResponse:
        source = (await request.body()).decode("utf-8", errors="replace")

        def _run_generate() -> str:
            return engine.generate(source)

        generated = await asyncio.get_running_loop().run_in_executor(None, _run_generate)
        return PlainTextResponse(generated)

    @app.exception_handler(GenerationError)
    async def generation_error_handler(_: Any, exc: GenerationError) -> PlainTextResponse:
        return PlainTextResponse(f"Error generating tests: {exc}", status_code=500)

    return app


def run_service(
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    *,
    cors_origins: Sequence[str] = ("*",),
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app(cors_origins=cors_origins)
    route_server_logs()
    logger.info("Server starting on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_config=None)


__all__ = ["GENERATE_PATH", "create_app", "run_service"]

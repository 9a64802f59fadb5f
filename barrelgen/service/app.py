"""FastAPI application entrypoint for barrelgen service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ConfigError
from ..orchestrator import Orchestrator


class ValidateRequest(BaseModel):
    path: str = "."


class IssuePayload(BaseModel):
    kind: str
    message: str
    file: Optional[str] = None
    symbol: Optional[str] = None


class StatsPayload(BaseModel):
    total_exports: int
    named_exports: int
    index_files: int
    re_exports: int


class ValidateResponse(BaseModel):
    issues: List[IssuePayload]
    stats: StatsPayload
    report_path: str


class GenerateRequest(BaseModel):
    barrel: str
    root: str = "."


class GenerateResponse(BaseModel):
    barrel: str
    content: Optional[str] = None
    modules: List[str] = []
    warnings: List[str] = []


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing barrelgen operations."""

    app = FastAPI(title="barrelgen service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/validate", response_model=ValidateResponse)
    async def validate(
        payload: ValidateRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> ValidateResponse:
        loop = asyncio.get_running_loop()
        outcome = await loop.run_in_executor(None, orchestrator.run_validate, payload.path)
        stats = outcome.result.stats
        return ValidateResponse(
            issues=[
                IssuePayload(kind=issue.kind, message=issue.message, file=issue.file, symbol=issue.symbol)
                for issue in outcome.result.issues
            ],
            stats=StatsPayload(
                total_exports=stats.total_exports,
                named_exports=stats.named_exports,
                index_files=stats.index_files,
                re_exports=stats.re_exports,
            ),
            report_path=str(outcome.report_path),
        )

    @app.post("/generate", response_model=GenerateResponse)
    async def generate(
        payload: GenerateRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> GenerateResponse:
        def _preview():
            return orchestrator.preview_barrel(payload.barrel, root=payload.root)

        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, _preview)
        return GenerateResponse(
            barrel=str(result.barrel),
            content=result.content,
            modules=list(result.modules),
            warnings=[warning.message for warning in result.warnings],
        )

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    app = create_app()
    uvicorn.run(app, host=host, port=port)

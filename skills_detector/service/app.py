"""FastAPI application entrypoint for skills-detector service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from .. import __version__
from ..models import CharacteristicsReport
from ..orchestrator import Orchestrator, RecommendOutcome
from ..report import SCHEMA_URL


class DetectRequest(BaseModel):
    path: str


class SkillsRequest(BaseModel):
    path: str
    skip_search: bool = False
    write: bool = False


class DetectResponse(BaseModel):
    frameworks: List[str]
    languages: List[str]
    tools: List[str]
    testing: List[str]
    searchTerms: List[str]


class DetectedWithTimestamp(DetectResponse):
    timestamp: str


class SkillEntryModel(BaseModel):
    source: str
    skills: List[str]


class SkillsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_url: str = Field(default=SCHEMA_URL, alias="$schema")
    detected: DetectedWithTimestamp
    skills: List[SkillEntryModel]
    output_path: Optional[str] = None


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing detection and recommendation."""

    app = FastAPI(title="Skills Detector Service", version=__version__)

    async def get_orchestrator() -> Orchestrator:
        # Lazy-instantiate per request to keep state predictable.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/detect", response_model=DetectResponse)
    async def detect_project(
        payload: DetectRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> DetectResponse:
        def _run_detect() -> CharacteristicsReport:
            return orchestrator.run_detect(payload.path)

        loop = asyncio.get_running_loop()
        detected = await loop.run_in_executor(None, _run_detect)
        return DetectResponse(**detected.to_dict())

    @app.post("/skills", response_model=SkillsResponse, response_model_by_alias=True)
    async def recommend_skills(
        payload: SkillsRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> SkillsResponse:
        def _run_recommend() -> RecommendOutcome:
            return orchestrator.run_recommend(
                payload.path,
                skip_search=payload.skip_search,
                write=payload.write,
            )

        loop = asyncio.get_running_loop()
        outcome = await loop.run_in_executor(None, _run_recommend)
        report = outcome.report
        return SkillsResponse(
            schema_url=str(report["$schema"]),
            detected=DetectedWithTimestamp(**report["detected"]),  # type: ignore[arg-type]
            skills=[SkillEntryModel(**entry.to_dict()) for entry in outcome.skills],
            output_path=str(outcome.output_path) if outcome.output_path else None,
        )

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(
        _: Any, exc: FileNotFoundError
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(
        _: Any, exc: RuntimeError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    uvicorn.run(create_app(), host=host, port=port)

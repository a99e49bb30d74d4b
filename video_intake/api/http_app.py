from __future__ import annotations

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, File, HTTPException, UploadFile

from video_intake.api.handlers.deps import ApiDeps
from video_intake.api.handlers.form import (
    clear_file_handler,
    edit_form_handler,
    get_form_handler,
    reset_form_handler,
    select_file_handler,
    submit_form_handler,
)
from video_intake.api.schemas import (
    EditFormRequest,
    ErrorResponse,
    FormStateResponse,
    HealthResponse,
    ReadyResponse,
    SubmitResponse,
)
from video_intake.domain.errors import DomainInvariantError
from video_intake.domain.models import FileSlot


def build_app(role: str, run_id: str, api_deps: ApiDeps) -> FastAPI:
    logger = logging.getLogger("runtime")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        del app
        logger.info(
            "role started",
            extra={"role": role, "service": role, "run_id": run_id},
        )
        yield
        logger.info(
            "role stopped",
            extra={"role": role, "service": role, "run_id": run_id},
        )

    app = FastAPI(title="video-intake", version="0.1.0", lifespan=lifespan)

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", role=role)

    @app.get("/ready", response_model=ReadyResponse, tags=["System"])
    async def ready() -> ReadyResponse:
        return ReadyResponse(status="ready", role=role, phase=api_deps.store.phase)

    @app.get("/form", response_model=FormStateResponse, tags=["Form"])
    async def get_form() -> FormStateResponse:
        return await get_form_handler(api_deps=api_deps)

    @app.patch(
        "/form",
        response_model=FormStateResponse,
        responses={422: {"model": ErrorResponse}},
        tags=["Form"],
    )
    async def edit_form(request: EditFormRequest) -> FormStateResponse:
        return await edit_form_handler(request=request, api_deps=api_deps)

    async def _select(slot: FileSlot, file: UploadFile) -> FormStateResponse:
        payload = await file.read()
        return await select_file_handler(
            slot=slot,
            filename=file.filename,
            payload=payload,
            content_type=file.content_type,
            api_deps=api_deps,
        )

    @app.post("/form/audio", response_model=FormStateResponse, tags=["Form"])
    async def select_audio(file: UploadFile = File(...)) -> FormStateResponse:
        return await _select("audio_file", file)

    @app.delete("/form/audio", response_model=FormStateResponse, tags=["Form"])
    async def clear_audio() -> FormStateResponse:
        return await clear_file_handler(slot="audio_file", api_deps=api_deps)

    @app.post("/form/background-music", response_model=FormStateResponse, tags=["Form"])
    async def select_background_music(file: UploadFile = File(...)) -> FormStateResponse:
        return await _select("background_music", file)

    @app.delete("/form/background-music", response_model=FormStateResponse, tags=["Form"])
    async def clear_background_music() -> FormStateResponse:
        return await clear_file_handler(slot="background_music", api_deps=api_deps)

    @app.post("/form/submit", response_model=SubmitResponse, tags=["Form"])
    async def submit_form() -> SubmitResponse:
        return await submit_form_handler(api_deps=api_deps)

    @app.post(
        "/form/reset",
        response_model=FormStateResponse,
        responses={409: {"model": ErrorResponse}},
        tags=["Form"],
    )
    async def reset_form() -> FormStateResponse:
        try:
            return await reset_form_handler(api_deps=api_deps)
        except DomainInvariantError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

    return app

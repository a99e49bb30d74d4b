from __future__ import annotations

from video_intake.api.handlers.deps import ApiDeps
from video_intake.api.schemas import EditFormRequest, FormStateResponse, SubmitResponse
from video_intake.domain.models import FileSlot, MediaFile
from video_intake.domain.use_cases.select_file import select_file

COMPONENT_ID = "api.form"


def _form_state(api_deps: ApiDeps) -> FormStateResponse:
    return FormStateResponse.from_snapshot(api_deps.store.snapshot())


async def get_form_handler(*, api_deps: ApiDeps) -> FormStateResponse:
    return _form_state(api_deps)


async def edit_form_handler(*, request: EditFormRequest, api_deps: ApiDeps) -> FormStateResponse:
    api_deps.store.edit_fields(
        video_id=request.video_id,
        orientation=request.orientation,
        subtitles=request.subtitles,
    )
    return _form_state(api_deps)


async def select_file_handler(
    *,
    slot: FileSlot,
    filename: str | None,
    payload: bytes,
    content_type: str | None,
    api_deps: ApiDeps,
) -> FormStateResponse:
    media = MediaFile(
        filename=filename or f"{slot}.bin",
        payload=payload,
        content_type=content_type or "application/octet-stream",
    )
    select_file(api_deps.store, slot=slot, file=media)
    return _form_state(api_deps)


async def clear_file_handler(*, slot: FileSlot, api_deps: ApiDeps) -> FormStateResponse:
    select_file(api_deps.store, slot=slot, file=None)
    return _form_state(api_deps)


async def submit_form_handler(*, api_deps: ApiDeps) -> SubmitResponse:
    """Awaits the whole attempt; concurrent triggers get ``dispatched=False``."""
    status = await api_deps.controller.submit()
    return SubmitResponse(dispatched=status is not None, form=_form_state(api_deps))


async def reset_form_handler(*, api_deps: ApiDeps) -> FormStateResponse:
    api_deps.store.reset()
    return _form_state(api_deps)

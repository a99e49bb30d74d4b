from __future__ import annotations

from pydantic import BaseModel, Field

from video_intake.domain.models import FormSnapshot, Orientation, Phase, SubtitleMode


class ErrorResponse(BaseModel):
    detail: str


class HealthResponse(BaseModel):
    status: str
    role: str


class ReadyResponse(BaseModel):
    status: str
    role: str
    phase: Phase


class EditFormRequest(BaseModel):
    video_id: str | None = Field(default=None, max_length=256)
    orientation: Orientation | None = None
    subtitles: SubtitleMode | None = None


class FormStateResponse(BaseModel):
    phase: Phase
    error_text: str | None = None
    result_link: str | None = None
    video_id: str
    orientation: Orientation
    subtitles: SubtitleMode
    audio_filename: str | None = None
    background_music_filename: str | None = None
    can_submit: bool

    @classmethod
    def from_snapshot(cls, snapshot: FormSnapshot) -> FormStateResponse:
        return cls(
            phase=snapshot.phase,
            error_text=snapshot.error_text,
            result_link=snapshot.result_link,
            video_id=snapshot.video_id,
            orientation=snapshot.orientation,
            subtitles=snapshot.subtitles,
            audio_filename=snapshot.audio_filename,
            background_music_filename=snapshot.background_music_filename,
            can_submit=snapshot.can_submit,
        )


class SubmitResponse(BaseModel):
    dispatched: bool
    form: FormStateResponse

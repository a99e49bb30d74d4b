from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from video_intake.domain.error_taxonomy import ErrorCode


class Orientation(StrEnum):
    LANDSCAPE = "Landscape"
    PORTRAIT = "Portrait"


class SubtitleMode(StrEnum):
    WITH = "With Subtitles"
    WITHOUT = "Without Subtitles"


class Phase(StrEnum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


FileSlot = Literal["audio_file", "background_music"]

SLOT_LABELS: dict[FileSlot, str] = {
    "audio_file": "Audio file",
    "background_music": "Background music",
}


@dataclass(frozen=True)
class MediaFile:
    filename: str
    payload: bytes
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.payload)


@dataclass
class SubmissionInput:
    video_id: str = ""
    audio_file: MediaFile | None = None
    background_music: MediaFile | None = None
    orientation: Orientation = Orientation.LANDSCAPE
    subtitles: SubtitleMode = SubtitleMode.WITHOUT


@dataclass(frozen=True)
class WorkflowStatus:
    """Observable outcome of the submission workflow.

    Exactly one of ``error_detail``/``result_link`` is set for the terminal
    phases; idle and submitting carry neither. Build instances through the
    classmethods so the pairing cannot drift.
    """

    phase: Phase = Phase.IDLE
    error_detail: str | None = None
    error_code: ErrorCode | None = None
    result_link: str | None = None

    @classmethod
    def idle(cls) -> WorkflowStatus:
        return cls(phase=Phase.IDLE)

    @classmethod
    def submitting(cls) -> WorkflowStatus:
        return cls(phase=Phase.SUBMITTING)

    @classmethod
    def succeeded(cls, *, result_link: str) -> WorkflowStatus:
        return cls(phase=Phase.SUCCEEDED, result_link=result_link)

    @classmethod
    def failed(cls, *, error_code: ErrorCode, error_detail: str) -> WorkflowStatus:
        return cls(phase=Phase.FAILED, error_code=error_code, error_detail=error_detail)


@dataclass(frozen=True)
class FileAccepted:
    file: MediaFile


@dataclass(frozen=True)
class FileRejected:
    slot: FileSlot
    size: int
    max_bytes: int
    reason: str


FileValidationResult = FileAccepted | FileRejected


@dataclass(frozen=True)
class FormSnapshot:
    # Complete output contract towards the presentation layer.
    phase: Phase
    error_text: str | None
    result_link: str | None
    video_id: str
    orientation: Orientation
    subtitles: SubtitleMode
    audio_filename: str | None
    background_music_filename: str | None
    can_submit: bool

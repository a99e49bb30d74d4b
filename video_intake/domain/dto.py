from __future__ import annotations

from dataclasses import dataclass

from video_intake.domain.models import MediaFile


@dataclass(frozen=True)
class SubmissionPayload:
    fields: dict[str, str]
    files: dict[str, MediaFile]

    @property
    def video_id(self) -> str:
        return self.fields["video_id"]


@dataclass(frozen=True)
class ServiceResponse:
    status_code: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class SuccessNotification:
    video_id: str
    result_link: str

    @property
    def message(self) -> str:
        return f"Your video is ready! Download it here: {self.result_link}"

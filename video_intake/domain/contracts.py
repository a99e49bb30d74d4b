from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Protocol, runtime_checkable

from video_intake.domain.dto import ServiceResponse, SubmissionPayload, SuccessNotification

Clock = Callable[[], datetime]


@runtime_checkable
class VideoServiceClient(Protocol):
    """Transport boundary to the remote video-generation service.

    Implementations send one multipart POST per call and raise
    ``TransportError`` when the request never completes. Non-success
    statuses are returned, not raised.
    """

    async def submit(self, payload: SubmissionPayload) -> ServiceResponse: ...


@runtime_checkable
class Notifier(Protocol):
    """User-facing one-shot notification sink (modal, toast or log line)."""

    def notify(self, notification: SuccessNotification) -> None: ...

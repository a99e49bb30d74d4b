from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field

from video_intake.domain.dto import ServiceResponse, SubmissionPayload, SuccessNotification
from video_intake.domain.errors import TransportError


@dataclass
class StubVideoServiceClient:
    """Non-network client answering every call with a scripted response."""

    status_code: int = 200
    body: object = field(default_factory=lambda: {"video": "https://videos.local/stub.mp4"})
    raw_body: bytes | None = None
    fail_with: str | None = None
    release: asyncio.Event | None = None
    calls: list[SubmissionPayload] = field(default_factory=list)

    async def submit(self, payload: SubmissionPayload) -> ServiceResponse:
        self.calls.append(payload)
        if self.release is not None:
            await self.release.wait()
        if self.fail_with is not None:
            raise TransportError(self.fail_with)
        body = self.raw_body if self.raw_body is not None else json.dumps(self.body).encode("utf-8")
        return ServiceResponse(status_code=self.status_code, body=body)


@dataclass
class RecordingNotifier:
    notifications: list[SuccessNotification] = field(default_factory=list)

    def notify(self, notification: SuccessNotification) -> None:
        self.notifications.append(notification)

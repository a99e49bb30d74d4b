from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from video_intake.domain.dto import ServiceResponse, SubmissionPayload
from video_intake.domain.errors import TransportError

logger = logging.getLogger("video_intake.client")


@dataclass
class HttpVideoServiceClient:
    """Multipart POST client for the video-generation webhook.

    No timeout is applied: a generation request runs until the remote side
    answers or the connection drops.
    """

    service_url: str
    transport: httpx.AsyncBaseTransport | None = None

    async def submit(self, payload: SubmissionPayload) -> ServiceResponse:
        files = {
            name: (media.filename, media.payload, media.content_type)
            for name, media in payload.files.items()
        }
        try:
            async with httpx.AsyncClient(timeout=None, transport=self.transport) as client:
                resp = await client.post(self.service_url, data=payload.fields, files=files)
        except httpx.HTTPError as exc:
            raise TransportError(f"request to {self.service_url} failed: {exc}") from exc

        logger.info(
            "video service responded",
            extra={"video_id": payload.video_id, "status_code": resp.status_code},
        )
        return ServiceResponse(status_code=resp.status_code, body=resp.content)

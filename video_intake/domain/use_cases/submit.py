from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from video_intake.domain.contracts import Clock, Notifier, VideoServiceClient
from video_intake.domain.dto import SuccessNotification
from video_intake.domain.error_taxonomy import ErrorCode, classify_error, user_message_for
from video_intake.domain.errors import ResponseFormatError, TransportError
from video_intake.domain.form_state import FormStateStore
from video_intake.domain.ids import build_identifier, new_attempt_id
from video_intake.domain.models import Phase, WorkflowStatus
from video_intake.domain.payload import build_submission_payload
from video_intake.domain.responses import resolve_video_url

COMPONENT_ID = "domain.submit"

logger = logging.getLogger("video_intake.submission")


@dataclass
class SubmissionController:
    """Runs one submission attempt per submit-clicked event.

    The phase is set to submitting before the first ``await`` so a second
    trigger scheduled on the same event loop sees it and is ignored.
    """

    store: FormStateStore
    client: VideoServiceClient
    notifier: Notifier
    clock: Clock = field(default=datetime.now)

    async def submit(self) -> WorkflowStatus | None:
        if not self.store.can_submit():
            logger.info(
                "submit ignored",
                extra={"phase": self.store.phase.value},
            )
            return None

        log_extra = {"attempt_id": new_attempt_id()}
        self.store.validation_message = None
        self.store.transition(WorkflowStatus.submitting())

        try:
            await self._attempt(log_extra)
        except Exception:
            logger.exception("submission crashed", extra=log_extra)
        finally:
            # Cancellation skips the handler above; the phase must never stay in flight.
            if self.store.phase == Phase.SUBMITTING:
                self._fail("internal_error", log_extra)

        status = self.store.status
        if status.phase == Phase.SUCCEEDED and status.result_link is not None:
            self.notifier.notify(SuccessNotification(video_id=log_extra["video_id"], result_link=status.result_link))
        return status

    async def _attempt(self, log_extra: dict[str, str]) -> WorkflowStatus:
        video_id = build_identifier(self.store.submission.video_id, self.clock())
        payload = build_submission_payload(self.store.submission, video_id=video_id)
        log_extra["video_id"] = video_id
        logger.info("submission dispatched", extra={**log_extra, "phase": "submitting"})

        try:
            response = await self.client.submit(payload)
        except TransportError as exc:
            logger.error("video service unreachable: %s", exc, extra=log_extra)
            return self._fail("transport_failed", log_extra)

        if not response.ok:
            logger.error(
                "video service rejected submission",
                extra={**log_extra, "status_code": response.status_code},
            )
            return self._fail("http_status_failed", log_extra)

        try:
            result_link = resolve_video_url(response.body)
        except ResponseFormatError as exc:
            logger.error("invalid response format: %s", exc, extra={**log_extra, "status_code": response.status_code})
            return self._fail("response_format_invalid", log_extra)

        status = WorkflowStatus.succeeded(result_link=result_link)
        self.store.transition(status)
        logger.info("submission succeeded", extra={**log_extra, "phase": status.phase.value})
        return status

    def _fail(self, code: ErrorCode, log_extra: dict[str, str]) -> WorkflowStatus:
        status = WorkflowStatus.failed(error_code=code, error_detail=user_message_for(code))
        self.store.transition(status)
        logger.warning(
            "submission failed",
            extra={
                **log_extra,
                "phase": status.phase.value,
                "error_code": code,
                "retry_classification": classify_error(code),
            },
        )
        return status

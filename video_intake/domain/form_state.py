from __future__ import annotations

from dataclasses import dataclass, field

from video_intake.domain.errors import DomainInvariantError
from video_intake.domain.lifecycle import ensure_transition
from video_intake.domain.models import (
    FileSlot,
    FormSnapshot,
    MediaFile,
    Orientation,
    Phase,
    SubmissionInput,
    SubtitleMode,
    WorkflowStatus,
)


@dataclass
class FormStateStore:
    """Single owner of one form session's inputs and workflow status."""

    submission: SubmissionInput = field(default_factory=SubmissionInput)
    status: WorkflowStatus = field(default_factory=WorkflowStatus.idle)
    validation_message: str | None = None
    transitions: list[tuple[Phase, Phase]] = field(default_factory=list)

    @property
    def phase(self) -> Phase:
        return self.status.phase

    def can_submit(self) -> bool:
        return self.submission.audio_file is not None and self.status.phase != Phase.SUBMITTING

    def edit_fields(
        self,
        *,
        video_id: str | None = None,
        orientation: Orientation | None = None,
        subtitles: SubtitleMode | None = None,
    ) -> None:
        if video_id is not None:
            self.submission.video_id = video_id
        if orientation is not None:
            self.submission.orientation = orientation
        if subtitles is not None:
            self.submission.subtitles = subtitles

    def set_file(self, slot: FileSlot, file: MediaFile | None) -> None:
        setattr(self.submission, slot, file)

    def get_file(self, slot: FileSlot) -> MediaFile | None:
        return getattr(self.submission, slot)

    def transition(self, status: WorkflowStatus) -> None:
        ensure_transition(from_phase=self.status.phase, to_phase=status.phase)
        self.transitions.append((self.status.phase, status.phase))
        self.status = status

    def reset(self) -> None:
        if self.status.phase == Phase.SUBMITTING:
            raise DomainInvariantError("cannot reset the form while a submission is in flight")
        self.submission = SubmissionInput()
        self.status = WorkflowStatus.idle()
        self.validation_message = None
        self.transitions.clear()

    def snapshot(self) -> FormSnapshot:
        audio = self.submission.audio_file
        music = self.submission.background_music
        error_text = self.validation_message or self.status.error_detail
        if self.status.phase == Phase.SUBMITTING:
            # A rejection during an in-flight attempt surfaces once the attempt resolves.
            error_text = None
        return FormSnapshot(
            phase=self.status.phase,
            error_text=error_text,
            result_link=self.status.result_link,
            video_id=self.submission.video_id,
            orientation=self.submission.orientation,
            subtitles=self.submission.subtitles,
            audio_filename=audio.filename if audio is not None else None,
            background_music_filename=music.filename if music is not None else None,
            can_submit=self.can_submit(),
        )

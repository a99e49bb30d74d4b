from __future__ import annotations

from video_intake.domain.dto import SubmissionPayload
from video_intake.domain.models import MediaFile, Orientation, SubmissionInput, SubtitleMode

ORIENTATION_TOKENS: dict[Orientation, str] = {
    Orientation.LANDSCAPE: "horizontal",
    Orientation.PORTRAIT: "vertical",
}

SUBTITLE_TOKENS: dict[SubtitleMode, str] = {
    SubtitleMode.WITH: "yes",
    SubtitleMode.WITHOUT: "no",
}


def build_submission_payload(submission: SubmissionInput, *, video_id: str) -> SubmissionPayload:
    """Map form input onto the multipart wire fields.

    ``background_music`` is left out of ``files`` entirely when the slot is
    empty; the remote service treats a missing part as "no music".
    """
    if submission.audio_file is None:
        raise ValueError("audio file is required to build a submission payload")

    files: dict[str, MediaFile] = {"audio_file": submission.audio_file}
    if submission.background_music is not None:
        files["background_music"] = submission.background_music

    return SubmissionPayload(
        fields={
            "video_id": video_id,
            "orientation": ORIENTATION_TOKENS[submission.orientation],
            "subtitles": SUBTITLE_TOKENS[submission.subtitles],
        },
        files=files,
    )

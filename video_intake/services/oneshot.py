from __future__ import annotations

import asyncio
import logging
import mimetypes
import sys
from pathlib import Path

from video_intake.domain.errors import FileTooLargeError
from video_intake.domain.models import FileSlot, MediaFile, Orientation, Phase, SubtitleMode
from video_intake.domain.use_cases.select_file import select_file
from video_intake.domain.validation import ensure_accepted
from video_intake.services.bootstrap import RuntimeContainer

COMPONENT_ID = "cli.submit"

ORIENTATION_CHOICES: dict[str, Orientation] = {
    "landscape": Orientation.LANDSCAPE,
    "portrait": Orientation.PORTRAIT,
}

SUBTITLE_CHOICES: dict[str, SubtitleMode] = {
    "with": SubtitleMode.WITH,
    "without": SubtitleMode.WITHOUT,
}

logger = logging.getLogger("runtime")


def read_media_file(path: Path) -> MediaFile:
    content_type, _ = mimetypes.guess_type(path.name)
    return MediaFile(
        filename=path.name,
        payload=path.read_bytes(),
        content_type=content_type or "application/octet-stream",
    )


def run_cli_submission(
    container: RuntimeContainer,
    *,
    video_id: str,
    audio_path: Path,
    background_music_path: Path | None,
    orientation: str,
    subtitles: str,
) -> int:
    store = container.store
    store.edit_fields(
        video_id=video_id,
        orientation=ORIENTATION_CHOICES[orientation],
        subtitles=SUBTITLE_CHOICES[subtitles],
    )

    slots: list[tuple[FileSlot, Path]] = [("audio_file", audio_path)]
    if background_music_path is not None:
        slots.append(("background_music", background_music_path))

    try:
        for slot, path in slots:
            result = select_file(store, slot=slot, file=read_media_file(path))
            if result is not None:
                ensure_accepted(result)
    except OSError as exc:
        sys.stderr.write(f"ERROR: cannot read input file: {exc}\n")
        return 2
    except FileTooLargeError as exc:
        sys.stderr.write(f"ERROR: {exc}\n")
        return 2

    status = asyncio.run(container.controller.submit())
    if status is None or status.phase != Phase.SUCCEEDED:
        detail = status.error_detail if status is not None else "submission was not dispatched"
        sys.stderr.write(f"ERROR: {detail}\n")
        return 1
    return 0

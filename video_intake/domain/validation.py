from __future__ import annotations

from video_intake.domain.errors import FileTooLargeError
from video_intake.domain.models import (
    SLOT_LABELS,
    FileAccepted,
    FileRejected,
    FileSlot,
    FileValidationResult,
    MediaFile,
)

COMPONENT_ID = "domain.validate_file"

MAX_UPLOAD_BYTES = 5 * 1024 * 1024


def validate_file(file: MediaFile, max_bytes: int = MAX_UPLOAD_BYTES, *, slot: FileSlot) -> FileValidationResult:
    """Classify a candidate file for one upload slot; the limit is inclusive."""
    if file.size <= max_bytes:
        return FileAccepted(file=file)
    return FileRejected(
        slot=slot,
        size=file.size,
        max_bytes=max_bytes,
        reason=f"{SLOT_LABELS[slot]} must be under {_format_limit(max_bytes)}.",
    )


def ensure_accepted(result: FileValidationResult) -> MediaFile:
    if isinstance(result, FileRejected):
        raise FileTooLargeError(
            slot=result.slot,
            size=result.size,
            max_bytes=result.max_bytes,
            reason=result.reason,
        )
    return result.file


def _format_limit(max_bytes: int) -> str:
    mebibytes, remainder = divmod(max_bytes, 1024 * 1024)
    if remainder == 0:
        return f"{mebibytes}MB"
    return f"{max_bytes} bytes"

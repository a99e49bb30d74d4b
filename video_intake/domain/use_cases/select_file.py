from __future__ import annotations

import logging

from video_intake.domain.form_state import FormStateStore
from video_intake.domain.models import FileRejected, FileSlot, FileValidationResult, MediaFile
from video_intake.domain.validation import MAX_UPLOAD_BYTES, validate_file

COMPONENT_ID = "domain.select_file"

logger = logging.getLogger("video_intake.submission")


def select_file(store: FormStateStore, *, slot: FileSlot, file: MediaFile | None) -> FileValidationResult | None:
    """Apply a file-selected event to the store.

    A cleared selection empties the slot without validation and returns
    ``None``. A rejected file leaves the slot unset and records the
    user-visible reason; the workflow phase is never touched.
    """
    if file is None:
        store.set_file(slot, None)
        return None

    result = validate_file(file, MAX_UPLOAD_BYTES, slot=slot)
    if isinstance(result, FileRejected):
        store.set_file(slot, None)
        store.validation_message = result.reason
        logger.info(
            "file rejected",
            extra={"slot": slot, "error_code": "file_too_large", "size": result.size},
        )
        return result

    store.set_file(slot, result.file)
    store.validation_message = None
    return result

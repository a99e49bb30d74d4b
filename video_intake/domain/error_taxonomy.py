from __future__ import annotations

from collections.abc import Mapping
from typing import Literal, cast

# Canonical error vocabulary for the intake workflow.
ErrorCode = Literal[
    "file_too_large",
    "transport_failed",
    "http_status_failed",
    "response_format_invalid",
    "internal_error",
]

# Who has to act before a resubmission can succeed.
RetryClassification = Literal["user_retriable", "user_correctable"]

CANONICAL_ERROR_CODES: tuple[ErrorCode, ...] = (
    "file_too_large",
    "transport_failed",
    "http_status_failed",
    "response_format_invalid",
    "internal_error",
)

GENERIC_FAILURE_MESSAGE = "Error creating video. Please try again later."

# Workflow failures collapse to one message; diagnostics keep the code.
# File rejections carry their own slot-specific reason from the validator.
USER_MESSAGES: Mapping[ErrorCode, str] = {
    "transport_failed": GENERIC_FAILURE_MESSAGE,
    "http_status_failed": GENERIC_FAILURE_MESSAGE,
    "response_format_invalid": GENERIC_FAILURE_MESSAGE,
    "internal_error": GENERIC_FAILURE_MESSAGE,
}

USER_CORRECTABLE_ERROR_CODES: frozenset[ErrorCode] = frozenset({"file_too_large"})


def is_canonical_error_code(code: str) -> bool:
    return code in CANONICAL_ERROR_CODES


def classify_error(code: ErrorCode) -> RetryClassification:
    if code in USER_CORRECTABLE_ERROR_CODES:
        return "user_correctable"
    return "user_retriable"


def resolve_error_code(code: str) -> ErrorCode:
    if is_canonical_error_code(code):
        return cast(ErrorCode, code)
    return "internal_error"


def user_message_for(code: str) -> str:
    return USER_MESSAGES.get(resolve_error_code(code), GENERIC_FAILURE_MESSAGE)

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_VIDEO_SERVICE_URL = "http://localhost:5678/webhook-test/1a9744b5-0299-4dce-8632-4d832632eb97"


@dataclass(frozen=True)
class IntakeSettings:
    video_service_url: str = DEFAULT_VIDEO_SERVICE_URL
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


def intake_settings_from_env() -> IntakeSettings:
    return IntakeSettings(
        video_service_url=os.getenv("VIDEO_SERVICE_URL") or DEFAULT_VIDEO_SERVICE_URL,
        log_level=_env_log_level("APP_LOG_LEVEL", "INFO"),
        host=os.getenv("APP_HOST") or "0.0.0.0",
        port=_env_int("APP_PORT", 8000),
    )


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default

    try:
        parsed = int(value)
    except ValueError:
        return default

    return parsed if parsed > 0 else default


def _env_log_level(name: str, default: str) -> str:
    value = (os.getenv(name) or "").strip().upper()
    if value in logging.getLevelNamesMapping():
        return value
    return default

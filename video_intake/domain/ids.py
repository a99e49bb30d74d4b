from __future__ import annotations

import importlib
from datetime import datetime

ulid_module = importlib.import_module("ulid")


def build_identifier(base_id: str, now: datetime) -> str:
    # datetime.month is already 1-based.
    return (
        f"{base_id}_{now.hour:02d}-{now.minute:02d}-{now.second:02d}"
        f"_{now.year:04d}-{now.month:02d}-{now.day:02d}"
    )


def new_attempt_id() -> str:
    return f"att_{ulid_module.new().str}"

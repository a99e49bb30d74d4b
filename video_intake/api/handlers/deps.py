from __future__ import annotations

from dataclasses import dataclass

from video_intake.domain.form_state import FormStateStore
from video_intake.domain.use_cases.submit import SubmissionController


@dataclass(frozen=True)
class ApiDeps:
    store: FormStateStore
    controller: SubmissionController

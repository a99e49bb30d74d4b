from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from video_intake.api.handlers.deps import ApiDeps
from video_intake.clients.notifiers import ConsoleNotifier, LoggingNotifier
from video_intake.clients.video_service import HttpVideoServiceClient
from video_intake.domain.contracts import Clock, Notifier, VideoServiceClient
from video_intake.domain.form_state import FormStateStore
from video_intake.domain.use_cases.submit import SubmissionController
from video_intake.roles import RuntimeRole
from video_intake.services.settings import IntakeSettings, intake_settings_from_env


@dataclass
class RuntimeContainer:
    settings: IntakeSettings
    client: VideoServiceClient
    notifier: Notifier
    store: FormStateStore
    controller: SubmissionController
    api_deps: ApiDeps


def build_runtime_container(
    role: RuntimeRole,
    *,
    settings: IntakeSettings | None = None,
    client: VideoServiceClient | None = None,
    notifier: Notifier | None = None,
    clock: Clock | None = None,
) -> RuntimeContainer:
    settings = settings or intake_settings_from_env()
    if client is None:
        client = HttpVideoServiceClient(service_url=settings.video_service_url)
    if notifier is None:
        notifier = ConsoleNotifier() if role.name == "submit" else LoggingNotifier()

    store = FormStateStore()
    controller = SubmissionController(
        store=store,
        client=client,
        notifier=notifier,
        clock=clock or datetime.now,
    )

    return RuntimeContainer(
        settings=settings,
        client=client,
        notifier=notifier,
        store=store,
        controller=controller,
        api_deps=ApiDeps(store=store, controller=controller),
    )

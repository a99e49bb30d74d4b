from __future__ import annotations

import argparse
import logging
import sys
import uuid
from dataclasses import replace
from pathlib import Path

import uvicorn

from video_intake.api.http_app import build_app
from video_intake.logging_setup import configure_logging
from video_intake.roles import SUPPORTED_ROLES, validate_role
from video_intake.services.bootstrap import build_runtime_container
from video_intake.services.oneshot import ORIENTATION_CHOICES, SUBTITLE_CHOICES, run_cli_submission
from video_intake.services.settings import intake_settings_from_env


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Video intake form runtime")
    parser.add_argument("--role", required=True, help="Runtime role")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--service-url", default=None, help="Video generation endpoint")
    parser.add_argument("--video-id", default="", help="Base identifier (submit role)")
    parser.add_argument("--audio", type=Path, default=None, help="Audio file (submit role)")
    parser.add_argument("--background-music", type=Path, default=None)
    parser.add_argument("--orientation", choices=sorted(ORIENTATION_CHOICES), default="landscape")
    parser.add_argument("--subtitles", choices=sorted(SUBTITLE_CHOICES), default="without")
    parser.add_argument(
        "--dry-run-startup",
        action="store_true",
        help="Validate startup and exit",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        role = validate_role(args.role)
    except ValueError as exc:
        supported = ", ".join(SUPPORTED_ROLES)
        sys.stderr.write(f"ERROR: {exc}\n")
        sys.stderr.write(f"Try one of: {supported}\n")
        return 2

    settings = intake_settings_from_env()
    if args.service_url:
        settings = replace(settings, video_service_url=args.service_url)

    configure_logging(settings.log_level)
    run_id = str(uuid.uuid4())
    logger = logging.getLogger("runtime")

    logger.info(
        "runtime initialized",
        extra={"role": role.name, "service": role.name, "run_id": run_id},
    )

    if args.dry_run_startup:
        logger.info(
            "dry-run startup complete",
            extra={"role": role.name, "service": role.name, "run_id": run_id},
        )
        return 0

    container = build_runtime_container(role, settings=settings)

    if role.name == "submit":
        if args.audio is None:
            sys.stderr.write("ERROR: --audio is required for the submit role\n")
            return 2
        return run_cli_submission(
            container,
            video_id=args.video_id,
            audio_path=args.audio,
            background_music_path=args.background_music,
            orientation=args.orientation,
            subtitles=args.subtitles,
        )

    app = build_app(role=role.name, run_id=run_id, api_deps=container.api_deps)
    host = args.host or settings.host
    port = args.port if args.port is not None else settings.port
    uvicorn.run(app, host=host, port=port, log_level="warning")
    return 0


if __name__ == "__main__":
    raise SystemExit(run())

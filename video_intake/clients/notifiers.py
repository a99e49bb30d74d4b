from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

from video_intake.domain.dto import SuccessNotification

logger = logging.getLogger("video_intake.submission")


@dataclass
class LoggingNotifier:
    """Surfaces the success notification as a log line (API role)."""

    def notify(self, notification: SuccessNotification) -> None:
        logger.info(notification.message, extra={"video_id": notification.video_id})


@dataclass
class ConsoleNotifier:
    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def notify(self, notification: SuccessNotification) -> None:
        self.stream.write(f"{notification.message}\n")
        self.stream.flush()

"""Desktop notification sent when the countdown ends."""

from __future__ import annotations

import logging
import shutil
import subprocess
from datetime import timedelta

from countdown.core.config import NotificationSettings
from countdown.core.exceptions import NotifyError
from countdown.core.timeutil import format_duration

logger = logging.getLogger(__name__)


def build_notify_command(exe: str, dur: timedelta, settings: NotificationSettings) -> list[str]:
    """Build the ``notify-send`` style command line."""
    return [
        exe,
        f"--urgency={settings.urgency}",
        f"--app-name={settings.app_name}",
        settings.title,
        f"Done counting down from {format_duration(dur)}",
    ]


def send_notification(dur: timedelta, settings: NotificationSettings | None = None) -> None:
    """Send a desktop notification that a countdown of *dur* has ended.

    Raises:
        NotifyError: If the notification command is missing or fails.
    """
    settings = settings or NotificationSettings()

    exe = shutil.which(settings.command)
    if exe is None:
        raise NotifyError(f"{settings.command}: executable file not found in $PATH")

    cmd = build_notify_command(exe, dur, settings)
    logger.debug(f"Running {' '.join(cmd)}")
    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as e:
        detail = e.stderr.strip() if e.stderr else f"exit status {e.returncode}"
        raise NotifyError(f"run {settings.command}: {detail}") from e
    except OSError as e:
        raise NotifyError(f"run {settings.command}: {e}") from e

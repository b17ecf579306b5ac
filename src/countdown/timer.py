"""Countdown loop: report the remaining time once a second until the deadline."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Callable

from countdown.core.exceptions import NotifyError
from countdown.core.timeutil import now, round_delta

if TYPE_CHECKING:
    from countdown.cli.render import Renderer

logger = logging.getLogger(__name__)

TICK = 1.0  # seconds between "Remaining" updates


def run_countdown(
    end: datetime,
    renderer: "Renderer",
    notifier: Callable[[timedelta], None] | None = None,
    *,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> timedelta:
    """Wait until *end*, rendering the remaining time every second.

    Args:
        end: Time to count down to.
        renderer: Receives the waiting, remaining and done updates.
        notifier: Called with the total duration once the deadline passes.
            A :class:`NotifyError` is rendered as an error, not raised.
        clock: Monotonic clock in seconds.
        sleep: Blocks for the given number of seconds.

    Returns:
        The total duration that was waited for, rounded to milliseconds.
    """
    dur = round_delta(end - now(), timedelta(milliseconds=1))
    started = clock()
    deadline = started + dur.total_seconds()
    next_tick = started + TICK

    renderer.waiting(end)
    renderer.remaining(round_delta(dur, timedelta(seconds=1)))

    while (current := clock()) < deadline:
        sleep(max(0.0, min(next_tick, deadline) - current))
        current = clock()
        if current >= deadline:
            break
        if current >= next_tick:
            elapsed = timedelta(seconds=current - started)
            renderer.remaining(round_delta(dur - elapsed, timedelta(seconds=1)))
            next_tick += TICK

    renderer.done(dur)
    logger.debug(f"Countdown of {dur} finished")

    if notifier is not None:
        try:
            notifier(dur)
        except NotifyError as e:
            renderer.error(e)
    return dur

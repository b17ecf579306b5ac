"""Terminal output for the countdown."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import IO

from rich.console import Console
from rich.live import Live
from rich.text import Text

from countdown.core.timeutil import format_duration, format_stamp, round_delta

PREFIX = "countdown:"

# Styles
CMD_NAME = "bright_black"
DURATION = "bold bright_magenta"
DONE = "green"
ERR_PREFIX = "bold bright_red"
ERR = "red"


class Renderer:
    """Print countdown progress, plain or colored.

    In color mode the "Remaining" line is redrawn in place; without color
    every update is printed on its own line.
    """

    def __init__(
        self,
        color: str = "auto",
        file: IO[str] | None = None,
        err_file: IO[str] | None = None,
    ) -> None:
        force_terminal = {"always": True, "never": False}.get(color)
        self.console = Console(
            file=file,
            force_terminal=force_terminal,
            no_color=color == "never",
            highlight=False,
            soft_wrap=True,
        )
        self.err_console = Console(
            file=err_file,
            stderr=err_file is None,
            force_terminal=force_terminal,
            no_color=color == "never",
            highlight=False,
            soft_wrap=True,
        )
        self._live: Live | None = None

    @property
    def color(self) -> bool:
        return self.console.color_system is not None and not self.console.no_color

    def _line(self, label: str, value: str, style: str = DURATION) -> Text:
        return Text.assemble((PREFIX, CMD_NAME), " ", label, (value, style))

    def waiting(self, end: datetime) -> None:
        """Show the time being waited for."""
        self.console.print(self._line("Waiting for: ", format_stamp(end)))

    def remaining(self, left: timedelta) -> None:
        line = self._line("Remaining:   ", format_duration(left))
        if not self.color:
            self.console.print(line)
            return
        if self._live is None:
            self._live = Live(
                console=self.console,
                auto_refresh=False,
                transient=True,
                redirect_stdout=False,
                redirect_stderr=False,
            )
            self._live.start()
        self._live.update(line, refresh=True)

    def done(self, dur: timedelta) -> None:
        self.close()
        if self.color:
            self.console.print(
                Text.assemble(
                    (PREFIX, CMD_NAME),
                    " ",
                    ("Done waiting for:", DONE),
                    " ",
                    (format_duration(round_delta(dur, timedelta(seconds=1))), DURATION),
                )
            )
        else:
            self.console.print(f"{PREFIX} Done waiting for {format_duration(dur)}", markup=False)

    def error(self, err: Exception | str) -> None:
        self.close()
        self.err_console.print(
            Text.assemble((PREFIX, CMD_NAME), " ", ("err:", ERR_PREFIX), " ", (str(err), ERR))
        )

    def close(self) -> None:
        """Stop redrawing the "Remaining" line."""
        if self._live is not None:
            self._live.stop()
            self._live = None

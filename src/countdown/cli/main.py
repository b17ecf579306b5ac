"""Main CLI entry point using rich-click."""

import logging
import sys
from functools import partial
from pathlib import Path
from typing import Optional

import rich_click as click

from countdown.cli.render import Renderer
from countdown.core.config import COLOR_MODES, get_config, load_config
from countdown.core.exceptions import ConfigError, CountdownError

# Configure rich-click
click.rich_click.SHOW_ARGUMENTS = True

EXAMPLES = """\b
Examples:
  countdown 10s            10 seconds
  countdown 1h20m30s       1 hour, 20 minutes, and 30 seconds
  countdown 12:00          the next 12 o'clock
  countdown 3pm            today at 15:00, or tomorrow if already passed
  countdown "tomorrow 9am"
  countdown "2022-12-31T18:00:00+01:00"
"""


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=EXAMPLES,
)
@click.argument("when", required=False)
@click.option(
    "--color",
    type=click.Choice(COLOR_MODES, case_sensitive=False),
    default=None,
    help='Colored output, either "always", "never", or "auto"',
)
@click.option("--no-notify", is_flag=True, help="Disables the desktop notification")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(package_name="countdown")
@click.pass_context
def cli(
    ctx: click.Context,
    when: Optional[str],
    color: Optional[str],
    no_notify: bool,
    config: Optional[Path],
    verbose: bool,
) -> None:
    """Count down to a point in time.

    WHEN is a duration, a time of day, a date, or "now".
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if when is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    try:
        settings = load_config(config) if config else get_config()
    except ConfigError as e:
        Renderer(color or "auto").error(e)
        ctx.exit(1)

    renderer = Renderer((color or settings.color).lower())

    from countdown.core.timeutil import now
    from countdown.fuzzytime import parse_future

    try:
        end = parse_future(when.strip(), now())
    except CountdownError as e:
        renderer.error(f"parse time or duration: {e}")
        ctx.exit(1)

    notifier = None
    if settings.notify and not no_notify:
        from countdown.notify import send_notification

        notifier = partial(send_notification, settings=settings.notification)

    from countdown.timer import run_countdown

    try:
        run_countdown(end, renderer, notifier)
    except KeyboardInterrupt:
        renderer.close()
        ctx.exit(130)


def main() -> None:
    """Entry point for console script."""
    cli()


if __name__ == "__main__":
    main()

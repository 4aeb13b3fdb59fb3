"""Root CLI command for isocalc with output flags and error reporting."""

from __future__ import annotations

import click

from isocalc import __version__
from isocalc.commands import evaluate
from isocalc.config.logging import configure_logging
from isocalc.config.settings import IsocalcSettings
from isocalc.errors import IsocalcError
from isocalc.format.notation import Notation


class IsocalcCommandError(click.ClickException):
    """Report an isocalc error as ``Error: <message>`` with exit status 1."""

    exit_code = 1


@click.command(
    context_settings={
        "allow_interspersed_args": False,
        "help_option_names": ["-h", "--help"],
    }
)
@click.version_option(version=__version__, prog_name="isocalc")
@click.option("-c", "--calendar", is_flag=True, help="Output a calendar date (YYYY-MM-DD).")
@click.option("-w", "--week", is_flag=True, help="Output a week date (YYYY-Www-D).")
@click.option("-o", "--ordinal", is_flag=True, help="Output an ordinal date (YYYY-DDD).")
@click.option("-b", "--basic", is_flag=True, help="Output without dashes.")
@click.option("-e", "--extended", is_flag=True, help="Output with dashes.")
@click.option("-r", "--reverse", is_flag=True, help="Negate the result of DATE : DATE.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.argument("args", nargs=-1)
def cli(
    calendar: bool,
    week: bool,
    ordinal: bool,
    basic: bool,
    extended: bool,
    reverse: bool,
    verbose: bool,
    log_json: bool,
    args: tuple[str, ...],
) -> None:
    """ISO 8601 date calculator.

    \b
    Command shapes:
      isocalc                          today
      isocalc DATE                     convert DATE
      isocalc [DATE] (+|-) N           add or subtract N days
      isocalc [DATE] (+|-) DURATION    add or subtract [nP][nY][nM][nW][nD]
      isocalc [DATE] : DATE            days from the first DATE to the second

    DATE is YYYY-MM-DD, YYYY-Www-D, YYYY-DDD, an undashed form of these,
    or "today". Options must come before the first argument.
    """
    if sum((calendar, week, ordinal)) > 1:
        raise click.UsageError("choose at most one of --calendar, --week, --ordinal")
    if basic and extended:
        raise click.UsageError("choose at most one of --basic, --extended")

    notation = None
    if calendar:
        notation = Notation.CALENDAR
    elif week:
        notation = Notation.WEEK
    elif ordinal:
        notation = Notation.ORDINAL

    dashed = None
    if basic:
        dashed = False
    elif extended:
        dashed = True

    settings = IsocalcSettings.from_cli(
        notation=notation,
        dashed=dashed,
        reverse=reverse or None,
        verbose=verbose or None,
        log_json=log_json or None,
    )
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    try:
        click.echo(evaluate(args, settings))
    except IsocalcError as exc:
        raise IsocalcCommandError(str(exc)) from exc

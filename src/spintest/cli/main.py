"""CLI entry point for spintest."""
from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

import click
from colorama import just_fix_windows_console

from spintest import __version__
from spintest.plan import build_session, load_plan
from spintest.reporting import JsonReporter


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"spintest {__version__}")
    raise click.exceptions.Exit()


def _emit(text: str) -> None:
    click.echo(text, nl=False)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the spintest version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Top level CLI group for spintest."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    ctx.obj = CliState(verbose=verbose)


@cli.command()
@click.option(
    "--plan",
    "plan_path",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="YAML plan file listing the suites to run.",
)
@click.option(
    "--report",
    "report_format",
    type=click.Choice(["terminal", "json"]),
    default="terminal",
    show_default=True,
    help="Report format (terminal by default).",
)
@click.option("--report-path", type=str, help="When --report json, write to this path.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.pass_obj
def run(
    state: CliState,
    plan_path: str,
    report_format: str,
    report_path: Optional[str],
    no_color: bool,
) -> None:
    """Execute every suite in the plan and print the report."""

    just_fix_windows_console()
    try:
        plan = load_plan(plan_path)
        session = build_session(plan, use_color=False if no_color else None)
    except Exception as exc:  # pragma: no cover - CLI error translation
        raise click.ClickException(str(exc)) from exc
    if report_format == "json" and not report_path:
        # keep stdout parseable: the live report goes to stderr
        outcome = asyncio.run(session.run(lambda text: click.echo(text, nl=False, err=True)))
    else:
        outcome = asyncio.run(session.run(_emit))
    if report_format == "json":
        reporter = JsonReporter(path=report_path)
        try:
            text = reporter.write(outcome)
        except Exception as exc:  # pragma: no cover - CLI error translation
            raise click.ClickException(str(exc)) from exc
        if report_path:
            click.echo(f"JSON report written to {report_path}")
        else:
            click.echo(text)
    raise click.exceptions.Exit(0 if outcome.all_passed else 1)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="spintest", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

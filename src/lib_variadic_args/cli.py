"""CLI adapter for ``lib_variadic_args`` built on ``lib_cli_exit_tools``.

Purpose
-------
Run the variable-length argument demonstration from a shell. Invoked without a
subcommand the CLI runs every section, so ``python -m lib_variadic_args``
prints the whole demonstration and exits with code 0.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command wiring traceback handling and log level.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_run` – runs all or selected sections.
* :func:`cli_sections` – lists the section names and titles.
* :func:`cli_signatures` – lists the registered ``varargs_test3`` overloads.
* :func:`cli_ambiguity` – builds an ambiguous overload family so the
  registration failure surfaces through the shared exit handling.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It calls the composition root
(:func:`lib_variadic_args.core.run_demo`) and lets ``lib_cli_exit_tools``
decide exit codes and traceback rendering.
"""

from __future__ import annotations

import sys
from importlib import metadata
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import SECTIONS, run_demo, section_names
from .examples.varargs import varargs_test3
from .observability import configure_logging
from .testing import build_ambiguous_family

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

LOG_LEVEL_CHOICES: Final[tuple[str, ...]] = ("debug", "info", "warning", "error")
LOG_LEVEL_ENVVAR: Final[str] = "LIB_VARIADIC_ARGS_LOG_LEVEL"


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` for source checkouts."""

    try:
        return metadata.version("lib_variadic_args")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Variable-length argument list demonstration",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_variadic_args",
    message="lib_variadic_args version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVEL_CHOICES, case_sensitive=False),
    envvar=LOG_LEVEL_ENVVAR,
    default=None,
    help=f"Write diagnostics to stderr at this level (env: {LOG_LEVEL_ENVVAR})",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, log_level: Optional[str]) -> None:
    """Root command configuring traceback handling for all subcommands.

    What
        Stores the traceback preference, mirrors it into
        :mod:`lib_cli_exit_tools.config`, attaches the stderr log handler when
        ``--log-level`` is given, and runs the full demonstration when no
        subcommand was requested.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    configure_logging(log_level)
    if ctx.invoked_subcommand is None:
        run_demo()


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("lib_variadic_args")
    except metadata.PackageNotFoundError:
        click.echo("lib_variadic_args (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_variadic_args')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("run", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--section",
    "sections",
    multiple=True,
    type=click.Choice(section_names(), case_sensitive=False),
    help="Section to run (repeatable); defaults to all sections",
)
def cli_run(sections: Sequence[str]) -> None:
    """Run the demonstration, optionally restricted to some sections.

    Selected sections always run in their canonical order.
    """

    run_demo(_normalize_sections(sections))


@cli.command("sections", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_sections() -> None:
    """List section names and the titles they print."""

    for section in SECTIONS:
        click.echo(f"{section.name:<12} {section.title}")


@cli.command("signatures", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_signatures() -> None:
    """List the overloads registered for ``varargs_test3`` in registration order."""

    for overload in varargs_test3:
        click.echo(f"{varargs_test3.name}{overload.signature}")


@cli.command("ambiguity", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_ambiguity() -> None:
    """Register ``(int...)`` and ``(int, int...)`` under one name and fail.

    The registration error propagates so the exit code and message come from
    ``lib_cli_exit_tools`` like any other failure.
    """

    build_ambiguous_family()


def _normalize_sections(values: Sequence[str]) -> Optional[tuple[str, ...]]:
    """Return lowercase section names, or ``None`` to run everything."""

    if not values:
        return None
    return tuple(value.lower() for value in values)


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_variadic_args",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))

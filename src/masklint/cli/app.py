# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the ``run`` and ``dump`` commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from .. import __version__
from ..config import load_config
from ..errors import MasklintError
from ..maskfile import load_maskfile
from ..pipeline import process_maskfile
from ..reporting import Reporter
from ..runtime.console import detect_tty, get_console_manager
from .shared import CLIError, CLILogger, build_cli_logger

app = typer.Typer(
    name="masklint",
    help="Lint the scripts embedded in a maskfile.",
    no_args_is_help=True,
    add_completion=False,
)

MaskfileOption = Annotated[
    Path | None,
    typer.Option("--maskfile", help="Path to a different maskfile you want to use.", dir_okay=False),
]


@dataclass(slots=True, frozen=True)
class GlobalOptions:
    """Options accepted before the sub-command name."""

    maskfile: Path | None = None
    color: bool | None = None
    emoji: bool | None = None
    debug: bool = False


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"masklint {__version__}")
        raise typer.Exit(code=0)


@app.callback()
def _global_options(
    ctx: typer.Context,
    maskfile: MaskfileOption = None,
    color: Annotated[
        bool | None,
        typer.Option("--color/--no-color", help="Emphasise headers with ANSI colour (default: auto)."),
    ] = None,
    emoji: Annotated[
        bool | None,
        typer.Option("--emoji/--no-emoji", help="Prefix error messages with emoji."),
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Trace materialised files and linter commands.")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Lint the scripts embedded in a maskfile."""

    del version
    ctx.obj = GlobalOptions(maskfile=maskfile, color=color, emoji=emoji, debug=debug)


def _global(ctx: typer.Context) -> GlobalOptions:
    options = ctx.find_object(GlobalOptions)
    return options if options is not None else GlobalOptions()


def _execute(options: GlobalOptions, *, output_dir: Path | None, extract_only: bool, logger: CLILogger) -> None:
    """Load configuration and the maskfile, then walk it.

    Raises:
        CLIError: If any stage of the pipeline fails.
    """

    try:
        config = load_config(
            Path.cwd(),
            overrides={
                "maskfile": options.maskfile,
                "color": options.color,
                "emoji": options.emoji,
                "debug": options.debug or None,
            },
            trace=logger.debug,
        )
        logger.use_emoji = config.emoji
        logger.use_color = config.color
        logger.debug_enabled = config.debug
        logger.debug(f"maskfile={config.maskfile}")
        maskfile = load_maskfile(config.maskfile)

        reporter: Reporter | None = None
        if not extract_only:
            emphasize = detect_tty() if config.color is None else config.color
            console = get_console_manager().get(color=emphasize, emoji=False)
            reporter = Reporter(console=console, emphasize=emphasize)
            if not maskfile.commands:
                logger.warn(f"{config.maskfile} does not define any commands")

        process_maskfile(
            maskfile,
            output_dir=output_dir,
            extract_only=extract_only,
            reporter=reporter,
            trace=logger.debug,
        )
    except MasklintError as exc:
        raise CLIError(str(exc)) from exc


def _dispatch(ctx: typer.Context, maskfile: Path | None, *, output_dir: Path | None, extract_only: bool) -> None:
    options = _global(ctx)
    if maskfile is not None:
        options = GlobalOptions(maskfile=maskfile, color=options.color, emoji=options.emoji, debug=options.debug)
    logger = build_cli_logger(
        emoji=options.emoji if options.emoji is not None else True,
        debug=options.debug,
        color=options.color,
    )
    try:
        _execute(options, output_dir=output_dir, extract_only=extract_only, logger=logger)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc


@app.command("run")
def run(ctx: typer.Context, maskfile: MaskfileOption = None) -> None:
    """Runs the linters."""

    _dispatch(ctx, maskfile, output_dir=None, extract_only=False)


@app.command("dump")
def dump(
    ctx: typer.Context,
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Directory receiving the extracted scripts.", file_okay=False),
    ],
    maskfile: MaskfileOption = None,
) -> None:
    """Extracts all the commands from the maskfile and dumps them as files into the defined directory."""

    _dispatch(ctx, maskfile, output_dir=output, extract_only=True)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["GlobalOptions", "app", "main"]

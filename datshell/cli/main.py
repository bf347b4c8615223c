# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Typer entrypoint for datshell CLI."""

from typing import Optional

import typer

from datshell.cli.commands import register_commands
from datshell.cli.context import CLIContext
from datshell.utils.config.config_loader import (
    DATSHELL_CONFIG_ENV,
    DEFAULT_SHELL_CONF,
    load_json_config,
    resolve_config_path,
)

OUTPUT_FORMATS = ("table", "json", "html")

app = typer.Typer(
    help="datshell - a shell over peer-to-peer archives",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        from datshell import __version__

        typer.echo(f"datshell {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    compact: bool = typer.Option(
        True,
        "--compact",
        "-c",
        help="Compact representation, defaults to true - compacts JSON output or drops table headers",
    ),
    output_format: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output format: table (default), json, html"
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to shell.conf (overrides DATSHELL_CONFIG_FILE)"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Configure shared CLI options."""
    # Priority: --output CLI arg > shell.conf "output" field > default "table"
    if output_format is None:
        path = resolve_config_path(config_path, DATSHELL_CONFIG_ENV, DEFAULT_SHELL_CONF)
        if path is not None:
            try:
                output_format = load_json_config(path).get("output")
            except (ValueError, FileNotFoundError):
                pass
        if output_format is None:
            output_format = "table"

    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"must be one of: {', '.join(OUTPUT_FORMATS)}", param_hint="--output"
        )

    ctx.obj = CLIContext(compact=compact, output_format=output_format, config_path=config_path)


register_commands(app)


if __name__ == "__main__":
    app()

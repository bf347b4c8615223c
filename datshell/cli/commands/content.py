# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Content commands."""

from typing import List, Optional

import typer

from datshell.cli.errors import run


def register(app: typer.Typer) -> None:
    """Register content commands."""

    @app.command("echo")
    def echo_command(
        ctx: typer.Context,
        args: Optional[List[str]] = typer.Argument(None, help="Text to output"),
        to: Optional[str] = typer.Option(None, "--to", help="Write the text to this file"),
        append: bool = typer.Option(False, "--append", "-a", help="Append instead of overwrite"),
    ) -> None:
        """Output the arguments, or write them to a file."""
        opts = {"append": append}
        if to:
            opts["to"] = to
        run(ctx, lambda shell: shell.execute("echo", opts, args or []))

# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""System commands: command management, help and raw command lines."""

from typing import Optional

import typer

from datshell.cli.errors import run


def register(app: typer.Typer) -> None:
    """Register system commands."""

    @app.command("install")
    def install_command(
        ctx: typer.Context,
        cmd: str = typer.Argument(..., help="Command name"),
        url: Optional[str] = typer.Argument(None, help="Command source, defaults to <cmd>.py in the cwd"),
    ) -> None:
        """Install a command from an archive."""
        run(ctx, lambda shell: shell.execute("install", {}, [cmd] + ([url] if url else [])))

    @app.command("which")
    def which_command(
        ctx: typer.Context,
        cmd: str = typer.Argument(..., help="Command name"),
    ) -> None:
        """Show where a command comes from."""
        run(ctx, lambda shell: shell.execute("which", {}, [cmd]))

    @app.command("help")
    def help_command(ctx: typer.Context) -> None:
        """List the shell builtins."""
        run(ctx, lambda shell: shell.execute("help"))

    @app.command("exit")
    def exit_command(
        ctx: typer.Context,
        code: Optional[str] = typer.Argument(None, help="Exit status"),
    ) -> None:
        """Exit with the given status."""
        run(ctx, lambda shell: shell.execute("exit", {}, [code] if code else []))

    @app.command("eval")
    def eval_command(
        ctx: typer.Context,
        line: str = typer.Argument(..., help='Command line, e.g. "rmdir -r old/*"'),
    ) -> None:
        """Parse and run one shell command line."""
        run(ctx, lambda shell: shell.eval_command(line))

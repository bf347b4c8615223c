# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Filesystem commands."""

from typing import List, Optional

import typer

from datshell.cli.errors import run


def register(app: typer.Typer) -> None:
    """Register filesystem commands."""

    @app.command("ls")
    def ls_command(
        ctx: typer.Context,
        location: Optional[str] = typer.Argument(None, help="Location, defaults to the cwd"),
        show_all_hidden: bool = typer.Option(False, "--all", "-a", help="Show hidden files"),
    ) -> None:
        """List the library, or the contents of a directory."""
        run(ctx, lambda shell: shell.execute("ls", {"all": show_all_hidden}, [location] if location else []))

    @app.command("cd")
    def cd_command(
        ctx: typer.Context,
        location: Optional[str] = typer.Argument(None, help="Target directory, defaults to ~"),
    ) -> None:
        """Change the current directory."""
        run(ctx, lambda shell: shell.execute("cd", {}, [location] if location else []))

    @app.command("pwd")
    def pwd_command(ctx: typer.Context) -> None:
        """Print the current directory."""
        run(ctx, lambda shell: shell.execute("pwd"))

    @app.command("mkdir")
    def mkdir_command(
        ctx: typer.Context,
        dst: str = typer.Argument(..., help="Directory to create"),
    ) -> None:
        """Create a directory."""
        run(ctx, lambda shell: shell.execute("mkdir", {}, [dst]))

    @app.command("rmdir")
    def rmdir_command(
        ctx: typer.Context,
        patterns: List[str] = typer.Argument(..., help="Directories or glob patterns"),
        recursive: bool = typer.Option(
            False, "--recursive", "-r", help="Remove directories with their contents"
        ),
    ) -> None:
        """Remove directories. Quote glob patterns to keep the local shell from expanding them."""
        run(ctx, lambda shell: shell.execute("rmdir", {"recursive": recursive}, patterns))

    @app.command("rm")
    def rm_command(
        ctx: typer.Context,
        patterns: List[str] = typer.Argument(..., help="Files or glob patterns"),
        recursive: bool = typer.Option(
            False, "--recursive", "-r", help="Also remove directories with their contents"
        ),
    ) -> None:
        """Remove files."""
        run(ctx, lambda shell: shell.execute("rm", {"recursive": recursive}, patterns))

    @app.command("mv")
    def mv_command(
        ctx: typer.Context,
        src: str = typer.Argument(..., help="Source path"),
        dst: str = typer.Argument(..., help="Destination path"),
    ) -> None:
        """Move or rename a file or directory within one archive."""
        run(ctx, lambda shell: shell.execute("mv", {}, [src, dst]))

    @app.command("cp")
    def cp_command(
        ctx: typer.Context,
        src: str = typer.Argument(..., help="Source path"),
        dst: str = typer.Argument(..., help="Destination path"),
    ) -> None:
        """Copy a file or directory, also between archives."""
        run(ctx, lambda shell: shell.execute("cp", {}, [src, dst]))

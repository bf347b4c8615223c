# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Exception handling helpers for CLI commands."""

import asyncio
import inspect
from typing import Any, Awaitable, Callable

import httpx
import typer

from datshell.cli.context import CliConfigError, CLIContext, get_cli_context
from datshell.cli.output import output_error, output_outcome, output_success
from datshell.exceptions import DatShellError, ShellExit
from datshell.shell import Shell


def handle_command_error(ctx: CLIContext, exc: Exception) -> None:
    """Normalize command exceptions into user-facing output and exit codes."""
    if isinstance(exc, typer.Exit):
        raise exc

    if isinstance(exc, ShellExit):
        raise typer.Exit(exc.exit_code)

    if isinstance(exc, CliConfigError):
        output_error(
            ctx,
            message=str(exc),
            code="CLI_CONFIG",
            details={"config_file": "shell.conf"},
            exit_code=2,
        )

    elif isinstance(exc, DatShellError):
        output_error(
            ctx,
            message=exc.message,
            code=exc.code,
            details=exc.details,
            exit_code=1,
        )

    elif isinstance(exc, (httpx.ConnectError, httpx.ConnectTimeout, httpx.ReadTimeout)):
        output_error(
            ctx,
            message=(
                "Failed to connect to the archive gateway. "
                "Check the gateway url in shell.conf and ensure it is running."
            ),
            code="CONNECTION_ERROR",
            exit_code=3,
            details={"exception": str(exc)},
        )

    else:
        output_error(
            ctx,
            message=str(exc),
            code="CLI_ERROR",
            exit_code=1,
            details={"exception": type(exc).__name__},
        )


async def _execute(ctx: CLIContext, operation: Callable[[Shell], Awaitable[Any]]) -> int:
    """Run one shell operation and print its result; returns the exit code."""
    env = ctx.get_env()
    try:
        result = await operation(Shell(env))
        if inspect.isasyncgen(result):
            failures = 0
            async for outcome in result:
                output_outcome(ctx, outcome)
                if not outcome.ok:
                    failures += 1
            return 1 if failures else 0
        output_success(ctx, result)
        return 0
    finally:
        await ctx.close_env()


def run(
    ctx: typer.Context,
    fn: Callable[[Shell], Awaitable[Any]],
) -> None:
    """Execute a shell command with boilerplate: context → execute → output."""
    cli_ctx = get_cli_context(ctx)
    try:
        exit_code = asyncio.run(_execute(cli_ctx, fn))
    except Exception as exc:  # noqa: BLE001
        handle_command_error(cli_ctx, exc)
    if exit_code:
        raise typer.Exit(exit_code)

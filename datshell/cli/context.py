# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Runtime context and shell environment factory for CLI commands."""

from dataclasses import dataclass, field
from typing import Optional

import typer

from datshell.context import ShellEnv
from datshell.utils.config import ShellConfigSingleton
from datshell.utils.logger import configure_logging


class CliConfigError(ValueError):
    """Raised when required CLI configuration is missing or invalid."""


@dataclass
class CLIContext:
    """Shared state for one CLI invocation."""

    compact: bool = True
    output_format: str = "table"
    config_path: Optional[str] = None
    _env: Optional[ShellEnv] = field(default=None, init=False, repr=False)

    def get_env(self) -> ShellEnv:
        """Create the shell environment (loads shell.conf)."""
        if self._env is not None:
            return self._env

        try:
            config = ShellConfigSingleton.initialize(config_path=self.config_path)
            configure_logging(config)
        except (OSError, ValueError) as e:
            raise CliConfigError(str(e)) from e
        self._env = ShellEnv.from_config(config)
        return self._env

    async def close_env(self) -> None:
        """Close archive handles if the environment has been created."""
        if self._env is None:
            return
        await self._env.close()
        self._env = None


def get_cli_context(ctx: typer.Context) -> CLIContext:
    """Return a typed CLI context from Typer context."""
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context is not initialized")
    return ctx.obj

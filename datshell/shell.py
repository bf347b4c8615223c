# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Command-line evaluation and dispatch."""

import inspect
import shlex
from typing import Any, Dict, List, Optional

from datshell.commands import get_builtin, load_all_commands
from datshell.commands.base import parse_command_args
from datshell.context import ShellEnv
from datshell.exceptions import CommandNotFoundError, InvalidArgumentError
from datshell.utils.logger import get_logger

logger = get_logger(__name__)


class Shell:
    """Runs builtin commands against one ShellEnv.

    A command's result is returned as-is; streaming commands (rmdir, rm)
    return an async iterator the caller consumes.
    """

    def __init__(self, env: ShellEnv):
        self.env = env
        load_all_commands()

    async def execute(
        self, name: str, opts: Optional[Dict[str, Any]] = None, args: Optional[List[str]] = None
    ) -> Any:
        """Run builtin ``name`` with parsed options and positional arguments.

        Raises:
            CommandNotFoundError: If no builtin is registered under ``name``.
        """
        builtin = get_builtin(name)
        if builtin is None:
            raise CommandNotFoundError(name)

        logger.debug(f"[Shell] {name} opts={opts} args={args}")
        result = builtin.func(self.env, opts or {}, *(args or []))
        if inspect.isasyncgen(result):
            return result
        return await result

    async def eval_command(self, line: str) -> Any:
        """Parse and run one command line, e.g. ``rmdir -r "old posts/*"``."""
        try:
            tokens = shlex.split(line)
        except ValueError as e:
            raise InvalidArgumentError(f"cannot parse command line: {e}", details={"line": line})
        if not tokens:
            return None

        name, rest = tokens[0], tokens[1:]
        builtin = get_builtin(name)
        opts, args = parse_command_args(rest, builtin.value_options if builtin else ())
        return await self.execute(name, opts, args)

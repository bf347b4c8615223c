# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
EXIT command - end the session.
"""

from typing import Any, Mapping, Optional

from datshell.commands import register_command
from datshell.context import ShellEnv
from datshell.exceptions import InvalidArgumentError, ShellExit


@register_command("exit", description="Exit the shell")
async def cmd_exit(env: ShellEnv, opts: Mapping[str, Any], code: Optional[str] = None, *_) -> None:
    try:
        exit_code = int(code or 0)
    except ValueError:
        raise InvalidArgumentError("invalid exit code")
    raise ShellExit(exit_code)

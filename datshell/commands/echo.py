# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Echo command - output the arguments, or write them to a file.
"""

from typing import Any, Mapping, Optional

from datshell.commands import register_command
from datshell.commands.base import has_flag
from datshell.context import ShellEnv
from datshell.exceptions import InvalidArgumentError, NotFoundError
from datshell.utils.url import resolve_url


@register_command("echo", description="Output the arguments", value_options={"to"})
async def cmd_echo(env: ShellEnv, opts: Mapping[str, Any], *args: str) -> Optional[str]:
    """
    Usage: echo [--to <dst>] [-a|--append] args...
    """
    res = " ".join(str(arg) for arg in args)

    dst = opts.get("to")
    if dst is True:
        raise InvalidArgumentError("--to requires a destination")
    if not dst:
        return res

    target = resolve_url(str(dst), env.cwd, env.library)
    if has_flag(opts, "a", "append"):
        try:
            res = await target.archive.read_file(target.path, encoding="utf-8") + res
        except NotFoundError:
            pass
    await target.archive.write_file(target.path, res)
    return None

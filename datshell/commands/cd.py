# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
CD and PWD commands - change and print the working directory.
"""

from typing import Any, Mapping, Optional

from datshell.commands import register_command
from datshell.commands.ls import cmd_ls
from datshell.context import ShellEnv


@register_command("cd", description="Change the current directory")
async def cmd_cd(env: ShellEnv, opts: Mapping[str, Any], location: Optional[str] = None, *_):
    """
    Usage: cd [location]

    Without a location, returns to the library root.
    """
    await env.set_cwd(str(location) if location else "~")

    if env.config.ls_after_cd:
        return await cmd_ls(env, {})
    return None


@register_command("pwd", description="Fetch the current directory")
async def cmd_pwd(env: ShellEnv, opts: Mapping[str, Any], *_) -> str:
    path = "~"
    if env.cwd.key is not None:
        path += env.cwd.location
    return path

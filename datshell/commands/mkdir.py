# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
MKDIR command - create directory.
"""

from typing import Any, Mapping, Optional

from datshell.commands import register_command
from datshell.commands.base import require
from datshell.context import ShellEnv
from datshell.utils.url import resolve_url


@register_command("mkdir", description="Make a new directory")
async def cmd_mkdir(env: ShellEnv, opts: Mapping[str, Any], dst: Optional[str] = None, *_) -> None:
    target = resolve_url(require(dst, "dst"), env.cwd, env.library)
    await target.archive.mkdir(target.path)

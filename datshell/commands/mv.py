# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
MV command - move or rename a file or folder within one archive.
"""

from typing import Any, Mapping, Optional

from datshell.commands import register_command
from datshell.commands.base import require
from datshell.context import ShellEnv
from datshell.exceptions import InvalidArgumentError
from datshell.utils.url import is_within, resolve_url


@register_command("mv", description="Move a file or folder")
async def cmd_mv(
    env: ShellEnv,
    opts: Mapping[str, Any],
    src: Optional[str] = None,
    dst: Optional[str] = None,
    *_,
) -> None:
    src = require(src, "src")
    dst = require(dst, "dst")
    source = resolve_url(src, env.cwd, env.library)
    target = resolve_url(dst, env.cwd, env.library)
    if source.key != target.key:
        raise InvalidArgumentError(
            "cannot move between archives, use cp then rm",
            details={"src": source.url, "dst": target.url},
        )
    if is_within(target.path, source.path):
        raise InvalidArgumentError(
            "cannot move a path into itself",
            details={"src": source.url, "dst": target.url},
        )
    await source.archive.rename(source.path, target.path)

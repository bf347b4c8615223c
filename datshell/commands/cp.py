# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
CP command - copy a file or folder, also between archives.
"""

from typing import Any, Mapping, Optional

from datshell.archive import copy_tree
from datshell.commands import register_command
from datshell.commands.base import require
from datshell.context import ShellEnv
from datshell.exceptions import InvalidArgumentError
from datshell.utils.url import is_within, resolve_url


@register_command("cp", description="Copy a file or folder")
async def cmd_cp(
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
    if source.key == target.key:
        if is_within(target.path, source.path):
            raise InvalidArgumentError(
                "cannot copy a path into itself",
                details={"src": source.url, "dst": target.url},
            )
        await source.archive.copy(source.path, target.path)
    else:
        await copy_tree(source.archive, source.path, target.archive, target.path)

# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
RM command - remove files, and directories with -r.
"""

from typing import Any, AsyncIterator, Mapping

from datshell.archive import Archive
from datshell.commands import register_command
from datshell.commands.base import require
from datshell.commands.rmdir import RemovalOutcome, RemoveOptions
from datshell.context import ShellEnv
from datshell.exceptions import PathTypeError
from datshell.utils.glob import glob, is_glob
from datshell.utils.logger import get_logger
from datshell.utils.url import resolve_url

logger = get_logger(__name__)


async def remove_path(archive: Archive, path: str, options: RemoveOptions) -> RemovalOutcome:
    """Remove a file, or a whole directory when recursive."""
    try:
        info = await archive.stat(path)
        if not info.is_dir:
            await archive.unlink(path)
        elif options.recursive:
            await archive.rmdir(path, recursive=True)
        else:
            raise PathTypeError(path, expected="file")
    except Exception as e:
        logger.warning(f"[rm] {archive.url}{path}: {e}")
        return RemovalOutcome(path=path, error=e, command="rm")
    return RemovalOutcome(path=path, command="rm")


@register_command("rm", description="Remove a file")
async def cmd_rm(env: ShellEnv, opts: Mapping[str, Any], *patterns: str) -> AsyncIterator[RemovalOutcome]:
    """
    Remove files

    Usage: rm [-r|--recursive] <pattern> [<pattern> ...]
    """
    require(patterns[0] if patterns else None, "dst")
    options = RemoveOptions.from_flags(opts)

    for pattern in patterns:
        target = resolve_url(pattern, env.cwd, env.library)

        if not is_glob(target.path):
            yield await remove_path(target.archive, target.path, options)
            continue

        async for path in glob(target.archive, target.path, dirs_only=False):
            yield await remove_path(target.archive, path, options)

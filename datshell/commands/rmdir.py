# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
RMDIR command - remove directories, expanding glob patterns.

Usage: rmdir [-r|--recursive] <pattern> [<pattern> ...]

One outcome is streamed per directory targeted. A failed removal is reported
in its outcome and processing continues; a pattern that cannot be resolved
ends the command.
"""

from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, Mapping, Optional

from datshell.archive import Archive
from datshell.commands import register_command
from datshell.commands.base import require
from datshell.context import ShellEnv
from datshell.render import render_html
from datshell.utils.glob import glob, is_glob
from datshell.utils.logger import get_logger
from datshell.utils.url import resolve_url

logger = get_logger(__name__)


@dataclass(frozen=True)
class RemoveOptions:
    """Options shared by every removal of one invocation."""

    recursive: bool = False

    @classmethod
    def from_flags(cls, opts: Mapping[str, Any]) -> "RemoveOptions":
        return cls(recursive=bool(opts.get("r") or opts.get("recursive")))


@dataclass
class RemovalOutcome:
    """Result of one removal attempt; ``error`` is None on success."""

    path: str
    error: Optional[Exception] = None
    command: str = "rmdir"

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "ok": self.ok,
            "error": str(self.error) if self.error is not None else None,
        }

    def to_html(self) -> str:
        return render_html(
            "outcome.html",
            command=self.command,
            path=self.path,
            error=str(self.error) if self.error is not None else "",
        )


async def remove_directory(archive: Archive, path: str, options: RemoveOptions) -> RemovalOutcome:
    """Remove one directory, capturing any failure in the outcome."""
    try:
        await archive.rmdir(path, recursive=options.recursive)
    except Exception as e:
        logger.warning(f"[rmdir] {archive.url}{path}: {e}")
        return RemovalOutcome(path=path, error=e)
    return RemovalOutcome(path=path)


@register_command("rmdir", description="Remove an existing directory")
async def cmd_rmdir(env: ShellEnv, opts: Mapping[str, Any], *patterns: str) -> AsyncIterator[RemovalOutcome]:
    require(patterns[0] if patterns else None, "dst")
    options = RemoveOptions.from_flags(opts)

    for pattern in patterns:
        target = resolve_url(pattern, env.cwd, env.library)

        if not is_glob(target.path):
            yield await remove_directory(target.archive, target.path, options)
            continue

        async for path in glob(target.archive, target.path, dirs_only=True):
            yield await remove_directory(target.archive, path, options)

# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
LS command - list the library, or the contents of a directory.
"""

import shlex
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from datshell.archive import Archive, DirEntry
from datshell.commands import register_command
from datshell.commands.base import has_flag
from datshell.context import ShellEnv
from datshell.render import render_html
from datshell.utils.url import join_path, parse_location


@dataclass
class LibraryListing:
    """Archives saved in the library, shown at ``~``."""

    archives: List[Archive] = field(default_factory=list)

    def to_dict(self) -> List[Dict[str, Any]]:
        return [{"title": a.title, "url": a.url} for a in self.archives]

    def to_html(self) -> str:
        return render_html("library.html", archives=self.to_dict())


@dataclass
class DirectoryListing:
    """Entries of one directory: directories first, then by name."""

    archive_url: str
    path: str
    entries: List[DirEntry] = field(default_factory=list)
    show_hidden: bool = False

    def visible(self) -> List[DirEntry]:
        entries = [e for e in self.entries if self.show_hidden or not e.name.startswith(".")]
        return sorted(entries, key=lambda e: (not e.is_dir, e.name.lower(), e.name))

    def to_dict(self) -> List[Dict[str, Any]]:
        return [
            {
                "type": "dir" if e.is_dir else "file",
                "size": e.stat.size if e.stat else 0,
                "name": e.name,
            }
            for e in self.visible()
        ]

    def to_html(self) -> str:
        entries = [
            {
                "name": e.name,
                "is_dir": e.is_dir,
                "command": f"cd {shlex.quote(e.name)}",
                "color": "muted" if e.name.startswith(".") else "default",
                "tag": "strong" if e.is_dir else "span",
                "url": self.archive_url + join_path(self.path, e.name),
            }
            for e in self.visible()
        ]
        return render_html("listing.html", entries=entries)


@register_command("ls", description="List files in the directory")
async def cmd_ls(
    env: ShellEnv, opts: Mapping[str, Any], location: Optional[str] = None, *_
) -> Union[LibraryListing, DirectoryListing]:
    """
    Usage: ls [-a|--all] [location]
    """
    key, path = parse_location(location or ".", env.cwd)

    if key is None:
        return LibraryListing(env.library.list())

    archive = env.library.load(key)
    entries = await archive.readdir(path, stat=True)
    return DirectoryListing(
        archive_url=archive.url,
        path=path,
        entries=entries,
        show_hidden=has_flag(opts, "a", "all"),
    )

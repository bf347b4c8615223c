# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Base archive interface for datshell.

Defines the abstract class that LocalArchive and HTTPArchive implement.
Commands only ever talk to this interface.
"""

import posixpath
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

SCHEME = "dat"


@dataclass
class Stat:
    """File/directory information."""

    is_dir: bool
    size: int = 0
    mtime: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isDir": self.is_dir,
            "size": self.size,
            "modTime": self.mtime.isoformat() if self.mtime else "",
        }


@dataclass
class DirEntry:
    """One entry of a directory listing."""

    name: str
    stat: Optional[Stat] = None

    @property
    def is_dir(self) -> bool:
        return bool(self.stat and self.stat.is_dir)


def normalize_path(path: str) -> str:
    """Normalize an archive path: absolute, no trailing slash, no '..' above root."""
    path = posixpath.normpath("/" + path.lstrip("/"))
    # normpath keeps a leading '//' as-is
    if path.startswith("//"):
        path = "/" + path.lstrip("/")
    return path


class Archive(ABC):
    """Abstract handle to one versioned archive.

    Paths are archive-absolute ("/docs/readme.md"). Every method may raise a
    DatShellError subclass describing why the archive refused the operation.
    """

    def __init__(self, key: str, title: str = ""):
        self.key = key
        self.title = title or key

    @property
    def url(self) -> str:
        return f"{SCHEME}://{self.key}"

    # ============= Directory Operations =============

    @abstractmethod
    async def readdir(self, path: str, stat: bool = False) -> List[DirEntry]:
        """List a directory. Entries carry a Stat when ``stat`` is true."""
        ...

    @abstractmethod
    async def mkdir(self, path: str) -> None:
        """Create a directory; the parent must exist."""
        ...

    @abstractmethod
    async def rmdir(self, path: str, recursive: bool = False) -> None:
        """Remove a directory.

        Raises DirectoryNotEmptyError when the directory has entries and
        ``recursive`` is false.
        """
        ...

    # ============= File Operations =============

    @abstractmethod
    async def stat(self, path: str) -> Stat:
        """Stat a file or directory."""
        ...

    @abstractmethod
    async def read_file(self, path: str, encoding: Optional[str] = None) -> Union[bytes, str]:
        """Read a file; decoded when ``encoding`` is given."""
        ...

    @abstractmethod
    async def write_file(self, path: str, data: Union[bytes, str]) -> None:
        """Create or overwrite a file."""
        ...

    @abstractmethod
    async def unlink(self, path: str) -> None:
        """Remove a file."""
        ...

    @abstractmethod
    async def rename(self, src: str, dst: str) -> None:
        """Move or rename a file or directory."""
        ...

    async def copy(self, src: str, dst: str) -> None:
        """Copy a file or directory within this archive."""
        await copy_tree(self, src, self, dst)

    # ============= Lifecycle =============

    async def close(self) -> None:
        """Release resources held by the archive handle."""
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.url}')"


async def copy_tree(src_archive: Archive, src: str, dst_archive: Archive, dst: str) -> None:
    """Copy a file or directory, possibly between two archives."""
    info = await src_archive.stat(src)
    if not info.is_dir:
        await dst_archive.write_file(dst, await src_archive.read_file(src))
        return

    entries = await src_archive.readdir(src)
    await dst_archive.mkdir(dst)
    for entry in entries:
        await copy_tree(
            src_archive,
            posixpath.join(src, entry.name),
            dst_archive,
            posixpath.join(dst, entry.name),
        )

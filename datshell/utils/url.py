# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Location resolution for datshell.

A location names a directory or file in the library:

- ``dat://<key>/<path>``  archive by key
- ``~`` / ``~/<key>/<path>``  library-rooted
- ``/<path>``  absolute within the current archive
- anything else  relative to the current directory

The current directory is itself a location of the form ``/<key>/<path>``;
``/`` is the library root.
"""

import posixpath
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from datshell.archive.base import SCHEME, Archive, normalize_path
from datshell.exceptions import ResolutionError

if TYPE_CHECKING:
    from datshell.archive.library import ArchiveLibrary
    from datshell.context import CWD


@dataclass
class ResolvedTarget:
    """An archive plus a path inside it; the path may still hold glob syntax."""

    key: str
    archive: Archive
    path: str

    @property
    def url(self) -> str:
        return f"{SCHEME}://{self.key}{self.path}"


def join_path(base: str, *parts: str) -> str:
    """Join path parts and normalize the result."""
    return normalize_path(posixpath.join(base, *parts))


def parse_location(location: str, cwd: "CWD") -> Tuple[Optional[str], str]:
    """Split ``location`` into ``(key, path)`` relative to ``cwd``.

    ``key`` is None when the location is the library root.

    Raises:
        ResolutionError: For an empty location, or an archive-absolute path
            while the cwd is the library root.
    """
    location = str(location)
    if not location:
        raise ResolutionError(location, "empty location")

    prefix = f"{SCHEME}://"
    if location.startswith(prefix):
        full = "/" + location[len(prefix) :]
    elif location == "~" or location.startswith("~/"):
        full = location[1:] or "/"
    elif location.startswith("/"):
        if cwd.key is None:
            raise ResolutionError(location, "not inside an archive")
        full = f"/{cwd.key}{location}"
    else:
        full = join_path(cwd.location, location)

    key, _, path = normalize_path(full).lstrip("/").partition("/")
    return (key or None), "/" + path


def resolve_url(location: str, cwd: "CWD", library: "ArchiveLibrary") -> ResolvedTarget:
    """Resolve ``location`` against ``cwd`` to an archive and a path.

    Raises:
        ResolutionError: If the location cannot be mapped to any archive.
    """
    key, path = parse_location(location, cwd)
    if key is None:
        raise ResolutionError(location, "the library root is not an archive")
    return ResolvedTarget(key=key, archive=library.load(key), path=path)


def is_within(path: str, parent: str) -> bool:
    """True if ``path`` is ``parent`` itself or lies below it."""
    path, parent = normalize_path(path), normalize_path(parent)
    return path == parent or path.startswith(parent.rstrip("/") + "/")

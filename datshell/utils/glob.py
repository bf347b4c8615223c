# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
Glob matching over an archive's directory tree.

Patterns are matched one path segment at a time with ``fnmatch`` rules
(``*``, ``?``, ``[...]``); a ``**`` segment matches zero or more directory
levels. Names starting with a dot only match segments that start with a dot.
Matches are produced lazily, depth-first, in name order.
"""

import fnmatch
import re
from typing import AsyncIterator, List, Set

from datshell.archive.base import Archive, DirEntry, normalize_path
from datshell.exceptions import NotFoundError, PathTypeError

_GLOB_CHARS = re.compile(r"[*?\[]")


def is_glob(path: str) -> bool:
    """Return True if ``path`` contains glob wildcard syntax."""
    return bool(_GLOB_CHARS.search(path))


def _child(parent: str, name: str) -> str:
    return f"{parent.rstrip('/')}/{name}"


def _segment_matches(name: str, segment: str) -> bool:
    if name.startswith(".") and not segment.startswith("."):
        return False
    return fnmatch.fnmatchcase(name, segment)


async def _readdir(archive: Archive, path: str) -> List[DirEntry]:
    """List ``path``; a directory that is missing (or was removed) is empty."""
    try:
        return await archive.readdir(path, stat=True)
    except (NotFoundError, PathTypeError):
        return []


async def _match(
    archive: Archive, directory: str, segments: List[str], dirs_only: bool
) -> AsyncIterator[str]:
    segment, rest = segments[0], segments[1:]

    if segment == "**":
        # zero levels
        if rest:
            async for path in _match(archive, directory, rest, dirs_only):
                yield path
        else:
            yield directory
        # one or more levels
        for entry in await _readdir(archive, directory):
            if entry.is_dir and not entry.name.startswith("."):
                async for path in _match(archive, _child(directory, entry.name), segments, dirs_only):
                    yield path
        return

    for entry in await _readdir(archive, directory):
        if not _segment_matches(entry.name, segment):
            continue
        path = _child(directory, entry.name)
        if rest:
            if entry.is_dir:
                async for match in _match(archive, path, rest, dirs_only):
                    yield match
        elif entry.is_dir or not dirs_only:
            yield path


async def glob(archive: Archive, pattern: str, dirs_only: bool = True) -> AsyncIterator[str]:
    """Yield archive paths matching ``pattern``.

    Args:
        archive: Archive to search
        pattern: Archive-absolute glob pattern, e.g. ``/posts/*/drafts``
        dirs_only: Only yield directories

    Yields:
        Matching paths, each at most once. A pattern whose literal prefix does
        not exist yields nothing.
    """
    segments = [s for s in normalize_path(pattern).split("/") if s]

    literal = 0
    while literal < len(segments) and not is_glob(segments[literal]):
        literal += 1
    base = "/" + "/".join(segments[:literal])
    rest = segments[literal:]

    try:
        info = await archive.stat(base)
    except (NotFoundError, PathTypeError):
        return

    if not rest:
        if info.is_dir or not dirs_only:
            yield base
        return
    if not info.is_dir:
        return

    seen: Set[str] = set()
    async for path in _match(archive, base, rest, dirs_only):
        if path in seen:
            continue
        seen.add(path)
        yield path

# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Archive providers."""

from datshell.archive.base import SCHEME, Archive, DirEntry, Stat, copy_tree, normalize_path
from datshell.archive.http import HTTPArchive
from datshell.archive.library import ArchiveLibrary, is_archive_key
from datshell.archive.local import LocalArchive

__all__ = [
    "SCHEME",
    "Archive",
    "ArchiveLibrary",
    "DirEntry",
    "HTTPArchive",
    "LocalArchive",
    "Stat",
    "copy_tree",
    "is_archive_key",
    "normalize_path",
]

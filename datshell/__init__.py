# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
datshell - a shell over peer-to-peer archives

Browse, create and remove files and directories in dat:// archives.
"""

from datshell.archive import Archive, ArchiveLibrary, HTTPArchive, LocalArchive
from datshell.context import ShellEnv
from datshell.shell import Shell

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("datshell")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    "Archive",
    "ArchiveLibrary",
    "HTTPArchive",
    "LocalArchive",
    "Shell",
    "ShellEnv",
    "__version__",
]

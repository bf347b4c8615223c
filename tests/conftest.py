# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0

"""Global test fixtures"""

from pathlib import Path

import pytest

from datshell.archive import ArchiveLibrary, LocalArchive
from datshell.context import CWD, ShellEnv
from datshell.utils.config import ShellConfig, ShellConfigSingleton
from datshell.utils.logger import configure_logging


@pytest.fixture(autouse=True)
def reset_shell_config():
    """Each test starts from the built-in config and default logging."""
    ShellConfigSingleton.reset_instance()
    yield
    ShellConfigSingleton.reset_instance()
    configure_logging(ShellConfig())


@pytest.fixture(scope="function")
def archive_root(tmp_path: Path) -> Path:
    """Checkout directory of the 'blog' archive."""
    root = tmp_path / "blog"
    root.mkdir()
    return root


@pytest.fixture(scope="function")
def archive(archive_root: Path) -> LocalArchive:
    return LocalArchive("blog", archive_root, title="My Blog")


@pytest.fixture(scope="function")
def library(archive: LocalArchive) -> ArchiveLibrary:
    return ArchiveLibrary([archive])


@pytest.fixture(scope="function")
def env(library: ArchiveLibrary) -> ShellEnv:
    """Shell environment positioned at the root of the 'blog' archive."""
    return ShellEnv(library=library, cwd=CWD(key="blog"))

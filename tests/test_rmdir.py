# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the rmdir command: pattern expansion, outcome streaming and error policy."""

from unittest.mock import AsyncMock, MagicMock, call

import pytest

from datshell.archive import ArchiveLibrary
from datshell.commands.rmdir import RemovalOutcome, RemoveOptions, cmd_rmdir, remove_directory
from datshell.context import CWD, ShellEnv
from datshell.exceptions import (
    DirectoryNotEmptyError,
    InvalidArgumentError,
    NotFoundError,
    PathTypeError,
    PermissionDeniedError,
    ResolutionError,
)


async def collect(stream):
    return [item async for item in stream]


def _mock_env():
    """ShellEnv over a single mocked archive keyed 'mock'."""
    archive = MagicMock()
    archive.key = "mock"
    archive.url = "dat://mock"
    archive.rmdir = AsyncMock(return_value=None)
    library = ArchiveLibrary()
    library.add(archive)
    return ShellEnv(library=library, cwd=CWD(key="mock")), archive


class TestRemoveOptions:
    """Recognized aliases are folded into one field."""

    def test_short_flag(self):
        assert RemoveOptions.from_flags({"r": True}).recursive is True

    def test_long_flag(self):
        assert RemoveOptions.from_flags({"recursive": True}).recursive is True

    def test_absent(self):
        assert RemoveOptions.from_flags({}).recursive is False

    def test_falsey_values(self):
        assert RemoveOptions.from_flags({"r": False, "recursive": None}).recursive is False


class TestRmdirSinglePath:
    @pytest.mark.asyncio
    async def test_removes_empty_directory(self, env, archive_root):
        (archive_root / "foo").mkdir()

        outcomes = await collect(cmd_rmdir(env, {}, "foo"))

        assert [(o.path, o.ok) for o in outcomes] == [("/foo", True)]
        assert not (archive_root / "foo").exists()

    @pytest.mark.asyncio
    async def test_missing_directory_yields_one_error(self, env):
        outcomes = await collect(cmd_rmdir(env, {}, "nosuch"))

        assert len(outcomes) == 1
        assert outcomes[0].path == "/nosuch"
        assert isinstance(outcomes[0].error, NotFoundError)

    @pytest.mark.asyncio
    async def test_non_empty_without_recursive_fails(self, env, archive_root):
        (archive_root / "foo").mkdir()
        (archive_root / "foo" / "post.md").write_text("hi")

        outcomes = await collect(cmd_rmdir(env, {}, "foo"))

        assert isinstance(outcomes[0].error, DirectoryNotEmptyError)
        assert "not empty" in str(outcomes[0].error)
        assert (archive_root / "foo" / "post.md").exists()

    @pytest.mark.asyncio
    async def test_recursive_removes_contents(self, env, archive_root):
        (archive_root / "foo" / "sub").mkdir(parents=True)
        (archive_root / "foo" / "sub" / "post.md").write_text("hi")

        outcomes = await collect(cmd_rmdir(env, {"r": True}, "foo"))

        assert outcomes[0].ok
        assert not (archive_root / "foo").exists()

    @pytest.mark.asyncio
    async def test_file_is_not_a_directory(self, env, archive_root):
        (archive_root / "post.md").write_text("hi")

        outcomes = await collect(cmd_rmdir(env, {}, "post.md"))

        assert isinstance(outcomes[0].error, PathTypeError)
        assert (archive_root / "post.md").exists()

    @pytest.mark.asyncio
    async def test_archive_root_is_refused(self, env):
        outcomes = await collect(cmd_rmdir(env, {"r": True}, "/"))

        assert isinstance(outcomes[0].error, PermissionDeniedError)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("location", ["/foo", "dat://blog/foo", "~/blog/foo", "./foo"])
    async def test_location_forms(self, env, archive_root, location):
        (archive_root / "foo").mkdir()

        outcomes = await collect(cmd_rmdir(env, {}, location))

        assert [o.path for o in outcomes] == ["/foo"]
        assert outcomes[0].ok

    @pytest.mark.asyncio
    async def test_relative_to_cwd(self, env, archive_root):
        (archive_root / "posts" / "old").mkdir(parents=True)
        env.cwd = CWD(key="blog", path="/posts")

        outcomes = await collect(cmd_rmdir(env, {}, "old"))

        assert [o.path for o in outcomes] == ["/posts/old"]
        assert not (archive_root / "posts" / "old").exists()


class TestRmdirGlob:
    @pytest.mark.asyncio
    async def test_failure_then_glob_matches_in_order(self, env, archive_root):
        (archive_root / "foo").mkdir()
        (archive_root / "foo" / "keep.txt").write_text("x")
        (archive_root / "bar" / "a").mkdir(parents=True)
        (archive_root / "bar" / "b").mkdir()

        outcomes = await collect(cmd_rmdir(env, {}, "foo", "bar/*"))

        assert [o.path for o in outcomes] == ["/foo", "/bar/a", "/bar/b"]
        assert isinstance(outcomes[0].error, DirectoryNotEmptyError)
        assert [o.ok for o in outcomes] == [False, True, True]

    @pytest.mark.asyncio
    async def test_zero_matches_yields_nothing(self, env):
        assert await collect(cmd_rmdir(env, {}, "nosuch/*")) == []

    @pytest.mark.asyncio
    async def test_only_directories_are_targeted(self, env, archive_root):
        (archive_root / "bar" / "a").mkdir(parents=True)
        (archive_root / "bar" / "notes.txt").write_text("x")

        outcomes = await collect(cmd_rmdir(env, {}, "bar/*"))

        assert [o.path for o in outcomes] == ["/bar/a"]
        assert (archive_root / "bar" / "notes.txt").exists()

    @pytest.mark.asyncio
    async def test_failed_match_does_not_stop_later_matches(self, env, archive_root):
        for name in ("a", "b", "c"):
            (archive_root / "bar" / name).mkdir(parents=True)
        (archive_root / "bar" / "a" / "keep.txt").write_text("x")
        (archive_root / "baz").mkdir()

        outcomes = await collect(cmd_rmdir(env, {}, "bar/*", "baz"))

        assert [(o.path, o.ok) for o in outcomes] == [
            ("/bar/a", False),
            ("/bar/b", True),
            ("/bar/c", True),
            ("/baz", True),
        ]

    @pytest.mark.asyncio
    async def test_recursive_glob(self, env, archive_root):
        (archive_root / "bar" / "a" / "deep").mkdir(parents=True)
        (archive_root / "bar" / "b").mkdir()

        outcomes = await collect(cmd_rmdir(env, {"recursive": True}, "bar/*"))

        assert all(o.ok for o in outcomes)
        assert list((archive_root / "bar").iterdir()) == []

    @pytest.mark.asyncio
    async def test_hidden_directories_are_skipped(self, env, archive_root):
        (archive_root / "bar" / ".git").mkdir(parents=True)
        (archive_root / "bar" / "a").mkdir()

        outcomes = await collect(cmd_rmdir(env, {}, "bar/*"))

        assert [o.path for o in outcomes] == ["/bar/a"]
        assert (archive_root / "bar" / ".git").exists()


class TestRmdirErrors:
    @pytest.mark.asyncio
    async def test_requires_a_pattern(self, env):
        with pytest.raises(InvalidArgumentError, match="dst is required"):
            await collect(cmd_rmdir(env, {}))

    @pytest.mark.asyncio
    async def test_resolution_error_stops_remaining_patterns(self, env, archive_root):
        (archive_root / "foo").mkdir()
        (archive_root / "baz").mkdir()

        stream = cmd_rmdir(env, {}, "foo", "dat://bad_key!/x", "baz")
        first = await stream.__anext__()
        assert first.ok

        with pytest.raises(ResolutionError, match="malformed archive key"):
            await stream.__anext__()
        assert (archive_root / "baz").exists()

    @pytest.mark.asyncio
    async def test_unknown_archive(self, env):
        with pytest.raises(ResolutionError, match="unknown archive"):
            await collect(cmd_rmdir(env, {}, "dat://elsewhere/x"))

    @pytest.mark.asyncio
    async def test_library_root_is_not_an_archive(self, env):
        env.cwd = CWD()
        with pytest.raises(ResolutionError):
            await collect(cmd_rmdir(env, {}, "~"))


class TestRmdirWithMockArchive:
    """The recursive flag is passed unchanged to every removal call."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "opts,expected",
        [({"r": True}, True), ({"recursive": True}, True), ({}, False)],
    )
    async def test_recursive_passthrough(self, opts, expected):
        env, archive = _mock_env()

        await collect(cmd_rmdir(env, opts, "a", "b"))

        assert archive.rmdir.call_args_list == [
            call("/a", recursive=expected),
            call("/b", recursive=expected),
        ]

    @pytest.mark.asyncio
    async def test_outcomes_are_produced_lazily(self):
        env, archive = _mock_env()

        stream = cmd_rmdir(env, {}, "a", "b", "c")
        await stream.__anext__()

        archive.rmdir.assert_awaited_once_with("/a", recursive=False)
        await stream.aclose()

    @pytest.mark.asyncio
    async def test_archive_failure_is_captured(self):
        env, archive = _mock_env()
        archive.rmdir.side_effect = [RuntimeError("disk on fire"), None]

        outcomes = await collect(cmd_rmdir(env, {}, "a", "b"))

        assert str(outcomes[0].error) == "disk on fire"
        assert outcomes[1].ok


class TestRemovalOutcome:
    def test_to_dict_success(self):
        assert RemovalOutcome("/a").to_dict() == {"path": "/a", "ok": True, "error": None}

    def test_to_dict_error(self):
        outcome = RemovalOutcome("/a", error=DirectoryNotEmptyError("/a"))
        assert outcome.to_dict() == {
            "path": "/a",
            "ok": False,
            "error": "Directory not empty: /a",
        }

    def test_to_html_only_reports_errors(self):
        assert RemovalOutcome("/a").to_html() == ""
        html = RemovalOutcome("/a", error=NotFoundError("/a")).to_html()
        assert "rmdir: /a: Path not found: /a" in html

    @pytest.mark.asyncio
    async def test_remove_directory_success(self, archive, archive_root):
        (archive_root / "x").mkdir()
        outcome = await remove_directory(archive, "/x", RemoveOptions())
        assert outcome.ok
        assert outcome.command == "rmdir"

# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tests for LocalArchive."""

import pytest

from datshell.archive import LocalArchive, copy_tree
from datshell.exceptions import (
    AlreadyExistsError,
    DirectoryNotEmptyError,
    NotFoundError,
    PathTypeError,
    PermissionDeniedError,
)


class TestDirectories:
    @pytest.mark.asyncio
    async def test_readdir_sorted_with_stat(self, archive, archive_root):
        (archive_root / "b").mkdir()
        (archive_root / "a.txt").write_text("abc")

        entries = await archive.readdir("/", stat=True)

        assert [e.name for e in entries] == ["a.txt", "b"]
        assert entries[0].stat.size == 3
        assert not entries[0].is_dir
        assert entries[1].is_dir

    @pytest.mark.asyncio
    async def test_readdir_without_stat(self, archive, archive_root):
        (archive_root / "b").mkdir()
        entries = await archive.readdir("/")
        assert entries[0].stat is None

    @pytest.mark.asyncio
    async def test_readdir_missing(self, archive):
        with pytest.raises(NotFoundError):
            await archive.readdir("/nosuch")

    @pytest.mark.asyncio
    async def test_mkdir(self, archive, archive_root):
        await archive.mkdir("/new")
        assert (archive_root / "new").is_dir()

    @pytest.mark.asyncio
    async def test_mkdir_existing(self, archive, archive_root):
        (archive_root / "new").mkdir()
        with pytest.raises(AlreadyExistsError):
            await archive.mkdir("/new")

    @pytest.mark.asyncio
    async def test_mkdir_missing_parent(self, archive):
        with pytest.raises(NotFoundError):
            await archive.mkdir("/a/b")

    @pytest.mark.asyncio
    async def test_rmdir_not_empty(self, archive, archive_root):
        (archive_root / "d").mkdir()
        (archive_root / "d" / "f").write_text("x")

        with pytest.raises(DirectoryNotEmptyError, match="Directory not empty: /d"):
            await archive.rmdir("/d")

    @pytest.mark.asyncio
    async def test_rmdir_recursive(self, archive, archive_root):
        (archive_root / "d" / "e").mkdir(parents=True)
        (archive_root / "d" / "e" / "f").write_text("x")

        await archive.rmdir("/d", recursive=True)

        assert not (archive_root / "d").exists()

    @pytest.mark.asyncio
    async def test_rmdir_missing(self, archive):
        with pytest.raises(NotFoundError):
            await archive.rmdir("/nosuch")

    @pytest.mark.asyncio
    async def test_rmdir_file(self, archive, archive_root):
        (archive_root / "f").write_text("x")
        with pytest.raises(PathTypeError):
            await archive.rmdir("/f", recursive=True)
        assert (archive_root / "f").exists()

    @pytest.mark.asyncio
    async def test_rmdir_root(self, archive, archive_root):
        with pytest.raises(PermissionDeniedError):
            await archive.rmdir("/", recursive=True)
        assert archive_root.exists()


class TestFiles:
    @pytest.mark.asyncio
    async def test_write_and_read(self, archive):
        await archive.write_file("/hello.txt", "héllo")
        assert await archive.read_file("/hello.txt") == "héllo".encode("utf-8")
        assert await archive.read_file("/hello.txt", encoding="utf-8") == "héllo"

    @pytest.mark.asyncio
    async def test_stat(self, archive, archive_root):
        (archive_root / "f").write_text("xyz")
        info = await archive.stat("/f")
        assert not info.is_dir
        assert info.size == 3
        assert info.mtime is not None

    @pytest.mark.asyncio
    async def test_stat_missing(self, archive):
        with pytest.raises(NotFoundError, match="Path not found: /nosuch"):
            await archive.stat("/nosuch")

    @pytest.mark.asyncio
    async def test_unlink(self, archive, archive_root):
        (archive_root / "f").write_text("x")
        await archive.unlink("/f")
        assert not (archive_root / "f").exists()

    @pytest.mark.asyncio
    async def test_rename(self, archive, archive_root):
        (archive_root / "a").write_text("x")
        await archive.rename("/a", "/b")
        assert (archive_root / "b").read_text() == "x"
        assert not (archive_root / "a").exists()

    @pytest.mark.asyncio
    async def test_rename_onto_existing(self, archive, archive_root):
        (archive_root / "a").write_text("x")
        (archive_root / "b").write_text("y")
        with pytest.raises(AlreadyExistsError):
            await archive.rename("/a", "/b")

    @pytest.mark.asyncio
    async def test_paths_stay_inside_root(self, archive, archive_root, tmp_path):
        await archive.write_file("../../escape.txt", "x")
        assert (archive_root / "escape.txt").exists()
        assert not (tmp_path / "escape.txt").exists()


class TestCopy:
    @pytest.mark.asyncio
    async def test_copy_tree_within_archive(self, archive, archive_root):
        (archive_root / "src" / "sub").mkdir(parents=True)
        (archive_root / "src" / "sub" / "f.txt").write_text("x")

        await archive.copy("/src", "/dst")

        assert (archive_root / "dst" / "sub" / "f.txt").read_text() == "x"
        assert (archive_root / "src" / "sub" / "f.txt").exists()

    @pytest.mark.asyncio
    async def test_copy_tree_between_archives(self, archive, archive_root, tmp_path):
        other_root = tmp_path / "other"
        other_root.mkdir()
        other = LocalArchive("other", other_root)
        (archive_root / "post.md").write_text("hello")

        await copy_tree(archive, "/post.md", other, "/copy.md")

        assert (other_root / "copy.md").read_text() == "hello"

    def test_url_and_title(self, archive, tmp_path):
        assert archive.url == "dat://blog"
        assert archive.title == "My Blog"
        assert LocalArchive("x", tmp_path).title == "x"

    @pytest.mark.asyncio
    async def test_copy_tree_lists_source_before_creating_destination(self, archive, archive_root):
        (archive_root / "a").mkdir()
        (archive_root / "a" / "f.txt").write_text("x")

        await copy_tree(archive, "/a", archive, "/a/b")

        assert sorted(p.name for p in (archive_root / "a" / "b").iterdir()) == ["f.txt"]

# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""Tests for command-line parsing and dispatch."""

import inspect

import pytest

from datshell.commands.base import has_flag, parse_command_args, require
from datshell.exceptions import CommandNotFoundError, InvalidArgumentError
from datshell.shell import Shell


class TestParseCommandArgs:
    def test_flags_and_positional(self):
        assert parse_command_args(["-r", "a", "--all", "b"]) == (
            {"r": True, "all": True},
            ["a", "b"],
        )

    def test_combined_short_flags(self):
        opts, _ = parse_command_args(["-ra"])
        assert opts == {"r": True, "a": True}

    def test_value_option(self):
        assert parse_command_args(["--to", "out.txt", "hi"], {"to"}) == ({"to": "out.txt"}, ["hi"])

    def test_value_option_without_value(self):
        assert parse_command_args(["--to"], {"to"}) == ({"to": True}, [])

    def test_equals_value(self):
        assert parse_command_args(["--to=out.txt"]) == ({"to": "out.txt"}, [])

    def test_double_dash_stops_options(self):
        assert parse_command_args(["--", "-r", "x"]) == ({}, ["-r", "x"])

    def test_lone_dash_is_positional(self):
        assert parse_command_args(["-"]) == ({}, ["-"])

    def test_has_flag(self):
        assert has_flag({"recursive": True}, "r", "recursive")
        assert not has_flag({}, "r", "recursive")

    def test_require(self):
        assert require("x", "dst") == "x"
        with pytest.raises(InvalidArgumentError, match="dst is required"):
            require(None, "dst")


class TestShell:
    @pytest.mark.asyncio
    async def test_eval_streaming_command(self, env, archive_root):
        (archive_root / "old posts" / "a").mkdir(parents=True)
        (archive_root / "old posts" / "a" / "post.md").write_text("x")

        stream = await Shell(env).eval_command('rmdir -r "old posts/*"')

        assert inspect.isasyncgen(stream)
        outcomes = [o async for o in stream]
        assert [(o.path, o.ok) for o in outcomes] == [("/old posts/a", True)]

    @pytest.mark.asyncio
    async def test_eval_value_option(self, env, archive_root):
        result = await Shell(env).eval_command("echo --to note.txt hello world")
        assert result is None
        assert (archive_root / "note.txt").read_text() == "hello world"

    @pytest.mark.asyncio
    async def test_eval_plain_command(self, env):
        assert await Shell(env).eval_command("pwd") == "~/blog"

    @pytest.mark.asyncio
    async def test_eval_empty_line(self, env):
        assert await Shell(env).eval_command("   ") is None

    @pytest.mark.asyncio
    async def test_eval_unknown_command(self, env):
        with pytest.raises(CommandNotFoundError):
            await Shell(env).eval_command("frobnicate x")

    @pytest.mark.asyncio
    async def test_eval_unbalanced_quote(self, env):
        with pytest.raises(InvalidArgumentError, match="cannot parse command line"):
            await Shell(env).eval_command('rmdir "oops')

    @pytest.mark.asyncio
    async def test_execute(self, env, archive_root):
        await Shell(env).execute("mkdir", {}, ["made"])
        assert (archive_root / "made").is_dir()

# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""
HELP command - list builtin and installed commands.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from datshell.commands import all_commands, register_command
from datshell.commands.install import installed_commands
from datshell.context import ShellEnv
from datshell.render import render_html


@dataclass
class HelpText:
    methods: List[Dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> List[Dict[str, str]]:
        return self.methods

    def to_html(self) -> str:
        longest = max((len(m["name"]) for m in self.methods), default=0)
        methods = [{**m, "padding": longest + 2 - len(m["name"])} for m in self.methods]
        return render_html("help.html", methods=methods)


@register_command("help", description="Show this help")
async def cmd_help(env: ShellEnv, opts: Mapping[str, Any], *_) -> HelpText:
    methods = [{"name": b.name, "description": b.description} for b in all_commands()]
    methods += [
        {"name": name, "description": f"installed from {url}"}
        for name, url in installed_commands(env).items()
    ]
    return HelpText(methods)

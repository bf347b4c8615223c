# Copyright (c) 2026 Beijing Volcano Engine Technology Co., Ltd.
# SPDX-License-Identifier: Apache-2.0
"""HTML fragment rendering for command results."""

from typing import Any

from jinja2 import DictLoader, Environment

TEMPLATES = {
    "help.html": (
        "<div>"
        "{% for method in methods %}"
        '<div class="text-default">'
        "<span>{{ method.name }}{{ ('&nbsp;' * method.padding) | safe }}</span> "
        '<span class="text-muted">{{ method.description }}</span>'
        "</div>"
        "{% endfor %}"
        "</div>"
    ),
    "library.html": (
        "<div>"
        "{% for archive in archives %}"
        "<div>{{ archive.title }} ({{ archive.url }})</div>"
        "{% endfor %}"
        "</div>"
    ),
    "listing.html": (
        "<div>"
        "{% for entry in entries %}"
        '<div class="text-{{ entry.color }}">'
        "<{{ entry.tag }}>"
        '<a href="{{ entry.url }}"'
        '{% if entry.is_dir %} data-command="{{ entry.command }}"{% endif %}'
        ' target="_blank">{{ entry.name }}</a>'
        "</{{ entry.tag }}>"
        "</div>"
        "{% endfor %}"
        "</div>"
    ),
    "outcome.html": (
        "{% if error %}"
        '<div class="text-error">{{ command }}: {{ path }}: {{ error }}</div>'
        "{% endif %}"
    ),
    "text.html": "<div>{{ text }}</div>",
}

_env = Environment(loader=DictLoader(TEMPLATES), autoescape=True)


def render_html(template_name: str, **context: Any) -> str:
    """Render one of the built-in fragment templates."""
    return _env.get_template(template_name).render(**context)


def to_html(result: Any) -> str:
    """Render any command result as an HTML fragment."""
    if result is None:
        return ""
    if hasattr(result, "to_html"):
        return result.to_html()
    return render_html("text.html", text=str(result))

"""HTML renderer for dashboard menu entries."""
from __future__ import annotations

import html
import math
from typing import Callable, Sequence, TypeVar

from admin_panel.core.models import MenuEntry

T = TypeVar("T")

MenuRenderer = Callable[[MenuEntry], str]


def _render_children(children: Sequence[MenuEntry]) -> str:
    if not children:
        return ""
    ordered = sorted(children, key=lambda child: child.sort)
    inner = "".join(render_menu_entry(child) for child in ordered)
    return f'<ul class="nav-children">{inner}</ul>'


def render_menu_entry(entry: MenuEntry) -> str:
    """Render one entry (and its children) as an ``<li>`` fragment."""

    title = f'<li class="nav-title">{html.escape(entry.title)}</li>' if entry.title else ""
    icon = f'<i class="{html.escape(entry.icon)}"></i>' if entry.icon else ""
    badge = f'<span class="badge">{html.escape(entry.badge)}</span>' if entry.badge else ""
    href = html.escape(entry.url or "#")
    return (
        f"{title}"
        f'<li class="nav-item" data-slug="{html.escape(entry.slug)}">'
        f'<a class="nav-link" href="{href}">{icon}<span>{html.escape(entry.label)}</span>{badge}</a>'
        f"{_render_children(entry.children)}"
        "</li>"
    )


def split_columns(entries: Sequence[T], columns: int = 2) -> list[list[T]]:
    """Split entries into ``columns`` consecutive chunks of ``ceil(n / columns)``."""

    if columns < 1:
        raise ValueError("Le nombre de colonnes doit être supérieur ou égal à 1")
    if not entries:
        return []
    size = math.ceil(len(entries) / columns)
    return [list(entries[index:index + size]) for index in range(0, len(entries), size)]

"""Registre central du tableau de bord : menus, permissions, recherche, ressources."""
from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from admin_panel.core.menu_render import MenuRenderer, render_menu_entry
from admin_panel.core.merge import merge_recursive
from admin_panel.core.models import ItemPermission, MenuEntry, Screen
from admin_panel.core.search import Resolver, SearchableModel, as_searchable, resolve_model, resolve_searchable

logger = logging.getLogger(__name__)

MENU_MAIN = "Main"
MENU_PROFILE = "Profile"


def _is_permission_item(item: Any) -> bool:
    return isinstance(item, Mapping) and "slug" in item


def _permission_identifier(key: Any, item: Any) -> Any:
    if _is_permission_item(item):
        return item["slug"]
    if isinstance(key, str):
        return key
    if isinstance(item, (Mapping, list)):
        return None
    return item


def _collect_slugs(items: Any) -> Iterator[str]:
    if _is_permission_item(items):
        yield items["slug"]
        return
    if isinstance(items, Mapping):
        items = list(items.values())
    if not isinstance(items, list):
        return
    for item in items:
        yield from _collect_slugs(item)


def _normalize_groups(groups: str | Iterable[str] | None) -> list[str]:
    if not groups:
        return []
    if isinstance(groups, str):
        return [groups]
    return list(groups)


class Dashboard:
    """Agrège la configuration déclarée au démarrage et la restitue au rendu.

    Une instance est construite explicitement puis transmise aux appelants ;
    ``flush_state`` réinitialise les menus et l'écran courant.
    """

    MENU_MAIN = MENU_MAIN
    MENU_PROFILE = MENU_PROFILE

    def __init__(
        self,
        *,
        renderer: MenuRenderer = render_menu_entry,
        resolver: Resolver = resolve_model,
    ) -> None:
        self._renderer = renderer
        self._resolver = resolver
        self._resources: dict[str, list[Any]] = {}
        self._permissions: dict[str, Any] = {}
        self._removed: list[str] = []
        self._search: list[SearchableModel] = []
        self._menu: dict[str, list[MenuEntry]] = {}
        self._current_screen: Screen | None = None
        self.flush_state()

    # Menus

    def register_menu_element(self, location: str, entry: MenuEntry) -> Dashboard:
        entries = self._menu.setdefault(location, [])
        if entry.sort == 0:
            entry = entry.with_sort(len(entries) + 1)
        else:
            entry = entry.model_copy(deep=True)
        entries.append(entry)
        logger.debug("Menu entry %s registered in %s (sort=%s)", entry.slug, location, entry.sort)
        return self

    def add_menu_sub_elements(
        self, location: str, slug: str, children: Sequence[MenuEntry]
    ) -> Dashboard:
        entries = self._menu.get(location)
        if entries is None:
            logger.debug("Unknown menu location %s, sub elements for %s ignored", location, slug)
            return self
        self._menu[location] = [
            entry.with_children(list(children)) if entry.slug == slug else entry
            for entry in entries
        ]
        return self

    def menu_entries(self, location: str) -> list[MenuEntry]:
        """Éléments de l'emplacement triés par ``sort`` (tri stable)."""

        entries = self._menu.get(location, [])
        return [entry.model_copy(deep=True) for entry in sorted(entries, key=lambda entry: entry.sort)]

    def render_menu(self, location: str) -> str:
        return "".join(str(self._renderer(entry)) for entry in self.menu_entries(location))

    def is_empty_menu(self, location: str) -> bool:
        return not self._menu.get(location)

    def menu_locations(self) -> list[str]:
        return list(self._menu)

    def flush_state(self) -> None:
        self._menu = {
            MENU_MAIN: [],
            MENU_PROFILE: [],
        }
        self._current_screen = None

    # Permissions

    def register_permissions(self, permission: ItemPermission) -> Dashboard:
        if not permission.group:
            logger.debug("Permission without group ignored")
            return self
        old = self._permissions.get(permission.group, [])
        self._permissions[permission.group] = merge_recursive(old, permission.items)
        return self

    def remove_permission(self, key: str) -> Dashboard:
        self._removed.append(key)
        return self

    def get_permission(self, groups: str | Iterable[str] | None = None) -> dict[str, Any]:
        selected = _normalize_groups(groups)
        result = {
            name: copy.deepcopy(items)
            for name, items in self._permissions.items()
            if not selected or name in selected
        }
        if not self._removed:
            return result
        removed = set(self._removed)
        return {name: self._without_removed(items, removed) for name, items in result.items()}

    @classmethod
    def _without_removed(cls, items: Any, removed: set[str]) -> Any:
        """Retire récursivement les éléments supprimés, à toute profondeur."""

        if _is_permission_item(items):
            return items
        if isinstance(items, Mapping):
            return {
                key: cls._without_removed(item, removed)
                for key, item in items.items()
                if _permission_identifier(key, item) not in removed
            }
        if isinstance(items, list):
            return [
                cls._without_removed(item, removed)
                for item in items
                if _permission_identifier(None, item) not in removed
            ]
        return items

    def get_allow_all_permission(self, groups: str | Iterable[str] | None = None) -> dict[str, bool]:
        allowed: dict[str, bool] = {}
        for items in self.get_permission(groups).values():
            for slug in _collect_slugs(items):
                allowed[slug] = True
        return allowed

    # Recherche

    def register_search(self, models: Iterable[Any] | str) -> Dashboard:
        if isinstance(models, str):
            models = [models]
        self._search.extend(as_searchable(model) for model in models)
        return self

    def get_search(self) -> list[Any]:
        return [resolve_searchable(entry, self._resolver) for entry in self._search]

    # Ressources

    def register_resource(self, key: str, value: Any) -> Dashboard:
        values = list(value) if isinstance(value, (list, tuple)) else [value]
        self._resources[key] = self._resources.get(key, []) + values
        return self

    def get_resource(self, key: str | None = None) -> Any:
        if key is None:
            return copy.deepcopy(self._resources)
        return copy.deepcopy(self._resources.get(key))

    # Écran courant

    def set_current_screen(self, screen: Screen) -> Dashboard:
        self._current_screen = screen
        return self

    def get_current_screen(self) -> Screen | None:
        return self._current_screen

from __future__ import annotations

import pytest

from admin_panel.core.dashboard import MENU_MAIN, MENU_PROFILE, Dashboard
from admin_panel.core.models import MenuEntry, Screen


def _entry(slug: str, sort: int = 0, **extra) -> MenuEntry:
    return MenuEntry(slug=slug, label=slug.upper(), sort=sort, **extra)


def _slugs(entries: list[MenuEntry]) -> list[str]:
    return [entry.slug for entry in entries]


def test_unsorted_entries_get_position_based_sort() -> None:
    dashboard = Dashboard()
    dashboard.register_menu_element(MENU_MAIN, _entry("a"))
    dashboard.register_menu_element(MENU_MAIN, _entry("b"))
    dashboard.register_menu_element(MENU_MAIN, _entry("c", sort=5))

    entries = dashboard.menu_entries(MENU_MAIN)

    assert _slugs(entries) == ["a", "b", "c"]
    assert [entry.sort for entry in entries] == [1, 2, 5]

    rendered = dashboard.render_menu(MENU_MAIN)
    positions = [rendered.index(f'data-slug="{slug}"') for slug in ("a", "b", "c")]
    assert positions == sorted(positions)


def test_unsorted_entry_uses_count_not_max_sort() -> None:
    dashboard = Dashboard()
    dashboard.register_menu_element(MENU_MAIN, _entry("late", sort=10))
    dashboard.register_menu_element(MENU_MAIN, _entry("first", sort=1))
    dashboard.register_menu_element(MENU_MAIN, _entry("third"))

    entries = dashboard.menu_entries(MENU_MAIN)

    assert [(entry.slug, entry.sort) for entry in entries] == [("first", 1), ("third", 3), ("late", 10)]


def test_equal_sort_keeps_registration_order() -> None:
    dashboard = Dashboard()
    dashboard.register_menu_element(MENU_MAIN, _entry("x", sort=3))
    dashboard.register_menu_element(MENU_MAIN, _entry("y", sort=3))
    dashboard.register_menu_element(MENU_MAIN, _entry("z", sort=2))
    dashboard.register_menu_element(MENU_MAIN, _entry("w", sort=3))

    assert _slugs(dashboard.menu_entries(MENU_MAIN)) == ["z", "x", "y", "w"]


def test_duplicate_registration_is_not_deduplicated() -> None:
    dashboard = Dashboard()
    entry = _entry("dup")
    dashboard.register_menu_element(MENU_MAIN, entry)
    dashboard.register_menu_element(MENU_MAIN, entry)

    assert _slugs(dashboard.menu_entries(MENU_MAIN)) == ["dup", "dup"]
    assert entry.sort == 0


def test_new_location_is_created_on_registration() -> None:
    dashboard = Dashboard()
    assert dashboard.is_empty_menu("Systems")

    dashboard.register_menu_element("Systems", _entry("cache"))

    assert not dashboard.is_empty_menu("Systems")
    assert dashboard.menu_locations() == [MENU_MAIN, MENU_PROFILE, "Systems"]


def test_flush_state_resets_menus_and_screen() -> None:
    dashboard = Dashboard()
    dashboard.register_menu_element(MENU_MAIN, _entry("a"))
    dashboard.register_menu_element(MENU_PROFILE, _entry("b"))
    dashboard.register_menu_element("Systems", _entry("c"))
    dashboard.set_current_screen(Screen(name="users"))
    assert not dashboard.is_empty_menu(MENU_MAIN)
    assert not dashboard.is_empty_menu(MENU_PROFILE)

    dashboard.flush_state()

    assert dashboard.is_empty_menu(MENU_MAIN)
    assert dashboard.is_empty_menu(MENU_PROFILE)
    assert dashboard.menu_locations() == [MENU_MAIN, MENU_PROFILE]
    assert dashboard.get_current_screen() is None
    assert dashboard.render_menu(MENU_MAIN) == ""


def test_add_menu_sub_elements_targets_matching_slug() -> None:
    dashboard = Dashboard()
    dashboard.register_menu_element(MENU_MAIN, _entry("users"))
    dashboard.register_menu_element(MENU_MAIN, _entry("roles"))

    dashboard.add_menu_sub_elements(MENU_MAIN, "users", [_entry("users.create"), _entry("users.list")])

    entries = {entry.slug: entry for entry in dashboard.menu_entries(MENU_MAIN)}
    assert _slugs(entries["users"].children) == ["users.create", "users.list"]
    assert entries["roles"].children == []

    dashboard.add_menu_sub_elements(MENU_MAIN, "users", [_entry("users.archive")])
    entries = {entry.slug: entry for entry in dashboard.menu_entries(MENU_MAIN)}
    assert _slugs(entries["users"].children) == ["users.archive"]


def test_add_menu_sub_elements_is_silent_when_nothing_matches() -> None:
    dashboard = Dashboard()
    dashboard.register_menu_element(MENU_MAIN, _entry("users"))

    dashboard.add_menu_sub_elements(MENU_MAIN, "missing", [_entry("child")])
    dashboard.add_menu_sub_elements("Unknown", "users", [_entry("child")])

    assert dashboard.menu_entries(MENU_MAIN)[0].children == []
    assert "Unknown" not in dashboard.menu_locations()


def test_registered_entries_are_owned_by_registry() -> None:
    dashboard = Dashboard()
    entry = _entry("users", sort=4)
    dashboard.register_menu_element(MENU_MAIN, entry)

    entry.label = "Changed"
    returned = dashboard.menu_entries(MENU_MAIN)
    returned[0].label = "Also changed"

    assert dashboard.menu_entries(MENU_MAIN)[0].label == "USERS"


def test_render_error_propagates() -> None:
    def broken(entry: MenuEntry) -> str:
        if entry.slug == "bad":
            raise RuntimeError("template failure")
        return entry.slug

    dashboard = Dashboard(renderer=broken)
    dashboard.register_menu_element(MENU_MAIN, _entry("ok"))
    dashboard.register_menu_element(MENU_MAIN, _entry("bad"))

    with pytest.raises(RuntimeError, match="template failure"):
        dashboard.render_menu(MENU_MAIN)


def test_custom_renderer_output_is_concatenated_in_order() -> None:
    dashboard = Dashboard(renderer=lambda entry: f"[{entry.slug}]")
    dashboard.register_menu_element(MENU_PROFILE, _entry("logout", sort=9))
    dashboard.register_menu_element(MENU_PROFILE, _entry("profile"))

    assert dashboard.render_menu(MENU_PROFILE) == "[profile][logout]"


def test_is_empty_menu_does_not_render() -> None:
    calls: list[str] = []
    dashboard = Dashboard(renderer=lambda entry: calls.append(entry.slug) or "")
    dashboard.register_menu_element(MENU_MAIN, _entry("a"))

    assert dashboard.is_empty_menu(MENU_MAIN) is False
    assert calls == []


def test_blank_slug_is_rejected() -> None:
    with pytest.raises(ValueError):
        MenuEntry(slug="   ", label="Blank")

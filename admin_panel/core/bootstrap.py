"""Enregistrements par défaut du tableau de bord."""
from __future__ import annotations

from typing import Callable, Iterable

from admin_panel.core import config
from admin_panel.core.dashboard import MENU_PROFILE, Dashboard
from admin_panel.core.models import ItemPermission, MenuEntry

Bootstrapper = Callable[[Dashboard], None]

SYSTEMS_GROUP = "System"


def register_platform_defaults(dashboard: Dashboard) -> None:
    dashboard.register_permissions(
        ItemPermission.group_of(SYSTEMS_GROUP)
        .add_permission("platform.index", "Main")
        .add_permission("platform.systems.roles", "Roles")
        .add_permission("platform.systems.users", "Users")
    )
    dashboard.register_menu_element(
        MENU_PROFILE,
        MenuEntry(slug="profile", label="Profile", icon="icon-user", url=config.prefix("/profile")),
    )


def register_configured_resources(dashboard: Dashboard) -> None:
    """Ajoute les feuilles de style et scripts déclarés sous l'option ``resource``."""

    resources = config.option("resource", {}) or {}
    for key, values in resources.items():
        dashboard.register_resource(key, values)


DEFAULT_BOOTSTRAPPERS: tuple[Bootstrapper, ...] = (
    register_platform_defaults,
    register_configured_resources,
)


def build_dashboard(bootstrappers: Iterable[Bootstrapper] = DEFAULT_BOOTSTRAPPERS) -> Dashboard:
    dashboard = Dashboard()
    for bootstrap in bootstrappers:
        bootstrap(dashboard)
    return dashboard

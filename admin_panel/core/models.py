"""Modèles Pydantic du tableau de bord."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MenuEntry(BaseModel):
    """Élément de menu rattaché à un emplacement (``Main``, ``Profile``...)."""

    slug: str = Field(..., min_length=1)
    label: str
    icon: str | None = None
    url: str | None = None
    title: str | None = None
    badge: str | None = None
    sort: int = 0
    children: list[MenuEntry] = Field(default_factory=list)

    @field_validator("slug")
    @classmethod
    def _strip_slug(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("Le slug du menu ne peut pas être vide")
        return normalized

    def with_sort(self, sort: int) -> MenuEntry:
        return self.model_copy(update={"sort": sort}, deep=True)

    def with_children(self, children: list[MenuEntry]) -> MenuEntry:
        copied = [child.model_copy(deep=True) for child in children]
        return self.model_copy(update={"children": copied}, deep=True)


class ItemPermission(BaseModel):
    """Groupe de permissions contribué par un module."""

    group: str | None = None
    items: list[Any] | dict[str, Any] = Field(default_factory=list)

    @classmethod
    def group_of(cls, name: str) -> ItemPermission:
        return cls(group=name)

    def add_permission(self, slug: str, description: str) -> ItemPermission:
        entry = {"slug": slug, "description": description}
        if isinstance(self.items, dict):
            self.items[slug] = entry
        else:
            self.items.append(entry)
        return self


class Screen(BaseModel):
    """Descripteur de l'écran en cours de rendu."""

    model_config = ConfigDict(frozen=True)

    name: str
    title: str | None = None
    description: str | None = None
    controller: str | None = None


class MenuEntriesResponse(BaseModel):
    location: str
    entries: list[MenuEntry] = Field(default_factory=list)
    columns: list[list[MenuEntry]] | None = None


class AssetsStatus(BaseModel):
    current: bool
    version: str

"""Modèles recherchables : références paresseuses et résolution."""
from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)

_RAISE = object()

Resolver = Callable[[str], Any]


def import_string(dotted_path: str, default: Any = _RAISE) -> Any:
    """Importe ``package.module:Attr`` ou ``package.module.Attr``.

    Sans ``default``, l'échec lève ``ImportError``.
    """

    if ":" in dotted_path:
        module_path, _, attribute = dotted_path.partition(":")
    else:
        module_path, _, attribute = dotted_path.rpartition(".")
    try:
        if not module_path or not attribute:
            raise ImportError(f"{dotted_path!r} n'est pas un chemin d'import valide")
        module = importlib.import_module(module_path)
        return getattr(module, attribute)
    except (ImportError, AttributeError) as exc:
        if default is not _RAISE:
            return default
        raise ImportError(f"Impossible d'importer {dotted_path!r}") from exc


def resolve_model(name: str) -> Any:
    """Résolveur par défaut : importe la classe puis l'instancie."""

    target = import_string(name)
    if isinstance(target, type):
        return target()
    return target


@dataclass(frozen=True)
class UnresolvedModel:
    name: str


@dataclass(frozen=True)
class ResolvedModel:
    instance: Any


SearchableModel = UnresolvedModel | ResolvedModel


def as_searchable(model: Any) -> SearchableModel:
    if isinstance(model, (UnresolvedModel, ResolvedModel)):
        return model
    if isinstance(model, str):
        return UnresolvedModel(model)
    return ResolvedModel(model)


def resolve_searchable(entry: SearchableModel, resolver: Resolver = resolve_model) -> Any:
    if isinstance(entry, ResolvedModel):
        return entry.instance
    logger.debug("Resolving searchable model %s", entry.name)
    return resolver(entry.name)

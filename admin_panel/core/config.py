"""Configuration statique et options du tableau de bord."""
from __future__ import annotations

import copy
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from admin_panel.core.env_loader import load_env
from admin_panel.core.search import import_string

logger = logging.getLogger(__name__)

VERSION = "1.4.0"

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
PROJECT_ROOT = PACKAGE_ROOT.parent

_TRUE_VALUES = {"1", "true", "yes", "on", "y", "t"}
_FALSE_VALUES = {"0", "false", "no", "off", "n", "f"}

_MISSING = object()


def _get_env_flag(name: str, default: bool = False) -> bool:
    """Retourne une valeur booléenne à partir d'une variable d'environnement."""

    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _get_env_path(name: str, default: Path) -> Path:
    value = os.getenv(name)
    if not value or not value.strip():
        return default
    return Path(value.strip()).expanduser()


@dataclass(frozen=True)
class Settings:
    """Paramètres globaux lus depuis l'environnement."""

    PREFIX: str = "admin"
    PUBLIC_PATH: Path = PROJECT_ROOT / "public"
    LOG_DIR: Path = PROJECT_ROOT / "logs"
    DEBUG: bool = False


def load_settings() -> Settings:
    load_env()
    return Settings(
        PREFIX=os.getenv("ADMIN_PANEL_PREFIX", "admin").strip(),
        PUBLIC_PATH=_get_env_path("ADMIN_PANEL_PUBLIC_PATH", PROJECT_ROOT / "public"),
        LOG_DIR=_get_env_path("ADMIN_PANEL_LOG_DIR", PROJECT_ROOT / "logs"),
        DEBUG=_get_env_flag("ADMIN_PANEL_DEBUG", default=False),
    )


settings = load_settings()

_options: dict[str, Any] = {}


def version() -> str:
    return VERSION


def configure(options: Mapping[str, Any]) -> None:
    """Remplace l'intégralité des options du tableau de bord."""
    global _options
    _options = copy.deepcopy(dict(options))
    logger.debug("Dashboard options configured: %s", sorted(_options))


def options() -> dict[str, Any]:
    return copy.deepcopy(_options)


def option(key: str, default: Any = None) -> Any:
    """Lit une option, en acceptant la notation pointée (``models.user``)."""

    if key in _options:
        return _options[key]
    current: Any = _options
    for segment in key.split("."):
        if not isinstance(current, Mapping) or segment not in current:
            return default
        current = current[segment]
    return current


def model(key: str, default: str | None = None) -> str:
    """Nom (chemin pointé) du modèle configuré sous ``models.<key>``."""

    return option(f"models.{key}", default if default is not None else key)


def model_class(key: str, default: str | None = None) -> Any:
    """Instancie le modèle configuré si le chemin désigne une classe importable."""

    name = model(key, default)
    target = import_string(name, default=_MISSING)
    if isinstance(target, type):
        return target()
    return name


def use_model(key: str, custom: str) -> None:
    updated = copy.deepcopy(_options)
    models = dict(updated.get("models") or {})
    models[key] = custom
    updated["models"] = models
    configure(updated)


def prefix(path: str = "") -> str:
    """Retourne la route préfixée, avec une seule barre oblique en tête."""

    current = option("prefix", settings.PREFIX) or ""
    return "/" + f"{current}{path}".lstrip("/")


def path(sub: str = "") -> Path:
    """Chemin réel vers les fichiers du paquet."""

    target = PACKAGE_ROOT / sub if sub else PACKAGE_ROOT
    return target.resolve()


__all__ = [
    "Settings",
    "VERSION",
    "configure",
    "load_settings",
    "model",
    "model_class",
    "option",
    "options",
    "path",
    "prefix",
    "settings",
    "use_model",
    "version",
]

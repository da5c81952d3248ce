"""Vérification et publication des ressources front-end du tableau de bord."""
from __future__ import annotations

import logging
import shutil
from pathlib import Path

from admin_panel.core import config

logger = logging.getLogger(__name__)

MANIFEST_NAME = "mix-manifest.json"
PUBLISHED_SUBDIR = Path("vendor") / "admin_panel"
PUBLISH_COMMAND = "python -m admin_panel publish"


class StaleAssetsError(RuntimeError):
    """Les ressources publiées sont absentes."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or f"Dashboard assets are not published. Please run: `{PUBLISH_COMMAND}`"
        )


def bundled_public_dir() -> Path:
    return config.path("public")


def published_public_dir() -> Path:
    return config.settings.PUBLIC_PATH / PUBLISHED_SUBDIR


def assets_are_current(published: Path | None = None, bundled: Path | None = None) -> bool:
    """Compare octet par octet le manifeste publié au manifeste embarqué."""

    published_path = published or published_public_dir() / MANIFEST_NAME
    bundled_path = bundled or bundled_public_dir() / MANIFEST_NAME
    if not published_path.exists():
        raise StaleAssetsError()
    current = published_path.read_bytes() == bundled_path.read_bytes()
    if not current:
        logger.warning("Published dashboard assets differ from %s", bundled_path)
    return current


def publish_assets(target: Path | None = None, *, force: bool = False) -> Path:
    """Copie le dossier ``public`` embarqué vers l'emplacement publié."""

    destination = target or published_public_dir()
    source = bundled_public_dir()
    if destination.exists() and force:
        shutil.rmtree(destination)
    elif destination.exists():
        logger.info("Refreshing published assets in %s", destination)
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copytree(source, destination, dirs_exist_ok=True)
    logger.info("Dashboard assets published to %s", destination)
    return destination


__all__ = [
    "MANIFEST_NAME",
    "PUBLISH_COMMAND",
    "StaleAssetsError",
    "assets_are_current",
    "bundled_public_dir",
    "publish_assets",
    "published_public_dir",
]

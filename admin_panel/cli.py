"""Commandes en ligne du tableau de bord (publication et vérification des ressources)."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from admin_panel.core import assets, config

logger = logging.getLogger("admin_panel.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="admin_panel", description="Outils du tableau de bord d'administration")
    parser.add_argument("--version", action="version", version=f"%(prog)s {config.version()}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    publish = subparsers.add_parser("publish", help="Publie les ressources front-end")
    publish.add_argument("--target", type=Path, default=None, help="Dossier de destination")
    publish.add_argument("--force", action="store_true", help="Supprime la publication existante avant copie")

    check = subparsers.add_parser("check-assets", help="Vérifie que les ressources publiées sont à jour")
    check.add_argument("--published", type=Path, default=None, help="Manifeste publié à comparer")

    serve = subparsers.add_parser("serve", help="Démarre le serveur HTTP")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")
    return parser


def _check_assets(published: Path | None) -> int:
    try:
        current = assets.assets_are_current(published)
    except assets.StaleAssetsError as exc:
        print(f"Erreur : {exc}")
        return 1
    if not current:
        print(f"Ressources obsolètes. Relancez : `{assets.PUBLISH_COMMAND}`")
        return 1
    print("Ressources à jour.")
    return 0


def _serve(host: str, port: int, reload: bool) -> int:
    import uvicorn

    from admin_panel.core.logging_config import configure_logging

    configure_logging()
    uvicorn.run("admin_panel.app:app", host=host, port=port, reload=reload, log_config=None)
    return 0


def main(argv=None) -> int:
    """Point d'entrée principal de la ligne de commande."""
    args = _build_parser().parse_args(argv)
    logger.debug("Commande demandée : %s", args.command)
    if args.command == "publish":
        destination = assets.publish_assets(args.target, force=args.force)
        print(f"Ressources publiées dans {destination}")
        return 0
    if args.command == "check-assets":
        return _check_assets(args.published)
    return _serve(args.host, args.port, args.reload)

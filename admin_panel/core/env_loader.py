"""Chargement minimaliste des variables depuis le fichier .env."""
from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_ENV_PATH = Path(__file__).resolve().parents[2] / ".env"

_loaded = False
_lock = threading.Lock()


def parse_env_line(line: str) -> tuple[str, str] | None:
    """Retourne le couple (clé, valeur) d'une ligne ``KEY=value`` ou ``None``."""

    stripped = line.strip()
    if not stripped or stripped.startswith("#") or "=" not in stripped:
        return None
    if stripped.startswith("export "):
        stripped = stripped[len("export "):].lstrip()
    key, value = stripped.split("=", 1)
    key = key.strip()
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        value = value[1:-1]
    if not key:
        return None
    return key, value


def load_env(path: Path | None = None, *, force: bool = False) -> None:
    """Charge les variables du fichier .env sans écraser l'environnement existant."""
    global _loaded
    if _loaded and not force:
        return
    with _lock:
        if _loaded and not force:
            return
        env_path = path or DEFAULT_ENV_PATH
        if env_path.exists():
            count = 0
            for line in env_path.read_text(encoding="utf-8").splitlines():
                parsed = parse_env_line(line)
                if parsed is None:
                    continue
                os.environ.setdefault(*parsed)
                count += 1
            logger.debug("Loaded %s variables from %s", count, env_path)
        _loaded = True

"""Point d'entrée ``python -m admin_panel``."""

from __future__ import annotations

from admin_panel.cli import main

if __name__ == "__main__":  # pragma: no cover - point d'entrée standard
    raise SystemExit(main())

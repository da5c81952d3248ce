"""Registre et vues d'administration du tableau de bord."""

from admin_panel.core.config import VERSION as __version__

__all__ = ["__version__"]

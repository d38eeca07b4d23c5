"""
Logging package for ``craft_beer``.

Modules call ``get_logger(__name__)`` to share the console and master-file
handlers configured in ``config/craft_beer.yml``.
"""

from .logger import get_logger, list_active_loggers

__all__ = [
    "get_logger",
    "list_active_loggers",
]

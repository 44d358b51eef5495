"""Load and validate the collection extension configuration.

This subpackage parses the ``collection.yaml`` file, applies defaults for
every missing setting, checks that sidebar formats reference configured
writers, and produces a :class:`CollectionConfig` that the portlet and notice
renderers receive explicitly. The primary entry point is
:func:`load_collection_config`.

Examples
--------
>>> from pathlib import Path
>>> from collection_hooks.config import load_collection_config
>>> config = load_collection_config(Path("config/collection.yaml"))  # doctest: +SKIP
>>> config.is_collectible(0)  # doctest: +SKIP
True
"""

from .loader import build_collection_config, load_collection_config
from .models import CollectionConfig, CollectionConfigError

__all__ = [
    "CollectionConfig",
    "CollectionConfigError",
    "build_collection_config",
    "load_collection_config",
]

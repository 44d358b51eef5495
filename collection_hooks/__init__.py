"""Book creator portlet and site notice for wiki collections.

This package decides which "book creator" links a wiki page view should show
and renders them: a sidebar section for starting book creation and exporting
the current page, and a site notice box for adding pages to the book kept in
the user's session.

Exports
-------
- ``CollectionHooks``: the hook callbacks a wiki host calls per request.
- ``app``: Cyclopts application for previewing the rendered UI.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from collection_hooks import CollectionHooks
>>> from collection_hooks.config import CollectionConfig
>>> hooks = CollectionHooks(CollectionConfig())
>>> hooks.config.portlet_formats
['rl']
"""

from __future__ import annotations

from .cli import app, main
from .hooks import CollectionHooks

__all__ = ["CollectionHooks", "app", "main"]

"""Hook callbacks wiring the book creator UI into a wiki host.

:class:`CollectionHooks` is instantiated once per process with the feature
configuration. The host then calls its three callbacks for every page view,
passing the request context and the collection session it fetched for that
request:

* :meth:`CollectionHooks.on_sidebar_before_output` adds the
  ``coll-print_export`` section and drops the toolbox print link.
* :meth:`CollectionHooks.on_site_notice_after` appends the book creator box.
* :meth:`CollectionHooks.on_output_page_check_last_modified` lets the
  collection timestamp take part in HTTP cache validation.

Example
-------
>>> from collection_hooks import CollectionHooks
>>> from collection_hooks.config import CollectionConfig
>>> from collection_hooks.context import PageRef, RenderContext
>>> from collection_hooks.session import CollectionSession
>>> hooks = CollectionHooks(CollectionConfig())
>>> ctx = RenderContext(title=PageRef(0, "Physics", latest_revision_id=3))
>>> sidebar = hooks.on_sidebar_before_output(ctx, CollectionSession(), {})
>>> [entry["id"] for entry in sidebar["coll-print_export"]]
['coll-create_a_book', 'coll-download-as-rl', 't-print']
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ._constants import (
    LAST_MODIFIED_KEY,
    PORTLET_SECTION,
    TOOLBOX_PRINT_KEY,
    TOOLBOX_SECTION,
)
from .messages import MessageCatalog
from .modes import BoxMode
from .notice import BookCreatorBox, select_box_mode
from .portlet import LinkDescriptor, get_portlet

if typ.TYPE_CHECKING:
    from markupsafe import Markup

    from .config import CollectionConfig
    from .context import RenderContext
    from .session import CollectionSession

Sidebar = dict[str, typ.Any]


class CollectionHooks:
    """Entry points the wiki host calls while rendering a page."""

    def __init__(
        self, config: CollectionConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the hooks and their Jinja environment.

        Parameters
        ----------
        config : CollectionConfig
            Feature configuration shared by every request.
        templates_dir : Path, optional
            Directory containing the box and link templates. Defaults to
            ``collection_hooks/templates``.
        """
        self.config = config
        self.messages = MessageCatalog(config.messages)
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.box = BookCreatorBox(self.env, config, self.messages)

    def _with_namespace_names(self, ctx: RenderContext) -> RenderContext:
        """Return ``ctx`` with the configured prefix applied to its title."""
        title = ctx.title
        if title is None:
            return ctx
        resolved = title.with_namespace_names(self.config.namespace_names)
        if resolved is title:
            return ctx
        return dc.replace(ctx, title=resolved)

    def get_portlet(
        self, ctx: RenderContext, session: CollectionSession
    ) -> list[LinkDescriptor] | None:
        """Return the sidebar entries, or None when the section is hidden."""
        ctx = self._with_namespace_names(ctx)
        return get_portlet(ctx, self.config, session, self.messages)

    def on_sidebar_before_output(
        self, ctx: RenderContext, session: CollectionSession, sidebar: Sidebar
    ) -> Sidebar:
        """Add the ``coll-print_export`` section to ``sidebar`` in place.

        The toolbox ``print`` entry is removed because the section carries its
        own printable version link. ``sidebar`` is returned for convenience.
        """
        portlet = self.get_portlet(ctx, session)
        if portlet:
            toolbox = sidebar.get(TOOLBOX_SECTION)
            if isinstance(toolbox, dict):
                toolbox.pop(TOOLBOX_PRINT_KEY, None)
            sidebar[PORTLET_SECTION] = [entry.as_dict() for entry in portlet]
        return sidebar

    def on_site_notice_after(
        self, site_notice: str, ctx: RenderContext, session: CollectionSession
    ) -> str:
        """Return ``site_notice`` with the book creator box appended, if shown."""
        mode = select_box_mode(ctx, self.config, session)
        if mode is None:
            return site_notice
        return site_notice + str(self.render_book_creator_box(ctx, session, mode))

    def render_book_creator_box(
        self,
        ctx: RenderContext,
        session: CollectionSession,
        mode: BoxMode | str | None = BoxMode.NONE,
    ) -> Markup:
        """Render the box for the current page; ``mode`` may be a hint string."""
        if not isinstance(mode, BoxMode):
            mode = BoxMode.from_hint(mode)
        return self.box.render(self._with_namespace_names(ctx), session, mode)

    def on_output_page_check_last_modified(
        self, modified_times: dict[str, dt.datetime], session: CollectionSession
    ) -> dict[str, dt.datetime]:
        """Record the collection timestamp under ``collection`` when present."""
        timestamp = session.timestamp
        if timestamp is not None:
            modified_times[LAST_MODIFIED_KEY] = timestamp
        return modified_times


__all__ = ["CollectionHooks", "Sidebar"]

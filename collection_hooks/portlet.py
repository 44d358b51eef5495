"""Sidebar portlet listing book creator and export links.

The portlet replaces the toolbox "Printable version" entry with a
``coll-print_export`` section holding, in order, the switch that starts or
stops book creation, one "Download as" link per sidebar export format, and
the printable version link.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ._constants import (
    CMD_RENDER,
    CMD_START,
    CMD_STOP,
    CREATE_BOOK_ID,
    DISABLE_ID,
    DOWNLOAD_ID_TEMPLATE,
    PARAM_ARTICLE_TITLE,
    PARAM_COMMAND,
    PARAM_OLDID,
    PARAM_REFERER,
    PARAM_RETURN_TO,
    PARAM_WRITER,
    PRINT_ID,
    VISIBLE_ACTIONS,
)
from .context import BOOK_PAGE

if typ.TYPE_CHECKING:
    from .config import CollectionConfig
    from .context import PageRef, RenderContext
    from .messages import MessageCatalog
    from .session import CollectionSession

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class LinkDescriptor:
    """One sidebar entry."""

    text: str
    id: str
    href: str

    def as_dict(self) -> dict[str, str]:
        """Return the entry in the host's sidebar array shape."""
        return {"text": self.text, "id": self.id, "href": self.href}


def should_show_portlet(ctx: RenderContext, config: CollectionConfig) -> bool:
    """Return whether the collection sidebar section applies to this request."""
    title = ctx.title
    if title is None or not title.exists:
        logger.debug("portlet hidden: page does not exist")
        return False
    if not config.is_collectible(title.namespace):
        logger.debug("portlet hidden: namespace %s not collectible", title.namespace)
        return False
    action = ctx.request.get_val("action", "view")
    if action not in VISIBLE_ACTIONS:
        logger.debug("portlet hidden: action %r", action)
        return False
    return True


def get_session_switch(
    ctx: RenderContext,
    config: CollectionConfig,
    session: CollectionSession,
    messages: MessageCatalog,
) -> list[LinkDescriptor]:
    """Return the entry that turns book creation on or off, if any."""
    title = typ.cast("PageRef", ctx.title)
    referer = title.prefixed_text
    if not session.is_enabled():
        if config.disable_sidebar_link:
            return []
        return [
            LinkDescriptor(
                text=messages.text(CREATE_BOOK_ID),
                id=CREATE_BOOK_ID,
                href=ctx.urls.local_url(
                    BOOK_PAGE, {PARAM_COMMAND: CMD_START, PARAM_REFERER: referer}
                ),
            )
        ]
    return [
        LinkDescriptor(
            text=messages.text(DISABLE_ID),
            id=DISABLE_ID,
            href=ctx.urls.local_url(
                BOOK_PAGE, {PARAM_COMMAND: CMD_STOP, PARAM_REFERER: referer}
            ),
        )
    ]


def initialize_params(ctx: RenderContext) -> dict[str, object]:
    """Return the base query used by the "Download as" links.

    An explicit ``oldid`` in the request wins; otherwise the page's latest
    revision is used.
    """
    title = typ.cast("PageRef", ctx.title)
    ptext = title.prefixed_text
    oldid = ctx.request.get_val(PARAM_OLDID)
    return {
        PARAM_COMMAND: CMD_RENDER,
        PARAM_ARTICLE_TITLE: ptext,
        PARAM_RETURN_TO: ptext,
        PARAM_OLDID: oldid if oldid and oldid != "0" else title.latest_revision_id,
    }


def get_portlet(
    ctx: RenderContext,
    config: CollectionConfig,
    session: CollectionSession,
    messages: MessageCatalog,
) -> list[LinkDescriptor] | None:
    """Return the sidebar section entries, or None when it must not show.

    ``None`` means "no section", which differs from an empty list.
    """
    if config.portlet_for_logged_in_users_only and not ctx.user.is_registered:
        logger.debug("portlet hidden: anonymous user")
        return None
    if not should_show_portlet(ctx, config):
        return None

    title = typ.cast("PageRef", ctx.title)
    entries = get_session_switch(ctx, config, session, messages)

    params = initialize_params(ctx)
    for writer in config.portlet_formats:
        query = {**params, PARAM_WRITER: writer}
        entries.append(
            LinkDescriptor(
                text=messages.text("coll-download_as", config.format_label(writer)),
                id=DOWNLOAD_ID_TEMPLATE.format(writer=writer),
                href=ctx.urls.local_url(BOOK_PAGE, query),
            )
        )

    if not ctx.output.printable:
        entries.append(
            LinkDescriptor(
                text=messages.text("printableversion"),
                id=PRINT_ID,
                href=ctx.urls.local_url(title, {"printable": "yes"}),
            )
        )
    return entries


__all__ = [
    "LinkDescriptor",
    "get_portlet",
    "get_session_switch",
    "initialize_params",
    "should_show_portlet",
]

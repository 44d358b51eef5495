"""Book creator box appended to the site notice.

While book creation is active, every eligible page view shows a box above
the content with links to add or remove the page, show the book, and get
suggestions. On the Book special page itself the box switches into the
``SHOWBOOK`` or ``SUGGEST`` mode, where the current page is not addable.
"""

from __future__ import annotations

import logging
import typing as typ

from markupsafe import Markup

from ._constants import (
    BOOK_SPECIAL_PAGE,
    CMD_STOP,
    CMD_SUGGEST,
    PARAM_COMMAND,
    PARAM_OLDID,
    PARAM_REFERER,
    SCRIPT_MODULE,
    STYLE_MODULE,
    VISIBLE_ACTIONS,
)
from .context import BOOK_PAGE, PageRef
from .fragments import LinkFragments
from .modes import BoxMode

if typ.TYPE_CHECKING:
    from jinja2 import Environment

    from .config import CollectionConfig
    from .context import RenderContext
    from .messages import MessageCatalog
    from .session import CollectionSession

logger = logging.getLogger(__name__)


def select_box_mode(
    ctx: RenderContext, config: CollectionConfig, session: CollectionSession
) -> BoxMode | None:
    """Return the mode the box should render in, or None for no box."""
    action = ctx.request.get_val("action")
    if action and action not in VISIBLE_ACTIONS:
        return None
    if not session.is_enabled():
        return None

    title = ctx.title
    if title is None:
        return None
    if title.is_special(BOOK_SPECIAL_PAGE):
        command = ctx.request.get_val(PARAM_COMMAND, "") or ""
        if command == CMD_SUGGEST:
            return BoxMode.SUGGEST
        if command == "":
            return BoxMode.SHOWBOOK
        return None

    if not title.exists:
        return None
    if not config.is_collectible(title.namespace):
        return None
    return BoxMode.NONE


class BookCreatorBox:
    """Render the book creator box from the ``create_book`` template."""

    def __init__(
        self,
        env: Environment,
        config: CollectionConfig,
        messages: MessageCatalog,
    ) -> None:
        self.env = env
        self.config = config
        self.messages = messages
        self.template = env.get_template("create_book.jinja")

    def render(
        self,
        ctx: RenderContext,
        session: CollectionSession,
        mode: BoxMode = BoxMode.NONE,
    ) -> Markup:
        """Return the box HTML and register its client-side modules.

        An ``oldid`` equal to the page's latest revision is treated as no
        explicit revision.
        """
        title = typ.cast("PageRef", ctx.title)
        image_path = self.config.image_path
        ptext = title.prefixed_text
        oldid = ctx.request.get_int(PARAM_OLDID, 0)
        if oldid == title.latest_revision_id:
            oldid = 0

        ctx.output.add_modules(SCRIPT_MODULE)
        ctx.output.add_module_styles(STYLE_MODULE)

        urls = ctx.urls
        fragments = LinkFragments(
            self.env,
            self.messages,
            urls,
            suggestions_enabled=self.config.suggestions_enabled,
        )
        help_url = ""
        if self.config.help_page:
            help_page = PageRef.from_prefixed(
                self.config.help_page, namespace_names=self.config.namespace_names
            )
            help_url = urls.local_url(help_page)

        logger.debug("rendering book creator box for %s in mode %r", ptext, mode.value)
        html = self.template.render(
            actions_html=fragments.box_content(
                image_path, mode, title, oldid, session
            ),
            image_path=image_path,
            title=self.messages.text("coll-book_creator"),
            disable={
                "url": urls.local_url(
                    BOOK_PAGE, {PARAM_COMMAND: CMD_STOP, PARAM_REFERER: ptext}
                ),
                "title": self.messages.text("coll-book_creator_disable_tooltip"),
                "label": self.messages.text("coll-disable"),
            },
            help={
                "url": help_url,
                "label": self.messages.text("coll-help"),
                "title": self.messages.text("coll-help_tooltip"),
                "icon": f"{image_path}/silk-help.png",
            },
        )
        return Markup(html)


__all__ = ["BookCreatorBox", "select_box_mode"]

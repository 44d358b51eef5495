"""HTML link fragments shown inside the book creator box.

Three fragments make up the box actions:

* the add/remove link, whose variant mirrors whether the current page is
  already in the book,
* the "Show book (N pages)" link, static while the book itself is shown,
* the "Suggest pages" link, static while suggestions are shown, and omitted
  entirely when suggestions are disabled.

Each fragment is a pure function of its arguments; the collection session is
passed in by the caller rather than looked up here.
"""

from __future__ import annotations

import json
import typing as typ

from markupsafe import Markup

from ._constants import (
    CMD_ADD_ARTICLE,
    CMD_ADD_CATEGORY,
    CMD_REMOVE_ARTICLE,
    CMD_SUGGEST,
    NS_CATEGORY,
    PARAM_ARTICLE_TITLE,
    PARAM_CATEGORY_TITLE,
    PARAM_COMMAND,
    PARAM_OLDID,
)
from .context import BOOK_PAGE
from .modes import BoxMode

if typ.TYPE_CHECKING:
    from jinja2 import Environment

    from .context import PageRef, UrlBuilder
    from .messages import MessageCatalog
    from .session import CollectionSession

JS_PAGE_ARGS = "mw.config.get('wgNamespaceNumber'), mw.config.get('wgTitle')"
ICON_STYLE = "vertical-align: text-bottom"


class LinkFragments:
    """Render the add/remove, show-book and suggest links."""

    def __init__(
        self,
        env: Environment,
        messages: MessageCatalog,
        urls: UrlBuilder,
        *,
        suggestions_enabled: bool = True,
    ) -> None:
        self.messages = messages
        self.urls = urls
        self.suggestions_enabled = suggestions_enabled
        self._macros = env.get_template("links.jinja").module

    def box_content(
        self,
        image_path: str,
        mode: BoxMode,
        page: PageRef,
        oldid: int,
        session: CollectionSession,
    ) -> Markup:
        """Return the concatenated action fragments for the box."""
        return (
            self.add_remove_link(image_path, mode, page, oldid, session)
            + self.show_book_link(image_path, mode, session)
            + self.suggest_link(image_path, mode)
        )

    def add_remove_link(
        self,
        image_path: str,
        mode: BoxMode,
        page: PageRef,
        oldid: int,
        session: CollectionSession,
    ) -> Markup:
        """Return the link adding or removing ``page``, or a disabled label.

        The mode is checked before the namespace, so a category page shown in
        ``SHOWBOOK`` mode still gets the disabled label.
        """
        if not mode.is_addable:
            return self._macros.not_addable(
                image_path, self.messages.text("coll-not_addable")
            )

        ptext = page.prefixed_text
        if mode is BoxMode.ADDCATEGORY or page.namespace == NS_CATEGORY:
            element_id = "coll-add_category"
            icon = "silk-add.png"
            caption_msg = "coll-add_category"
            tooltip_msg = "coll-add_category_tooltip"
            query = {PARAM_COMMAND: CMD_ADD_CATEGORY, PARAM_CATEGORY_TITLE: page.text}
            onclick = f"collectionCall('addcategory', [{JS_PAGE_ARGS}]); return false;"
        else:
            js_args = f"[{JS_PAGE_ARGS}, {json.dumps(oldid)}]"
            if mode is BoxMode.ADDARTICLE or (
                mode is BoxMode.NONE and session.find_article(ptext, oldid) is None
            ):
                element_id = "coll-add_article"
                icon = "silk-add.png"
                caption_msg = "coll-add_this_page"
                tooltip_msg = "coll-add_page_tooltip"
                query = {
                    PARAM_COMMAND: CMD_ADD_ARTICLE,
                    PARAM_ARTICLE_TITLE: ptext,
                    PARAM_OLDID: oldid,
                }
                onclick = f"collectionCall('addarticle', {js_args}); return false;"
            else:
                element_id = "coll-remove_article"
                icon = "silk-remove.png"
                caption_msg = "coll-remove_this_page"
                tooltip_msg = "coll-remove_page_tooltip"
                query = {
                    PARAM_COMMAND: CMD_REMOVE_ARTICLE,
                    PARAM_ARTICLE_TITLE: ptext,
                    PARAM_OLDID: oldid,
                }
                onclick = f"collectionCall('removearticle', {js_args}); return false;"

        return self._macros.action_link(
            href=self.urls.local_url(BOOK_PAGE, query),
            caption=self.messages.text(caption_msg),
            icon_src=f"{image_path}/{icon}",
            id=element_id,
            title=self.messages.text(tooltip_msg),
            onclick=onclick,
        )

    def show_book_link(
        self, image_path: str, mode: BoxMode, session: CollectionSession
    ) -> Markup:
        """Return the "Show book (N pages)" label or link."""
        # TODO: move the parentheses into the message so translations can
        # reorder them.
        count = self.messages.text("coll-n_pages", session.count_articles())
        caption = f"{self.messages.text('coll-show_collection')} ({count})"
        icon_src = f"{image_path}/silk-book_open.png"
        if mode is BoxMode.SHOWBOOK:
            return self._macros.static_label(caption, icon_src)
        return self._macros.action_link(
            href=self.urls.local_url(BOOK_PAGE),
            caption=caption,
            icon_src=icon_src,
            title=self.messages.text("coll-show_collection_tooltip"),
            class_="collection-creatorbox-iconlink",
        )

    def suggest_link(self, image_path: str, mode: BoxMode) -> Markup:
        """Return the "Suggest pages" label or link, or nothing when disabled."""
        if not self.suggestions_enabled:
            return Markup("")
        caption = self.messages.text("coll-make_suggestions")
        icon_src = f"{image_path}/silk-wand.png"
        if mode is BoxMode.SUGGEST:
            return self._macros.static_label(caption, icon_src, ICON_STYLE)
        return self._macros.action_link(
            href=self.urls.local_url(BOOK_PAGE, {PARAM_COMMAND: CMD_SUGGEST}),
            caption=caption,
            icon_src=icon_src,
            title=self.messages.text("coll-make_suggestions_tooltip"),
            class_="collection-creatorbox-iconlink",
            icon_style=ICON_STYLE,
        )


__all__ = ["LinkFragments"]

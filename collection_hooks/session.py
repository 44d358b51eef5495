"""Read access to the book collection kept in the browser session.

The collection lives under the ``wsCollection`` key of the session mapping as
a plain record::

    {"enabled": True, "timestamp": datetime, "items": [
        {"type": "article", "title": "Physics", "revision": 12, "latest": 12},
    ]}

:class:`CollectionSession` wraps that mapping and answers the questions the
renderers ask: is book creation active, how many articles are collected, and
where a given revision sits in the book.

The mutators (:meth:`~CollectionSession.enable`,
:meth:`~CollectionSession.disable`, :meth:`~CollectionSession.add_article`,
:meth:`~CollectionSession.remove_article` and
:meth:`~CollectionSession.touch`) are helpers for the host's Book special
page handlers and for test fixtures. Nothing in this package calls them; the
hooks only read the record.
"""

from __future__ import annotations

import datetime as dt
import logging
import typing as typ

from ._constants import SESSION_KEY

logger = logging.getLogger(__name__)

ARTICLE_TYPE = "article"


class CollectionSession:
    """View over the collection record stored in a session mapping."""

    def __init__(self, store: typ.MutableMapping[str, typ.Any] | None = None) -> None:
        self.store: typ.MutableMapping[str, typ.Any] = {} if store is None else store

    @property
    def record(self) -> dict[str, typ.Any] | None:
        """Return the raw collection record, or None when none exists."""
        record = self.store.get(SESSION_KEY)
        return record if isinstance(record, dict) else None

    @property
    def timestamp(self) -> dt.datetime | None:
        """Return the last time the collection changed, if recorded."""
        record = self.record
        if record is None:
            return None
        return record.get("timestamp")

    def is_enabled(self) -> bool:
        """Return whether book creation mode is active for this session."""
        record = self.record
        return bool(record and record.get("enabled"))

    def _items(self) -> list[dict[str, typ.Any]]:
        record = self.record
        if record is None:
            return []
        return list(record.get("items") or [])

    def count_articles(self) -> int:
        """Return the number of articles (chapters excluded) in the book."""
        return sum(1 for item in self._items() if item.get("type") == ARTICLE_TYPE)

    def find_article(self, title: str, revision_id: int | None = 0) -> int | None:
        """Return the item index of ``title`` at ``revision_id``, or None.

        With no explicit revision, only an item pinned to the page's latest
        revision matches.
        """
        for index, item in enumerate(self._items()):
            if item.get("type") != ARTICLE_TYPE or item.get("title") != title:
                continue
            if revision_id:
                if str(item.get("revision")) == str(revision_id):
                    return index
            elif str(item.get("revision")) == str(item.get("latest")):
                return index
        return None

    def enable(self) -> None:
        """Start book creation, keeping any items already collected."""
        record = self._ensure_record()
        record["enabled"] = True
        self.touch()

    def disable(self) -> None:
        """Stop book creation; the collected items are kept."""
        record = self.record
        if record is not None:
            record["enabled"] = False

    def add_article(self, title: str, revision: int, latest: int) -> bool:
        """Append an article, returning False when it is already present."""
        if self.find_article(title, revision if revision != latest else 0) is not None:
            return False
        record = self._ensure_record()
        items = record.setdefault("items", [])
        items.append(
            {"type": ARTICLE_TYPE, "title": title, "revision": revision, "latest": latest}
        )
        self.touch()
        logger.debug("added %s (revision %s) to collection", title, revision)
        return True

    def remove_article(self, title: str, revision_id: int | None = 0) -> bool:
        """Remove an article, returning False when it was not present."""
        index = self.find_article(title, revision_id)
        if index is None:
            return False
        record = self._ensure_record()
        del record["items"][index]
        self.touch()
        logger.debug("removed %s from collection", title)
        return True

    def touch(self, when: dt.datetime | None = None) -> None:
        """Record ``when`` (default: now, UTC) as the last modification."""
        self._ensure_record()["timestamp"] = when or dt.datetime.now(dt.UTC)

    def _ensure_record(self) -> dict[str, typ.Any]:
        record = self.record
        if record is None:
            record = {"enabled": False, "items": []}
            self.store[SESSION_KEY] = record
        return record


__all__ = ["ARTICLE_TYPE", "CollectionSession"]

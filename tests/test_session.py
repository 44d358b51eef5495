"""Unit tests for the session-backed collection and the message catalog."""

from __future__ import annotations

import datetime as dt

from collection_hooks.messages import MessageCatalog
from collection_hooks.modes import BoxMode
from collection_hooks.session import CollectionSession


def test_empty_store_is_disabled() -> None:
    """A session without a collection record reports nothing."""
    session = CollectionSession()
    assert session.is_enabled() is False
    assert session.count_articles() == 0
    assert session.find_article("Physics") is None
    assert session.timestamp is None


def test_find_article_matches_revision_or_latest() -> None:
    """Explicit revisions match exactly; no revision means the latest one."""
    session = CollectionSession(
        {
            "wsCollection": {
                "enabled": True,
                "items": [
                    {"type": "chapter", "title": "Physics"},
                    {"type": "article", "title": "Physics", "revision": 90, "latest": 120},
                    {"type": "article", "title": "Optics", "revision": 5, "latest": 5},
                ],
            }
        }
    )
    assert session.find_article("Physics", 90) == 1
    assert session.find_article("Physics", 0) is None
    assert session.find_article("Physics", None) is None
    assert session.find_article("Optics") == 2
    assert session.find_article("Optics", 4) is None
    assert session.count_articles() == 2


def test_mutators_update_record_and_timestamp() -> None:
    """Enabling, adding and removing keep the record consistent."""
    store: dict[str, object] = {}
    session = CollectionSession(store)
    session.enable()
    assert session.is_enabled()
    assert isinstance(session.timestamp, dt.datetime)

    assert session.add_article("Physics", 120, 120) is True
    assert session.add_article("Physics", 120, 120) is False
    assert session.find_article("Physics") == 0
    assert session.count_articles() == 1

    earlier = dt.datetime(2020, 1, 1, tzinfo=dt.UTC)
    session.touch(earlier)
    assert session.remove_article("Physics") is True
    assert session.timestamp > earlier
    assert session.remove_article("Physics") is False

    session.disable()
    assert session.is_enabled() is False
    assert "wsCollection" in store


def test_plural_and_parameters() -> None:
    """Messages substitute parameters and pick plural forms."""
    messages = MessageCatalog()
    assert messages.text("coll-n_pages", 1) == "1 page"
    assert messages.text("coll-n_pages", 0) == "0 pages"
    assert messages.text("coll-n_pages", 1500) == "1,500 pages"
    assert messages.text("coll-download_as", "PDF") == "Download as PDF"


def test_overrides_and_missing_keys() -> None:
    """Overrides replace defaults; unknown keys stay visible."""
    messages = MessageCatalog({"coll-create_a_book": "Start a book"})
    assert messages.text("coll-create_a_book") == "Start a book"
    assert messages.text("coll-no-such-key") == "⧼coll-no-such-key⧽"


def test_box_mode_hints() -> None:
    """Hints map onto the closed set of modes."""
    assert BoxMode.from_hint(None) is BoxMode.NONE
    assert BoxMode.from_hint("") is BoxMode.NONE
    assert BoxMode.from_hint("showbook") is BoxMode.SHOWBOOK
    assert not BoxMode.SUGGEST.is_addable
    assert BoxMode.ADDCATEGORY.is_addable

"""Shared fixtures for the collection_hooks test suite.

The fixtures build the pieces every hook call needs: a configuration with two
export formats, a :class:`CollectionHooks` instance, and helpers that create
request contexts and session stores without a wiki host.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from urllib.parse import parse_qs, urlsplit

import pytest

from collection_hooks import CollectionHooks
from collection_hooks.config import CollectionConfig
from collection_hooks.context import (
    OutputPage,
    PageRef,
    RenderContext,
    WikiRequest,
    WikiUser,
)
from collection_hooks.session import CollectionSession

COLLECTION_TIMESTAMP = dt.datetime(2026, 10, 1, 12, 30, tzinfo=dt.UTC)


@pytest.fixture
def config() -> CollectionConfig:
    """Return a config offering PDF and OpenDocument in the sidebar."""
    return CollectionConfig(
        formats={"rl": "e-book (PDF)", "odf": "OpenDocument"},
        portlet_formats=["rl", "odf"],
    )


@pytest.fixture
def hooks(config: CollectionConfig) -> CollectionHooks:
    """Return hooks bound to the shared test config."""
    return CollectionHooks(config)


def _make_context(
    page: PageRef | None,
    *,
    params: dict[str, str] | None = None,
    user: str | None = None,
    printable: bool = False,
) -> RenderContext:
    """Build a render context for ``page`` with optional request state."""
    return RenderContext(
        title=page,
        request=WikiRequest(dict(params or {})),
        user=WikiUser(user),
        output=OutputPage(printable=printable),
    )


def _make_session(
    *,
    enabled: bool = True,
    items: list[dict[str, typ.Any]] | None = None,
    timestamp: dt.datetime | None = COLLECTION_TIMESTAMP,
) -> CollectionSession:
    """Build a session whose collection record holds ``items``."""
    record: dict[str, typ.Any] = {"enabled": enabled, "items": list(items or [])}
    if timestamp is not None:
        record["timestamp"] = timestamp
    return CollectionSession({"wsCollection": record})


def _query_of(href: str) -> dict[str, str]:
    """Return the single-valued query parameters of ``href``."""
    return {key: values[0] for key, values in parse_qs(urlsplit(href).query).items()}


@pytest.fixture
def make_context() -> typ.Callable[..., RenderContext]:
    """Return the render context factory."""
    return _make_context


@pytest.fixture
def make_session() -> typ.Callable[..., CollectionSession]:
    """Return the collection session factory."""
    return _make_session


@pytest.fixture
def query_of() -> typ.Callable[[str], dict[str, str]]:
    """Return a helper extracting query parameters from a URL."""
    return _query_of


@pytest.fixture
def article() -> PageRef:
    """Return an existing main-namespace article."""
    return PageRef(namespace=0, text="Physics", exists=True, latest_revision_id=120)


@pytest.fixture
def category() -> PageRef:
    """Return an existing category page."""
    return PageRef(namespace=14, text="Classical physics", exists=True, latest_revision_id=7)

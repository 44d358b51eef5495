"""Unit tests for loading ``collection.yaml``.

These tests write small YAML documents into ``tmp_path`` and check that
:func:`load_collection_config` applies defaults, keeps explicit values, and
rejects malformed settings with :class:`CollectionConfigError`.
"""

from __future__ import annotations

import typing as typ

import pytest

from collection_hooks.config import (
    CollectionConfig,
    CollectionConfigError,
    load_collection_config,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write(tmp_path: Path, text: str) -> Path:
    """Write ``text`` to a config file under ``tmp_path``."""
    path = tmp_path / "collection.yaml"
    path.write_text(text.strip() + "\n", encoding="utf-8")
    return path


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    """An empty document yields the built-in defaults."""
    config = load_collection_config(_write(tmp_path, ""))
    assert config == CollectionConfig()
    assert config.portlet_formats == ["rl"]
    assert config.help_page == "Help:Books"
    assert config.image_path == "/extensions/Collection/images"


def test_explicit_values_are_kept(tmp_path: Path) -> None:
    """Every documented key is read from the file."""
    path = _write(
        tmp_path,
        """
article_namespaces: [0, 100]
namespace_names:
  100: Portal
formats:
  rl: e-book (PDF)
  odf: OpenDocument
portlet_formats: [odf]
portlet_for_logged_in_users_only: true
disable_sidebar_link: true
suggestions_enabled: false
help_page: null
extension_assets_path: /w/extensions/
script_path: /w/index.php
article_path: /page/$1
messages:
  coll-create_a_book: Start a book
        """,
    )
    config = load_collection_config(path)
    assert config.article_namespaces == frozenset({0, 100})
    assert config.namespace_names == {100: "Portal"}
    assert config.formats == {"rl": "e-book (PDF)", "odf": "OpenDocument"}
    assert config.portlet_formats == ["odf"]
    assert config.portlet_for_logged_in_users_only is True
    assert config.disable_sidebar_link is True
    assert config.suggestions_enabled is False
    assert config.help_page is None
    assert config.image_path == "/w/extensions/Collection/images"
    assert config.script_path == "/w/index.php"
    assert config.article_path == "/page/$1"
    assert config.messages == {"coll-create_a_book": "Start a book"}


def test_category_is_always_collectible(tmp_path: Path) -> None:
    """The category namespace is eligible even when not listed."""
    config = load_collection_config(_write(tmp_path, "article_namespaces: [0]"))
    assert config.is_collectible(0)
    assert config.is_collectible(14)
    assert not config.is_collectible(2)


def test_custom_namespace_requires_prefix(tmp_path: Path) -> None:
    """A collectible namespace outside the built-in table needs a name."""
    path = _write(
        tmp_path, "article_namespaces: [0, 100, 102]\nnamespace_names: {100: Portal}"
    )
    with pytest.raises(CollectionConfigError, match="102"):
        load_collection_config(path)


def test_builtin_namespaces_need_no_prefix(tmp_path: Path) -> None:
    """Namespaces with a built-in prefix load without ``namespace_names``."""
    config = load_collection_config(_write(tmp_path, "article_namespaces: [0, 2, 12]"))
    assert config.namespace_names == {}


def test_unknown_portlet_format_is_rejected(tmp_path: Path) -> None:
    """Sidebar formats must be configured writers."""
    path = _write(tmp_path, "formats: {rl: PDF}\nportlet_formats: [rl, epub]")
    with pytest.raises(CollectionConfigError, match="epub"):
        load_collection_config(path)


@pytest.mark.parametrize(
    "text",
    [
        "article_namespaces: [0, main]",
        "article_namespaces: 0",
        "article_namespaces: [true]",
        "disable_sidebar_link: sometimes",
        "formats: [rl]",
        "messages: [nope]",
        "namespace_names: [Portal]",
        "namespace_names: {portal: Portal}",
        "namespace_names: {100: ''}",
    ],
)
def test_malformed_values_are_rejected(tmp_path: Path, text: str) -> None:
    """Values of the wrong shape raise a configuration error."""
    with pytest.raises(CollectionConfigError):
        load_collection_config(_write(tmp_path, text))


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing path is reported as such."""
    with pytest.raises(FileNotFoundError):
        load_collection_config(tmp_path / "absent.yaml")


def test_non_mapping_document_raises(tmp_path: Path) -> None:
    """The top-level YAML value must be a mapping."""
    with pytest.raises(TypeError):
        load_collection_config(_write(tmp_path, "- just\n- a list"))


def test_format_label_lookup() -> None:
    """Unknown writers raise a configuration error."""
    config = CollectionConfig()
    assert config.format_label("rl") == "PDF"
    with pytest.raises(CollectionConfigError):
        config.format_label("epub")

"""Load collection configuration YAML into typed dataclasses."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _as_bool,
    _check_namespace_names,
    _optional_str,
    _parse_formats,
    _parse_messages,
    _parse_namespace_names,
    _parse_namespaces,
    _parse_portlet_formats,
)
from .models import (
    DEFAULT_ARTICLE_NAMESPACES,
    DEFAULT_FORMATS,
    DEFAULT_HELP_PAGE,
    DEFAULT_PORTLET_FORMATS,
    CollectionConfig,
)

logger = logging.getLogger(__name__)


def load_collection_config(path: Path) -> CollectionConfig:
    """Load the YAML file describing the collection feature settings.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/collection.yaml``).

    Returns
    -------
    CollectionConfig
        Parsed configuration with defaults applied for every missing key.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    CollectionConfigError
        If a value has the wrong shape, a namespace is not an integer, a
        site-specific namespace has no prefix under ``namespace_names``, or a
        portlet format is not listed under ``formats``.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from collection_hooks.config import load_collection_config
    >>> config = load_collection_config(Path("config/collection.yaml"))  # doctest: +SKIP
    >>> config.portlet_formats  # doctest: +SKIP
    ['rl']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    config = build_collection_config(dict(loaded))
    logger.debug("loaded collection config from %s", path)
    return config


def build_collection_config(raw: typ.Mapping[str, typ.Any]) -> CollectionConfig:
    """Build a :class:`CollectionConfig` from an already parsed mapping."""
    base = CollectionConfig()
    formats = _parse_formats(raw.get("formats"), DEFAULT_FORMATS)
    help_page = (
        _optional_str(raw["help_page"]) if "help_page" in raw else DEFAULT_HELP_PAGE
    )
    namespaces = _parse_namespaces(
        raw.get("article_namespaces"), DEFAULT_ARTICLE_NAMESPACES
    )
    namespace_names = _parse_namespace_names(raw.get("namespace_names"))
    _check_namespace_names(namespaces, namespace_names)
    return CollectionConfig(
        article_namespaces=namespaces,
        namespace_names=namespace_names,
        formats=formats,
        portlet_formats=_parse_portlet_formats(
            raw.get("portlet_formats"), DEFAULT_PORTLET_FORMATS, formats
        ),
        portlet_for_logged_in_users_only=_as_bool(
            raw.get("portlet_for_logged_in_users_only"),
            key="portlet_for_logged_in_users_only",
            default=base.portlet_for_logged_in_users_only,
        ),
        disable_sidebar_link=_as_bool(
            raw.get("disable_sidebar_link"),
            key="disable_sidebar_link",
            default=base.disable_sidebar_link,
        ),
        suggestions_enabled=_as_bool(
            raw.get("suggestions_enabled"),
            key="suggestions_enabled",
            default=base.suggestions_enabled,
        ),
        help_page=help_page,
        extension_assets_path=str(
            raw.get("extension_assets_path", base.extension_assets_path)
        ),
        script_path=str(raw.get("script_path", base.script_path)),
        article_path=str(raw.get("article_path", base.article_path)),
        messages=_parse_messages(raw.get("messages")),
    )


__all__ = ["build_collection_config", "load_collection_config"]

"""Typed dataclasses describing the collection extension configuration."""

from __future__ import annotations

import dataclasses as dc

from collection_hooks._constants import IMAGE_SUBPATH, NS_CATEGORY

DEFAULT_ARTICLE_NAMESPACES: tuple[int, ...] = (0, 2, 4, 6, 10, 12)
DEFAULT_FORMATS: dict[str, str] = {"rl": "PDF"}
DEFAULT_PORTLET_FORMATS: tuple[str, ...] = ("rl",)
DEFAULT_HELP_PAGE = "Help:Books"


class CollectionConfigError(ValueError):
    """Raised when the collection configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class CollectionConfig:
    """Process-wide feature configuration, read-only at request time.

    Attributes
    ----------
    article_namespaces : frozenset[int]
        Namespaces whose pages may be collected. The category namespace is
        always eligible and need not be listed.
    namespace_names : dict[int, str]
        Prefixes of site-specific namespaces, e.g. ``{100: "Portal"}``.
    formats : dict[str, str]
        Export writer identifier mapped to its display label.
    portlet_formats : list[str]
        Writers offered as "Download as" links in the sidebar.
    portlet_for_logged_in_users_only : bool
        Hide the sidebar section from anonymous users.
    disable_sidebar_link : bool
        Suppress the "Create a book" entry point in the sidebar.
    suggestions_enabled : bool
        Show the "Suggest pages" link in the book creator box.
    help_page : str or None
        Prefixed title of the help page linked from the box.
    extension_assets_path : str
        URL prefix under which extension images are served.
    script_path : str
        Entry point used for URLs that carry query parameters.
    article_path : str
        Pretty URL pattern for query-less links; ``$1`` is the title.
    messages : dict[str, str]
        Message overrides merged over the built-in English catalog.
    """

    article_namespaces: frozenset[int] = frozenset(DEFAULT_ARTICLE_NAMESPACES)
    namespace_names: dict[int, str] = dc.field(default_factory=dict)
    formats: dict[str, str] = dc.field(default_factory=lambda: dict(DEFAULT_FORMATS))
    portlet_formats: list[str] = dc.field(
        default_factory=lambda: list(DEFAULT_PORTLET_FORMATS)
    )
    portlet_for_logged_in_users_only: bool = False
    disable_sidebar_link: bool = False
    suggestions_enabled: bool = True
    help_page: str | None = DEFAULT_HELP_PAGE
    extension_assets_path: str = "/extensions"
    script_path: str = "/index.php"
    article_path: str = "/wiki/$1"
    messages: dict[str, str] = dc.field(default_factory=dict)

    def is_collectible(self, namespace: int) -> bool:
        """Return whether pages in ``namespace`` can be added to a book."""
        return namespace in self.article_namespaces or namespace == NS_CATEGORY

    def format_label(self, writer: str) -> str:
        """Return the display label for ``writer``.

        Raises
        ------
        CollectionConfigError
            If the writer is not configured in ``formats``.
        """
        try:
            return self.formats[writer]
        except KeyError as exc:
            msg = f"Unknown export format '{writer}'."
            raise CollectionConfigError(msg) from exc

    @property
    def image_path(self) -> str:
        """Return the URL prefix for the book creator icons."""
        return f"{self.extension_assets_path.rstrip('/')}/{IMAGE_SUBPATH}"


__all__ = [
    "DEFAULT_ARTICLE_NAMESPACES",
    "DEFAULT_FORMATS",
    "DEFAULT_HELP_PAGE",
    "DEFAULT_PORTLET_FORMATS",
    "CollectionConfig",
    "CollectionConfigError",
]

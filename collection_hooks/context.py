"""Per-request rendering context consumed by the collection hooks.

The wiki host hands every hook a snapshot of the current request: the page
being viewed, its query parameters, the user, and the output buffer that
collects client-side module registrations. These dataclasses model that
snapshot so the portlet and notice renderers stay pure functions of their
inputs. :class:`UrlBuilder` reproduces the host's local URL scheme for the
``Special:Book`` endpoint and ordinary pages.

Examples
--------
>>> page = PageRef(namespace=14, text="Physics", exists=True, latest_revision_id=7)
>>> page.prefixed_text
'Category:Physics'
>>> UrlBuilder().local_url(page, {"printable": "yes"})
'/index.php?title=Category:Physics&printable=yes'
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ
from urllib.parse import quote, urlencode

from ._constants import BOOK_SPECIAL_PAGE, NAMESPACE_NAMES, NS_MAIN, NS_SPECIAL

if typ.TYPE_CHECKING:
    from .config import CollectionConfig

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dc.dataclass(frozen=True, slots=True)
class PageRef:
    """Immutable identity of a wiki page for one request.

    ``namespace_name`` carries the prefix of a site-specific namespace that
    the built-in table does not know, such as ``Portal`` for namespace 100.
    """

    namespace: int
    text: str
    exists: bool = True
    latest_revision_id: int = 0
    namespace_name: str | None = None

    @property
    def prefixed_text(self) -> str:
        """Return the title with its namespace prefix, as shown to readers."""
        prefix = self.namespace_name
        if prefix is None:
            prefix = NAMESPACE_NAMES.get(self.namespace, "")
        return f"{prefix}:{self.text}" if prefix else self.text

    def with_namespace_names(self, names: typ.Mapping[int, str]) -> PageRef:
        """Return this page with its prefix looked up in ``names`` if unset."""
        if self.namespace_name is not None or self.namespace not in names:
            return self
        return dc.replace(self, namespace_name=names[self.namespace])

    def is_special(self, name: str) -> bool:
        """Return whether this page is the special page ``name``."""
        return self.namespace == NS_SPECIAL and self.text == name

    @classmethod
    def special(cls, name: str) -> PageRef:
        """Return a reference to the special page ``name``."""
        return cls(namespace=NS_SPECIAL, text=name, exists=True)

    @classmethod
    def from_prefixed(
        cls,
        title: str,
        *,
        namespace_names: typ.Mapping[int, str] | None = None,
        **kwargs: typ.Any,
    ) -> PageRef:
        """Parse ``"Namespace:Text"`` into a page reference.

        ``namespace_names`` adds site-specific namespaces to the built-in
        table. Unknown prefixes are kept as part of the text in the main
        namespace.
        """
        extra = dict(namespace_names or {})
        prefix, sep, rest = title.partition(":")
        if sep:
            wanted = prefix.strip().lower()
            for namespace, name in {**NAMESPACE_NAMES, **extra}.items():
                if name and name.lower() == wanted:
                    return cls(
                        namespace=namespace,
                        text=rest.strip(),
                        namespace_name=extra.get(namespace),
                        **kwargs,
                    )
        return cls(namespace=NS_MAIN, text=title.strip(), **kwargs)


BOOK_PAGE = PageRef.special(BOOK_SPECIAL_PAGE)


@dc.dataclass(slots=True)
class WikiRequest:
    """Query parameters of the current web request."""

    params: dict[str, str] = dc.field(default_factory=dict)

    def get_val(self, name: str, default: str | None = None) -> str | None:
        """Return the raw string value of ``name`` or ``default``."""
        return self.params.get(name, default)

    def get_int(self, name: str, default: int = 0) -> int:
        """Return the leading integer of ``name``, or ``default`` if absent.

        As on the host, ``"12abc"`` reads as 12 and a value without leading
        digits reads as 0.
        """
        value = self.params.get(name)
        if value is None:
            return default
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0


@dc.dataclass(frozen=True, slots=True)
class WikiUser:
    """The user issuing the request."""

    name: str | None = None

    @property
    def is_registered(self) -> bool:
        """Return whether the user is logged in to a registered account."""
        return bool(self.name)


@dc.dataclass(slots=True)
class OutputPage:
    """Output buffer for the response being rendered."""

    printable: bool = False
    modules: list[str] = dc.field(default_factory=list)
    module_styles: list[str] = dc.field(default_factory=list)

    def add_modules(self, *names: str) -> None:
        """Register client-side script modules, ignoring duplicates."""
        for name in names:
            if name not in self.modules:
                self.modules.append(name)

    def add_module_styles(self, *names: str) -> None:
        """Register style-only modules, ignoring duplicates."""
        for name in names:
            if name not in self.module_styles:
                self.module_styles.append(name)


@dc.dataclass(frozen=True, slots=True)
class UrlBuilder:
    """Build local URLs the way the wiki host does."""

    script_path: str = "/index.php"
    article_path: str = "/wiki/$1"

    @classmethod
    def from_config(cls, config: CollectionConfig) -> UrlBuilder:
        """Return a builder using the paths configured for the site."""
        return cls(script_path=config.script_path, article_path=config.article_path)

    def local_url(
        self, page: PageRef, query: typ.Mapping[str, object] | None = None
    ) -> str:
        """Return the URL for ``page`` with optional query parameters."""
        db_key = quote(page.prefixed_text.replace(" ", "_"), safe=":/")
        if not query:
            return self.article_path.replace("$1", db_key)
        encoded = urlencode({key: str(value) for key, value in query.items()})
        return f"{self.script_path}?title={db_key}&{encoded}"


@dc.dataclass(slots=True)
class RenderContext:
    """Everything the host knows about the request being rendered."""

    title: PageRef | None
    request: WikiRequest = dc.field(default_factory=WikiRequest)
    user: WikiUser = dc.field(default_factory=WikiUser)
    output: OutputPage = dc.field(default_factory=OutputPage)
    urls: UrlBuilder = dc.field(default_factory=UrlBuilder)


__all__ = [
    "BOOK_PAGE",
    "OutputPage",
    "PageRef",
    "RenderContext",
    "UrlBuilder",
    "WikiRequest",
    "WikiUser",
]

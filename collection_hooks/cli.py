"""Cyclopts CLI for previewing the book creator UI outside a wiki host.

The ``collection`` console script builds a request context from its options,
loads the collection configuration and, optionally, a session record from
YAML, and prints what the hooks would render: the sidebar section as JSON, the
site notice HTML, or the collection's last-modified timestamp.

Examples
--------
Show the sidebar for an article while book creation is active:

>>> from collection_hooks.cli import app
>>> app(
...     ["sidebar", "--page", "Physics", "--session", "session.yaml"]
... )  # doctest: +SKIP

Render the box on the Book special page in suggestion mode:

>>> app(
...     ["notice", "--page", "Special:Book", "--bookcmd", "suggest"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml import YAML

from ._constants import LAST_MODIFIED_KEY, PARAM_COMMAND, PARAM_OLDID, SESSION_KEY
from .config import CollectionConfig, load_collection_config
from .config.helpers import _parse_timestamp
from .context import (
    OutputPage,
    PageRef,
    RenderContext,
    UrlBuilder,
    WikiRequest,
    WikiUser,
)
from .hooks import CollectionHooks
from .session import CollectionSession

DEFAULT_CONFIG = Path("config/collection.yaml")

app = App(name="collection", config=cyclopts.config.Env("COLLECTION_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to collection config", env_var="COLLECTION_CONFIG")
]
PageOption = typ.Annotated[str, Parameter(help="Prefixed title of the current page")]
SessionOption = typ.Annotated[
    Path | None, Parameter(help="YAML file holding the session's collection record")
]


def _load_config(path: Path) -> CollectionConfig:
    """Return the configuration at ``path``, or defaults when it is absent."""
    if path == DEFAULT_CONFIG and not path.exists():
        return CollectionConfig()
    return load_collection_config(path)


def load_session(path: Path | None) -> CollectionSession:
    """Load a collection record from YAML into a fresh session store.

    The file may hold the record itself or a mapping with a ``wsCollection``
    key, as dumped from a real session.
    """
    if path is None:
        return CollectionSession()
    loader = YAML(typ="safe")
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Session YAML must be a mapping."
        raise TypeError(msg)
    record = dict(loaded.get(SESSION_KEY, loaded))
    if "timestamp" in record:
        record["timestamp"] = _parse_timestamp(record["timestamp"])
    return CollectionSession({SESSION_KEY: record})


def build_context(
    config: CollectionConfig,
    *,
    page: str,
    exists: bool = True,
    latest_revision: int = 0,
    action: str | None = None,
    oldid: int | None = None,
    bookcmd: str | None = None,
    user: str | None = None,
    printable: bool = False,
) -> RenderContext:
    """Assemble a :class:`RenderContext` from command-line values."""
    params: dict[str, str] = {}
    if action is not None:
        params["action"] = action
    if oldid is not None:
        params[PARAM_OLDID] = str(oldid)
    if bookcmd is not None:
        params[PARAM_COMMAND] = bookcmd
    return RenderContext(
        title=PageRef.from_prefixed(
            page,
            namespace_names=config.namespace_names,
            exists=exists,
            latest_revision_id=latest_revision,
        ),
        request=WikiRequest(params),
        user=WikiUser(user),
        output=OutputPage(printable=printable),
        urls=UrlBuilder.from_config(config),
    )


@app.command(help="Print the book creator sidebar section as JSON.")
def sidebar(
    *,
    page: PageOption,
    config: ConfigOption = DEFAULT_CONFIG,
    session: SessionOption = None,
    latest_revision: int = 0,
    missing: bool = False,
    action: str | None = None,
    oldid: int | None = None,
    user: str | None = None,
    printable: bool = False,
) -> None:
    """Print the ``coll-print_export`` entries, or ``null`` when hidden.

    Parameters
    ----------
    page : str
        Prefixed title of the page being viewed, e.g. ``Category:Physics``.
    config : Path, optional
        Path to ``collection.yaml``; built-in defaults apply when the default
        path does not exist.
    session : Path or None, optional
        YAML session record; no session means book creation is inactive.
    latest_revision : int, optional
        Latest revision id of the page.
    missing : bool, optional
        Treat the page as nonexistent.
    action, oldid : optional
        Request parameters of the simulated page view.
    user : str or None, optional
        Registered user name; omit for an anonymous visitor.
    printable : bool, optional
        Simulate a printable rendering.
    """
    collection_config = _load_config(config)
    hooks = CollectionHooks(collection_config)
    ctx = build_context(
        collection_config,
        page=page,
        exists=not missing,
        latest_revision=latest_revision,
        action=action,
        oldid=oldid,
        user=user,
        printable=printable,
    )
    portlet = hooks.get_portlet(ctx, load_session(session))
    payload = None if portlet is None else [entry.as_dict() for entry in portlet]
    print(json.dumps(payload, indent=2))


@app.command(help="Print the site notice HTML with the book creator box.")
def notice(
    *,
    page: PageOption,
    config: ConfigOption = DEFAULT_CONFIG,
    session: SessionOption = None,
    latest_revision: int = 0,
    missing: bool = False,
    action: str | None = None,
    oldid: int | None = None,
    bookcmd: str | None = None,
) -> None:
    """Print the rendered box, or nothing when no box applies."""
    collection_config = _load_config(config)
    hooks = CollectionHooks(collection_config)
    ctx = build_context(
        collection_config,
        page=page,
        exists=not missing,
        latest_revision=latest_revision,
        action=action,
        oldid=oldid,
        bookcmd=bookcmd,
    )
    html = hooks.on_site_notice_after("", ctx, load_session(session))
    if html:
        print(html)
    if ctx.output.modules or ctx.output.module_styles:
        modules = ", ".join([*ctx.output.modules, *ctx.output.module_styles])
        print(f"<!-- modules: {modules} -->")


@app.command(name="last-modified", help="Print the collection's last-modified time.")
def last_modified(
    *,
    session: SessionOption = None,
) -> None:
    """Print the ISO timestamp contributed to cache validation, if any."""
    times = CollectionHooks(CollectionConfig()).on_output_page_check_last_modified(
        {}, load_session(session)
    )
    stamp = times.get(LAST_MODIFIED_KEY)
    print(stamp.isoformat() if stamp else "none")


def main() -> None:
    """Invoke the Cyclopts application that powers the `collection` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

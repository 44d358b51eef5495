"""Utility helpers shared by the collection configuration loader."""

from __future__ import annotations

import datetime as dt
import typing as typ

from collection_hooks._constants import NAMESPACE_NAMES, NS_MAIN

from .models import CollectionConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_bool(value: object, *, key: str, default: bool) -> bool:
    """Return ``value`` as a bool, rejecting anything that is not one."""
    match value:
        case None:
            return default
        case bool():
            return value
        case _:
            msg = f"'{key}' must be a boolean, got {value!r}."
            raise CollectionConfigError(msg)


def _parse_namespaces(value: object | None, default: typ.Iterable[int]) -> frozenset[int]:
    """Normalize a namespace list into a frozenset of integers."""
    if value is None:
        return frozenset(default)
    if not isinstance(value, list):
        msg = "'article_namespaces' must be a list of integers."
        raise CollectionConfigError(msg)
    namespaces: set[int] = set()
    for entry in value:
        # bool is an int subclass; reject it explicitly.
        if isinstance(entry, bool) or not isinstance(entry, int):
            msg = f"Namespace {entry!r} is not an integer."
            raise CollectionConfigError(msg)
        namespaces.add(entry)
    return frozenset(namespaces)


def _parse_namespace_names(value: object | None) -> dict[int, str]:
    """Return site-specific namespace prefixes keyed by namespace number."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = "'namespace_names' must map namespace numbers to prefixes."
        raise CollectionConfigError(msg)
    names: dict[int, str] = {}
    for number, name in value.items():
        if isinstance(number, bool) or not isinstance(number, int):
            msg = f"Namespace {number!r} is not an integer."
            raise CollectionConfigError(msg)
        prefix = _optional_str(name)
        if prefix is None:
            msg = f"Namespace {number} needs a non-empty prefix."
            raise CollectionConfigError(msg)
        names[number] = prefix
    return names


def _check_namespace_names(
    namespaces: typ.Iterable[int], names: typ.Mapping[int, str]
) -> None:
    """Reject collectible namespaces whose title prefix is unknown."""
    unnamed = sorted(
        number
        for number in namespaces
        if number != NS_MAIN and number not in NAMESPACE_NAMES and number not in names
    )
    if unnamed:
        listed = ", ".join(str(number) for number in unnamed)
        msg = f"Namespaces without a prefix under 'namespace_names': {listed}"
        raise CollectionConfigError(msg)


def _parse_formats(
    value: object | None, default: typ.Mapping[str, str]
) -> dict[str, str]:
    """Return the writer to label mapping, stringifying keys and labels."""
    if value is None:
        return dict(default)
    if not isinstance(value, dict):
        msg = "'formats' must map writer identifiers to labels."
        raise CollectionConfigError(msg)
    formats: dict[str, str] = {}
    for writer, label in value.items():
        name = _optional_str(writer)
        if not name:
            continue
        formats[name] = _optional_str(label) or name
    return formats


def _parse_portlet_formats(
    value: object | None,
    default: typ.Iterable[str],
    formats: typ.Mapping[str, str],
) -> list[str]:
    """Return sidebar writers, ensuring each one is a configured format."""
    if value is None:
        selected = list(default)
    elif isinstance(value, list):
        selected = [text for entry in value if (text := _optional_str(entry))]
    else:
        msg = "'portlet_formats' must be a list of writer identifiers."
        raise CollectionConfigError(msg)
    unknown = [writer for writer in selected if writer not in formats]
    if unknown:
        names = ", ".join(unknown)
        msg = f"Portlet formats not listed under 'formats': {names}"
        raise CollectionConfigError(msg)
    return selected


def _parse_messages(value: object | None) -> dict[str, str]:
    """Return message overrides as a flat string mapping."""
    match value:
        case None:
            return {}
        case dict() as data:
            return {str(key): "" if text is None else str(text) for key, text in data.items()}
        case _:
            msg = "'messages' must map message keys to text."
            raise CollectionConfigError(msg)


def _parse_timestamp(value: object) -> dt.datetime | None:
    """Return a timezone-aware UTC datetime parsed from ``value``, or None."""
    match value:
        case dt.datetime():
            parsed = value
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError:
                return None
        case _:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


__all__ = [
    "_as_bool",
    "_check_namespace_names",
    "_optional_str",
    "_parse_formats",
    "_parse_messages",
    "_parse_namespace_names",
    "_parse_namespaces",
    "_parse_portlet_formats",
    "_parse_timestamp",
]

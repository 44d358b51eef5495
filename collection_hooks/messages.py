"""Interface messages for the book creator UI.

Messages are looked up by key, have ``$1``-style parameters substituted, and
support the ``{{PLURAL:$n|one|other}}`` form used by wiki message files.
Returned text is plain; escaping happens when templates render it.
"""

from __future__ import annotations

import re
import typing as typ

DEFAULT_MESSAGES: dict[str, str] = {
    "coll-create_a_book": "Create a book",
    "coll-book_creator": "Book creator",
    "coll-book_creator_disable": "Disable book creator",
    "coll-book_creator_disable_tooltip": "Stop using the book creator",
    "coll-disable": "disable",
    "coll-download_as": "Download as $1",
    "coll-help": "Help",
    "coll-help_tooltip": "Show help about creating books",
    "coll-not_addable": "This page cannot be added",
    "coll-add_category": "Add this category to your book",
    "coll-add_category_tooltip": "Add all wiki pages in this category to your book",
    "coll-add_this_page": "Add this page to your book",
    "coll-add_page_tooltip": "Add the current wiki page to your book",
    "coll-remove_this_page": "Remove this page from your book",
    "coll-remove_page_tooltip": "Remove the current wiki page from your book",
    "coll-show_collection": "Show book",
    "coll-show_collection_tooltip": "Click to edit/download/order your book",
    "coll-n_pages": "$1 {{PLURAL:$1|page|pages}}",
    "coll-make_suggestions": "Suggest pages",
    "coll-make_suggestions_tooltip": "Show suggestions based on the pages in your book",
    "printableversion": "Printable version",
}

PLURAL_PATTERN = re.compile(r"\{\{PLURAL:\$(\d+)\|([^}]*)\}\}")
PARAM_PATTERN = re.compile(r"\$(\d+)")


class MessageCatalog:
    """Resolve message keys to localized text."""

    def __init__(self, overrides: typ.Mapping[str, str] | None = None) -> None:
        self._messages = dict(DEFAULT_MESSAGES)
        if overrides:
            self._messages.update(overrides)

    def text(self, key: str, *params: object) -> str:
        """Return the message for ``key`` with parameters substituted.

        Unknown keys render as ``⧼key⧽`` so missing translations are visible
        in the page rather than silently blank.
        """
        template = self._messages.get(key)
        if template is None:
            return f"⧼{key}⧽"
        values = [_format_param(value) for value in params]

        def _plural(match: re.Match[str]) -> str:
            forms = match.group(2).split("|")
            number = _param_number(params, int(match.group(1)))
            if number == 1 or len(forms) == 1:
                return forms[0]
            return forms[1]

        resolved = PLURAL_PATTERN.sub(_plural, template)

        def _param(match: re.Match[str]) -> str:
            index = int(match.group(1)) - 1
            if 0 <= index < len(values):
                return values[index]
            return match.group(0)

        return PARAM_PATTERN.sub(_param, resolved)


def _format_param(value: object) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{value:,}"
    return str(value)


def _param_number(params: tuple[object, ...], position: int) -> float | None:
    index = position - 1
    if not 0 <= index < len(params):
        return None
    try:
        return float(str(params[index]).replace(",", ""))
    except ValueError:
        return None


__all__ = ["DEFAULT_MESSAGES", "MessageCatalog"]

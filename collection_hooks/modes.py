"""Render modes of the book creator box."""

from __future__ import annotations

import enum


class BoxMode(enum.Enum):
    """Which variant of the book creator box links to render.

    ``NONE`` is the ordinary page view. ``SUGGEST`` and ``SHOWBOOK`` are used
    on the Book special page, where the current page cannot be added.
    ``ADDCATEGORY`` and ``ADDARTICLE`` force the corresponding add link.
    """

    NONE = ""
    SUGGEST = "suggest"
    SHOWBOOK = "showbook"
    ADDCATEGORY = "addcategory"
    ADDARTICLE = "addarticle"

    @classmethod
    def from_hint(cls, hint: str | None) -> BoxMode:
        """Return the mode named by ``hint``; ``None`` means :attr:`NONE`.

        Raises
        ------
        ValueError
            If ``hint`` does not name a mode.
        """
        if hint is None:
            return cls.NONE
        try:
            return cls(hint)
        except ValueError as exc:
            msg = f"Unknown book creator box mode '{hint}'."
            raise ValueError(msg) from exc

    @property
    def is_addable(self) -> bool:
        """Return whether the current page may be added in this mode."""
        return self not in (BoxMode.SUGGEST, BoxMode.SHOWBOOK)


__all__ = ["BoxMode"]

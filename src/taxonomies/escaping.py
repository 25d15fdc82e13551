"""Escaping helpers and label filter hooks for checklist markup.

All helpers return markupsafe.Markup so that fragments assembled from
them are not escaped a second time by the template layer.
"""

import logging
from typing import Any, Callable, Optional

from markupsafe import Markup, escape

logger = logging.getLogger(__name__)

TERM_LABEL_HOOK = "term_label"

_EMPTY = Markup("")


def esc_attr(value: Any) -> Markup:
    """Escape a value for use inside a double- or single-quoted attribute."""
    return escape(value)


def esc_html(value: Any) -> Markup:
    """Escape a value for use as element text content."""
    return escape(value)


def _flag(attribute: str, on: bool) -> Markup:
    if not on:
        return _EMPTY
    return Markup(' {0}="{0}"').format(attribute)


def checked(on: bool) -> Markup:
    return _flag("checked", on)


def selected(on: bool) -> Markup:
    return _flag("selected", on)


def disabled(on: bool) -> Markup:
    return _flag("disabled", on)


class FilterHooks:
    """Named chains of value filters, run in priority order.

    Usage:
        hooks = FilterHooks()
        hooks.add_filter("term_label", str.upper)
        hooks.apply_filters("term_label", "news")  # "NEWS"
    """

    def __init__(self):
        self._filters: dict[str, list[tuple[int, int, Callable[[Any], Any]]]] = {}
        self._counter = 0

    def add_filter(
        self,
        hook: str,
        callback: Callable[[Any], Any],
        priority: int = 10,
    ) -> None:
        """Register a callback. Lower priority runs first; ties keep registration order."""
        self._counter += 1
        self._filters.setdefault(hook, []).append((priority, self._counter, callback))
        self._filters[hook].sort(key=lambda entry: (entry[0], entry[1]))
        logger.debug(f"Added filter on '{hook}' at priority {priority}")

    def remove_filter(self, hook: str, callback: Callable[[Any], Any]) -> bool:
        """Remove every registration of a callback. Returns True if any was removed."""
        entries = self._filters.get(hook, [])
        kept = [e for e in entries if e[2] is not callback]
        if len(kept) == len(entries):
            return False
        if kept:
            self._filters[hook] = kept
        else:
            self._filters.pop(hook, None)
        return True

    def has_filter(self, hook: str) -> bool:
        return bool(self._filters.get(hook))

    def apply_filters(self, hook: str, value: Any) -> Any:
        """Pass a value through every callback registered on a hook."""
        for _, _, callback in self._filters.get(hook, []):
            value = callback(value)
        return value

    def clear(self, hook: Optional[str] = None) -> None:
        if hook is None:
            self._filters.clear()
        else:
            self._filters.pop(hook, None)


# Global hooks instance
_hooks: Optional[FilterHooks] = None


def get_filter_hooks() -> FilterHooks:
    """Get the global filter hooks instance."""
    global _hooks
    if _hooks is None:
        _hooks = FilterHooks()
    return _hooks

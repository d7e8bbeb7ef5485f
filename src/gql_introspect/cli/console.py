"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) and error
reporting remain functional even when Rich is not installed.

Everything rendered here goes to **stderr**; stdout is reserved for the
introspection payload.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from gql_introspect.exceptions import MissingDependencyError

_MARKUP_TAG = re.compile(r"\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def strip_markup(text: str) -> str:
    """Remove simple Rich markup tags such as ``[bold red]``/``[/bold red]``."""
    return _MARKUP_TAG.sub("", text)


def escape(text: str) -> str:
    """Escape user-supplied *text* before embedding it in markup."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain stderr print.

        Pass ``markup=False`` for text that did not originate here
        (server payloads, argparse help) so brackets are kept verbatim.
        """
        try:
            rich_console = get_rich_console()
        except MissingDependencyError:
            if markup:
                objects = tuple(
                    strip_markup(obj) if isinstance(obj, str) else obj
                    for obj in objects
                )
            print(*objects, file=sys.stderr)
            return
        rich_console.print(
            *objects,
            markup=markup,
            emoji=markup,
            highlight=markup,
            soft_wrap=True,
        )


console = _ConsoleProxy()

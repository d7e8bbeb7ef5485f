"""Route a validated introspection payload to its sink.

This module lives in the CLI layer because it owns the two process
streams: the payload goes to **stdout** (print mode and the clipboard
fallback), every confirmation or warning goes to **stderr** through the
shared console.
"""

from __future__ import annotations

import sys
from collections.abc import Callable

from gql_introspect.cli.console import console, escape
from gql_introspect.core.models import InvocationConfig, OutputMode
from gql_introspect.core.protocols import ClipboardSink
from gql_introspect.exceptions import UsageError
from gql_introspect.infra.clipboard import INSTALL_GUIDANCE, detect_clipboard
from gql_introspect.infra.file_sink import write_response_file


def write_stdout(text: str) -> None:
    """Write *text* to stdout exactly as received."""
    sys.stdout.write(text)
    sys.stdout.flush()


def _to_file(path: str, text: str) -> None:
    written = write_response_file(path, text)
    console.print(
        f"[green]✓ Introspection result saved to: {escape(str(written))}[/green]",
    )


def _to_clipboard(
    text: str,
    detector: Callable[[], ClipboardSink | None],
) -> None:
    sink = detector()
    if sink is None:
        console.print("[yellow]Warning: No clipboard utility found.[/yellow]")
        console.print(f"[yellow]{INSTALL_GUIDANCE}[/yellow]")
        console.print("[yellow]Falling back to printing to stdout:[/yellow]")
        write_stdout(text)
        return

    sink.copy(text)
    console.print("[green]✓ Introspection result copied to clipboard![/green]")


def dispose_response(
    config: InvocationConfig,
    text: str,
    *,
    clipboard_detector: Callable[[], ClipboardSink | None] = detect_clipboard,
) -> None:
    """Deliver *text* according to ``config.output_mode``.

    A missing clipboard utility is not an error: the payload falls back
    to stdout with a warning.

    Raises
    ------
    UsageError
        If file mode arrives without a path.
    OutputWriteError
        If the output file cannot be written.
    ClipboardError
        If a detected clipboard utility fails.
    """
    if config.output_mode is OutputMode.PRINT:
        write_stdout(text)
    elif config.output_mode is OutputMode.FILE:
        if config.output_file is None:
            raise UsageError("An output file path is required with --output")
        _to_file(config.output_file, text)
    else:
        _to_clipboard(text, clipboard_detector)

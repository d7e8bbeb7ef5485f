"""CLI application entry point and command routing for graphql-introspect.

This module is the **sole error boundary** for the entire application.
It catches :class:`~gql_introspect.exceptions.GqlIntrospectError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* Diagnostics go to stderr through the shared console; stdout carries
  nothing but the introspection payload.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any, NoReturn

from gql_introspect.cli import exit_codes
from gql_introspect.cli.console import console, escape
from gql_introspect.core.models import InvocationConfig, OutputMode
from gql_introspect.exceptions import GqlIntrospectError, GraphQLResponseError, UsageError
from gql_introspect.version import __version__

_EXAMPLES = """\
examples:
  # Copy to clipboard (default)
  %(prog)s https://api.example.com/graphql

  # Print to stdout
  %(prog)s https://api.example.com/graphql --print

  # Save to file
  %(prog)s https://api.example.com/graphql --output schema.json

  # With authentication header
  %(prog)s https://api.example.com/graphql -H "Authorization: Bearer token123"

  # Multiple headers
  %(prog)s https://api.example.com/graphql \\
    -H "Authorization: Bearer token123" \\
    -H "X-Custom-Header: value"
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises :class:`UsageError` instead of exiting 2."""

    def error(self, message: str) -> NoReturn:
        prefix = "unrecognized arguments: "
        if message.startswith(prefix):
            message = f"Unknown option: {message[len(prefix):]}"
        raise UsageError(message, usage=self.format_help())


_HELP_FLAGS: frozenset[str] = frozenset({"-h", "--help"})
_VALUE_FLAGS: frozenset[str] = frozenset({"-o", "--output", "-H", "--header"})
_KNOWN_FLAGS: frozenset[str] = _HELP_FLAGS | _VALUE_FLAGS | frozenset(
    {"-p", "--print", "-c", "--clipboard", "-V", "--version"}
)


def _reject_unknown_options(
    arguments: Sequence[str],
    parser: argparse.ArgumentParser,
) -> None:
    """Raise :class:`UsageError` for any option that is not spelled exactly.

    argparse would otherwise accept grouped short flags (``-pc``).  A
    help flag anywhere on the line takes precedence over the error.
    """
    unknown: str | None = None
    help_requested = False
    expect_value = False
    for token in arguments:
        if expect_value:
            expect_value = False
            continue
        if token == "--":
            break
        if not token.startswith("-") or token == "-":
            continue
        name = token.split("=", 1)[0] if token.startswith("--") else token
        if name in _HELP_FLAGS:
            help_requested = True
        elif name not in _KNOWN_FLAGS:
            unknown = unknown or token
        expect_value = name in _VALUE_FLAGS and "=" not in token

    if unknown is not None and not help_requested:
        raise UsageError(f"Unknown option: {unknown}", usage=parser.format_help())


class _OutputFileAction(argparse.Action):
    """``-o FILE``: switch to file mode and remember the path."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        namespace.output_mode = OutputMode.FILE
        namespace.output_file = values


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Output flags share one destination so the last one given wins:
    * ``-o/--output FILE`` — save to a file
    * ``-p/--print``       — write to stdout
    * ``-c/--clipboard``   — copy to the clipboard (default)
    """
    parser = _ArgumentParser(
        prog="graphql-introspect",
        allow_abbrev=False,
        description="Run the GraphQL introspection query against an endpoint.",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "endpoint",
        nargs="?",
        default=None,
        help="GraphQL endpoint URL (required).",
    )
    parser.add_argument(
        "-o",
        "--output",
        action=_OutputFileAction,
        dest="output_file",
        metavar="FILE",
        help="Save output to FILE.",
    )
    parser.add_argument(
        "-p",
        "--print",
        action="store_const",
        dest="output_mode",
        const=OutputMode.PRINT,
        help="Print output to stdout.",
    )
    parser.add_argument(
        "-c",
        "--clipboard",
        action="store_const",
        dest="output_mode",
        const=OutputMode.CLIPBOARD,
        help="Copy output to clipboard (default).",
    )
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        dest="headers",
        default=None,
        metavar="HEADER",
        help='Add custom header (format: "Key: Value"). Can be used multiple times.',
    )
    parser.set_defaults(output_mode=OutputMode.CLIPBOARD)
    return parser


def build_config(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> InvocationConfig:
    """Turn parsed arguments into the immutable run configuration.

    Raises
    ------
    UsageError
        If the endpoint is missing or empty.
    """
    mode: OutputMode = args.output_mode
    try:
        return InvocationConfig(
            endpoint=args.endpoint or "",
            output_mode=mode,
            output_file=args.output_file if mode is OutputMode.FILE else None,
            headers=tuple(args.headers or ()),
        )
    except UsageError as exc:
        exc.usage = parser.format_help()
        raise


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_introspect(config: InvocationConfig) -> int:
    """Run one introspection round-trip and deliver the result.

    Flow:
    1. Load the bundled query document.
    2. POST it to the endpoint.
    3. Validate the response.
    4. Dispose of the payload to the selected sink.
    """
    from gql_introspect.cli.disposer import dispose_response
    from gql_introspect.core.introspection_service import IntrospectionService
    from gql_introspect.infra.http_executor import HttpxQueryExecutor
    from gql_introspect.infra.query_loader import load_introspection_query

    query_document = load_introspection_query()

    console.print(
        f"[yellow]Querying GraphQL endpoint: {escape(config.endpoint)}[/yellow]"
    )
    service = IntrospectionService(HttpxQueryExecutor())
    text = service.fetch(config, query_document)

    dispose_response(config, text)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the graphql-introspect CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    arguments = list(sys.argv[1:] if argv is None else argv)

    if not arguments:
        console.print(parser.format_help(), markup=False)
        return exit_codes.GENERAL_ERROR

    _reject_unknown_options(arguments, parser)
    args = parser.parse_args(arguments)
    config = build_config(args, parser)
    return _handle_introspect(config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _render_error(exc: GqlIntrospectError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if isinstance(exc, GraphQLResponseError):
        console.print(exc.errors_text, markup=False)
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
    if isinstance(exc, UsageError) and exc.usage:
        console.print(exc.usage, markup=False)


def cli(argv: Sequence[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except GqlIntrospectError as exc:
        _render_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

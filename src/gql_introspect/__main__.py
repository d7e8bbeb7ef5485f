"""Allow ``python -m gql_introspect`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m gql_introspect`` behaves identically to the
``graphql-introspect`` console script.
"""

from __future__ import annotations

from gql_introspect.cli.app import cli

if __name__ == "__main__":
    cli()

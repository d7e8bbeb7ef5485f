"""Infrastructure layer — external system integration.

This layer wraps all interaction with httpx, the filesystem, and the
operating system's clipboard utilities.  Every raw third-party
exception must be caught here and re-raised as a
:class:`~gql_introspect.exceptions.GqlIntrospectError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from gql_introspect.infra.clipboard import (
    CLIPBOARD_BACKENDS,
    SubprocessClipboard,
    detect_clipboard,
)
from gql_introspect.infra.file_sink import write_response_file
from gql_introspect.infra.http_executor import HttpxQueryExecutor
from gql_introspect.infra.query_loader import QUERY_RESOURCE, load_introspection_query

__all__: list[str] = [
    "CLIPBOARD_BACKENDS",
    "HttpxQueryExecutor",
    "QUERY_RESOURCE",
    "SubprocessClipboard",
    "detect_clipboard",
    "load_introspection_query",
    "write_response_file",
]

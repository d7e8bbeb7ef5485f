"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from gql_introspect.core.introspection_service import IntrospectionService
from gql_introspect.core.models import ClipboardBackend, InvocationConfig, OutputMode
from gql_introspect.core.protocols import ClipboardSink, QueryExecutor
from gql_introspect.core.response_checks import check_response

__all__: list[str] = [
    "ClipboardBackend",
    "ClipboardSink",
    "IntrospectionService",
    "InvocationConfig",
    "OutputMode",
    "QueryExecutor",
    "check_response",
]

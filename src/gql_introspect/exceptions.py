"""Custom exception hierarchy for graphql-introspect.

All exceptions that cross layer boundaries must inherit from
:class:`GqlIntrospectError`.  Raw third-party exceptions (e.g. from
httpx or subprocess) must NEVER propagate beyond the infrastructure
layer — they must be caught and re-raised as a typed subclass defined
here.

Hierarchy
---------
GqlIntrospectError
├── UsageError
├── QueryResourceNotFoundError
├── RequestFailedError
├── ResponseError
│   ├── EmptyResponseError
│   └── GraphQLResponseError
├── OutputWriteError
├── ClipboardError
└── MissingDependencyError
"""

from __future__ import annotations


class GqlIntrospectError(Exception):
    """Base exception for all graphql-introspect errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(GqlIntrospectError):
    """Raised when the command line cannot be turned into a configuration."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        usage: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.usage: str | None = usage
        """Help text rendered after the error message, when known."""


# --- Deployment ------------------------------------------------------------

class QueryResourceNotFoundError(GqlIntrospectError):
    """Raised when the bundled introspection query file is missing."""


# --- Transport -------------------------------------------------------------

class RequestFailedError(GqlIntrospectError):
    """Raised when the HTTP request could not be built or completed."""


# --- Response validation ---------------------------------------------------

class ResponseError(GqlIntrospectError):
    """Base class for responses that must not reach a sink."""


class EmptyResponseError(ResponseError):
    """Raised when the endpoint answered with an empty body."""


class GraphQLResponseError(ResponseError):
    """Raised when the response carries a GraphQL ``errors`` payload."""

    def __init__(self, message: str, *, errors_text: str) -> None:
        super().__init__(message)
        self.errors_text: str = errors_text
        """The ``"errors":[...]`` excerpt reported to the user."""


# --- Sinks -----------------------------------------------------------------

class OutputWriteError(GqlIntrospectError):
    """Raised when the response cannot be written to the output file."""


class ClipboardError(GqlIntrospectError):
    """Raised when a detected clipboard utility fails to accept the data."""


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(GqlIntrospectError):
    """Raised when an optional runtime dependency is not available."""

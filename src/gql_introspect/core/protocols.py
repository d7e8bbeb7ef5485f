"""Protocols (interfaces) consumed by the core and CLI layers.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class QueryExecutor(Protocol):
    """Contract for the HTTP backend that delivers the introspection query.

    Any object that implements :meth:`post` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def post(self, endpoint: str, body: str, headers: Sequence[str]) -> str:
        """POST *body* to *endpoint* and return the raw response text.

        Parameters
        ----------
        endpoint:
            The GraphQL endpoint URL.
        body:
            The JSON request document, sent verbatim.
        headers:
            Raw ``"Key: Value"`` strings attached after
            ``Content-Type: application/json``, in order.

        Implementations must make exactly one attempt and must map all
        backend-specific exceptions to
        :class:`~gql_introspect.exceptions.GqlIntrospectError` subclasses.

        Raises
        ------
        RequestFailedError
            When the request cannot be built or the transport fails.
        """
        ...  # pragma: no cover


class ClipboardSink(Protocol):
    """Contract for a platform clipboard implementation."""

    @property
    def name(self) -> str:
        """Short human-readable backend name (e.g. ``"xclip"``)."""
        ...  # pragma: no cover

    def copy(self, text: str) -> None:
        """Place *text* on the system clipboard.

        Raises
        ------
        ClipboardError
            When the backend fails to accept the data.
        """
        ...  # pragma: no cover

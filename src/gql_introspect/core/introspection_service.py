"""Core introspection service — send the query, validate the answer.

This service delegates the HTTP round-trip to a
:class:`~gql_introspect.core.protocols.QueryExecutor` injected at
construction time.  It is responsible for:

* Delegating exactly one request to the executor.
* Running the response checks before anything reaches a sink.
* Ensuring only :class:`~gql_introspect.exceptions.GqlIntrospectError`
  subclasses escape.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``, no filesystem access.
* No httpx import.
"""

from __future__ import annotations

from gql_introspect.core.models import InvocationConfig
from gql_introspect.core.protocols import QueryExecutor
from gql_introspect.core.response_checks import check_response
from gql_introspect.exceptions import GqlIntrospectError, RequestFailedError


class IntrospectionService:
    """Stateless service that runs one introspection round-trip.

    Parameters
    ----------
    executor:
        Any object satisfying the :class:`QueryExecutor` protocol.
    """

    def __init__(self, executor: QueryExecutor) -> None:
        self._executor: QueryExecutor = executor

    def fetch(self, config: InvocationConfig, query_document: str) -> str:
        """POST *query_document* to ``config.endpoint`` and validate the reply.

        Returns
        -------
        str
            The raw response body, unchanged.

        Raises
        ------
        RequestFailedError
            When the request fails for any reason.
        EmptyResponseError
            When the endpoint returned nothing.
        GraphQLResponseError
            When the response carries a GraphQL ``errors`` payload.
        """
        try:
            text = self._executor.post(
                config.endpoint,
                query_document,
                config.headers,
            )
        except GqlIntrospectError:
            # Already one of ours — propagate unchanged.
            raise
        except Exception as exc:
            raise RequestFailedError(
                f"Unexpected request error: {exc}",
            ) from exc

        return check_response(text)

"""httpx backed implementation of :class:`~gql_introspect.core.protocols.QueryExecutor`.

This module is the **only** place in the codebase that imports ``httpx``.
All httpx exceptions are caught here and re-raised as
:class:`~gql_introspect.exceptions.RequestFailedError` — nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

from collections.abc import Sequence

import httpx

from gql_introspect.exceptions import RequestFailedError

CONTENT_TYPE_HEADER: tuple[str, str] = ("Content-Type", "application/json")


def split_header(raw: str) -> tuple[str, str]:
    """Split a ``"Key: Value"`` string on its first colon.

    Surrounding whitespace is stripped from both halves; nothing else is
    validated here — the transport rejects what it cannot send.

    Raises
    ------
    RequestFailedError
        If *raw* contains no colon at all.
    """
    name, sep, value = raw.partition(":")
    if not sep:
        raise RequestFailedError(
            f"Malformed header: {raw!r}",
            hint='Headers must be given as "Key: Value".',
        )
    return name.strip(), value.strip()


def build_headers(headers: Sequence[str]) -> list[tuple[str, str]]:
    """Return the outgoing header list, ``Content-Type`` first.

    A list of pairs (rather than a dict) keeps duplicates and the
    command-line order intact.
    """
    return [CONTENT_TYPE_HEADER, *(split_header(raw) for raw in headers)]


class HttpxQueryExecutor:
    """Concrete :class:`QueryExecutor` backed by :class:`httpx.Client`.

    Usage::

        executor = HttpxQueryExecutor()
        text = executor.post("https://api.example.com/graphql", body, [])

    Parameters
    ----------
    transport:
        Optional ``httpx`` transport.  Tests pass an
        :class:`httpx.MockTransport`; production uses the default.
    """

    def __init__(self, transport: httpx.BaseTransport | None = None) -> None:
        self._transport: httpx.BaseTransport | None = transport

    def _build_client(self) -> httpx.Client:
        # One attempt, without a timeout.
        return httpx.Client(
            transport=self._transport,
            timeout=None,
            follow_redirects=False,
        )

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def post(self, endpoint: str, body: str, headers: Sequence[str]) -> str:
        """POST *body* to *endpoint* once and return the response text.

        Non-2xx responses are not errors here; their body is returned
        like any other so the response checks can inspect it.

        Raises
        ------
        RequestFailedError
            For malformed headers, invalid URLs and any transport failure.
        """
        request_headers = build_headers(headers)

        try:
            with self._build_client() as client:
                response = client.post(
                    endpoint,
                    content=body.encode("utf-8"),
                    headers=request_headers,
                )
        except httpx.InvalidURL as exc:
            raise RequestFailedError(
                f"Invalid endpoint URL {endpoint!r}: {exc}",
            ) from exc
        except UnicodeEncodeError as exc:
            raise RequestFailedError(
                f"Header could not be encoded for transmission: {exc}",
                hint="Header names and values must be plain ASCII.",
            ) from exc
        except httpx.HTTPError as exc:
            raise RequestFailedError(
                f"Request to {endpoint} failed: {exc}",
                hint="Check the URL, your network, and any custom headers.",
            ) from exc

        return response.text

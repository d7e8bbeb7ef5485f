"""Pure validation of the endpoint's response text.

Two checks run before any sink is touched: the body must be non-empty,
and it must not carry a GraphQL ``errors`` payload.

When the body decodes as a JSON object only a **top-level** ``errors``
key counts, so a field that merely contains the word ``errors`` in user
data is not misclassified.  Bodies that are not JSON (HTML error pages,
plain text) fall back to a literal ``"errors"`` substring match.
"""

from __future__ import annotations

import json
import re
from typing import Any

from gql_introspect.exceptions import EmptyResponseError, GraphQLResponseError

_ERRORS_MARKER = '"errors"'
_ERRORS_EXCERPT = re.compile(r'"errors"\s*:\s*\[.*\]')

_NOT_DECODED = object()


def _decode(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return _NOT_DECODED


def has_graphql_errors(text: str) -> bool:
    """Return ``True`` when *text* reports a failed GraphQL call."""
    document = _decode(text)
    if document is _NOT_DECODED:
        return _ERRORS_MARKER in text
    return isinstance(document, dict) and "errors" in document


def extract_errors_text(text: str) -> str:
    """Best-effort excerpt of the ``"errors":[...]`` portion of *text*.

    Mirrors ``grep -o '"errors":\\[.*\\]'``: the first (greedy,
    single-line) match wins.  Pretty-printed bodies fall back to the
    compact JSON encoding of the ``errors`` value, and anything else to
    the whole body.
    """
    match = _ERRORS_EXCERPT.search(text)
    if match is not None:
        return match.group(0)

    document = _decode(text)
    if isinstance(document, dict) and "errors" in document:
        return '"errors":' + json.dumps(document["errors"], separators=(",", ":"))
    return text


def check_response(text: str) -> str:
    """Validate *text* and return it unchanged.

    Raises
    ------
    EmptyResponseError
        If the endpoint returned an empty or whitespace-only body.
    GraphQLResponseError
        If the body carries a GraphQL ``errors`` payload.
    """
    if not text.strip():
        raise EmptyResponseError(
            "Empty response from endpoint",
            hint="Check that the URL points at a GraphQL endpoint.",
        )
    if has_graphql_errors(text):
        raise GraphQLResponseError(
            "GraphQL query returned errors:",
            errors_text=extract_errors_text(text),
        )
    return text

"""Shared pytest fixtures and configuration for the graphql-introspect test suite.

Guidelines
----------
* No internet access in any test.
* httpx is driven through ``httpx.MockTransport`` at the infra boundary.
* Clipboard utilities are never executed — ``shutil.which`` and
  ``subprocess.run`` are mocked.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from gql_introspect.infra import http_executor

SCHEMA_BODY = '{"data":{"__schema":{"queryType":{"name":"Query"}}}}'
ENDPOINT = "https://api.example.com/graphql"

EndpointFactory = Callable[..., list[httpx.Request]]


@pytest.fixture
def graphql_endpoint(monkeypatch: pytest.MonkeyPatch) -> EndpointFactory:
    """Route the CLI's executor to an in-memory endpoint.

    Call the fixture with the body (and optionally status code) to
    serve; it returns the list that collects every request sent.
    """
    real_executor = http_executor.HttpxQueryExecutor

    def _install(body: str = SCHEMA_BODY, status_code: int = 200) -> list[httpx.Request]:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(status_code, text=body)

        monkeypatch.setattr(
            http_executor,
            "HttpxQueryExecutor",
            lambda: real_executor(transport=httpx.MockTransport(handler)),
        )
        return seen

    return _install


@pytest.fixture
def no_clipboard(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend no clipboard utility is installed."""
    monkeypatch.setattr(
        "gql_introspect.infra.clipboard.shutil.which", lambda _name: None,
    )

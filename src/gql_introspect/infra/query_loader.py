"""Infrastructure: load the bundled introspection query document.

The document ships inside the package (``resources/``) and is located
relative to this module's own install location, never the current
working directory.

Rules
-----
* The text is returned verbatim — no JSON parsing, no re-escaping.
* A missing file is a packaging error and is reported with the full
  expected path.
"""

from __future__ import annotations

from pathlib import Path

from gql_introspect.exceptions import QueryResourceNotFoundError

QUERY_RESOURCE: Path = (
    Path(__file__).resolve().parent.parent / "resources" / "introspection-query.json"
)
"""Default location of the introspection query document."""


def load_introspection_query(path: Path | None = None) -> str:
    """Return the raw JSON request document for the introspection query.

    Raises
    ------
    QueryResourceNotFoundError
        If the resource file does not exist.
    """
    resource = path if path is not None else QUERY_RESOURCE
    if not resource.is_file():
        raise QueryResourceNotFoundError(
            f"Config file not found: {resource}",
            hint="Reinstall graphql-introspect; the query file ships with the package.",
        )
    return resource.read_text(encoding="utf-8")

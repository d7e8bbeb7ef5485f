"""graphql-introspect — dump a GraphQL endpoint's schema via introspection.

Sends the standard introspection query and routes the JSON response to
the clipboard, a file, or standard output.
"""

from gql_introspect.version import __version__

__all__: list[str] = ["__version__"]

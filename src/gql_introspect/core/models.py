"""Domain models for graphql-introspect.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and construction-time validation.  They
carry zero I/O, zero dependencies on external packages, and must remain
pure across the entire lifecycle.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from gql_introspect.exceptions import UsageError


# ---------------------------------------------------------------------------
# Output mode
# ---------------------------------------------------------------------------

class OutputMode(str, enum.Enum):
    """Where the introspection payload is delivered."""

    CLIPBOARD = "clipboard"
    PRINT = "print"
    FILE = "file"


# ---------------------------------------------------------------------------
# Invocation configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InvocationConfig:
    """Everything a single run needs, built once from the command line."""

    endpoint: str
    """GraphQL endpoint URL the query is POSTed to."""

    output_mode: OutputMode = OutputMode.CLIPBOARD
    """Selected sink.  Clipboard unless an output flag says otherwise."""

    output_file: str | None = None
    """Destination path; set iff ``output_mode`` is ``FILE``."""

    headers: tuple[str, ...] = ()
    """Raw ``"Key: Value"`` strings in command-line order."""

    def __post_init__(self) -> None:
        if not self.endpoint:
            raise UsageError("Endpoint is required")
        if self.output_mode is OutputMode.FILE and not self.output_file:
            raise UsageError("An output file path is required with --output")


# ---------------------------------------------------------------------------
# Clipboard backend descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ClipboardBackend:
    """A clipboard utility and the argv that reads text from stdin."""

    executable: str
    """Name looked up on PATH (e.g. ``pbcopy``)."""

    argv: tuple[str, ...]
    """Full command line, executable first."""

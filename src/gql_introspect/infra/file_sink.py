"""Infrastructure: write the payload to a user-chosen file."""

from __future__ import annotations

from pathlib import Path

from gql_introspect.exceptions import OutputWriteError


def write_response_file(path: str | Path, text: str) -> Path:
    """Overwrite *path* with *text* exactly and return the path written.

    No parent directories are created and no newline translation
    happens.

    Raises
    ------
    OutputWriteError
        If the file cannot be opened or written.
    """
    target = Path(path)
    try:
        target.write_text(text, encoding="utf-8", newline="")
    except OSError as exc:
        raise OutputWriteError(
            f"Could not write {target}: {exc.strerror or exc}",
            hint="Check that the directory exists and is writable.",
        ) from exc
    return target

"""Infrastructure: clipboard utility detection and invocation.

This module is responsible for locating a command-line clipboard
utility on the system PATH and piping the payload into it.

Rules
-----
* Detection via :func:`shutil.which` only — nothing is executed while
  probing.
* The first available backend in :data:`CLIPBOARD_BACKENDS` wins.
* No ``print()`` — callers handle user-facing output, including the
  stdout fallback when nothing is detected.
"""

from __future__ import annotations

import shutil
import subprocess

from gql_introspect.core.models import ClipboardBackend
from gql_introspect.exceptions import ClipboardError


# ---------------------------------------------------------------------------
# Known backends, in priority order
# ---------------------------------------------------------------------------

CLIPBOARD_BACKENDS: tuple[ClipboardBackend, ...] = (
    # macOS
    ClipboardBackend(executable="pbcopy", argv=("pbcopy",)),
    # Linux / X11
    ClipboardBackend(executable="xclip", argv=("xclip", "-selection", "clipboard")),
    ClipboardBackend(executable="xsel", argv=("xsel", "--clipboard", "--input")),
    # Windows / WSL interop
    ClipboardBackend(executable="clip.exe", argv=("clip.exe",)),
)

INSTALL_GUIDANCE: str = (
    "Please install one of: pbcopy (macOS), xclip, xsel (Linux), "
    "or use --print or --output instead."
)


# ---------------------------------------------------------------------------
# Subprocess-backed sink
# ---------------------------------------------------------------------------

class SubprocessClipboard:
    """Concrete :class:`~gql_introspect.core.protocols.ClipboardSink`.

    Pipes text into the backend's stdin.  This class satisfies the
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, backend: ClipboardBackend) -> None:
        self._backend: ClipboardBackend = backend

    @property
    def name(self) -> str:
        return self._backend.executable

    def copy(self, text: str) -> None:
        """Send *text* to the clipboard utility.

        Raises
        ------
        ClipboardError
            When the utility cannot be started or exits non-zero.
        """
        try:
            subprocess.run(
                list(self._backend.argv),
                input=text,
                encoding="utf-8",
                check=True,
                # xclip/xsel fork a child that keeps inherited pipes open.
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except subprocess.CalledProcessError as exc:
            raise ClipboardError(
                f"{self.name} exited with status {exc.returncode}",
                hint="Use --print or --output instead.",
            ) from exc
        except OSError as exc:
            raise ClipboardError(
                f"Could not run {self.name}: {exc}",
                hint="Use --print or --output instead.",
            ) from exc


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def find_clipboard_backend() -> ClipboardBackend | None:
    """Return the first backend whose executable is on PATH, if any."""
    for backend in CLIPBOARD_BACKENDS:
        if shutil.which(backend.executable) is not None:
            return backend
    return None


def detect_clipboard() -> SubprocessClipboard | None:
    """Probe the system for a usable clipboard sink.

    Returns ``None`` when no known utility is installed — the caller
    decides how to fall back.
    """
    backend = find_clipboard_backend()
    if backend is None:
        return None
    return SubprocessClipboard(backend)

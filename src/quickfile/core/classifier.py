"""Path classification helpers.

Decides file-versus-folder intent and absolute-versus-relative nature of
raw picker input. The extension heuristic here is authoritative: nothing
in quickfile re-checks it against the real filesystem.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

SEPARATOR = "/"


def normalize_separators(path_like: str) -> str:
    """Canonicalize ``/`` and the platform separator(s) to ``/``."""
    normalized = path_like.replace(os.sep, SEPARATOR)
    if os.altsep:
        normalized = normalized.replace(os.altsep, SEPARATOR)
    return normalized


def last_segment(path_like: str) -> str:
    """Return the text after the final separator (may be empty)."""
    return normalize_separators(path_like).rsplit(SEPARATOR, 1)[-1]


def has_file_extension(name: str) -> bool:
    """Return True when the last path segment looks like a file name.

    The segment must contain a dot that is neither its first character
    (hidden names such as ``.gitignore``) nor its last (``folder.``).
    """
    base = last_segment(name)
    dot = base.rfind(".")
    return 0 < dot < len(base) - 1


def is_absolute(path_like: str) -> bool:
    """Return True for absolute paths, including ``~``-prefixed ones."""
    return Path(os.path.expanduser(path_like)).is_absolute()


def to_absolute(path_like: str, base: Optional[Path]) -> Path:
    """Anchor ``path_like`` at ``base`` unless it is already absolute.

    Falls back to the current working directory when ``base`` is None.
    The result is normalized lexically; symlinks are not resolved.
    """
    candidate = Path(os.path.expanduser(path_like))
    if not candidate.is_absolute():
        candidate = (base if base is not None else Path.cwd()) / candidate
    return Path(os.path.normpath(candidate))


def split_input(raw: str) -> Tuple[str, str]:
    """Split input on its last separator into ``(directory, name)``.

    Input without a separator has an empty directory part.
    """
    normalized = normalize_separators(raw)
    if SEPARATOR not in normalized:
        return "", normalized
    directory, _, name = normalized.rpartition(SEPARATOR)
    # "/foo" splits into "" + "foo"; keep the root visible
    return directory or SEPARATOR, name


def display_path(path: Path, root: Optional[Path]) -> str:
    """Render ``path`` workspace-relative when inside ``root``.

    The root itself displays as ``.``; paths outside the root stay absolute.
    Always uses ``/``.
    """
    if root is not None:
        try:
            relative = Path(path).relative_to(root)
        except ValueError:
            pass
        else:
            text = relative.as_posix()
            return text if text else "."
    return normalize_separators(str(path))


__all__ = [
    "SEPARATOR",
    "normalize_separators",
    "last_segment",
    "has_file_extension",
    "is_absolute",
    "to_absolute",
    "split_input",
    "display_path",
]

"""Directory enumeration for the folder snapshot taken at session start."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Tuple

from quickfile.core.capabilities import FileSystem
from quickfile.core.errors import EnumerationPartialFailure
from quickfile.utils.logging import get_logger, timed_operation

# Directories at this depth below the root are reported but not expanded
MAX_DEPTH = 10

EXCLUDED_NAMES = frozenset({"node_modules"})

logger = get_logger("enumerator")


def is_traversable(name: str) -> bool:
    """Return True if a directory entry named ``name`` may be descended into."""
    return not name.startswith(".") and name not in EXCLUDED_NAMES


def enumerate_folders(
    root: Path,
    fs: FileSystem,
    on_error: Optional[Callable[[EnumerationPartialFailure], None]] = None,
) -> Tuple[Path, ...]:
    """Collect ``root`` and every visible folder below it.

    Depth-first and best-effort: a directory that cannot be listed, or an
    entry that cannot be inspected, is logged, reported to ``on_error`` and
    skipped, and the walk carries on.

    Args:
        root: Absolute directory to start from (included in the result)
        fs: Filesystem capability used for listing
        on_error: Optional callback receiving each partial failure

    Returns:
        Absolute folder paths sorted lexicographically
    """
    found: list[Path] = []
    failures = 0

    def report(path: Path, exc: OSError) -> None:
        nonlocal failures
        failures += 1
        logger.warning(
            "enumerator.partial_failure",
            path=str(path),
            error=str(exc),
        )
        if on_error is not None:
            on_error(EnumerationPartialFailure(path, exc))

    def walk(directory: Path, depth: int) -> None:
        found.append(directory)
        if depth >= MAX_DEPTH:
            return

        try:
            names = fs.list_dir(directory)
        except OSError as exc:
            report(directory, exc)
            return

        for name in names:
            if not is_traversable(name):
                continue
            child = directory / name
            # Listable but not searchable directories fail here, per entry
            try:
                is_dir = fs.is_directory(child)
            except OSError as exc:
                report(child, exc)
                continue
            if is_dir:
                walk(child, depth + 1)

    with timed_operation("enumerator.completed", logger=logger, log_level="debug", root=str(root)):
        walk(Path(root), 0)

    folders = tuple(sorted(dict.fromkeys(found), key=str))
    logger.debug("enumerator.snapshot", folders=len(folders), failures=failures)
    return folders


__all__ = ["MAX_DEPTH", "EXCLUDED_NAMES", "is_traversable", "enumerate_folders"]

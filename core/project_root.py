"""Project root discovery by upward marker search."""

from __future__ import annotations

from pathlib import Path

from protocol.errors import InvalidBoundary

PROJECT_MARKER = ".idea"


def is_parent_dir_or_same(parent_dir: str | Path, child_dir: str | Path) -> bool:
    """Return True if child_dir equals parent_dir or lies below it.

    Comparison is per path segment, so ``/a/b`` does not contain ``/a/bc``.
    """
    parent = Path(parent_dir)
    child = Path(child_dir)
    return child == parent or parent in child.parents


def _marker_present(path: Path, require_dir: bool = False) -> bool:
    # Unreadable or over-long paths count as "no marker".
    try:
        return path.is_dir() if require_dir else path.exists()
    except OSError:
        return False


def find_marker_upward(
    marker: str,
    start_dir: str | Path,
    boundary_dir: str | Path | None = None,
) -> Path | None:
    """Return the nearest directory at or above start_dir containing marker.

    When boundary_dir is given the search never climbs above it.
    """
    current = Path(start_dir)
    if boundary_dir is not None and not is_parent_dir_or_same(boundary_dir, current):
        raise InvalidBoundary(f"The '{boundary_dir}' is not parent dir of '{current}'")

    while boundary_dir is None or is_parent_dir_or_same(boundary_dir, current):
        if _marker_present(current / marker):
            return current
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def is_project_root(path: str | Path, marker: str = PROJECT_MARKER) -> bool:
    """Return True if the marker directory sits directly inside path."""
    return _marker_present(Path(path) / marker, require_dir=True)

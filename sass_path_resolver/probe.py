"""Filesystem probes used by every resolution stage."""

import os
import stat
from collections.abc import Sequence
from pathlib import Path

PathSegment = str | os.PathLike[str]


def _join(segments: Sequence[PathSegment]) -> Path:
    if not segments:
        raise ValueError("at least one path segment is required")
    return Path(*segments)


def path_exists(segments: Sequence[PathSegment]) -> bool:
    """Check whether the path built from ``segments`` exists."""
    return _join(segments).exists()


def path_is_directory(segments: Sequence[PathSegment]) -> bool:
    """Check whether the path built from ``segments`` is a directory.

    Callers must check :func:`path_exists` first. Querying a missing path
    raises ``FileNotFoundError`` instead of returning ``False``.
    Symbolic links are followed.
    """
    return stat.S_ISDIR(_join(segments).stat().st_mode)

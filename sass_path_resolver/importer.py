"""Multi include path dispatcher - the importer handed to the Sass compiler.

Tries every configured include path in order and returns the first match.
No caching: each lookup probes the filesystem again.
"""

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from .exceptions import ConfigurationError
from .resolver import Resolution
from .resolver import resolve_with_step

logger = logging.getLogger(__name__)

IncludePaths = str | os.PathLike[str] | Sequence[str | os.PathLike[str]]


def _normalize_include_paths(include_paths: IncludePaths | None) -> tuple[Path, ...]:
    """Validate the include path configuration.

    Raises:
        ConfigurationError: Nothing given, or not a path / list of paths
    """
    if include_paths is None or (isinstance(include_paths, str) and not include_paths):
        raise ConfigurationError("SassPathResolver requires at least one include path")

    if isinstance(include_paths, (str, os.PathLike)):
        return (Path(include_paths),)

    if not isinstance(include_paths, (list, tuple)):
        raise ConfigurationError(
            f"SassPathResolver expects a path or a list of paths, got {type(include_paths).__name__}"
        )

    normalized = []
    for index, include_path in enumerate(include_paths):
        if not isinstance(include_path, (str, os.PathLike)) or include_path == "":
            raise ConfigurationError(f"Include path #{index} is not a valid path: {include_path!r}")
        normalized.append(Path(include_path))
    return tuple(normalized)


class SassPathResolver:
    """Resolve Sass import specifiers against a list of include paths.

    Exposes ``find_file_url`` so it can be plugged into a compiler as a file
    importer. A result of None means "not mine": the compiler should fall
    back to its own resolution.

    Example:
        >>> resolver = SassPathResolver(["node_modules"])
        >>> resolver.find_file_url("my-pkg/core/config")
        'file:///project/node_modules/my-pkg/src/core/_config.scss'
    """

    def __init__(self, include_paths: IncludePaths, *, base_dir: str | Path | None = None):
        """Initialize with include paths.

        Args:
            include_paths: A single path or an ordered list of paths
            base_dir: Base for relative include paths (default: current directory
                at construction time)

        Raises:
            ConfigurationError: Invalid include path configuration
        """
        self.include_paths = _normalize_include_paths(include_paths)
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    def resolve(self, specifier: str) -> Resolution | None:
        """Resolve ``specifier`` against each include path, first match wins."""
        for include_path in self.include_paths:
            resolution = resolve_with_step(specifier, include_path, base_dir=self.base_dir)
            if resolution is not None:
                return resolution

        logger.debug(f"[sass:importer] {specifier} not found in {len(self.include_paths)} include path(s)")
        return None

    def find_file(self, specifier: str) -> Path | None:
        """Resolve ``specifier`` to an absolute path, or None."""
        resolution = self.resolve(specifier)
        return resolution.path if resolution else None

    def find_file_url(self, specifier: str) -> str | None:
        """Resolve ``specifier`` to a ``file:`` URL, or None."""
        resolution = self.resolve(specifier)
        return resolution.url if resolution else None

    def explain(self, specifier: str) -> list[tuple[Path, Resolution | None]]:
        """Resolve ``specifier`` against every include path, without stopping at the first match.

        Returns:
            ``(absolute include path, resolution or None)`` per include path, in order
        """
        return [
            (
                (self.base_dir / include_path).absolute(),
                resolve_with_step(specifier, include_path, base_dir=self.base_dir),
            )
            for include_path in self.include_paths
        ]

    def __repr__(self) -> str:
        paths = ", ".join(str(p) for p in self.include_paths)
        return f"SassPathResolver([{paths}])"


def sass_path_resolver(include_paths: IncludePaths, *, base_dir: str | Path | None = None) -> SassPathResolver:
    """Create a :class:`SassPathResolver`.

    Raises:
        ConfigurationError: Invalid include path configuration
    """
    return SassPathResolver(include_paths, base_dir=base_dir)

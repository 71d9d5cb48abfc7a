"""Single include path resolution.

Resolution order for ``specifier`` under one include path (first match wins):
1. index     - ``<specifier>/index.{sass,scss,css}`` (also ``_index``)
2. manifest  - ``<specifier>/package.json`` style entry point
3. exact     - ``<specifier>`` is an existing file
4. inferred  - ``<specifier>`` with extension / partial inference
5. package   - the path below the package root, resolved relative to the
               directory of the package's entry point

Step 5 covers packages whose manifest points into a source subtree: with
``"sass": "src/index.scss"``, ``my-pkg/core/config`` means
``my-pkg/src/core/_config.scss``.
"""

import logging
from collections.abc import Callable
from collections.abc import Iterator
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from pathlib import PurePosixPath

from .extensions import STYLE_EXTENSIONS
from .extensions import find_file
from .manifest import read_entry_point
from .probe import path_exists
from .probe import path_is_directory
from .specifier import split_package_specifier

logger = logging.getLogger(__name__)

INDEX_NAME = "index"


@dataclass(frozen=True)
class Resolution:
    """A specifier resolved to a file under one include path."""

    path: Path
    step: str
    include_path: Path

    @property
    def url(self) -> str:
        """The resolved file as a ``file:`` URL."""
        return self.path.as_uri()


def _is_directory(path: Path) -> bool:
    return path_exists([path]) and path_is_directory([path])


def _join_inside(base: Path, relative: str | PurePosixPath) -> Path:
    """Join a /-separated path below ``base``. A leading separator does not escape it."""
    return base.joinpath(*PurePosixPath(str(relative).lstrip("/")).parts)


def _index_file(candidate: Path) -> Path | None:
    if not _is_directory(candidate):
        return None
    return find_file(candidate / INDEX_NAME, STYLE_EXTENSIONS)


def _manifest_entry(candidate: Path) -> Path | None:
    if not _is_directory(candidate):
        return None

    entry_point = read_entry_point(candidate)
    if not entry_point:
        return None

    entry_path = _join_inside(candidate, entry_point)
    if path_exists([entry_path]):
        return entry_path
    logger.debug(f"[sass:resolve] {candidate} declares missing entry point {entry_point}")
    return None


def _exact_file(candidate: Path) -> Path | None:
    if path_exists([candidate]) and not path_is_directory([candidate]):
        return candidate
    return None


def _inferred_file(candidate: Path) -> Path | None:
    return find_file(candidate, STYLE_EXTENSIONS)


def _package_relative_file(specifier: str, root: Path) -> Path | None:
    split = split_package_specifier(specifier)
    if split is None:
        return None
    package_name, remainder = split

    package_dir = root.joinpath(*package_name.split("/"))
    entry_point = read_entry_point(package_dir)
    if not entry_point:
        return None

    source_dir = _join_inside(package_dir, PurePosixPath(entry_point.lstrip("/")).parent)
    return find_file(_join_inside(source_dir, remainder), STYLE_EXTENSIONS)


def _steps(specifier: str, root: Path) -> Iterator[tuple[str, Callable[[], Path | None]]]:
    candidate = _join_inside(root, specifier)
    yield "index", partial(_index_file, candidate)
    yield "manifest", partial(_manifest_entry, candidate)
    yield "exact", partial(_exact_file, candidate)
    yield "inferred", partial(_inferred_file, candidate)
    yield "package", partial(_package_relative_file, specifier, root)


def _absolute_root(include_path: str | Path, base_dir: str | Path | None) -> Path:
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    return (base / include_path).absolute()


def resolve_with_step(
    specifier: str,
    include_path: str | Path,
    *,
    base_dir: str | Path | None = None,
) -> Resolution | None:
    """Resolve a specifier under one include path and report which step matched.

    Args:
        specifier: Import specifier, e.g. ``my-pkg/core/config``
        include_path: Directory to search, absolute or relative to ``base_dir``
        base_dir: Base for relative include paths (default: current directory)

    Returns:
        Resolution if a file was found, None otherwise (including when the
        include path does not exist)

    Raises:
        ManifestError: A package.json consulted along the way is malformed
    """
    root = _absolute_root(include_path, base_dir)
    if not _is_directory(root):
        logger.debug(
            f"[sass:resolve] include path {root} is not a directory, skipping",
            extra={"event": "resolve:root-missing", "include_path": str(root)},
        )
        return None

    if not specifier.lstrip("/").strip():
        return None

    for step, attempt in _steps(specifier, root):
        if (found := attempt()) is not None:
            resolved = found.absolute()
            logger.debug(
                f"[sass:resolve] {specifier} -> {resolved} ({step})",
                extra={"event": "resolve:step", "specifier": specifier, "step": step, "path": str(resolved)},
            )
            return Resolution(path=resolved, step=step, include_path=root)

    logger.debug(
        f"[sass:resolve] {specifier} not found under {root}",
        extra={"event": "resolve:miss", "specifier": specifier, "include_path": str(root)},
    )
    return None


def resolve_path(
    specifier: str,
    include_path: str | Path,
    *,
    base_dir: str | Path | None = None,
) -> Path | None:
    """Resolve a specifier under one include path.

    Returns:
        Absolute path to the stylesheet, or None if nothing matched
    """
    resolution = resolve_with_step(specifier, include_path, base_dir=base_dir)
    return resolution.path if resolution else None

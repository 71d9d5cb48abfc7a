"""Extension and partial-file inference.

Sass lets an import omit both the file extension and the leading underscore
of a partial: ``@use "theme/colors"`` may land on ``theme/_colors.scss``.
:func:`find_file` reproduces that lookup against the filesystem.
"""

from collections.abc import Sequence
from pathlib import Path

from .probe import path_exists

STYLE_EXTENSIONS: tuple[str, ...] = ("sass", "scss", "css")

PARTIAL_MARKER = "_"


def _probe(base_path: Path, extensions: Sequence[str]) -> Path | None:
    """Try ``base_path`` as-is (recognized extension only), then with each extension appended."""
    suffix = base_path.suffix
    if suffix and suffix[1:] in extensions and path_exists([base_path]):
        return base_path

    for ext in extensions:
        candidate = base_path.parent / f"{base_path.name}.{ext}"
        if path_exists([candidate]):
            return candidate

    return None


def find_file(base_path: str | Path, extensions: Sequence[str] = STYLE_EXTENSIONS) -> Path | None:
    """Find the stylesheet that ``base_path`` refers to.

    Lookup order (first match wins):
    1. ``base_path`` itself, when it already ends in one of ``extensions``
    2. ``base_path`` with each extension appended, in priority order
    3. The same two probes against the partial form (``_`` prepended to the
       file name, directory untouched), unless the name is already partial

    Args:
        base_path: Path without extension (or with a recognized one), e.g. ``src/styles/main``
        extensions: Extensions to try, highest priority first

    Returns:
        The matching path (not resolved) if found, None otherwise

    Example:
        >>> find_file(Path("src/partial"))
        PosixPath('src/_partial.scss')
    """
    base_path = Path(base_path)

    if found := _probe(base_path, extensions):
        return found

    name = base_path.name
    if name and not name.startswith(PARTIAL_MARKER):
        return _probe(base_path.with_name(f"{PARTIAL_MARKER}{name}"), extensions)

    return None

"""Import specifier parsing.

Specifiers are always ``/``-separated, whatever the host platform:
``my-pkg/core/config`` or ``@scope/my-pkg/core/config``.
"""

from pathlib import PurePosixPath

SCOPE_MARKER = "@"


def _directory_parts(specifier: str) -> tuple[str, ...]:
    if not specifier:
        return ()
    path = PurePosixPath(specifier)
    if path.is_absolute():
        return ()
    return path.parent.parts


def package_root(specifier: str) -> str | None:
    """Extract the package part of a specifier.

    Returns:
        ``@scope/pkg`` for scoped packages, the first segment otherwise, or None
        when the specifier has no directory component (``my-pkg``), is empty or
        is absolute

    Example:
        >>> package_root("@scope/pkg/dir/name")
        '@scope/pkg'
        >>> package_root("pkg/dir/name")
        'pkg'
        >>> package_root("pkg") is None
        True
    """
    dir_parts = _directory_parts(specifier)
    if not dir_parts:
        return None

    if dir_parts[0].startswith(SCOPE_MARKER) and len(dir_parts) > 1:
        return f"{dir_parts[0]}/{dir_parts[1]}"
    return dir_parts[0]


def split_package_specifier(specifier: str) -> tuple[str, str] | None:
    """Split a specifier into its package root and the path below it.

    The remainder is computed segment by segment, so a package name that
    reappears deeper in the path is left alone.

    Returns:
        ``(package_root, remainder)``, or None when there is no package root or
        nothing follows it

    Example:
        >>> split_package_specifier("my-pkg/core/config")
        ('my-pkg', 'core/config')
    """
    root = package_root(specifier)
    if root is None:
        return None

    parts = PurePosixPath(specifier).parts
    remainder = parts[len(root.split("/")) :]
    if not remainder:
        return None
    return root, "/".join(remainder)

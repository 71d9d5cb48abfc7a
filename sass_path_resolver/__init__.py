"""
sass-path-resolver - include path resolution for Sass file importers.

Restores the legacy ``includePaths`` lookup on top of a compiler's importer
hook: a specifier such as ``my-pkg/core/config`` is searched for under each
configured include path (typically ``node_modules``).

Public API:
- sass_path_resolver / SassPathResolver: Multi include path importer (find_file_url)
- resolve_path / resolve_with_step: Resolution under a single include path
- Resolution: A resolved file plus the step that found it
- find_file / STYLE_EXTENSIONS: Extension and partial-file inference
- read_entry_point / load_manifest / PackageManifest: package.json entry points
- package_root / split_package_specifier: Specifier parsing
- ConfigurationError / ManifestError: Fatal errors (no match is None, not an error)
"""

from .exceptions import ConfigurationError
from .exceptions import ManifestError
from .exceptions import SassPathResolverError
from .extensions import STYLE_EXTENSIONS
from .extensions import find_file
from .importer import SassPathResolver
from .importer import sass_path_resolver
from .manifest import PackageManifest
from .manifest import load_manifest
from .manifest import read_entry_point
from .probe import path_exists
from .probe import path_is_directory
from .resolver import Resolution
from .resolver import resolve_path
from .resolver import resolve_with_step
from .specifier import package_root
from .specifier import split_package_specifier

__all__ = [
    "sass_path_resolver",
    "SassPathResolver",
    "resolve_path",
    "resolve_with_step",
    "Resolution",
    "find_file",
    "STYLE_EXTENSIONS",
    "read_entry_point",
    "load_manifest",
    "PackageManifest",
    "package_root",
    "split_package_specifier",
    "path_exists",
    "path_is_directory",
    "SassPathResolverError",
    "ConfigurationError",
    "ManifestError",
]

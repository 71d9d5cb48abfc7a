"""Exceptions raised by sass-path-resolver.

"No match" is never an exception: resolvers return ``None`` so the calling
compiler can fall back to its own resolution. Only configuration mistakes and
malformed package manifests travel through the error channel.
"""

from pathlib import Path


class SassPathResolverError(Exception):
    """Base class for all sass-path-resolver errors."""


class ConfigurationError(SassPathResolverError, ValueError):
    """Raised when include paths or settings are invalid."""


class ManifestError(SassPathResolverError, ValueError):
    """Raised when a package.json exists but cannot be parsed."""

    def __init__(self, manifest_path: Path, reason: str):
        self.manifest_path = manifest_path
        self.reason = reason
        super().__init__(f"Malformed package manifest {manifest_path}: {reason}")

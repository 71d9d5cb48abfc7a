"""package.json reading - style entry point discovery."""

import logging
from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import ValidationError
from pydantic import field_validator

from .exceptions import ManifestError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"

# Style-specific fields first, the generic "main" entry last.
ENTRY_POINT_FIELDS: tuple[str, ...] = ("sass", "scss", "style", "css", "main")


class PackageManifest(BaseModel):
    """The package.json fields that can declare a stylesheet entry point."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    sass: str | None = None
    scss: str | None = None
    style: str | None = None
    css: str | None = None
    main: str | None = None

    @field_validator(*ENTRY_POINT_FIELDS, mode="before")
    @classmethod
    def falsy_as_missing(cls, value):
        # false, 0 and "" mean "no entry point" so the next field is used
        return value or None

    @property
    def entry_point(self) -> str | None:
        """First non-empty entry point field, in :data:`ENTRY_POINT_FIELDS` order."""
        for field_name in ENTRY_POINT_FIELDS:
            if value := getattr(self, field_name):
                return value
        return None


def load_manifest(package_dir: str | Path) -> PackageManifest | None:
    """Parse ``package_dir/package.json``.

    Args:
        package_dir: Directory expected to contain the manifest

    Returns:
        Parsed manifest, or None if the directory has no package.json

    Raises:
        ManifestError: The manifest exists but is not a valid JSON object
    """
    manifest_path = Path(package_dir) / MANIFEST_FILENAME
    if not manifest_path.is_file():
        return None

    try:
        raw = manifest_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ManifestError(manifest_path, f"not valid UTF-8 ({e.reason})") from e

    try:
        return PackageManifest.model_validate_json(raw)
    except ValidationError as e:
        raise ManifestError(manifest_path, _describe(e)) from e


def read_entry_point(package_dir: str | Path) -> str | None:
    """Return the stylesheet entry point declared by a package, if any."""
    manifest = load_manifest(package_dir)
    if manifest is None:
        return None

    entry_point = manifest.entry_point
    if entry_point is None:
        logger.debug(f"[sass:manifest] {package_dir} declares no style entry point")
    return entry_point


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]

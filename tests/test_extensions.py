"""Tests for extension and partial-file inference."""

from pathlib import Path

from sass_path_resolver.extensions import STYLE_EXTENSIONS
from sass_path_resolver.extensions import find_file


def test_style_extension_priority():
    assert STYLE_EXTENSIONS == ("sass", "scss", "css")


def test_finds_file_with_explicit_extension(fixture_root: Path):
    base = fixture_root / "src" / "direct-file.scss"
    assert find_file(base) == base


def test_appends_extension_when_missing(fixture_root: Path):
    assert find_file(fixture_root / "src" / "direct-file") == fixture_root / "src" / "direct-file.scss"


def test_finds_partial(fixture_root: Path):
    assert find_file(fixture_root / "src" / "partial") == fixture_root / "src" / "_partial.scss"


def test_does_not_double_underscore(fixture_root: Path):
    assert find_file(fixture_root / "src" / "_partial") == fixture_root / "src" / "_partial.scss"


def test_finds_partial_in_subdirectory(fixture_root: Path):
    assert find_file(fixture_root / "src" / "subdir" / "item") == fixture_root / "src" / "subdir" / "_item.scss"


def test_finds_partial_in_nested_package_path(fake_modules: Path):
    base = fake_modules / "my-pkg" / "src" / "core" / "config"
    assert find_file(base) == fake_modules / "my-pkg" / "src" / "core" / "_config.scss"


def test_finds_partial_for_specifier_with_extension(fake_modules: Path):
    base = fake_modules / "my-pkg" / "src" / "core" / "config.scss"
    assert find_file(base) == fake_modules / "my-pkg" / "src" / "core" / "_config.scss"


def test_returns_none_for_nonexistent(fixture_root: Path):
    assert find_file(fixture_root / "src" / "nonexistent") is None


def test_accepts_string_paths(fixture_root: Path):
    assert find_file(str(fixture_root / "src" / "partial")) == fixture_root / "src" / "_partial.scss"


def test_unrecognized_extension_is_not_returned_as_is(tmp_path: Path):
    (tmp_path / "notes.txt").write_text("")
    assert find_file(tmp_path / "notes.txt") is None


def test_extension_priority_order(tmp_path: Path):
    for ext in ("css", "scss", "sass"):
        (tmp_path / f"theme.{ext}").write_text("")
    assert find_file(tmp_path / "theme") == tmp_path / "theme.sass"

    assert find_file(tmp_path / "theme", ["css", "scss"]) == tmp_path / "theme.css"


def test_non_partial_preferred_over_partial(tmp_path: Path):
    (tmp_path / "colors.scss").write_text("")
    (tmp_path / "_colors.sass").write_text("")
    assert find_file(tmp_path / "colors") == tmp_path / "colors.scss"


def test_is_idempotent(fixture_root: Path):
    base = fixture_root / "src" / "partial"
    assert find_file(base) == find_file(base)

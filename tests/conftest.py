"""Shared fixtures for sass-path-resolver tests."""

import json
import logging
from pathlib import Path

import pytest


def write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


def write_manifest(package_dir: Path, **fields) -> Path:
    return write(package_dir / "package.json", json.dumps(fields))


@pytest.fixture
def fixture_root(tmp_path: Path) -> Path:
    """
    Build a project tree resembling a real node_modules install.

    Creates:
    - src/direct-file.scss, src/_partial.scss, src/subdir/_item.scss
    - fake_modules/my-pkg/              (package.json: sass -> src/index.scss)
        src/index.scss
        src/core/index.scss, src/core/_config.scss
        src/core/utils/index.scss, src/core/utils/_helpers.scss
    - fake_modules/@scoped/my-pkg/      (package.json: sass -> src/index.scss)
    - fake_modules/style-field-pkg/     (package.json: style -> dist/main.css)
    - fake_modules/no-style-pkg/        (package.json without style fields)
    """
    root = tmp_path / "project"

    write(root / "src" / "direct-file.scss", ".direct { color: blue; }\n")
    write(root / "src" / "_partial.scss", "$partial: 1;\n")
    write(root / "src" / "subdir" / "_item.scss", "$item: 1;\n")

    my_pkg = root / "fake_modules" / "my-pkg"
    write_manifest(my_pkg, name="my-pkg", version="1.0.0", sass="src/index.scss", main="index.js")
    write(my_pkg / "src" / "index.scss", "@forward 'core';\n")
    write(my_pkg / "src" / "core" / "index.scss", "@forward 'config';\n")
    write(my_pkg / "src" / "core" / "_config.scss", "$primary-color: #f00;\n")
    write(my_pkg / "src" / "core" / "utils" / "index.scss", "@forward 'helpers';\n")
    write(my_pkg / "src" / "core" / "utils" / "_helpers.scss", "@function double($n) { @return $n * 2; }\n")

    scoped = root / "fake_modules" / "@scoped" / "my-pkg"
    write_manifest(scoped, name="@scoped/my-pkg", sass="src/index.scss")
    write(scoped / "src" / "index.scss", "$scoped: true;\n")
    write(scoped / "src" / "_theme.scss", "$theme: dark;\n")

    style_pkg = root / "fake_modules" / "style-field-pkg"
    write_manifest(style_pkg, name="style-field-pkg", style="dist/main.css")
    write(style_pkg / "dist" / "main.css", ".main {}\n")

    write_manifest(root / "fake_modules" / "no-style-pkg", name="no-style-pkg", version="0.0.1")

    return root


@pytest.fixture
def fake_modules(fixture_root: Path) -> Path:
    """The fake node_modules include path inside :func:`fixture_root`."""
    return fixture_root / "fake_modules"


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo logging configuration done by init_logging (directly or via the CLI)."""
    logger = logging.getLogger("sass_path_resolver")
    handlers = logger.handlers[:]
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate

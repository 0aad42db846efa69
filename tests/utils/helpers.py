"""
Core test utilities for configuration files and sibling checkouts.
"""

from __future__ import annotations

import json
import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

import yaml

PACKAGER_INDEX_JS = """const locales = {
  /*===*/
  "old": () => require("./old.json"),
  /*===*/
};

export default locales;
"""

DESKTOP_INDEX_HTML = """<!DOCTYPE html>
<html>
<script>
const translations = /*===*/{}/*===*/;
</script>
</html>
"""


@contextmanager
def create_temp_config_file(
    config_data: object = None,
    *,
    suffix: str = ".yml",
    encoding: str = "utf-8",
) -> Generator[Path, None, None]:
    """
    Create a temporary configuration file with YAML content.

    Args:
        config_data: Data to serialize; None writes an empty document
        suffix: File suffix for the temporary file
        encoding: File encoding

    Yields:
        Path: Path to the created temporary configuration file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=suffix,
        encoding=encoding,
        delete=False,
    ) as temp_file:
        if config_data is not None:
            yaml.dump(config_data, temp_file, default_flow_style=False)
        temp_path = Path(temp_file.name)

    try:
        yield temp_path
    finally:
        temp_path.unlink(missing_ok=True)


def create_scratch_gui(workspace: Path) -> Path:
    """Create a scratch-gui checkout with the directories pull writes into."""
    root = workspace / "scratch-gui"
    (root / "src" / "lib" / "tw-translations").mkdir(parents=True)
    (root / "src" / "addons" / "settings").mkdir(parents=True)
    (root / "translations").mkdir(parents=True)
    return root


def create_packager(workspace: Path, index_js: str = PACKAGER_INDEX_JS) -> Path:
    """Create a packager checkout with a marker-delimited locale index."""
    root = workspace / "packager"
    locales = root / "src" / "locales"
    locales.mkdir(parents=True)
    _ = (locales / "index.js").write_text(index_js, encoding="utf-8")
    return root


def create_desktop(workspace: Path, index_html: str = DESKTOP_INDEX_HTML) -> Path:
    """Create a turbowarp-desktop checkout with a marker-delimited web page."""
    root = workspace / "turbowarp-desktop"
    (root / "src" / "l10n").mkdir(parents=True)
    (root / "docs").mkdir(parents=True)
    _ = (root / "docs" / "index.html").write_text(index_html, encoding="utf-8")
    return root


def create_scratch_vm(workspace: Path, source: str) -> Path:
    """Create a scratch-vm checkout whose TurboWarp extension holds ``source``."""
    root = workspace / "scratch-vm"
    extension = root / "src" / "extensions" / "tw"
    extension.mkdir(parents=True)
    _ = (extension / "index.js").write_text(source, encoding="utf-8")
    return root


def write_descriptors(path: Path, descriptors: list[dict[str, str]]) -> None:
    """Write a scratch-gui translations descriptor file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(json.dumps(descriptors), encoding="utf-8")


def read_json(path: Path) -> object:
    """Load a JSON file written by the tool."""
    return json.loads(path.read_text(encoding="utf-8"))  # pyright: ignore[reportAny]

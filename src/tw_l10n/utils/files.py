"""
Filesystem helpers shared by the pull and push workflows.

JSON output mirrors ``JSON.stringify(value, null, 4)`` so that regenerated
files in the downstream JavaScript repositories produce minimal diffs.
"""

from __future__ import annotations

import json
import logging
import stat
from pathlib import Path

from ..exceptions import MarkerPatchError

logger = logging.getLogger(__name__)

GENERATED_MARKER = "/*===*/"


def is_directory(path: Path) -> bool:
    """
    Check whether a path is an existing directory.

    Missing paths are reported as False; other OS errors (permissions, for
    example) propagate.
    """
    try:
        return stat.S_ISDIR(path.stat().st_mode)
    except (FileNotFoundError, NotADirectoryError):
        return False


def recursive_read_directory(directory: Path) -> list[Path]:
    """
    List every file below a directory, relative to it, in sorted order.
    """
    result: list[Path] = []
    for child in sorted(directory.iterdir()):
        if child.is_dir():
            result.extend(
                Path(child.name) / nested for nested in recursive_read_directory(child)
            )
        else:
            result.append(Path(child.name))
    return result


def format_json(value: object) -> str:
    """Serialize with 4-space indentation and literal non-ASCII characters."""
    return json.dumps(value, indent=4, ensure_ascii=False)


def format_compact_json(value: object) -> str:
    """Serialize without any insignificant whitespace."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def write_json(path: Path, value: object) -> None:
    """Write formatted JSON to a file."""
    _ = path.write_text(format_json(value), encoding="utf-8")
    logger.debug(f"Wrote {path}")


def patch_between_markers(
    content: str,
    replacement: str,
    start: str = GENERATED_MARKER,
    end: str = GENERATED_MARKER,
) -> str:
    """
    Replace the text between a single pair of literal markers.

    Both markers are kept verbatim. The content must contain exactly one
    start marker followed by exactly one end marker.

    Args:
        content: Text containing the marker pair
        replacement: New text to place between the markers
        start: Opening marker
        end: Closing marker

    Returns:
        The patched content

    Raises:
        MarkerPatchError: If the marker pair is missing or repeated
    """
    if start == end:
        occurrences = content.count(start)
        if occurrences != 2:
            raise MarkerPatchError(
                f"expected exactly one {start} ... {end} pair, found {occurrences} marker(s)"
            )
        start_index = content.index(start)
        end_index = content.index(end, start_index + len(start))
    else:
        start_count = content.count(start)
        end_count = content.count(end)
        if start_count != 1 or end_count != 1:
            raise MarkerPatchError(
                f"expected exactly one {start} ... {end} pair, "
                + f"found {start_count} start and {end_count} end marker(s)"
            )
        start_index = content.index(start)
        end_index = content.find(end, start_index + len(start))
        if end_index == -1:
            raise MarkerPatchError(f"{end} does not follow {start}")

    return content[: start_index + len(start)] + replacement + content[end_index:]


def patch_file_between_markers(
    path: Path,
    replacement: str,
    start: str = GENERATED_MARKER,
    end: str = GENERATED_MARKER,
) -> None:
    """
    Patch the marker-delimited region of a file in place.

    Raises:
        MarkerPatchError: If the file's marker pair is missing or repeated
    """
    content = path.read_text(encoding="utf-8")
    try:
        patched = patch_between_markers(content, replacement, start, end)
    except MarkerPatchError as e:
        raise MarkerPatchError(str(e), path=path) from e
    _ = path.write_text(patched, encoding="utf-8")
    logger.debug(f"Patched generated region of {path}")

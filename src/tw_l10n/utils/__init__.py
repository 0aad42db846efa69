"""Shared helpers for concurrency and file handling."""

from .batch import batch_map
from .files import (
    GENERATED_MARKER,
    format_compact_json,
    format_json,
    is_directory,
    patch_between_markers,
    patch_file_between_markers,
    recursive_read_directory,
    write_json,
)

__all__ = [
    "GENERATED_MARKER",
    "batch_map",
    "format_compact_json",
    "format_json",
    "is_directory",
    "patch_between_markers",
    "patch_file_between_markers",
    "recursive_read_directory",
    "write_json",
]

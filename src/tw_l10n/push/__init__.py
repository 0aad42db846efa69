"""Pushing source strings from sibling checkouts to Transifex."""

from .declarations import SourceDeclaration, parse_declarations
from .extractor import ExtractionResult, extract_source_messages, write_all_used_ids
from .pusher import SOURCE_RESOURCE, push_source_messages

__all__ = [
    "SOURCE_RESOURCE",
    "ExtractionResult",
    "SourceDeclaration",
    "extract_source_messages",
    "parse_declarations",
    "push_source_messages",
    "write_all_used_ids",
]

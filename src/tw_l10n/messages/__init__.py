"""Message tree handling."""

from .tree import (
    MessageNode,
    MessageTree,
    StructuredMessage,
    completion_threshold,
    count_strings,
    filter_by_threshold,
    make_structured_message,
    normalize_messages,
    remove_redundant_messages,
)

__all__ = [
    "MessageNode",
    "MessageTree",
    "StructuredMessage",
    "completion_threshold",
    "count_strings",
    "filter_by_threshold",
    "make_structured_message",
    "normalize_messages",
    "remove_redundant_messages",
]

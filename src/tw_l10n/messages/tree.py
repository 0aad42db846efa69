"""
Message tree normalization and completion filtering.

A message tree maps string ids to either a plain string (a leaf) or another
message tree. Trees pulled from Transifex may also contain structured entries
of the form {"string": ..., "context": ..., "developer_comment": ...}; these are
collapsed to their string by normalize_messages before any comparison.

All walks here are structural recursion over ``str | MessageTree``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TypeAlias, TypedDict, cast

from ..exceptions import MessageFormatError

logger = logging.getLogger(__name__)

MessageNode: TypeAlias = "str | MessageTree"
MessageTree: TypeAlias = dict[str, MessageNode]


class StructuredMessage(TypedDict):
    """Source string annotated with translator-facing context."""

    string: str
    context: str
    developer_comment: str


def make_structured_message(source_string: str, description: str) -> StructuredMessage:
    """
    Build a structured message for upload.

    Context is kept because existing translations are keyed on it; the
    developer comment is what Transifex shows most prominently to translators.
    """
    return {
        "string": source_string,
        "context": description,
        "developer_comment": description,
    }


def normalize_messages(messages: Mapping[str, object], _path: str = "") -> MessageTree:
    """
    Collapse structured entries to strings and sort keys at every level.

    Args:
        messages: Raw message tree, possibly containing structured entries

    Returns:
        A new tree whose leaves are all strings, with keys in sorted order

    Raises:
        MessageFormatError: If a value is neither a string nor an object
    """
    result: MessageTree = {}
    for message_id in sorted(messages):
        value = messages[message_id]
        key_path = f"{_path}.{message_id}" if _path else message_id
        if isinstance(value, str):
            result[message_id] = value
        elif isinstance(value, Mapping):
            entry = cast(Mapping[str, object], value)
            string = entry.get("string")
            if isinstance(string, str):
                result[message_id] = string
            else:
                result[message_id] = normalize_messages(entry, key_path)
        else:
            raise MessageFormatError(key_path, value)
    return result


def remove_redundant_messages(
    locale_messages: MessageTree, source_messages: MessageNode | None
) -> MessageTree:
    """
    Drop every string that is identical to its source-language counterpart.

    Nested trees are kept only when something inside them survives. A source
    subtree that is missing, or a source leaf where the locale has a subtree,
    counts as empty.
    """
    source_tree: MessageTree = source_messages if isinstance(source_messages, dict) else {}
    result: MessageTree = {}
    for message_id, value in locale_messages.items():
        source_value = source_tree.get(message_id)
        if isinstance(value, str):
            if value != source_value:
                result[message_id] = value
        else:
            nested = remove_redundant_messages(value, source_value)
            if nested:
                result[message_id] = nested
    return result


def count_strings(messages: MessageTree) -> int:
    """Count the leaf strings in a message tree."""
    count = 0
    for value in messages.values():
        if isinstance(value, str):
            count += 1
        else:
            count += count_strings(value)
    return count


def completion_threshold(source_messages: MessageTree, required_completion: float) -> float:
    """
    Minimum number of translated strings a locale needs to be shipped.

    Args:
        source_messages: Normalized source-language tree
        required_completion: Fraction from 0 to 1

    Raises:
        ValueError: If required_completion is outside [0, 1]
    """
    if not 0 <= required_completion <= 1:
        raise ValueError(
            f"required_completion must be between 0 and 1, got {required_completion}"
        )
    return max(1, count_strings(source_messages) * required_completion)


def filter_by_threshold(
    results: Mapping[str, MessageTree],
    source_messages: MessageTree,
    required_completion: float,
) -> dict[str, MessageTree]:
    """
    Remove redundant strings from each locale and drop incomplete locales.

    Args:
        results: Normalized trees keyed by locale, in output order
        source_messages: Normalized source-language tree
        required_completion: Fraction of source strings a locale must translate

    Returns:
        Filtered trees for the locales that meet the threshold, in input order
    """
    threshold = completion_threshold(source_messages, required_completion)
    filtered: dict[str, MessageTree] = {}
    for locale, messages in results.items():
        slimmed = remove_redundant_messages(messages, source_messages)
        translated = count_strings(slimmed)
        if translated >= threshold:
            filtered[locale] = slimmed
        else:
            logger.debug(
                f"Dropping {locale}: {translated} translated strings, {threshold:g} required"
            )
    return filtered

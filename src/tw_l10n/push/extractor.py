"""
Extraction of English source strings from sibling checkouts.

Source strings come from three places, merged in this order:

1. A small set of hardcoded messages.
2. scratch-gui's extracted react-intl descriptors (``translations/**/*.json``),
   restricted to ids in the ``tw.`` namespace.
3. formatMessage() declarations in scratch-vm's TurboWarp extension.

When an id appears in more than one place the later source wins.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Final, NamedTuple, TypedDict, cast

from ..config.schema import SyncConfig
from ..exceptions import DescriptorError, MissingSourceDirectoryError
from ..messages.tree import StructuredMessage, make_structured_message
from ..utils.files import is_directory, recursive_read_directory, write_json
from .declarations import parse_declarations

logger = logging.getLogger(__name__)

NAMESPACE_PREFIX: Final[str] = "tw."

TEXT_FIELDS: Final[tuple[str, ...]] = ("defaultMessage", "description")

VM_SOURCE_FILE: Final[Path] = Path("src") / "extensions" / "tw" / "index.js"

HARDCODED_MESSAGES: Final[dict[str, StructuredMessage]] = {
    "tw.blocks.openDocs": make_structured_message(
        "Open Documentation", "Button that opens extension documentation"
    ),
}


class MessageDescriptor(TypedDict):
    """One entry of a scratch-gui translations JSON file."""

    id: str
    defaultMessage: str
    description: str


class GuiMessages(NamedTuple):
    """Messages parsed from scratch-gui."""

    messages: dict[str, StructuredMessage]
    all_used_ids: list[str]


class ExtractionResult(NamedTuple):
    """Merged source messages and the id audit list."""

    messages: dict[str, StructuredMessage]
    all_used_ids: list[str]


def _read_descriptors(path: Path) -> list[MessageDescriptor]:
    """
    Load one descriptor file.

    Every entry needs a string id. Entries in the ``tw.`` namespace also need
    string defaultMessage and description fields.

    Raises:
        DescriptorError: If the file is not valid JSON or an entry is incomplete
    """
    try:
        payload = cast(object, json.loads(path.read_text(encoding="utf-8")))
    except ValueError as e:
        raise DescriptorError(path, f"invalid JSON: {e}") from e
    if not isinstance(payload, list):
        raise DescriptorError(path, f"expected a list, got {type(payload).__name__}")

    descriptors: list[MessageDescriptor] = []
    for index, entry in enumerate(cast(list[object], payload)):
        if not isinstance(entry, dict):
            raise DescriptorError(path, f"entry {index} is not an object")
        fields = cast(dict[str, object], entry)
        message_id = fields.get("id")
        if not isinstance(message_id, str):
            raise DescriptorError(path, f"entry {index} has no string id")
        if message_id.startswith(NAMESPACE_PREFIX):
            missing = [name for name in TEXT_FIELDS if not isinstance(fields.get(name), str)]
            if missing:
                raise DescriptorError(path, f"{message_id} missing " + ", ".join(missing))
        descriptors.append(cast(MessageDescriptor, fields))
    return descriptors


def parse_source_gui_messages(translations_directory: Path) -> GuiMessages:
    """
    Read every descriptor file below scratch-gui's translations directory.

    Args:
        translations_directory: scratch-gui/translations

    Returns:
        Namespaced messages, plus every id seen (sorted) regardless of namespace

    Raises:
        DescriptorError: If a descriptor file is malformed
    """
    messages: dict[str, StructuredMessage] = {}
    all_used_ids: list[str] = []

    for relative_path in recursive_read_directory(translations_directory):
        if relative_path.suffix != ".json":
            continue
        path = translations_directory / relative_path
        for descriptor in _read_descriptors(path):
            message_id = descriptor["id"]
            all_used_ids.append(message_id)
            if message_id.startswith(NAMESPACE_PREFIX):
                messages[message_id] = make_structured_message(
                    descriptor["defaultMessage"], descriptor["description"]
                )

    all_used_ids.sort()
    return GuiMessages(messages, all_used_ids)


def parse_source_vm_messages(source_file: Path) -> dict[str, StructuredMessage]:
    """
    Parse formatMessage() declarations from a scratch-vm source file.

    Raises:
        DeclarationError: If a declaration lacks id, default or description
    """
    contents = source_file.read_text(encoding="utf-8")
    return {
        declaration.id: make_structured_message(declaration.default, declaration.description)
        for declaration in parse_declarations(contents)
    }


def merge_messages(
    *sources: tuple[str, Mapping[str, StructuredMessage]],
) -> dict[str, StructuredMessage]:
    """
    Merge named message sources; later sources override earlier ones.

    An override that changes an existing definition is logged as a warning.
    """
    merged: dict[str, StructuredMessage] = {}
    origin: dict[str, str] = {}
    for source_name, messages in sources:
        for message_id, message in messages.items():
            previous = merged.get(message_id)
            if previous is not None and previous != message:
                logger.warning(
                    f"{message_id} from {source_name} overrides the definition from "
                    + f"{origin[message_id]}"
                )
            merged[message_id] = message
            origin[message_id] = source_name
    return merged


def extract_source_messages(config: SyncConfig) -> ExtractionResult:
    """
    Gather every source string to push.

    Raises:
        MissingSourceDirectoryError: If scratch-gui, its translations, or
            scratch-vm is not checked out
        DescriptorError: If a scratch-gui descriptor file is malformed
        DeclarationError: If a scratch-vm declaration is malformed
    """
    scratch_gui = config.paths.sibling(config.paths.scratch_gui)
    scratch_gui_translations = scratch_gui / "translations"
    scratch_vm = config.paths.sibling(config.paths.scratch_vm)
    for required in (scratch_gui, scratch_gui_translations, scratch_vm):
        if not is_directory(required):
            raise MissingSourceDirectoryError(required)

    gui = parse_source_gui_messages(scratch_gui_translations)
    vm_messages = parse_source_vm_messages(scratch_vm / VM_SOURCE_FILE)
    logger.info(
        f"Found {len(gui.messages)} scratch-gui messages ({len(gui.all_used_ids)} ids in total) "
        + f"and {len(vm_messages)} scratch-vm messages"
    )

    messages = merge_messages(
        ("hardcoded", HARDCODED_MESSAGES),
        ("scratch-gui", gui.messages),
        ("scratch-vm", vm_messages),
    )
    return ExtractionResult(messages, gui.all_used_ids)


def write_all_used_ids(path: Path, all_used_ids: list[str]) -> None:
    """Write the id audit list."""
    write_json(path, all_used_ids)
    logger.info(f"Wrote {len(all_used_ids)} ids to {path}")

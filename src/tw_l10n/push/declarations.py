"""
Parser for inline ``formatMessage({...})`` string declarations.

The grammar is deliberately narrow. A declaration is the text between
``formatMessage({`` and the first following ``}``. Inside it, each line may hold
one ``name: 'value'`` or ``name: "value"`` pair. Anything else in the block is
ignored. Escape sequences inside values are kept as written.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Final, NamedTuple

from ..exceptions import DeclarationError

DECLARATION_PATTERN: Final[re.Pattern[str]] = re.compile(r"formatMessage\(\{(.+?)\}", re.DOTALL)
FIELD_PATTERN: Final[re.Pattern[str]] = re.compile(r"""(\w+): ['"](.*)['"]""")

REQUIRED_FIELDS: Final[tuple[str, ...]] = ("id", "default", "description")


class SourceDeclaration(NamedTuple):
    """A translatable string declared in source code."""

    id: str
    default: str
    description: str


def iter_declaration_blocks(source: str) -> Iterator[str]:
    """Yield the argument block of every formatMessage() call."""
    for match in DECLARATION_PATTERN.finditer(source):
        yield match.group(1)


def parse_declaration_block(block: str) -> dict[str, str]:
    """Collect the quoted ``name: value`` pairs of a block."""
    return {match.group(1): match.group(2) for match in FIELD_PATTERN.finditer(block)}


def parse_declaration(block: str) -> SourceDeclaration:
    """
    Parse one declaration block.

    Raises:
        DeclarationError: If id, default or description is missing
    """
    fields = parse_declaration_block(block)
    missing = [name for name in REQUIRED_FIELDS if name not in fields]
    if missing:
        raise DeclarationError(block, missing)
    return SourceDeclaration(
        id=fields["id"], default=fields["default"], description=fields["description"]
    )


def parse_declarations(source: str) -> list[SourceDeclaration]:
    """Parse every formatMessage() declaration in a source file."""
    return [parse_declaration(block) for block in iter_declaration_blocks(source)]

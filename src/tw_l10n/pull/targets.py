"""
Downstream targets that receive pulled translations.

Each target corresponds to a sibling repository checkout. Checkouts are
optional: a target whose directory is missing is skipped.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from ..config.locales import locale_names
from ..config.schema import SyncConfig
from ..messages.tree import MessageTree
from ..utils.files import (
    format_compact_json,
    is_directory,
    patch_file_between_markers,
    write_json,
)
from .resources import ResourcePuller

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PulledResource:
    """Outcome of pulling one resource into a target."""

    resource: str
    required_completion: float
    locales: tuple[str, ...]


@dataclass
class TargetReport:
    """Resources written into one target during a pull."""

    target: str
    directory: Path
    resources: list[PulledResource] = field(default_factory=list)


class TargetWriter(ABC):
    """Abstract base class for a sibling repository that receives translations."""

    name: ClassVar[str]

    def __init__(self, puller: ResourcePuller, config: SyncConfig) -> None:
        self.puller: ResourcePuller = puller
        self.config: SyncConfig = config
        self._report: TargetReport | None = None

    @property
    @abstractmethod
    def directory_name(self) -> str:
        """Name of the sibling checkout directory."""

    @property
    def directory(self) -> Path:
        return self.config.paths.sibling(self.directory_name)

    async def pull_resource(
        self, resource: str, required_completion: float
    ) -> dict[str, MessageTree]:
        """Pull a resource and record it in this run's report."""
        translations = await self.puller.pull(resource, required_completion)
        if self._report is not None:
            self._report.resources.append(
                PulledResource(resource, required_completion, tuple(translations))
            )
        return translations

    async def run(self) -> TargetReport | None:
        """
        Pull and write this target's translations.

        Returns:
            A report of what was written, or None if the checkout is missing
        """
        directory = self.directory
        if not is_directory(directory):
            logger.info(f"Skipping {self.name}; could not find {self.directory_name}.")
            return None

        self._report = TargetReport(target=self.name, directory=directory)
        try:
            await self.write(directory)
            return self._report
        finally:
            self._report = None

    @abstractmethod
    async def write(self, directory: Path) -> None:
        """Pull and write every resource of this target into its checkout."""


class GuiTarget(TargetWriter):
    """scratch-gui: editor strings and addon settings strings."""

    name = "editor"

    @property
    def directory_name(self) -> str:
        return self.config.paths.scratch_gui

    async def write(self, directory: Path) -> None:
        # These build on top of scratch-l10n's translations, so nothing is too incomplete.
        gui_translations = await self.pull_resource("guijson", 0)
        write_json(
            directory / "src" / "lib" / "tw-translations" / "generated-translations.json",
            gui_translations,
        )

        addons_translations = await self.pull_resource("addonsjson", 0.5)
        write_json(
            directory / "src" / "addons" / "settings" / "translations.json",
            addons_translations,
        )


def render_locale_index(locales: list[str]) -> str:
    """Generate the lazily-required locale table for packager's index.js."""
    lines = "".join(
        f"  {json.dumps(locale)}: () => require({json.dumps(f'./{locale}.json')}),\n"
        for locale in locales
    )
    return f"\n{lines}  "


class PackagerTarget(TargetWriter):
    """packager: one JSON file per locale plus a generated index and name table."""

    name = "packager"

    @property
    def directory_name(self) -> str:
        return self.config.paths.packager

    async def write(self, directory: Path) -> None:
        translations = await self.pull_resource("packagerjson", 0.5)

        locales_directory = directory / "src" / "locales"
        for locale, messages in translations.items():
            write_json(locales_directory / f"{locale}.json", messages)

        patch_file_between_markers(
            locales_directory / "index.js", render_locale_index(list(translations))
        )

        # TODO: have packager import locale names from scratch-l10n instead
        write_json(locales_directory / "locale-names.json", locale_names())


def render_semi_compact(translations: dict[str, MessageTree]) -> str:
    """One locale per line, each serialized without whitespace."""
    result = "{\n"
    for locale, messages in translations.items():
        result += f"{json.dumps(locale, ensure_ascii=False)}:{format_compact_json(messages)},\n"
    result += "}"
    return result


class DesktopTarget(TargetWriter):
    """turbowarp-desktop: app strings and the inline strings of the website."""

    name = "desktop"

    @property
    def directory_name(self) -> str:
        return self.config.paths.desktop

    async def write(self, directory: Path) -> None:
        desktop_translations = await self.pull_resource("desktopjson", 0.5)
        write_json(directory / "src" / "l10n" / "translations.json", desktop_translations)

        web_translations = await self.pull_resource("desktop-webjson", 0.5)
        patch_file_between_markers(
            directory / "docs" / "index.html", render_semi_compact(web_translations)
        )


TARGETS: tuple[type[TargetWriter], ...] = (GuiTarget, PackagerTarget, DesktopTarget)


async def pull_everything(
    puller: ResourcePuller, config: SyncConfig
) -> list[TargetReport]:
    """
    Run every target in turn.

    Returns:
        Reports for the targets whose checkouts were present
    """
    reports: list[TargetReport] = []
    for target_class in TARGETS:
        report = await target_class(puller, config).run()
        if report is not None:
            reports.append(report)
    return reports

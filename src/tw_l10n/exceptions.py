"""
Exception classes for the localization sync tool.

All fatal conditions raised by the pull and push workflows derive from
L10nSyncError so the command-line entry points can report them uniformly.
A missing sibling checkout during a pull is not an error and has no class here.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    """Categories of errors for reporting."""

    NETWORK = "network"
    API = "api"
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    EXTRACTION = "extraction"
    FILE_FORMAT = "file_format"
    UNKNOWN = "unknown"


class L10nSyncError(Exception):
    """Base exception class for localization sync errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        context: object | None = None,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.context: object | None = context


class ConfigurationError(L10nSyncError):
    """Configuration-related errors."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(
            message, category=ErrorCategory.CONFIGURATION, context=context
        )


class TransifexError(L10nSyncError):
    """Errors reported by, or while talking to, the Transifex API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        context: object | None = None,
    ) -> None:
        category = ErrorCategory.NETWORK if status_code is None else ErrorCategory.API
        super().__init__(message, category=category, context=context)
        self.status_code: int | None = status_code


class LocaleFetchError(L10nSyncError):
    """A single locale of a resource could not be pulled."""

    def __init__(self, resource: str, locale: str, reason: object) -> None:
        super().__init__(
            f"Could not fetch messages for locale {locale} of {resource}: {reason}",
            category=ErrorCategory.API,
            context={"resource": resource, "locale": locale},
        )
        self.resource: str = resource
        self.locale: str = locale


class SourceLocaleMissingError(ConfigurationError):
    """The source locale was not among the pulled locales."""

    def __init__(self, resource: str, source_locale: str) -> None:
        super().__init__(
            f"Source locale {source_locale!r} missing from pulled results for {resource}; "
            + "it must be listed in the supported locales",
            context={"resource": resource, "locale": source_locale},
        )


class MissingSourceDirectoryError(ConfigurationError):
    """A checkout required to extract source strings is missing."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Cannot find {path}", context=path)


class MessageFormatError(L10nSyncError):
    """A message tree contains a value that is neither a string nor an object."""

    def __init__(self, key_path: str, value: object) -> None:
        super().__init__(
            f"Malformed message at {key_path!r}: expected string or object, "
            + f"got {type(value).__name__}",
            category=ErrorCategory.VALIDATION,
            context=key_path,
        )
        self.key_path: str = key_path


class DeclarationError(L10nSyncError):
    """A formatMessage() declaration is missing required fields."""

    def __init__(self, block: str, missing: list[str]) -> None:
        super().__init__(
            "Error parsing formatMessage() string: missing "
            + ", ".join(missing)
            + f" in {{{block.strip()}}}",
            category=ErrorCategory.EXTRACTION,
            context=block,
        )
        self.missing: list[str] = missing


class DescriptorError(L10nSyncError):
    """A scratch-gui descriptor file is malformed or lacks required fields."""

    def __init__(self, path: object, problem: str) -> None:
        super().__init__(
            f"Error parsing message descriptors in {path}: {problem}",
            category=ErrorCategory.EXTRACTION,
            context=path,
        )
        self.path: object = path


class MarkerPatchError(L10nSyncError):
    """The marker pair delimiting a generated region was not found exactly once."""

    def __init__(self, message: str, path: object | None = None) -> None:
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message, category=ErrorCategory.FILE_FORMAT, context=path)

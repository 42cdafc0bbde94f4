"""
Error types for formflow file loading and project configuration.

The behavior engine itself is total and raises none of these; they are
raised only where authoring data enters from disk.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ErrorContext:
    """
    Where an error happened.

    Attributes:
        file: Path to the offending file
        detail: Optional location inside the file (JSON path, TOML table)
    """

    file: Path
    detail: str | None = None

    def format(self) -> str:
        """Format as ``file`` or ``file (detail)``."""
        if self.detail:
            return f"{self.file} ({self.detail})"
        return str(self.file)


class FormflowError(Exception):
    """
    Base exception for all formflow errors.

    Rendered as ``<file> (<detail>): <message>`` when a context is given,
    otherwise just the message.
    """

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        prefix = f"{context.format()}: " if context else ""
        super().__init__(prefix + message)

    @property
    def file(self) -> Path | None:
        return self.context.file if self.context else None


class LoadError(FormflowError):
    """
    Raised when a matrix, bundle or schema file cannot be loaded.

    Examples:
    - File does not exist
    - Invalid JSON
    - Cell mode outside hidden/readonly/editable
    - Bundle missing its state
    """


class ManifestError(FormflowError):
    """
    Raised when formflow.toml is missing or invalid.

    Examples:
    - No [paths] schema entry
    - A table or value of the wrong type
    - states is not a list of strings
    """

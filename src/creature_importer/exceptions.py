from typing import Any, Optional


class CreatureImportError(Exception):
    """Base exception for the creature importer."""


class ConfigurationError(CreatureImportError):
    """Raised when configuration values are missing or invalid."""


class FormatValidationError(CreatureImportError):
    """
    Raised when a payload does not match its declared format.

    Fatal to one import. Nothing from the payload is applied.
    """

    def __init__(self, field: str, expected: Any, actual: Any = None, message: Optional[str] = None):
        self.field = field
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"Invalid value for '{field}': expected {expected!r}, got {actual!r}"
        super().__init__(message)


class PartitionReadError(CreatureImportError):
    """Raised by catalogs when a partition cannot be scanned."""

    def __init__(self, partition: str, reason: str = ""):
        self.partition = partition
        super().__init__(f"Could not read partition '{partition}'" + (f": {reason}" if reason else ""))


class NumericParseError(CreatureImportError):
    """Raised when a numeric field has no leading integer component."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Not a numeric value: {value!r}")


class EntryNotFoundError(CreatureImportError):
    """Raised when a catalog entry id cannot be fetched."""


class WorkflowStateError(CreatureImportError):
    """Raised when a workflow transition is not allowed in the current state."""

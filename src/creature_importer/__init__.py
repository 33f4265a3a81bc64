"""
Creature importer.

Imports creature statblocks from several editor and tabletop formats and
binds their abilities to a reference library.
"""
from .app import CreatureImportApp
from .config import ImporterConfig
from .config_loader import configure_logging, load_config_from_env
from .exceptions import (
    ConfigurationError,
    CreatureImportError,
    EntryNotFoundError,
    FormatValidationError,
    NumericParseError,
    PartitionReadError,
    WorkflowStateError,
)
from .models import AbilityKind, CreatureRecord, ReferenceLibraryEntry, ResolvedAbility, UnresolvedAbilityRef
from .schemas import ImportPlan, ImportSummary, NormalizationResult

__all__ = [
    "CreatureImportApp",
    "ImporterConfig",
    "configure_logging",
    "load_config_from_env",
    "ConfigurationError",
    "CreatureImportError",
    "EntryNotFoundError",
    "FormatValidationError",
    "NumericParseError",
    "PartitionReadError",
    "WorkflowStateError",
    "AbilityKind",
    "CreatureRecord",
    "ReferenceLibraryEntry",
    "ResolvedAbility",
    "UnresolvedAbilityRef",
    "ImportPlan",
    "ImportSummary",
    "NormalizationResult",
]

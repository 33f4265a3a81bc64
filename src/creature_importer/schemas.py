from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .models import AbilityKind, CreatureRecord


@dataclass
class ImportSummary:
    name: str
    source_format: str
    refinements: int = 0
    trainings: int = 0
    weapons: int = 0
    abilities: int = 0
    unresolved_masteries: int = 0
    unresolved_spells: int = 0
    
    @property
    def unresolved(self) -> int:
        return self.unresolved_masteries + self.unresolved_spells
    
    @classmethod
    def from_record(cls, record: CreatureRecord) -> "ImportSummary":
        return cls(
            name=record.name,
            source_format=record.source_format,
            refinements=sum(1 for f in record.features if f.kind == "refinement"),
            trainings=sum(1 for f in record.features if f.kind == "training"),
            weapons=len(record.weapons),
            abilities=len(record.abilities),
            unresolved_masteries=sum(1 for r in record.unresolved_abilities if r.kind == AbilityKind.MASTERY),
            unresolved_spells=sum(1 for r in record.unresolved_abilities if r.kind == AbilityKind.SPELL),
        )
    
    def to_text(self) -> str:
        parts = [f"Import '{self.name}' ({self.source_format})"]
        parts.append(f"Refinements: {self.refinements}")
        parts.append(f"Trainings: {self.trainings}")
        parts.append(f"Weapons: {self.weapons}")
        if self.abilities:
            parts.append(f"Library abilities: {self.abilities}")
        if self.unresolved:
            parts.append(f"Unresolved: {self.unresolved_masteries} masteries, {self.unresolved_spells} spells")
        return ". ".join(parts) + "."


@dataclass
class NormalizationResult:
    record: CreatureRecord
    summary: ImportSummary


@dataclass
class ImportPlan:
    """
    What the host should persist for one creature.
    
    action is "create" or "update". On update only item types listed in
    delete_item_types are removed from the existing actor before items
    are added.
    """
    action: str
    actor_data: Dict[str, Any]
    items: List[Dict[str, Any]] = field(default_factory=list)
    actor_id: Optional[str] = None
    delete_item_types: List[str] = field(default_factory=list)
    summary: Optional[ImportSummary] = None

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional
import uuid


ATTRIBUTE_KEYS = (
    "charisma", "agility", "intuition", "constitution",
    "mysticism", "strength", "mind", "willpower",
)

DERIVED_KEYS = (
    "size", "speed", "initiative", "healthpoints", "focuspoints",
    "defense", "bodyresist", "mindresist", "damagereduction",
)


class AbilityKind(str, Enum):
    MASTERY = "mastery"
    SPELL = "spell"


@dataclass(frozen=True)
class ReferenceLibraryEntry:
    unique_id: str
    name: str
    entity_kind: AbilityKind
    skill: Optional[str]
    level: int
    description: str = ""
    partition: Optional[str] = None
    data: Dict = field(default_factory=dict, compare=False, hash=False)


@dataclass
class SkillValue:
    value: int = 0
    points: int = 0


@dataclass
class WeaponRef:
    name: str
    skill: str = "melee"
    value: int = 0
    damage: str = "1W6"
    weapon_speed: int = 0
    range: int = 0
    features: str = ""


@dataclass
class FeatureRef:
    name: str
    kind: str = "feature"  # refinement | training | feature
    category: str = "other"
    cost: int = 0
    description: str = ""
    great_tricks: List[str] = field(default_factory=list)


@dataclass
class UnresolvedAbilityRef:
    name: str
    kind: AbilityKind
    level_ceiling: int
    skill_hint: Optional[str] = None
    category: Optional[str] = None
    source: Optional[str] = None
    manually_tagged: bool = False
    ref_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self):
        if self.level_ceiling < 0:
            self.level_ceiling = 0


@dataclass
class ResolvedAbility:
    entry: ReferenceLibraryEntry
    skill_hint: Optional[str] = None

    @property
    def unique_id(self) -> str:
        return self.entry.unique_id

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def skill(self) -> Optional[str]:
        return self.skill_hint or self.entry.skill


@dataclass
class CreatureRecord:
    """
    Canonical creature produced by a format normalizer.

    Only the ability lists change after creation, and only through
    bind_ability / tag_unresolved while resolution runs.
    """
    name: str
    source_format: str
    attributes: Dict[str, int] = field(default_factory=dict)
    skills: Dict[str, SkillValue] = field(default_factory=dict)
    derived_values: Dict[str, int] = field(default_factory=dict)
    weapons: List[WeaponRef] = field(default_factory=list)
    features: List[FeatureRef] = field(default_factory=list)
    abilities: List[ResolvedAbility] = field(default_factory=list)
    unresolved_abilities: List[UnresolvedAbilityRef] = field(default_factory=list)
    basis: str = ""
    role: str = ""
    types: List[str] = field(default_factory=list)
    description: str = ""

    def skill_value(self, skill: str) -> int:
        skill_value = self.skills.get(skill)
        return skill_value.value if skill_value else 0

    def find_unresolved(self, ref_id: str) -> Optional[UnresolvedAbilityRef]:
        for ref in self.unresolved_abilities:
            if ref.ref_id == ref_id:
                return ref
        return None

    def has_ability(self, unique_id: str) -> bool:
        return any(ability.unique_id == unique_id for ability in self.abilities)

    def bind_ability(self, ref: UnresolvedAbilityRef, ability: ResolvedAbility) -> bool:
        """
        Replace an unresolved placeholder with a resolved ability.

        :return: False if the canonical entry was already on the creature
                 (the placeholder is still removed).
        """
        self.unresolved_abilities = [r for r in self.unresolved_abilities if r.ref_id != ref.ref_id]
        if self.has_ability(ability.unique_id):
            return False
        self.abilities.append(ability)
        return True

    def add_ability(self, ability: ResolvedAbility) -> bool:
        if self.has_ability(ability.unique_id):
            return False
        self.abilities.append(ability)
        return True

    def tag_unresolved(self, ref: UnresolvedAbilityRef) -> None:
        ref.manually_tagged = True

"""
Structural schemas for the supported payload formats.

Numeric fields are typed loosely on purpose: malformed numbers are
recovered to 0 by the normalizers instead of failing validation.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class _NamedPayload(_Lenient):
    name: str
    
    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value.strip()


# EDITOR_V1

class WeaponV1(_Lenient):
    name: str = ""
    wert: Any = 0
    schaden: Optional[str] = None
    WGS: Any = 0
    reichweite: Any = 0
    merkmale: Optional[str] = ""
    fertigkeit: Optional[str] = None


class MasteryV1(_Lenient):
    name: str
    fertigkeit: Optional[str] = None
    schwelle: Any = None


class SpellV1(_Lenient):
    name: str
    schule: Optional[str] = None
    grad: Any = None


class RefinementV1(_Lenient):
    name: str
    kategorie: Optional[str] = None
    kosten: Any = 0
    beschreibung: Optional[str] = ""
    zusaetzlicheWaffe: Optional[WeaponV1] = None


class TrainingV1(_Lenient):
    name: str
    kategorie: Optional[str] = None
    potenzialKosten: Any = 0
    grosseTricksWahl: Optional[str] = None
    beschreibung: Optional[str] = ""
    meisterschaften: List[Union[str, MasteryV1]] = Field(default_factory=list)


class EditorV1Payload(_NamedPayload):
    editor: str
    basis: Optional[str] = None
    rolle: Optional[str] = None
    typus: List[str] = Field(default_factory=list)
    description: Optional[str] = ""
    attribute: Dict[str, Any] = Field(default_factory=dict)
    fertigkeiten: Dict[str, Any] = Field(default_factory=dict)
    abgeleiteteWerte: Dict[str, Any] = Field(default_factory=dict)
    meisterschaften: List[Union[str, MasteryV1]] = Field(default_factory=list)
    zauber: List[Union[str, SpellV1]] = Field(default_factory=list)
    verfeinerungen: List[RefinementV1] = Field(default_factory=list)
    abrichtungen: List[TrainingV1] = Field(default_factory=list)
    waffen: List[WeaponV1] = Field(default_factory=list)


# EDITOR_V2

class KeyedValueV2(_Lenient):
    id: str
    value: Any = 0
    points: Any = 0


class AbilityV2(_Lenient):
    name: str
    skill: Optional[str] = None
    level: Any = None
    grade: Any = None
    libraryId: Optional[str] = None
    description: Optional[str] = ""


class WeaponV2(_Lenient):
    name: str = ""
    skill: Optional[str] = None
    value: Any = 0
    damage: Optional[str] = None
    weaponSpeed: Any = 0
    range: Any = 0
    features: Optional[str] = ""


class RefinementV2(_Lenient):
    name: str
    category: Optional[str] = None
    cost: Any = 0
    description: Optional[str] = ""
    weapon: Optional[WeaponV2] = None


class TrainingV2(_Lenient):
    name: str
    category: Optional[str] = None
    potentialCost: Any = 0
    greatTricks: Optional[str] = None
    description: Optional[str] = ""
    masteries: List[str] = Field(default_factory=list)


class CreatureDataV2(_Lenient):
    basis: Optional[str] = None
    role: Optional[str] = None
    types: List[str] = Field(default_factory=list)


class EditorV2Payload(_NamedPayload):
    editor: str
    formatVersion: Any = None
    description: Optional[str] = ""
    creatureData: CreatureDataV2 = Field(default_factory=CreatureDataV2)
    attributes: List[KeyedValueV2] = Field(default_factory=list)
    skills: List[KeyedValueV2] = Field(default_factory=list)
    derivedValues: List[KeyedValueV2] = Field(default_factory=list)
    masteries: List[AbilityV2] = Field(default_factory=list)
    spells: List[AbilityV2] = Field(default_factory=list)
    weapons: List[WeaponV2] = Field(default_factory=list)
    refinements: List[RefinementV2] = Field(default_factory=list)
    trainings: List[TrainingV2] = Field(default_factory=list)


# VTT_IMPORT

class VttAbility(_Lenient):
    type: str
    name: str
    skill: Optional[str] = None
    level: Any = None


class VttAttack(_Lenient):
    name: str
    skill: Optional[str] = None
    value: Any = 0
    damage: Optional[str] = None
    speed: Any = 0
    range: Any = 0
    features: Optional[str] = ""


class VttFeature(_Lenient):
    name: str
    description: Optional[str] = ""


class VttPayload(_NamedPayload):
    system: str
    description: Optional[str] = ""
    stats: Dict[str, Any] = Field(default_factory=dict)
    derived: Dict[str, Any] = Field(default_factory=dict)
    skills: Dict[str, Any] = Field(default_factory=dict)
    abilities: List[VttAbility] = Field(default_factory=list)
    attacks: List[VttAttack] = Field(default_factory=list)
    features: List[VttFeature] = Field(default_factory=list)

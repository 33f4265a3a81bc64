"""
EDITOR_V2: structured export of the creature editor.

Abilities that carry a libraryId are already bound to the reference
library and are kept as resolved abilities.
"""
import logging
from typing import List

from ..models import AbilityKind, CreatureRecord, ReferenceLibraryEntry, ResolvedAbility
from ..utils.numeric import coerce_int
from .base import EDITOR_TAG, FormatNormalizer, non_negative, register_format
from .features import build_feature, build_weapon
from .keys import CANONICAL_ATTRIBUTES, CANONICAL_DERIVED, V2_DERIVED_ALIASES
from .payload_schemas import AbilityV2, EditorV2Payload

logger = logging.getLogger(__name__)


@register_format("EDITOR_V2")
class EditorV2Normalizer(FormatNormalizer):
    required_fields = {"editor": EDITOR_TAG, "formatVersion": 2}
    schema = EditorV2Payload
    
    def _build(self, model: EditorV2Payload) -> CreatureRecord:
        record = CreatureRecord(
            name=model.name,
            source_format=self.format_tag,
            basis=model.creatureData.basis or "",
            role=model.creatureData.role or "",
            types=list(model.creatureData.types),
            description=model.description or "",
        )
        
        for item in model.attributes:
            key = item.id.strip().lower()
            if key in CANONICAL_ATTRIBUTES:
                record.attributes[key] = non_negative(item.value, f"attributes.{item.id}")
            else:
                logger.debug(f"Dropping unknown attribute '{item.id}'")
        
        for item in model.derivedValues:
            key = item.id.strip().lower()
            key = V2_DERIVED_ALIASES.get(key, key)
            if key in CANONICAL_DERIVED:
                record.derived_values[key] = non_negative(item.value, f"derivedValues.{item.id}")
            else:
                logger.debug(f"Dropping unknown derived value '{item.id}'")
        
        for item in model.skills:
            skill = self.canonical_skill(item.id)
            if skill is None:
                logger.debug(f"Dropping unknown skill '{item.id}'")
                continue
            record.skills[skill] = self.make_skill(item.value, item.points, f"skills.{item.id}")
        
        self._add_abilities(record, model.masteries, AbilityKind.MASTERY)
        self._add_abilities(record, model.spells, AbilityKind.SPELL)
        
        for weapon in model.weapons:
            record.weapons.append(build_weapon(
                weapon.name, self._weapon_skill(weapon.skill), weapon.value,
                weapon.damage, weapon.weaponSpeed, weapon.range, weapon.features,
            ))
        
        for refinement in model.refinements:
            record.features.append(build_feature(
                refinement.name, "refinement", refinement.category,
                refinement.cost, refinement.description,
            ))
            weapon = refinement.weapon
            if weapon is not None:
                record.weapons.append(build_weapon(
                    weapon.name or f"{refinement.name} - Weapon", self._weapon_skill(weapon.skill),
                    weapon.value, weapon.damage, weapon.weaponSpeed, weapon.range, weapon.features,
                ))
        
        for training in model.trainings:
            record.features.append(build_feature(
                training.name, "training", training.category,
                training.potentialCost, training.description, training.greatTricks,
            ))
            for name in training.masteries:
                record.unresolved_abilities.append(self.unresolved(
                    name, AbilityKind.MASTERY, None, source=f"trainings:{training.name}"
                ))
        
        return record
    
    def _add_abilities(self, record: CreatureRecord, abilities: List[AbilityV2], kind: AbilityKind) -> None:
        for ability in abilities:
            level = ability.level if kind == AbilityKind.MASTERY else ability.grade
            skill = self.canonical_skill(ability.skill) if ability.skill else None
            
            if ability.libraryId:
                entry = ReferenceLibraryEntry(
                    unique_id=ability.libraryId,
                    name=ability.name,
                    entity_kind=kind,
                    skill=skill,
                    level=max(coerce_int(level, field=f"{ability.name}.level"), 0),
                    description=ability.description or "",
                )
                if not record.add_ability(ResolvedAbility(entry=entry, skill_hint=skill)):
                    logger.info(f"Skipping duplicate library entry {ability.libraryId} ('{ability.name}')")
                continue
            
            record.unresolved_abilities.append(self.unresolved(
                ability.name, kind, level, skill_hint=skill, category=ability.skill,
            ))
    
    def _weapon_skill(self, skill):
        return self.canonical_skill(skill) if skill else None

"""
VTT_IMPORT: flat statblocks exported from a virtual tabletop.
"""
import logging

from ..models import AbilityKind, CreatureRecord
from .base import FormatNormalizer, register_format
from .features import build_feature, build_weapon
from .keys import VTT_ATTRIBUTES, VTT_DERIVED, VTT_SKILLS
from .payload_schemas import VttPayload

logger = logging.getLogger(__name__)


@register_format("VTT_IMPORT")
class VttImportNormalizer(FormatNormalizer):
    required_fields = {"system": "splittermond"}
    schema = VttPayload
    
    def _build(self, model: VttPayload) -> CreatureRecord:
        record = CreatureRecord(
            name=model.name,
            source_format=self.format_tag,
            attributes=self.map_values(
                {key.upper(): value for key, value in model.stats.items()}, VTT_ATTRIBUTES, "stats"
            ),
            derived_values=self.map_values(
                {key.upper(): value for key, value in model.derived.items()}, VTT_DERIVED, "derived"
            ),
            description=model.description or "",
        )
        
        for label, raw in model.skills.items():
            skill = VTT_SKILLS.get(label.strip().lower())
            if skill is None:
                logger.debug(f"Dropping unknown skill '{label}'")
                continue
            record.skills[skill] = self.make_skill(raw, 0, f"skills.{label}")
        
        for ability in model.abilities:
            try:
                kind = AbilityKind(ability.type.strip().lower())
            except ValueError:
                logger.debug(f"Dropping ability '{ability.name}' of unknown type '{ability.type}'")
                continue
            skill = VTT_SKILLS.get(ability.skill.strip().lower()) if ability.skill else None
            record.unresolved_abilities.append(self.unresolved(
                ability.name, kind, ability.level, skill_hint=skill, category=ability.skill,
            ))
        
        for attack in model.attacks:
            skill = VTT_SKILLS.get(attack.skill.strip().lower()) if attack.skill else None
            record.weapons.append(build_weapon(
                attack.name, skill, attack.value, attack.damage,
                attack.speed, attack.range, attack.features,
            ))
        
        for feature in model.features:
            record.features.append(build_feature(feature.name, "feature", description=feature.description))
        
        return record

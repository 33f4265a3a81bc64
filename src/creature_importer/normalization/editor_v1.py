"""
EDITOR_V1: files written by the German creature editor.

Masteries and spells are listed by name only and always need resolution.
Weapons and refinement weapons carry full combat data and are built
directly.
"""
import logging
from typing import Optional, Union

from ..models import AbilityKind, CreatureRecord
from .base import EDITOR_TAG, FormatNormalizer, register_format
from .features import build_feature, build_weapon
from .keys import V1_ATTRIBUTES, V1_DERIVED, V1_SKILLS
from .payload_schemas import EditorV1Payload, MasteryV1, SpellV1

logger = logging.getLogger(__name__)


@register_format("EDITOR_V1")
class EditorV1Normalizer(FormatNormalizer):
    required_fields = {"editor": EDITOR_TAG}
    schema = EditorV1Payload
    
    def _build(self, model: EditorV1Payload) -> CreatureRecord:
        record = CreatureRecord(
            name=model.name,
            source_format=self.format_tag,
            attributes=self.map_values(
                {key.upper(): value for key, value in model.attribute.items()}, V1_ATTRIBUTES, "attribute"
            ),
            derived_values=self.map_values(
                {key.upper(): value for key, value in model.abgeleiteteWerte.items()}, V1_DERIVED, "abgeleiteteWerte"
            ),
            basis=model.basis or "",
            role=model.rolle or "",
            types=list(model.typus),
            description=model.description or "",
        )
        
        for label, raw in model.fertigkeiten.items():
            skill = self._skill_key(label)
            if skill is None:
                logger.debug(f"Dropping unknown skill '{label}'")
                continue
            if isinstance(raw, dict):
                record.skills[skill] = self.make_skill(raw.get("wert"), raw.get("punkte"), f"fertigkeiten.{label}")
            else:
                record.skills[skill] = self.make_skill(raw, 0, f"fertigkeiten.{label}")
        
        for mastery in model.meisterschaften:
            record.unresolved_abilities.append(self._mastery(mastery, source="meisterschaften"))
        
        for spell in model.zauber:
            record.unresolved_abilities.append(self._spell(spell))
        
        for weapon in model.waffen:
            record.weapons.append(build_weapon(
                weapon.name, self._skill_key(weapon.fertigkeit), weapon.wert,
                weapon.schaden, weapon.WGS, weapon.reichweite, weapon.merkmale,
            ))
        
        for refinement in model.verfeinerungen:
            record.features.append(build_feature(
                refinement.name, "refinement", refinement.kategorie,
                refinement.kosten, refinement.beschreibung,
            ))
            weapon = refinement.zusaetzlicheWaffe
            if weapon is not None:
                record.weapons.append(build_weapon(
                    f"{refinement.name} - Waffe", self._skill_key(weapon.fertigkeit), weapon.wert,
                    weapon.schaden, weapon.WGS, weapon.reichweite, weapon.merkmale,
                ))
        
        for training in model.abrichtungen:
            record.features.append(build_feature(
                training.name, "training", training.kategorie,
                training.potenzialKosten, training.beschreibung, training.grosseTricksWahl,
            ))
            for mastery in training.meisterschaften:
                record.unresolved_abilities.append(
                    self._mastery(mastery, source=f"abrichtungen:{training.name}")
                )
        
        return record
    
    def _skill_key(self, label: Optional[str]) -> Optional[str]:
        if not label:
            return None
        return V1_SKILLS.get(label.strip().lower()) or self.canonical_skill(label)
    
    def _mastery(self, mastery: Union[str, MasteryV1], source: str):
        if isinstance(mastery, str):
            return self.unresolved(mastery, AbilityKind.MASTERY, None, source=source)
        return self.unresolved(
            mastery.name,
            AbilityKind.MASTERY,
            mastery.schwelle,
            skill_hint=self._skill_key(mastery.fertigkeit),
            category=mastery.fertigkeit,
            source=source,
        )
    
    def _spell(self, spell: Union[str, SpellV1]):
        if isinstance(spell, str):
            return self.unresolved(spell, AbilityKind.SPELL, None, source="zauber")
        return self.unresolved(
            spell.name,
            AbilityKind.SPELL,
            spell.grad,
            skill_hint=self.config.map_school(spell.schule),
            category=spell.schule,
            source="zauber",
        )

"""
Builds host documents from a canonical creature record.
"""
from typing import Any, Dict, List, Optional

from .models import CreatureRecord, FeatureRef, ResolvedAbility, UnresolvedAbilityRef, WeaponRef
from .schemas import ImportPlan, ImportSummary

ACTOR_TYPE = "npc"
WEAPON_ITEM_TYPE = "npcattack"
FEATURE_ITEM_TYPE = "npcfeature"


class CreatureCanonicalizer:
    @staticmethod
    def to_actor_data(record: CreatureRecord) -> Dict[str, Any]:
        return {
            "name": record.name,
            "type": ACTOR_TYPE,
            "system": {
                "attributes": {key: {"value": value} for key, value in record.attributes.items()},
                "derivedAttributes": {key: {"value": value} for key, value in record.derived_values.items()},
                "skills": {
                    key: {"value": skill.value, "points": skill.points}
                    for key, skill in record.skills.items()
                },
                "type": ", ".join(record.types),
                "basis": record.basis,
                "role": record.role,
                "biography": record.description,
            },
            "flags": {"creature-importer": {"sourceFormat": record.source_format}},
        }
    
    @staticmethod
    def weapon_item(weapon: WeaponRef) -> Dict[str, Any]:
        return {
            "name": weapon.name,
            "type": WEAPON_ITEM_TYPE,
            "system": {
                "skill": weapon.skill,
                "skillValue": weapon.value,
                "damage": weapon.damage,
                "weaponSpeed": weapon.weapon_speed,
                "range": weapon.range,
                "features": weapon.features,
            },
        }
    
    @staticmethod
    def feature_item(feature: FeatureRef) -> Dict[str, Any]:
        description = feature.description
        if feature.great_tricks:
            description = f"{description}\nGreat tricks: {', '.join(feature.great_tricks)}".strip()
        return {
            "name": feature.name,
            "type": FEATURE_ITEM_TYPE,
            "system": {"description": description},
            "flags": {"creature-importer": {"kind": feature.kind, "category": feature.category, "cost": feature.cost}},
        }
    
    @staticmethod
    def ability_item(ability: ResolvedAbility) -> Dict[str, Any]:
        """Full library document with the creature's skill bound in."""
        entry = ability.entry
        if entry.data:
            data = dict(entry.data)
            data["system"] = dict(data.get("system") or {})
        else:
            level_field = "level" if entry.entity_kind.value == "mastery" else "skillLevel"
            data = {
                "name": entry.name,
                "type": entry.entity_kind.value,
                "system": {level_field: entry.level, "description": entry.description},
            }
        data.pop("_id", None)
        if ability.skill:
            data["system"]["skill"] = ability.skill
        data["flags"] = dict(data.get("flags") or {})
        data["flags"]["creature-importer"] = {"sourceId": entry.unique_id}
        return data
    
    @staticmethod
    def placeholder_item(ref: UnresolvedAbilityRef) -> Dict[str, Any]:
        level_field = "level" if ref.kind.value == "mastery" else "skillLevel"
        return {
            "name": ref.name,
            "type": ref.kind.value,
            "system": {"skill": ref.skill_hint or "", level_field: ref.level_ceiling},
            "flags": {"creature-importer": {"unresolved": True, "manuallyTagged": ref.manually_tagged}},
        }


def build_items(record: CreatureRecord) -> List[Dict[str, Any]]:
    items: List[Dict[str, Any]] = []
    items.extend(CreatureCanonicalizer.weapon_item(w) for w in record.weapons)
    items.extend(CreatureCanonicalizer.feature_item(f) for f in record.features)
    items.extend(CreatureCanonicalizer.ability_item(a) for a in record.abilities)
    items.extend(CreatureCanonicalizer.placeholder_item(r) for r in record.unresolved_abilities)
    return items


def build_import_plan(record: CreatureRecord, existing_actor_id: Optional[str] = None) -> ImportPlan:
    """
    Build the persistence plan for a record.
    
    Updating an existing actor replaces its weapon items only; other items
    on the actor are left alone.
    """
    if existing_actor_id:
        return ImportPlan(
            action="update",
            actor_id=existing_actor_id,
            actor_data=CreatureCanonicalizer.to_actor_data(record),
            items=build_items(record),
            delete_item_types=[WEAPON_ITEM_TYPE],
            summary=ImportSummary.from_record(record),
        )
    
    return ImportPlan(
        action="create",
        actor_data=CreatureCanonicalizer.to_actor_data(record),
        items=build_items(record),
        summary=ImportSummary.from_record(record),
    )

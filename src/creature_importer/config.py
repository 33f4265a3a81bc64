from dataclasses import dataclass, field
from typing import Dict, List, Optional


GENERAL_SKILLS = [
    "acrobatics", "alchemy", "leadership", "arcanelore", "athletics",
    "performance", "diplomacy", "clscraft", "empathy", "determination",
    "dexterity", "history", "craftmanship", "heal", "stealth", "hunting",
    "countrylore", "nature", "eloquence", "locksmith", "swim", "seafaring",
    "streetlore", "animals", "survival", "perception", "endurance",
]

FIGHTING_SKILLS = [
    "melee", "slashing", "chains", "blades", "longrange", "staffs", "throwing",
]

MAGIC_SKILLS = [
    "antimagic", "controlmagic", "motionmagic", "insightmagic", "stonemagic",
    "firemagic", "healmagic", "illusionmagic", "combatmagic", "lightmagic",
    "naturemagic", "shadowmagic", "fatemagic", "protectionmagic",
    "enhancemagic", "deathmagic", "transformationmagic", "watermagic",
    "windmagic",
]

SKILL_LABELS = {
    "acrobatics": "Acrobatics", "alchemy": "Alchemy", "leadership": "Leadership",
    "arcanelore": "Arcane Lore", "athletics": "Athletics",
    "performance": "Performance", "diplomacy": "Diplomacy",
    "clscraft": "Fine Craft", "empathy": "Empathy",
    "determination": "Determination", "dexterity": "Dexterity",
    "history": "History and Myths", "craftmanship": "Craftmanship",
    "heal": "Healing", "stealth": "Stealth", "hunting": "Hunting",
    "countrylore": "Country Lore", "nature": "Nature Lore",
    "eloquence": "Eloquence", "locksmith": "Locks and Traps", "swim": "Swimming",
    "seafaring": "Seafaring", "streetlore": "Street Lore", "animals": "Animals",
    "survival": "Survival", "perception": "Perception", "endurance": "Endurance",
    "melee": "Melee", "slashing": "Slashing Weapons", "chains": "Chain Weapons",
    "blades": "Blades", "longrange": "Long Range Weapons",
    "staffs": "Staff Weapons", "throwing": "Throwing Weapons",
    "antimagic": "Antimagic", "controlmagic": "Control Magic",
    "motionmagic": "Motion Magic", "insightmagic": "Insight Magic",
    "stonemagic": "Stone Magic", "firemagic": "Fire Magic",
    "healmagic": "Healing Magic", "illusionmagic": "Illusion Magic",
    "combatmagic": "Combat Magic", "lightmagic": "Light Magic",
    "naturemagic": "Nature Magic", "shadowmagic": "Shadow Magic",
    "fatemagic": "Fate Magic", "protectionmagic": "Protection Magic",
    "enhancemagic": "Enhancement Magic", "deathmagic": "Death Magic",
    "transformationmagic": "Transformation Magic", "watermagic": "Water Magic",
    "windmagic": "Wind Magic",
}

# German school names as written by the creature editor
MAGIC_SCHOOL_TO_SKILL = {
    "bannmagie": "antimagic",
    "beherrschungsmagie": "controlmagic",
    "bewegungsmagie": "motionmagic",
    "erkenntnismagie": "insightmagic",
    "felsmagie": "stonemagic",
    "feuermagie": "firemagic",
    "heilungsmagie": "healmagic",
    "illusionsmagie": "illusionmagic",
    "kampfmagie": "combatmagic",
    "lichtmagie": "lightmagic",
    "naturmagie": "naturemagic",
    "schattenmagie": "shadowmagic",
    "schicksalsmagie": "fatemagic",
    "schutzmagie": "protectionmagic",
    "stärkungsmagie": "enhancemagic",
    "staerkungsmagie": "enhancemagic",
    "todesmagie": "deathmagic",
    "verwandlungsmagie": "transformationmagic",
    "wassermagie": "watermagic",
    "windmagie": "windmagic",
}


@dataclass
class SkillGroups:
    general: List[str] = field(default_factory=lambda: list(GENERAL_SKILLS))
    fighting: List[str] = field(default_factory=lambda: list(FIGHTING_SKILLS))
    magic: List[str] = field(default_factory=lambda: list(MAGIC_SKILLS))

    def all_skills(self) -> List[str]:
        return self.general + self.fighting + self.magic


@dataclass
class ImporterConfig:
    # Catalog
    catalog_path: Optional[str] = None
    catalog_document_name: str = "Item"

    # Matching
    list_threshold: float = 0.3
    best_guess_threshold: float = 0.5

    # Ceilings used when a source omits level/grade
    default_mastery_ceiling: int = 4
    default_spell_ceiling: int = 5

    # Vocabulary
    skill_groups: SkillGroups = field(default_factory=SkillGroups)
    skill_labels: Dict[str, str] = field(default_factory=lambda: dict(SKILL_LABELS))
    magic_school_to_skill: Dict[str, str] = field(default_factory=lambda: dict(MAGIC_SCHOOL_TO_SKILL))

    # Logging
    log_level: str = "INFO"

    def skill_label(self, skill: Optional[str]) -> str:
        if not skill:
            return ""
        return self.skill_labels.get(skill, skill)

    def map_school(self, school: Optional[str]) -> Optional[str]:
        """Map a magic school name (German editor name or skill key) to a skill key."""
        if not school:
            return None
        normalized = school.strip().lower()
        if normalized in self.skill_groups.magic:
            return normalized
        return self.magic_school_to_skill.get(normalized)

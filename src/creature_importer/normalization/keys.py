"""
Source vocabulary -> canonical key tables.

One explicit table per format. Keys that are not listed are dropped
by the normalizers; formats gain fields over time.
"""
from ..config import SKILL_LABELS
from ..models import ATTRIBUTE_KEYS, DERIVED_KEYS

# EDITOR_V1: German abbreviations and skill names
V1_ATTRIBUTES = {
    "AUS": "charisma",
    "BEW": "agility",
    "INT": "intuition",
    "KON": "constitution",
    "MYS": "mysticism",
    "STÄ": "strength",
    "STA": "strength",
    "STAE": "strength",
    "VER": "mind",
    "WIL": "willpower",
}

V1_DERIVED = {
    "GK": "size",
    "GSW": "speed",
    "INI": "initiative",
    "LP": "healthpoints",
    "FO": "focuspoints",
    "VTD": "defense",
    "KW": "bodyresist",
    "GW": "mindresist",
    "SR": "damagereduction",
}

V1_SKILLS = {
    "akrobatik": "acrobatics",
    "alchemie": "alchemy",
    "anführen": "leadership",
    "arkane kunde": "arcanelore",
    "athletik": "athletics",
    "darbietung": "performance",
    "diplomatie": "diplomacy",
    "edelhandwerk": "clscraft",
    "empathie": "empathy",
    "entschlossenheit": "determination",
    "fingerfertigkeit": "dexterity",
    "geschichten und mythen": "history",
    "handwerk": "craftmanship",
    "heilkunde": "heal",
    "heimlichkeit": "stealth",
    "jagdkunst": "hunting",
    "länderkunde": "countrylore",
    "naturkunde": "nature",
    "redegewandtheit": "eloquence",
    "schlösser und fallen": "locksmith",
    "schwimmen": "swim",
    "seefahrt": "seafaring",
    "straßenkunde": "streetlore",
    "tierführung": "animals",
    "überleben": "survival",
    "wahrnehmung": "perception",
    "zähigkeit": "endurance",
    "handgemenge": "melee",
    "hiebwaffen": "slashing",
    "kettenwaffen": "chains",
    "klingenwaffen": "blades",
    "schusswaffen": "longrange",
    "stangenwaffen": "staffs",
    "wurfwaffen": "throwing",
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
    "todesmagie": "deathmagic",
    "verwandlungsmagie": "transformationmagic",
    "wassermagie": "watermagic",
    "windmagie": "windmagic",
}

# EDITOR_V2: canonical ids are used as-is; these are the short and snake-case spellings
V2_DERIVED_ALIASES = {
    "hp": "healthpoints",
    "fp": "focuspoints",
    "ini": "initiative",
    "mind_resist": "mindresist",
    "body_resist": "bodyresist",
    "damage_reduction": "damagereduction",
}

# VTT_IMPORT: English abbreviations and skill labels
VTT_ATTRIBUTES = {
    "CHA": "charisma",
    "AGI": "agility",
    "INT": "intuition",
    "CON": "constitution",
    "MYS": "mysticism",
    "STR": "strength",
    "MND": "mind",
    "WIL": "willpower",
}

VTT_DERIVED = {
    "SIZ": "size",
    "SPD": "speed",
    "INI": "initiative",
    "HP": "healthpoints",
    "FP": "focuspoints",
    "DEF": "defense",
    "BR": "bodyresist",
    "MR": "mindresist",
    "DR": "damagereduction",
}

VTT_SKILLS = {label.lower(): key for key, label in SKILL_LABELS.items()}
VTT_SKILLS.update({key: key for key in SKILL_LABELS})

CANONICAL_ATTRIBUTES = frozenset(ATTRIBUTE_KEYS)
CANONICAL_DERIVED = frozenset(DERIVED_KEYS)

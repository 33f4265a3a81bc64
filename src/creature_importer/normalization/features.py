"""
Builders for refinements, trainings and weapons shared by the formats.
"""
import re
from typing import List, Optional

from ..models import FeatureRef, WeaponRef
from ..utils.numeric import coerce_int

DEFAULT_DAMAGE = "1W6"
DEFAULT_CATEGORY = "other"

_TRICK_PART = re.compile(r"(\d+)x(S\d+)|S(\d+)")


def parse_great_tricks(choice: Optional[str]) -> List[str]:
    """
    Expand a great-tricks choice into trick levels.
    
    "2xS1+S2" -> ["S1", "S1", "S2"]
    """
    if not choice:
        return []
    
    tricks: List[str] = []
    for part in choice.split("+"):
        match = _TRICK_PART.search(part.strip())
        if not match:
            continue
        count = int(match.group(1)) if match.group(1) else 1
        level = match.group(2) or f"S{match.group(3)}"
        tricks.extend([level] * count)
    
    return tricks


def build_weapon(
    name: str,
    skill: Optional[str],
    value,
    damage: Optional[str],
    weapon_speed,
    weapon_range,
    features: Optional[str],
) -> WeaponRef:
    """Build a weapon from explicit source data, recovering bad numbers to 0."""
    return WeaponRef(
        name=name,
        skill=skill or "melee",
        value=max(coerce_int(value, field=f"{name}.value"), 0),
        damage=damage or DEFAULT_DAMAGE,
        weapon_speed=max(coerce_int(weapon_speed, field=f"{name}.weaponSpeed"), 0),
        range=max(coerce_int(weapon_range, field=f"{name}.range"), 0),
        features=features or "",
    )


def build_feature(
    name: str,
    kind: str,
    category: Optional[str] = None,
    cost=0,
    description: Optional[str] = "",
    great_tricks: Optional[str] = None,
) -> FeatureRef:
    return FeatureRef(
        name=name,
        kind=kind,
        category=category or DEFAULT_CATEGORY,
        cost=max(coerce_int(cost, field=f"{name}.cost"), 0),
        description=description or "",
        great_tricks=parse_great_tricks(great_tricks),
    )

"""
Shared fixtures: a small reference catalog and creature records.
"""
import pytest

from creature_importer.catalog import InMemoryCatalog, ReferenceLibraryIndex
from creature_importer.config import ImporterConfig, MAGIC_SCHOOL_TO_SKILL, SKILL_LABELS
from creature_importer.models import AbilityKind, CreatureRecord, SkillValue, UnresolvedAbilityRef
from creature_importer.resolution import EntityResolver, FuzzyMatcher

from sample_data import MASTERIES, SPELLS


@pytest.fixture
def catalog():
    """In-memory catalog with one mastery and one spell partition."""
    return InMemoryCatalog({
        "core.masteries": [dict(doc) for doc in MASTERIES],
        "core.spells": [dict(doc) for doc in SPELLS],
    })


@pytest.fixture
def index(catalog):
    return ReferenceLibraryIndex(catalog, school_table=MAGIC_SCHOOL_TO_SKILL)


@pytest.fixture
def resolver(index):
    return EntityResolver(index, matcher=FuzzyMatcher(), skill_labels=SKILL_LABELS)


@pytest.fixture
def config():
    return ImporterConfig()


@pytest.fixture
def creature():
    """Creature with three unresolved abilities: two masteries and a spell."""
    return CreatureRecord(
        name="Cave Troll",
        source_format="EDITOR_V1",
        skills={
            "melee": SkillValue(value=14),
            "firemagic": SkillValue(value=6),
            "lightmagic": SkillValue(value=0),
        },
        unresolved_abilities=[
            UnresolvedAbilityRef(name="Whirlwind", kind=AbilityKind.MASTERY, level_ceiling=3, skill_hint="melee"),
            UnresolvedAbilityRef(name="Iron Grip", kind=AbilityKind.MASTERY, level_ceiling=3, skill_hint="melee"),
            UnresolvedAbilityRef(name="Fireball", kind=AbilityKind.SPELL, level_ceiling=5),
        ],
    )

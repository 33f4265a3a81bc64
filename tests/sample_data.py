"""
Sample catalog documents and creature payloads shared by the tests.
"""

MASTERIES = [
    {"_id": "m1", "name": "Iron Grip", "type": "mastery", "system": {"skill": "melee", "level": 2}},
    {"_id": "m2", "name": "Iron Grip Mastery", "type": "mastery", "system": {"skill": "melee", "level": 2}},
    {"_id": "m3", "name": "Whirlwind Strike", "type": "mastery", "system": {"skill": "melee", "level": 3}},
    {"_id": "m4", "name": "Tough Hide", "type": "mastery", "system": {"skill": "", "level": 1}},
    {"_id": "m5", "name": "Crushing Blow", "type": "mastery", "system": {"skill": "slashing", "level": 4}},
    {"_id": "m6", "name": "Keen Senses", "type": "mastery", "system": {"skill": "perception"}},
]

SPELLS = [
    {"_id": "s1", "name": "Fireball", "type": "spell",
     "system": {"skill": "firemagic", "skillLevel": 2, "availableIn": "combatmagic 3",
                "costs": "4V1", "difficulty": "KW"}},
    {"_id": "s2", "name": "Flame Lance", "type": "spell", "system": {"skill": "firemagic", "skillLevel": 3}},
    {"_id": "s3", "name": "Light", "type": "spell", "system": {"skill": "lightmagic", "skillLevel": 0}},
    {"_id": "s4", "name": "Healing Light", "type": "spell",
     "system": {"skill": "healmagic", "skillLevel": 1, "availableIn": "lightmagic 2"}},
    {"_id": "s5", "name": "Firestorm", "type": "spell", "system": {"skill": "firemagic", "skillLevel": 5}},
]


def editor_v1_payload(**overrides):
    payload = {
        "format": "EDITOR_V1",
        "editor": "SPLITTERMOND_CREATURE_EDITOR",
        "name": "Höhlentroll",
        "basis": "Troll",
        "rolle": "Brute",
        "typus": ["Riese"],
        "attribute": {"AUS": 1, "BEW": 2, "STÄ": 6, "KON": -3, "XYZ": 9},
        "fertigkeiten": {"Handgemenge": 14, "Wahrnehmung": {"wert": 8, "punkte": 3}, "Kochen": 5},
        "abgeleiteteWerte": {"GK": 7, "INI": "7-3", "LP": "12", "VTD": "abc", "FOO": 1},
        "meisterschaften": ["Whirlwind", {"name": "Iron Grip", "fertigkeit": "Handgemenge", "schwelle": 2}],
        "zauber": [{"name": "Fireball", "schule": "Feuermagie", "grad": 2}, "Light"],
        "verfeinerungen": [
            {"name": "Biss", "kategorie": "Angriff", "kosten": 2,
             "zusaetzlicheWaffe": {"wert": 15, "WGS": 8, "merkmale": "Scharf 2"}},
            {"name": "Dicke Haut", "kategorie": "Schutz", "kosten": 1},
        ],
        "abrichtungen": [
            {"name": "Kampftraining", "kategorie": "Kampf", "potenzialKosten": 3,
             "grosseTricksWahl": "2xS1+S2", "meisterschaften": ["Tough Hide"]},
        ],
        "waffen": [{"name": "Keule", "wert": 16, "schaden": "2W6+3", "WGS": 10, "fertigkeit": "Handgemenge"}],
    }
    payload.update(overrides)
    return payload


def editor_v2_payload(**overrides):
    payload = {
        "format": "EDITOR_V2",
        "editor": "SPLITTERMOND_CREATURE_EDITOR",
        "formatVersion": 2,
        "name": "Ember Drake",
        "creatureData": {"basis": "Drake", "role": "Caster", "types": ["Dragon"]},
        "attributes": [{"id": "mysticism", "value": 5}, {"id": "strength", "value": -1}, {"id": "luck", "value": 3}],
        "skills": [{"id": "firemagic", "value": 12, "points": 4}, {"id": "juggling", "value": 3}],
        "derivedValues": [{"id": "initiative", "value": "5-2"}, {"id": "hp", "value": 30}],
        "masteries": [
            {"name": "Whirlwind Strike", "skill": "melee", "level": 3, "libraryId": "core.masteries.m3"},
            {"name": "Whirlwind Strike", "skill": "melee", "level": 3, "libraryId": "core.masteries.m3"},
            {"name": "Iron Grip", "skill": "melee"},
        ],
        "spells": [{"name": "Flame Lance", "skill": "firemagic", "grade": 3}],
        "weapons": [{"name": "Claws", "skill": "melee", "value": 14, "damage": "1W10"}],
        "refinements": [{"name": "Tail", "category": "attack", "weapon": {"value": 12}}],
        "trainings": [{"name": "Hunt", "greatTricks": "S3", "masteries": ["Keen Senses"]}],
    }
    payload.update(overrides)
    return payload


def vtt_payload(**overrides):
    payload = {
        "format": "VTT_IMPORT",
        "system": "splittermond",
        "name": "Forest Wolf",
        "stats": {"AGI": 4, "str": 3, "LUK": 2},
        "derived": {"INI": "6-1", "HP": 14, "DR": -2},
        "skills": {"Perception": 10, "Stealth": "8", "Melee": 12, "Basket Weaving": 1},
        "abilities": [
            {"type": "mastery", "name": "Keen Senses", "skill": "Perception", "level": 1},
            {"type": "Spell", "name": "Light"},
            {"type": "ritual", "name": "Howl"},
        ],
        "attacks": [{"name": "Bite", "skill": "Melee", "value": 13, "damage": "1W6+2", "speed": 7}],
        "features": [{"name": "Pack Hunter", "description": "Bonus when flanking"}],
    }
    payload.update(overrides)
    return payload

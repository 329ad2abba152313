"""Identifiers and JSON keys for characters, skills, sprites and encounters."""

from enum import IntEnum

DATA_CHAR_RESERVE_SIZE = 32
DATA_SKILL_RESERVE_SIZE = 64
DATA_SPRITE_RESERVE_SIZE = 16
DATA_RESERVE_CHUNK_SIZE = 16

KEY_NAME = "name"
KEY_LEVEL = "level"
KEY_STRENGTH = "str"
KEY_MAGIC = "mag"
KEY_ENDURANCE = "end"
KEY_INTELLIGENCE = "int"
KEY_AGILITY = "agi"
KEY_CONCENTRATION = "con"
KEY_LUCK = "luk"
KEY_ACTIVE_SKILLS = "aSkills"
KEY_RESISTANCES = "resists"
KEY_BASIC_ATTACK = "bAtk"
KEY_ENEMIES = "enemies"
KEY_EXP_REWARD = "exp"
KEY_MONEY_REWARD = "money"
KEY_ITEM_REWARDS = "items"
KEY_ITEM_CHANCES = "chances"
KEY_MAXIMUM_HP = "hp"
KEY_MAXIMUM_MP = "mp"
KEY_ENEMY_AI = "ai"
KEY_FRIENDLIES = "friendlies"
KEY_EQUIPMENT = "equip"
KEY_KNOWN_SKILLS = "kSkills"

KEY_SKILL_NAME = "name"
KEY_SKILL_INFO = "info"
KEY_SKILL_TYPE = "type"
KEY_SKILL_TARGET = "target"
KEY_SKILL_HP_COST = "hCost"
KEY_SKILL_MP_COST = "mCost"
KEY_SKILL_POWER = "power"
KEY_SKILL_ACCURACY = "acc"
KEY_SKILL_MINIMUM_HITS = "minHit"
KEY_SKILL_MAXIMUM_HITS = "maxHit"
KEY_SKILL_EFFECTS = "effects"
KEY_SKILL_EFFECT_CHANCE = "chance"
KEY_SKILL_USE_FUNCTION = "use"

KEY_ENCOUNTER_ENEMIES = "enemies"
KEY_ENCOUNTER_SPAWN_COUNT = "max"
KEY_ENCOUNTER_SPAWN_CHANCE = "spawn"

ENC_INVALID = 0xFFFF


class CharacterId(IntEnum):
    """Character identifiers; values above ID_BOUNDARY are player characters."""

    GREEN_SLIME = 0x0000
    RED_SLIME = 0x0001
    ID_BOUNDARY = 0xF000
    TEST_PLAYER = 0xF001
    INVALID = 0xFFFF


class SkillId(IntEnum):
    """Skill identifiers."""

    IGNIA = 0x0000
    POLIGNIA = 0x0010
    PLAYER_BASIC_ATK_0 = 0xF000
    ENEMY_BASIC_ATK_0 = 0xF001
    INVALID = 0xFFFF


class SpriteId(IntEnum):
    """Spritesheet identifiers."""

    PLAYER = 0x0000
    INVALID = 0xFFFF
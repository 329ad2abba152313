"""Battle and character constants: states, flags, affinities, targeting and stats."""

from enum import IntEnum, IntFlag

BATTLE_MAX_ENEMY_SIZE = 8
BATTLE_MAX_PARTY_SIZE = 3
BATTLE_TOTAL_COMBATANTS = BATTLE_MAX_ENEMY_SIZE + BATTLE_MAX_PARTY_SIZE

BATTLE_INVALID_INDEX = 0xFFFFFFFFFFFFFFFF

# Number of affinities a character can be weak to, resist, nullify and so on.
MAIN_AFFINITY_COUNT = 15

BASE_RESIST_MASK = 0b00001111
OVERWRITE_RESIST_MASK = 0b11110000

SKILL_MAX_UNIQUE_EFFECTS = 4

# Stat modifiers are packed into 16 bits, three bits each (offset by -3).
ATTACK_MODIFIER = 0x0007
DEFENCE_MODIFIER = 0x0038
ACCURACY_MODIFIER = 0x01C0
EVASION_MODIFIER = 0x0E00
SPEED_MODIFIER = 0x7000

MAXIMUM_LEVEL = 100
MAXIMUM_STAT_VALUE = 100
MAXIMUM_HP_AND_MP = 999

MINIMUM_STAT_VALUE = 1
MINIMUM_HP_AND_MP = 1
MINIMUM_PLAYER_HP_AND_MP = 10

PLAYER_SKILL_LIMIT = 6


class BattleState(IntEnum):
    """States of the battle state machine."""

    INITIALIZE = 0x00
    SET_TURN_ORDER = 0x01
    CHECK_TURN_TYPE = 0x02
    PLAYER_TURN = 0x03
    ENEMY_TURN = 0x04
    EXECUTE_SKILL = 0x05
    IS_ROUND_DONE = 0x10
    WIN = 0x11
    LOSE = 0x12
    ESCAPE = 0x13
    POST = 0x14


class BattleFlag(IntFlag):
    """State-independent flags of a battle."""

    ACTIVE = 0x00000001
    WAIT_ANIMATION = 0x00000002


class Affinity(IntEnum):
    """Affinities that decide how a skill behaves and affects its targets."""

    INVALID = 0xFF
    PHYSICAL = 0x00
    FIRE = 0x10
    WATER = 0x11
    AIR = 0x12
    EARTH = 0x13
    SHOCK = 0x14
    FROST = 0x15
    LIGHT = 0x20
    DARK = 0x21
    VOID = 0x30
    POISON = 0x40
    SLEEP = 0x41
    CHARM = 0x42
    SILENCE = 0x43
    CONFUSION = 0x44
    PASSIVE = 0x80
    SUPPORT = 0x81
    HEALING = 0x82


class Effect(IntEnum):
    """A skill's effect on a character given its resistances."""

    REFLECT = 0b00000100
    ABSORB = 0b00000101
    NULL = 0b00000110
    RESIST = 0b00000111
    NORMAL = 0b00001000
    WEAK = 0b00001001
    BREAK = 0b00001010


class Target(IntEnum):
    """Which combatants a skill can affect."""

    INVALID = 0xFF
    SELF = 0x00
    SINGLE_ENEMY = 0x01
    SINGLE_ALLY = 0x02
    SINGLE_ENEMY_SELF = 0x03
    SINGLE_ALLY_SELF = 0x04
    ALL_ENEMY = 0x05
    ALL_ALLY = 0x06
    ALL_ENEMY_SELF = 0x07
    ALL_ALLY_SELF = 0x08
    EVERYONE = 0x09
    EVERYONE_SELF = 0x0A


class Ailment(IntEnum):
    """Status ailments, grouped into nerve, mind and special ranges."""

    NERVE_NONE = 0x6F
    NERVE_FREEZE = 0x00
    NERVE_PARALYSIS = 0x01
    NERVE_BURN = 0x02
    NERVE_POISON = 0x03
    NERVE_SLEEP = 0x04
    MIND_NONE = 0xDF
    MIND_CHARM = 0x70
    MIND_CURSE = 0x71
    MIND_BLIND = 0x72
    MIND_SILENCE = 0x73
    MIND_CONFUSION = 0x74
    SPECIAL_NONE = 0xFE
    SPECIAL_CRIPPLE = 0xE0
    INVALID = 0xFF


class SkillFunction(IntEnum):
    """The routine a skill runs when used in battle."""

    PHYSICAL_GENERIC = 0x0000
    MAGICAL_GENERIC = 0x0100
    MAGICAL_PLUS_EFFECT = 0x0200
    PHYSMAG_GENERIC = 0x0300


class EnemyAI(IntEnum):
    """The routine an enemy runs on its turn."""

    SIMPLE = 0x0000


class Stat(IntEnum):
    """Indices of a character's stats."""

    STRENGTH = 0
    MAGIC = 1
    ENDURANCE = 2
    INTELLIGENCE = 3
    AGILITY = 4
    CONCENTRATION = 5
    LUCK = 6


STAT_COUNT = len(Stat)
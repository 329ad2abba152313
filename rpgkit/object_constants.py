"""Object manager limits, object flags and object input flags."""

from enum import IntFlag

# Objects are allocated in chunks of this many instances.
OBJMNGR_RESERVE_SIZE = 16

OBJMNGR_INVALID_INSTANCE_ID = 0xFFFFFFFFFFFFFFFF
OBJ_INVALID_ANIMATION_INDEX = 0xFFFFFFFFFFFFFFFF

ANIM_INVALID = 0xFF

# Index used to ask the object manager for a player object.
OBJ_PLAYER = 0x0000

# Dynamic objects reuse this bit to mark themselves hostile.
FLAG_DOBJ_HOSTILE = 0x00000080


class ObjectFlag(IntFlag):
    """Flags every standard object carries."""

    PERSISTENT = 0x00000001
    INVINCIBLE = 0x00000002
    DESTROYED = 0x00000004
    ACTIVE = 0x00000008
    VISIBLE = 0x00000010
    ANIMATION_END = 0x00000020
    SOLID = 0x00000040
    COLLIDE_WITH_WORLD = 0x00000080


class ObjectInput(IntFlag):
    """Input flags used by player-controlled objects."""

    RIGHT = 0x00000001
    LEFT = 0x00000002
    UP = 0x00000004
    DOWN = 0x00000008
    INTERACT = 0x00000010
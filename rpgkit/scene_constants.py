"""Scene indices and scene manager flags."""

from enum import IntEnum, IntFlag


class SceneIndex(IntEnum):
    """Scenes the scene manager can load."""

    BATTLE = 0x00000010
    LEVEL = 0x00000020
    INVALID = 0xFFFFFFFF


class SceneFlag(IntFlag):
    """Flags of the scene manager."""

    CHANGE = 0x00000001
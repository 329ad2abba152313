"""RGBA colours and general engine constants shared across the user interface."""

from __future__ import annotations

from dataclasses import dataclass, replace

_CHANNEL_MAX = 0xFF
_PACKED_MAX = 0xFFFFFFFF


def _check_channel(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} channel must be an int, not {type(value).__name__}")
    if not 0 <= value <= _CHANNEL_MAX:
        raise ValueError(f"{name} channel out of range 0-255: {value}")


@dataclass(frozen=True)
class Pixel:
    """An 8-bit-per-channel RGBA colour."""

    r: int
    g: int
    b: int
    a: int = _CHANNEL_MAX

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _check_channel(name, getattr(self, name))

    @classmethod
    def from_packed(cls, value: int) -> Pixel:
        """Build a colour from a 32-bit value laid out as 0xAABBGGRR."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"packed colour must be an int, not {type(value).__name__}")
        if not 0 <= value <= _PACKED_MAX:
            raise ValueError(f"packed colour out of range: {value:#x}")
        return cls(
            value & 0xFF,
            (value >> 8) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 24) & 0xFF,
        )

    def to_packed(self) -> int:
        """Return the colour as a 32-bit value laid out as 0xAABBGGRR."""
        return self.r | (self.g << 8) | (self.b << 16) | (self.a << 24)

    def with_alpha(self, alpha: int) -> Pixel:
        """Return a copy of this colour with a different alpha channel."""
        return replace(self, a=alpha)


COLOR_TRUE_WHITE = Pixel.from_packed(0xFFFFFFFF)
COLOR_WHITE = Pixel.from_packed(0xFFF8F8F8)
COLOR_LIGHT_GRAY = Pixel.from_packed(0xFFBCBCBC)
COLOR_GRAY = Pixel.from_packed(0xFF7C7C7C)
COLOR_DARK_GRAY = Pixel.from_packed(0xFF404040)
COLOR_BLACK = Pixel.from_packed(0xFF000000)

COLOR_VERY_LIGHT_RED = Pixel.from_packed(0xFFBCBCF8)
COLOR_LIGHT_RED = Pixel.from_packed(0xFF3050F8)
COLOR_RED = Pixel.from_packed(0xFF0010E0)
COLOR_DARK_RED = Pixel.from_packed(0xFF0010BC)
COLOR_VERY_DARK_RED = Pixel.from_packed(0xFF000058)

COLOR_VERY_LIGHT_LIME = Pixel.from_packed(0xFFBCF8E0)
COLOR_LIGHT_LIME = Pixel.from_packed(0xFF94F8BC)
COLOR_LIME = Pixel.from_packed(0xFF58F890)
COLOR_DARK_LIME = Pixel.from_packed(0xFF30F868)
COLOR_VERY_DARK_LIME = Pixel.from_packed(0xFF00E040)

COLOR_VERY_LIGHT_GREEN = Pixel.from_packed(0xFF7CF87C)
COLOR_LIGHT_GREEN = Pixel.from_packed(0xFF00F800)
COLOR_GREEN = Pixel.from_packed(0xFF00BC00)
COLOR_DARK_GREEN = Pixel.from_packed(0xFF008C00)
COLOR_VERY_DARK_GREEN = Pixel.from_packed(0xFF006400)

COLOR_VERY_LIGHT_CYAN = Pixel.from_packed(0xFFF8F87C)
COLOR_LIGHT_CYAN = Pixel.from_packed(0xFFF8F840)
COLOR_CYAN = Pixel.from_packed(0xFFCCCC00)
COLOR_DARK_CYAN = Pixel.from_packed(0xFFA0A000)
COLOR_VERY_DARK_CYAN = Pixel.from_packed(0xFF7C7C00)

COLOR_VERY_LIGHT_BLUE = Pixel.from_packed(0xFFF8A480)
COLOR_LIGHT_BLUE = Pixel.from_packed(0xFFF87C58)
COLOR_BLUE = Pixel.from_packed(0xFFF84020)
COLOR_DARK_BLUE = Pixel.from_packed(0xFFBC2010)
COLOR_VERY_DARK_BLUE = Pixel.from_packed(0xFF7C0000)

COLOR_VERY_LIGHT_YELLOW = Pixel.from_packed(0xFFA8F8F8)
COLOR_LIGHT_YELLOW = Pixel.from_packed(0xFF7CF8F8)
COLOR_YELLOW = Pixel.from_packed(0xFF00F8F8)
COLOR_DARK_YELLOW = Pixel.from_packed(0xFF00ACAC)
COLOR_VERY_DARK_YELLOW = Pixel.from_packed(0xFF005050)

COLOR_VERY_LIGHT_ORANGE = Pixel.from_packed(0xFFA8D0F8)
COLOR_LIGHT_ORANGE = Pixel.from_packed(0xFF44BCF8)
COLOR_ORANGE = Pixel.from_packed(0xFF10A0E4)
COLOR_DARK_ORANGE = Pixel.from_packed(0xFF0050BC)
COLOR_VERY_DARK_ORANGE = Pixel.from_packed(0xFF003088)

COLOR_VERY_LIGHT_PURPLE = Pixel.from_packed(0xFFF8B8D8)
COLOR_LIGHT_PURPLE = Pixel.from_packed(0xFFF894B8)
COLOR_PURPLE = Pixel.from_packed(0xFFF87898)
COLOR_DARK_PURPLE = Pixel.from_packed(0xFFF84468)
COLOR_VERY_DARK_PURPLE = Pixel.from_packed(0xFFBC2844)

COLOR_VERY_LIGHT_PINK = Pixel.from_packed(0xFFE4CCF8)
COLOR_LIGHT_PINK = Pixel.from_packed(0xFFE47CF8)
COLOR_PINK = Pixel.from_packed(0xFFE400F8)
COLOR_DARK_PINK = Pixel.from_packed(0xFFA400BC)
COLOR_VERY_DARK_PINK = Pixel.from_packed(0xFF6E007C)

COLOR_VERY_LIGHT_BROWN = Pixel.from_packed(0xFF0094CC)
COLOR_LIGHT_BROWN = Pixel.from_packed(0xFF006CA4)
COLOR_BROWN = Pixel.from_packed(0xFF00588A)
COLOR_DARK_BROWN = Pixel.from_packed(0xFF003058)
COLOR_VERY_DARK_BROWN = Pixel.from_packed(0xFF001830)

# Timing and viewport.
TARGET_FPS = 60.0
VIEWPORT_WIDTH = 640
VIEWPORT_HEIGHT = 360
WINDOW_SCALE = 2
VIEWPORT_WIDTH_F = 640.0
VIEWPORT_HEIGHT_F = 360.0
WINDOW_SCALE_F = 2.0
GAME_UPDATE_INTERVAL = 0.0167

# The value every state machine treats as "no state".
STATE_INVALID = 0xFF

# Section headers of the settings file.
SETTINGS_GROUP_VIDEO = "[VIDEO]"
SETTINGS_GROUP_AUDIO = "[AUDIO]"
SETTINGS_GROUP_INPUT = "[INPUT]"
SETTINGS_GROUP_ACCESSIBILITY = "[ACCESSIBILITY]"

AUDIO_MASTER_VOLUME = "Master"
AUDIO_MUSIC_VOLUME = "Music"
AUDIO_SOUND_EFFECT_VOLUME = "Sounds"

# Input binding names used in game.
INPUT_MOVE_RIGHT = "MoveRight"
INPUT_MOVE_LEFT = "MoveLeft"
INPUT_MOVE_UP = "MoveUp"
INPUT_MOVE_DOWN = "MoveDown"
INPUT_INTERACT = "Interact"

# Input binding names used by menus.
INPUT_MENU_RIGHT = "MenuRight"
INPUT_MENU_LEFT = "MenuLeft"
INPUT_MENU_UP = "MenuUp"
INPUT_MENU_DOWN = "MenuDown"
INPUT_MENU_SELECT = "MenuSelect"
INPUT_MENU_RETURN = "MenuReturn"
INPUT_SAVE_FILE_DELETE = "SaveFileDelete"
INPUT_SAVE_FILE_COPY = "SaveFileCopy"

PARTY_ROSTER_MAX_SIZE = 5
PARTY_ACTIVE_MAX_SIZE = 3
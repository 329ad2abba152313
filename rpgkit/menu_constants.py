"""Menu limits, states, menu flags, menu input flags and option flags."""

from enum import IntEnum, IntFlag

# Error value for indices into the menu manager's list of menus.
MENU_INVALID_INDEX = 0xFFFFFFFFFFFFFFFF

# How many options a menu accepts before refusing more.
MAX_MENU_OPTIONS = 0xFE

# Value of a menu's selection when nothing has been selected.
MENU_SELECTION_INVALID = 0xFF

# Time the cursor waits before its first repeat, and between later repeats.
MENU_CURSOR_FIRST_SHIFT_TIME = 30.0
MENU_CURSOR_SHIFT_TIME = 10.0


class MenuState(IntEnum):
    """States every menu has; values 2 to 254 are free for individual menus."""

    DEFAULT = 0
    PROCESS_SELECTION = 1


class MenuFlag(IntFlag):
    """Flags every menu carries; bits from 0x100 upward are free for menus."""

    BLOCK_INPUT = 0x00000001
    ACTIVE_STATE = 0x00000002
    VISIBLE = 0x00000004
    INITIALIZED = 0x00000008
    OPTIONS_ALLOWED = 0x00000010
    WAIT_CURSOR = 0x00000020
    SHOW_DESCRIPTIONS = 0x00000040
    FAST_CURSOR = 0x00000080


class MenuInput(IntFlag):
    """Input flags every menu reads; bits from 0x100 upward are free for menus."""

    RIGHT = 0x00000001
    LEFT = 0x00000002
    UP = 0x00000004
    DOWN = 0x00000008
    SELECT = 0x00000010
    RETURN = 0x00000020
    AUX_SELECT = 0x00000040
    AUX_RETURN = 0x00000080


class OptionFlag(IntFlag):
    """Flags of a single menu option."""

    ACTIVE_STATE = 0x00000001
    SELECTABLE = 0x00000002
    VISIBLE = 0x00000004
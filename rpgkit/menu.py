"""Base menu: a grid of options navigated with a repeating cursor."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from rpgkit.colors import (
    COLOR_GRAY,
    COLOR_LIGHT_GREEN,
    COLOR_LIGHT_YELLOW,
    COLOR_WHITE,
    INPUT_MENU_DOWN,
    INPUT_MENU_LEFT,
    INPUT_MENU_RETURN,
    INPUT_MENU_RIGHT,
    INPUT_MENU_SELECT,
    INPUT_MENU_UP,
    STATE_INVALID,
    Pixel,
)
from rpgkit.menu_constants import (
    MENU_CURSOR_FIRST_SHIFT_TIME,
    MENU_CURSOR_SHIFT_TIME,
    MENU_SELECTION_INVALID,
    MenuFlag,
    MenuInput,
    MenuState,
    OptionFlag,
)
from rpgkit.utility import StateMachine

_DEFAULT_OPTION_FLAGS = int(OptionFlag.ACTIVE_STATE | OptionFlag.SELECTABLE | OptionFlag.VISIBLE)
_DEFAULT_MENU_FLAGS = int(MenuFlag.ACTIVE_STATE | MenuFlag.VISIBLE)
_CURSOR_INPUTS = int(MenuInput.RIGHT | MenuInput.LEFT | MenuInput.UP | MenuInput.DOWN)


def _u8(value: int) -> int:
    return value & 0xFF


def _i8(value: int) -> int:
    return ((value + 0x80) & 0xFF) - 0x80


@dataclass(frozen=True)
class KeyState:
    """The state of one input binding during the current frame."""

    pressed: bool = False
    released: bool = False
    held: bool = False


_IDLE_KEY = KeyState()


@dataclass
class MenuOption:
    """One entry of a menu, positioned relative to its grid cell."""

    x: int
    y: int
    text: str
    description: str = ""
    flags: int = _DEFAULT_OPTION_FLAGS
    alpha: int = 0xFF

    @property
    def active(self) -> bool:
        return bool(self.flags & OptionFlag.ACTIVE_STATE)

    @property
    def selectable(self) -> bool:
        return bool(self.flags & OptionFlag.SELECTABLE) and self.active


class Menu:
    """A menu laid out as a grid of options ``menu_width`` columns wide.

    Rendering goes through an engine object providing
    ``draw_string(x, y, text)`` and ``draw_string_decal((x, y), text, color)``.
    """

    def __init__(self) -> None:
        self.x_pos = 0
        self.y_pos = 0
        self.upper_menu: Menu | None = None
        self.sub_menu: Menu | None = None
        self.aux_select = ""
        self.aux_return = ""

        self.flags = 0
        self.input_flags = 0
        self.prev_input_flags = 0

        self.state = StateMachine()
        self.menu_options: list[MenuOption] = []

        self.alpha = 0
        self.cur_option = 0
        self.sel_option = MENU_SELECTION_INVALID
        self.aux_sel_option = MENU_SELECTION_INVALID
        self.cursor_move_timer = 0.0

        self.visible_rows = 0
        self.visible_columns = 0
        self.visible_row_offset = 0
        self.visible_column_offset = 0
        self.row_shift_offset = 0
        self.column_shift_offset = 0
        self.menu_width = 0
        self.menu_height = 0

        self.option_anchor_x = 0
        self.option_anchor_y = 0
        self.option_description_x = 0
        self.option_description_y = 0
        self.option_spacing_x = 0
        self.option_spacing_y = 0

        self.option_color: Pixel = COLOR_WHITE
        self.option_hover_color: Pixel = COLOR_WHITE
        self.option_sel_color: Pixel = COLOR_WHITE
        self.option_inactive_color: Pixel = COLOR_WHITE

    # --- flag helpers -------------------------------------------------

    def _has(self, flag: int) -> bool:
        return bool(self.flags & flag)

    def _input(self, bit: int, opposite: int = 0) -> bool:
        return bool(self.input_flags & bit) and not (opposite and self.input_flags & opposite)

    def _input_pressed(self, bit: int, opposite: int = 0) -> bool:
        return self._input(bit, opposite) and not self.prev_input_flags & bit

    def _option_is_active(self, index: int) -> bool:
        return 0 <= index < len(self.menu_options) and self.menu_options[index].active

    def _option_is_selectable(self, index: int) -> bool:
        return 0 <= index < len(self.menu_options) and self.menu_options[index].selectable

    def _recompute_height(self) -> None:
        self.menu_height = _u8(1 + _u8(len(self.menu_options)) // max(self.menu_width, 1))

    # --- engine hooks -------------------------------------------------

    def on_create(self) -> bool:
        """Set the menu up; the base menu has nothing to add."""
        return True

    def on_destroy(self) -> bool:
        """Drop every option."""
        self.menu_options.clear()
        return True

    def update(self, delta_time: float) -> bool:
        """Run the current state; False for a state the menu does not know."""
        cur = self.state.cur_state
        if cur == MenuState.DEFAULT:
            return self.state_default(delta_time)
        if cur == MenuState.PROCESS_SELECTION:
            return self.state_process_selection()
        return cur == STATE_INVALID

    def render(self, engine: Any) -> bool:
        """Draw the visible options."""
        self.render_visible_options(engine)
        return True

    def before_update(self, key_info: Mapping[str, KeyState]) -> bool:
        """Read this frame's menu inputs from ``key_info`` unless input is blocked."""
        if self._has(MenuFlag.BLOCK_INPUT):
            return True
        self.prev_input_flags = self.input_flags

        def key(name: str) -> KeyState:
            return key_info.get(name, _IDLE_KEY)

        flags = 0
        if key(INPUT_MENU_RIGHT).held:
            flags |= MenuInput.RIGHT
        if key(INPUT_MENU_LEFT).held:
            flags |= MenuInput.LEFT
        if key(INPUT_MENU_UP).held:
            flags |= MenuInput.UP
        if key(INPUT_MENU_DOWN).held:
            flags |= MenuInput.DOWN
        if key(INPUT_MENU_SELECT).released:
            flags |= MenuInput.SELECT
        if key(INPUT_MENU_RETURN).released:
            flags |= MenuInput.RETURN
        if self.aux_select and key(self.aux_select).pressed:
            flags |= MenuInput.AUX_SELECT
        if self.aux_return and key(self.aux_return).pressed:
            flags |= MenuInput.AUX_RETURN
        self.input_flags = int(flags)
        return True

    def after_update(self) -> bool:
        """Switch to the state queued during this frame."""
        self.state.update_current_state(self.state.next_state)
        return True

    # --- options ------------------------------------------------------

    def add_option(
        self,
        x: int,
        y: int,
        text: str,
        description: str = "",
        alpha: int = 0xFF,
        flags: int = _DEFAULT_OPTION_FLAGS,
    ) -> None:
        """Append an option; ignored until option parameters are initialised."""
        if not self._has(MenuFlag.OPTIONS_ALLOWED):
            return
        self.menu_options.append(MenuOption(x, y, text, description, int(flags), alpha))
        self._recompute_height()

    def remove_option(self, index: int) -> None:
        """Remove the option at ``index`` if it exists and the menu is active."""
        if index >= len(self.menu_options) or not self._has(MenuFlag.ACTIVE_STATE):
            return
        del self.menu_options[index]
        self._recompute_height()

    def set_option_flags(self, index: int, flags: int, overwrite: bool = True) -> None:
        """Replace, or add to, the flags of the option at ``index``."""
        if index >= len(self.menu_options):
            return
        option = self.menu_options[index]
        option.flags = int(flags) if overwrite else option.flags | int(flags)

    def set_next_state(self, state: int, reset_selection: bool = False) -> None:
        """Queue the next state, optionally clearing the current selection."""
        self.state.set_next_state(state)
        if reset_selection:
            self.sel_option = MENU_SELECTION_INVALID

    def pressed_inputs(self) -> int:
        """Inputs whose state changed since the previous frame."""
        return self.input_flags ^ self.prev_input_flags

    # --- initialisation -----------------------------------------------

    def initialize_params(
        self,
        state: int,
        width: int,
        visible_rows: int,
        visible_columns: int,
        row_shift_offset: int = 0,
        column_shift_offset: int = 0,
        alpha: int = 0xFF,
        flags: int = _DEFAULT_MENU_FLAGS,
    ) -> None:
        """Set the menu's layout once; later calls are ignored."""
        if self._has(MenuFlag.INITIALIZED):
            return
        self.flags = int(flags) | int(MenuFlag.INITIALIZED)
        self.state.set_next_state(state)
        self.menu_width = max(width, 1)
        self.visible_rows = max(visible_rows, 1)
        self.visible_columns = max(visible_columns, 1)
        self.row_shift_offset = row_shift_offset
        self.column_shift_offset = column_shift_offset
        self.alpha = alpha

    def initialize_option_params(
        self,
        anchor_x: int,
        anchor_y: int,
        spacing_x: int,
        spacing_y: int,
        color: Pixel = COLOR_WHITE,
        hover_color: Pixel = COLOR_LIGHT_YELLOW,
        sel_color: Pixel = COLOR_LIGHT_GREEN,
        inactive_color: Pixel = COLOR_GRAY,
    ) -> None:
        """Set option placement and colours once, allowing options to be added."""
        if self._has(MenuFlag.OPTIONS_ALLOWED):
            return
        self.flags |= int(MenuFlag.OPTIONS_ALLOWED)
        self.option_anchor_x = anchor_x
        self.option_anchor_y = anchor_y
        self.option_spacing_x = spacing_x
        self.option_spacing_y = spacing_y
        self.option_color = color
        self.option_hover_color = hover_color
        self.option_sel_color = sel_color
        self.option_inactive_color = inactive_color

    def initialize_description_params(self, x: int, y: int) -> None:
        """Place option descriptions; only for menus set up with SHOW_DESCRIPTIONS."""
        if not self._has(MenuFlag.SHOW_DESCRIPTIONS):
            return
        self.flags |= int(MenuFlag.SHOW_DESCRIPTIONS)
        self.option_description_x = x
        self.option_description_y = y

    # --- cursor and rendering -----------------------------------------

    def update_cursor(self, delta_time: float) -> None:
        """Move the cursor from the held direction inputs, repeating while held."""
        if (
            self._has(MenuFlag.BLOCK_INPUT)
            or not self._has(MenuFlag.INITIALIZED)
            or not self._has(MenuFlag.OPTIONS_ALLOWED)
        ):
            return

        if not self.input_flags & _CURSOR_INPUTS:
            self.flags |= int(MenuFlag.WAIT_CURSOR)
            self.flags &= ~int(MenuFlag.FAST_CURSOR)
            self.cursor_move_timer = 0.0
            return

        if self._has(MenuFlag.WAIT_CURSOR):
            self.cursor_move_timer -= delta_time
            if self.cursor_move_timer <= 0.0:
                self.flags &= ~int(MenuFlag.WAIT_CURSOR)
                if self._has(MenuFlag.FAST_CURSOR):
                    self.cursor_move_timer = MENU_CURSOR_SHIFT_TIME
                else:
                    self.flags |= int(MenuFlag.FAST_CURSOR)
                    self.cursor_move_timer = MENU_CURSOR_FIRST_SHIFT_TIME
            return
        self.flags |= int(MenuFlag.WAIT_CURSOR)

        self._move_horizontal()
        self._move_vertical()

    def _move_horizontal(self) -> None:
        width = self.menu_width
        count = len(self.menu_options)
        movement = int(self._input(MenuInput.RIGHT, MenuInput.LEFT)) - int(
            self._input(MenuInput.LEFT, MenuInput.RIGHT)
        )
        if width == 1 or movement == 0:
            return

        column = self.cur_option % width
        if movement < 0:
            if (
                column == self.visible_column_offset + self.column_shift_offset
                and self.visible_column_offset != 0
            ):
                self.visible_column_offset -= 1
            if column == 0:
                self.cur_option = _u8(self.cur_option + width - 1)
                if self.cur_option >= count:
                    self.cur_option = _u8(count - 1)
                column = self.cur_option % width
                self.visible_column_offset = _u8(width - self.visible_columns)
                if (
                    self.cur_option // width == self.menu_height
                    and column <= self.visible_column_offset + self.column_shift_offset
                ):
                    self.visible_column_offset = _u8(
                        column + self.column_shift_offset - (self.visible_columns - 1)
                    )
                    if column < self.visible_columns >> 1:
                        self.visible_column_offset = 0
                return
        else:
            if (
                column
                == self.visible_column_offset + self.visible_columns - self.column_shift_offset - 1
                and self.visible_column_offset != width - self.visible_columns
            ):
                self.visible_column_offset = _u8(self.visible_column_offset + 1)
            if column == width - 1 or (count > 0 and self.cur_option >= count - 1):
                self.cur_option -= self.cur_option % width
                self.visible_column_offset = 0
                return
        self.cur_option = _u8(self.cur_option + movement)

    def _move_vertical(self) -> None:
        width = self.menu_width
        height = self.menu_height
        count = len(self.menu_options)
        movement = int(self._input(MenuInput.DOWN, MenuInput.UP)) - int(
            self._input(MenuInput.UP, MenuInput.DOWN)
        )
        if height == 1 or movement == 0:
            return

        row = self.cur_option // width
        if movement < 0:
            if row == self.visible_row_offset + self.row_shift_offset and self.visible_row_offset != 0:
                self.visible_row_offset -= 1
            if row == 0:
                self.cur_option = _u8(self.cur_option % width + width * (height - 1))
                if self.cur_option >= count:
                    self.cur_option = _u8(self.cur_option - width)
                if _i8(height - self.visible_rows) > 0:
                    self.visible_row_offset = _u8(height - self.visible_rows)
                else:
                    self.visible_row_offset = 0
                return
        else:
            if (
                row == self.visible_row_offset + self.visible_rows - self.row_shift_offset - 1
                and self.visible_row_offset != height - self.visible_rows
            ):
                self.visible_row_offset = _u8(self.visible_row_offset + 1)
            if row == height - 1 or (
                row == height - 2 and ((self.cur_option + width) & 0xFFFF) >= count
            ):
                self.cur_option %= width
                self.visible_row_offset = 0
                return
        self.cur_option = _u8(self.cur_option + width * movement)

    def _option_color(self, index: int) -> Pixel:
        if not self._option_is_active(index):
            return self.option_inactive_color
        if index == self.sel_option:
            return self.option_sel_color
        if index == self.cur_option:
            return self.option_hover_color
        return self.option_color

    def render_visible_options(self, engine: Any) -> None:
        """Draw the visible region of options and, if enabled, the hovered description."""
        if not self._has(MenuFlag.INITIALIZED) or not self._has(MenuFlag.OPTIONS_ALLOWED):
            return

        count = len(self.menu_options)
        if self._has(MenuFlag.SHOW_DESCRIPTIONS) and self.cur_option < count:
            engine.draw_string(
                self.option_description_x,
                self.option_description_y,
                self.menu_options[self.cur_option].description,
            )

        for yy in range(self.visible_rows):
            row_start = self.menu_width * (self.visible_row_offset + yy)
            for xx in range(self.visible_columns):
                index = row_start + self.visible_column_offset + xx
                if index >= count:
                    break
                option = self.menu_options[index]
                if option.alpha <= 0:
                    continue
                color = self._option_color(index).with_alpha((self.alpha + option.alpha) // 2)
                position = (
                    float(self.option_anchor_x + self.option_spacing_x * xx + option.x),
                    float(self.option_anchor_y + self.option_spacing_y * yy + option.y),
                )
                engine.draw_string_decal(position, option.text, color)

    # --- activation ---------------------------------------------------

    def prepare_for_activation(self, state: int) -> None:
        """Reset the cursor and selection and make the menu visible and interactive."""
        self.state.set_next_state(state)
        self.cur_option = 0
        self.sel_option = MENU_SELECTION_INVALID
        self.flags &= ~int(MenuFlag.BLOCK_INPUT)
        self.flags |= int(MenuFlag.VISIBLE | MenuFlag.ACTIVE_STATE)

    def prepare_for_deactivation(self) -> None:
        """Stop the state machine, clear inputs, and hide and block the menu."""
        self.state.cur_state = STATE_INVALID
        self.state.next_state = STATE_INVALID
        self.input_flags = 0
        self.prev_input_flags = 0
        self.flags |= int(MenuFlag.BLOCK_INPUT)
        self.flags &= ~int(MenuFlag.VISIBLE | MenuFlag.ACTIVE_STATE)

    # --- states -------------------------------------------------------

    def state_default(self, delta_time: float) -> bool:
        """Capture a selection of a selectable option, otherwise move the cursor."""
        if self._input_pressed(MenuInput.SELECT) and self._option_is_selectable(self.cur_option):
            self.state.set_next_state(MenuState.PROCESS_SELECTION)
            self.sel_option = self.cur_option
            return True
        self.update_cursor(delta_time)
        return True

    def state_process_selection(self) -> bool:
        """Handle a selected option; the base menu takes no action."""
        return True
"""Per-combatant battle HUD elements: health and magic bars plus party read-outs."""

from __future__ import annotations

from enum import IntFlag
from typing import Any

from rpgkit.colors import (
    COLOR_DARK_GRAY,
    COLOR_DARK_PURPLE,
    COLOR_DARK_RED,
    COLOR_LIGHT_GRAY,
    COLOR_LIGHT_PURPLE,
    COLOR_LIGHT_RED,
    COLOR_PURPLE,
    COLOR_RED,
    COLOR_WHITE,
)
from rpgkit.utility import value_set_linear

# Seconds between visual refreshes of the battle HUD.
BATUI_UPDATE_INTERVAL = 1.5

BATUI_ELEMENT_BAR_WIDTH = 40.0
BATUI_ELEMENT_BAR_HEIGHT = 2.0

# Width in pixels of one character of the HUD font.
_GLYPH_WIDTH = 8.0


class ElementFlag(IntFlag):
    """Flags that switch parts of a battle HUD element on and off."""

    VISIBLE = 0x00000001
    IN_USE = 0x00000002
    USE_TIMER = 0x00000004
    HP_SHOWN = 0x00000008
    MP_SHOWN = 0x00000010


def _bar_width(current: int, maximum: int) -> int:
    return int(current / float(maximum) * BATUI_ELEMENT_BAR_WIDTH) & 0xFFFF


class BattleUIElement:
    """Health and magic bars that follow a combatant's points.

    The combatant needs ``cur_hitpoints``, ``max_hitpoints``,
    ``cur_magicpoints`` and ``max_magicpoints``.  Rendering goes through an
    engine providing ``fill_rect_decal(position, size, color)``.
    """

    def __init__(self) -> None:
        self.flags = 0
        self.x = 0.0
        self.y = 0.0
        self.cur_hitpoints = 0
        self.cur_magicpoints = 0
        self.cur_hp_bar_width = 0
        self.cur_mp_bar_width = 0
        self.hp_bar_x = 0.0
        self.hp_bar_y = 0.0
        self.mp_bar_x = 0.0
        self.mp_bar_y = 0.0
        self.visible_time = 0.0
        self.combatant: Any = None

    def _has(self, flag: int) -> bool:
        return bool(self.flags & flag)

    def _is_live(self) -> bool:
        return self._has(ElementFlag.IN_USE) and self._has(ElementFlag.VISIBLE)

    def update(self) -> None:
        """Step the displayed points one unit towards the combatant's real points."""
        if not self._is_live():
            return

        if self._has(ElementFlag.USE_TIMER):
            self.visible_time -= BATUI_UPDATE_INTERVAL
            if self.visible_time < 0.0:
                self.flags &= ~int(ElementFlag.VISIBLE)
                return

        combatant = self.combatant
        true_value = combatant.cur_hitpoints
        if self._has(ElementFlag.HP_SHOWN) and self.cur_hitpoints != true_value:
            self.cur_hitpoints = value_set_linear(self.cur_hitpoints, true_value, 1)
            self.cur_hp_bar_width = _bar_width(self.cur_hitpoints, combatant.max_hitpoints)

        if not self._has(ElementFlag.MP_SHOWN):
            return

        true_value = combatant.cur_magicpoints
        if self.cur_magicpoints != true_value:
            self.cur_magicpoints = value_set_linear(self.cur_magicpoints, true_value, 1)
            self.cur_mp_bar_width = _bar_width(self.cur_magicpoints, combatant.max_magicpoints)

    def render(self, engine: Any) -> None:
        """Draw the bars, with a grey backdrop when the bar is not full."""
        if not self._is_live():
            return

        full_size = (BATUI_ELEMENT_BAR_WIDTH, BATUI_ELEMENT_BAR_HEIGHT)
        if self._has(ElementFlag.HP_SHOWN):
            position = (self.x + self.hp_bar_x, self.y + self.hp_bar_y)
            if self.cur_hitpoints < self.combatant.max_hitpoints:
                engine.fill_rect_decal(position, full_size, COLOR_DARK_GRAY)
            engine.fill_rect_decal(
                position, (float(self.cur_hp_bar_width), BATUI_ELEMENT_BAR_HEIGHT), COLOR_DARK_RED
            )

        if not self._has(ElementFlag.MP_SHOWN):
            return

        position = (self.x + self.mp_bar_x, self.y + self.mp_bar_y)
        if self.cur_magicpoints < self.combatant.max_magicpoints:
            engine.fill_rect_decal(position, full_size, COLOR_DARK_GRAY)
        engine.fill_rect_decal(
            position, (float(self.cur_mp_bar_width), BATUI_ELEMENT_BAR_HEIGHT), COLOR_DARK_PURPLE
        )

    def activate(
        self,
        x: float,
        y: float,
        hp_bar_x: float,
        hp_bar_y: float,
        mp_bar_x: float,
        mp_bar_y: float,
        combatant: Any,
        flags: int,
    ) -> None:
        """Attach the element to ``combatant`` at the given position and bar offsets."""
        self.flags = int(flags)
        self.x = x
        self.y = y
        self.hp_bar_x = hp_bar_x
        self.hp_bar_y = hp_bar_y
        self.mp_bar_x = mp_bar_x
        self.mp_bar_y = mp_bar_y
        self.combatant = combatant
        self.cur_hitpoints = combatant.cur_hitpoints
        self.cur_magicpoints = combatant.cur_magicpoints
        self.cur_hp_bar_width = int(BATUI_ELEMENT_BAR_WIDTH)
        self.cur_mp_bar_width = int(BATUI_ELEMENT_BAR_WIDTH)

    def show(self, time: float) -> None:
        """Make the element visible for ``time`` units of its timer."""
        self.flags |= int(ElementFlag.VISIBLE)
        self.visible_time = time


class PartyUIElement(BattleUIElement):
    """A party member's HUD row: name, level and numeric HP and MP above the bars.

    The combatant additionally needs ``level`` and ``character.name``; the
    engine additionally needs ``draw_string_decal(position, text, color)``.
    """

    def __init__(self) -> None:
        super().__init__()
        self.name_text = "N/A"
        self.level_text = "0"
        self.hitpoints_text = "0"
        self.magicpoints_text = "0"
        self.level_width = _GLYPH_WIDTH
        self.hitpoints_width = _GLYPH_WIDTH
        self.magicpoints_width = _GLYPH_WIDTH

    def update(self) -> None:
        """Update the bars and refresh the numbers when the real points changed."""
        prev_hitpoints = self.cur_hitpoints
        prev_magicpoints = self.cur_magicpoints

        super().update()
        if not self._is_live():
            return

        if prev_hitpoints != self.combatant.cur_hitpoints:
            self.hitpoints_text = str(self.cur_hitpoints)
            self.hitpoints_width = len(self.hitpoints_text) * _GLYPH_WIDTH

        if prev_magicpoints != self.combatant.cur_magicpoints:
            self.magicpoints_text = str(self.cur_magicpoints)
            self.magicpoints_width = len(self.magicpoints_text) * _GLYPH_WIDTH

    def render(self, engine: Any) -> None:
        """Draw the bars, then the name, level and right-aligned HP and MP numbers."""
        super().render(engine)
        if not self._is_live():
            return

        x, y = self.x, self.y
        engine.draw_string_decal((x, y), self.name_text, COLOR_WHITE)
        x += 120.0
        engine.draw_string_decal((x, y), "Lv", COLOR_LIGHT_GRAY)
        x += 40.0 - self.level_width
        engine.draw_string_decal((x, y), self.level_text, COLOR_WHITE)

        x = self.x + self.hp_bar_x
        engine.draw_string_decal((x, y), "HP", COLOR_RED)
        x += 40.0 - self.hitpoints_width
        engine.draw_string_decal((x, y), self.hitpoints_text, COLOR_LIGHT_RED)

        x = self.x + self.mp_bar_x
        engine.draw_string_decal((x, y), "MP", COLOR_PURPLE)
        x += 40.0 - self.magicpoints_width
        engine.draw_string_decal((x, y), self.magicpoints_text, COLOR_LIGHT_PURPLE)

    def activate(
        self,
        x: float,
        y: float,
        hp_bar_x: float,
        hp_bar_y: float,
        mp_bar_x: float,
        mp_bar_y: float,
        combatant: Any,
        flags: int,
    ) -> None:
        """Attach to ``combatant`` and capture its name, level and points as text."""
        super().activate(x, y, hp_bar_x, hp_bar_y, mp_bar_x, mp_bar_y, combatant, flags)
        self.name_text = combatant.character.name
        self.level_text = str(combatant.level)
        self.hitpoints_text = str(combatant.cur_hitpoints)
        self.magicpoints_text = str(combatant.cur_magicpoints)
        self.level_width = len(self.level_text) * _GLYPH_WIDTH
        self.hitpoints_width = len(self.hitpoints_text) * _GLYPH_WIDTH
        self.magicpoints_width = len(self.magicpoints_text) * _GLYPH_WIDTH
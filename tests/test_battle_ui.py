from dataclasses import dataclass, field

import pytest

from rpgkit.battle_ui import (
    BATUI_ELEMENT_BAR_HEIGHT,
    BATUI_ELEMENT_BAR_WIDTH,
    BattleUIElement,
    ElementFlag,
    PartyUIElement,
)
from rpgkit.colors import COLOR_DARK_GRAY, COLOR_DARK_PURPLE, COLOR_DARK_RED


@dataclass
class Character:
    name: str


@dataclass
class Combatant:
    cur_hitpoints: int = 40
    max_hitpoints: int = 40
    cur_magicpoints: int = 40
    max_magicpoints: int = 40
    level: int = 5
    character: Character = field(default_factory=lambda: Character("Hero"))


class Engine:
    def __init__(self):
        self.rects = []
        self.strings = []

    def fill_rect_decal(self, position, size, color):
        self.rects.append((position, size, color))

    def draw_string_decal(self, position, text, color):
        self.strings.append((position, text, color))


ALL_BARS = ElementFlag.VISIBLE | ElementFlag.IN_USE | ElementFlag.HP_SHOWN | ElementFlag.MP_SHOWN
LAYOUT = (10.0, 20.0, 1.0, 2.0, 3.0, 4.0)


def test_activate_fills_bars():
    combatant = Combatant()
    element = BattleUIElement()
    element.activate(*LAYOUT, combatant, ALL_BARS)
    assert element.cur_hp_bar_width == int(BATUI_ELEMENT_BAR_WIDTH)
    assert element.cur_mp_bar_width == int(BATUI_ELEMENT_BAR_WIDTH)
    assert element.cur_hitpoints == combatant.cur_hitpoints
    assert element.combatant is combatant


def test_update_steps_one_point_towards_true_value():
    combatant = Combatant()
    element = BattleUIElement()
    element.activate(*LAYOUT, combatant, ALL_BARS)
    combatant.cur_hitpoints = 30
    element.update()
    assert element.cur_hitpoints == 39
    assert element.cur_hp_bar_width == 39


def test_update_converges():
    combatant = Combatant()
    element = BattleUIElement()
    element.activate(*LAYOUT, combatant, ALL_BARS)
    combatant.cur_hitpoints = 35
    combatant.cur_magicpoints = 38
    for _ in range(10):
        element.update()
    assert element.cur_hitpoints == 35
    assert element.cur_magicpoints == 38
    assert element.cur_hp_bar_width == 35


def test_update_ignores_mp_when_not_shown():
    combatant = Combatant()
    element = BattleUIElement()
    element.activate(
        *LAYOUT, combatant, ElementFlag.VISIBLE | ElementFlag.IN_USE | ElementFlag.HP_SHOWN
    )
    combatant.cur_magicpoints = 10
    element.update()
    assert element.cur_magicpoints == 40


def test_update_does_nothing_when_not_in_use():
    combatant = Combatant()
    element = BattleUIElement()
    element.activate(*LAYOUT, combatant, ElementFlag.VISIBLE | ElementFlag.HP_SHOWN)
    combatant.cur_hitpoints = 0
    element.update()
    assert element.cur_hitpoints == 40


def test_timer_hides_element():
    combatant = Combatant()
    element = BattleUIElement()
    element.activate(
        *LAYOUT, combatant, ElementFlag.IN_USE | ElementFlag.USE_TIMER | ElementFlag.HP_SHOWN
    )
    combatant.cur_hitpoints = 20
    element.update()
    assert element.cur_hitpoints == 40

    element.show(2.0)
    assert element.flags & ElementFlag.VISIBLE
    element.update()
    assert element.flags & ElementFlag.VISIBLE
    assert element.cur_hitpoints == 39
    element.update()
    assert not element.flags & ElementFlag.VISIBLE


def test_render_full_bars_without_backdrop():
    element = BattleUIElement()
    element.activate(*LAYOUT, Combatant(), ALL_BARS)
    engine = Engine()
    element.render(engine)
    assert engine.rects == [
        ((11.0, 22.0), (BATUI_ELEMENT_BAR_WIDTH, BATUI_ELEMENT_BAR_HEIGHT), COLOR_DARK_RED),
        ((13.0, 24.0), (BATUI_ELEMENT_BAR_WIDTH, BATUI_ELEMENT_BAR_HEIGHT), COLOR_DARK_PURPLE),
    ]


def test_render_backdrop_when_damaged():
    combatant = Combatant()
    element = BattleUIElement()
    element.activate(*LAYOUT, combatant, ALL_BARS)
    combatant.cur_hitpoints = 20
    element.update()
    engine = Engine()
    element.render(engine)
    colors = [rect[2] for rect in engine.rects]
    assert colors == [COLOR_DARK_GRAY, COLOR_DARK_RED, COLOR_DARK_PURPLE]


def test_render_skips_invisible_element():
    element = BattleUIElement()
    element.activate(*LAYOUT, Combatant(), ElementFlag.IN_USE | ElementFlag.HP_SHOWN)
    engine = Engine()
    element.render(engine)
    assert engine.rects == []


def test_party_activate_captures_text():
    element = PartyUIElement()
    element.activate(*LAYOUT, Combatant(cur_magicpoints=7), ALL_BARS)
    assert element.name_text == "Hero"
    assert element.level_text == "5"
    assert element.hitpoints_text == "40"
    assert element.magicpoints_text == "7"
    assert element.hitpoints_width == 2 * element.level_width
    assert element.magicpoints_width == element.level_width


def test_party_update_refreshes_text():
    combatant = Combatant()
    element = PartyUIElement()
    element.activate(*LAYOUT, combatant, ALL_BARS)
    combatant.cur_hitpoints = 5
    element.update()
    assert element.hitpoints_text == "39"
    assert element.magicpoints_text == "40"


def test_party_render_order():
    element = PartyUIElement()
    element.activate(*LAYOUT, Combatant(), ALL_BARS)
    engine = Engine()
    element.render(engine)
    texts = [entry[1] for entry in engine.strings]
    assert texts == ["Hero", "Lv", "5", "HP", "40", "MP", "40"]
    assert engine.strings[1][0] == (130.0, 20.0)
    assert engine.strings[3][0] == (11.0, 20.0)
    assert engine.strings[5][0] == (13.0, 20.0)


def test_zero_maximum_raises():
    combatant = Combatant(max_hitpoints=0)
    element = BattleUIElement()
    element.activate(*LAYOUT, combatant, ALL_BARS)
    combatant.cur_hitpoints = 10
    with pytest.raises(ZeroDivisionError):
        element.update()
from types import SimpleNamespace

import pytest

from rpgkit.battle_constants import Affinity, Target
from rpgkit.battle_menus import (
    FLAG_TGTMENU_ONLY_CONFIRM,
    FLAG_TGTMENU_TARGET_SELF,
    STATE_BTLMENU_IN_ITEMS,
    STATE_BTLMENU_IN_SKILLS,
    STATE_SKLMENU_TARGET_SELECT,
    BattleMainMenu,
    BattleSkillMenu,
    BattleTargetMenu,
)
from rpgkit.colors import COLOR_LIGHT_YELLOW
from rpgkit.menu_constants import MENU_SELECTION_INVALID, MenuFlag, MenuInput, MenuState

ATTACK_ID = 0xF000
FIRE_ID = 0x0000
SLASH_ID = 0x0010
VOID_ID = 0x0020


class FakeScene:
    def __init__(self, active):
        self.combatants = [SimpleNamespace(is_active=a) for a in active]
        self.cur_combatant = self.combatants[0]
        self.targets = []
        self.executed = []
        self.positions = [(float(i), float(i) + 0.5) for i in range(len(active))]

    def execute_skill(self, skill):
        self.executed.append(skill)

    def cur_combatant_index(self):
        return self.combatants.index(self.cur_combatant)


class Recorder:
    def __init__(self):
        self.calls = []

    def draw_string(self, *args):
        self.calls.append(("draw_string",) + args)

    def draw_string_decal(self, *args):
        self.calls.append(("draw_string_decal",) + args)

    def draw_rect_decal(self, *args):
        self.calls.append(("draw_rect_decal",) + args)


def make_skill(name, affinity, hp=0, mp=0, targeting=Target.SINGLE_ENEMY):
    return SimpleNamespace(
        name=name,
        description=f"{name} description",
        affinity=affinity,
        hp_cost=hp,
        mp_cost=mp,
        targeting=targeting,
    )


@pytest.fixture
def skills():
    return {
        ATTACK_ID: make_skill("Strike", Affinity.PHYSICAL),
        FIRE_ID: make_skill("Ignia", Affinity.FIRE, mp=4),
        SLASH_ID: make_skill("Slash", Affinity.PHYSICAL, hp=10),
        VOID_ID: make_skill("Rift", Affinity.VOID, hp=3, mp=5),
    }


@pytest.fixture
def combatant():
    return SimpleNamespace(
        basic_attack=ATTACK_ID,
        active_skills=[FIRE_ID, SLASH_ID, VOID_ID],
        cur_hitpoints=50,
        cur_magicpoints=20,
    )


ALL_ACTIVE = [True] * 11


def make_main(skills, scene=None, closed=None):
    scene = scene or FakeScene(ALL_ACTIVE)
    deactivate = (lambda: closed.append(True)) if closed is not None else None
    menu = BattleMainMenu(skills, scene, deactivate)
    menu.on_create()
    return menu


def press(menu, bit):
    menu.prev_input_flags = 0
    menu.input_flags = int(bit)


def test_main_menu_creates_commands_and_skill_menu(skills):
    menu = make_main(skills)
    assert [o.text for o in menu.menu_options] == ["Skills", "Items", "Guard", "Switch", "Escape"]
    assert menu.flags & MenuFlag.BLOCK_INPUT
    assert isinstance(menu.skill_menu, BattleSkillMenu)
    assert isinstance(menu.skill_menu.sub_menu, BattleTargetMenu)


def test_generate_menu_options_lists_skills_and_costs(skills, combatant):
    menu = make_main(skills)
    menu.prepare_for_activation(MenuState.DEFAULT, combatant)
    skill_menu = menu.skill_menu
    assert [o.text for o in skill_menu.menu_options] == ["Attack", "Ignia", "Slash", "Rift", "Back"]
    assert skill_menu.skill_ids == [ATTACK_ID, FIRE_ID, SLASH_ID, VOID_ID]
    assert skill_menu.skill_costs == ["MP 4", "HP 10", "HP 3 MP 5"]
    assert skill_menu.menu_options[-1].description == "Close the skill selection menu."


def test_regenerating_replaces_previous_options(skills, combatant):
    menu = make_main(skills)
    skill_menu = menu.skill_menu
    skill_menu.generate_menu_options(combatant)
    combatant.active_skills = [FIRE_ID]
    skill_menu.generate_menu_options(combatant)
    assert [o.text for o in skill_menu.menu_options] == ["Attack", "Ignia", "Back"]
    assert skill_menu.skill_costs == ["MP 4"]


def test_missing_basic_attack_is_left_out(skills, combatant):
    combatant.basic_attack = 0xBEEF
    menu = make_main(skills)
    menu.skill_menu.generate_menu_options(combatant)
    assert [o.text for o in menu.skill_menu.menu_options] == ["Ignia", "Slash", "Rift", "Back"]


def test_unknown_active_skill_raises(skills, combatant):
    combatant.active_skills = [0xBEEF]
    menu = make_main(skills)
    with pytest.raises(KeyError):
        menu.skill_menu.generate_menu_options(combatant)


def test_skill_menu_greys_out_unaffordable_options(skills, combatant):
    menu = make_main(skills)
    menu.skill_menu.generate_menu_options(combatant)
    combatant.cur_hitpoints = 0
    menu.skill_menu.prepare_for_activation(MenuState.DEFAULT, menu)
    actives = [o.active for o in menu.skill_menu.menu_options]
    assert actives[0] is True
    assert not any(actives[1:])
    combatant.cur_hitpoints = 50
    menu.skill_menu.prepare_for_activation(MenuState.DEFAULT, menu)
    assert all(o.active for o in menu.skill_menu.menu_options)


def test_main_menu_skills_selection_opens_skill_menu(skills, combatant):
    menu = make_main(skills)
    menu.prepare_for_activation(MenuState.DEFAULT, combatant)
    menu.sel_option = 0
    assert menu.state_process_selection() is True
    assert menu.state.next_state == STATE_BTLMENU_IN_SKILLS
    assert menu.flags & MenuFlag.BLOCK_INPUT
    assert menu.skill_menu.upper_menu is menu
    assert not menu.skill_menu.flags & MenuFlag.BLOCK_INPUT
    assert menu.skill_menu.flags & MenuFlag.VISIBLE


@pytest.mark.parametrize("option", [1, 2, 3, 4])
def test_other_commands_enter_items_state(skills, combatant, option):
    menu = make_main(skills)
    menu.prepare_for_activation(MenuState.DEFAULT, combatant)
    menu.sel_option = option
    menu.state_process_selection()
    assert menu.state.next_state == STATE_BTLMENU_IN_ITEMS
    assert not menu.flags & MenuFlag.BLOCK_INPUT


def test_items_state_returns_on_return_press(skills, combatant):
    menu = make_main(skills)
    menu.prepare_for_activation(MenuState.DEFAULT, combatant)
    menu.sel_option = 1
    menu.state_process_selection()
    menu.after_update()
    press(menu, MenuInput.RETURN)
    assert menu.update(1.0) is True
    assert menu.state.next_state == MenuState.DEFAULT
    assert menu.sel_option == MENU_SELECTION_INVALID


def test_unknown_state_update_returns_false(skills):
    menu = make_main(skills)
    menu.state.cur_state = 0x42
    assert menu.update(1.0) is False
    menu.skill_menu.state.cur_state = 0x42
    assert menu.skill_menu.update(1.0) is False


def test_skill_menu_back_returns_to_main_menu(skills, combatant):
    menu = make_main(skills)
    menu.prepare_for_activation(MenuState.DEFAULT, combatant)
    menu.sel_option = 0
    menu.state_process_selection()
    skill_menu = menu.skill_menu
    skill_menu.sel_option = len(skill_menu.menu_options) - 1
    assert skill_menu.state_process_selection() is True
    assert skill_menu.flags & MenuFlag.BLOCK_INPUT
    assert not skill_menu.flags & MenuFlag.VISIBLE
    assert menu.state.next_state == MenuState.DEFAULT
    assert menu.sel_option == MENU_SELECTION_INVALID
    assert not menu.flags & MenuFlag.BLOCK_INPUT


def test_skill_selection_opens_target_menu(skills, combatant):
    menu = make_main(skills)
    menu.prepare_for_activation(MenuState.DEFAULT, combatant)
    skill_menu = menu.skill_menu
    skill_menu.prepare_for_activation(MenuState.DEFAULT, menu)
    skill_menu.sel_option = 1
    assert skill_menu.state_process_selection() is True
    target_menu = skill_menu.sub_menu
    assert skill_menu.state.next_state == STATE_SKLMENU_TARGET_SELECT
    assert skill_menu.flags & MenuFlag.BLOCK_INPUT
    assert target_menu.skill_to_use is skills[FIRE_ID]
    assert target_menu.upper_menu is skill_menu
    assert target_menu.valid_targets == list(range(3, 11))


def test_target_select_return_closes_target_menu(skills, combatant):
    menu = make_main(skills)
    menu.prepare_for_activation(MenuState.DEFAULT, combatant)
    skill_menu = menu.skill_menu
    skill_menu.prepare_for_activation(MenuState.DEFAULT, menu)
    skill_menu.sel_option = 1
    skill_menu.state_process_selection()
    skill_menu.after_update()
    press(skill_menu.sub_menu, MenuInput.RETURN)
    assert skill_menu.update(1.0) is True
    assert not skill_menu.sub_menu.flags & MenuFlag.VISIBLE
    assert not skill_menu.flags & MenuFlag.BLOCK_INPUT
    assert skill_menu.state.next_state == MenuState.DEFAULT


def test_skill_menu_render_draws_costs(skills, combatant):
    menu = make_main(skills)
    skill_menu = menu.skill_menu
    skill_menu.generate_menu_options(combatant)
    skill_menu.prepare_for_activation(MenuState.DEFAULT, menu)
    skill_menu.cur_option = 1
    engine = Recorder()
    assert skill_menu.render(engine) is True
    costs = [c for c in engine.calls if c[0] == "draw_string"]
    assert [c[3] for c in costs] == ["MP 4", "HP 10", "HP 3 MP 5"]
    assert costs[0][1] == skill_menu.option_anchor_x + 100
    assert costs[0][2] == skill_menu.option_anchor_y + skill_menu.option_spacing_y
    assert costs[0][4] == skill_menu.option_hover_color
    assert costs[1][4] == skill_menu.option_color


def make_target(active, closed=None):
    scene = FakeScene(active)
    menu = BattleTargetMenu(scene, (lambda: closed.append(True)) if closed is not None else None)
    menu.on_create()
    return menu, scene


def test_all_enemies_only_confirm_and_skip_inactive():
    active = ALL_ACTIVE.copy()
    active[4] = False
    menu, _ = make_target(active)
    menu.determine_valid_targets(Target.ALL_ENEMY)
    assert menu.valid_targets == [3, 5, 6, 7, 8, 9, 10]
    assert menu.flags & FLAG_TGTMENU_ONLY_CONFIRM
    assert not menu.flags & FLAG_TGTMENU_TARGET_SELF


def test_single_enemy_self_sets_target_self():
    menu, _ = make_target(ALL_ACTIVE)
    menu.determine_valid_targets(Target.SINGLE_ENEMY_SELF)
    assert menu.valid_targets == list(range(3, 11))
    assert menu.flags & FLAG_TGTMENU_TARGET_SELF
    assert not menu.flags & FLAG_TGTMENU_ONLY_CONFIRM


@pytest.mark.parametrize(
    "targeting, expected",
    [
        (Target.SINGLE_ALLY, [1, 2]),
        (Target.SINGLE_ALLY_SELF, [0, 1, 2]),
        (Target.ALL_ALLY, [1, 2]),
        (Target.EVERYONE, list(range(1, 11))),
        (Target.EVERYONE_SELF, list(range(11))),
        (Target.SELF, []),
    ],
)
def test_ally_and_everyone_targets(targeting, expected):
    menu, _ = make_target(ALL_ACTIVE)
    menu.determine_valid_targets(targeting)
    assert menu.valid_targets == expected


def test_invalid_targeting_keeps_existing_targets():
    menu, _ = make_target(ALL_ACTIVE)
    menu.determine_valid_targets(Target.SINGLE_ALLY)
    menu.determine_valid_targets(Target.INVALID)
    assert menu.valid_targets == [1, 2]


def test_target_cursor_wraps_both_ways():
    menu, _ = make_target(ALL_ACTIVE)
    menu.prepare_for_activation(MenuState.DEFAULT, None, make_skill("x", Affinity.FIRE))
    press(menu, MenuInput.LEFT)
    menu.state_default(1.0)
    assert menu.cur_option == len(menu.valid_targets) - 1
    press(menu, MenuInput.RIGHT)
    menu.state_default(1.0)
    assert menu.cur_option == 0


def test_target_selection_executes_skill():
    closed = []
    menu, scene = make_target(ALL_ACTIVE, closed)
    skill = make_skill("x", Affinity.FIRE, targeting=Target.SINGLE_ENEMY_SELF)
    menu.prepare_for_activation(MenuState.DEFAULT, None, skill)
    press(menu, MenuInput.SELECT)
    menu.state_default(1.0)
    assert menu.state.next_state == MenuState.PROCESS_SELECTION
    menu.after_update()
    assert menu.update(1.0) is True
    assert closed == [True]
    assert scene.targets == [0, 3]
    assert scene.executed == [skill]
    assert menu.valid_targets == []


def test_confirm_only_inserts_all_targets_in_front():
    closed = []
    menu, scene = make_target(ALL_ACTIVE, closed)
    scene.targets.append(99)
    skill = make_skill("x", Affinity.FIRE, targeting=Target.ALL_ALLY_SELF)
    menu.prepare_for_activation(MenuState.DEFAULT, None, skill)
    press(menu, MenuInput.SELECT)
    menu.state_default(1.0)
    assert scene.targets == [0, 1, 2, 99]
    assert scene.executed == [skill]
    assert not menu.flags & FLAG_TGTMENU_ONLY_CONFIRM
    assert closed == [True]


def test_target_render_outlines_targets():
    menu, scene = make_target(ALL_ACTIVE)
    menu.prepare_for_activation(MenuState.DEFAULT, None, make_skill("x", Affinity.FIRE, targeting=Target.SINGLE_ALLY))
    menu.cur_option = 1
    engine = Recorder()
    menu.render(engine)
    assert engine.calls == [("draw_rect_decal", scene.positions[2], (32.0, 32.0), COLOR_LIGHT_YELLOW)]
    menu.determine_valid_targets(Target.ALL_ALLY)
    engine = Recorder()
    menu.render(engine)
    assert [c[1] for c in engine.calls] == [scene.positions[1], scene.positions[2]]


def test_target_deactivation_without_callback_closes_chain(skills, combatant):
    menu = make_main(skills)
    menu.prepare_for_activation(MenuState.DEFAULT, combatant)
    skill_menu = menu.skill_menu
    skill_menu.prepare_for_activation(MenuState.DEFAULT, menu)
    skill_menu.sel_option = 1
    skill_menu.state_process_selection()
    target_menu = skill_menu.sub_menu
    target_menu.sel_option = 0
    target_menu.state_process_selection()
    for m in (target_menu, skill_menu, menu):
        assert m.flags & MenuFlag.BLOCK_INPUT
        assert not m.flags & MenuFlag.VISIBLE
    assert menu.scene.executed == [skills[FIRE_ID]]
    assert menu.scene.targets == [3]
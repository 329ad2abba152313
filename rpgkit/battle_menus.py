"""Battle command menus: the main command list, skill list and target picker."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from rpgkit.battle_constants import BATTLE_MAX_PARTY_SIZE, BATTLE_TOTAL_COMBATANTS, Affinity, Target
from rpgkit.colors import COLOR_LIGHT_YELLOW, STATE_INVALID, VIEWPORT_HEIGHT, VIEWPORT_WIDTH
from rpgkit.menu import Menu
from rpgkit.menu_constants import MENU_SELECTION_INVALID, MenuFlag, MenuInput, MenuState

# States of the main battle menu beyond the two every menu has.
STATE_BTLMENU_IN_SKILLS = 2
STATE_BTLMENU_IN_ITEMS = 3

# Indices of the main battle menu's options.
OPTION_BTLMENU_SKILLS = 0
OPTION_BTLMENU_ITEMS = 1
OPTION_BTLMENU_GUARD = 2
OPTION_BTLMENU_SWITCH = 3
OPTION_BTLMENU_ESCAPE = 4

# State of the skill menu while its target menu has control.
STATE_SKLMENU_TARGET_SELECT = 2
OPTION_SKLMENU_ATTACK = 0

# Extra flags of the target menu.
FLAG_TGTMENU_ONLY_CONFIRM = 0x00000100
FLAG_TGTMENU_TARGET_SELF = 0x00000200

# Size of the highlight drawn around a targeted combatant.
_TARGET_BOX = (32.0, 32.0)

DeactivateAll = Callable[[], None]


def _deactivate_chain(menu: Menu) -> None:
    current: Menu | None = menu
    while current is not None:
        Menu.prepare_for_deactivation(current)
        current = current.upper_menu


class BattleTargetMenu(Menu):
    """Chooses which combatants a skill is used on.

    ``scene`` provides ``combatants`` (each with ``is_active``),
    ``cur_combatant``, ``positions``, a ``targets`` list,
    ``execute_skill(skill)`` and ``cur_combatant_index()``.  ``deactivate_all``
    closes every open menu once a target is confirmed; without it this menu
    and the menus above it are closed.
    """

    def __init__(self, scene: Any, deactivate_all: DeactivateAll | None = None) -> None:
        super().__init__()
        self.scene = scene
        self.valid_targets: list[int] = []
        self.skill_to_use: Any = None
        self._deactivate_all = deactivate_all

    def _close_all(self) -> None:
        if self._deactivate_all is not None:
            self._deactivate_all()
        else:
            _deactivate_chain(self)

    def on_create(self) -> bool:
        """Lay out the (option-less) target menu."""
        self.initialize_params(STATE_INVALID, 1, 0, 0, 0, 0, 0xFF, MenuFlag.BLOCK_INPUT)
        self.initialize_option_params(0, 0, 0, 0)
        return True

    def on_destroy(self) -> bool:
        """Drop options and the valid target list."""
        super().on_destroy()
        self.valid_targets.clear()
        return True

    def render(self, engine: Any) -> bool:
        """Outline every target when only confirming, else the hovered target."""
        if self._has(FLAG_TGTMENU_ONLY_CONFIRM):
            for target in self.valid_targets:
                engine.draw_rect_decal(self.scene.positions[target], _TARGET_BOX, COLOR_LIGHT_YELLOW)
            return True
        position = self.scene.positions[self.valid_targets[self.cur_option]]
        engine.draw_rect_decal(position, _TARGET_BOX, COLOR_LIGHT_YELLOW)
        return True

    def prepare_for_activation(self, state: int, skill_menu: Menu | None = None, skill: Any = None) -> None:
        """Activate for ``skill``, collecting the combatants it may target."""
        super().prepare_for_activation(state)
        self.determine_valid_targets(skill.targeting)
        self.upper_menu = skill_menu
        self.skill_to_use = skill

    def prepare_for_deactivation(self) -> None:
        """Close and hand input back to the skill menu."""
        super().prepare_for_deactivation()
        upper = self.upper_menu
        if upper is not None:
            upper.set_next_state(MenuState.DEFAULT, True)
            upper.flags &= ~int(MenuFlag.BLOCK_INPUT)
        self.flags &= ~FLAG_TGTMENU_ONLY_CONFIRM

    def determine_valid_targets(self, targeting: int) -> None:
        """Fill ``valid_targets`` with combatant indices the targeting mode allows."""
        if targeting == Target.INVALID and self.valid_targets:
            return
        self.valid_targets.clear()

        combatants = self.scene.combatants
        caster = self.scene.cur_combatant

        if targeting in (Target.ALL_ENEMY, Target.ALL_ENEMY_SELF, Target.SINGLE_ENEMY, Target.SINGLE_ENEMY_SELF):
            if targeting in (Target.ALL_ENEMY, Target.ALL_ENEMY_SELF):
                self.flags |= FLAG_TGTMENU_ONLY_CONFIRM
            self.valid_targets.extend(
                index
                for index in range(BATTLE_MAX_PARTY_SIZE, BATTLE_TOTAL_COMBATANTS)
                if combatants[index].is_active
            )
            if targeting in (Target.SINGLE_ENEMY_SELF, Target.ALL_ENEMY_SELF):
                self.flags |= FLAG_TGTMENU_TARGET_SELF
        elif targeting in (Target.ALL_ALLY, Target.ALL_ALLY_SELF, Target.SINGLE_ALLY, Target.SINGLE_ALLY_SELF):
            if targeting in (Target.ALL_ALLY, Target.ALL_ALLY_SELF):
                self.flags |= FLAG_TGTMENU_ONLY_CONFIRM
            skip_caster = targeting in (Target.SINGLE_ALLY, Target.ALL_ALLY)
            self.valid_targets.extend(
                index
                for index in range(BATTLE_MAX_PARTY_SIZE)
                if combatants[index].is_active and not (skip_caster and combatants[index] is caster)
            )
        elif targeting in (Target.EVERYONE, Target.EVERYONE_SELF):
            include_caster = targeting == Target.EVERYONE_SELF
            self.valid_targets.extend(
                index
                for index in range(BATTLE_TOTAL_COMBATANTS)
                if combatants[index].is_active and (include_caster or combatants[index] is not caster)
            )
            self.flags |= FLAG_TGTMENU_ONLY_CONFIRM

    def state_default(self, delta_time: float) -> bool:
        """Confirm all targets, select the hovered one, or cycle left and right."""
        if self._has(FLAG_TGTMENU_ONLY_CONFIRM):
            if self._input_pressed(MenuInput.SELECT):
                self._close_all()
                self.flags &= ~FLAG_TGTMENU_ONLY_CONFIRM
                self.scene.targets[0:0] = self.valid_targets
                self.scene.execute_skill(self.skill_to_use)
            return True

        if self._input_pressed(MenuInput.SELECT):
            self.state.set_next_state(MenuState.PROCESS_SELECTION)
            self.sel_option = self.cur_option
            return True

        movement = int(self._input_pressed(MenuInput.RIGHT, MenuInput.LEFT)) - int(
            self._input_pressed(MenuInput.LEFT, MenuInput.RIGHT)
        )
        if movement < 0:
            self.cur_option = (self.cur_option - 1) & 0xFF
            if self.cur_option == 0xFF:
                self.cur_option = (len(self.valid_targets) - 1) & 0xFF
        elif movement > 0:
            self.cur_option = (self.cur_option + 1) & 0xFF
            if self.cur_option == len(self.valid_targets):
                self.cur_option = 0
        return True

    def state_process_selection(self) -> bool:
        """Record the chosen target (and the caster if required) and use the skill."""
        self._close_all()
        if self._has(FLAG_TGTMENU_TARGET_SELF):
            self.scene.targets.append(self.scene.cur_combatant_index())
        self.scene.targets.append(self.valid_targets[self.sel_option])
        self.scene.execute_skill(self.skill_to_use)
        self.valid_targets.clear()
        return True


class BattleSkillMenu(Menu):
    """Lists the current party member's skills with their costs.

    ``skills`` maps skill ids to skills with ``name``, ``description``,
    ``affinity``, ``hp_cost``, ``mp_cost`` and ``targeting``.  Combatants
    provide ``basic_attack``, ``active_skills``, ``cur_hitpoints`` and
    ``cur_magicpoints``.
    """

    def __init__(
        self,
        skills: Mapping[int, Any],
        scene: Any,
        deactivate_all: DeactivateAll | None = None,
    ) -> None:
        super().__init__()
        self.skills = skills
        self.scene = scene
        self.skill_costs: list[str] = []
        self.skill_ids: list[int] = []
        self.cur_combatant: Any = None
        self._deactivate_all = deactivate_all

    def on_create(self) -> bool:
        """Lay out the skill list and create its target menu."""
        self.initialize_params(STATE_INVALID, 1, 8, 1, 0, 0, 0xFF, MenuFlag.BLOCK_INPUT)
        self.initialize_option_params(80, 200, 0, 10)
        self.sub_menu = BattleTargetMenu(self.scene, self._deactivate_all)
        self.sub_menu.on_create()
        return True

    def on_destroy(self) -> bool:
        """Destroy the target menu and forget the listed skills."""
        super().on_destroy()
        if self.sub_menu is not None:
            self.sub_menu.on_destroy()
        self.skill_costs.clear()
        self.skill_ids.clear()
        return True

    def update(self, delta_time: float) -> bool:
        """Run the current state; False for an unknown state."""
        cur = self.state.cur_state
        if cur == STATE_SKLMENU_TARGET_SELECT:
            return self.state_target_select()
        return super().update(delta_time)

    def render(self, engine: Any) -> bool:
        """Draw the options and, to their right, each skill's cost."""
        self.render_visible_options(engine)
        for i, cost in enumerate(self.skill_costs):
            index = i + 1
            if not self._option_is_active(index):
                color = self.option_inactive_color
            elif self.sel_option == index:
                color = self.option_sel_color
            elif self.cur_option == index:
                color = self.option_hover_color
            else:
                color = self.option_color
            engine.draw_string(
                self.option_anchor_x + 100,
                self.option_anchor_y + self.option_spacing_y * index,
                cost,
                color,
            )
        return True

    def generate_menu_options(self, combatant: Any) -> None:
        """Rebuild the options from ``combatant``'s basic attack and active skills."""
        self.menu_options.clear()
        self.skill_costs.clear()
        self.skill_ids.clear()
        self.cur_combatant = combatant

        attack = self.skills.get(combatant.basic_attack)
        if attack is not None:
            self.add_option(0, 0, "Attack", attack.description)
            self.skill_ids.append(combatant.basic_attack)

        for skill_id in combatant.active_skills:
            skill = self.skills[skill_id]
            self.add_option(0, 0, skill.name, skill.description)
            self.skill_ids.append(skill_id)
            if skill.affinity < Affinity.FIRE:
                self.skill_costs.append(f"HP {skill.hp_cost}")
            elif skill.affinity < Affinity.VOID:
                self.skill_costs.append(f"MP {skill.mp_cost}")
            else:
                self.skill_costs.append(f"HP {skill.hp_cost} MP {skill.mp_cost}")

        self.add_option(0, 0, "Back", "Close the skill selection menu.")

    @staticmethod
    def _can_pay_hp(combatant: Any, cost: int) -> bool:
        # A skill may never leave its caster below one hitpoint.
        return combatant.cur_hitpoints > (cost & 0xFF)

    @staticmethod
    def _can_pay_mp(combatant: Any, cost: int) -> bool:
        return combatant.cur_magicpoints >= (cost & 0xFF)

    def prepare_for_activation(self, state: int, main_menu: Menu | None = None) -> None:
        """Activate under ``main_menu``, greying out skills the combatant cannot pay for."""
        super().prepare_for_activation(state)
        self.upper_menu = main_menu
        for i, skill_id in enumerate(self.skill_ids):
            skill = self.skills[skill_id]
            option = self.menu_options[i + 1]
            affordable = self._can_pay_hp(self.cur_combatant, skill.hp_cost) and self._can_pay_mp(
                self.cur_combatant, skill.mp_cost
            )
            if affordable:
                option.flags |= 0x1
            else:
                option.flags &= ~0x1

    def prepare_for_deactivation(self) -> None:
        """Close and hand input back to the main battle menu."""
        super().prepare_for_deactivation()
        upper = self.upper_menu
        if upper is not None:
            upper.set_next_state(MenuState.DEFAULT, True)
            upper.flags &= ~int(MenuFlag.BLOCK_INPUT)

    def state_process_selection(self) -> bool:
        """Close on "Back", otherwise pass the chosen skill to the target menu."""
        if self.sel_option == (len(self.menu_options) - 1) & 0xFF:
            self.prepare_for_deactivation()
            return True

        skill = self.skills.get(self.skill_ids[self.sel_option])
        if skill is None:
            self.prepare_for_deactivation()
            return False

        target_menu = self.sub_menu
        if not isinstance(target_menu, BattleTargetMenu):
            return False

        target_menu.prepare_for_activation(MenuState.DEFAULT, self, skill)
        self.state.set_next_state(STATE_SKLMENU_TARGET_SELECT)
        self.flags |= int(MenuFlag.BLOCK_INPUT)
        return True

    def state_target_select(self) -> bool:
        """Close the target menu when its return input changes."""
        target_menu = self.sub_menu
        if target_menu is not None and target_menu.pressed_inputs() & MenuInput.RETURN:
            if not isinstance(target_menu, BattleTargetMenu):
                return False
            target_menu.prepare_for_deactivation()
        return True


class BattleMainMenu(Menu):
    """The command list shown on a party member's turn."""

    def __init__(
        self,
        skills: Mapping[int, Any],
        scene: Any,
        deactivate_all: DeactivateAll | None = None,
    ) -> None:
        super().__init__()
        self.skills = skills
        self.scene = scene
        self.skill_menu: BattleSkillMenu | None = None
        self.confirm_menu: Menu | None = None
        self._deactivate_all = deactivate_all

    def on_create(self) -> bool:
        """Lay out the commands and create the skill menu."""
        self.initialize_params(STATE_INVALID, 1, 7, 1, 0, 0, 0xFF, MenuFlag.BLOCK_INPUT)
        self.initialize_option_params(5, 260, 0, 10)
        self.initialize_description_params(VIEWPORT_WIDTH >> 1, VIEWPORT_HEIGHT - 15)

        self.add_option(0, 0, "Skills", "Opens the menu that lists all active skills for the current party member.")
        self.add_option(0, 0, "Items", "Choose an item to use on the enemy or your allies.")
        self.add_option(0, 0, "Guard", "Forgo your turn to reduce effects from all incoming attacks until the next turn.")
        self.add_option(0, 0, "Switch", "Switch the current party member out for another within the party roster.")
        self.add_option(0, 0, "Escape", "Attempt to run away from the current battle.")

        self.skill_menu = BattleSkillMenu(self.skills, self.scene, self._deactivate_all)
        self.skill_menu.on_create()
        return True

    def on_destroy(self) -> bool:
        """Destroy this menu and the menus it opened."""
        super().on_destroy()
        if self.skill_menu is not None:
            self.skill_menu.on_destroy()
        if self.confirm_menu is not None:
            self.confirm_menu.on_destroy()
        return True

    def update(self, delta_time: float) -> bool:
        """Run the current state; False for an unknown state."""
        cur = self.state.cur_state
        if cur == STATE_BTLMENU_IN_SKILLS:
            return self.state_inside_skills()
        if cur == STATE_BTLMENU_IN_ITEMS:
            return self.state_inside_items()
        return super().update(delta_time)

    def prepare_for_activation(self, state: int, combatant: Any = None) -> None:
        """Activate for ``combatant``, rebuilding its skill list."""
        super().prepare_for_activation(state)
        if self.skill_menu is not None:
            self.skill_menu.generate_menu_options(combatant)

    def state_process_selection(self) -> bool:
        """Hand control to the menu belonging to the chosen command."""
        self.flags |= int(MenuFlag.BLOCK_INPUT)
        if self.sel_option == OPTION_BTLMENU_SKILLS:
            self.state.set_next_state(STATE_BTLMENU_IN_SKILLS)
            if self.skill_menu is not None:
                self.skill_menu.prepare_for_activation(MenuState.DEFAULT, self)
        elif self.sel_option in (
            OPTION_BTLMENU_ITEMS,
            OPTION_BTLMENU_GUARD,
            OPTION_BTLMENU_SWITCH,
            OPTION_BTLMENU_ESCAPE,
        ):
            self.state.set_next_state(STATE_BTLMENU_IN_ITEMS)
            self.flags &= ~int(MenuFlag.BLOCK_INPUT)
        return True

    def state_inside_skills(self) -> bool:
        """Close the skill menu when its return input changes."""
        if self.skill_menu is not None and self.skill_menu.pressed_inputs() & MenuInput.RETURN:
            self.skill_menu.prepare_for_deactivation()
        return True

    def state_inside_items(self) -> bool:
        """Return to the command list when return is pressed."""
        if self._input_pressed(MenuInput.RETURN):
            self.state.set_next_state(MenuState.DEFAULT)
            self.sel_option = MENU_SELECTION_INVALID
        return True
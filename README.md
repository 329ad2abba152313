# rpgkit

Building blocks for the battle screen of a turn-based role-playing game: grid menus with a repeating cursor, the battle command, skill and target menus, HP and MP bars for combatants, and the constants these share.

The package has no dependencies. It does not draw anything by itself. Render methods take an engine object and call drawing methods on it, such as `draw_string`, `draw_string_decal`, `draw_rect_decal` and `fill_rect_decal`.

## Modules

- `rpgkit.menu`
  - `Menu` is a grid of options `menu_width` columns wide. It handles cursor movement with wrap-around, scrolling visible regions, per-option colours and alpha, optional descriptions for the hovered option, and a small state machine.
  - `MenuOption` is one entry of a menu.
  - `KeyState` holds the `pressed`, `released` and `held` state of one input binding for the current frame.
- `rpgkit.battle_menus`
  - `BattleMainMenu` offers the commands Skills, Items, Guard, Switch and Escape.
  - `BattleSkillMenu` lists a combatant's basic attack and active skills, shows each skill's HP and/or MP cost, and greys out skills the combatant cannot pay for.
  - `BattleTargetMenu` collects the combatants that a skill's `Target` mode allows. It lets the player cycle through them, or only confirm when every target is hit. It then appends the targets to the scene and calls `scene.execute_skill(skill)`.
  - These menus are given a mapping of skill ids to skill objects, a scene object, and optionally a `deactivate_all` callable.
- `rpgkit.confirm_window`
  - `ConfirmWindow` is a two-column "Yes"/"No" menu.
- `rpgkit.battle_ui`
  - `BattleUIElement` draws HP and MP bars that move one point per `update()` towards a combatant's real values. It can hide itself again after a timer.
  - `PartyUIElement` also draws the party member's name, level and right-aligned HP and MP numbers.
  - `ElementFlag` switches the parts of an element on and off.
- `rpgkit.colors`
  - `Pixel` is a frozen RGBA colour. It has `from_packed`, `to_packed` (layout `0xAABBGGRR`) and `with_alpha`.
  - The module also holds the named colour palette (`COLOR_WHITE`, `COLOR_DARK_RED` and so on), the viewport size, `STATE_INVALID`, settings section names and input binding names.
- `rpgkit.utility`
  - `StateMachine` holds the current, next and last state, with `set_next_state` and `update_current_state`.
  - Numeric helpers: `value_sign`, `value_sign_f`, `value_lower_limit`, `value_clamp`, `value_set_linear`, `point_direction`, `length_dir_x` and `length_dir_y`.
- Constants:
  - `rpgkit.battle_constants`: `BattleState`, `BattleFlag`, `Affinity`, `Effect`, `Target`, `Ailment`, `SkillFunction`, `EnemyAI`, `Stat`, plus party, enemy and stat limits.
  - `rpgkit.data_constants`: `CharacterId`, `SkillId`, `SpriteId` and the JSON key names for character, skill and encounter data.
  - `rpgkit.menu_constants`: `MenuFlag`, `MenuInput`, `OptionFlag`, `MenuState` and the cursor repeat times.
  - `rpgkit.object_constants`: `ObjectFlag` and `ObjectInput`.
  - `rpgkit.scene_constants`: `SceneIndex` and `SceneFlag`.

## Example

```python
from rpgkit.colors import Pixel
from rpgkit.utility import value_clamp, value_set_linear

value_clamp(120, 0, 100)        # 100
value_set_linear(10, 13, 5)     # 13: the step stops at the target

white = Pixel.from_packed(0xFFF8F8F8)
faded = white.with_alpha(128)
```

### Writing a menu

A menu subclass does the following:

1. It overrides `on_create` to call `initialize_params`, `initialize_option_params` and then `add_option`. Options are ignored until `initialize_option_params` has run.
2. It overrides `state_process_selection` to act on `sel_option`.
3. Each frame, it calls:
   1. `before_update(key_info)`, where `key_info` maps binding names such as `"MenuUp"` to `KeyState`.
   2. `update(delta_time)`.
   3. `after_update()`.
4. It calls `render(engine)` with an engine that offers `draw_string(x, y, text)` and `draw_string_decal((x, y), text, color)`.

`prepare_for_activation(state)` shows a menu and gives it input. `prepare_for_deactivation()` hides it and blocks input.

## What the package does not do

- It has no game loop, window or drawing engine. You supply the engine object and call the per-frame methods yourself.
- It has no battle scene. Turn order, damage and `execute_skill` belong to the scene object you pass in.
- It does not load character, skill or sprite data. The JSON key names are provided as constants only.
- It does not read settings or keyboard state. Input arrives through the `key_info` mapping.
- It has no logging.

## Installing and testing

```
pip install .[test]
pytest
```
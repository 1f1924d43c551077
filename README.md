# cellquest

A small side-scrolling platformer. You play a cancer cell working its way
through three levels: the blood stream, a lymph node and a final battle.
T-cells patrol the blood stream and chase you when you get close. Glucose
pickups restore health and yellow spikes hurt. Reach the purple portal at the
end of each level to move on.

## Installing

```
pip install .
```

This pulls in `pygame`, which is used for the window, input and drawing.

## Playing

```
cellquest
```

Options:

- `--font PATH`: TrueType font to use. The default is
  `/System/Library/Fonts/Helvetica.ttc`; if a font cannot be loaded, pygame's
  built-in font is used instead and a warning is logged.
- `--sprites DIR`: directory holding `background_1.png`, `background_2.png`
  and `background_3.png` (default `resources/sprites`). A background that
  cannot be loaded is skipped with a warning; the level is then drawn on a
  sky-blue backdrop.

Controls:

| Key              | Action                                                        |
|------------------|---------------------------------------------------------------|
| `A` / `D`        | Move left / right                                             |
| `W` / `Space`    | Jump (held down, jumps again on landing)                      |
| `Up` / `Down`    | Move through menus                                            |
| `Enter`          | Leave the welcome screen, choose a menu item, leave the game-over and victory screens |
| `Esc`            | Pause and resume; back out of level select and settings       |
| `M`              | Main menu from the pause or level-complete screen             |
| `N`              | Next level after completing one, or the victory screen after the last |
| `R`              | Play again after a game over                                  |

Rules as implemented:

- Completing a level adds 1000 points. "Start Game" resets the score to 0.
- Touching an enemy costs health equal to its attack power and gives 30 frames
  of invincibility.
- A spike costs 10 health for every frame you touch it.
- A glucose pickup restores 25 health, up to the maximum of 100.
- Falling below the bottom of the screen ends the game.
- After a game over, `R` restarts from the level before the current one, or
  from the first level when there is none before it.

## What it does not do

- No sound or music is played. The settings menu toggles the "Sound" and
  "Music" entries and cycles difficulty between Easy, Normal and Hard, but
  these settings do not change play.
- Levels 2 and 3 are a flat floor leading to the portal, with no enemies,
  spikes or pickups.
- Enemies with the shooting or boss behaviour do nothing.
- Progress and settings are not saved between runs.

## Using the pieces

The game logic does not depend on a window, so it can be driven directly:

```python
from cellquest.game_logic import new_game, update_game
from cellquest.input import Key, handle_key_down
from cellquest.models import GameState

game = new_game()
handle_key_down(game, Key.ENTER)   # leave the welcome screen
handle_key_down(game, Key.ENTER)   # "Start Game"
assert game.state is GameState.PLAYING

for _ in range(60):
    update_game(game)
print(game.player.x, game.player.y, game.player.health)
```

- `cellquest.models` holds the data classes (`Game`, `Level`, `Entity`,
  `Platform`, `Menu`, ...), the `GameState` and related enums, and the tuning
  constants.
- `cellquest.level.create_levels()` builds the three levels;
  `populate_level(level)` restores a level's content to its starting state.
- `cellquest.entity` holds `update_enemy`, `check_collision` and
  `handle_collisions`.
- `cellquest.game_logic` holds `new_game`, `reset_player_and_level` and
  `update_game`, which advances one frame while the game is playing.
- `cellquest.input` maps `Key` presses to game actions: `handle_key_down` for
  single presses and `handle_held_keys` for keys held during a frame.
- `cellquest.drawing.Renderer(surface, font, title_font).draw(game, now)` draws
  the current screen onto any pygame surface.
- `cellquest.app.main()` opens the window and runs the game at 60 frames per
  second.

## Running the tests

```
pip install .[test]
pytest
```
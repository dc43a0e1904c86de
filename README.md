# pacmaze

A small terminal maze game. You steer Pacman through two hand-drawn mazes
while ghosts patrol back and forth along corridors. Dots, food and bonus items
raise your score. Reach 1000 points to unlock level 2, then reach 3000 points
to win and add your name to the winners list.

## Installing

```
pip install .
```

## Playing

```
pacmaze
```

Options:

- `--variant {standard,trap,extended}` selects the rule set. The default is `standard`.
- `--winners PATH` sets the file that holds the winners' names. The default is `winners.txt` in the current directory.

The main menu offers four choices:

1. Start Game
2. How to Play
3. Winners
4. Exit

If standard input runs out at the menu, the program exits.

### Controls

- The arrow keys move Pacman left, right, up and down.
- ESC leaves the current game and returns to the menu.

The game draws a new frame about every 80 ms. The ghosts move on every frame,
whether you press a key or not.

### Cells

| Cell           | Meaning                            |
|----------------|------------------------------------|
| `.`            | dot, +10 points                    |
| `F`            | food, +30 points                   |
| `B`            | bonus, +50 points                  |
| `H`            | heart, changes your life count     |
| `G`            | ghost; touching one costs a life   |
| `#`, `%`, `\|` | walls                              |

You start with 3 lives. When a ghost reaches Pacman's cell, you lose a life
and Pacman goes back to row 1, column 1. When you have no lives left, the game
ends and shows your score. When you win, you are asked for your name. Its
first word is appended to the winners file.

### Variants

- `standard`: a heart costs a life. A blank line is written before each name in the winners file.
- `trap`: a heart costs a life. Level 2 puts a heart next to a ghost.
- `extended`: a heart gives a life. Level 1 uses a different maze, with more bonus items and a hollow bottom row. Level 2 has two hearts. On both levels, one of the ghosts keeps moving through walls while it heads up.

## Using it as a library

The game logic does not depend on the terminal:

```python
from pacmaze.game import Direction, Game, Outcome
from pacmaze.mazes import Variant

game = Game(Variant.EXTENDED)
outcome = game.tick(Direction.RIGHT)   # Outcome.CONTINUE, LEVEL_UP, WON or LOST
print(game.render())
print(game.status_line())
```

- `Game.tick(direction=None)` moves the ghosts, checks for a collision and moves Pacman. It then reports the outcome and loads level 2 once level 1's goal is reached.
- `Game.move_pacman`, `Game.patrol_ghosts`, `Game.check_collision` and `Game.load_level` run the individual steps.
- `pacmaze.mazes.layout_for(variant, level)` returns a `LevelLayout` for level 1 or 2, with the maze rows, Pacman's start, the `GhostStart` entries and the goal score. Any other level raises `ValueError`.
- `pacmaze.mazes.is_passable(cell)` tells walls from open cells.
- `pacmaze.winners.record_winner(name, path, leading_newline)` appends the first word of a name. A name with no word in it raises `ValueError`.
- `pacmaze.winners.read_winners(path)` returns the stored lines, or `None` when the file cannot be opened.
- `pacmaze.cli` provides `menu_text`, `instructions_text`, `winners_text`, `parse_choice`, `run_game` and `main`.

## Running the tests

```
pip install .[test]
pytest
```
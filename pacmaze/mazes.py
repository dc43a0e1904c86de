"""Maze layouts, starting positions and cell rules for each game variant."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

WALLS = frozenset("#%|")
EMPTY = " "
PACMAN = "P"
GHOST = "G"
DOT = "."
BONUS = "B"
FOOD = "F"
HEART = "H"

CELL_POINTS = {DOT: 10, BONUS: 50, FOOD: 30}

LEVEL_ONE_GOAL = 1000
LEVEL_TWO_GOAL = 3000


class Variant(Enum):
    """The rule sets the game can be played with."""

    STANDARD = "standard"
    TRAP = "trap"
    EXTENDED = "extended"

    @property
    def heart_lives_delta(self) -> int:
        """Change in lives when Pacman steps onto a heart cell."""
        return 1 if self is Variant.EXTENDED else -1

    @property
    def winner_leading_newline(self) -> bool:
        """Whether a blank line precedes each name saved to the winners file."""
        return self is Variant.STANDARD


class Axis(Enum):
    """The line along which a ghost patrols."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def offset(self, direction: int) -> tuple[int, int]:
        """Row and column offset of one step in ``direction`` (+1 or -1)."""
        if direction not in (1, -1):
            raise ValueError(f"direction must be 1 or -1, not {direction!r}")
        if self is Axis.HORIZONTAL:
            return 0, direction
        return direction, 0


@dataclass(frozen=True)
class GhostStart:
    """Where a ghost begins, how it patrols and which way it first heads."""

    row: int
    col: int
    axis: Axis
    direction: int
    stuck_keeps_moving: bool = False


@dataclass(frozen=True)
class LevelLayout:
    """An immutable description of one level."""

    level: int
    rows: tuple[str, ...]
    pacman_start: tuple[int, int]
    ghosts: tuple[GhostStart, ...]
    goal_score: int

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max(len(row) for row in self.rows)

    def grid(self) -> list[list[str]]:
        """A fresh, mutable copy of the maze, one list of cells per row."""
        return [list(row) for row in self.rows]


def is_passable(cell: str) -> bool:
    """True unless the cell is a wall."""
    if len(cell) != 1:
        raise ValueError(f"expected a single cell character, got {cell!r}")
    return cell not in WALLS


_LEVEL_ONE = (
    "##############################",
    "#P.....%..... ......G.......#",
    "#.%%%%.%%%%%.%%%%%%%.%%%%%%.#",
    "#.%.......................%.#",
    "#.%.. ..%%%%%.%%%.....%....#",
    "#.%.......%..%..%..FF%....#",
    "#.%%%%%%%%.%%%..%%.%%%.....#",
    "#.......B..%....%..........#",
    "#.%%%%%%%.%%.%%.%%%%%%%.%%.#",
    "#...%.F...%.....%...... ...#",
    "#.%..%%%%.%%.%%.%%%..%.....#",
    "#.......F.................#",
    "#.%%%%%%.%%%%%%%%%%%%%%.%%.#",
    "#..........................#",
    "############################",
)

_LEVEL_ONE_EXTENDED = (
    "##############################",
    "#P... %              G       #",
    "#.%%%%.%%%%%.%%%%%%%.%%%%%%.#",
    "#.%....B%.................%.#",
    "#.%.. ..%%%%%.%%%.....%....#",
    "#.%.......%..%..%..FF%....#",
    "#.%%%%%%%%.%%%..%%.%%%.....#",
    "#.......B..%...B%..........#",
    "#.%%%%%%%.%%.%%%%%%%%%%.%%.#",
    "#...%.F...%.....%...... ...#",
    "#.%..%%%%.%%.%%.%%%%%%.....#",
    "#.......F.................#",
    "#.%%%%%%.%%%%%%%%%%%%%%.%%.#",
    "#                          #",
    "############################",
)

_LEVEL_TWO = (
    "########################################################################",
    "||..                                                                  ||",
    "||..   %%%%%%%%%%%%%%%%        ...     %%%%%%%%%%%%%  |%|  ..  %%%%   ||",
    "||..          G     |%|     |%|...     |B        B|%|  |%|  ..   |%|  ||",
    "||..         |     B|%|     |%|       G          |%|  |%|  ..   |%|   ||",
    "||..         %%%%%%%%%  . . |%|...     %%%%%%%%%%%%%       ..   %%  . ||",
    "||..         |%|        . . |%|...     .............. |%|  ..       . ||",
    "||..         %%%%%%%%%%%. . |%|...     %%%%%%%%%%%    |%|  ..   %%%%. ||",
    "||..                 |%|.              |%|......      |%|  ..    |%|. ||",
    "||..      .......... |%|.              |%|......|%|        ..    |%|. ||",
    "||..|%|  |%|%%%%|%|. |%|. |%|             ......|%|        ..|%| |%|. ||",
    "||..|%|  |%|    |%|..     %%%%%%%%%%%%%%  ....G.|%|         .|%|.     ||",
    "||..|%|  |%|    |%|..             ...|%|     %%%%%%        . |%|.     ||",
    "||..|%|             .             ...|%|              |%|  ..|%|.     ||",
    "||..|%|  %%%%%%%%%%%%%%%          ...|%|%%%%%%%%%%    |%|  ..|%|%%%%% ||",
    "||.................................................   |%|  .......... ||",
    "||   ..............................................           ....... ||",
    "||..|%|  |%|    |%|..     %%%%%%%%%%%%%%  .....|%|    |%|  ..|%|.     ||",
    "||..|%|  |%|    |%|..             ...|%|     %%%%%    |%|  ..|%|.     ||",
    "||..|%|             .             ...|%|              |%|  ..|%|.     ||",
    "||..|%|  %%%%%%%%%%%%%%%          ...|%|%%%%%%%%%     |%|  ..|%|%%%%% ||",
    "||                                                    |%| G           ||",
    "||                                                            ....... ||",
    "########################################################################",
)

_LEVEL_TWO_CHANGES = {
    Variant.STANDARD: {},
    Variant.TRAP: {
        4: "||..         |     B|%|     |%|       GH         |%|  |%|  ..   |%|   ||",
    },
    Variant.EXTENDED: {
        3: "||..          G     |%|     |%|...     |BH        B|%|  |%|  ..   |%| ||",
        4: "||..         |     B|%|     |%|       G         |%|  |%|  ..   |%|    ||",
        19: "||..|%|             .             ...|%|              |%|  ..|%|H     ||",
    },
}


def _level_one_ghosts(variant: Variant) -> tuple[GhostStart, ...]:
    wandering = variant is Variant.EXTENDED
    return (
        GhostStart(1, 22, Axis.HORIZONTAL, 1),
        GhostStart(4, 6, Axis.VERTICAL, 1, stuck_keeps_moving=wandering),
        GhostStart(10, 22, Axis.HORIZONTAL, -1),
        GhostStart(4, 21, Axis.VERTICAL, -1),
    )


def _level_two_ghosts(variant: Variant) -> tuple[GhostStart, ...]:
    wandering = variant is Variant.EXTENDED
    return (
        GhostStart(3, 14, Axis.HORIZONTAL, 1),
        GhostStart(4, 38, Axis.VERTICAL, 1, stuck_keeps_moving=wandering),
        GhostStart(11, 44, Axis.HORIZONTAL, -1),
        GhostStart(21, 58, Axis.VERTICAL, -1),
    )


def layout_for(variant: Variant, level: int) -> LevelLayout:
    """The layout of ``level`` (1 or 2) under ``variant``."""
    variant = Variant(variant)
    if level == 1:
        rows = _LEVEL_ONE_EXTENDED if variant is Variant.EXTENDED else _LEVEL_ONE
        return LevelLayout(
            level=1,
            rows=rows,
            pacman_start=(1, 1),
            ghosts=_level_one_ghosts(variant),
            goal_score=LEVEL_ONE_GOAL,
        )
    if level == 2:
        changes = _LEVEL_TWO_CHANGES[variant]
        rows = tuple(changes.get(index, row) for index, row in enumerate(_LEVEL_TWO))
        return LevelLayout(
            level=2,
            rows=rows,
            pacman_start=(12, 12),
            ghosts=_level_two_ghosts(variant),
            goal_score=LEVEL_TWO_GOAL,
        )
    raise ValueError(f"there is no level {level!r}; levels are 1 and 2")
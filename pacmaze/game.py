"""Game state: Pacman, the patrolling ghosts, scoring, lives and levels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pacmaze.mazes import (
    CELL_POINTS,
    EMPTY,
    GHOST,
    HEART,
    PACMAN,
    Axis,
    GhostStart,
    LevelLayout,
    Variant,
    is_passable,
    layout_for,
)

STARTING_LIVES = 3
RESPAWN = (1, 1)
LAST_LEVEL = 2


class Direction(Enum):
    """A direction Pacman can be moved in, as a row and column offset."""

    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)

    @property
    def offset(self) -> tuple[int, int]:
        return self.value


class Outcome(Enum):
    """What a single tick of the game led to."""

    CONTINUE = "continue"
    LEVEL_UP = "level_up"
    WON = "won"
    LOST = "lost"


def _inside(grid: list[list[str]], row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def _open(grid: list[list[str]], row: int, col: int) -> bool:
    """True when the cell exists and is not a wall."""
    return _inside(grid, row, col) and is_passable(grid[row][col])


def _put(grid: list[list[str]], row: int, col: int, cell: str) -> None:
    if _inside(grid, row, col):
        grid[row][col] = cell


@dataclass
class Ghost:
    """A ghost patrolling back and forth along one axis."""

    row: int
    col: int
    axis: Axis
    direction: int
    stuck_keeps_moving: bool = False

    @classmethod
    def from_start(cls, start: GhostStart) -> Ghost:
        return cls(
            row=start.row,
            col=start.col,
            axis=start.axis,
            direction=start.direction,
            stuck_keeps_moving=start.stuck_keeps_moving,
        )

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.col

    def patrol(self, grid: list[list[str]], stuck_keeps_moving: bool | None = None) -> None:
        """Take one step, turning round at a wall, and redraw on ``grid``.

        A ghost that keeps moving when stuck walks through walls while heading
        in the negative direction, but never leaves the grid.
        """
        if stuck_keeps_moving is None:
            stuck_keeps_moving = self.stuck_keeps_moving
        _put(grid, self.row, self.col, EMPTY)
        d_row, d_col = self.axis.offset(self.direction)
        target_row, target_col = self.row + d_row, self.col + d_col
        if _open(grid, target_row, target_col):
            self.row, self.col = target_row, target_col
        elif self.direction == -1 and stuck_keeps_moving:
            if _inside(grid, target_row, target_col):
                self.row, self.col = target_row, target_col
        else:
            self.direction = -self.direction
        _put(grid, self.row, self.col, GHOST)


class Game:
    """One game in progress, from level one to a win or the loss of all lives."""

    def __init__(self, variant: Variant = Variant.STANDARD) -> None:
        self.variant = Variant(variant)
        self.score = 0
        self.lives = STARTING_LIVES
        self.level = 0
        self.layout: LevelLayout
        self.grid: list[list[str]] = []
        self.pacman: tuple[int, int] = RESPAWN
        self.ghosts: list[Ghost] = []
        self.load_level(1)

    def load_level(self, level: int) -> None:
        """Switch to ``level``, keeping score and lives."""
        layout = layout_for(self.variant, level)
        self.level = layout.level
        self.layout = layout
        self.grid = layout.grid()
        self.pacman = layout.pacman_start
        self.ghosts = [Ghost.from_start(start) for start in layout.ghosts]

    def move_pacman(self, direction: Direction) -> bool:
        """Move Pacman one cell unless a wall is in the way; True if he moved."""
        d_row, d_col = Direction(direction).offset
        row, col = self.pacman
        target_row, target_col = row + d_row, col + d_col
        if not _open(self.grid, target_row, target_col):
            return False
        cell = self.grid[target_row][target_col]
        self.score += CELL_POINTS.get(cell, 0)
        if cell == HEART:
            self.lives += self.variant.heart_lives_delta
        _put(self.grid, row, col, EMPTY)
        self.pacman = (target_row, target_col)
        _put(self.grid, target_row, target_col, PACMAN)
        return True

    def patrol_ghosts(self) -> None:
        """Move every ghost one step along its patrol."""
        for ghost in self.ghosts:
            ghost.patrol(self.grid, ghost.stuck_keeps_moving)

    def check_collision(self) -> bool:
        """Take a life and send Pacman back if a ghost shares his cell."""
        if any(ghost.position == self.pacman for ghost in self.ghosts):
            self.lives -= 1
            self.pacman = RESPAWN
            return True
        return False

    def tick(self, direction: Direction | None = None) -> Outcome:
        """Advance the game by one frame, moving Pacman if a direction is given."""
        self.patrol_ghosts()
        self.check_collision()
        if direction is not None:
            self.move_pacman(direction)
        if self.lives <= 0:
            return Outcome.LOST
        if self.level < LAST_LEVEL and self.score >= self.layout.goal_score:
            self.load_level(self.level + 1)
            return Outcome.LEVEL_UP
        if self.level == LAST_LEVEL and self.score >= self.layout.goal_score:
            return Outcome.WON
        return Outcome.CONTINUE

    def render(self) -> str:
        """The maze as text, one line per row."""
        return "\n".join("".join(row) for row in self.grid)

    def status_line(self) -> str:
        return f"Score: {self.score}  Lives: {self.lives}"
import pytest

from pacmaze.game import Direction, Game, Ghost, Outcome
from pacmaze.mazes import Axis, Variant, layout_for


def _corridor():
    return [list("#####"), list("#   #"), list("#####")]


def test_new_game_starts_on_level_one_with_three_lives():
    game = Game()
    assert game.level == 1
    assert game.lives == 3
    assert game.score == 0
    assert game.pacman == (1, 1)
    assert game.status_line() == "Score: 0  Lives: 3"


def test_eating_a_dot_scores_ten():
    game = Game()
    assert game.move_pacman(Direction.RIGHT) is True
    assert game.score == 10
    assert game.pacman == (1, 2)
    assert game.grid[1][2] == "P"
    assert game.grid[1][1] == " "


def test_wall_blocks_pacman():
    game = Game()
    assert game.move_pacman(Direction.UP) is False
    assert game.pacman == (1, 1)
    assert game.score == 0


@pytest.mark.parametrize("cell, points", [("B", 50), ("F", 30), (".", 10), (" ", 0)])
def test_cell_points(cell, points):
    game = Game()
    game.grid[1][2] = cell
    game.move_pacman(Direction.RIGHT)
    assert game.score == points


@pytest.mark.parametrize(
    "variant, lives",
    [(Variant.STANDARD, 2), (Variant.TRAP, 2), (Variant.EXTENDED, 4)],
)
def test_heart_changes_lives_by_variant(variant, lives):
    game = Game(variant)
    game.grid[1][2] = "H"
    game.move_pacman(Direction.RIGHT)
    assert game.lives == lives
    assert game.score == 0


def test_ghost_walks_and_redraws():
    grid = _corridor()
    ghost = Ghost(row=1, col=1, axis=Axis.HORIZONTAL, direction=1)
    ghost.patrol(grid, False)
    assert ghost.position == (1, 2)
    assert grid[1][1] == " "
    assert grid[1][2] == "G"


def test_ghost_turns_round_at_wall():
    grid = _corridor()
    ghost = Ghost(row=1, col=3, axis=Axis.HORIZONTAL, direction=1)
    ghost.patrol(grid, False)
    assert ghost.position == (1, 3)
    assert ghost.direction == -1
    ghost.patrol(grid, False)
    assert ghost.position == (1, 2)


def test_stuck_ghost_keeps_moving_through_wall():
    grid = _corridor()
    ghost = Ghost(row=1, col=1, axis=Axis.HORIZONTAL, direction=-1)
    ghost.patrol(grid, True)
    assert ghost.position == (1, 0)
    assert ghost.direction == -1
    assert grid[1][0] == "G"


def test_stuck_ghost_never_leaves_grid():
    grid = _corridor()
    ghost = Ghost(row=1, col=0, axis=Axis.HORIZONTAL, direction=-1)
    ghost.patrol(grid, True)
    assert ghost.position == (1, 0)


def test_vertical_ghost_moves_by_rows():
    grid = [list("###"), list("# #"), list("# #"), list("###")]
    ghost = Ghost(row=1, col=1, axis=Axis.VERTICAL, direction=1)
    ghost.patrol(grid)
    assert ghost.position == (2, 1)


def test_patrolled_ghosts_are_drawn_on_grid():
    game = Game()
    game.patrol_ghosts()
    for ghost in game.ghosts:
        assert game.grid[ghost.row][ghost.col] == "G"


def test_collision_costs_a_life_and_respawns():
    game = Game()
    game.pacman = (3, 3)
    game.ghosts[0].row, game.ghosts[0].col = 3, 3
    assert game.check_collision() is True
    assert game.lives == 2
    assert game.pacman == (1, 1)


def test_no_collision_when_apart():
    game = Game()
    assert game.check_collision() is False
    assert game.lives == 3


def test_reaching_goal_unlocks_level_two():
    game = Game()
    game.score = 1000
    assert game.tick() is Outcome.LEVEL_UP
    assert game.level == 2
    assert game.pacman == (12, 12)
    assert game.score == 1000
    assert len(game.grid) == layout_for(Variant.STANDARD, 2).height


def test_reaching_final_goal_wins():
    game = Game()
    game.load_level(2)
    game.score = 3000
    assert game.tick() is Outcome.WON


def test_below_goal_on_level_two_continues():
    game = Game()
    game.load_level(2)
    game.score = 2990
    assert game.tick() is Outcome.CONTINUE


def test_no_lives_left_loses():
    game = Game()
    game.lives = 0
    assert game.tick() is Outcome.LOST


def test_tick_moves_pacman():
    game = Game()
    assert game.tick(Direction.RIGHT) is Outcome.CONTINUE
    assert game.pacman == (1, 2)
    assert game.score == 10


def test_render_matches_layout_rows():
    game = Game(Variant.EXTENDED)
    lines = game.render().splitlines()
    layout = layout_for(Variant.EXTENDED, 1)
    assert len(lines) == layout.height
    assert lines[0] == layout.rows[0]
    assert lines[1] == layout.rows[1]


def test_unknown_level_is_rejected():
    game = Game()
    with pytest.raises(ValueError):
        game.load_level(3)
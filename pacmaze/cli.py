"""Terminal front end: the main menu, the instructions, the winners list and play."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Any

from pacmaze.game import Direction, Game, Outcome
from pacmaze.mazes import Variant
from pacmaze.winners import DEFAULT_WINNERS_PATH, read_winners, record_winner

FRAME_DELAY = 0.08

_CHOICE = re.compile(r"\s*([+-]?\d+)")

_MENU_LINES = (
    "=====================================",
    "             PACMAN                ",
    "=====================================",
    "1. Start Game",
    "2. How to Play",
    "3. Winners",
    "4. Exit",
)

_INSTRUCTION_LINES = (
    "======== HOW TO PLAY =========",
    "_________________________________",
    "Welcome to Pacman!",
    "",
    "Controls:",
    "Use Arrow Keys to move Pacman:",
    "Left Arrow  : Move Left",
    "Right Arrow : Move Right",
    "Up Arrow    : Move Up",
    "Down Arrow  : Move Down",
    "",
    "Goal:",
    "Eat the dots (.) to gain points.",
    "Eat bonus items (B) for more score (+50 points).",
    "Eat Food items (B) for more score (+30 points).",
    "",
    "Avoid:",
    "Ghosts (G)! If you touch them, you lose a life.",
    "",
    "",
    "Lives:",
    "You start with 3 lives.",
    "If all lives are lost, the game is over.",
    "",
    "",
    "Winning:",
    "Try to Complete All 2 Levels before losing all lives.",
    "Level 1 Completes At 1000 Score ",
    "Level 2 Completes At 3000 Score. ",
    "Exit:",
    "Press ESC at any time to quit the game..",
    "Press Any Key to Return To main Menue....",
)


def menu_text() -> str:
    """The main menu, ending with the prompt for a choice."""
    return "\n".join(_MENU_LINES) + "\nChoose: "


def instructions_text() -> str:
    """The how-to-play screen."""
    return "\n".join(_INSTRUCTION_LINES) + "\n"


def winners_text(path=DEFAULT_WINNERS_PATH) -> str:
    """The winners list as shown on screen, or a note that there are none."""
    lines = read_winners(path)
    if lines is None:
        return "No winners yet!\n"
    return "==== WINNERS ====\n" + "".join(f"{line}\n" for line in lines)


def parse_choice(text: str) -> int | None:
    """The integer a menu answer starts with, or None if it starts with none."""
    match = _CHOICE.match(text)
    return int(match.group(1)) if match else None


def _show(text: str) -> None:
    print(text, end="", flush=True)


def _wait_for_key(term: Any) -> None:
    with term.cbreak():
        term.inkey()


def _ask_name() -> str | None:
    """Read lines until one holds a word; None when input runs out."""
    while True:
        try:
            answer = input()
        except EOFError:
            return None
        if answer.split():
            return answer


def _play(term: Any, game: Game) -> Outcome:
    """Run frames until the game is lost, won or quit; must run in cbreak mode."""
    directions = {
        term.KEY_LEFT: Direction.LEFT,
        term.KEY_RIGHT: Direction.RIGHT,
        term.KEY_UP: Direction.UP,
        term.KEY_DOWN: Direction.DOWN,
    }
    term.inkey()
    _show(term.clear)
    game.load_level(1)
    while True:
        _show(term.home)
        print(game.render())
        print()
        print(game.status_line(), flush=True)

        key = term.inkey(timeout=FRAME_DELAY)
        quitting = key.code == term.KEY_ESCAPE
        outcome = game.tick(None if quitting else directions.get(key.code))

        if outcome is Outcome.LOST:
            _show(term.clear)
            print(f"Game Over! Your Score: {game.score}")
            return outcome
        if outcome is Outcome.LEVEL_UP:
            _show(term.clear)
            print("Level 2 Unlocked!")
            print("Now Score  2000 More Points to Win the Game")
            print("Press any Key to Continue..", flush=True)
            term.inkey()
            _show(term.clear)
        elif outcome is Outcome.WON:
            _show(term.clear)
            print("Congratulations!        ")
            print("      You ARE THE Winner!     ")
            return outcome
        if quitting:
            return outcome


def run_game(term: Any, game: Game, winners_path=DEFAULT_WINNERS_PATH) -> Outcome:
    """Play ``game`` on ``term`` from level one; a winner's name is saved."""
    print("Welcome to My Pacman Game..")
    print("This is Level 1..")
    print("Score 1000 Points to Complete Level 1...", flush=True)
    with term.cbreak(), term.hidden_cursor():
        outcome = _play(term, game)
    if outcome is Outcome.WON:
        print("Enter Your Name:", flush=True)
        name = _ask_name()
        if name is not None:
            record_winner(name, winners_path, game.variant.winner_leading_newline)
        print("==============================")
        print("Press Any key to Exit", flush=True)
        _wait_for_key(term)
    return outcome


def _show_winners(term: Any, variant: Variant, path) -> None:
    print("Here You Can all the Winners of this Pacman Game")
    print("_________________________________________________")
    if variant is not Variant.TRAP:
        print("Press any Key to Continue.")
    _wait_for_key(term)
    _show(winners_text(path))
    print("Press any key to return to menu...", flush=True)
    _wait_for_key(term)


def main(argv: list[str] | None = None) -> int:
    """Show the main menu until the player chooses to leave."""
    parser = argparse.ArgumentParser(prog="pacmaze", description="A console maze chase.")
    parser.add_argument(
        "--variant",
        choices=[variant.value for variant in Variant],
        default=Variant.STANDARD.value,
        help="rule set to play with",
    )
    parser.add_argument(
        "--winners",
        type=Path,
        default=DEFAULT_WINNERS_PATH,
        help="file that holds the winners' names",
    )
    args = parser.parse_args(argv)
    variant = Variant(args.variant)

    terminal = None

    def get_terminal() -> Any:
        nonlocal terminal
        if terminal is None:
            from blessed import Terminal

            terminal = Terminal()
        return terminal

    if sys.stdout.isatty():
        term = get_terminal()
        _show(term.home + term.clear)

    while True:
        try:
            answer = input(menu_text())
        except EOFError:
            print()
            return 0
        choice = parse_choice(answer)
        if choice == 1:
            run_game(get_terminal(), Game(variant), args.winners)
        elif choice == 2:
            _show(instructions_text())
            _wait_for_key(get_terminal())
        elif choice == 3:
            _show_winners(get_terminal(), variant, args.winners)
        elif choice == 4:
            print("you Have Exited the Game")
            print("\nThanks for playing!")
            print("Bye  Bye...")
            return 0


if __name__ == "__main__":
    sys.exit(main())
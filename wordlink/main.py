"""
Terminal front end for Word Link.

Usage:
    python -m wordlink.main play
    python -m wordlink.main play --config config.yaml --verbose
    python -m wordlink.main play --url "/index.html?screen=game&bonusHearts=1&openWordLink=true"
    python -m wordlink.main interlude "/index.html?screen=miniGameSelect&returnTo=game_openWordLink" --bonus 2
    python -m wordlink.main layout cat map crab
"""

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Optional

import yaml

from .grid import build_grid, place_words, render_grid, visualize
from .session import (
    GameConfig,
    GameFlow,
    JsonFileStorage,
    MadLibSession,
    PrintNavigator,
    PuzzleSession,
    ResumptionGateway,
)
from .data import WORD_BANKS
from .validation import WordValidator, offline_lookup


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def render_progress(puzzle: PuzzleSession) -> str:
    """Render the crossword with solved words filled in and the rest blanked."""
    grid, _ = build_grid(puzzle.layout)
    solved = {c for pw in puzzle.layout if pw.word in puzzle.words[:puzzle.current_index] for c in pw.cells()}
    return render_grid(grid, revealed=solved)


def _play_word_link_turn(puzzle: PuzzleSession) -> bool:
    """Run one prompt of Word Link. Returns False when the player quits."""
    word = puzzle.target_word
    guess = puzzle.visible_guess
    print()
    print(render_progress(puzzle))
    print(f"Score: {puzzle.score}  Hearts: {puzzle.hearts}  Hints left: {puzzle.hints_remaining}")
    print(f"Word {puzzle.current_index + 1}/{len(puzzle.words)}: {guess.upper()}{'_' * (len(word) - len(guess))}")
    print(f"Tiles: {' '.join(t.upper() for t in puzzle.tile_pool)}")

    try:
        entry = input("letter / word / :submit :hint :refresh :quit > ").strip().lower()
    except EOFError:
        return False

    if entry == ":quit":
        return False
    if entry == ":hint":
        hint = puzzle.request_hint()
        if hint.revealed:
            print(f"Hint: position {hint.position + 1} is '{hint.letter.upper()}'")
        else:
            print(f"No hint: {hint.reason.replace('_', ' ')}")
    elif entry == ":refresh":
        puzzle.refresh()
    elif len(entry) == 1:
        if not puzzle.draw_tile(entry):
            print(f"No '{entry.upper()}' tile available")
    else:
        result = puzzle.submit_guess(None if entry in ("", ":submit") else entry)
        messages = {
            "correct": "Correct!",
            "valid_word": f"Real word, but not the one we want (+{result.points})",
            "wrong": "Try again!",
        }
        print(messages.get(result.outcome, result.outcome))
    return True


def _play_mad_lib_turn(madlib: MadLibSession, rng: random.Random) -> bool:
    """Run one prompt of Mad Libs. Returns False when the player quits."""
    index = madlib.open_blanks()[0]
    choices = madlib.choices_for(index, rng)

    print()
    print(madlib.render())
    print(f"Score: {madlib.score}  Hearts: {madlib.hearts}")
    print(f"Blank {index + 1} needs a {madlib.blanks[index].type}:")
    for n, choice in enumerate(choices, start=1):
        print(f"  {n}. {choice.word}")

    try:
        entry = input("choice number / :quit > ").strip()
    except EOFError:
        return False

    if entry == ":quit":
        return False
    if not entry.isdigit() or not 1 <= int(entry) <= len(choices):
        print("Pick one of the numbers shown")
        return True

    choice = choices[int(entry) - 1]
    if madlib.choose_word(index, choice.word, choice.type):
        print("Correct!")
    else:
        print(f"Wrong! That blank needed a {madlib.blanks[index].type}.")
    return True


def play(config: GameConfig, url: Optional[str], offline: bool) -> int:
    storage = JsonFileStorage(config.state_file)
    validator = None
    if offline:
        validator = WordValidator(WORD_BANKS, lookup=offline_lookup)

    flow = GameFlow.create(config=config, storage=storage, navigator=PrintNavigator(), validator=validator)
    flow.bootstrap(url)
    rng = random.Random(config.seed)

    while not flow.is_complete and flow.last_handoff_url is None:
        if flow.phase == "wordlink":
            keep_going = _play_word_link_turn(flow.puzzle)
        else:
            keep_going = _play_mad_lib_turn(flow.madlib, rng)
        if not keep_going:
            print("\nGoodbye!")
            return 0

    if flow.is_complete:
        print()
        print(flow.madlib.render())
        print(f"\n=== Story complete! Final score: {flow.madlib.score} ===")
        storage.clear()
    else:
        print("\nOut of hearts! Win some back in a mini-game:")
        print(f"  python -m wordlink.main interlude '{flow.last_handoff_url}' --bonus 1")
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Play Word Link in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  starting_hearts: 3
  max_hints_per_word: 3
  seed: 42
  lookup_timeout: 5
        """
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    play_parser = subparsers.add_parser("play", help="Play a story")
    play_parser.add_argument("--url", help="Return URL from a mini-game to resume from")
    play_parser.add_argument("--seed", type=int, help="Random seed (overrides config)")
    play_parser.add_argument("--offline", action="store_true", help="Only accept words from the word banks")

    interlude_parser = subparsers.add_parser("interlude", help="Finish a mini-game and print the return URL")
    interlude_parser.add_argument("token", help="Mini-game URL printed when hearts ran out")
    interlude_parser.add_argument("--bonus", type=int, default=0, help="Hearts earned in the mini-game")

    layout_parser = subparsers.add_parser("layout", help="Print the crossword layout of some words")
    layout_parser.add_argument("words", nargs="+", help="Words to lay out, in placement order")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else GameConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command == "layout":
        try:
            print(visualize(place_words([w.lower() for w in args.words])))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        return 0

    if args.command == "interlude":
        gateway = ResumptionGateway(JsonFileStorage(config.state_file), config.base_url)
        return_url = gateway.complete_interlude(args.token, args.bonus)
        print(f"Return URL: {return_url}")
        print(f"  python -m wordlink.main play --url '{return_url}'")
        return 0

    if args.seed is not None:
        config.seed = args.seed

    try:
        return play(config, args.url, args.offline)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 0


if __name__ == "__main__":
    sys.exit(main())

# apps/cli/play.py
"""
Command-line front end for word weaver.

This script:
  1) Validates the dictionary file (logs counts + SHA).
  2) Builds a WordLadderGame with the requested flags.
  3) Reads one word per line until the ladder reaches the target word,
     `exit` is typed, or input runs out.

Commands:
  exit  - quit
  new   - abandon this ladder and start a new game
  other - submitted as the next word

Usage:
    python -m apps.cli.play -randomWords --seed 7
    python -m apps.cli.play -hideErrors -showPath
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from weaver.datasets import (
    default_dictionary_path, load_dictionary, pretty_summary, validate_dictionary,
)
from weaver.engine import WordLadderGame
from weaver.events import Event, EventKind

logger = logging.getLogger("weaver")

PROMPT = "Enter next word: "


class LadderCLI:
    """
    Line-based adapter: forwards input to the engine and prints its notices.
    """

    def __init__(self, game: WordLadderGame, *, stdin: TextIO = sys.stdin,
                 stdout: TextIO = sys.stdout):
        self.game = game
        self.stdin = stdin
        self.stdout = stdout
        game.subscribe(self.on_event)

    def _say(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def on_event(self, event: Event) -> None:
        if event.kind is EventKind.ERROR:
            self._say(f"Invalid move: {event.message}")
        elif event.kind is EventKind.WIN:
            self._say(event.message)

    def _show_words(self) -> None:
        self._say(f"Start Word: {self.game.start_word.upper()}")
        self._say(f"Target Word: {self.game.target_word.upper()}")

    def run(self) -> int:
        self._show_words()
        try:
            while not self.game.is_won:
                self.stdout.write(PROMPT)
                self.stdout.flush()
                line = self.stdin.readline()
                if not line:  # EOF
                    self._say()
                    break

                cmd = line.strip().lower()
                if cmd == "exit":
                    break
                if cmd == "new":
                    self.game.new_game()
                    self._show_words()
                    continue

                if self.game.submit_word(cmd) and self.game.show_path:
                    self._say("Path: " + " -> ".join(w.upper() for w in self.game.current_path))

            if self.game.is_won:
                self._say("Congratulations! You won!")
        finally:
            self.game.unsubscribe(self.on_event)
        return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="word weaver - change one letter at a time")
    ap.add_argument("-showErrors", dest="showErrors", action="store_true",
                    help="explain rejected words (the default)")
    ap.add_argument("-hideErrors", dest="showErrors", action="store_false",
                    help="reject bad words silently")
    ap.add_argument("-showPath", action="store_true", help="print the ladder after each move")
    ap.add_argument("-randomWords", action="store_true",
                    help="random start/target words instead of EAST -> WEST")
    ap.add_argument("--dictionary", default=str(default_dictionary_path()),
                    help="path to the word list (one word per line)")
    ap.add_argument("--seed", type=int, help="RNG seed for random words (for reproducibility)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="logging verbosity (stderr)")
    ap.set_defaults(showErrors=None)
    return ap


def main(argv: Optional[List[str]] = None, *, stdin: TextIO = sys.stdin,
         stdout: TextIO = sys.stdout) -> int:
    """
    Parse CLI args, check the dictionary, and play until win/exit.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="[%(levelname)s] %(message)s")

    rep = validate_dictionary(args.dictionary)
    logger.info(pretty_summary(rep))
    for issue in rep["issues"]:
        logger.warning("dictionary: %s", issue)

    # No error flag on the command line: keep the engine default (errors shown).
    flags = {} if args.showErrors is None else {"show_errors": args.showErrors}
    game = WordLadderGame(
        load_dictionary(args.dictionary),
        **flags,
        show_path=args.showPath,
        random_words=args.randomWords,
        seed=args.seed,
    )
    return LadderCLI(game, stdin=stdin, stdout=stdout).run()


if __name__ == "__main__":
    sys.exit(main())

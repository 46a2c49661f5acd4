"""
Word ladder game engine.

One WordLadderGame owns a single session:
  - the dictionary (shared, read-only)
  - start and target words
  - the accepted path (path[0] is always the start word)
  - the input buffer being typed
  - the three display/behaviour flags
  - an optional debug trace of accepted words

Every mutator ends by publishing through the NotificationChannel: a plain
STATE_CHANGED, and for submissions possibly an ERROR or WIN notice after it.
Front ends (CLI, GUI) subscribe and re-render from the read-only accessors.

The engine is UI-agnostic and never blocks; delivery timing is the channel
executor's business.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from weaver.datasets import WORD_LENGTH, load_dictionary, default_dictionary_path
from weaver.events import Event, EventKind, STATE_CHANGED, NotificationChannel
from .validation import ErrorCode, check_move, error_message
from .words import choose_pair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Flags:
    """Runtime switches. Replaced wholesale, never mutated."""
    show_errors: bool = True    # surface ERROR notices
    show_path: bool = False     # keep the debug trace of accepted words
    random_words: bool = False  # random start/target instead of east -> west


class WordLadderGame:
    def __init__(
            self,
            dictionary: Optional[Union[Iterable[str], str, Path]] = None,
            *,
            channel: Optional[NotificationChannel] = None,
            show_errors: bool = True,
            show_path: bool = False,
            random_words: bool = False,
            seed: int | None = None,
    ):
        """
        Args:
            dictionary:   playable words, a word-list path, or None for the bundled
                          list. Always cleaned like a dictionary file.
            channel:      where notifications go (a fresh one if omitted)
            show_errors:  initial flag values (see Flags)
            show_path:
            random_words:
            seed:         seeds random start/target selection
        """
        if dictionary is None:
            dictionary = default_dictionary_path()
        elif not isinstance(dictionary, (str, Path)):
            dictionary = list(dictionary)
        # Members are always N-letter lowercase words, whatever the caller passed.
        self._dictionary = load_dictionary(dictionary, WORD_LENGTH)

        self.channel = channel if channel is not None else NotificationChannel()
        self.rng = np.random.default_rng(seed)
        self._flags = Flags(show_errors, show_path, random_words)

        self._start_word = ""
        self._target_word = ""
        self._path: List[str] = []
        self._debug_path: List[str] = []
        self._buffer: List[str] = []

        self.initialize_words()

    # ---- Subscriptions ----

    def subscribe(self, handler):
        return self.channel.subscribe(handler)

    def unsubscribe(self, handler) -> bool:
        return self.channel.unsubscribe(handler)

    # ---- Accessors (snapshots; callers can't mutate engine state) ----

    @property
    def dictionary(self) -> frozenset:
        return self._dictionary

    @property
    def start_word(self) -> str:
        return self._start_word

    @property
    def target_word(self) -> str:
        return self._target_word

    @property
    def current_path(self) -> Tuple[str, ...]:
        return tuple(self._path)

    @property
    def current_word(self) -> str:
        return self._path[-1] if self._path else ""

    @property
    def input_buffer(self) -> str:
        return "".join(self._buffer)

    @property
    def debug_path(self) -> Tuple[str, ...]:
        return tuple(self._debug_path) if self._flags.show_path else ()

    @property
    def flags(self) -> Flags:
        return self._flags

    @property
    def show_errors(self) -> bool:
        return self._flags.show_errors

    @property
    def show_path(self) -> bool:
        return self._flags.show_path

    @property
    def random_words(self) -> bool:
        return self._flags.random_words

    @property
    def is_won(self) -> bool:
        return self.current_word == self._target_word

    # ---- New games ----

    def initialize_words(self) -> None:
        """Choose start/target for the current mode and reset the session."""
        self._start_word, self._target_word = choose_pair(
            self._dictionary, random_words=self._flags.random_words, rng=self.rng)
        logger.debug("New game: %s -> %s", self._start_word, self._target_word)
        self._reset_game_state()

    def new_game(self) -> None:
        """Start over; random_words decides how the words are picked."""
        self.initialize_words()

    def _reset_game_state(self) -> None:
        self._path = [self._start_word]
        self._debug_path = []
        self._buffer = []
        self._publish(STATE_CHANGED)

    # ---- Flags ----

    def set_flags(self, show_errors: bool, show_path: bool, random_words: bool) -> None:
        """
        Replace all three flags at once. Switching random_words either way
        starts a new game; otherwise a single STATE_CHANGED is published.
        """
        was_random = self._flags.random_words
        self._flags = Flags(bool(show_errors), bool(show_path), bool(random_words))
        if not self._flags.show_path:
            self._debug_path = []
        if was_random != self._flags.random_words:
            self.initialize_words()
        else:
            self._publish(STATE_CHANGED)

    def set_show_errors(self, show_errors: bool) -> None:
        f = replace(self._flags, show_errors=show_errors)
        self.set_flags(f.show_errors, f.show_path, f.random_words)

    def set_show_path(self, show_path: bool) -> None:
        f = replace(self._flags, show_path=show_path)
        self.set_flags(f.show_errors, f.show_path, f.random_words)

    def set_random_words(self, random_words: bool) -> None:
        f = replace(self._flags, random_words=random_words)
        self.set_flags(f.show_errors, f.show_path, f.random_words)

    # ---- Input buffer ----

    def append_to_input_buffer(self, letter: str) -> None:
        """Type one letter. A full buffer rejects it (notice only if show_errors)."""
        if not isinstance(letter, str) or len(letter) != 1 or not letter.isalpha():
            raise ValueError(f"expected a single letter, got {letter!r}")
        if len(self._buffer) < WORD_LENGTH:
            self._buffer.append(letter.lower())
            self._publish(STATE_CHANGED)
        else:
            self._reject(ErrorCode.BUFFER_FULL)

    def delete_last_input(self) -> None:
        """Backspace. Nothing happens (no event) on an empty buffer."""
        if self._buffer:
            self._buffer.pop()
            self._publish(STATE_CHANGED)

    # ---- Submissions ----

    def submit_input_buffer(self) -> bool:
        """
        Submit whatever has been typed. The buffer is cleared (and the clear
        published) before validation, whether or not the word is accepted.
        """
        word = self.input_buffer
        self._buffer = []
        self._publish(STATE_CHANGED)

        if len(word) != WORD_LENGTH:
            self._reject(ErrorCode.INVALID_LENGTH, message=f"word must be {WORD_LENGTH} letters")
            return False
        return self.submit_word(word)

    def submit_word(self, word: str) -> bool:
        """
        Try to extend the ladder with `word`.

        Returns:
            True if the word was appended to the path, False if rejected.
            A rejection leaves path, buffer and flags untouched.
        """
        word = word.strip().lower() if isinstance(word, str) else ""

        code = check_move(word, self.current_word, self._dictionary, WORD_LENGTH)
        if code is not None:
            self._reject(code, word=word)
            return False

        self._path.append(word)
        if self._flags.show_path:
            self._debug_path.append(word)
        logger.debug("Accepted %s (step %d)", word, len(self._path) - 1)
        self._publish(STATE_CHANGED)

        if word == self._target_word:
            logger.info("Solved %s -> %s in %d step(s)",
                        self._start_word, self._target_word, len(self._path) - 1)
            self._publish(Event(EventKind.WIN, f"You won! Target: {self._target_word.upper()}"))
        return True

    # ---- Notifications ----

    def _reject(self, code: ErrorCode, *, word: str = "", message: str | None = None) -> None:
        logger.debug("Rejected %r: %s", word, code.value)
        if self._flags.show_errors:
            text = message if message is not None else error_message(code, word)
            self._publish(Event(EventKind.ERROR, text, code))

    def _publish(self, event: Event) -> None:
        self.channel.publish(event)

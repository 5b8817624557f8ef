"""Quiz mode: flip through a random handful of saved words.

A run draws up to ``size`` words (uniform shuffle of the whole store, then
truncated), shows each card as a prompt, reveals the answer on request and
moves on. Finishing the last card reports one completed run.
"""

import enum
import random
from typing import Callable, List, Optional

from hanyu.common.config import DEFAULT_QUIZ_SIZE
from hanyu.schema.words import WordEntry
from hanyu.store.words import WordStore


class QuizState(enum.Enum):
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class QuizStateError(RuntimeError):
    """A quiz action was used in a state that doesn't allow it."""


def draw_queue(words: List[WordEntry], size: int, rng: random.Random) -> List[WordEntry]:
    """Shuffle a copy of ``words`` and keep at most ``size`` of them."""
    shuffled = list(words)
    rng.shuffle(shuffled)
    return shuffled[:size]


class QuizEngine:
    def __init__(
        self,
        store: WordStore,
        on_complete: Callable[[], object],
        size: int = DEFAULT_QUIZ_SIZE,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.store = store
        self.on_complete = on_complete
        self.size = size
        self.rng = rng or random.Random()
        self.state = QuizState.IDLE
        self.queue: List[WordEntry] = []
        self.position = 0
        self.revealed = False
        self.empty = False

    def _draw(self) -> bool:
        words = self.store.list()
        if not words:
            self.empty = True
            self.state = QuizState.IDLE
            self.queue = []
            self.position = 0
            self.revealed = False
            return False
        self.empty = False
        self.queue = draw_queue(words, self.size, self.rng)
        self.position = 0
        self.revealed = False
        self.state = QuizState.IN_PROGRESS
        return True

    def start(self) -> bool:
        """Begin a run. Returns False (and sets ``empty``) if no words are saved."""
        if self.state is not QuizState.IDLE:
            raise QuizStateError(f"cannot start from {self.state.value}; use retry()")
        return self._draw()

    def retry(self) -> bool:
        """Draw a fresh queue and start over from the first card."""
        return self._draw()

    @property
    def current(self) -> Optional[WordEntry]:
        if self.state is not QuizState.IN_PROGRESS:
            return None
        return self.queue[self.position]

    @property
    def total(self) -> int:
        return len(self.queue)

    @property
    def is_last(self) -> bool:
        return self.position == len(self.queue) - 1

    def reveal(self) -> None:
        """Show the answer for the current card. Repeated calls do nothing."""
        if self.state is not QuizState.IN_PROGRESS:
            raise QuizStateError(f"no card to reveal in {self.state.value}")
        self.revealed = True

    def advance(self) -> QuizState:
        """Move to the next card, or finish the run after the last one."""
        if self.state is not QuizState.IN_PROGRESS:
            raise QuizStateError(f"cannot advance in {self.state.value}")
        if not self.revealed:
            raise QuizStateError("reveal the answer before moving on")
        if not self.is_last:
            self.position += 1
            self.revealed = False
            return self.state
        self.state = QuizState.FINISHED
        self.on_complete()
        return self.state

    @property
    def completed_count(self) -> int:
        """Cards completed in the finished run."""
        if self.state is not QuizState.FINISHED:
            return 0
        return len(self.queue)

"""Stack of visited game states for undo and repetition checks."""

from __future__ import annotations
import logging
from typing import Optional

from .game import Game

logger = logging.getLogger(__name__)


class History:
    """
    Ordered stack of Game snapshots plus a set for O(1) membership.

    The set does not count duplicates: popping a state forgets it even if
    an equal state is still deeper in the stack. Treat contains() as
    "recently seen", not as an exact multiset query.
    """

    def __init__(self) -> None:
        self._seq: list[Game] = []
        self._set: set[Game] = set()

    def push(self, game: Game) -> None:
        self._seq.append(game)
        self._set.add(game)

    def pop(self) -> Optional[Game]:
        """Remove and return the most recent state, or None if empty."""
        if not self._seq:
            return None
        game = self._seq.pop()
        self._set.discard(game)
        logger.debug("popped state, %d remaining", len(self._seq))
        return game

    def last(self) -> Optional[Game]:
        return self._seq[-1] if self._seq else None

    def contains(self, game: Game) -> bool:
        return game in self._set

    def __contains__(self, game: object) -> bool:
        return game in self._set

    def __len__(self) -> int:
        return len(self._seq)

    def __bool__(self) -> bool:
        return bool(self._seq)

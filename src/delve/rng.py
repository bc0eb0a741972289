from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Protocol

logger = logging.getLogger(__name__)


class IntSource(Protocol):
    """Anything that can hand out uniform integers from an inclusive range."""

    def randint(self, a: int, b: int) -> int: ...


@dataclass
class RandomSource:
    """
    A thin wrapper around random.Random to:
    - centralize RNG handling
    - support optional deterministic seeding for tests
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.seed is not None:
            self._rng = random.Random(self.seed)
            logger.debug("Initialized RandomSource with deterministic seed=%s", self.seed)
        else:
            # Non-deterministic seed using system random state
            self._rng = random.Random()
            logger.debug("Initialized RandomSource with non-deterministic seed")

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)


@dataclass
class ScriptedSource:
    """Replays a fixed sequence of integers, one per ``randint`` call.

    Each value must lie inside the range requested by the caller, which lets
    tests pin down exact room placements while still exercising the
    generator's sampling bounds.
    """

    values: Iterable[int]
    _queue: List[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._queue = list(self.values)
        self._queue.reverse()

    @property
    def remaining(self) -> int:
        return len(self._queue)

    def randint(self, a: int, b: int) -> int:
        if not self._queue:
            raise ValueError(f"ScriptedSource exhausted while drawing from [{a}, {b}]")
        value = self._queue.pop()
        if not a <= value <= b:
            raise ValueError(f"Scripted value {value} outside requested range [{a}, {b}]")
        return value


__all__ = ["IntSource", "RandomSource", "ScriptedSource"]

"""Injectable randomness for the game engine.

Every draw the engine makes goes through a RandomSource so tests can swap
in a ScriptedRandomSource and replay an exact sequence of floats.
"""

import math
import random
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Protocol, TypeVar

from .errors import EmptyInputError

T = TypeVar("T")


class RandomSource(Protocol):
    """The four draws the engine needs."""

    def uniform(self) -> float: ...

    def bounded_int(self, low: int, high: int) -> int: ...

    def pick(self, items: Sequence[T]) -> T: ...

    def shuffle(self, items: Sequence[T]) -> list[T]: ...


class _DerivedDraws(ABC):
    """bounded_int, pick and shuffle built on top of uniform()."""

    @abstractmethod
    def uniform(self) -> float:
        """A float in [0, 1)."""

    def bounded_int(self, low: int, high: int) -> int:
        """Integer in [low, high). Caller guarantees high > low."""
        return low + math.floor(self.uniform() * (high - low))

    def pick(self, items: Sequence[T]) -> T:
        if not items:
            raise EmptyInputError("Cannot pick from an empty sequence")
        return items[self.bounded_int(0, len(items))]

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Fisher-Yates shuffle into a new list; the input is left alone."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.bounded_int(0, i + 1)
            result[i], result[j] = result[j], result[i]
        return result


class DefaultRandomSource(_DerivedDraws):
    """Production source backed by a private random.Random instance."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def uniform(self) -> float:
        return self._rng.random()


class ScriptedRandomSource(_DerivedDraws):
    """Replays a fixed list of floats, wrapping around at the end."""

    def __init__(self, values: Sequence[float] = (0.5,)):
        self.set_values(values)

    def uniform(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value

    def reset(self) -> None:
        """Rewind to the first scripted value."""
        self._index = 0

    def set_values(self, values: Sequence[float]) -> None:
        """Replace the script and rewind."""
        if not values:
            raise EmptyInputError("A scripted source needs at least one value")
        self._values = list(values)
        self.reset()

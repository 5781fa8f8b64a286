"""Ordered extraction strategies shared by the field extractors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, Sequence, TypeVar


T = TypeVar("T")

StrategyFunc = Callable[[Sequence[str]], Optional[T]]


@dataclass(frozen=True)
class ExtractionStrategy(Generic[T]):
    """A named, pure extraction step over the lines of a block.

    ``extract`` returns ``None`` when the strategy does not apply; it must
    never raise for malformed input.
    """

    name: str
    priority: int
    extract: StrategyFunc


class StrategyChain(Generic[T]):
    """Runs strategies in priority order and keeps the first result."""

    def __init__(self, strategies: Iterable[ExtractionStrategy[T]]) -> None:
        self._strategies: List[ExtractionStrategy[T]] = sorted(
            strategies, key=lambda strategy: (strategy.priority, strategy.name)
        )

    def run(self, lines: Sequence[str]) -> tuple[Optional[T], Optional[str]]:
        for strategy in self._strategies:
            result = strategy.extract(lines)
            if result is not None:
                return result, strategy.name
        return None, None

    def first(self, lines: Sequence[str], default: T) -> T:
        result, _ = self.run(lines)
        return default if result is None else result

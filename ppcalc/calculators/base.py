from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from functools import cached_property

from ppcalc.constants.mods import Mods
from ppcalc.models.beatmap import AttributeKind
from ppcalc.models.beatmap import DifficultyAttributeSource
from ppcalc.models.performance import PerformanceResult
from ppcalc.models.score import Score


class BaseCalculator(ABC):
    """The shared contract of the per-mode performance calculators.

    The value is calculated once, on first access, from the score snapshot and
    the attributes returned by the beatmap; it never changes afterwards.
    """

    def __init__(self, score: Score, beatmap: DifficultyAttributeSource) -> None:
        self.score = score
        self.beatmap = beatmap

    @classmethod
    def from_score(
        cls,
        score: Score,
        beatmap: DifficultyAttributeSource,
    ) -> BaseCalculator:
        """Create a calculator from a score."""

        return cls(score, beatmap)

    def attribute(self, kind: AttributeKind) -> float:
        return self.beatmap.difficulty_attribute(self.score.mods, kind)

    def has_mods(self, mods: Mods) -> bool:
        return bool(self.score.mods & mods)

    @property
    def is_disqualified(self) -> bool:
        return self.has_mods(Mods.DISQUALIFYING)

    @cached_property
    def result(self) -> PerformanceResult:
        return self.calculate()

    @property
    def total_value(self) -> float:
        return self.result.total

    @property
    @abstractmethod
    def accuracy(self) -> float:
        ...

    @property
    @abstractmethod
    def total_hits(self) -> int:
        ...

    @property
    @abstractmethod
    def total_successful_hits(self) -> int:
        ...

    @abstractmethod
    def calculate(self) -> PerformanceResult:
        ...

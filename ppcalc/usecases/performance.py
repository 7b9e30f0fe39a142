from __future__ import annotations

import logging
from collections.abc import Iterable

from ppcalc.calculators.base import BaseCalculator
from ppcalc.calculators.catch import CatchCalculator
from ppcalc.calculators.std import StandardCalculator
from ppcalc.constants.mode import Mode
from ppcalc.models.beatmap import DifficultyAttributeSource
from ppcalc.models.performance import PerformanceResult
from ppcalc.models.score import Score

# weight decay of each consecutive score on a player's profile
PP_WEIGHT_DECAY = 0.95


def select_calculator(mode: Mode) -> type[BaseCalculator]:
    """Selects the PP calculator to use for the given mode."""

    if mode == Mode.STD:
        return StandardCalculator
    elif mode == Mode.CATCH:
        return CatchCalculator

    raise NotImplementedError(f"Unsupported mode: {mode!r}")


def calculate_performance(
    score: Score,
    beatmap: DifficultyAttributeSource,
) -> PerformanceResult:
    calculator = select_calculator(score.mode).from_score(score, beatmap)
    result = calculator.result

    logging.debug(
        "Calculated score performance",
        extra={
            "score_id": score.id,
            "mode": repr(score.mode),
            "mods": repr(score.mods),
            "pp": result.total,
        },
    )
    return result


def calculate_performances(
    scores: Iterable[tuple[Score, DifficultyAttributeSource]],
) -> list[PerformanceResult]:
    return [calculate_performance(score, beatmap) for score, beatmap in scores]


def calculate_weighted_pp(values: Iterable[float]) -> float:
    """Calculates the weighted pp total of a player's scores."""

    total_pp = 0.0

    for idx, pp in enumerate(sorted(values, reverse=True)):
        total_pp += pp * (PP_WEIGHT_DECAY**idx)

    return total_pp

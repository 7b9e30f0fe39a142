from __future__ import annotations

from ppcalc.calculators.base import BaseCalculator
from ppcalc.constants.mods import Mods
from ppcalc.models.beatmap import AttributeKind
from ppcalc.models.performance import PerformanceResult
from ppcalc.utils import score_utils


class CatchCalculator(BaseCalculator):
    """osu!catch performance. Heavily relies on aim, with no separate speed
    or accuracy components.

    Calculated with double precision floats, so values are not bit-equal to a
    single precision implementation of the same formulas.
    """

    @property
    def total_hits(self) -> int:
        return score_utils.catch_total_hits(
            n300=self.score.n300,
            n100=self.score.n100,
            n50=self.score.n50,
            nkatu=self.score.nkatu,
            nmiss=self.score.nmiss,
        )

    @property
    def total_successful_hits(self) -> int:
        return self.score.n50 + self.score.n100 + self.score.n300

    @property
    def total_combo_hits(self) -> int:
        # droplets (n50) do not contribute towards combo
        return self.score.n300 + self.score.n100 + self.score.nmiss

    @property
    def accuracy(self) -> float:
        return score_utils.catch_accuracy(
            n300=self.score.n300,
            n100=self.score.n100,
            n50=self.score.n50,
            nkatu=self.score.nkatu,
            nmiss=self.score.nmiss,
        )

    def calculate(self) -> PerformanceResult:
        if self.is_disqualified:
            return PerformanceResult(total=0.0)

        value = (
            (5.0 * max(1.0, self.attribute(AttributeKind.AIM) / 0.0049) - 4.0) ** 2.0
            / 100000.0
        )

        # Longer maps are worth more. "Longer" means how many hits there are
        # which can contribute to combo.
        length_factor = (
            self.total_combo_hits * 0.5
            + self.attribute(AttributeKind.DIRECTION_CHANGE_COUNT) * 0.9
        )
        length_bonus = 0.84 + 0.38 * min(1.0, length_factor / 1700.0)
        value *= length_bonus

        value *= 0.96**self.score.nmiss

        beatmap_max_combo = self.attribute(AttributeKind.MAX_COMBO)
        if beatmap_max_combo > 0:
            value *= min(
                self.score.max_combo**0.5 / beatmap_max_combo**0.5,
                1.0,
            )

        approach_rate = self.attribute(AttributeKind.AR)
        approach_rate_factor = 1.0
        if approach_rate > 9.0:
            approach_rate_factor += 0.1 * (approach_rate - 9.0)  # 10% for each AR above 9
        if approach_rate > 10.0:
            approach_rate_factor += 0.1 * (approach_rate - 10.0)  # additional 10% at AR 11
        elif approach_rate < 8.0:
            approach_rate_factor += 0.04 * (8.0 - approach_rate)  # 4% for each AR below 8

        value *= approach_rate_factor

        if self.has_mods(Mods.HIDDEN):
            # almost nothing on max approach rate, more the lower it is
            if approach_rate <= 10.0:
                value *= 1.05 + 0.10 * (10.0 - approach_rate)
            else:
                value *= 1.01 + 0.04 * (11.0 - min(11.0, approach_rate))

            if approach_rate <= 9.0:
                value *= 1.0 + 0.04 * (8.0 - approach_rate)

        if self.has_mods(Mods.FLASHLIGHT):
            # length matters a lot more when you can't see the map
            value *= 1.35 * length_bonus

            if approach_rate > 8.0:
                value *= 0.1 * (approach_rate - 8.0) + 1.0

            if approach_rate < 8.0:
                value *= 0.06 * (8.0 - approach_rate) + 1.0

        value *= self.accuracy**6.0

        # slower catcher, easier to control
        if self.has_mods(Mods.HALFTIME):
            value *= 0.90

        if self.has_mods(Mods.NOFAIL):
            value *= 0.90

        if self.has_mods(Mods.SPUNOUT):
            value *= 0.95

        return PerformanceResult(total=value)

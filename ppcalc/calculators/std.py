from __future__ import annotations

import math

from ppcalc.calculators.base import BaseCalculator
from ppcalc.constants.mods import Mods
from ppcalc.constants.score_version import ScoreVersion
from ppcalc.models.beatmap import AttributeKind
from ppcalc.models.performance import PerformanceResult
from ppcalc.utils import score_utils

# keeps the total scaled around what it used to be before the component rework
BASE_MULTIPLIER = 1.12


def _length_bonus(total_hits: int) -> float:
    return (
        0.95
        + 0.4 * min(1.0, total_hits / 2000.0)
        + (math.log10(total_hits / 2000.0) * 0.5 if total_hits > 2000 else 0.0)
    )


def _approach_rate_hits_factor(total_hits: int) -> float:
    return 1.0 / (1.0 + math.exp(-(0.007 * (total_hits - 400))))


class StandardCalculator(BaseCalculator):
    """osu!standard performance, split into aim, speed and accuracy values
    which are combined with a power mean.

    Calculated with double precision floats: values follow the reference
    formulas operation for operation, but differ in the low bits from a
    single precision implementation.
    """

    @property
    def total_hits(self) -> int:
        return score_utils.std_total_hits(
            n300=self.score.n300,
            n100=self.score.n100,
            n50=self.score.n50,
            nmiss=self.score.nmiss,
        )

    @property
    def total_successful_hits(self) -> int:
        return self.score.n50 + self.score.n100 + self.score.n300

    @property
    def accuracy(self) -> float:
        return score_utils.std_accuracy(
            n300=self.score.n300,
            n100=self.score.n100,
            n50=self.score.n50,
            nmiss=self.score.nmiss,
        )

    def _combo_scaling(self) -> float:
        beatmap_max_combo = self.attribute(AttributeKind.MAX_COMBO)
        if beatmap_max_combo > 0:
            return min(self.score.max_combo**0.8 / beatmap_max_combo**0.8, 1.0)

        return 1.0

    def aim_value(self) -> float:
        raw_aim = self.attribute(AttributeKind.AIM)

        if self.has_mods(Mods.TOUCHSCREEN):
            raw_aim = raw_aim**0.8

        aim_value = (5.0 * max(1.0, raw_aim / 0.0675) - 4.0) ** 3.0 / 100000.0

        total_hits = self.total_hits

        aim_value *= _length_bonus(total_hits)

        # Penalize misses relative to the object count, with a flat 3%
        # reduction for any amount of misses.
        if self.score.nmiss > 0:
            aim_value *= (
                0.97
                * (1.0 - (self.score.nmiss / total_hits) ** 0.775) ** self.score.nmiss
            )

        aim_value *= self._combo_scaling()

        approach_rate = self.attribute(AttributeKind.AR)
        approach_rate_factor = 0.0
        if approach_rate > 10.33:
            approach_rate_factor = approach_rate - 10.33
        elif approach_rate < 8.0:
            approach_rate_factor = 0.025 * (8.0 - approach_rate)

        approach_rate_bonus = (
            1.0
            + (0.03 + 0.37 * _approach_rate_hits_factor(total_hits))
            * approach_rate_factor
        )

        # more reward for lower AR with hidden
        if self.has_mods(Mods.HIDDEN):
            aim_value *= 1.0 + 0.04 * (12.0 - approach_rate)

        flashlight_bonus = 1.0
        if self.has_mods(Mods.FLASHLIGHT):
            flashlight_bonus = (
                1.0
                + 0.35 * min(1.0, total_hits / 200.0)
                + (
                    0.3 * min(1.0, (total_hits - 200) / 300.0)
                    + ((total_hits - 500) / 1200.0 if total_hits > 500 else 0.0)
                    if total_hits > 200
                    else 0.0
                )
            )

        # the larger bonus wins, they do not stack
        aim_value *= max(flashlight_bonus, approach_rate_bonus)

        aim_value *= 0.5 + self.accuracy / 2.0
        aim_value *= 0.98 + self.attribute(AttributeKind.OD) ** 2 / 2500

        return aim_value

    def speed_value(self) -> float:
        speed_value = (
            (5.0 * max(1.0, self.attribute(AttributeKind.SPEED) / 0.0675) - 4.0)
            ** 3.0
            / 100000.0
        )

        total_hits = self.total_hits

        speed_value *= _length_bonus(total_hits)

        if self.score.nmiss > 0:
            speed_value *= 0.97 * (
                1.0 - (self.score.nmiss / total_hits) ** 0.775
            ) ** (self.score.nmiss**0.875)

        speed_value *= self._combo_scaling()

        approach_rate = self.attribute(AttributeKind.AR)
        approach_rate_factor = 0.0
        if approach_rate > 10.33:
            approach_rate_factor = approach_rate - 10.33

        speed_value *= (
            1.0
            + (0.03 + 0.37 * _approach_rate_hits_factor(total_hits))
            * approach_rate_factor
        )

        if self.has_mods(Mods.HIDDEN):
            speed_value *= 1.0 + 0.04 * (12.0 - approach_rate)

        overall_difficulty = self.attribute(AttributeKind.OD)
        accuracy = self.accuracy
        # no accuracy is worth nothing, whatever the exponent
        accuracy_scaling = 0.0
        if accuracy > 0:
            accuracy_scaling = accuracy ** ((14.5 - max(overall_difficulty, 8.0)) / 2)
        speed_value *= (0.95 + overall_difficulty**2 / 750) * accuracy_scaling

        # punish doubletapping through the amount of 50s
        speed_value *= 0.98 ** (
            0.0
            if self.score.n50 < total_hits / 500.0
            else self.score.n50 - total_hits / 500.0
        )

        return speed_value

    def accuracy_value(self) -> float:
        score_version = ScoreVersion.from_attribute(
            self.attribute(AttributeKind.SCORE_VERSION),
        )

        # Only hit circles are considered on the legacy format, as this value
        # focuses on hitting the timing window.
        if score_version is ScoreVersion.V2:
            num_hit_objects_with_accuracy = self.total_hits
            better_accuracy_percentage = self.accuracy
        else:
            num_hit_objects_with_accuracy = int(
                self.attribute(AttributeKind.NUM_HIT_CIRCLES),
            )
            if num_hit_objects_with_accuracy > 0:
                better_accuracy_percentage = (
                    (self.score.n300 - (self.total_hits - num_hit_objects_with_accuracy))
                    * 6
                    + self.score.n100 * 2
                    + self.score.n50
                ) / (num_hit_objects_with_accuracy * 6)
            else:
                better_accuracy_percentage = 0.0

            # the formula can go negative, which is worth nothing
            if better_accuracy_percentage < 0:
                better_accuracy_percentage = 0.0

        accuracy_value = (
            1.52163 ** self.attribute(AttributeKind.OD)
            * better_accuracy_percentage**24
            * 2.83
        )

        # harder to keep good accuracy up for longer
        accuracy_value *= min(1.15, (num_hit_objects_with_accuracy / 1000.0) ** 0.3)

        if self.has_mods(Mods.HIDDEN):
            accuracy_value *= 1.08

        if self.has_mods(Mods.FLASHLIGHT):
            accuracy_value *= 1.02

        return accuracy_value

    def calculate(self) -> PerformanceResult:
        aim_value = self.aim_value()
        speed_value = self.speed_value()
        accuracy_value = self.accuracy_value()

        if self.is_disqualified:
            return PerformanceResult(
                total=0.0,
                aim=aim_value,
                speed=speed_value,
                accuracy=accuracy_value,
            )

        multiplier = BASE_MULTIPLIER

        if self.has_mods(Mods.NOFAIL):
            multiplier *= max(0.9, 1.0 - 0.02 * self.score.nmiss)

        total_hits = self.total_hits
        if self.has_mods(Mods.SPUNOUT) and total_hits > 0:
            multiplier *= (
                1.0 - (self.attribute(AttributeKind.NUM_SPINNERS) / total_hits) ** 0.85
            )

        total_value = (
            aim_value**1.1 + speed_value**1.1 + accuracy_value**1.1
        ) ** (1.0 / 1.1) * multiplier

        return PerformanceResult(
            total=total_value,
            aim=aim_value,
            speed=speed_value,
            accuracy=accuracy_value,
        )

from __future__ import annotations

import pytest

from ppcalc.constants.mode import Mode
from ppcalc.constants.mods import Mods
from ppcalc.constants.score_version import ScoreVersion
from ppcalc.models.beatmap import Beatmap
from ppcalc.models.beatmap import DifficultyAttributes
from ppcalc.models.score import Score


def build_attributes(**overrides) -> DifficultyAttributes:
    values = {
        "aim": 2.5,
        "speed": 2.3,
        "ar": 9.0,
        "od": 8.0,
        "max_combo": 1200,
        "direction_change_count": 300.0,
        "num_spinners": 2,
        "num_hit_circles": 700,
        "score_version": ScoreVersion.V1,
    }
    values.update(overrides)
    return DifficultyAttributes(**values)


@pytest.fixture
def make_beatmap():
    def _make(mods: Mods = Mods.NOMOD, **overrides) -> Beatmap:
        return Beatmap(
            id=75,
            attributes={Mods(mods).difficulty_mods: build_attributes(**overrides)},
        )

    return _make


@pytest.fixture
def make_score():
    def _make(**overrides) -> Score:
        values = {
            "id": 1,
            "mode": Mode.STD,
            "user_id": 1000,
            "beatmap_id": 75,
            "score": 1_000_000,
            "max_combo": 1200,
            "n300": 1000,
            "n100": 0,
            "n50": 0,
            "nmiss": 0,
            "ngeki": 0,
            "nkatu": 0,
            "mods": Mods.NOMOD,
        }
        values.update(overrides)
        return Score(**values)

    return _make

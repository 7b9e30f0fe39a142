from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ppcalc.constants.mode import Mode
from ppcalc.constants.mods import Mods


@dataclass(frozen=True)
class Score:
    id: int
    mode: Mode

    user_id: int
    beatmap_id: int

    score: int
    max_combo: int

    n300: int
    n100: int
    n50: int
    nmiss: int
    ngeki: int
    nkatu: int

    mods: Mods = Mods.NOMOD

    @classmethod
    def from_mapping(cls, result: Mapping[str, Any]) -> Score:
        return cls(
            id=result["id"],
            mode=Mode(result["play_mode"]),
            user_id=result["userid"],
            beatmap_id=result["beatmap_id"],
            score=result["score"],
            max_combo=result["max_combo"],
            n300=result["300_count"],
            n100=result["100_count"],
            n50=result["50_count"],
            nmiss=result["misses_count"],
            ngeki=result["gekis_count"],
            nkatu=result["katus_count"],
            mods=Mods(result["mods"]),
        )

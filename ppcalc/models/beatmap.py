from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from enum import IntEnum
from typing import Any
from typing import Protocol

from ppcalc.constants.mods import Mods
from ppcalc.constants.score_version import ScoreVersion


class AttributeKind(IntEnum):
    AIM = 0
    SPEED = 1
    AR = 2
    OD = 3
    MAX_COMBO = 4
    DIRECTION_CHANGE_COUNT = 5
    NUM_SPINNERS = 6
    NUM_HIT_CIRCLES = 7
    SCORE_VERSION = 8


class DifficultyAttributeSource(Protocol):
    def difficulty_attribute(self, mods: Mods, kind: AttributeKind) -> float:
        ...


@dataclass(frozen=True)
class DifficultyAttributes:
    aim: float
    speed: float

    ar: float
    od: float

    max_combo: int

    # only used by osu!catch
    direction_change_count: float

    num_spinners: int
    num_hit_circles: int

    score_version: ScoreVersion = ScoreVersion.V1

    def value(self, kind: AttributeKind) -> float:
        match kind:
            case AttributeKind.AIM:
                return self.aim
            case AttributeKind.SPEED:
                return self.speed
            case AttributeKind.AR:
                return self.ar
            case AttributeKind.OD:
                return self.od
            case AttributeKind.MAX_COMBO:
                return self.max_combo
            case AttributeKind.DIRECTION_CHANGE_COUNT:
                return self.direction_change_count
            case AttributeKind.NUM_SPINNERS:
                return self.num_spinners
            case AttributeKind.NUM_HIT_CIRCLES:
                return self.num_hit_circles
            case AttributeKind.SCORE_VERSION:
                return self.score_version.value
            case _:
                raise NotImplementedError(f"Unknown attribute kind: {kind}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> DifficultyAttributes:
        return cls(
            aim=mapping["aim"],
            speed=mapping["speed"],
            ar=mapping["ar"],
            od=mapping["od"],
            max_combo=mapping["max_combo"],
            direction_change_count=mapping["direction_change_count"],
            num_spinners=mapping["num_spinners"],
            num_hit_circles=mapping["num_hit_circles"],
            score_version=ScoreVersion.from_attribute(mapping["score_version"]),
        )


@dataclass(frozen=True)
class Beatmap:
    """Precomputed difficulty attributes of a single beatmap, keyed by the
    combination of difficulty changing mods they were calculated with."""

    id: int
    attributes: Mapping[Mods, DifficultyAttributes] = field(default_factory=dict)

    def attributes_for(self, mods: Mods) -> DifficultyAttributes:
        key = Mods(mods).difficulty_mods

        try:
            return self.attributes[key]
        except KeyError:
            logging.error(
                "Beatmap has no difficulty attributes for mod combination",
                extra={"beatmap_id": self.id, "mods": repr(key)},
            )
            raise

    def difficulty_attribute(self, mods: Mods, kind: AttributeKind) -> float:
        return self.attributes_for(mods).value(kind)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Beatmap:
        """Builds a beatmap from a mapping of the beatmap id and a list of
        attribute rows, each row carrying the `mods` it was calculated with."""

        return cls(
            id=mapping["beatmap_id"],
            attributes={
                Mods(row["mods"]).difficulty_mods: DifficultyAttributes.from_mapping(
                    row,
                )
                for row in mapping["attributes"]
            },
        )

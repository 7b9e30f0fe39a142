from __future__ import annotations

from enum import IntEnum


class ScoreVersion(IntEnum):
    V1 = 1
    V2 = 2

    @classmethod
    def from_attribute(cls, value: float) -> ScoreVersion:
        """Resolves the scoring format stored in a beatmap's attributes. Unknown
        values fall back to the legacy format."""

        if int(value) == cls.V2:
            return cls.V2

        return cls.V1

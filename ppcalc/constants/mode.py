from __future__ import annotations

from enum import IntEnum

mode_str = (
    "osu!std",
    "osu!taiko",
    "osu!catch",
    "osu!mania",
)


class Mode(IntEnum):
    STD = 0
    TAIKO = 1
    CATCH = 2
    MANIA = 3

    def __repr__(self) -> str:
        return mode_str[self.value]

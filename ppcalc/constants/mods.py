from __future__ import annotations

from enum import IntFlag


class Mods(IntFlag):
    NOMOD = 0
    NOFAIL = 1 << 0
    EASY = 1 << 1
    TOUCHSCREEN = 1 << 2
    HIDDEN = 1 << 3
    HARDROCK = 1 << 4
    SUDDENDEATH = 1 << 5
    DOUBLETIME = 1 << 6
    RELAX = 1 << 7
    HALFTIME = 1 << 8
    NIGHTCORE = 1 << 9
    FLASHLIGHT = 1 << 10
    AUTOPLAY = 1 << 11
    SPUNOUT = 1 << 12
    AUTOPILOT = 1 << 13
    PERFECT = 1 << 14
    FADEIN = 1 << 20
    RANDOM = 1 << 21
    CINEMA = 1 << 22
    TARGET = 1 << 23
    SCOREV2 = 1 << 29
    MIRROR = 1 << 30

    # scores set with any of these never give pp
    DISQUALIFYING = RELAX | AUTOPILOT | AUTOPLAY

    # mods that alter the difficulty attributes of a beatmap
    DIFFICULTY_CHANGING = EASY | HARDROCK | DOUBLETIME | HALFTIME

    def __repr__(self) -> str:
        if not self.value:
            return "NM"

        _str = ""

        for mod, mod_str in str_mods.items():
            if self.value & mod:
                _str += mod_str

        if self.value & Mods.NIGHTCORE:
            _str = _str.replace("DT", "")
        if self.value & Mods.PERFECT:
            _str = _str.replace("SD", "")

        return _str

    @property
    def difficulty_mods(self) -> Mods:
        """The subset of mods which changes the beatmap's difficulty attributes."""

        mods = self
        if mods & Mods.NIGHTCORE:
            mods |= Mods.DOUBLETIME

        return mods & Mods.DIFFICULTY_CHANGING

    @classmethod
    def convert_str(cls, mods: str) -> Mods:
        _mods = cls.NOMOD  # in case theres none to match

        if not mods or mods == "NM":
            return _mods

        split_mods = [mods[char : char + 2].upper() for char in range(0, len(mods), 2)]

        for mod in split_mods:
            if mod not in mods_str:
                continue

            _mods |= mods_str[mod]

        return _mods


str_mods = {
    Mods.NOFAIL: "NF",
    Mods.EASY: "EZ",
    Mods.TOUCHSCREEN: "TD",
    Mods.HIDDEN: "HD",
    Mods.HARDROCK: "HR",
    Mods.SUDDENDEATH: "SD",
    Mods.DOUBLETIME: "DT",
    Mods.RELAX: "RX",
    Mods.HALFTIME: "HT",
    Mods.NIGHTCORE: "NC",
    Mods.FLASHLIGHT: "FL",
    Mods.AUTOPLAY: "AU",
    Mods.SPUNOUT: "SO",
    Mods.AUTOPILOT: "AP",
    Mods.PERFECT: "PF",
    Mods.FADEIN: "FI",
    Mods.RANDOM: "RN",
    Mods.CINEMA: "CN",
    Mods.TARGET: "TP",
    Mods.SCOREV2: "V2",
    Mods.MIRROR: "MR",
}

mods_str = {mod_str: mod for mod, mod_str in str_mods.items()}

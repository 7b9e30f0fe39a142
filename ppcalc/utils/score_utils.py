from __future__ import annotations

from ppcalc.constants.mode import Mode


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def std_total_hits(*, n300: int, n100: int, n50: int, nmiss: int) -> int:
    return n50 + n100 + n300 + nmiss


def catch_total_hits(
    *,
    n300: int,
    n100: int,
    n50: int,
    nkatu: int,
    nmiss: int,
) -> int:
    return n50 + n100 + n300 + nmiss + nkatu


def std_accuracy(*, n300: int, n100: int, n50: int, nmiss: int) -> float:
    total = std_total_hits(n300=n300, n100=n100, n50=n50, nmiss=nmiss)

    if total == 0:
        return 0.0

    return _clamp((n50 * 50 + n100 * 100 + n300 * 300) / (total * 300), 0.0, 1.0)


def catch_accuracy(
    *,
    n300: int,
    n100: int,
    n50: int,
    nkatu: int,
    nmiss: int,
) -> float:
    total = catch_total_hits(n300=n300, n100=n100, n50=n50, nkatu=nkatu, nmiss=nmiss)

    if total == 0:
        return 0.0

    return _clamp((n50 + n100 + n300) / total, 0.0, 1.0)


def calculate_accuracy(
    *,
    n300: int,
    n100: int,
    n50: int,
    ngeki: int,
    nkatu: int,
    nmiss: int,
    mode: Mode,
) -> float:
    """Calculates the accuracy of a score as a percentage, as displayed
    to players."""

    if mode == Mode.STD:
        return 100.0 * std_accuracy(n300=n300, n100=n100, n50=n50, nmiss=nmiss)

    elif mode == Mode.CATCH:
        return 100.0 * catch_accuracy(
            n300=n300,
            n100=n100,
            n50=n50,
            nkatu=nkatu,
            nmiss=nmiss,
        )

    else:
        raise NotImplementedError(f"Unknown mode: {mode!r}")

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PerformanceResult:
    total: float

    # only the osu!std calculator splits its value into components
    aim: Optional[float] = None
    speed: Optional[float] = None
    accuracy: Optional[float] = None

    def to_dict(self) -> dict[str, Optional[float]]:
        return {
            "pp": self.total,
            "aim": self.aim,
            "speed": self.speed,
            "accuracy": self.accuracy,
        }

"""Session configuration passed explicitly into the game core."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Optional

from .base import Coord
from .errors import InvalidDimensions, OutOfBounds


class Difficulty(Enum):
    """Preset grid sizes offered on the settings screen, as ``(rows, cols)``."""

    EASY = (8, 10)
    NORMAL = (10, 14)
    HARD = (12, 18)

    @property
    def rows(self) -> int:
        return self.value[0]

    @property
    def cols(self) -> int:
        return self.value[1]

    @classmethod
    def closest(cls, rows: int, cols: int) -> "Difficulty":
        if cols <= 11 and rows <= 8:
            return cls.EASY
        if cols >= 18 and rows >= 12:
            return cls.HARD
        return cls.NORMAL


@dataclass(frozen=True)
class GuidanceTiming:
    """Delays for the guidance pulse sequence, in seconds."""

    charge_duration: float = 1.5
    pulse_base_delay: float = 0.15
    pulse_growth: float = 1.15
    settle_delay: float = 0.12
    pulse_intensity: float = 1.0

    def __post_init__(self) -> None:
        for name in ("charge_duration", "pulse_base_delay", "settle_delay"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        if self.pulse_growth < 1.0:
            raise ValueError("pulse_growth must be at least 1.0")
        if not 0.0 <= self.pulse_intensity <= 1.0:
            raise ValueError("pulse_intensity must be within [0, 1]")

    def pulse_delay(self, index: int) -> float:
        """Wait before pulse ``index``; grows geometrically from the base delay."""

        return self.pulse_base_delay * self.pulse_growth ** index


@dataclass(frozen=True)
class SessionConfig:
    rows: int
    cols: int
    seed: Optional[int] = None
    min_goal_distance: Optional[int] = None
    start: Coord = (0, 0)
    timing: GuidanceTiming = field(default_factory=GuidanceTiming)

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise InvalidDimensions(self.rows, self.cols)
        object.__setattr__(self, "start", tuple(self.start))
        row, col = self.start
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise OutOfBounds(self.start, (self.rows, self.cols))
        if self.min_goal_distance is not None and self.min_goal_distance < 0:
            raise ValueError("min_goal_distance must be non-negative")

    @classmethod
    def for_difficulty(
        cls,
        difficulty: Difficulty,
        *,
        seed: Optional[int] = None,
        **overrides,
    ) -> "SessionConfig":
        return cls(rows=difficulty.rows, cols=difficulty.cols, seed=seed, **overrides)

    @property
    def goal_distance(self) -> int:
        if self.min_goal_distance is not None:
            return self.min_goal_distance
        return (self.rows + self.cols) // 2

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["start"] = list(self.start)
        payload["min_goal_distance"] = self.goal_distance
        return payload


__all__ = ["Difficulty", "GuidanceTiming", "SessionConfig"]

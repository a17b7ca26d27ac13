from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    points_per_line: int = 100
    lines_per_level: int = 10
    speedup_factor: float = 0.9

    def __post_init__(self) -> None:
        if self.lines_per_level <= 0:
            raise ValueError("lines_per_level must be positive")
        if not 0.0 < self.speedup_factor <= 1.0:
            raise ValueError("speedup_factor must be in (0, 1]")

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        return lines * self.points_per_line

    def level_threshold(self, level: int) -> int:
        """Total lines needed to leave ``level``."""
        return (level + 1) * self.lines_per_level

    def next_drop_interval(self, interval_ms: float) -> float:
        return interval_ms * self.speedup_factor

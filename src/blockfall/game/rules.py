from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_clear_scores: tuple[int, int, int, int] = (100, 300, 500, 800)
    hard_drop_points_per_row: int = 2
    lines_per_level: int = 10
    base_interval_ms: int = 1000
    interval_step_ms: int = 100
    min_interval_ms: int = 100

    def score_for_lines(self, lines: int, level: int = 1) -> int:
        """Points for clearing ``lines`` rows in one lock, scaled by level."""
        if 1 <= lines <= len(self.line_clear_scores):
            return self.line_clear_scores[lines - 1] * level
        return 0

    def score_for_hard_drop(self, rows: int) -> int:
        return max(rows, 0) * self.hard_drop_points_per_row

    def level_for_lines(self, lines: int) -> int:
        return lines // self.lines_per_level + 1

    def drop_interval_ms(self, level: int) -> int:
        level = max(level, 1)
        interval = self.base_interval_ms - (level - 1) * self.interval_step_ms
        return max(self.min_interval_ms, interval)

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class VisitStats:
    """来館実績"""

    total_visits: int = 0
    last_visit: date | None = None

    def __post_init__(self) -> None:
        if self.total_visits < 0:
            raise ValueError("Total visits cannot be negative")

    def add_visit(self, visit_date: date) -> VisitStats:
        last_visit = visit_date
        if self.last_visit is not None and self.last_visit > visit_date:
            last_visit = self.last_visit
        return VisitStats(total_visits=self.total_visits + 1, last_visit=last_visit)

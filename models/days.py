# FILE: models/days.py
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from core.command import Command


# -----------------------------
# Resolved Dates (Resolver → Validator)
# -----------------------------
@dataclass(frozen=True)
class ResolvedDates:
    dates: Tuple[date, ...]

    @property
    def count(self) -> int:
        return len(self.dates)

    @property
    def first(self) -> date:
        return self.dates[0]

    @property
    def second(self) -> Optional[date]:
        return self.dates[1] if len(self.dates) > 1 else None

    def is_ordered(self) -> bool:
        return all(a <= b for a, b in zip(self.dates, self.dates[1:]))

    def isoformat(self) -> List[str]:
        return [d.isoformat() for d in self.dates]


# -----------------------------
# Days Request (API → Orchestrator)
# -----------------------------
class DaysRequest(BaseModel):
    command: str = Field(..., description="One of until, since, from")
    args: List[str] = Field(
        default_factory=list,
        description="Raw date arguments, e.g. ['feb', '23'] or ['jun 1 to aug 1']",
    )


# -----------------------------
# Days Response (Orchestrator → API / CLI)
# -----------------------------
class DaysResponse(BaseModel):
    command: Command
    days: int
    dates: List[str] = Field(default_factory=list, description="Resolved dates, ISO YYYY-MM-DD")
    reference_date: str = Field(..., description="The 'today' used for this answer")
    shape: Optional[str] = Field(None, description="How the arguments were read")

"""Sequence schemas, with the schedule as a tagged variant."""

from datetime import date, datetime
from typing import Annotated, Literal
from uuid import UUID

from pydantic import BaseModel, Field, TypeAdapter

from newsdesk.constants.choices import WEEKDAYS, Weekday

DayOfMonth = Annotated[int, Field(ge=1, le=31)]


class WeeklySchedule(BaseModel):
    """Runs on the listed weekdays."""

    frequency: Literal["weekly"] = "weekly"
    days: list[Weekday] = Field(default_factory=list)

    def toggle(self, day: str | int) -> "WeeklySchedule":
        """Add ``day`` if missing, remove it otherwise."""
        if day not in WEEKDAYS:
            raise ValueError(f"{day!r} is not a weekday name")
        if day in self.days:
            return self.model_copy(update={"days": [d for d in self.days if d != day]})
        return self.model_copy(update={"days": [*self.days, day]})


class MonthlySchedule(BaseModel):
    """Runs on the listed days of the month."""

    frequency: Literal["monthly"] = "monthly"
    days: list[DayOfMonth] = Field(default_factory=list)

    def toggle(self, day: str | int) -> "MonthlySchedule":
        """Add ``day`` if missing, remove it otherwise."""
        if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= 31:
            raise ValueError(f"{day!r} is not a day of the month")
        if day in self.days:
            return self.model_copy(update={"days": [d for d in self.days if d != day]})
        return self.model_copy(update={"days": [*self.days, day]})


Schedule = Annotated[WeeklySchedule | MonthlySchedule, Field(discriminator="frequency")]
schedule_adapter: TypeAdapter[WeeklySchedule | MonthlySchedule] = TypeAdapter(Schedule)


class SequenceForm(BaseModel):
    """Fields of the sequence modal."""

    name: str = Field(default="", max_length=200)
    schedule: Schedule = Field(default_factory=WeeklySchedule)
    sets: list[UUID] = Field(default_factory=list)
    is_active: bool = False


class SequenceResponse(BaseModel):
    id: UUID
    user_id: UUID
    name: str
    schedule: Schedule
    sets: list[UUID]
    is_active: bool
    created_at: datetime
    updated_at: datetime
    next_run: date | None = Field(
        default=None, description="Display hint only; nothing runs the sequence"
    )
    upcoming: str = ""


class SequenceListResponse(BaseModel):
    sequences: list[SequenceResponse]
    total: int


class SequenceStats(BaseModel):
    total_sets: int
    total_sequences: int
    active_sequences: int
    upcoming_sequences: int


class DayToggleRequest(BaseModel):
    schedule: Schedule
    day: str | int


class DayToggleResponse(BaseModel):
    schedule: Schedule

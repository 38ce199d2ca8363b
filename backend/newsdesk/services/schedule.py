"""Next-run display hints for sequences. Nothing here runs anything."""

from datetime import date, timedelta

from newsdesk.constants.choices import WEEKDAYS
from newsdesk.schemas.sequence import MonthlySchedule, WeeklySchedule


def _day_in_month(year: int, month: int, day: int) -> date:
    # Days past the end of the month roll into the next one (April 31 -> May 1)
    return date(year, month, 1) + timedelta(days=day - 1)


def next_monthly_run(days: list[int], today: date) -> date | None:
    """Smallest selected day after today, else the smallest one next month."""
    if not days:
        return None
    later = [d for d in days if d > today.day]
    if later:
        return _day_in_month(today.year, today.month, min(later))
    year, month = (today.year + 1, 1) if today.month == 12 else (today.year, today.month + 1)
    return _day_in_month(year, month, min(days))


def next_weekly_run(days: list[str], today: date) -> date | None:
    """First selected weekday strictly after today."""
    if not days:
        return None
    for offset in range(1, 8):
        candidate = today + timedelta(days=offset)
        if WEEKDAYS[candidate.weekday()] in days:
            return candidate
    return None


def next_run(schedule: WeeklySchedule | MonthlySchedule, today: date) -> date | None:
    if isinstance(schedule, MonthlySchedule):
        return next_monthly_run(schedule.days, today)
    return next_weekly_run(schedule.days, today)


def describe_upcoming(
    schedule: WeeklySchedule | MonthlySchedule, today: date, is_active: bool = True
) -> str:
    """Text for the "Next Run" column. Inactive sequences show a dash."""
    if not is_active:
        return "-"
    if isinstance(schedule, WeeklySchedule):
        return ", ".join(schedule.days)
    upcoming = next_monthly_run(schedule.days, today)
    return upcoming.isoformat() if upcoming else "No days selected"

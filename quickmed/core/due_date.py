from datetime import date, timedelta
from typing import Optional

from quickmed.schemas.response_schema import DueDateResult
from quickmed.utils.constants import (
    GESTATION_DAYS, MAX_DISPLAY_WEEKS, SECOND_TRIMESTER_WEEK, THIRD_TRIMESTER_WEEK
)

def trimester_for_week(weeks_pregnant: int) -> str:
    if weeks_pregnant >= THIRD_TRIMESTER_WEEK:
        return "Third Trimester"
    if weeks_pregnant >= SECOND_TRIMESTER_WEEK:
        return "Second Trimester"
    return "First Trimester"

def format_display_date(value: date) -> str:
    # Mon Oct 07 2024
    return value.strftime("%a %b %d %Y")

def calculate_due_date(lmp: date, today: Optional[date] = None) -> DueDateResult:
    today = today or date.today()
    due = lmp + timedelta(days=GESTATION_DAYS)

    elapsed_days = abs((today - lmp).days)
    weeks_pregnant = elapsed_days // 7

    return DueDateResult(
        due_date=due,
        due_date_display=format_display_date(due),
        weeks_pregnant=min(weeks_pregnant, MAX_DISPLAY_WEEKS),
        trimester=trimester_for_week(weeks_pregnant),
        days_left=max((due - today).days, 0)
    )

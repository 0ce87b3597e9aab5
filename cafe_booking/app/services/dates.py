import calendar
from datetime import date, timedelta

SATURDAY = 5
SUNDAY = 6


def add_months(day: date, months: int) -> date:
    """Shift ``day`` by whole months, clamping to the end of shorter months."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def booking_window(today: date, months: int = 3) -> tuple[date, date]:
    """Return the inclusive (min, max) range of bookable dates."""
    return today + timedelta(days=1), add_months(today, months)


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def parse_date(value: str) -> date | None:
    """Parse an ISO ``YYYY-MM-DD`` value as a date input yields it."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


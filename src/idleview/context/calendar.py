"""Season and holiday windows derived from the local calendar date."""

from __future__ import annotations

from datetime import date, datetime

from idleview.context.models import SeasonName

CHRISTMAS = "christmas"
NEW_YEAR = "new year"
HALLOWEEN = "halloween"
EASTER = "easter"


def season(now: date | datetime) -> SeasonName:
    """Return the (northern hemisphere) season for the calendar month of *now*."""
    month = now.month
    if month in (3, 4, 5):
        return "spring"
    if month in (6, 7, 8):
        return "summer"
    if month in (9, 10, 11):
        return "autumn"
    return "winter"


def _in_new_year(month: int, day: int) -> bool:
    return (month == 12 and day >= 27) or (month == 1 and day <= 5)


def holiday(now: date | datetime) -> str | None:
    """Return the holiday label for *now*, or None outside every window.

    Windows are checked in order; the first match wins:

    • Dec 1-26 → christmas
    • Dec 27 - Jan 5 → new year
    • Oct 25-31 → halloween
    • Mar 20 - Apr 20 → easter
    """
    month, day = now.month, now.day
    if month == 12 and day <= 26:
        return CHRISTMAS
    if _in_new_year(month, day):
        return NEW_YEAR
    if month == 10 and day >= 25:
        return HALLOWEEN
    if (month == 3 and day >= 20) or (month == 4 and day <= 20):
        return EASTER
    return None


def festive(now: date | datetime) -> str | None:
    """Return the festive photo theme for *now*, or None.

    Narrower than :func:`holiday`: Christmas only covers Dec 20-26 and
    Easter is never festive.
    """
    month, day = now.month, now.day
    if month == 12 and 20 <= day <= 26:
        return CHRISTMAS
    if _in_new_year(month, day):
        return NEW_YEAR
    if month == 10 and day >= 25:
        return HALLOWEEN
    return None

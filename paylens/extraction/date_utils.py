"""Date helpers for payment-document parsing."""

from datetime import date

MONTHS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

MONTH_NAME_PATTERN = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?(?![a-z])"
)

# Receipts older than this are almost certainly OCR misreads of the year.
MIN_YEAR = 1990
MAX_YEAR = 2100


def month_from_name(name: str) -> int | None:
    """Map "Aug", "august", "Sept." to a month number."""
    return MONTHS.get(name.strip(". ").lower()[:3])


def safe_date(year: int, month: int, day: int) -> date | None:
    """Build a calendar date, returning None for impossible or implausible values."""
    if not MIN_YEAR <= year <= MAX_YEAR:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None

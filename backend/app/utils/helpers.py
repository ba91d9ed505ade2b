import re
from datetime import datetime, timezone

YEAR_PATTERN = re.compile(r"^\d{4}$")

MONTH_ORDER = {
    "january": 1, "february": 2, "march": 3, "april": 4,
    "may": 5, "june": 6, "july": 7, "august": 8,
    "september": 9, "october": 10, "november": 11, "december": 12,
}


def utcnow() -> datetime:
    # DB의 server_default(func.now())와 같은 naive UTC로 맞춘다.
    return datetime.now(timezone.utc).replace(tzinfo=None)


def is_valid_year(value: str) -> bool:
    return bool(YEAR_PATTERN.match(str(value or "").strip()))


def month_rank(value) -> int:
    return MONTH_ORDER.get(str(value or "").strip().lower(), 13)

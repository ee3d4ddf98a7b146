from datetime import UTC, datetime

DATE_FORMAT = "%Y-%m-%d"


def now() -> datetime:
    return datetime.now(UTC)


def today() -> str:
    """Current UTC date as YYYY-MM-DD."""
    return now().strftime(DATE_FORMAT)

from datetime import date, datetime, timezone


def now_utc():
    return datetime.now(timezone.utc)


def today() -> date:
    return date.today()


def to_datetime(value):
    if value is None:
        return None
    return datetime.combine(value, datetime.min.time())


def to_date(value):
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    return value

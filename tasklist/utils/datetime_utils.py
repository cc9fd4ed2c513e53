from datetime import datetime, timezone


def as_utc(value: datetime | None) -> datetime | None:
    """
    Normalise to an aware UTC datetime. Naive values are taken to be UTC already,
    which is how MongoDB stores them.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

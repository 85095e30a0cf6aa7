from datetime import datetime, timezone


def utc_isoformat(value: datetime) -> str:
    """Render a stored (naive UTC) timestamp as ISO 8601 with a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")

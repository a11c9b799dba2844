# tracker/utils.py
from datetime import datetime, timezone

from .schemas import Parcel


def now_rfc3339(now: datetime | None = None) -> str:
    if now is None:
        now = datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def format_parcel(p: Parcel) -> str:
    return (f"#{p.number} client={p.client} status={p.status.value} "
            f"address={p.address!r} created_at={p.created_at}")

import logging
from datetime import datetime, timezone, date
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import tzlocal

logger = logging.getLogger(__name__)


def local_tz() -> ZoneInfo:
    """ The system timezone, UTC if it can't be resolved """
    try:
        return ZoneInfo(tzlocal.get_localzone_name())
    except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
        logger.warning(f"⚠️ Could not resolve local timezone ({e}), falling back to UTC.")
        return ZoneInfo("UTC")


def today_iso(tz=None) -> str:
    """ Today's calendar date as YYYY-MM-DD in the given (default local) timezone """
    return datetime.now(tz or local_tz()).date().isoformat()


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def utc_iso_ms(dt: datetime) -> str:
    """ ISO-8601 in UTC with milliseconds and a 'Z', e.g. 2024-06-01T08:30:00.123Z """
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def parse_iso_date(raw: str) -> date:
    """ Strict YYYY-MM-DD parse, raises ValueError """
    return datetime.strptime(raw.strip(), "%Y-%m-%d").date()


def is_iso_date(raw: str) -> bool:
    try:
        parse_iso_date(raw)
    except (ValueError, AttributeError):
        return False
    return True


def date_sort_key(raw) -> str:
    """ Sort key for stored record dates. ISO dates order lexicographically; junk sorts first. """
    return raw if isinstance(raw, str) else ""

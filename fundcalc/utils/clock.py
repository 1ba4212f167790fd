"""Wall-clock access for the *_today() convenience wrappers."""
from datetime import date, datetime
from zoneinfo import ZoneInfo

from fundcalc.config import get_settings


def today() -> date:
    """Current date in the configured TIMEZONE."""
    return datetime.now(tz=ZoneInfo(get_settings().TIMEZONE)).date()

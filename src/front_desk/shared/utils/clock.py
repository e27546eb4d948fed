import os
from datetime import date, datetime
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "Asia/Kolkata"


def hotel_today() -> date:
    """ホテル所在地のタイムゾーンでの「今日」"""
    tz = ZoneInfo(os.getenv("HOTEL_TIMEZONE", DEFAULT_TIMEZONE))
    return datetime.now(tz).date()

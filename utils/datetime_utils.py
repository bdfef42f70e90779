from datetime import date, datetime, timedelta
from typing import List, Optional

DATE_KEY_FORMAT = "%Y-%m-%d"

def now_local(tz=None) -> datetime:
    """Текущее время в часовом поясе pytz или в локальном времени системы"""
    return datetime.now(tz) if tz is not None else datetime.now()

def date_key(value) -> str:
    """Канонический ключ дня YYYY-MM-DD"""
    return value.strftime(DATE_KEY_FORMAT)

def parse_date_key(key: str) -> date:
    return datetime.strptime(key, DATE_KEY_FORMAT).date()

def is_date_key(key: Optional[str]) -> bool:
    if not isinstance(key, str):
        return False
    try:
        parse_date_key(key)
    except ValueError:
        return False
    return True

def shift_key(key: str, days: int) -> str:
    """Сдвиг ключа дня на N календарных дней"""
    return date_key(parse_date_key(key) + timedelta(days=days))

def week_keys(key: str) -> List[str]:
    """Ключи дней недели (с воскресенья) для указанного дня"""
    day = parse_date_key(key)
    start = day - timedelta(days=(day.weekday() + 1) % 7)
    return [date_key(start + timedelta(days=i)) for i in range(7)]

def month_keys(year: int, month: int) -> List[str]:
    first = date(year, month, 1)
    next_month = date(year + month // 12, month % 12 + 1, 1)
    return [date_key(first + timedelta(days=i)) for i in range((next_month - first).days)]

def format_time(dt: datetime) -> str:
    """Время записи в виде '09:05 PM'"""
    return dt.strftime("%I:%M %p")

def format_date(key: str) -> str:
    """Короткая подпись дня: 'Mon, Jan 5'"""
    day = parse_date_key(key)
    return f"{day.strftime('%a, %b')} {day.day}"

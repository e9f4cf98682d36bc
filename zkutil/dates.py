"""Date providers and parsing of human-written dates."""

from __future__ import annotations

import calendar
import re
from datetime import datetime, timedelta, timezone
from typing import Protocol


class DateProvider(Protocol):
    """Something returning a date."""

    def date(self) -> datetime: ...


def _now() -> datetime:
    return datetime.now().astimezone()


class NowProvider:
    """Returns the current date on every call."""

    def date(self) -> datetime:
        return _now()


class FrozenProvider:
    """Always returns the same date, the current one by default."""

    def __init__(self, date: datetime | None = None) -> None:
        self._date = date if date is not None else _now()

    def date(self) -> datetime:
        return self._date


_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{1,2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)

_LOCAL_LAYOUTS = tuple(
    re.compile(pattern)
    for pattern in (
        r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
        r"T(?P<hour>\d{1,2}):(?P<minute>\d{2}):(?P<second>\d{2})",
        r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})T(?P<hour>\d{1,2}):(?P<minute>\d{2})",
        r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})",
        r"(?P<year>\d{4})-(?P<month>\d{2})",
        r"(?P<year>\d{4})",
        r"(?P<hour>\d{1,2}):(?P<minute>\d{2})",
    )
)

_NUMBER_WORDS = {
    "a": 1, "an": 1, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10, "eleven": 11, "twelve": 12,
}

_UNITS = {
    "second": "seconds", "sec": "seconds", "minute": "minutes", "min": "minutes",
    "hour": "hours", "day": "days", "week": "weeks", "month": "months", "year": "years",
}

_WEEKDAYS = {name.lower(): index for index, name in enumerate(calendar.day_name)}

_DAY_OFFSETS = {"today": 0, "yesterday": -1, "tomorrow": 1}

_DIRECTIONS = {"last": -1, "past": -1, "previous": -1, "next": 1}


def _localize(naive: datetime) -> datetime:
    try:
        return naive.astimezone()
    except (OverflowError, OSError, ValueError):
        return naive.replace(tzinfo=_now().tzinfo)


def _parse_rfc3339(text: str) -> datetime | None:
    match = _RFC3339.fullmatch(text)
    if match is None:
        return None
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        tz = timezone(sign * timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6])))
    micro = int((fraction or "").ljust(6, "0")[:6])
    try:
        return datetime(
            int(year), int(month), int(day), int(hour), int(minute), int(second), micro, tzinfo=tz
        )
    except ValueError:
        return None


def _parse_local(text: str) -> datetime | None:
    for pattern in _LOCAL_LAYOUTS:
        match = pattern.fullmatch(text)
        if match is None:
            continue
        # Layouts without a date start on the first day of year 1.
        fields = {"year": 1, "month": 1, "day": 1}
        fields.update((key, int(value)) for key, value in match.groupdict().items())
        try:
            return _localize(datetime(**fields))
        except ValueError:
            continue
    return None


def _add_months(moment: datetime, months: int) -> datetime:
    year, month = divmod(moment.year * 12 + moment.month - 1 + months, 12)
    day = min(moment.day, calendar.monthrange(year, month + 1)[1])
    return moment.replace(year=year, month=month + 1, day=day)


def _start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _amount(word: str) -> int | None:
    return int(word) if word.isdigit() else _NUMBER_WORDS.get(word)


def _unit(word: str) -> str | None:
    if word in _UNITS:
        return _UNITS[word]
    if word.endswith("s"):
        return _UNITS.get(word[:-1])
    return None


def _shift(now: datetime, amount_word: str, unit_word: str, sign: int) -> datetime | None:
    amount = _amount(amount_word)
    unit = _unit(unit_word)
    if amount is None or unit is None:
        return None
    amount *= sign
    if unit == "months":
        return _add_months(now, amount)
    if unit == "years":
        return _add_months(now, amount * 12)
    return now + timedelta(**{unit: amount})


def _weekday(now: datetime, weekday: int, direction: int) -> datetime:
    if direction < 0:
        days = -((now.weekday() - weekday) % 7 or 7)
    else:
        days = (weekday - now.weekday()) % 7 or 7
    return _start_of_day(now) + timedelta(days=days)


def _parse_natural(text: str, now: datetime) -> datetime:
    words = text.lower().split()
    result: datetime | None = None
    match words:
        case ["now"]:
            result = now
        case [word] if word in _DAY_OFFSETS:
            result = _start_of_day(now) + timedelta(days=_DAY_OFFSETS[word])
        case [word] if word in _WEEKDAYS:
            result = _weekday(now, _WEEKDAYS[word], -1)
        case [amount, unit, "ago"]:
            result = _shift(now, amount, unit, -1)
        case ["in", amount, unit]:
            result = _shift(now, amount, unit, 1)
        case [amount, unit, "from", "now"]:
            result = _shift(now, amount, unit, 1)
        case [direction, word] if direction in _DIRECTIONS:
            sign = _DIRECTIONS[direction]
            if word in _WEEKDAYS:
                result = _weekday(now, _WEEKDAYS[word], sign)
            else:
                result = _shift(now, "1", word, sign)
    if result is None:
        raise ValueError(f"failed to parse date: {text!r}")
    return result


def time_from_natural(date: str) -> datetime:
    """Parse a date written by a human, e.g. ``2021-03-04`` or ``2 days ago``.

    An empty string gives the current date. Relative words look into the past.
    """
    if date == "":
        return _now()
    parsed = _parse_rfc3339(date) or _parse_local(date)
    if parsed is not None:
        return parsed
    return _parse_natural(date, _now())
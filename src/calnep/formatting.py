"""
calnep.formatting
-----------------
Token-substitution rendering for BS and AD dates, in English or Nepali.

Tokens are matched longest first in a single left-to-right pass, so text that
has already been substituted (e.g. a month name containing "M") is never
scanned again. Anything that is not a token is copied through unchanged;
text inside square brackets is copied without the brackets.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Dict, Sequence, Union

from calnep.core.errors import InvalidInputError, InvariantViolationError

LOCALES = ("en", "ne")
CALENDARS = ("BS", "AD")

FORMAT_TOKENS: Dict[str, str] = {
    "YYYY": "Four-digit year",
    "YY": "Two-digit year",
    "MMMM": "Full month name",
    "MMM": "Short month name",
    "MM": "Month number, zero padded (01-12)",
    "M": "Month number (1-12)",
    "DD": "Day of month, zero padded (01-32)",
    "D": "Day of month (1-32)",
    "dddd": "Full weekday name (AD only)",
    "ddd": "Short weekday name (AD only)",
}

_AD_ONLY = frozenset({"dddd", "ddd"})

_TOKEN_RE = re.compile(
    r"\[([^\]]*)\]|" + "|".join(sorted(FORMAT_TOKENS, key=len, reverse=True))
)

# ============================================================
# Glyph and name tables
# ============================================================

NEPALI_DIGITS = ("०", "१", "२", "३", "४", "५", "६", "७", "८", "९")

_TO_DEVANAGARI = str.maketrans("0123456789", "".join(NEPALI_DIGITS))
_FROM_DEVANAGARI = str.maketrans("".join(NEPALI_DIGITS), "0123456789")

BS_MONTHS: Dict[str, Dict[str, Sequence[str]]] = {
    "en": {
        "long": ("Baishakh", "Jestha", "Asar", "Shrawan", "Bhadra", "Asoj",
                 "Kartik", "Mangsir", "Poush", "Magh", "Falgun", "Chaitra"),
        "short": ("Bai", "Jes", "Asa", "Shr", "Bha", "Aso",
                  "Kar", "Man", "Pou", "Mag", "Fal", "Cha"),
    },
    "ne": {
        "long": ("बैशाख", "जेष्ठ", "आषाढ", "श्रावण", "भाद्र", "आश्विन",
                 "कार्तिक", "मंसिर", "पौष", "माघ", "फाल्गुन", "चैत्र"),
        "short": ("बै", "जे", "आ", "श्रा", "भा", "आश्",
                  "का", "मं", "पौ", "मा", "फा", "चै"),
    },
}

AD_MONTHS: Dict[str, Dict[str, Sequence[str]]] = {
    "en": {
        "long": ("January", "February", "March", "April", "May", "June",
                 "July", "August", "September", "October", "November", "December"),
        "short": ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                  "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    },
    "ne": {
        "long": ("जनवरी", "फेब्रुअरी", "मार्च", "अप्रिल", "मे", "जुन",
                 "जुलाई", "अगस्ट", "सेप्टेम्बर", "अक्टोबर", "नोभेम्बर", "डिसेम्बर"),
        "short": ("जन", "फेब", "मार्च", "अप्रि", "मे", "जुन",
                  "जुला", "अग", "सेप", "अक्टो", "नोभे", "डिसे"),
    },
}

# 0=Sunday
WEEKDAYS: Dict[str, Dict[str, Sequence[str]]] = {
    "en": {
        "long": ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
        "short": ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
    },
    "ne": {
        "long": ("आइतबार", "सोमबार", "मंगलबार", "बुधबार", "बिहिबार", "शुक्रबार", "शनिबार"),
        "short": ("आइत", "सोम", "मंगल", "बुध", "बिहि", "शुक्र", "शनि"),
    },
}

# ============================================================
# Helpers
# ============================================================

def check_locale(locale: str) -> str:
    if locale not in LOCALES:
        raise InvalidInputError(f"Unknown locale '{locale}'. Available: {list(LOCALES)}")
    return locale

def check_calendar(calendar: str) -> str:
    if calendar not in CALENDARS:
        raise InvalidInputError(f"Unknown calendar '{calendar}'. Available: {list(CALENDARS)}")
    return calendar

def to_devanagari_digits(text: str) -> str:
    return text.translate(_TO_DEVANAGARI)

def from_devanagari_digits(text: str) -> str:
    return text.translate(_FROM_DEVANAGARI)

def format_number(num: int, locale: str = "en") -> str:
    """Render an integer with English or Devanagari digits."""
    s = str(num)
    return to_devanagari_digits(s) if check_locale(locale) == "ne" else s

def _lookup(names: Sequence[str], index: int, what: str) -> str:
    if not (0 <= index < len(names)):
        raise InvariantViolationError(f"{what} index {index} outside [0, {len(names) - 1}]")
    return names[index]

def bs_month_name(month_index: int, locale: str = "en", *, short: bool = False) -> str:
    return _lookup(BS_MONTHS[check_locale(locale)]["short" if short else "long"], month_index, "BS month")

def ad_month_name(month_index: int, locale: str = "en", *, short: bool = False) -> str:
    """month_index is 0-based (0=January)."""
    return _lookup(AD_MONTHS[check_locale(locale)]["short" if short else "long"], month_index, "AD month")

def weekday_name(weekday: int, locale: str = "en", *, short: bool = False) -> str:
    """weekday uses 0=Sunday .. 6=Saturday."""
    return _lookup(WEEKDAYS[check_locale(locale)]["short" if short else "long"], weekday, "Weekday")

# ============================================================
# Renderer
# ============================================================

def render(
    value: Union[date, object],
    fmt: str = "YYYY-MM-DD",
    locale: str = "en",
    calendar: str = "BS",
) -> str:
    """
    Render ``value`` through ``fmt``.

    calendar="BS": ``value`` exposes ``year``, ``month_index`` (0-based) and
    ``day`` (a NepaliDate or a YMD tuple).
    calendar="AD": ``value`` is a ``datetime.date`` (or ``datetime``).
    """
    check_locale(locale)
    if check_calendar(calendar) == "BS":
        year, month_index, day = value.year, value.month_index, value.day
        wd = None
        month_names = BS_MONTHS[locale]
    else:
        if not isinstance(value, date):
            raise InvalidInputError(f"AD rendering needs a date, got {type(value).__name__}")
        year, month_index, day = value.year, value.month - 1, value.day
        wd = (value.weekday() + 1) % 7
        month_names = AD_MONTHS[locale]

    def sub(m: "re.Match[str]") -> str:
        if m.group(1) is not None:
            return m.group(1)
        tok = m.group(0)
        if tok in _AD_ONLY and wd is None:
            return tok
        if tok == "YYYY":
            return f"{year:04d}"
        if tok == "YY":
            return f"{year % 100:02d}"
        if tok == "MMMM":
            return _lookup(month_names["long"], month_index, "Month")
        if tok == "MMM":
            return _lookup(month_names["short"], month_index, "Month")
        if tok == "MM":
            return f"{month_index + 1:02d}"
        if tok == "M":
            return str(month_index + 1)
        if tok == "DD":
            return f"{day:02d}"
        if tok == "D":
            return str(day)
        if tok == "dddd":
            return weekday_name(wd, locale)
        if tok == "ddd":
            return weekday_name(wd, locale, short=True)
        raise InvariantViolationError(f"Unhandled format token {tok!r}")

    out = _TOKEN_RE.sub(sub, fmt)
    return to_devanagari_digits(out) if locale == "ne" else out

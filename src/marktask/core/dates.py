"""Date argument resolution - absolute and relative dates."""

import logging
import re
from datetime import date, timedelta

from marktask.ports.clock import Clock

logger = logging.getLogger(__name__)

ABSOLUTE_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
RELATIVE_DATE_RE = re.compile(r"([+-])(\d+)([a-z])", re.ASCII)

# Months and years are approximations, not calendar arithmetic.
UNIT_DAYS = {
    "d": 1,
    "w": 7,
    "m": 30,
    "y": 365,
}


def parse_absolute_date(text: str) -> date | None:
    """Parse a strict YYYY-MM-DD date. Invalid month/day yields None."""
    match = ABSOLUTE_DATE_RE.fullmatch(text)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        logger.debug(f"Rejected invalid calendar date: {text!r}")
        return None


def parse_relative_date(spec: str, today: date) -> date | None:
    """
    Parse a relative offset such as "+1w" or "-3d" against today.

    Units: d (days), w (weeks), m (30 days), y (365 days).
    """
    match = RELATIVE_DATE_RE.fullmatch(spec)
    if not match:
        return None
    sign, quantity, unit = match.groups()
    if unit not in UNIT_DAYS:
        logger.debug(f"Unknown relative date unit {unit!r} in {spec!r}")
        return None

    try:
        offset = timedelta(days=int(quantity) * UNIT_DAYS[unit])
        return today + offset if sign == "+" else today - offset
    except (OverflowError, ValueError):
        logger.debug(f"Relative date out of range: {spec!r}")
        return None


def resolve_date(text: str | None, clock: Clock | None = None) -> date | None:
    """
    Resolve a date argument to a calendar date.

    Accepts an absolute date (2024-01-31) or a relative offset (+1w, -2d).
    Returns None when the argument is absent or cannot be resolved.
    """
    if text is None:
        return None
    text = text.strip()

    absolute = parse_absolute_date(text)
    if absolute is not None:
        return absolute

    today = clock.today() if clock else date.today()
    return parse_relative_date(text, today)

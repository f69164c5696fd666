"""Day-bar label rendering for the vendor's French day selector."""

import logging
import re
from datetime import date

logger = logging.getLogger(__name__)

# Abbreviated weekdays as the fr-CH locale renders them, Monday first
FRENCH_WEEKDAYS = ["lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim."]

NBSP = "\u00a0"

day_number_regex = re.compile(r"\d+")


def render_french(value: date) -> str:
    """Render a date as the French locale does, e.g. 'ven. 12'."""
    return f"{FRENCH_WEEKDAYS[value.weekday()]}{NBSP}{value.day}"


def normalize_label(rendered: str) -> str:
    """Re-derive the vendor's day-bar label from a locale rendering.

    The vendor shows two-letter weekdays with only the first letter
    capitalised ('Ve 12'), which differs from the locale abbreviation.

    Args:
        rendered: Locale rendering such as 'ven. 12'

    Returns:
        Vendor label; the day part is 'NaN' when no number is present
    """
    text = rendered.replace(NBSP, " ").strip()
    weekday, _, rest = text.partition(" ")
    weekday = re.sub(r"[^\w]|\d|_", "", weekday)[:2]
    weekday = weekday[:1].upper() + weekday[1:].lower()

    match = day_number_regex.search(rest)
    day = str(int(match.group(0))) if match else "NaN"
    return f"{weekday} {day}"


def label_for(value: date) -> str:
    """Label the vendor's day bar shows for a date, e.g. 'Ve 12'."""
    label = normalize_label(render_french(value))
    logger.debug(f"Day label for {value.isoformat()}: {label}")
    return label

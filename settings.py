# settings.py
from __future__ import annotations
import os
import logging
from typing import Optional

from babel import Locale, UnknownLocaleError, default_locale
from babel.numbers import get_territory_currencies

logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────────────────────────────────────
# Tip rules
# ──────────────────────────────────────────────────────────────────────────────

DEFAULT_TIP_PERCENT = 15.0
TIP_PRESETS = (10.0, 15.0, 18.0, 20.0, 25.0)

FALLBACK_LOCALE = "en_US"
FALLBACK_CURRENCY = "USD"

# ──────────────────────────────────────────────────────────────────────────────
# Locale / currency resolution
# ──────────────────────────────────────────────────────────────────────────────

def resolve_locale(value: Optional[str]) -> str:
    """
    Normalize a locale identifier ("en_US", "de-DE", ...).

    Empty values use the process locale (LC_MONETARY and friends);
    unknown identifiers fall back to en_US.
    """
    if not value:
        value = default_locale("LC_MONETARY") or FALLBACK_LOCALE
    try:
        return str(Locale.parse(value, sep="-" if "-" in value else "_"))
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("Unknown locale %r (%s), using %s", value, e, FALLBACK_LOCALE)
        return FALLBACK_LOCALE


def default_currency(locale: str) -> str:
    """Primary currency of the locale's territory, USD when it has none."""
    territory = Locale.parse(locale).territory
    if not territory:
        return FALLBACK_CURRENCY
    currencies = get_territory_currencies(territory)
    return currencies[0] if currencies else FALLBACK_CURRENCY


LOCALE = resolve_locale(os.environ.get("TIPCALC_LOCALE"))
CURRENCY = (os.environ.get("TIPCALC_CURRENCY") or default_currency(LOCALE)).upper()
LOG_LEVEL = os.environ.get("TIPCALC_LOG_LEVEL", "INFO").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    logger.warning("Unknown log level %r, using INFO", LOG_LEVEL)
    LOG_LEVEL = "INFO"

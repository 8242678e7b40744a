# tip_logic.py
from __future__ import annotations
import math
import logging
from dataclasses import dataclass
from typing import Optional

from babel.numbers import format_currency

import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TipInputs:
    """Current values of the three form inputs."""
    bill_amount: float
    tip_percent: float = settings.DEFAULT_TIP_PERCENT
    round_up: bool = False

    @classmethod
    def from_text(cls, bill_text: Optional[str], tip_text: Optional[str], round_up: bool = False) -> "TipInputs":
        return cls(
            bill_amount=parse_decimal(bill_text),
            tip_percent=parse_decimal(tip_text),
            round_up=bool(round_up),
        )


def parse_decimal(text: Optional[str]) -> float:
    """
    Parse free-form text typed into a number field.

    Anything that is not a finite decimal number (empty text, "abc",
    "nan", "inf", "1_000") reads as 0.0. Never raises.
    """
    if text is None:
        return 0.0
    cleaned = text.strip()
    if not cleaned or "_" in cleaned:
        return 0.0
    try:
        value = float(cleaned)
    except ValueError:
        logger.debug("Unparseable number %r, using 0.0", text)
        return 0.0
    if not math.isfinite(value):
        logger.debug("Non-finite number %r, using 0.0", text)
        return 0.0
    return value


def tip_value(amount: float, tip_percent: float = settings.DEFAULT_TIP_PERCENT, round_up: bool = False) -> float:
    """
    Rules:
    - Tip is tip_percent % of the bill amount.
    - Round-up replaces the tip with its ceiling (whole currency units).
    - Negative inputs are not clamped; they pass through arithmetically.
    """
    tip = tip_percent / 100 * amount
    if round_up:
        tip = float(math.ceil(tip))
    # -0.0 (zero bill, negative percent) would format as "-$0.00"
    return float(tip) + 0.0


def format_tip(value: float, locale: Optional[str] = None, currency: Optional[str] = None) -> str:
    return format_currency(
        value,
        currency or settings.CURRENCY,
        locale=locale or settings.LOCALE,
    )


def calculate_tip(
    amount: float,
    tip_percent: float = settings.DEFAULT_TIP_PERCENT,
    round_up: bool = False,
    locale: Optional[str] = None,
    currency: Optional[str] = None,
) -> str:
    """Tip for a bill, formatted as currency for the configured locale."""
    return format_tip(tip_value(amount, tip_percent, round_up), locale=locale, currency=currency)


def tip_for(inputs: TipInputs, locale: Optional[str] = None, currency: Optional[str] = None) -> str:
    return calculate_tip(
        inputs.bill_amount,
        inputs.tip_percent,
        inputs.round_up,
        locale=locale,
        currency=currency,
    )

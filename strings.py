# strings.py
from __future__ import annotations

# UI text, keyed by the identifiers the screen refers to.
STRINGS: dict[str, str] = {
    "calculate_tip": "Calculate Tip",
    "bill_amount": "Bill Amount",
    "how_was_the_service": "Tip Percentage",
    "round_up_tip": "Round up tip?",
    "tip_amount": "Tip Amount: %s",
}


def get_string(key: str, *args) -> str:
    text = STRINGS[key]
    if args:
        return text % args
    return text

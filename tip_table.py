# tip_table.py
from __future__ import annotations
from typing import Optional, Sequence

import pandas as pd

import settings
from tip_logic import format_tip, tip_value

# ──────────────────────────────────────────────────────────────────────────────
# Quick reference table for UI
# ──────────────────────────────────────────────────────────────────────────────

def tip_table_df(
    amount: float,
    presets: Optional[Sequence[float]] = None,
    round_up: bool = False,
    locale: Optional[str] = None,
    currency: Optional[str] = None,
) -> pd.DataFrame:
    """
    One row per preset percentage: tip and bill total, both formatted.
    Same rounding rule as the main result.
    """
    if presets is None:
        presets = settings.TIP_PRESETS

    rows = []
    for pct in presets:
        tip = tip_value(amount, float(pct), round_up)
        rows.append(
            {
                "tip_percent": float(pct),
                "tip": format_tip(tip, locale=locale, currency=currency),
                "total": format_tip(amount + tip, locale=locale, currency=currency),
            }
        )
    return pd.DataFrame(rows, columns=["tip_percent", "tip", "total"])

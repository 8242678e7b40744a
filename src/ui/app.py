# src/ui/app.py
from __future__ import annotations

# ---- Standard libs ----
import sys
import logging
import pathlib

# ---- Third-party ----
import streamlit as st

# ──────────────────────────────────────────────────────────────────────────────
# MUST be the first Streamlit call
st.set_page_config(page_title="Tip Calculator", layout="centered")
# ──────────────────────────────────────────────────────────────────────────────

# Ensure the repo root is importable (so `tip_logic.py` and friends can be found)
ROOT = pathlib.Path(__file__).resolve().parents[2]  # <repo_root>/...
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from strings import get_string

# Try imports but don't call st.* in except blocks (collect warnings instead)
warnings: list[str] = []
try:
    import settings
except Exception as e:
    settings = None  # type: ignore
    warnings.append(f"settings.py not loaded: {e}")

try:
    import tip_logic
except Exception as e:
    tip_logic = None  # type: ignore
    warnings.append(f"tip_logic.py not loaded: {e}")

try:
    import tip_table
except Exception as e:
    tip_table = None  # type: ignore
    warnings.append(f"tip_table.py not loaded: {e}")

logging.basicConfig(
    level=getattr(settings, "LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────────────────────────────────────
# UI
# ──────────────────────────────────────────────────────────────────────────────
st.title(get_string("calculate_tip"))

# Show any import warnings in the sidebar
if warnings:
    with st.sidebar:
        for w in warnings:
            st.warning(w)

bill_text = st.text_input(get_string("bill_amount"), value="", key="bill_amount")
tip_text = st.text_input(get_string("how_was_the_service"), value="", key="tip_input")
round_up = st.toggle(get_string("round_up_tip"), value=False, key="round_up")

if tip_logic is None:
    st.stop()

inputs = tip_logic.TipInputs.from_text(bill_text, tip_text, round_up)
try:
    tip = tip_logic.tip_for(inputs)
    st.subheader(get_string("tip_amount", tip))
except Exception as e:
    logger.exception("Tip formatting failed for %s", inputs)
    st.error(f"Error computing tip: {e}")

if tip_table is not None:
    st.divider()
    st.caption("Quick reference")
    try:
        table = tip_table.tip_table_df(inputs.bill_amount, round_up=inputs.round_up)
        st.dataframe(table, use_container_width=True, hide_index=True)
    except Exception as e:
        st.error(f"Error building tip table: {e}")

from __future__ import annotations

import pandas as pd
import streamlit as st

from config.settings import STRATEGY_KEYS, STRATEGY_LABEL
from domain.best_rune_sets import format_speed, speed_value


def apply_dataframe_style() -> None:
    if st.session_state.get("_table_style_applied"):
        return

    st.markdown(
        """
        <style>
          div[data-testid="stDataFrame"] th {
            font-weight: 600;
          }
          div[data-testid="stDataFrame"] td {
            padding: 6px 10px;
          }
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_table_style_applied"] = True


def best_rune_sets_table(best_rune_sets: dict) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Strategy": STRATEGY_LABEL[key],
                "Speed": speed_value(best_rune_sets.get(key)),
                "Display": format_speed(best_rune_sets.get(key)),
            }
            for key in STRATEGY_KEYS
        ]
    )


def speed_column_config(label: str = "Speed"):
    return st.column_config.NumberColumn(label, format="+%d", width="small")

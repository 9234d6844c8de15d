from __future__ import annotations

import math

import pandas as pd

from config.settings import STRATEGY_KEYS, STRATEGY_LABEL
from domain.best_rune_sets import speed_value


def _speeds(df: pd.DataFrame, key: str) -> pd.Series:
    if df is None or df.empty:
        return pd.Series(dtype=int)
    if key not in df.columns:
        return pd.Series(0, index=df.index)
    return df[key].map(speed_value)


def strategy_average(df: pd.DataFrame, key: str) -> int:
    """Rounded mean over members with a positive value (0 when none)."""
    s = _speeds(df, key)
    s = s[s > 0]
    if s.empty:
        return 0
    # round half up
    return int(math.floor(s.mean() + 0.5))


def build_strategy_ranking(df: pd.DataFrame, key: str) -> pd.DataFrame:
    if df is None or df.empty:
        return pd.DataFrame(columns=["rank", "name", "speed", "above_average"])

    avg = strategy_average(df, key)

    out = pd.DataFrame({"name": df["name"].astype(str), "speed": _speeds(df, key)})
    out = out.sort_values("speed", ascending=False, kind="stable").reset_index(drop=True)
    out.insert(0, "rank", range(1, len(out) + 1))
    out["above_average"] = out["speed"] > avg
    return out


def best_member_by_strategy(df: pd.DataFrame) -> pd.DataFrame:
    rows = []
    for key in STRATEGY_KEYS:
        s = _speeds(df, key)
        best_name, best_speed = "", 0
        if not s.empty and s.max() > 0:
            idx = s.idxmax()
            best_name, best_speed = str(df.loc[idx, "name"]), int(s.loc[idx])
        rows.append(
            {
                "key": key,
                "Strategy": STRATEGY_LABEL[key],
                "Member": best_name,
                "Speed": best_speed,
            }
        )
    return pd.DataFrame(rows)


def build_member_strategy_long(df: pd.DataFrame) -> pd.DataFrame:
    """(member, strategy, speed) rows for the line chart; non-positive dropped."""
    cols = ["member", "strategy", "order", "speed"]
    if df is None or df.empty:
        return pd.DataFrame(columns=cols)

    rows = []
    for _, r in df.iterrows():
        for order, key in enumerate(STRATEGY_KEYS):
            spd = speed_value(r.get(key))
            if spd > 0:
                rows.append(
                    {
                        "member": str(r.get("name", "")),
                        "strategy": STRATEGY_LABEL[key],
                        "order": order,
                        "speed": spd,
                    }
                )
    return pd.DataFrame(rows, columns=cols)


def build_strategy_averages(df: pd.DataFrame) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"strategy": STRATEGY_LABEL[key], "order": i, "speed": strategy_average(df, key)}
            for i, key in enumerate(STRATEGY_KEYS)
        ]
    )

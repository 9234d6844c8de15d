from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st

from config.settings import STRATEGY_COLOR, STRATEGY_KEYS, STRATEGY_LABEL
from domain.guild_rune_stats import (
    best_member_by_strategy,
    build_member_strategy_long,
    build_strategy_averages,
    build_strategy_ranking,
    strategy_average,
)
from services.rune_stats_service import get_guild_names, get_guild_rune_stats
from ui.auth import require_access_or_stop
from ui.table_utils import apply_dataframe_style, speed_column_config


def _render_bar_chart(ranking: pd.DataFrame, key: str, avg: int) -> None:
    color = STRATEGY_COLOR.get(key, "#3b82f6")
    height = max(240, 28 * len(ranking))

    bars = (
        alt.Chart(ranking)
        .mark_bar(color=color)
        .encode(
            x=alt.X("speed:Q", title="Rune SPD"),
            y=alt.Y("name:N", sort="-x", title=None),
            tooltip=[
                alt.Tooltip("name:N", title="Member"),
                alt.Tooltip("speed:Q", title="SPD"),
            ],
        )
        .properties(height=height)
    )

    rule = (
        alt.Chart(pd.DataFrame({"avg": [avg]}))
        .mark_rule(color="#fbbf24", strokeWidth=3, strokeDash=[10, 5])
        .encode(x="avg:Q", tooltip=[alt.Tooltip("avg:Q", title="Guild Average")])
    )

    st.altair_chart(alt.layer(bars, rule).properties(title=f"Fastest set - {STRATEGY_LABEL[key]}"), width="stretch")


def _render_line_chart(df: pd.DataFrame) -> None:
    long_df = build_member_strategy_long(df)
    if long_df.empty:
        st.info("No positive values to compare.")
        return

    x = alt.X("strategy:N", sort=[STRATEGY_LABEL[k] for k in STRATEGY_KEYS], title=None)

    lines = (
        alt.Chart(long_df)
        .mark_line(point=True)
        .encode(
            x=x,
            y=alt.Y("speed:Q", title="Rune SPD", scale=alt.Scale(zero=False)),
            color=alt.Color("member:N", legend=alt.Legend(title="Member")),
            tooltip=[
                alt.Tooltip("member:N", title="Member"),
                alt.Tooltip("strategy:N", title="Strategy"),
                alt.Tooltip("speed:Q", title="SPD"),
            ],
        )
    )

    avg_line = (
        alt.Chart(build_strategy_averages(df))
        .mark_line(color="#fbbf24", strokeWidth=3, strokeDash=[10, 5])
        .encode(x=x, y="speed:Q")
    )

    st.altair_chart(
        alt.layer(lines, avg_line).properties(height=420, title="Set comparison per member (base 100)"),
        width="stretch",
    )


def render_guild_rune_stats_tab():
    st.subheader("Guild Rune Stats")
    apply_dataframe_style()

    guild = st.selectbox("Guild", options=[""] + get_guild_names(), index=0, key="guild_rune_stats_guild")
    if not guild:
        st.info("Select a guild.")
        return

    if not require_access_or_stop("guild_rune_stats"):
        return

    df = get_guild_rune_stats(guild)
    if df.empty:
        st.info("No data yet. Members need to upload their SW export.")
        return

    view = st.radio("View", options=["By set", "By member"], horizontal=True, key="guild_rune_stats_view")

    if view == "By member":
        _render_line_chart(df)
        st.markdown("### Best per set")
        best = best_member_by_strategy(df)
        best["Member"] = best["Member"].replace("", "-")
        st.dataframe(
            best[["Strategy", "Member", "Speed"]],
            use_container_width=True,
            hide_index=True,
            column_config={"Speed": speed_column_config()},
        )
        return

    key = st.selectbox(
        "Set",
        options=STRATEGY_KEYS,
        format_func=lambda k: STRATEGY_LABEL[k],
        key="guild_rune_stats_set",
    )

    avg = strategy_average(df, key)
    st.metric(f"Guild Average ({STRATEGY_LABEL[key]})", f"+{avg} SPD")

    ranking = build_strategy_ranking(df, key)
    _render_bar_chart(ranking, key, avg)

    st.markdown(f"### Ranking - {STRATEGY_LABEL[key]}")
    display = ranking.copy()
    display["vs Avg"] = display.apply(
        lambda r: ("▲" if r["above_average"] else "▼") if r["speed"] > 0 else "",
        axis=1,
    )
    display["speed"] = display["speed"].map(lambda v: f"+{v} SPD" if v > 0 else "-")
    st.dataframe(
        display[["rank", "name", "speed", "vs Avg"]].rename(
            columns={"rank": "#", "name": "Member", "speed": "Speed"}
        ),
        use_container_width=True,
        hide_index=True,
    )

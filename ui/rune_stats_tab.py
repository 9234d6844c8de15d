from __future__ import annotations

import hashlib

import pandas as pd
import streamlit as st

from ui.auth import require_access_or_stop
from ui.table_utils import apply_dataframe_style, best_rune_sets_table
from services.rune_stats_service import build_upload_summary, save_best_rune_sets


def hash_bytes(b: bytes) -> str:
    return hashlib.sha256(b).hexdigest()


def _render_profile(profile: dict) -> None:
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Wizard", profile.get("wizard_name") or "-")
    c2.metric("Level", profile.get("wizard_level") or "-")
    c3.metric("Units", profile.get("unit_count", 0))
    c4.metric("Runes", profile.get("rune_count", 0))


def render_rune_stats_tab():
    st.subheader("My Rune Speed")
    apply_dataframe_style()

    uploaded = st.file_uploader(
        "Upload JSON file exported from SW",
        type=["json"],
        key="rune_stats_json",
    )

    if uploaded is None:
        st.info("Please upload a JSON file to start.")
        return

    raw = uploaded.getvalue()
    data_hash = hash_bytes(raw)

    # recompute only when a different file is uploaded
    if st.session_state.get("rune_stats_hash") != data_hash:
        try:
            summary = build_upload_summary(raw)
        except ValueError as exc:
            st.error(str(exc))
            return
        st.session_state.rune_stats_hash = data_hash
        st.session_state.rune_stats_summary = summary
        st.session_state.rune_stats_saved = False

    summary = st.session_state.rune_stats_summary
    profile = summary["profile"]
    best_rune_sets = summary["best_rune_sets"]

    _render_profile(profile)

    st.markdown("### Best Rune Sets")
    st.caption("Rune SPD only. Swift results include the +25 set bonus (base 100). '-' = set cannot be completed.")
    df = best_rune_sets_table(best_rune_sets)
    st.dataframe(
        df[["Strategy", "Display"]].rename(columns={"Display": "Speed"}),
        use_container_width=True,
        hide_index=True,
        column_config={
            "Strategy": st.column_config.TextColumn("Strategy", width="medium"),
            "Speed": st.column_config.TextColumn("Speed", width="small"),
        },
    )
    st.bar_chart(df.set_index("Strategy")["Speed"], height=240)

    with st.expander("Runes per set"):
        set_counts = summary.get("set_counts", {})
        st.dataframe(
            pd.DataFrame({"Set": list(set_counts), "Runes": list(set_counts.values())}),
            use_container_width=True,
            hide_index=True,
        )

    st.divider()

    st.markdown("### Save to Guild")
    c1, c2 = st.columns([0.6, 0.4], vertical_alignment="bottom")
    with c1:
        guild = st.text_input("Guild", key="rune_stats_guild")
    with c2:
        clicked = st.button("Save", type="primary", key="rune_stats_save", use_container_width=True)

    if clicked:
        if not guild.strip():
            st.warning("Enter a guild name.")
            return
        if not require_access_or_stop("rune_stats"):
            return
        try:
            save_best_rune_sets(profile, best_rune_sets, guild)
        except ValueError as exc:
            st.error(str(exc))
            return
        st.session_state.rune_stats_saved = True

    if st.session_state.get("rune_stats_saved"):
        st.success("Saved.")

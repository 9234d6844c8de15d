from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List

import pandas as pd
import streamlit as st

from config.settings import RUNE_STATS_TABLE, STRATEGY_KEYS
from domain.best_rune_sets import compute_best_rune_sets
from domain.rune_repo import collect_runes, parse_export, rune_set_counts, wizard_profile
from services.supabase_client import get_supabase_client


def _clean_name(value) -> str:
    return str(value).strip() if value is not None else ""


def build_upload_summary(raw: bytes) -> Dict[str, Any]:
    """Parse an SW export and compute the six best-rune-set speeds (no I/O)."""
    data = parse_export(raw)
    runes = collect_runes(data)
    return {
        "profile": wizard_profile(data),
        "best_rune_sets": compute_best_rune_sets(runes),
        "set_counts": rune_set_counts(runes),
    }


def build_rune_stats_row(profile: Dict[str, Any], best_rune_sets: Dict[str, int], guild: str) -> Dict[str, Any]:
    if profile.get("wizard_id") is None:
        raise ValueError("Export has no wizard_id; cannot save rune stats.")

    row = {
        "wizard_id": int(profile["wizard_id"]),
        "name": _clean_name(profile.get("wizard_name")),
        "guild": _clean_name(guild),
        "wizard_level": profile.get("wizard_level"),
        "unit_count": int(profile.get("unit_count") or 0),
        "rune_count": int(profile.get("rune_count") or 0),
        "last_upload": datetime.now(timezone.utc).isoformat(),
    }
    for key in STRATEGY_KEYS:
        row[key] = int(best_rune_sets.get(key, -1))
    return row


def save_best_rune_sets(profile: Dict[str, Any], best_rune_sets: Dict[str, int], guild: str) -> Dict[str, Any]:
    row = build_rune_stats_row(profile, best_rune_sets, guild)

    (
        get_supabase_client()
        .table(RUNE_STATS_TABLE)
        .upsert(row, on_conflict="wizard_id")
        .execute()
    )

    get_guild_rune_stats.clear()
    get_guild_names.clear()
    return row


def _fetch_all(make_query, page_size: int = 1000) -> List[Dict[str, Any]]:
    """Run make_query() page by page with .range() until a short page."""
    start = 0
    rows: List[Dict[str, Any]] = []

    while True:
        res = make_query().range(start, start + page_size - 1).execute()
        batch = res.data or []
        if not batch:
            break
        rows.extend(batch)

        if len(batch) < page_size:
            break
        start += page_size

    return rows


@st.cache_data(ttl=300)
def get_guild_rune_stats(guild: str) -> pd.DataFrame:
    guild = _clean_name(guild)
    if not guild:
        return pd.DataFrame()

    client = get_supabase_client()
    rows = _fetch_all(
        lambda: (
            client
            .table(RUNE_STATS_TABLE)
            .select("wizard_id, name, last_upload, " + ", ".join(STRATEGY_KEYS))
            .eq("guild", guild)
            .order("name")
        )
    )
    return pd.DataFrame(rows)


@st.cache_data(ttl=3600)
def get_guild_names() -> List[str]:
    client = get_supabase_client()
    rows = _fetch_all(
        lambda: client.table(RUNE_STATS_TABLE).select("guild").order("guild")
    )
    return sorted({_clean_name(r.get("guild")) for r in rows if _clean_name(r.get("guild"))})

# ui/auth.py
import streamlit as st

FEATURE_LABELS = {
    "rune_stats": "Save Rune Stats",
    "guild_rune_stats": "Guild Rune Stats",
}


def _allowed_features() -> list:
    policy = st.secrets.get("ACCESS_POLICY", {})
    key = (st.session_state.get("access_key_input") or "").strip()
    if not key:
        return []
    allowed = policy.get(key, [])
    return list(allowed) if isinstance(allowed, (list, tuple)) else []


def require_access_or_stop(feature: str) -> bool:
    allowed = _allowed_features()
    if "all" in allowed or feature in allowed:
        return True

    st.warning(f"Access Key required for: {FEATURE_LABELS.get(feature, feature)}")
    return False

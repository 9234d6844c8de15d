import streamlit as st

from ui.rune_stats_tab import render_rune_stats_tab
from ui.guild_rune_stats_tab import render_guild_rune_stats_tab


# ============================================================
# Streamlit App
# ============================================================

st.set_page_config(page_title="SW Guild Rune Stats", layout="wide")
st.title("SW Guild Rune Stats")

# ------------------------------------------------------------
# Sidebar: Access Key Input
# ------------------------------------------------------------

st.sidebar.header("Access Control")
st.sidebar.text_input(
    "Access Key",
    type="password",
    key="access_key_input",
    help="Enter a valid access key to unlock private features",
)

# ------------------------------------------------------------
# Tabs
# ------------------------------------------------------------

tab_mine, tab_guild = st.tabs([
    "My Rune Speed",
    "Guild Rune Stats",
])

with tab_mine:
    render_rune_stats_tab()

with tab_guild:
    render_guild_rune_stats_tab()

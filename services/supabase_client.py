import streamlit as st
from supabase import create_client


@st.cache_resource
def get_supabase_client():
    """Shared Supabase client built from st.secrets."""
    return create_client(
        st.secrets["SUPABASE_URL"],
        st.secrets["SUPABASE_ANON_KEY"],
    )

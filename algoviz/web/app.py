# app.py
#
# Streamlit entry point:  streamlit run algoviz/web/app.py
# The current page comes from the ?page= query parameter; unknown pages show
# the not-found view. Set ALGOVIZ_CONFIG to a JSON file to override defaults.
import logging
import os

import streamlit as st

from algoviz.config import load_config, setup_logging
from algoviz.errors import ConfigError
from algoviz.web import views
from algoviz.web.routes import FEATURES, resolve_route

logger = logging.getLogger(__name__)

PAGES = {
    "home": views.home_page,
    "structures": views.structures_page,
    "sorting": views.sorting_page,
    "search": views.search_page,
    "compare": views.compare_page,
    "not_found": views.not_found_page,
}


@st.cache_resource
def get_config():
    """Load configuration and set up logging once per server process."""
    config = load_config(os.environ.get("ALGOVIZ_CONFIG"))
    setup_logging(config["logging"]["level"], config["logging"]["log_file"])
    logger.info("AlgoViz web app started")
    return config


st.set_page_config(page_title="AlgoViz", page_icon="🧮", layout="wide")

try:
    config = get_config()
except ConfigError as e:
    st.error(f"**{e.title}**: {e}")
    st.stop()

# --- Sidebar navigation ---
st.sidebar.title("AlgoViz")
if st.sidebar.button("🏠 Home", key="nav_home"):
    views.navigate("/")
for feature in FEATURES:
    if st.sidebar.button(feature["title"], key=f"nav_{feature['path']}"):
        views.navigate(feature["path"])

page = resolve_route(st.query_params.get("page", "/"))
PAGES[page](config)

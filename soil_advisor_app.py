# soil_advisor_app.py
"""
Soil Advisor - Streamlit app
Features:
- Soil analysis form (texture, pH, moisture, nutrients, water, region)
- Rule-based crop ranking with soil health tips
- CSV report download
- FAQ and settings pages

Run with: streamlit run soil_advisor_app.py
"""

# -------------- imports & page config (must be first Streamlit command) --------------
import logging

import streamlit as st

from soil_advisor.config import APP_TITLE, DEFAULT_LANGUAGE, LOG_LEVEL

st.set_page_config(page_title=APP_TITLE, page_icon="🌱", layout="wide")

from soil_advisor import views  # noqa: E402
from soil_advisor.navigation import Session  # noqa: E402

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# ---------------- session ----------------
if "session" not in st.session_state:
    st.session_state.session = Session(language=DEFAULT_LANGUAGE)
session = st.session_state.session

views.render_sidebar(session)
views.render_page(session)
views.render_footer(session)
views.render_notifications(session)

import logging
import os

from dotenv import load_dotenv

# ---------------- load env and defaults ----------------
load_dotenv()

LANGUAGES = {"EN": "English", "ES": "Spanish"}


def _language(value):
    value = (value or "").strip().upper()
    return value if value in LANGUAGES else "EN"


def _log_level(value):
    value = (value or "").strip().upper()
    # getLevelName maps known names to their int level
    return value if isinstance(logging.getLevelName(value), int) else "WARNING"


APP_TITLE = os.getenv("SOIL_ADVISOR_TITLE", "AI Crop Advisor")
DEFAULT_LANGUAGE = _language(os.getenv("SOIL_ADVISOR_LANGUAGE"))
LOG_LEVEL = _log_level(os.getenv("SOIL_ADVISOR_LOG_LEVEL"))

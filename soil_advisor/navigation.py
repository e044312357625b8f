"""
Session state for one browser tab: current page, the submitted soil
profile and the language flag.

The recommendations page is only reachable with a stored profile, so the
session can never sit on it without something to show.
"""
import logging
from enum import Enum

from .config import DEFAULT_LANGUAGE, LANGUAGES

logger = logging.getLogger(__name__)

ANALYSIS_COMPLETE = "Soil analysis complete! Here are your crop recommendations."
ANALYSIS_REQUIRED = "Complete a soil analysis to see recommendations."


class Page(str, Enum):
    HOME = "home"
    INPUT = "input"
    RECOMMENDATIONS = "recommendations"
    FAQ = "faq"
    SETTINGS = "settings"


class Session:
    def __init__(self, language=DEFAULT_LANGUAGE):
        self.page = Page.HOME
        self.profile = None
        self.language = language if language in LANGUAGES else "EN"
        self._notifications = []

    # ---------------- transitions ----------------
    def start_analysis(self):
        self._move(Page.INPUT)

    def submit_profile(self, profile):
        if profile is None:
            raise ValueError("a soil profile is required to show recommendations")
        self.profile = profile
        self._move(Page.RECOMMENDATIONS)
        self.notify("success", ANALYSIS_COMPLETE)
        logger.info("analysis complete: texture=%s ph=%.1f", profile.texture, profile.ph)

    def back_to_input(self):
        self._move(Page.INPUT)

    def go_home(self):
        self.profile = None
        self._move(Page.HOME)

    def navigate(self, page):
        page = Page(page)
        if page is Page.HOME:
            self.go_home()
        elif page is Page.RECOMMENDATIONS and self.profile is None:
            self._move(Page.INPUT)
            self.notify("info", ANALYSIS_REQUIRED)
        else:
            self._move(page)

    def toggle_language(self):
        self.language = "ES" if self.language == "EN" else "EN"
        self.notify("info", f"Language changed to {LANGUAGES[self.language]}")

    # ---------------- notifications ----------------
    def notify(self, level, message):
        self._notifications.append((level, message))

    def drain_notifications(self):
        pending, self._notifications = self._notifications, []
        return pending

    def _move(self, page):
        logger.debug("page %s -> %s", self.page.value, page.value)
        self.page = page

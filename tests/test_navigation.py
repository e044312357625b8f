import pytest

from soil_advisor.navigation import ANALYSIS_COMPLETE, ANALYSIS_REQUIRED, Page, Session
from soil_advisor.models import SoilProfile

PROFILE = SoilProfile(texture="loamy", moisture_level="moist", water_availability="abundant", region="tropical")


def test_starts_home_without_profile():
    session = Session()
    assert session.page is Page.HOME
    assert session.profile is None
    assert session.drain_notifications() == []


def test_analysis_flow():
    session = Session()
    session.start_analysis()
    assert session.page is Page.INPUT
    session.submit_profile(PROFILE)
    assert session.page is Page.RECOMMENDATIONS
    assert session.profile is PROFILE
    assert session.drain_notifications() == [("success", ANALYSIS_COMPLETE)]
    assert session.drain_notifications() == []


def test_back_to_input_keeps_profile():
    session = Session()
    session.submit_profile(PROFILE)
    session.back_to_input()
    assert session.page is Page.INPUT
    assert session.profile is PROFILE


@pytest.mark.parametrize("page", [Page.INPUT, Page.RECOMMENDATIONS, Page.FAQ, Page.SETTINGS])
def test_home_discards_profile_from_anywhere(page):
    session = Session()
    session.submit_profile(PROFILE)
    session.navigate(page)
    session.navigate(Page.HOME)
    assert session.page is Page.HOME
    assert session.profile is None


def test_recommendations_require_profile():
    session = Session()
    session.navigate(Page.RECOMMENDATIONS)
    assert session.page is Page.INPUT
    assert session.drain_notifications() == [("info", ANALYSIS_REQUIRED)]
    with pytest.raises(ValueError):
        session.submit_profile(None)
    assert session.page is Page.INPUT


def test_navigate_to_recommendations_with_profile():
    session = Session()
    session.submit_profile(PROFILE)
    session.navigate(Page.FAQ)
    session.navigate("recommendations")
    assert session.page is Page.RECOMMENDATIONS


def test_unknown_page_rejected():
    with pytest.raises(ValueError):
        Session().navigate("dashboard")


def test_language_toggle_is_independent_of_page():
    session = Session()
    session.start_analysis()
    session.toggle_language()
    assert session.language == "ES"
    assert session.page is Page.INPUT
    session.toggle_language()
    assert session.language == "EN"
    assert session.drain_notifications() == [
        ("info", "Language changed to Spanish"),
        ("info", "Language changed to English"),
    ]


def test_unknown_language_falls_back_to_english():
    assert Session(language="FR").language == "EN"
    assert Session(language="ES").language == "ES"

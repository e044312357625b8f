"""Drive the real Streamlit script page by page."""
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = Path(__file__).resolve().parents[1] / "soil_advisor_app.py"
TIMEOUT = 20


@pytest.fixture
def app():
    at = AppTest.from_file(str(APP), default_timeout=TIMEOUT)
    at.run()
    return at


def page(at):
    return at.session_state["session"].page.value


def fill_form(at, texture="loamy", ph=7.0, moisture="moderate", water="abundant", region="temperate"):
    if texture:
        at.selectbox(key="texture").select(texture)
    at.slider(key="ph").set_value(ph)
    if moisture:
        at.selectbox(key="moisture_level").select(moisture)
    if water:
        at.selectbox(key="water_availability").select(water)
    if region:
        at.selectbox(key="region").select(region)


def submit(at):
    button = next(b for b in at.button if b.label == "Get Crop Recommendations")
    button.click().run()


def test_opens_on_home(app):
    assert not app.exception
    assert page(app) == "home"
    assert app.main.title[0].value == "Get Crop Advice Based on Your Soil Type"


def test_full_analysis(app):
    app.button(key="start_analysis").click().run()
    assert page(app) == "input"

    fill_form(app)
    app.checkbox(key="nutrient_nitrogen").check()
    submit(app)

    assert not app.exception
    assert page(app) == "recommendations"
    assert app.header[0].value == "Crop Recommendations"
    assert [m.value for m in app.metric] == ["95%", "92%", "88%"]
    profile = app.session_state["session"].profile
    assert profile.nutrients == ("nitrogen",)


def test_incomplete_submission_stays_on_form(app):
    app.button(key="start_analysis").click().run()
    fill_form(app, texture=None, region=None)
    submit(app)

    assert page(app) == "input"
    assert app.session_state["session"].profile is None
    message = app.error[0].value
    assert "Please select soil texture" in message
    assert "Please select your region" in message
    assert "moisture" not in message
    assert "pH" not in message


def test_back_to_analysis_and_new_analysis(app):
    app.button(key="start_analysis").click().run()
    fill_form(app, texture="sandy", ph=9.0, water="drought-prone")
    submit(app)
    assert [m.value for m in app.metric] == ["72%", "68%", "55%"]

    app.button(key="rec_back").click().run()
    assert page(app) == "input"
    assert app.session_state["session"].profile is not None
    assert app.selectbox(key="texture").value == "sandy"

    app.button(key="nav_home").click().run()
    assert page(app) == "home"
    assert app.session_state["session"].profile is None


def test_recommendations_need_an_analysis(app):
    app.button(key="nav_recommendations").click().run()
    assert page(app) == "input"
    assert app.header[0].value == "Soil Analysis Input"


def test_language_toggle_only_changes_label(app):
    assert app.button(key="language").label == "🌐 EN"
    app.button(key="language").click().run()
    assert app.button(key="language").label == "🌐 ES"
    assert page(app) == "home"
    assert app.main.title[0].value == "Get Crop Advice Based on Your Soil Type"


def test_faq_and_settings_pages(app):
    app.button(key="nav_faq").click().run()
    assert page(app) == "faq"
    assert app.header[0].value == "❓ Frequently Asked Questions"

    app.button(key="nav_settings").click().run()
    assert page(app) == "settings"
    app.button(key="settings_back").click().run()
    assert page(app) == "home"


def test_soil_health_panel_only_when_tips_exist(app):
    app.button(key="start_analysis").click().run()
    fill_form(app, texture="loamy", ph=6.5)
    submit(app)
    assert page(app) == "recommendations"
    assert len(app.success) == 0

    app.button(key="rec_back").click().run()
    fill_form(app, texture="clay", ph=8.5)
    submit(app)
    assert page(app) == "recommendations"
    panel = app.success[0].value
    assert "Soil Health Recommendations" in panel
    assert "Improve drainage" in panel
    assert "lower pH gradually" in panel


def test_toasts_after_submit_and_language_toggle(app):
    app.button(key="start_analysis").click().run()
    fill_form(app)
    submit(app)
    assert [t.value for t in app.toast] == ["Soil analysis complete! Here are your crop recommendations."]

    app.button(key="language").click().run()
    assert [t.value for t in app.toast] == ["Language changed to Spanish"]

"""Streamlit page rendering. Every function takes the session it renders."""
import streamlit as st

from . import content
from .config import APP_TITLE
from .forms import submit_soil_form
from .models import (
    MOISTURE_CHOICES,
    NUTRIENT_CHOICES,
    PH_DEFAULT,
    PH_MAX,
    PH_MIN,
    PH_STEP,
    REGION_CHOICES,
    TEXTURE_CHOICES,
    WATER_CHOICES,
)
from .navigation import Page
from .report import recommendations_frame, report_csv
from .scoring import score_crops, soil_health_tips

TOAST_ICONS = {"success": "✅", "info": "ℹ️", "warning": "⚠️"}

NAV_ITEMS = [
    (Page.HOME, "🏠 Home"),
    (Page.INPUT, "Soil Analysis"),
    (Page.RECOMMENDATIONS, "Recommendations"),
    (Page.FAQ, "❓ FAQs"),
]


# ---------------- sidebar navigation ----------------
def render_sidebar(session):
    st.sidebar.title(f"💡 {APP_TITLE}")
    st.sidebar.caption("Soil-based crop advice")
    for page, label in NAV_ITEMS:
        st.sidebar.button(
            label,
            key=f"nav_{page.value}",
            type="primary" if session.page is page else "secondary",
            on_click=session.navigate,
            args=(page,),
        )
    st.sidebar.markdown("---")
    st.sidebar.button(f"🌐 {session.language}", key="language", on_click=session.toggle_language)
    st.sidebar.button(
        "⚙️ Settings",
        key="nav_settings",
        type="primary" if session.page is Page.SETTINGS else "secondary",
        on_click=session.navigate,
        args=(Page.SETTINGS,),
    )


def render_page(session):
    renderers = {
        Page.HOME: render_home,
        Page.INPUT: render_input,
        Page.RECOMMENDATIONS: render_recommendations,
        Page.FAQ: render_faq,
        Page.SETTINGS: render_settings,
    }
    renderers[session.page](session)


def render_notifications(session):
    for level, message in session.drain_notifications():
        st.toast(message, icon=TOAST_ICONS.get(level))


# ---------------- Home page ----------------
def render_home(session):
    st.title(content.HERO_TITLE)
    st.markdown(content.HERO_TEXT)
    st.button("Start Soil Analysis Now", key="start_analysis", type="primary", on_click=session.start_analysis)

    cols = st.columns(len(content.FEATURES))
    for col, (icon, title, text) in zip(cols, content.FEATURES):
        with col:
            with st.container(border=True):
                st.markdown(f"### {icon}")
                st.markdown(f"**{title}**")
                st.caption(text)

    st.header("How It Works")
    steps = st.columns(len(content.HOW_IT_WORKS))
    for number, (col, (title, text)) in enumerate(zip(steps, content.HOW_IT_WORKS), start=1):
        with col:
            st.markdown(f"#### {number}. {title}")
            st.write(text)


# ---------------- Soil Analysis input page ----------------
def _choice_index(choices, value):
    keys = list(choices)
    return keys.index(value) if value in keys else None


def _select(label, choices, key, placeholder, current):
    return st.selectbox(
        label,
        list(choices),
        index=_choice_index(choices, current),
        format_func=choices.get,
        placeholder=placeholder,
        key=key,
        help=content.FIELD_HELP.get(key),
    )


def render_input(session):
    st.button("← Back to Home", key="input_back", on_click=session.go_home)
    st.header("Soil Analysis Input")
    st.markdown("Please provide details about your soil conditions to get personalized crop recommendations.")

    # prefill from the last submission when coming back from the results
    prev = session.profile
    alert = st.container()
    with st.form("soil_form"):
        st.subheader("Soil Properties")
        texture = _select("Soil Texture *", TEXTURE_CHOICES, "texture", "Select your soil texture",
                          prev.texture if prev else "")
        ph = st.slider(
            "Soil pH Level",
            min_value=PH_MIN,
            max_value=PH_MAX,
            value=prev.ph if prev else PH_DEFAULT,
            step=PH_STEP,
            key="ph",
            help=content.FIELD_HELP["ph"],
        )
        st.caption("4.0 (Acidic) · 7.0 (Neutral) · 10.0 (Alkaline)")
        moisture = _select("Moisture Level *", MOISTURE_CHOICES, "moisture_level", "Select current moisture level",
                           prev.moisture_level if prev else "")
        water = _select("Water Availability *", WATER_CHOICES, "water_availability", "Select water availability",
                        prev.water_availability if prev else "")
        region = _select("Geographic Region *", REGION_CHOICES, "region", "Select your region",
                         prev.region if prev else "")

        st.markdown("**Known Nutrient Deficiencies (Optional)**", help=content.FIELD_HELP["nutrients"])
        selected = []
        c1, c2 = st.columns(2)
        for i, (nutrient, label) in enumerate(NUTRIENT_CHOICES.items()):
            with (c1 if i % 2 == 0 else c2):
                checked = st.checkbox(label, value=bool(prev and nutrient in prev.nutrients), key=f"nutrient_{nutrient}")
            if checked:
                selected.append(nutrient)

        submitted = st.form_submit_button("Get Crop Recommendations", type="primary")

    if submitted:
        profile, errors = submit_soil_form({
            "texture": texture or "",
            "ph": round(ph, 1),
            "moisture_level": moisture or "",
            "nutrients": selected,
            "water_availability": water or "",
            "region": region or "",
        })
        if errors:
            with alert:
                st.error("Please complete the following required fields:\n\n"
                         + "\n".join("- " + e for e in errors))
        else:
            session.submit_profile(profile)
            st.rerun()


# ---------------- Recommendations page ----------------
def _render_crop_card(rec, top_pick):
    crop = rec.crop
    with st.container(border=True):
        if top_pick:
            st.markdown("⭐ **Top Pick**")
        head, score = st.columns([3, 1])
        with head:
            st.subheader(crop.name)
            st.caption(f"_{crop.scientific_name}_")
        with score:
            st.metric("Match Score", f"{rec.adjusted_score}%")

        m1, m2 = st.columns(2)
        with m1:
            st.markdown(f"📈 **Yield**  \n{crop.yield_estimate}")
            st.markdown(f"🍃 **Sustainability**  \n{crop.sustainability_score}%")
            st.progress(crop.sustainability_score)
        with m2:
            st.markdown(f"💲 **Profitability**  \n{content.PROFITABILITY_BADGE[crop.profitability]}")
            st.markdown(f"💧 **Water Need**  \n{crop.water_requirement}")
        st.markdown(f"☀️ **Season:** {crop.growing_season}")

        st.markdown("**✅ Why Recommended**")
        for reason in crop.reasons[:2]:
            st.write("- " + reason)
        st.markdown("**🌱 Growing Tips**")
        for tip in crop.tips[:2]:
            st.write("- " + tip)

        with st.expander("View Detailed Guide"):
            st.markdown("**Reasons**")
            for reason in crop.reasons:
                st.write("- " + reason)
            st.markdown("**Tips**")
            for tip in crop.tips:
                st.write("- " + tip)
            st.markdown("**Challenges**")
            for challenge in crop.challenges:
                st.write("- " + challenge)
            st.markdown("**Score breakdown**")
            st.write(f"- Base suitability: {crop.suitability_score}")
            for adj in rec.adjustments:
                st.write(f"- {adj.label}: {adj.delta:+d}")


def render_recommendations(session):
    soil = session.profile
    left, right = st.columns([1, 1])
    with left:
        st.button("← Back to Analysis", key="rec_back", on_click=session.back_to_input)
    with right:
        st.button("Start New Analysis", key="rec_new", on_click=session.go_home)

    st.header("Crop Recommendations")
    st.markdown("Based on your soil analysis, here are the best crop options for your land.")

    with st.container(border=True):
        st.subheader("Soil Analysis Summary")
        s1, s2, s3, s4 = st.columns(4)
        s1.markdown(f"**Texture:**  \n{content.display_value(soil.texture)}")
        s2.markdown(f"**pH Level:**  \n{soil.ph:.1f}")
        s3.markdown(f"**Moisture:**  \n{content.display_value(soil.moisture_level)}")
        s4.markdown(f"**Water Access:**  \n{content.display_value(soil.water_availability)}")

    ranked = score_crops(soil)
    cols = st.columns(len(ranked))
    for index, (col, rec) in enumerate(zip(cols, ranked)):
        with col:
            _render_crop_card(rec, top_pick=index == 0)

    tips = list(soil_health_tips(soil))
    if tips:
        st.success("**🍃 Soil Health Recommendations**\n\n" + "\n".join("- " + t for t in tips))

    st.markdown("### Comparison")
    st.dataframe(recommendations_frame(soil), hide_index=True)

    c1, c2 = st.columns(2)
    with c1:
        with st.container(border=True):
            st.markdown("#### ⚠️ Important Considerations")
            for item in content.CONSIDERATIONS:
                st.write("- " + item)
    with c2:
        with st.container(border=True):
            st.markdown("#### Next Steps")
            st.download_button(
                "⬇ Download Detailed Report",
                data=report_csv(soil),
                file_name="crop_recommendations.csv",
                mime="text/csv",
                key="download_report",
            )
            st.button("Analyze Another Field", key="rec_another", on_click=session.go_home)


# ---------------- FAQ page ----------------
def render_faq(session):
    st.button("← Back", key="faq_back", on_click=session.go_home)
    st.header("❓ Frequently Asked Questions")
    st.markdown("Common questions about soil analysis and crop recommendations.")
    for question, answer in content.FAQS:
        with st.expander(question):
            st.write(answer)
    with st.container(border=True):
        st.markdown("#### Still have questions?")
        st.write("If you couldn't find the answer you're looking for, we're here to help.")


# ---------------- Settings page ----------------
def render_settings(session):
    st.header("Settings")
    st.write("Settings panel coming soon...")
    st.write(f"Current language: **{session.language}**")
    st.button("Back to Home", key="settings_back", on_click=session.go_home)


# ---------------- Footer ----------------
def render_footer(session):
    st.markdown("---")
    about, tools, resources = st.columns(3)
    with about:
        st.markdown(f"**{APP_TITLE}**")
        st.caption("Helping farmers make informed decisions through soil analysis and crop recommendations.")
    with tools:
        st.markdown("**Tools**")
        st.button("Soil Analysis", key="footer_input", on_click=session.navigate, args=(Page.INPUT,))
        st.button("Crop Recommendations", key="footer_recommendations", on_click=session.navigate,
                  args=(Page.RECOMMENDATIONS,))
    with resources:
        st.markdown("**Resources**")
        st.button("FAQ", key="footer_faq", on_click=session.navigate, args=(Page.FAQ,))
    st.caption(f"© 2024 {APP_TITLE}. All rights reserved.")

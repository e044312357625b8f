import itertools

import pytest
from pydantic import ValidationError

from soil_advisor.forms import REQUIRED_FIELDS, submit_soil_form, validate_soil_form
from soil_advisor.models import SoilProfile

COMPLETE = {
    "texture": "loamy",
    "ph": 6.4,
    "moisture_level": "moderate",
    "nutrients": [],
    "water_availability": "abundant",
    "region": "temperate",
}


def test_complete_form_builds_profile():
    profile, errors = submit_soil_form(COMPLETE)
    assert errors == []
    assert profile == SoilProfile(texture="loamy", ph=6.4, moisture_level="moderate",
                                  water_availability="abundant", region="temperate")
    assert profile.nutrients == ()
    assert profile.is_complete


def test_empty_form_reports_every_required_field_in_order():
    profile, errors = submit_soil_form({"ph": 7.0})
    assert profile is None
    assert errors == [
        "Please select soil texture",
        "Please select moisture level",
        "Please select water availability",
        "Please select your region",
    ]


def test_one_message_per_missing_field():
    fields = [f for f, _ in REQUIRED_FIELDS]
    for n in range(1, len(fields) + 1):
        for missing in itertools.combinations(fields, n):
            values = dict(COMPLETE, **{f: "" for f in missing})
            profile, errors = submit_soil_form(values)
            assert profile is None
            assert len(errors) == len(missing)
            assert not any("pH" in e for e in errors)


def test_ph_never_reported_even_when_absent():
    values = {k: v for k, v in COMPLETE.items() if k != "ph"}
    assert validate_soil_form(values) == []
    profile, _ = submit_soil_form(values)
    assert profile.ph == 7.0


def test_nutrients_keep_selection_order():
    profile, _ = submit_soil_form(dict(COMPLETE, nutrients=["sulfur", "nitrogen", "sulfur"]))
    assert profile.nutrients == ("sulfur", "nitrogen")


def test_profile_is_frozen():
    profile, _ = submit_soil_form(COMPLETE)
    with pytest.raises(ValidationError):
        profile.texture = "clay"


@pytest.mark.parametrize("field,value", [
    ("texture", "gravel"),
    ("moisture_level", "soaked"),
    ("water_availability", "none"),
    ("region", "polar"),
    ("nutrients", ("iron",)),
    ("ph", 3.9),
    ("ph", 10.1),
])
def test_profile_rejects_unknown_values(field, value):
    with pytest.raises(ValidationError):
        SoilProfile(**{field: value})


def test_empty_profile_is_incomplete():
    assert not SoilProfile().is_complete
    assert SoilProfile().ph == 7.0

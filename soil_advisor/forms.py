"""Soil input form validation."""
from typing import List, Optional, Tuple

from .models import PH_DEFAULT, SoilProfile

# field -> message shown when it is left empty (display order)
REQUIRED_FIELDS = (
    ("texture", "Please select soil texture"),
    ("moisture_level", "Please select moisture level"),
    ("water_availability", "Please select water availability"),
    ("region", "Please select your region"),
)


def validate_soil_form(values: dict) -> List[str]:
    """One message per missing required field. pH always has a value, so it is never reported."""
    return [message for field, message in REQUIRED_FIELDS if not values.get(field)]


def submit_soil_form(values: dict) -> Tuple[Optional[SoilProfile], List[str]]:
    """Return (profile, []) when complete, else (None, errors)."""
    errors = validate_soil_form(values)
    if errors:
        return None, errors
    profile = SoilProfile(
        texture=values["texture"],
        ph=PH_DEFAULT if values.get("ph") is None else values["ph"],
        moisture_level=values["moisture_level"],
        nutrients=tuple(values.get("nutrients") or ()),
        water_availability=values["water_availability"],
        region=values["region"],
    )
    return profile, []

"""Soil profile and crop records."""
from typing import Tuple

from pydantic import BaseModel, ConfigDict, field_validator

# ---------------- field choices (value -> form label) ----------------
TEXTURE_CHOICES = {
    "sandy": "Sandy - Well-draining, low water retention",
    "loamy": "Loamy - Balanced mixture, ideal for most crops",
    "clay": "Clay - High water retention, may drain slowly",
    "silt": "Silt - Fine particles, moderate drainage",
    "sandy-loam": "Sandy Loam - Good drainage with some retention",
    "clay-loam": "Clay Loam - Moderate drainage, good nutrients",
}

MOISTURE_CHOICES = {
    "very-dry": "Very Dry - Soil is dusty and cracked",
    "dry": "Dry - Soil feels dry to touch",
    "moderate": "Moderate - Slightly moist soil",
    "moist": "Moist - Soil feels damp",
    "wet": "Wet - Standing water visible",
}

WATER_CHOICES = {
    "abundant": "Abundant - Full irrigation system available",
    "moderate": "Moderate - Limited irrigation available",
    "rainfall-dependent": "Rainfall Dependent - No irrigation",
    "drought-prone": "Drought Prone - Very limited water",
}

REGION_CHOICES = {
    "temperate": "Temperate - Moderate climate",
    "tropical": "Tropical - Hot and humid",
    "arid": "Arid - Hot and dry",
    "mediterranean": "Mediterranean - Dry summers, wet winters",
    "continental": "Continental - Cold winters, warm summers",
}

NUTRIENT_CHOICES = {
    "nitrogen": "Nitrogen (N)",
    "phosphorus": "Phosphorus (P)",
    "potassium": "Potassium (K)",
    "calcium": "Calcium (Ca)",
    "magnesium": "Magnesium (Mg)",
    "sulfur": "Sulfur (S)",
}

PH_MIN, PH_MAX, PH_DEFAULT, PH_STEP = 4.0, 10.0, 7.0, 0.1

PROFITABILITY_TIERS = ("High", "Medium", "Low")
WATER_TIERS = ("High", "Moderate", "Low")


def _check_choice(value: str, choices: dict, field: str) -> str:
    if value and value not in choices:
        raise ValueError(f"unknown {field} '{value}'")
    return value


class SoilProfile(BaseModel):
    """User-entered soil record. Enumerated fields may be empty until the form is complete."""

    model_config = ConfigDict(frozen=True)

    texture: str = ""
    ph: float = PH_DEFAULT
    moisture_level: str = ""
    nutrients: Tuple[str, ...] = ()
    water_availability: str = ""
    region: str = ""

    @field_validator("texture")
    @classmethod
    def _texture(cls, value: str) -> str:
        return _check_choice(value, TEXTURE_CHOICES, "texture")

    @field_validator("moisture_level")
    @classmethod
    def _moisture(cls, value: str) -> str:
        return _check_choice(value, MOISTURE_CHOICES, "moisture level")

    @field_validator("water_availability")
    @classmethod
    def _water(cls, value: str) -> str:
        return _check_choice(value, WATER_CHOICES, "water availability")

    @field_validator("region")
    @classmethod
    def _region(cls, value: str) -> str:
        return _check_choice(value, REGION_CHOICES, "region")

    @field_validator("ph")
    @classmethod
    def _ph_in_range(cls, value: float) -> float:
        if not PH_MIN <= value <= PH_MAX:
            raise ValueError(f"pH must be between {PH_MIN} and {PH_MAX}")
        return value

    @field_validator("nutrients")
    @classmethod
    def _nutrients(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        for n in value:
            _check_choice(n, NUTRIENT_CHOICES, "nutrient")
        # keep selection order, drop repeats
        return tuple(dict.fromkeys(value))

    @property
    def is_complete(self) -> bool:
        return all((self.texture, self.moisture_level, self.water_availability, self.region))


class Crop(BaseModel):
    """Catalog entry. `water_tier` is what the scoring rules read; `water_requirement` is display text."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    scientific_name: str
    suitability_score: int
    yield_estimate: str
    profitability: str
    sustainability_score: int
    growing_season: str
    water_requirement: str
    water_tier: str
    reasons: Tuple[str, ...] = ()
    tips: Tuple[str, ...] = ()
    challenges: Tuple[str, ...] = ()

    @field_validator("suitability_score", "sustainability_score")
    @classmethod
    def _percent(cls, value: int) -> int:
        if not 0 <= value <= 100:
            raise ValueError("scores are percentages (0-100)")
        return value

    @field_validator("profitability")
    @classmethod
    def _profitability(cls, value: str) -> str:
        if value not in PROFITABILITY_TIERS:
            raise ValueError(f"profitability must be one of {PROFITABILITY_TIERS}")
        return value

    @field_validator("water_tier")
    @classmethod
    def _water_tier(cls, value: str) -> str:
        if value not in WATER_TIERS:
            raise ValueError(f"water tier must be one of {WATER_TIERS}")
        return value


class Adjustment(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    delta: int


class CropRecommendation(BaseModel):
    """A crop plus its profile-adjusted suitability score."""

    model_config = ConfigDict(frozen=True)

    crop: Crop
    adjusted_score: int
    adjustments: Tuple[Adjustment, ...] = ()

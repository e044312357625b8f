"""Soil-based crop advice: soil profile input, rule-based crop ranking, soil health tips."""
from .forms import submit_soil_form, validate_soil_form
from .models import CropRecommendation, SoilProfile
from .scoring import score_crops, soil_health_tips

__version__ = "0.1.0"

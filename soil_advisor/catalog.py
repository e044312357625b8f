"""Fixed crop catalog. Order matters: it breaks ties in the ranking."""
from .models import Crop

CROP_CATALOG = (
    Crop(
        key="corn",
        name="Corn (Maize)",
        scientific_name="Zea mays",
        suitability_score=85,
        yield_estimate="8-12 tons/hectare",
        profitability="High",
        sustainability_score=75,
        growing_season="Spring to Fall",
        water_requirement="Moderate to High",
        water_tier="High",
        reasons=("Tolerates wide pH range", "Adapts well to various soil textures", "High market demand"),
        tips=("Plant after soil temperature reaches 10°C", "Apply nitrogen fertilizer in split applications"),
        challenges=("Requires consistent water supply", "Susceptible to corn borer"),
    ),
    Crop(
        key="wheat",
        name="Wheat",
        scientific_name="Triticum aestivum",
        suitability_score=78,
        yield_estimate="4-6 tons/hectare",
        profitability="Medium",
        sustainability_score=85,
        growing_season="Fall to Summer",
        water_requirement="Low to Moderate",
        water_tier="Low",
        reasons=("Drought tolerant", "Good for crop rotation", "Stable market prices"),
        tips=("Ensure good drainage", "Monitor for fungal diseases in humid conditions"),
        challenges=("Price volatility", "Storage requirements"),
    ),
    Crop(
        key="soybeans",
        name="Soybeans",
        scientific_name="Glycine max",
        suitability_score=82,
        yield_estimate="2.5-4 tons/hectare",
        profitability="High",
        sustainability_score=90,
        growing_season="Spring to Fall",
        water_requirement="Moderate",
        water_tier="Moderate",
        reasons=("Fixes nitrogen in soil", "High protein content", "Growing export demand"),
        tips=("Inoculate seeds with rhizobia bacteria", "Rotate with cereals"),
        challenges=("Sensitive to waterlogged conditions", "Pest management required"),
    ),
)

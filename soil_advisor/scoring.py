"""
Rule-based crop scoring and soil-health tips.

Rules are grouped; inside a group only the first matching rule applies,
and the groups add up. Scores are clamped to 0-100 and crops are ranked
highest first, ties keeping catalog order.
"""
import logging
from collections import namedtuple
from typing import Iterator, List

from .catalog import CROP_CATALOG
from .models import Adjustment, CropRecommendation, SoilProfile

logger = logging.getLogger(__name__)

ScoreRule = namedtuple("ScoreRule", ["label", "applies", "delta"])

# ---------------- rule table ----------------
TEXTURE_RULES = (
    ScoreRule("Loamy soil", lambda soil, crop: soil.texture == "loamy", +5),
    ScoreRule("Clay soil suits wheat", lambda soil, crop: soil.texture == "clay" and crop.key == "wheat", +3),
    ScoreRule("Sandy soil stresses corn", lambda soil, crop: soil.texture == "sandy" and crop.key == "corn", -5),
)

PH_RULES = (
    ScoreRule("pH in optimal range (6.0-7.5)", lambda soil, crop: 6.0 <= soil.ph <= 7.5, +5),
    ScoreRule("pH outside tolerance (<5.5 or >8.0)", lambda soil, crop: soil.ph < 5.5 or soil.ph > 8.0, -10),
)

WATER_RULES = (
    ScoreRule(
        "Drought-prone land for a high-water crop",
        lambda soil, crop: soil.water_availability == "drought-prone" and crop.water_tier == "High",
        -15,
    ),
)

RULE_GROUPS = (TEXTURE_RULES, PH_RULES, WATER_RULES)

SCORE_MIN, SCORE_MAX = 0, 100


def adjust_crop(soil: SoilProfile, crop, rule_groups=RULE_GROUPS) -> CropRecommendation:
    score = crop.suitability_score
    hits = []
    for group in rule_groups:
        for rule in group:
            if rule.applies(soil, crop):
                score += rule.delta
                hits.append(Adjustment(label=rule.label, delta=rule.delta))
                break
    score = max(SCORE_MIN, min(SCORE_MAX, int(score)))
    return CropRecommendation(crop=crop, adjusted_score=score, adjustments=tuple(hits))


def score_crops(soil: SoilProfile, catalog=CROP_CATALOG, rule_groups=RULE_GROUPS) -> List[CropRecommendation]:
    """Rank every catalog crop for `soil`, best match first."""
    scored = [adjust_crop(soil, crop, rule_groups) for crop in catalog]
    # sorted() is stable with reverse=True, so equal scores keep catalog order
    ranked = sorted(scored, key=lambda rec: rec.adjusted_score, reverse=True)
    logger.debug("scored %s", [(r.crop.key, r.adjusted_score) for r in ranked])
    return ranked


# ---------------- soil health tips ----------------
def soil_health_tips(soil: SoilProfile) -> Iterator[str]:
    if soil.texture == "sandy":
        yield "Add organic compost to improve moisture retention and nutrient content"
    elif soil.texture == "clay":
        yield "Improve drainage by adding organic matter and avoiding compaction"

    if soil.ph < 6.0:
        yield "Consider lime application to raise pH for better nutrient availability"
    elif soil.ph > 8.0:
        yield "Add sulfur or organic matter to lower pH gradually"

    if soil.nutrients:
        yield f"Address nutrient deficiencies: {', '.join(soil.nutrients)}"

import pandas as pd

from .scoring import score_crops

REPORT_COLUMNS = [
    "rank", "crop", "scientific_name", "match_score", "base_score", "yield_estimate",
    "profitability", "sustainability", "water_requirement", "growing_season",
]


def recommendations_frame(soil) -> pd.DataFrame:
    """Ranked crops for `soil` as a table, one row per crop."""
    rows = []
    for rank, rec in enumerate(score_crops(soil), start=1):
        crop = rec.crop
        rows.append({
            "rank": rank,
            "crop": crop.name,
            "scientific_name": crop.scientific_name,
            "match_score": rec.adjusted_score,
            "base_score": crop.suitability_score,
            "yield_estimate": crop.yield_estimate,
            "profitability": crop.profitability,
            "sustainability": crop.sustainability_score,
            "water_requirement": crop.water_requirement,
            "growing_season": crop.growing_season,
        })
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def report_csv(soil) -> bytes:
    return recommendations_frame(soil).to_csv(index=False).encode("utf-8")

from dataclasses import dataclass
from typing import List, Optional

from .catalog import (
    CropCatalog, CropRecord,
    is_season_compatible, is_soil_compatible, is_temperature_compatible,
)

SEASON_WEIGHT = 40.0
SOIL_WEIGHT = 30.0
TEMPERATURE_WEIGHT = 30.0

@dataclass(frozen=True)
class Suitability:
    score: float
    season_ok: bool
    soil_ok: bool
    temperature_ok: bool

def temperature_fit(crop: CropRecord, temp: Optional[float]) -> float:
    """1.0 at the middle of [min_temp, max_temp], falling linearly to 0 at the bounds."""
    if temp is None:
        return 1.0
    half = (crop.max_temp - crop.min_temp) / 2.0
    if half == 0:
        return 1.0 if temp == crop.min_temp else 0.0
    mid = crop.min_temp + half
    return max(0.0, 1.0 - abs(temp - mid) / half)

def suitability(crop: CropRecord, soil: str, season: str, temp: Optional[float] = None) -> Suitability:
    season_ok = is_season_compatible(crop, season)
    soil_ok = is_soil_compatible(crop, soil)
    s = (SEASON_WEIGHT if season_ok else 0.0) \
        + (SOIL_WEIGHT if soil_ok else 0.0) \
        + TEMPERATURE_WEIGHT * temperature_fit(crop, temp)
    s = max(0.0, min(100.0, s))
    return Suitability(
        score=round(s, 2),
        season_ok=season_ok,
        soil_ok=soil_ok,
        temperature_ok=is_temperature_compatible(crop, temp),
    )

def rank(
    catalog: CropCatalog,
    soil: str,
    season: str,
    temp: Optional[float] = None,
    category: Optional[str] = None,
    limit: int = 5,
) -> List[tuple]:
    """(crop, Suitability) pairs, best first; equal scores keep catalog order."""
    crops = catalog.crops_by_category(category) if category else list(catalog)
    out = [(c, suitability(c, soil, season, temp)) for c in crops]
    out.sort(key=lambda x: x[1].score, reverse=True)
    return out[:limit]

def to_items(ranked: List[tuple]) -> List[dict]:
    return [{
        "cropId": c.id,
        "name": c.name,
        "category": c.category,
        "suitabilityScore": s.score,
        "harvestEstimateDays": c.growth_days,
        "marketPrice": c.market_price,
        "flags": {"seasonOk": s.season_ok, "soilOk": s.soil_ok, "temperatureOk": s.temperature_ok},
    } for c, s in ranked]

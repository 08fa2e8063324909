"""
Suitability & yield estimation.

`estimate` is a pure function of (catalog, FarmInput): no I/O, no shared state.
It either returns a complete EstimationResult or raises a single EstimatorError.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .catalog import CropCatalog, CropRecord, canonical_season
from .errors import DataGapWarning, InvalidInputError
from .scorer import Suitability, rank, suitability

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FarmInput:
    crop_id: str
    area_acres: float
    soil_type: str
    season: str
    region_temperature: Optional[float] = None
    cost_per_acre: Optional[float] = None


@dataclass(frozen=True)
class EstimationResult:
    crop_id: str
    suitability_score: float
    projected_yield: float
    projected_revenue: float
    projected_cost: float
    projected_profit: float
    harvest_estimate_days: int
    season_ok: bool
    soil_ok: bool
    temperature_ok: bool
    yield_estimated: bool = False
    data_gaps: Tuple[DataGapWarning, ...] = field(default_factory=tuple)


def _finite(name: str, value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(name, f"expected a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidInputError(name, "must be a finite number")
    return float(value)

def _soil(soil_type: str) -> str:
    if not isinstance(soil_type, str) or not soil_type.strip():
        raise InvalidInputError("soil_type", "must be a non-empty soil descriptor")
    return soil_type.strip()

def validate(farm: FarmInput) -> FarmInput:
    """Normalised copy of `farm`; raises InvalidInputError on malformed fields."""
    area = _finite("area_acres", farm.area_acres)
    if area is None or area <= 0:
        raise InvalidInputError("area_acres", f"must be > 0, got {farm.area_acres!r}")
    cost = _finite("cost_per_acre", farm.cost_per_acre)
    if cost is not None and cost < 0:
        raise InvalidInputError("cost_per_acre", f"must be >= 0, got {farm.cost_per_acre!r}")
    return FarmInput(
        crop_id=farm.crop_id,
        area_acres=area,
        soil_type=_soil(farm.soil_type),
        season=canonical_season(farm.season),
        region_temperature=_finite("region_temperature", farm.region_temperature),
        cost_per_acre=cost,
    )


def yield_per_acre(catalog: CropCatalog, crop: CropRecord) -> Tuple[float, Optional[DataGapWarning]]:
    """Catalog yield, or the category average when the record has none (0 if the
    whole category lacks yield data)."""
    if crop.avg_yield is not None:
        return crop.avg_yield, None
    fallback = catalog.category_average_yield(crop.category)
    if fallback is None:
        gap = DataGapWarning(
            crop_id=crop.id, field="avg_yield", fallback=0.0,
            message=f"No yield data for {crop.name} or any {crop.category}; projected yield is 0.",
        )
        return 0.0, gap
    gap = DataGapWarning(
        crop_id=crop.id, field="avg_yield", fallback=fallback,
        message=f"No yield data for {crop.name}; using the {crop.category} average of {fallback:g} per acre.",
    )
    return fallback, gap


def estimate(catalog: CropCatalog, farm: FarmInput) -> EstimationResult:
    farm = validate(farm)
    crop = catalog.get_crop(farm.crop_id)

    fit: Suitability = suitability(crop, farm.soil_type, farm.season, farm.region_temperature)

    per_acre, gap = yield_per_acre(catalog, crop)
    if gap is not None:
        logger.warning("%s", gap.message)

    projected_yield = farm.area_acres * per_acre
    projected_revenue = projected_yield * crop.market_price
    projected_cost = farm.area_acres * (farm.cost_per_acre or 0.0)
    if not (math.isfinite(projected_yield) and math.isfinite(projected_revenue)):
        raise InvalidInputError("area_acres", f"projection overflows for {farm.area_acres!r} acres")
    if not math.isfinite(projected_cost):
        raise InvalidInputError("cost_per_acre", f"projected cost overflows for {farm.cost_per_acre!r} per acre")

    return EstimationResult(
        crop_id=crop.id,
        suitability_score=fit.score,
        projected_yield=projected_yield,
        projected_revenue=projected_revenue,
        projected_cost=projected_cost,
        projected_profit=projected_revenue - projected_cost,
        harvest_estimate_days=crop.growth_days,
        season_ok=fit.season_ok,
        soil_ok=fit.soil_ok,
        temperature_ok=fit.temperature_ok,
        yield_estimated=gap is not None,
        data_gaps=(gap,) if gap is not None else (),
    )


def recommend(
    catalog: CropCatalog,
    soil_type: str,
    season: str,
    region_temperature: Optional[float] = None,
    category: Optional[str] = None,
    limit: int = 5,
) -> List[Tuple[CropRecord, Suitability]]:
    if limit < 1:
        raise InvalidInputError("limit", f"must be >= 1, got {limit!r}")
    return rank(
        catalog,
        _soil(soil_type),
        canonical_season(season),
        _finite("region_temperature", region_temperature),
        category=category,
        limit=limit,
    )

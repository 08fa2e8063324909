from .catalog import CropRecord
from .estimator import EstimationResult, FarmInput


def _fit_phrase(result: EstimationResult) -> str:
    if result.suitability_score >= 70:
        return "is a good fit"
    if result.suitability_score >= 40:
        return "is a workable fit"
    return "is a poor fit"

def summarize(crop: CropRecord, result: EstimationResult, farm: FarmInput) -> str:
    """Two plain sentences describing an estimate. Deterministic, no guarantees."""
    issues = []
    if not result.season_ok:
        issues.append(f"it is not grown in {farm.season}")
    if not result.soil_ok:
        issues.append(f"{farm.soil_type} soil is not among its preferred soils")
    if not result.temperature_ok:
        issues.append(f"{farm.region_temperature:g}°C is outside {crop.min_temp:g}–{crop.max_temp:g}°C")

    first = f"{crop.name} {_fit_phrase(result)} for {farm.soil_type} soil in {farm.season}"
    first += f" ({'; '.join(issues)})." if issues else "."

    if result.projected_yield > 0:
        second = (f"Harvest in about {result.harvest_estimate_days} days; "
                  f"expected {result.projected_yield:,.1f} units and ₹{result.projected_profit:,.0f} profit.")
    else:
        second = f"Harvest in about {result.harvest_estimate_days} days; yield data unavailable."
    if result.yield_estimated and result.projected_yield > 0:
        second = second[:-1] + " (estimated from similar crops)."
    return f"{first} {second}"

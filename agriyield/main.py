import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from agriyield.config import settings
from agriyield.schema import (
    CropOut, EstimateRequest, EstimateResponse,
    RecommendRequest, RecommendResponse, ReferenceResponse,
)
from agriyield.engine.catalog import CropCatalog, CropRecord, load_catalog
from agriyield.engine.crops import CATEGORIES, INDIAN_STATES, SEASONS, SOIL_TYPES
from agriyield.engine.errors import InvalidInputError, NotFoundError
from agriyield.engine.estimator import FarmInput, estimate, validate, recommend as rank_crops
from agriyield.engine.explainer import summarize
from agriyield.engine.scorer import to_items

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_title, version="0.1.0")
app.state.settings = settings
app.state.catalog = load_catalog(settings.crop_catalog_path)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins, allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"]
)

def get_catalog(request: Request) -> CropCatalog:
    return request.app.state.catalog

@app.exception_handler(NotFoundError)
async def _not_found(request: Request, exc: NotFoundError):
    logger.info("%s %s -> 404: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=404, content={"detail": str(exc)})

@app.exception_handler(InvalidInputError)
async def _invalid_input(request: Request, exc: InvalidInputError):
    logger.info("%s %s -> 422: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": exc.message, "field": exc.field})

def _crop_out(c: CropRecord) -> dict:
    return {
        "id": c.id,
        "name": c.name,
        "category": c.category,
        "seasons": list(c.viable_seasons),
        "soilTypes": list(c.viable_soil_types),
        "minTemp": c.min_temp,
        "maxTemp": c.max_temp,
        "waterRequirement": c.water_requirement,
        "growthDays": c.growth_days,
        "avgYield": c.avg_yield,
        "marketPrice": c.market_price,
        "image": c.image,
    }

@app.get("/health")
def health(catalog: CropCatalog = Depends(get_catalog)):
    return {"ok": True, "crops_loaded": len(catalog)}

@app.get("/crops", response_model=List[CropOut])
def list_crops(
    category: Optional[str] = Query(None),
    season: Optional[str] = Query(None),
    catalog: CropCatalog = Depends(get_catalog),
):
    crops = catalog.crops_by_category(category) if category else list(catalog)
    if season:
        allowed = {c.id for c in catalog.crops_by_season(season)}
        crops = [c for c in crops if c.id in allowed]
    return [_crop_out(c) for c in crops]

@app.get("/crops/{crop_id}", response_model=CropOut)
def get_crop(crop_id: str, catalog: CropCatalog = Depends(get_catalog)):
    return _crop_out(catalog.get_crop(crop_id))

@app.get("/reference", response_model=ReferenceResponse)
def reference():
    return {
        "seasons": SEASONS,
        "categories": CATEGORIES,
        "soilTypes": SOIL_TYPES,
        "states": INDIAN_STATES,
    }

@app.post("/estimate", response_model=EstimateResponse)
def estimate_crop(body: EstimateRequest, catalog: CropCatalog = Depends(get_catalog)):
    farm = validate(FarmInput(
        crop_id=body.cropId,
        area_acres=body.areaAcres,
        soil_type=body.soilType,
        season=body.season,
        region_temperature=body.regionTemperature,
        cost_per_acre=body.costPerAcre,
    ))
    result = estimate(catalog, farm)
    crop = catalog.get_crop(result.crop_id)

    return {
        "cropId": crop.id,
        "cropName": crop.name,
        "suitabilityScore": result.suitability_score,
        "projectedYield": result.projected_yield,
        "projectedRevenue": result.projected_revenue,
        "projectedCost": result.projected_cost,
        "projectedProfit": result.projected_profit,
        "harvestEstimateDays": result.harvest_estimate_days,
        "flags": {
            "seasonOk": result.season_ok,
            "soilOk": result.soil_ok,
            "temperatureOk": result.temperature_ok,
        },
        "yieldEstimated": result.yield_estimated,
        "dataGaps": [g.message for g in result.data_gaps],
        "summary": summarize(crop, result, farm),
    }

@app.post("/recommend", response_model=RecommendResponse)
def recommend(body: RecommendRequest, catalog: CropCatalog = Depends(get_catalog)):
    ranked = rank_crops(
        catalog,
        soil_type=body.soilType,
        season=body.season,
        region_temperature=body.regionTemperature,
        category=body.category,
        limit=body.limit or settings.recommend_limit,
    )
    return {"items": to_items(ranked)}

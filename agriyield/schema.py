from pydantic import BaseModel, Field
from typing import Literal, Optional, List

Season = Literal["Summer", "Monsoon", "Winter", "Spring"]
Category = Literal["fruits", "vegetables", "grains", "pulses"]

class EstimateRequest(BaseModel):
    cropId: str = Field(min_length=1)
    areaAcres: float
    soilType: str
    season: str
    regionTemperature: Optional[float] = None
    costPerAcre: Optional[float] = None

class CompatibilityFlags(BaseModel):
    seasonOk: bool
    soilOk: bool
    temperatureOk: bool

class EstimateResponse(BaseModel):
    cropId: str
    cropName: str
    suitabilityScore: float = Field(ge=0, le=100)
    projectedYield: float
    projectedRevenue: float
    projectedCost: float
    projectedProfit: float
    harvestEstimateDays: int
    flags: CompatibilityFlags
    yieldEstimated: bool = False
    dataGaps: List[str] = []
    summary: str = ""

class RecommendRequest(BaseModel):
    soilType: str
    season: str
    regionTemperature: Optional[float] = None
    category: Optional[Category] = None
    limit: Optional[int] = Field(default=None, ge=1, le=50)

class RecommendItem(BaseModel):
    cropId: str
    name: str
    category: Category
    suitabilityScore: float
    harvestEstimateDays: int
    marketPrice: float
    flags: CompatibilityFlags

class RecommendResponse(BaseModel):
    items: List[RecommendItem]

class CropOut(BaseModel):
    id: str
    name: str
    category: Category
    seasons: List[Season]
    soilTypes: List[str]
    minTemp: float
    maxTemp: float
    waterRequirement: Literal["low", "medium", "high"]
    growthDays: int
    avgYield: Optional[float] = None
    marketPrice: float
    image: str

class ReferenceResponse(BaseModel):
    seasons: List[str]
    categories: List[str]
    soilTypes: List[str]
    states: List[str]

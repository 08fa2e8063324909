# agriyield/config.py
import os
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from dotenv import load_dotenv

load_dotenv()

def _split(value: str) -> List[str]:
    return [v.strip() for v in value.split(",") if v.strip()]

class Settings(BaseModel):
    # env-derived defaults go through the same checks as explicit values
    model_config = ConfigDict(validate_default=True)

    app_title: str = os.getenv("APP_TITLE", "AgriYield - Crop Suitability & Profit Estimator")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # comma separated; "*" allows every origin
    cors_origins: List[str] = _split(os.getenv("CORS_ORIGINS", "*"))

    # JSON file with {"crops": [...]}; bundled catalog when unset
    crop_catalog_path: Optional[str] = os.getenv("CROP_CATALOG_PATH") or None

    recommend_limit: int = Field(default=int(os.getenv("RECOMMEND_LIMIT", "5")), ge=1)

settings = Settings()

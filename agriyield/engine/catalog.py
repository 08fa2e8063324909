import json
import logging
import re
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .crops import CATEGORIES, CROPS, SEASONS
from .errors import InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)

Category = Literal["fruits", "vegetables", "grains", "pulses"]
Season = Literal["Summer", "Monsoon", "Winter", "Spring"]
Water = Literal["low", "medium", "high"]


class CropRecord(BaseModel):
    """One catalog entry: agronomic requirements and economics of a crop."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    name: str
    category: Category
    viable_seasons: Tuple[Season, ...] = Field(alias="seasons", min_length=1)
    viable_soil_types: Tuple[str, ...] = Field(alias="soils", min_length=1)
    min_temp: float
    max_temp: float
    water_requirement: Water = Field(alias="water")
    growth_days: int = Field(gt=0)
    avg_yield: Optional[float] = Field(default=None, gt=0)
    market_price: float = Field(gt=0)
    image: str = ""

    @field_validator("viable_soil_types")
    @classmethod
    def _soils_not_blank(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if any(not s.strip() for s in v):
            raise ValueError("soil descriptors must not be blank")
        return v

    @model_validator(mode="after")
    def _temp_range(self):
        if self.min_temp > self.max_temp:
            raise ValueError(f"min_temp {self.min_temp} > max_temp {self.max_temp}")
        return self


# ---------- soil descriptor matching ----------
_SPLIT = re.compile(r"[^a-z0-9]+")
_CONNECTORS = frozenset({"and", "in", "of", "to", "ph", "range", "wide", "tolerant"})
_MIN_STEM = 4
_SHARED_STEM = 6

@lru_cache(maxsize=512)
def soil_tokens(descriptor: str) -> FrozenSet[str]:
    """'Well-drained Loamy/Sandy' -> {'well', 'drained', 'loamy', 'sandy'}"""
    return frozenset(
        t for t in _SPLIT.split(descriptor.lower())
        if t and not t.isdigit() and t not in _CONNECTORS
    )

def _tokens_match(a: str, b: str) -> bool:
    if a == b:
        return True
    short, long_ = (a, b) if len(a) <= len(b) else (b, a)
    if len(short) >= _MIN_STEM and long_.startswith(short):
        return True
    # laterite / lateritic
    return len(short) >= _SHARED_STEM and a[:_SHARED_STEM] == b[:_SHARED_STEM]

def _normalize(text: str) -> str:
    return " ".join(_SPLIT.split(text.lower())).strip()

def is_soil_compatible(crop: CropRecord, soil_type: str) -> bool:
    """True when the farm soil shares a token (or a stem) with any of the crop's
    descriptors, or appears whole-word inside one of them."""
    needle = _normalize(soil_type or "")
    if not needle:
        return False
    farm = soil_tokens(soil_type)
    for descriptor in crop.viable_soil_types:
        if len(needle) >= _MIN_STEM and f" {needle} " in f" {_normalize(descriptor)} ":
            return True
        if any(_tokens_match(a, b) for a in farm for b in soil_tokens(descriptor)):
            return True
    return False

def is_season_compatible(crop: CropRecord, season: str) -> bool:
    return season in crop.viable_seasons

def is_temperature_compatible(crop: CropRecord, temp: Optional[float]) -> bool:
    if temp is None:
        return True
    return crop.min_temp <= temp <= crop.max_temp


def canonical_season(season: str) -> str:
    """'winter' -> 'Winter'; unknown tags raise InvalidInputError."""
    key = (season or "").strip().lower()
    for s in SEASONS:
        if s.lower() == key:
            return s
    raise InvalidInputError("season", f"expected one of {', '.join(SEASONS)}, got {season!r}")

def canonical_category(category: str) -> str:
    key = (category or "").strip().lower()
    if key not in CATEGORIES:
        raise InvalidInputError("category", f"expected one of {', '.join(CATEGORIES)}, got {category!r}")
    return key


class CropCatalog:
    """Read-only, ordered set of crop records. Built once and shared."""

    def __init__(self, records: Iterable[CropRecord]):
        ordered = tuple(records)
        by_id: Dict[str, CropRecord] = {}
        for r in ordered:
            if r.id in by_id:
                raise ValueError(f"duplicate crop id {r.id!r}")
            by_id[r.id] = r
        self._records = ordered
        self._by_id = MappingProxyType(by_id)

    @classmethod
    def from_dicts(cls, rows: Iterable[dict]) -> "CropCatalog":
        return cls(CropRecord.model_validate(row) for row in rows)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CropRecord]:
        return iter(self._records)

    def __contains__(self, crop_id: object) -> bool:
        return crop_id in self._by_id

    def get_crop(self, crop_id: str) -> CropRecord:
        crop = self._by_id.get(crop_id)
        if crop is None:
            raise NotFoundError(crop_id)
        return crop

    def crops_by_category(self, category: str) -> List[CropRecord]:
        cat = canonical_category(category)
        return [c for c in self._records if c.category == cat]

    def crops_by_season(self, season: str) -> List[CropRecord]:
        tag = canonical_season(season)
        return [c for c in self._records if is_season_compatible(c, tag)]

    def categories(self) -> List[str]:
        present = {c.category for c in self._records}
        return [cat for cat in CATEGORIES if cat in present]

    def soil_descriptors(self) -> List[str]:
        seen: Dict[str, None] = {}
        for c in self._records:
            for s in c.viable_soil_types:
                seen.setdefault(s, None)
        return list(seen)

    def category_average_yield(self, category: str) -> Optional[float]:
        yields = [c.avg_yield for c in self._records if c.category == category and c.avg_yield is not None]
        if not yields:
            return None
        return sum(yields) / len(yields)


def load_catalog(path: Optional[str] = None) -> CropCatalog:
    """Bundled catalog, or the {"crops": [...]} JSON document at `path`."""
    if path:
        with open(Path(path), "r", encoding="utf-8") as f:
            rows = json.load(f)["crops"]
        source = str(path)
    else:
        rows = CROPS
        source = "bundled dataset"
    catalog = CropCatalog.from_dicts(rows)
    logger.info("Loaded %d crops from %s", len(catalog), source)
    return catalog

import json

import pytest

from agriyield.engine.catalog import (
    CropCatalog, CropRecord, load_catalog, soil_tokens,
    is_season_compatible, is_soil_compatible, is_temperature_compatible,
)
from agriyield.engine.errors import InvalidInputError, NotFoundError


def _row(**overrides):
    row = {"id": "x", "name": "X", "category": "grains", "seasons": ["Winter"], "soils": ["Loamy"],
           "min_temp": 10, "max_temp": 20, "water": "low", "growth_days": 90, "market_price": 10}
    row.update(overrides)
    return row


def test_bundled_catalog_loads_every_crop(catalog):
    assert len(catalog) == 38
    assert catalog.categories() == ["fruits", "vegetables", "grains", "pulses"]


def test_get_crop(catalog):
    wheat = catalog.get_crop("wheat")
    assert wheat.name == "Wheat"
    assert wheat.viable_seasons == ("Winter",)
    assert (wheat.min_temp, wheat.max_temp) == (10, 25)
    assert wheat.market_price == 27
    assert wheat.avg_yield == 3.2


def test_get_crop_unknown_raises_not_found(catalog):
    with pytest.raises(NotFoundError) as exc:
        catalog.get_crop("nonexistent")
    assert exc.value.crop_id == "nonexistent"


def test_crops_by_category_keeps_catalog_order(catalog):
    assert [c.id for c in catalog.crops_by_category("grains")] == ["wheat", "rice", "corn", "barley"]
    assert [c.id for c in catalog.crops_by_category("Pulses")] == ["chickpea", "lentil", "black-gram", "green-gram"]


def test_crops_by_category_unknown(catalog):
    with pytest.raises(InvalidInputError):
        catalog.crops_by_category("nuts")


def test_crops_by_season(catalog):
    assert [c.id for c in catalog.crops_by_season("spring")] == ["apple", "onion"]


def test_category_average_yield(catalog):
    assert catalog.category_average_yield("fruits") == pytest.approx((20 + 8 + 25) / 3)
    assert catalog.category_average_yield("grains") == pytest.approx(3.2)
    assert catalog.category_average_yield("pulses") is None


def test_soil_descriptors_are_unique(catalog):
    descriptors = catalog.soil_descriptors()
    assert len(descriptors) == len(set(descriptors))
    assert "Well-drained" in descriptors


@pytest.mark.parametrize("descriptor,expected", [
    ("Well-drained Loamy/Sandy", {"well", "drained", "loamy", "sandy"}),
    ("pH 6.0-7.5", set()),
    ("Wide range Loamy to Sandy", {"loamy", "sandy"}),
    ("Tolerant to salinity/alkalinity", {"salinity", "alkalinity"}),
    ("Sandy Loam Rich in Organics", {"sandy", "loam", "rich", "organics"}),
])
def test_soil_tokens(descriptor, expected):
    assert soil_tokens(descriptor) == frozenset(expected)


@pytest.mark.parametrize("crop_id,soil,expected", [
    ("wheat", "Loamy", True),
    ("wheat", "LOAMY", True),
    ("wheat", "Clay", True),            # clay / clayey
    ("potato", "Loamy", True),          # loam / loamy
    ("banana", "Well-drained Loamy", True),
    ("chickpea", "Black Soil", True),
    ("potato", "Red Soil", False),
    ("rice", "Desert Soil", False),
    ("wheat", "", False),
])
def test_is_soil_compatible(catalog, crop_id, soil, expected):
    assert is_soil_compatible(catalog.get_crop(crop_id), soil) is expected


def test_substring_match_respects_word_boundaries():
    crop = CropRecord.model_validate(_row(soils=["Well-drained"]))
    assert not is_soil_compatible(crop, "Rain")
    assert is_soil_compatible(crop, "well drained")


def test_shared_stem_matches(catalog):
    assert is_soil_compatible(catalog.get_crop("apple"), "Laterite")
    crop = CropRecord.model_validate(_row(soils=["Sandstone"]))
    # five shared letters are not enough
    assert not is_soil_compatible(crop, "Sandy")


def test_short_tokens_need_exact_match():
    crop = CropRecord.model_validate(_row(soils=["Redish Loam"]))
    assert not is_soil_compatible(crop, "Red")
    assert is_soil_compatible(crop, "Loam")


def test_is_season_compatible(catalog):
    wheat = catalog.get_crop("wheat")
    assert is_season_compatible(wheat, "Winter")
    assert not is_season_compatible(wheat, "Summer")


def test_is_temperature_compatible(catalog):
    wheat = catalog.get_crop("wheat")
    assert is_temperature_compatible(wheat, 10)
    assert is_temperature_compatible(wheat, 25)
    assert is_temperature_compatible(wheat, None)
    assert not is_temperature_compatible(wheat, 9.9)
    assert not is_temperature_compatible(wheat, 30)


@pytest.mark.parametrize("overrides", [
    {"min_temp": 30, "max_temp": 20},
    {"seasons": []},
    {"soils": []},
    {"soils": ["  "]},
    {"seasons": ["Autumn"]},
    {"category": "nuts"},
    {"market_price": 0},
    {"growth_days": 0},
    {"avg_yield": -1},
])
def test_invalid_records_are_rejected(overrides):
    with pytest.raises(ValueError):
        CropCatalog.from_dicts([_row(**overrides)])


def test_duplicate_ids_are_rejected():
    with pytest.raises(ValueError):
        CropCatalog.from_dicts([_row(), _row()])


def test_records_are_immutable(catalog):
    with pytest.raises(Exception):
        catalog.get_crop("wheat").market_price = 1


def test_load_catalog_from_json(tmp_path):
    path = tmp_path / "crops.json"
    path.write_text(json.dumps({"crops": [_row(id="sorghum", name="Sorghum")]}), encoding="utf-8")
    catalog = load_catalog(str(path))
    assert len(catalog) == 1
    assert "sorghum" in catalog

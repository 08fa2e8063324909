import pytest

from agriyield.engine.catalog import CropCatalog, load_catalog


@pytest.fixture(scope="session")
def catalog() -> CropCatalog:
    return load_catalog()


@pytest.fixture
def small_catalog() -> CropCatalog:
    return CropCatalog.from_dicts([
        {"id": "wheat", "name": "Wheat", "category": "grains", "seasons": ["Winter"],
         "soils": ["Loamy/Clayey", "Well-drained"], "min_temp": 10, "max_temp": 25, "water": "medium",
         "growth_days": 115, "avg_yield": 3.2, "market_price": 27},
        {"id": "millet", "name": "Millet", "category": "grains", "seasons": ["Summer", "Monsoon"],
         "soils": ["Sandy"], "min_temp": 25, "max_temp": 35, "water": "low",
         "growth_days": 80, "market_price": 30},
        {"id": "moong", "name": "Moong", "category": "pulses", "seasons": ["Summer"],
         "soils": ["Sandy Loam"], "min_temp": 20, "max_temp": 40, "water": "low",
         "growth_days": 65, "market_price": 80},
    ])

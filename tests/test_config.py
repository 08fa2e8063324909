import importlib

import pytest
from pydantic import ValidationError

from agriyield import config
from agriyield.config import Settings


def test_recommend_limit_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(recommend_limit=0)
    assert Settings(recommend_limit=3).recommend_limit == 3


def test_recommend_limit_from_env_is_checked_at_load(monkeypatch):
    monkeypatch.setenv("RECOMMEND_LIMIT", "0")
    try:
        with pytest.raises(ValidationError):
            importlib.reload(config)
    finally:
        monkeypatch.delenv("RECOMMEND_LIMIT")
        importlib.reload(config)
    assert config.settings.recommend_limit >= 1

import pytest

from discovery.models import RecommendationConfig
from discovery.settings import reset_settings

from helpers import NOW


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def config():
    return RecommendationConfig()


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for key in (
        "DISCOVERY_DATA_PATH",
        "DISCOVERY_PROFILES_PATH",
        "DISCOVERY_CONFIG_PATH",
        "DISCOVERY_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()

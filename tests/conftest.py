# tests/conftest.py
import pytest
import logging

from fastapi.testclient import TestClient

from app.main import app
from app.services.district_registry import DistrictRegistry
from app.services.favorites import InMemoryFavoritesStore, favorites_store


@pytest.fixture(scope="session", autouse=True)
def initialize_test_logger():
    """테스트 로거 초기화"""
    logger = logging.getLogger()
    logger.setLevel("INFO")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="[%(levelname)5s][%(filename)s:%(lineno)s] %(message)s",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


# === Service Fixtures ===
@pytest.fixture
def registry():
    """District Registry"""
    return DistrictRegistry()


@pytest.fixture
def store(registry):
    """비어 있는 Favorites Store"""
    return InMemoryFavoritesStore(registry=registry)


# === API Fixtures ===
@pytest.fixture
def client():
    """FastAPI 테스트 클라이언트"""
    favorites_store.clear()
    with TestClient(app) as test_client:
        yield test_client
    favorites_store.clear()


# === 테스트 데이터 ===
@pytest.fixture
def sample_daily():
    """2024-05-06(월) ~ 2024-05-19(일) 2주치 일별 집계"""
    return [
        {"districtId": "11680", "periodStartDate": "2024-05-06", "totalAvg": 100},
        {"districtId": "11680", "periodStartDate": "2024-05-07", "totalAvg": 210},
        {"districtId": "11680", "periodStartDate": "2024-05-11", "totalAvg": 50},
        {"districtId": "11680", "periodStartDate": "2024-05-13", "totalAvg": 200},
        {"districtId": "11680", "periodStartDate": "2024-05-19", "totalAvg": 75},
    ]


@pytest.fixture
def sample_weekly():
    """주차 라벨이 뒤섞인 주간 집계"""
    return [
        {"weekPeriod": "W3", "totalAvg": 30},
        {"weekPeriod": "W1", "totalAvg": 10},
        {"weekPeriod": "W2", "totalAvg": 20},
    ]

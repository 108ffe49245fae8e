"""
Shared test fixtures — engine config, estimator, a small price catalog, test client.
"""

import pytest
from fastapi.testclient import TestClient

from print_estimator.catalog import entry_from_raw
from print_estimator.engine.config import EngineConfig
from print_estimator.engine.estimator import PrintEstimator
from print_estimator.engine.evaluator import PriceEvaluator
from print_estimator.main import app


# Rows in the shop's own price-list format
CATALOG_ROWS = [
    {"kategori": "Kartvizit", "ebat": "8.6x5.4 cm", "kod": "KV1",
     "aciklama": "350 gr Mat Kuşe - Tek Yön", "miktar": "1.000 Adet", "fiyat": "550 ₺"},
    {"kategori": "Broşür", "ebat": "9.5x20 cm", "kod": "1CA7",
     "aciklama": "115 gr Kuşe - Çift Yön", "miktar": "1.000 Adet", "fiyat": "1.250 ₺"},
    {"kategori": "Broşür", "ebat": "20x28 cm", "kod": "1CA4",
     "aciklama": "115 gr Kuşe - Çift Yön", "miktar": "1.000 Adet", "fiyat": "2.100 ₺"},
    {"kategori": "Broşür", "ebat": "9.5x20 cm", "kod": "1CA7-2",
     "aciklama": "115 gr Kuşe - Çift Yön", "miktar": "2.000 Adet", "fiyat": "1.900 ₺"},
    {"kategori": "Broşür", "ebat": "9.5x20 cm", "kod": "2CA7",
     "aciklama": "128 gr Kuşe - Çift Yön", "miktar": "1.000 Adet", "fiyat": "1.150 ₺"},
    {"kategori": "Broşür", "ebat": "20x28 cm", "kod": "2CA4",
     "aciklama": "128 gr Kuşe - Çift Yön", "miktar": "1.000 Adet", "fiyat": "1.950 ₺"},
    {"kategori": "Magnet", "ebat": "Özel Ebat", "kod": "MGN",
     "aciklama": "Özel Ebat Magnet - Mm2 Fiyatı", "miktar": "1.000 Adet", "fiyat": "0,21 ₺"},
    {"kategori": "Magnet", "ebat": "4.6x6.8 cm", "kod": "MG1",
     "aciklama": "Standart Magnet - Kesimli", "miktar": "1.000 Adet", "fiyat": "1.400 ₺"},
    {"kategori": "Zarf", "ebat": "11.4x22 cm", "kod": "Z1",
     "aciklama": "Diplomat Zarf - 1 Renk", "miktar": "1.000 Adet", "fiyat": "1.800 ₺"},
]


def make_entry(category="Kartvizit", size="8.6x5.4 cm", code="KV1",
               description="350 gr Mat Kuşe - Tek Yön", quantity="1.000 Adet", price="550 ₺"):
    """Single catalog entry in the raw price-list format."""
    return entry_from_raw({
        "kategori": category,
        "ebat": size,
        "kod": code,
        "aciklama": description,
        "miktar": quantity,
        "fiyat": price,
    })


@pytest.fixture
def config():
    return EngineConfig()


@pytest.fixture
def evaluator(config):
    return PriceEvaluator(config)


@pytest.fixture
def estimator(config):
    return PrintEstimator(config)


@pytest.fixture
def catalog():
    return [entry_from_raw(row) for row in CATALOG_ROWS]


@pytest.fixture
def client():
    """FastAPI test client (uses the bundled data/catalog.json)."""
    return TestClient(app)

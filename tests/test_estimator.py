"""
End-to-end engine tests — compute_options(catalog, request).

Tests:
1-4.   Reference scenarios (exact card, 2×2 card, oversize card, custom magnet)
5-9.   Input validation and error kinds
10-14. Properties (idempotence, symmetry, non-negative prices, ranking, tiers)
15-18. Request bounds (oversized sizes and quantities, extreme valid input)
"""

import pytest

from print_estimator.engine.config import EngineConfig, PricingStrategy
from print_estimator.engine.estimator import InvalidInputError, validate_request
from print_estimator.schemas import ErrorKind, EstimateRequest


def _request(w, h, category="Kartvizit", quantity=1000):
    return EstimateRequest(width_mm=w, height_mm=h, category=category, quantity=quantity)


# ============================================================
# Reference scenarios
# ============================================================

def test_exact_business_card(estimator, catalog):
    results, error = estimator.compute_options(catalog, _request(86, 54))
    assert error is None
    assert len(results) == 1
    result = results[0]
    assert result.paper_type_name == "350 gr Mat Kuşe"
    assert result.strategy == PricingStrategy.MULTIPLIER
    assert result.multiplier == 1
    assert result.is_standard_fit is True
    assert result.price == 550
    assert result.formatted_price == "₺550"
    assert result.matched_entry.code == "KV1"
    assert result.size_suggestion is None


def test_double_business_card(estimator, catalog):
    results, error = estimator.compute_options(catalog, _request(172, 108))
    assert error is None
    assert results[0].multiplier == 4
    assert results[0].is_standard_fit is True
    assert results[0].price == 2200


def test_oversize_business_card_gets_snap(estimator, catalog):
    results, error = estimator.compute_options(catalog, _request(90, 54))
    assert error is None
    result = results[0]
    assert result.is_standard_fit is False
    assert result.needs_cut is True
    assert result.multiplier == 2
    suggestion = result.size_suggestion
    assert suggestion is not None
    assert (suggestion.width_mm, suggestion.height_mm) == (86, 54)
    assert suggestion.price < result.price or suggestion.is_same_price


def test_custom_magnet(estimator, catalog):
    results, error = estimator.compute_options(catalog, _request(100, 150, "Magnet", 2000))
    assert error is None
    assert len(results) == 1
    result = results[0]
    assert result.paper_type_name == "Özel Ebat Magnet"
    assert result.strategy == PricingStrategy.FORMULA
    assert result.price == pytest.approx(6300)
    assert result.is_standard_fit is False
    assert result.size_suggestion is None
    assert result.prev_quantity_suggestion.quantity == 1000
    assert result.prev_quantity_suggestion.price == pytest.approx(3150)
    assert result.next_quantity_suggestion.quantity == 4000
    assert result.next_quantity_suggestion.price == pytest.approx(12600)


# ============================================================
# Validation and errors
# ============================================================

@pytest.mark.parametrize("width, height, quantity", [
    (None, 54, 1000),
    (86, None, 1000),
    ("abc", 54, 1000),
    (0, 54, 1000),
    (-86, 54, 1000),
    (86, 54, 0),
    (86, 54, None),
    (86, 54, "many"),
    ("nan", 54, 1000),
])
def test_invalid_input(estimator, catalog, width, height, quantity):
    results, error = estimator.compute_options(catalog, _request(width, height, quantity=quantity))
    assert results == []
    assert error.kind == ErrorKind.INVALID_INPUT


def test_validate_request_accepts_strings():
    job = validate_request({"width_mm": "86,5", "height_mm": " 54 ", "category": "Kartvizit",
                            "quantity": "2000"})
    assert job.width_mm == 86.5
    assert job.height_mm == 54
    assert job.quantity == 2000


def test_validate_request_raises_on_bad_input():
    with pytest.raises(InvalidInputError):
        validate_request({"width_mm": 86, "height_mm": 54, "category": "Kartvizit", "quantity": -1})


def test_unknown_category_no_results(estimator, catalog):
    results, error = estimator.compute_options(catalog, _request(86, 54, "Afiş"))
    assert results == []
    assert error.kind == ErrorKind.NO_RESULTS


def test_unpriceable_category_no_results(estimator, catalog):
    """Envelopes are in the catalog but have no pricing strategy."""
    results, error = estimator.compute_options(catalog, _request(114, 220, "Zarf"))
    assert results == []
    assert error.kind == ErrorKind.NO_RESULTS


def test_empty_catalog_no_results(estimator):
    results, error = estimator.compute_options([], _request(86, 54))
    assert error.kind == ErrorKind.NO_RESULTS


# ============================================================
# Properties
# ============================================================

def test_idempotent(estimator, catalog):
    first, _ = estimator.compute_options(catalog, _request(90, 56, quantity=3000))
    second, _ = estimator.compute_options(catalog, _request(90, 56, quantity=3000))
    assert [r.model_dump() for r in first] == [r.model_dump() for r in second]


def test_swapping_width_and_height(estimator, catalog):
    for w, h in [(86, 54), (172, 108), (90, 54), (60, 40)]:
        a, _ = estimator.compute_options(catalog, _request(w, h))
        b, _ = estimator.compute_options(catalog, _request(h, w))
        assert a[0].is_standard_fit == b[0].is_standard_fit
        assert a[0].multiplier == b[0].multiplier


def test_prices_non_negative_and_multiplier_at_least_one(estimator, catalog):
    for category in ("Kartvizit", "Broşür"):
        for w, h in [(86, 54), (95, 200), (33, 47), (210, 297), (148, 210)]:
            for quantity in (1000, 2000, 5000):
                results, error = estimator.compute_options(catalog, _request(w, h, category, quantity))
                assert error is None
                for r in results:
                    assert r.price >= 0
                    assert r.multiplier >= 1


def test_brochure_ranking_pins_115(estimator, catalog):
    """128 gr is cheaper (1150) but 115 gr (1250) is listed first."""
    results, error = estimator.compute_options(catalog, _request(95, 200, "Broşür"))
    assert error is None
    assert [r.paper_type_name for r in results] == ["115 gr Kuşe", "128 gr Kuşe"]
    assert results[0].price == 1250
    assert results[1].price == 1150


def test_2000_proposes_4000(estimator, catalog):
    results, _ = estimator.compute_options(catalog, _request(86, 54, quantity=2000))
    assert results[0].next_quantity_suggestion.quantity == 4000
    assert results[0].prev_quantity_suggestion.quantity == 1000


def test_catalog_not_mutated(estimator, catalog):
    before = [e.model_dump() for e in catalog]
    estimator.compute_options(catalog, _request(90, 54))
    assert [e.model_dump() for e in catalog] == before


# ============================================================
# Request bounds
# ============================================================

@pytest.mark.parametrize("width, height, category, quantity", [
    ("1e200", "1e200", "Kartvizit", 1000),
    ("1e308", 91, "Broşür", 2000),
    (10001, 54, "Kartvizit", 1000),
    (86, 10001, "Kartvizit", 1000),
    ("inf", 54, "Kartvizit", 1000),
    (90, 54, "Kartvizit", "1e300"),
    (90, 54, "Kartvizit", 200001),
    (90, 54, "Kartvizit", "inf"),
])
def test_out_of_range_input_is_invalid(estimator, catalog, width, height, category, quantity):
    """Huge but finite sizes and quantities are rejected before any pricing runs."""
    results, error = estimator.compute_options(catalog, _request(width, height, category, quantity))
    assert results == []
    assert error.kind == ErrorKind.INVALID_INPUT


@pytest.mark.parametrize("width, height, category, quantity", [
    (10000, 54, "Kartvizit", 1000),
    (10000, 10000, "Broşür", 2000),
    (90, 54, "Kartvizit", 200000),
    (9999.9, 0.01, "Kartvizit", 199999),
    (10000, 10000, "Magnet", 200000),
])
def test_extreme_valid_input_never_raises(estimator, catalog, width, height, category, quantity):
    results, error = estimator.compute_options(catalog, _request(width, height, category, quantity))
    assert results or error is not None
    for r in results:
        assert r.price >= 0


def test_largest_allowed_job_is_priced(estimator, catalog):
    results, error = estimator.compute_options(catalog, _request(10000, 54, quantity=200000))
    assert error is None
    assert results[0].multiplier >= 1


def test_validate_request_uses_config_limits():
    config = EngineConfig(max_dimension_mm=500, max_quantity_factor=1)
    assert config.max_quantity == 20000
    job = validate_request({"width_mm": 500, "height_mm": 54, "category": "Kartvizit",
                            "quantity": 20000}, config)
    assert job.quantity == 20000
    with pytest.raises(InvalidInputError):
        validate_request({"width_mm": 600, "height_mm": 54, "category": "Kartvizit",
                          "quantity": 1000}, config)
    with pytest.raises(InvalidInputError):
        validate_request({"width_mm": 86, "height_mm": 54, "category": "Kartvizit",
                          "quantity": 20001}, config)

"""
Ranker tests — 115 gr brochures pinned first, then ascending price.
"""

from print_estimator.engine.config import PricingStrategy
from print_estimator.engine.ranking import is_pinned, rank_results
from print_estimator.formatting import format_price
from print_estimator.schemas import CalculationResult

from conftest import make_entry


def _result(paper_type, price, category="Broşür"):
    return CalculationResult(
        paper_type_name=paper_type,
        strategy=PricingStrategy.MULTIPLIER,
        matched_entry=make_entry(category=category, description=f"{paper_type} - Çift Yön"),
        price=price,
        formatted_price=format_price(price),
        is_standard_fit=True,
        needs_cut=False,
        multiplier=1,
    )


def test_115_brochure_pinned_above_cheaper_results(config):
    results = [_result("128 gr Kuşe", 1150), _result("170 gr Kuşe", 900), _result("115 gr Kuşe", 1250)]
    ranked = rank_results(results, config)
    assert [r.paper_type_name for r in ranked] == ["115 gr Kuşe", "170 gr Kuşe", "128 gr Kuşe"]


def test_115_outside_brochures_not_pinned(config):
    results = [_result("115 gr Kuşe", 1250, category="El İlanı"), _result("80 gr Hamur", 600, category="El İlanı")]
    ranked = rank_results(results, config)
    assert [r.paper_type_name for r in ranked] == ["80 gr Hamur", "115 gr Kuşe"]
    assert not is_pinned(results[0], config)


def test_ranking_is_stable_for_ties(config):
    results = [_result("A", 500), _result("B", 500), _result("C", 400)]
    ranked = rank_results(results, config)
    assert [r.paper_type_name for r in ranked] == ["C", "A", "B"]


def test_ranking_does_not_mutate_input(config):
    results = [_result("B", 900), _result("A", 100)]
    rank_results(results, config)
    assert [r.paper_type_name for r in results] == ["B", "A"]

"""
Print estimator — the engine's single entry point.

    compute_options(catalog, request) → (ranked results, error or None)

Pipeline per request:
    validate → group by paper type → best candidate per group
    → size-snap + quantity-tier suggestions → rank

Pure computation over an immutable catalog. No state survives a call,
so one PrintEstimator can serve concurrent requests without locking.
Every outcome is a result list or one of two error kinds; nothing raises
past compute_options.
"""

import logging
import math
from typing import Optional, Union

from pydantic import ValidationError

from .config import EngineConfig
from .evaluator import PriceEvaluator
from .grouping import group_entries
from .ranking import rank_results
from .selector import select_best
from .suggestions import SuggestionEngine
from ..formatting import format_price
from ..schemas import (
    CalculationResult, CatalogEntry, ErrorKind, EstimateError, EstimateRequest, PrintJob,
)

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Please enter a valid size and quantity."
NO_RESULTS_MESSAGE = "No results match these criteria. Try a different size or quantity."


class InvalidInputError(ValueError):
    """Raised when width, height or quantity is missing, unparseable or not positive."""


def _parse_positive(value, field: str) -> float:
    if value is None or isinstance(value, bool):
        raise InvalidInputError(f"{field} is required")
    try:
        number = float(str(value).strip().replace(",", "."))
    except (ValueError, TypeError):
        raise InvalidInputError(f"{field} is not a number: {value!r}")
    if not math.isfinite(number) or number <= 0:
        raise InvalidInputError(f"{field} must be positive, got {value!r}")
    return number


def _check_limit(number, limit, field: str):
    if number > limit:
        raise InvalidInputError(f"{field} exceeds the maximum of {limit}, got {number!r}")


def validate_request(request: Union[EstimateRequest, dict],
                     config: Optional[EngineConfig] = None) -> PrintJob:
    """
    Turn a raw request into a PrintJob. Accepts numbers or strings
    ('86,5' → 86.5). Sizes above config.max_dimension_mm and quantities
    above config.max_quantity are rejected. Raises InvalidInputError.
    """
    config = config or EngineConfig()
    if isinstance(request, dict):
        try:
            request = EstimateRequest(**request)
        except ValidationError as e:
            raise InvalidInputError(str(e))

    width = _parse_positive(request.width_mm, "width_mm")
    height = _parse_positive(request.height_mm, "height_mm")
    _check_limit(width, config.max_dimension_mm, "width_mm")
    _check_limit(height, config.max_dimension_mm, "height_mm")

    quantity = _parse_positive(request.quantity, "quantity")
    _check_limit(quantity, config.max_quantity, "quantity")
    quantity = int(quantity)
    if quantity <= 0:
        raise InvalidInputError(f"quantity must be a positive integer, got {request.quantity!r}")

    return PrintJob(
        width_mm=width,
        height_mm=height,
        category=(request.category or "").strip(),
        quantity=quantity,
    )


class PrintEstimator:
    """
    Finds the cheapest way to print a job from the catalog, per paper type.
    """

    def __init__(self, config: EngineConfig):
        self.config = config
        self.evaluator = PriceEvaluator(config)
        self.suggestions = SuggestionEngine(config, self.evaluator)

    def compute_options(self, catalog: list[CatalogEntry],
                        request: Union[EstimateRequest, dict],
                        ) -> tuple[list[CalculationResult], Optional[EstimateError]]:
        """
        Ranked CalculationResults (one per priceable paper type) and an error.

        invalid_input — reported before any computation.
        no_results    — valid input but nothing in the category could be priced.
        """
        try:
            job = validate_request(request, self.config)
        except InvalidInputError as e:
            logger.info("Rejected estimate request: %s", e)
            return [], EstimateError(kind=ErrorKind.INVALID_INPUT, message=INVALID_INPUT_MESSAGE)

        results = []
        for paper_type, entries in group_entries(catalog, job.category, self.config).items():
            result = self._calculate_group(paper_type, entries, job)
            if result is None:
                logger.debug("Paper type %r produced no price", paper_type)
                continue
            results.append(result)

        if not results:
            logger.info("No results for %s %.1fx%.1f mm × %d",
                        job.category, job.width_mm, job.height_mm, job.quantity)
            return [], EstimateError(kind=ErrorKind.NO_RESULTS, message=NO_RESULTS_MESSAGE)

        logger.info("Priced %s %.1fx%.1f mm × %d: %d paper types",
                    job.category, job.width_mm, job.height_mm, job.quantity, len(results))
        return rank_results(results, self.config), None

    def _calculate_group(self, paper_type: str, entries: list[CatalogEntry],
                         job: PrintJob) -> Optional[CalculationResult]:
        best = select_best(entries, job.width_mm, job.height_mm, job.quantity, self.evaluator)
        if best is None:
            return None
        outcome, matched = best

        size_suggestion = self.suggestions.suggest_size(entries, job, outcome)
        prev_qty, next_qty = self.suggestions.suggest_quantities(entries, job)

        return CalculationResult(
            paper_type_name=paper_type,
            strategy=outcome.strategy,
            matched_entry=matched,
            price=outcome.price,
            formatted_price=format_price(outcome.price),
            is_standard_fit=outcome.is_standard_fit,
            needs_cut=outcome.needs_cut,
            multiplier=outcome.multiplier,
            quantity_ratio=outcome.quantity_ratio,
            base_dims=outcome.base_dims,
            size_suggestion=size_suggestion,
            prev_quantity_suggestion=prev_qty,
            next_quantity_suggestion=next_qty,
        )

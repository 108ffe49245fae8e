from pydantic import BaseModel
from typing import Optional, List, Union
import enum

from .engine.config import PricingStrategy


class CatalogEntry(BaseModel):
    """One priced offering from the catalog. Labels raw, numbers parsed once at load."""
    category: str
    size_label: str = ""
    code: str = ""
    description: str = ""
    quantity_label: str = ""
    price_label: str = ""
    quantity_tier: Optional[int] = None
    unit_price: float = 0.0
    size_cm: Optional[tuple[float, float]] = None

    class Config:
        frozen = True


class EstimateRequest(BaseModel):
    """Raw request as typed by the customer. Validated by the engine, not here."""
    width_mm: Union[float, str, None] = None
    height_mm: Union[float, str, None] = None
    category: str = ""
    quantity: Union[int, float, str, None] = None


class PrintJob(BaseModel):
    width_mm: float
    height_mm: float
    category: str
    quantity: int

    class Config:
        frozen = True


class BaseDims(BaseModel):
    width_mm: float
    height_mm: float

    class Config:
        frozen = True


class PriceOutcome(BaseModel):
    price: float
    strategy: PricingStrategy
    needs_cut: bool
    multiplier: Optional[int] = None
    quantity_ratio: Optional[float] = None
    base_dims: Optional[BaseDims] = None

    class Config:
        frozen = True

    @property
    def is_standard_fit(self) -> bool:
        return not self.needs_cut


class SizeSuggestion(BaseModel):
    width_mm: float
    height_mm: float
    price: float
    formatted_price: str
    saving_amount: float
    formatted_saving: str
    saving_percent: int = 0
    is_same_price: bool = False
    waste_width_mm: Optional[float] = None
    waste_height_mm: Optional[float] = None
    waste_label: str = ""


class QuantitySuggestion(BaseModel):
    quantity: int
    price: float
    formatted_price: str


class CalculationResult(BaseModel):
    paper_type_name: str
    strategy: PricingStrategy
    matched_entry: CatalogEntry
    price: float
    formatted_price: str
    is_standard_fit: bool
    needs_cut: bool
    multiplier: Optional[int] = None
    quantity_ratio: Optional[float] = None
    base_dims: Optional[BaseDims] = None
    size_suggestion: Optional[SizeSuggestion] = None
    prev_quantity_suggestion: Optional[QuantitySuggestion] = None
    next_quantity_suggestion: Optional[QuantitySuggestion] = None


class ErrorKind(str, enum.Enum):
    INVALID_INPUT = "invalid_input"
    NO_RESULTS = "no_results"


class EstimateError(BaseModel):
    kind: ErrorKind
    message: str


class EstimateResponse(BaseModel):
    results: List[CalculationResult] = []
    error: Optional[EstimateError] = None

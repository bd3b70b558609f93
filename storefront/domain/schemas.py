# storefront/domain/schemas.py
import math
import re
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def to_int(val: Any) -> int:
    """
    Lenient integer cast for form-style input: "3" -> 3, "3 pcs" -> 3,
    "abc" / "" / None / inf / nan -> 0. Clamping is left to the services.
    """
    if isinstance(val, (bool, int)):
        return int(val)
    if isinstance(val, float):
        return int(val) if math.isfinite(val) else 0
    if val is None:
        return 0
    m = _LEADING_INT.match(str(val))
    return int(m.group(1)) if m else 0


class ItemIn(BaseModel):
    """Schema for adding a product to the cart."""

    product_id: int = 0
    quantity: int = 1

    @field_validator("product_id", "quantity", mode="before")
    @classmethod
    def coerce_int(cls, v):
        return to_int(v)


class UpdateCartIn(BaseModel):
    """Schema for the positional cart update. None keeps the line as is."""

    quantities: List[Optional[int]] = Field(default_factory=list)

    @field_validator("quantities", mode="before")
    @classmethod
    def coerce_quantities(cls, v):
        if not isinstance(v, list):
            return []
        return [None if q is None else to_int(q) for q in v]


class SetQuantitiesIn(BaseModel):
    """Schema for updating the cart by product id."""

    quantities: Dict[int, int] = Field(default_factory=dict)

    @field_validator("quantities", mode="before")
    @classmethod
    def coerce_quantities(cls, v):
        if not isinstance(v, dict):
            return {}
        return {to_int(k): to_int(q) for k, q in v.items()}


class ReviewIn(BaseModel):
    """Schema for a new review."""

    author: str = ""
    rating: int = 5
    text: str = ""

    @field_validator("rating", mode="before")
    @classmethod
    def coerce_rating(cls, v):
        return to_int(v)

    @field_validator("author", "text", mode="before")
    @classmethod
    def coerce_text(cls, v):
        return "" if v is None else str(v)


class ProductOut(BaseModel):
    """Catalog card."""

    id: int
    name: str
    display_name: str
    category: str
    price: Decimal
    discounted_price: Decimal | None = None
    summary: str
    image: str


class DiscountedProductOut(BaseModel):
    id: int
    display_name: str
    category: str
    price: Decimal
    discounted_price: Decimal
    summary: str
    image: str


class ReviewOut(BaseModel):
    author: str
    rating: int
    stars: str
    text: str


class ProductDetailOut(BaseModel):
    """Product page: full description plus the session's reviews."""

    id: int
    name: str
    category: str
    price: Decimal
    description: str
    image: str
    reviews: List[ReviewOut]


class CartItemOut(BaseModel):
    product_id: int
    name: str
    display_name: str
    price: Decimal
    quantity: int
    line_subtotal: Decimal
    line_total: Decimal


class CartOut(BaseModel):
    items: List[CartItemOut]
    item_count: int
    subtotal: Decimal
    tax: Decimal
    total: Decimal


class InventoryItemOut(BaseModel):
    id: int
    name: str
    category: str
    price: Decimal


class DescriptionAnalysisOut(BaseModel):
    char_count: int
    word_count: int
    keyword: str
    keyword_found: bool


class ReviewProcessingOut(BaseModel):
    preview: str
    word: str
    position: int | None
    updated_review: str


class ReportsOut(BaseModel):
    merged_inventory: List[InventoryItemOut]
    description_analysis: DescriptionAnalysisOut
    review_processing: ReviewProcessingOut

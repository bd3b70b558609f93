# storefront/data/models.py
from decimal import Decimal
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    name: str
    category: str
    price: Decimal = Field(..., ge=0)
    description: str = ""
    image: str = ""


class DiscountedProduct(Product):
    discounted_price: Decimal


class CartLine(BaseModel):
    # name/price are a snapshot from add time
    product_id: int
    name: str
    price: Decimal
    quantity: int = Field(..., ge=1)


class Review(BaseModel):
    author: str
    rating: int = Field(..., ge=1, le=5)
    text: str


class ShopSession(BaseModel):
    """
    State of one browser session: the cart and the reviews left in it.
    Stored as a document with two top-level keys, cart and reviews.
    """

    id: str = Field(..., exclude=True)
    cart: List[CartLine] = Field(default_factory=list)
    reviews: Dict[int, List[Review]] = Field(default_factory=dict)

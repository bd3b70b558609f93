# storefront/services/catalog_service.py
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, TypeVar

from storefront.data.models import DiscountedProduct, Product
from storefront.data.seed import PRODUCTS
from storefront.utils.formatting import (
    calculate_discount,
    format_description,
    format_product_name,
    sanitize_product_name,
    upper_first,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

DISCOUNTED_CATEGORY = "Electronics"
DISCOUNT_PERCENT = Decimal("10")

T = TypeVar("T", bound=Product)


def remove_duplicates_by_id(items: Iterable[T]) -> List[T]:
    """Keep the first product seen for each id, in the order they came in."""
    seen = set()
    out = []
    for item in items:
        if item.id not in seen:
            seen.add(item.id)
            out.append(item)
    return out


def compute_discounted_price(product: Product) -> Decimal:
    if product.category == DISCOUNTED_CATEGORY:
        return calculate_discount(product.price, DISCOUNT_PERCENT)
    return product.price


class Catalog:
    """
    Static product list for the shop.

    Built once from a raw feed: deduplicated by id, then sorted by price
    (ascending, stable, so equal prices keep feed order). Products are
    frozen; the discounted view builds new objects.
    """

    def __init__(self, raw_items: Iterable[Mapping[str, Any]] = PRODUCTS):
        products = [Product.model_validate(raw) for raw in raw_items]
        unique = remove_duplicates_by_id(products)
        if len(unique) != len(products):
            logger.info(f"Dropped {len(products) - len(unique)} duplicate catalog entries")

        self.products: List[Product] = sorted(unique, key=lambda p: p.price)
        self._by_id: Dict[int, Product] = {p.id: p for p in self.products}

    def find_product(self, product_id: int) -> Product | None:
        return self._by_id.get(product_id)

    def list_catalog(self) -> List[Product]:
        return list(self.products)

    def list_discounted_catalog(self) -> List[DiscountedProduct]:
        return [
            DiscountedProduct(**p.model_dump(), discounted_price=compute_discounted_price(p))
            for p in self.products
        ]


def product_card(product: Product) -> Dict[str, Any]:
    discounted = compute_discounted_price(product)
    return {
        "id": product.id,
        "name": product.name,
        "display_name": format_product_name(sanitize_product_name(product.name)),
        "category": product.category,
        "price": product.price,
        "discounted_price": discounted if product.category == DISCOUNTED_CATEGORY else None,
        "summary": upper_first(format_description(product.description)),
        "image": product.image,
    }

# storefront/services/report_service.py
import re
from typing import Any, Dict, Iterable, List, Mapping

from storefront.data.models import Product
from storefront.data.seed import DEMO_DESCRIPTION, DEMO_REVIEW, SUPPLIER_A, SUPPLIER_B
from storefront.services.catalog_service import remove_duplicates_by_id

KEYWORD = "leather"
PRAISE_WORD = "excellent"
PREVIEW_LENGTH = 20
THANK_YOU_NOTE = " Thank you for your feedback!"

# letters plus in-word apostrophes and hyphens
_WORD = re.compile(r"[A-Za-z'-]+")


def merge_supplier_inventories(
    supplier_a: Iterable[Mapping[str, Any]],
    supplier_b: Iterable[Mapping[str, Any]],
) -> List[Product]:
    combined = [Product.model_validate(item) for item in [*supplier_a, *supplier_b]]
    return remove_duplicates_by_id(combined)


def analyze_product_description(description: str) -> Dict[str, Any]:
    return {
        "char_count": len(description),
        "word_count": len(_WORD.findall(description)),
        "keyword": KEYWORD,
        "keyword_found": KEYWORD in description.lower(),
    }


def process_customer_review(review: str) -> Dict[str, Any]:
    pos = review.lower().find(PRAISE_WORD)
    return {
        "preview": review[:PREVIEW_LENGTH] + "...",
        "word": PRAISE_WORD,
        "position": pos if pos != -1 else None,
        "updated_review": review + THANK_YOU_NOTE,
    }


class ReportService:
    """Reports panel: supplier merge, description stats and review processing."""

    def __init__(self, supplier_a=SUPPLIER_A, supplier_b=SUPPLIER_B):
        self.supplier_a = supplier_a
        self.supplier_b = supplier_b

    def build(self, description: str = DEMO_DESCRIPTION, review: str = DEMO_REVIEW) -> Dict[str, Any]:
        merged = merge_supplier_inventories(self.supplier_a, self.supplier_b)
        return {
            "merged_inventory": [
                {"id": p.id, "name": p.name, "category": p.category, "price": p.price}
                for p in merged
            ],
            "description_analysis": analyze_product_description(description),
            "review_processing": process_customer_review(review),
        }

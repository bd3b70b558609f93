# storefront/services/review_service.py
from typing import Any, Dict, List

from storefront.data.models import Review, ShopSession
from storefront.repos.session_repo import SessionRepo
from storefront.utils.formatting import escape
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

MIN_RATING = 1
MAX_RATING = 5
DEFAULT_AUTHOR = "Anonymous"


def render_stars(rating: int) -> str:
    rating = max(0, min(MAX_RATING, rating))
    return "★" * rating + "☆" * (MAX_RATING - rating)


def review_for_display(review: Review) -> Dict[str, Any]:
    """Reviews are stored raw; escaping happens here, when they are shown."""
    return {
        "author": escape(review.author),
        "rating": review.rating,
        "stars": render_stars(review.rating),
        "text": escape(review.text),
    }


class ReviewService:
    """
    Per-product reviews kept in the session, append-only.
    Insertion order is display order.
    """

    def __init__(self, session: ShopSession, repo: SessionRepo):
        self.session = session
        self.repo = repo

    def get_reviews(self, product_id: int) -> List[Review]:
        return list(self.session.reviews.get(product_id, []))

    def add_review(self, product_id: int, author: str, rating: int, text: str) -> Review | None:
        text = text.strip()
        if not product_id or not text:
            logger.info(f"Rejected review for product {product_id}: missing product or text")
            return None

        review = Review(
            author=author.strip() or DEFAULT_AUTHOR,
            rating=max(MIN_RATING, min(MAX_RATING, rating)),
            text=text,
        )
        self.session.reviews.setdefault(product_id, []).append(review)
        self.repo.save(self.session)

        logger.info(f"Review added for product {product_id} ({review.rating}/5)")
        return review

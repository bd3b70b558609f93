# storefront/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_catalog, get_session_repo, get_shop_session
from storefront.data.models import ShopSession
from storefront.domain.schemas import (
    DiscountedProductOut,
    ProductDetailOut,
    ProductOut,
    ReviewIn,
    ReviewOut,
    to_int,
)
from storefront.repos.session_repo import SessionRepo
from storefront.services.catalog_service import Catalog, product_card
from storefront.services.review_service import ReviewService, review_for_display
from storefront.utils.formatting import format_description, format_product_name, upper_first

router = APIRouter(prefix="/products", tags=["products"])


def get_service(session: ShopSession, repo: SessionRepo):
    return ReviewService(session=session, repo=repo)


def _detail(catalog: Catalog, svc: ReviewService, product_id: int):
    product = catalog.find_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    return {
        **product.model_dump(),
        "reviews": [review_for_display(r) for r in svc.get_reviews(product_id)],
    }


@router.get("", response_model=List[ProductOut])
def list_products(catalog: Catalog = Depends(get_catalog)):
    return [product_card(p) for p in catalog.list_catalog()]


@router.get("/discounted", response_model=List[DiscountedProductOut])
def list_discounted_products(catalog: Catalog = Depends(get_catalog)):
    return [
        {
            **p.model_dump(),
            "display_name": format_product_name(p.name),
            "summary": upper_first(format_description(p.description)),
        }
        for p in catalog.list_discounted_catalog()
    ]


@router.get("/{product_id}", response_model=ProductDetailOut)
def get_product(
    product_id: str,
    catalog: Catalog = Depends(get_catalog),
    session: ShopSession = Depends(get_shop_session),
    repo: SessionRepo = Depends(get_session_repo),
):
    svc = get_service(session, repo)
    return _detail(catalog, svc, to_int(product_id))


@router.get("/{product_id}/reviews", response_model=List[ReviewOut])
def get_reviews(
    product_id: str,
    session: ShopSession = Depends(get_shop_session),
    repo: SessionRepo = Depends(get_session_repo),
):
    svc = get_service(session, repo)
    return [review_for_display(r) for r in svc.get_reviews(to_int(product_id))]


@router.post("/{product_id}/reviews", response_model=ProductDetailOut)
def add_review(
    product_id: str,
    payload: ReviewIn,
    catalog: Catalog = Depends(get_catalog),
    session: ShopSession = Depends(get_shop_session),
    repo: SessionRepo = Depends(get_session_repo),
):
    """
    Rejected reviews (empty text, product id 0) are dropped silently;
    the response is the product page either way.
    """
    svc = get_service(session, repo)
    pid = to_int(product_id)
    svc.add_review(pid, payload.author, payload.rating, payload.text)
    return _detail(catalog, svc, pid)

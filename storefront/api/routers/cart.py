# storefront/api/routers/cart.py
from fastapi import APIRouter, Depends

from storefront.api.deps import get_catalog, get_session_repo, get_shop_session
from storefront.data.models import ShopSession
from storefront.domain.schemas import CartOut, ItemIn, SetQuantitiesIn, UpdateCartIn, to_int
from storefront.repos.session_repo import SessionRepo
from storefront.services.cart_service import CartService
from storefront.services.catalog_service import Catalog

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(
    session: ShopSession = Depends(get_shop_session),
    catalog: Catalog = Depends(get_catalog),
    repo: SessionRepo = Depends(get_session_repo),
):
    return CartService(session=session, catalog=catalog, repo=repo)


@router.get("", response_model=CartOut)
def get_cart(svc: CartService = Depends(get_service)):
    return svc.get_cart()


@router.post("/items", response_model=CartOut)
def add_item(payload: ItemIn, svc: CartService = Depends(get_service)):
    return svc.add_to_cart(payload.product_id, payload.quantity)


@router.put("", response_model=CartOut)
def update_cart(payload: UpdateCartIn, svc: CartService = Depends(get_service)):
    """Quantities line up with the current cart order; 0 removes a line."""
    return svc.update_quantities(payload.quantities)


@router.patch("", response_model=CartOut)
def set_quantities(payload: SetQuantitiesIn, svc: CartService = Depends(get_service)):
    return svc.set_quantities(payload.quantities)


@router.delete("/items/{product_id}", response_model=CartOut)
def remove_item(product_id: str, svc: CartService = Depends(get_service)):
    return svc.remove_line(to_int(product_id))


@router.delete("", response_model=CartOut)
def clear_cart(svc: CartService = Depends(get_service)):
    return svc.clear_cart()

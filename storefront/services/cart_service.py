# storefront/services/cart_service.py
from typing import Any, Dict, Mapping, Optional, Sequence

from storefront.data.models import CartLine, ShopSession
from storefront.repos.session_repo import SessionRepo
from storefront.services.catalog_service import Catalog
from storefront.services.totals import (
    Totals,
    compute_cart_totals,
    compute_line_subtotal,
    compute_line_total,
)
from storefront.utils.formatting import format_product_name
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use cases for the session cart.
    Commands (add, update, set, remove, clear) mutate the session and save it,
    then return the fresh cart view. Queries (get_cart, get_totals) only read.

    Bad input is clamped, never rejected with an error:
    - add: quantity < 1 becomes 1, unknown product is ignored
    - update/set: quantity < 0 becomes 0, and 0 removes the line
    """

    def __init__(self, session: ShopSession, catalog: Catalog, repo: SessionRepo):
        self.session = session
        self.catalog = catalog
        self.repo = repo

    # =====================================================
    # QUERY
    # =====================================================
    def get_cart(self) -> Dict[str, Any]:
        lines = self.session.cart
        totals = self.get_totals()

        return {
            "items": [
                {
                    "product_id": line.product_id,
                    "name": line.name,
                    "display_name": format_product_name(line.name),
                    "price": line.price,
                    "quantity": line.quantity,
                    "line_subtotal": compute_line_subtotal(line.price, line.quantity),
                    "line_total": compute_line_total(line.price, line.quantity),
                }
                for line in lines
            ],
            "item_count": sum(line.quantity for line in lines),
            "subtotal": totals.subtotal,
            "tax": totals.tax,
            "total": totals.total,
        }

    def get_totals(self) -> Totals:
        return compute_cart_totals(self.session.cart)

    # =====================================================
    # COMMANDS
    # =====================================================
    def add_to_cart(self, product_id: int, quantity: int = 1) -> Dict[str, Any]:
        quantity = max(1, quantity)

        product = self.catalog.find_product(product_id)
        if product is None:
            logger.info(f"Ignoring add of unknown product {product_id}")
            return self.get_cart()

        existing = self._find_line(product_id)
        if existing:
            logger.info(
                f"Product {product_id} already in cart, quantity "
                f"{existing.quantity} -> {existing.quantity + quantity}"
            )
            existing.quantity += quantity
        else:
            logger.info(f"Adding product {product_id} x{quantity} to cart")
            self.session.cart.append(
                CartLine(
                    product_id=product.id,
                    name=product.name,
                    price=product.price,
                    quantity=quantity,
                )
            )

        self.repo.save(self.session)
        return self.get_cart()

    def update_quantities(self, quantities: Sequence[Optional[int]]) -> Dict[str, Any]:
        """
        Positional update: quantities[i] applies to the i-th line.
        A missing or None entry keeps that line's quantity.
        The cart is rebuilt without gaps, so indexes line up for the next call.
        """
        kept = []
        for i, line in enumerate(self.session.cart):
            requested = quantities[i] if i < len(quantities) else None
            new_qty = max(0, line.quantity if requested is None else requested)
            if new_qty == 0:
                logger.info(f"Removing product {line.product_id} from cart")
                continue
            line.quantity = new_qty
            kept.append(line)

        self.session.cart = kept
        self.repo.save(self.session)
        return self.get_cart()

    def set_quantities(self, quantities: Mapping[int, int]) -> Dict[str, Any]:
        """Update by product id. Ids not in the cart are ignored."""
        kept = []
        for line in self.session.cart:
            if line.product_id in quantities:
                line.quantity = max(0, quantities[line.product_id])
            if line.quantity == 0:
                logger.info(f"Removing product {line.product_id} from cart")
                continue
            kept.append(line)

        self.session.cart = kept
        self.repo.save(self.session)
        return self.get_cart()

    def remove_line(self, product_id: int) -> Dict[str, Any]:
        self.session.cart = [line for line in self.session.cart if line.product_id != product_id]
        self.repo.save(self.session)
        return self.get_cart()

    def clear_cart(self) -> Dict[str, Any]:
        self.session.cart = []
        self.repo.save(self.session)
        logger.info("Cart cleared")
        return self.get_cart()

    def _find_line(self, product_id: int) -> CartLine | None:
        for line in self.session.cart:
            if line.product_id == product_id:
                return line
        return None

# storefront/api/deps.py
from functools import lru_cache

from fastapi import Depends, Request, Response

from storefront.data.models import ShopSession
from storefront.repos.session_repo import MemorySessionRepo, RedisSessionRepo, SessionRepo
from storefront.services.catalog_service import Catalog
from storefront.utils.logging import get_logger
from storefront.utils.settings import SESSION_BACKEND, SESSION_COOKIE_NAME

logger = get_logger(__name__)


@lru_cache
def get_session_repo() -> SessionRepo:
    if SESSION_BACKEND == "redis":
        return RedisSessionRepo()
    if SESSION_BACKEND != "memory":
        logger.warning(f"Unknown SESSION_BACKEND {SESSION_BACKEND!r}, using memory")
    return MemorySessionRepo()


@lru_cache
def get_catalog() -> Catalog:
    return Catalog()


def get_shop_session(
    request: Request,
    response: Response,
    repo: SessionRepo = Depends(get_session_repo),
) -> ShopSession:
    """
    Resolve the caller's session from the cookie.
    Missing, unknown or expired ids get a fresh empty session and a new cookie.
    """
    session_id = request.cookies.get(SESSION_COOKIE_NAME)
    session = repo.load(session_id) if session_id else None

    if session is None:
        session = repo.new_session()
        repo.save(session)
        response.set_cookie(
            key=SESSION_COOKIE_NAME,
            value=session.id,
            httponly=True,
            samesite="lax",
        )

    return session

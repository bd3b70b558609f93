# storefront/main.py
from fastapi import FastAPI
import uvicorn

from storefront.api.routers import cart, health, products, reports
from storefront.utils.logging import get_logger
from storefront.utils.settings import SESSION_BACKEND

logger = get_logger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="My Online Shop",
        version="1.0.0",
    )

    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(cart.router)
    app.include_router(reports.router)

    logger.info(f"Storefront ready, session backend: {SESSION_BACKEND}")
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)

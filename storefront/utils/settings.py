# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

SESSION_BACKEND = os.getenv("SESSION_BACKEND", "memory")
REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
SESSION_TTL_SECONDS = int(os.getenv("SESSION_TTL_SECONDS", 24*60))
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "shop_session")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

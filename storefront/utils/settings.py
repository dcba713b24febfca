# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./storefront.db")

# "sanity" queries the hosted CMS, "static" serves the seed catalog
CATALOG_SOURCE = os.getenv("CATALOG_SOURCE", "sanity")
SANITY_PROJECT_ID = os.getenv("SANITY_PROJECT_ID", "84f40ybm")
SANITY_DATASET = os.getenv("SANITY_DATASET", "production")
SANITY_API_VERSION = os.getenv("SANITY_API_VERSION", "2023-01-01")
SANITY_USE_CDN = _flag("SANITY_USE_CDN", "true")
SANITY_TOKEN = os.getenv("SANITY_TOKEN")
CATALOG_TIMEOUT_SECONDS = float(os.getenv("CATALOG_TIMEOUT_SECONDS", 5))

ORDER_SNAPSHOT_ITEMS = _flag("ORDER_SNAPSHOT_ITEMS", "false")

STOREFRONT_URL = os.getenv("STOREFRONT_URL", "http://localhost:8000")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

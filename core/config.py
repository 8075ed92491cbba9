"""
Runtime settings loaded from the environment (and a local .env file)
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import DEFAULT_STORAGE_PREFIX, DEFAULT_HISTORY_LIMIT


@dataclass
class StoreSettings:
    """Settings for one VioletStore instance"""
    db_path: str = "violetstore.db"
    data_path: str = os.path.join("data", "catalog.json")
    storage_prefix: str = DEFAULT_STORAGE_PREFIX
    history_limit: int = DEFAULT_HISTORY_LIMIT
    secret_key: str = "change-me"
    port: int = 5000
    debug: bool = False
    log_level: str = "INFO"


def load_settings() -> StoreSettings:
    # .env values never override variables already set in the environment
    load_dotenv()
    defaults = StoreSettings()
    return StoreSettings(
        db_path=os.getenv("STORE_DB_PATH", defaults.db_path),
        data_path=os.getenv("STORE_DATA_PATH", defaults.data_path),
        storage_prefix=os.getenv("STORAGE_PREFIX", defaults.storage_prefix),
        history_limit=int(os.getenv("NAV_HISTORY_LIMIT", defaults.history_limit)),
        secret_key=os.getenv("SECRET_KEY", defaults.secret_key),
        port=int(os.getenv("PORT", defaults.port)),
        debug=os.getenv("DEBUG", "False").lower() == "true",
        log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper()
    )

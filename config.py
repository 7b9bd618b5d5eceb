# config.py
import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

ENV_FILES = (".env.local", ".env")

DEFAULT_API_VERSION = "2021-06-07"
DEFAULT_PRODUCTS_URL = "https://fakestoreapi.com/products"


@dataclass
class Settings:
    project_id: Optional[str] = None
    dataset: Optional[str] = None
    token: Optional[str] = None
    api_version: str = DEFAULT_API_VERSION
    products_url: str = DEFAULT_PRODUCTS_URL
    log_level: str = "INFO"

    def missing(self) -> List[str]:
        """Names of required environment variables that were not set."""
        required = {
            "NEXT_PUBLIC_SANITY_PROJECT_ID": self.project_id,
            "NEXT_PUBLIC_SANITY_DATASET": self.dataset,
            "SANITY_API_TOKEN": self.token,
        }
        return [name for name, value in required.items() if not value]


def load_settings(env_files=ENV_FILES) -> Settings:
    # values already in the process environment are never overridden
    for path in env_files:
        load_dotenv(path)
    return Settings(
        project_id=os.getenv("NEXT_PUBLIC_SANITY_PROJECT_ID"),
        dataset=os.getenv("NEXT_PUBLIC_SANITY_DATASET"),
        token=os.getenv("SANITY_API_TOKEN"),
        api_version=os.getenv("SANITY_API_VERSION", DEFAULT_API_VERSION),
        products_url=os.getenv("PRODUCTS_URL", DEFAULT_PRODUCTS_URL),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )

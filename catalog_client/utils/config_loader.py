"""
Configuration loader for the catalogue client.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "catalog_config.yml"


class CatalogConfig(BaseModel):
    """Catalogue API connection settings"""

    base_url: str = "https://dummyjson.com"
    api_key: str = ""
    timeout_seconds: float = Field(default=30.0, gt=0.0, le=600.0)
    default_headers: Dict[str, str] = Field(default_factory=dict)


def load_catalog_config(config_path: Optional[Path] = None, *, use_env: bool = True) -> CatalogConfig:
    """
    Load and validate catalogue configuration from a YAML file

    Args:
        config_path: Path to config file. Defaults to config/catalog_config.yml
        use_env: Apply CATALOG_API_URL / CATALOG_API_KEY / CATALOG_TIMEOUT_SECONDS
            overrides (after loading a .env file, if present)

    Returns:
        Validated CatalogConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the document or its catalog section is not a mapping
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Catalog config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Catalog config must be a mapping, got {type(data).__name__}: {config_path}")

    # `catalog:` with no value is an empty section
    section = (data["catalog"] if "catalog" in data else data) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Catalog config 'catalog' section must be a mapping: {config_path}")

    if use_env:
        section = {**section, **_env_overrides()}

    try:
        config = CatalogConfig(**section)
        logger.info(f"Successfully loaded catalog config from {config_path}")
        return config
    except ValidationError as e:
        logger.error(f"Catalog config validation failed: {e}")
        raise


def _env_overrides() -> Dict[str, str]:
    load_dotenv()
    overrides: Dict[str, str] = {}
    if os.getenv("CATALOG_API_URL"):
        overrides["base_url"] = os.getenv("CATALOG_API_URL", "")
    if os.getenv("CATALOG_API_KEY"):
        overrides["api_key"] = os.getenv("CATALOG_API_KEY", "")
    if os.getenv("CATALOG_TIMEOUT_SECONDS"):
        overrides["timeout_seconds"] = os.getenv("CATALOG_TIMEOUT_SECONDS", "")
    return overrides

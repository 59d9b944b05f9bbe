"""
Configuration loader for checkout button strategies (storefront endpoints,
button defaults, mock switching).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, model_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "checkout_buttons.yml"


class StorefrontConfig(BaseModel):
    base_url: str = ""
    api_token: str = ""
    checkout_path: str = "/checkout.php"
    cart_path: str = "/api/storefront/carts"
    checkout_load_path: str = "/api/storefront/checkout"
    timeout_seconds: float = Field(default=20.0, gt=0, le=300)


class ButtonConfig(BaseModel):
    default_shape: str = "rect"
    default_height: int = Field(default=40, ge=1)
    min_height: int = Field(default=25, ge=1)
    max_height: int = Field(default=55, ge=1)
    messaging_placement: str = "cart"

    @model_validator(mode="after")
    def check_height_bounds(self):
        if not self.min_height <= self.default_height <= self.max_height:
            raise ValueError(
                f"default_height {self.default_height} must be within [{self.min_height}, {self.max_height}]"
            )
        return self


class CheckoutButtonsConfig(BaseModel):
    storefront: StorefrontConfig = Field(default_factory=StorefrontConfig)
    button: ButtonConfig = Field(default_factory=ButtonConfig)
    use_mocks: bool = True


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    storefront: Dict[str, Any] = {}

    if os.getenv("STOREFRONT_BASE_URL"):
        storefront["base_url"] = os.environ["STOREFRONT_BASE_URL"]
    if os.getenv("STOREFRONT_API_TOKEN"):
        storefront["api_token"] = os.environ["STOREFRONT_API_TOKEN"]
    if os.getenv("CHECKOUT_BUTTONS_HTTP_TIMEOUT"):
        storefront["timeout_seconds"] = os.environ["CHECKOUT_BUTTONS_HTTP_TIMEOUT"]
    if storefront:
        overrides["storefront"] = storefront

    use_mocks = os.getenv("CHECKOUT_BUTTONS_USE_MOCKS")
    if use_mocks is not None and use_mocks.strip():
        overrides["use_mocks"] = use_mocks.strip().lower() in ("1", "true", "yes")

    return overrides


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_buttons_config(config_path: Optional[Path] = None) -> CheckoutButtonsConfig:
    """
    Load and validate checkout button configuration.

    Environment variables (and a ``.env`` file, if present) override values
    from the YAML file.

    Args:
        config_path: Path to config file. Defaults to config/checkout_buttons.yml;
            the default file is optional, an explicit path is not.

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    load_dotenv()

    data: Dict[str, Any] = {}
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Checkout buttons config file not found: {config_path}")

    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    try:
        cfg = CheckoutButtonsConfig(**_merge(data, _env_overrides()))
        logger.info("Loaded checkout buttons config from %s", path if path.exists() else "defaults")
        return cfg
    except ValidationError as e:
        logger.error("Checkout buttons config validation failed: %s", e)
        raise

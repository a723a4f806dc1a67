"""
Application configuration loader (API metadata, upstream book owners API, integrations mode, logging).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class ApiConfig(BaseModel):
    title: str = "Book Owners API"
    description: str = "Groups the books of upstream book owners into Child and Adult categories"
    version: str = "1.0.0"


class ExternalApiConfig(BaseModel):
    base_url: str = ""
    # None keeps the httpx default timeout
    timeout_seconds: Optional[float] = Field(default=None, gt=0)


class IntegrationsConfig(BaseModel):
    mode: Optional[Literal["real", "mock"]] = None
    mock_data_path: str = "data/mock/book_owners.json"


class LoggingConfig(BaseModel):
    level: str = "INFO"


class AppConfig(BaseModel):
    api: ApiConfig = Field(default_factory=ApiConfig)
    external_api: ExternalApiConfig = Field(default_factory=ExternalApiConfig)
    integrations: IntegrationsConfig = Field(default_factory=IntegrationsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def use_real_integrations(self) -> bool:
        if self.integrations.mode is not None:
            return self.integrations.mode == "real"
        return bool(self.external_api.base_url)


def project_root() -> Path:
    return Path(__file__).parent.parent.parent


def load_app_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load and validate the application configuration from a YAML file,
    then apply environment variable overrides.

    Args:
        config_path: Path to config file. Defaults to config/app_config.yml

    Returns:
        Validated AppConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = project_root() / "config" / "app_config.yml"

    if not config_path.exists():
        raise FileNotFoundError(f"App config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    _apply_env_overrides(data)

    try:
        cfg = AppConfig(**data)
        logger.info("Successfully loaded app config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("App config validation failed: %s", e)
        raise


def _section(data: dict, key: str) -> dict:
    if not isinstance(data.get(key), dict):
        data[key] = {}
    return data[key]


def _apply_env_overrides(data: dict) -> None:
    base_url = os.getenv("BOOK_OWNERS_API_URL")
    if base_url:
        _section(data, "external_api")["base_url"] = base_url

    timeout = os.getenv("BOOK_OWNERS_API_TIMEOUT")
    if timeout:
        _section(data, "external_api")["timeout_seconds"] = timeout

    mode = os.getenv("INTEGRATIONS_MODE", "").strip().lower()
    if mode in {"real", "live"}:
        _section(data, "integrations")["mode"] = "real"
    elif mode in {"mock", "test"}:
        _section(data, "integrations")["mode"] = "mock"

    level = os.getenv("LOG_LEVEL")
    if level:
        _section(data, "logging")["level"] = level

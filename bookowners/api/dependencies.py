"""
Dependency wiring for the API layer.

This is the ONE place where the owners source (mock vs real HTTP client)
is selected. Tests swap any of these via ``app.dependency_overrides``.
"""

import logging
from pathlib import Path

from fastapi import Depends

from bookowners.integrations.clients.mocks.book_owners import MockBookOwnersClient
from bookowners.integrations.clients.real_http.book_owners import RealBookOwnersClient
from bookowners.integrations.contracts.interfaces import BookOwnersSource, CategorizedBooksProvider
from bookowners.integrations.policy.owners_service import OwnersService
from bookowners.utils.config_loader import AppConfig, load_app_config, project_root

logger = logging.getLogger(__name__)

# Load configuration once per process
app_config = load_app_config()


def get_app_config() -> AppConfig:
    """Dependency for application configuration"""
    return app_config


def get_book_owners_client(cfg: AppConfig = Depends(get_app_config)) -> BookOwnersSource:
    """Dependency for the book owners source"""
    if cfg.use_real_integrations():
        logger.debug("Using real book owners client (%s)", cfg.external_api.base_url or "<env>")
        return RealBookOwnersClient(
            base_url=cfg.external_api.base_url,
            timeout_seconds=cfg.external_api.timeout_seconds,
        )

    data_path = Path(cfg.integrations.mock_data_path)
    if not data_path.is_absolute():
        data_path = project_root() / data_path
    logger.debug("Using mock book owners client (%s)", data_path)
    return MockBookOwnersClient(data_path=data_path)


def get_owners_service(client: BookOwnersSource = Depends(get_book_owners_client)) -> CategorizedBooksProvider:
    """Dependency for the owners service"""
    return OwnersService(client)

"""
Mock Book Owners Client.

Purpose:
- Provides a fake book owners source used for development/testing
- Does NOT make any network calls
- Loads owners from a local JSON file (same shape as the upstream API) or an in-memory list

Usage:
- Wired in bookowners/api/dependencies.py when INTEGRATIONS_MODE=mock or no upstream URL is configured

Swap:
Replace this mock client with the real HTTP client in clients/real_http/book_owners.py
by setting BOOK_OWNERS_API_URL (or INTEGRATIONS_MODE=real).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from bookowners.integrations.contracts.interfaces import BookOwnersSource, Owner
from bookowners.integrations.policy.response_wrappers import normalize_book_owners_response

logger = logging.getLogger(__name__)


class MockBookOwnersClient(BookOwnersSource):
    def __init__(self, data_path: Optional[Path] = None, owners: Optional[List[Any]] = None) -> None:
        self.data_path = Path(data_path) if data_path is not None else None
        self.owners = owners

    async def get_book_owners(self) -> List[Owner]:
        if self.owners is not None:
            return normalize_book_owners_response(self.owners)

        if self.data_path is None or not self.data_path.exists():
            logger.warning("Mock book owners file not found: %s", self.data_path)
            return []

        with open(self.data_path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        logger.info("Loaded mock book owners from %s", self.data_path)
        return normalize_book_owners_response(raw)

"""
Real Book Owners HTTP Client.

Purpose:
- Fetches the owner list from the upstream book owners API (GET {base_url}/api/v1/bookowners)
- Normalizes the JSON array into Owner contracts

Implementation notes:
- Use httpx for async requests; one request per call, no retries, no caching
- A null or empty body means "no owners" and yields an empty list
- HTTP, transport, JSON and shape errors are logged and re-raised unchanged

Important:
- Keep this client as the ONLY place where book owners HTTP calls are made.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import httpx

from bookowners.integrations.contracts.interfaces import BookOwnersSource, Owner
from bookowners.integrations.policy.response_wrappers import normalize_book_owners_response

logger = logging.getLogger(__name__)

BOOK_OWNERS_PATH = "api/v1/bookowners"


class RealBookOwnersClient(BookOwnersSource):
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("BOOK_OWNERS_API_URL", "")).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport
        if not self.base_url:
            logger.warning("Book owners API URL is not set.")

    @property
    def url(self) -> str:
        return f"{self.base_url}/{BOOK_OWNERS_PATH}"

    async def get_book_owners(self) -> List[Owner]:
        if not self.base_url:
            raise ValueError("BOOK_OWNERS_API_URL is not configured.")

        client_kwargs: Dict[str, Any] = {}
        if self.timeout_seconds is not None:
            client_kwargs["timeout"] = self.timeout_seconds
        if self.transport is not None:
            client_kwargs["transport"] = self.transport

        url = self.url
        try:
            logger.info("Fetching book owners from %s", url)
            async with httpx.AsyncClient(**client_kwargs) as client:
                response = await client.get(url)
                response.raise_for_status()
                data = response.json() if response.content else None
            logger.info("Received book owners response: status=%s", response.status_code)
            return normalize_book_owners_response(data)
        except httpx.HTTPStatusError as e:
            logger.error("HTTP error from book owners API: %s %s", e.response.status_code, e.response.text)
            raise
        except httpx.RequestError as e:
            logger.error("Request error connecting to book owners API: %s", e)
            raise
        except ValueError as e:
            # json.JSONDecodeError and IntegrationResponseError
            logger.error("Invalid payload from book owners API: %s", e)
            raise

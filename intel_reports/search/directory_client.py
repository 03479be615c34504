"""
Client for the entity directory service.

The directory answers substring searches over company names with a list of
{slug, name, sector, tier} records.
"""
import logging
from typing import Any, List, Optional

import aiohttp
from pydantic import ValidationError

from intel_reports.errors import DirectoryServiceError
from intel_reports.models.report import SearchableEntity

logger = logging.getLogger(__name__)


def parse_companies(data: Any) -> List[SearchableEntity]:
    """Parse a directory response body, skipping malformed entries."""
    if isinstance(data, dict):
        rows = data.get("companies") or []
    elif isinstance(data, list):
        rows = data
    else:
        rows = []

    entities = []
    for row in rows:
        if not isinstance(row, dict):
            continue
        try:
            entities.append(SearchableEntity(
                slug=row.get("slug"),
                name=row.get("name"),
                sector=row.get("sector"),
                tier=row.get("tier") or 0,
            ))
        except ValidationError as e:
            logger.debug(f"Skipping malformed directory entry {row!r}: {e}")
    return entities


class DirectoryClient:
    """Looks up companies in the entity directory service."""

    def __init__(self, base_url: str, timeout_seconds: float = 10.0,
                 session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize the directory client.

        Args:
            base_url: Base URL of the directory service.
            timeout_seconds: Total timeout per lookup.
            session: Optional shared aiohttp session; a short-lived session is
                opened per lookup when omitted.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._session = session

    async def search_companies(self, query: str, limit: int = 10) -> List[SearchableEntity]:
        """
        Search companies by name.

        Raises:
            DirectoryServiceError: On a non-200 response.
            aiohttp.ClientError, asyncio.TimeoutError: On transport failures.
        """
        url = f"{self.base_url}/api/company-profiles"
        params = {"search": query, "limit": str(limit)}
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)

        if self._session is not None:
            return await self._fetch(self._session, url, params, timeout)

        async with aiohttp.ClientSession(timeout=timeout) as session:
            return await self._fetch(session, url, params, timeout)

    async def _fetch(self, session, url: str, params: dict, timeout) -> List[SearchableEntity]:
        async with session.get(url, params=params, timeout=timeout) as response:
            if response.status != 200:
                detail = await response.text()
                raise DirectoryServiceError(response.status, detail[:200])
            data = await response.json()
        return parse_companies(data)

"""
Debounced entity search.

One provider backs one configuration input. Keystrokes go through search(),
which never blocks: short queries clear the results immediately, longer ones
are looked up after a quiet period. Only the lookup started by the latest
keystroke may update the visible results.
"""
import logging
from typing import List, Protocol

from intel_reports.config.settings import ReportSettings
from intel_reports.models.report import SearchableEntity
from intel_reports.search.debounce import Debouncer

logger = logging.getLogger(__name__)


class EntityDirectory(Protocol):
    async def search_companies(self, query: str, limit: int = 10) -> List[SearchableEntity]:
        ...


class EntitySearchProvider:
    """Debounced, failure-tolerant company lookup for one input control."""

    def __init__(self, directory: EntityDirectory, debounce_seconds: float = 0.3,
                 min_query_length: int = 2, limit: int = 10, name: str = "entity-search"):
        self.directory = directory
        self.min_query_length = min_query_length
        self.limit = limit
        self.name = name

        self.query = ""
        self.results: List[SearchableEntity] = []
        self.loading = False

        self._debouncer = Debouncer(debounce_seconds)

    @classmethod
    def from_settings(cls, directory: EntityDirectory, settings: ReportSettings,
                      name: str = "entity-search") -> "EntitySearchProvider":
        return cls(
            directory,
            debounce_seconds=settings.search_debounce_seconds,
            min_query_length=settings.search_min_query_length,
            limit=settings.search_result_limit,
            name=name,
        )

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    def search(self, query: str):
        """Handle a keystroke. Must be called from within a running event loop."""
        self.query = query
        if len(query.strip()) < self.min_query_length:
            self._debouncer.cancel()
            self.results = []
            self.loading = False
            return

        self.loading = True
        self._debouncer.schedule(lambda ticket: self._apply_lookup(ticket, query))

    async def _apply_lookup(self, ticket: int, query: str):
        results = await self.lookup(query)
        if not self._debouncer.is_current(ticket):
            logger.debug(f"[{self.name}] Dropping stale results for {query!r}")
            return
        self.results = results
        self.loading = False

    async def lookup(self, query: str) -> List[SearchableEntity]:
        """Look up entities now; failures come back as an empty list."""
        try:
            return await self.directory.search_companies(query, self.limit)
        except Exception as e:
            logger.warning(f"[{self.name}] Entity search failed for {query!r}: {e}")
            return []

    def reset(self):
        """Clear the input and results and drop any pending or in-flight lookup."""
        self._debouncer.cancel()
        self.query = ""
        self.results = []
        self.loading = False

    async def wait_idle(self):
        """Wait until the pending lookup, if any, has finished."""
        await self._debouncer.wait()


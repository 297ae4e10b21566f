from __future__ import annotations
import logging
from typing import Iterable, List, Optional

import httpx

from . import config
from .schemas import LookupFound, LookupNotFound, LookupResult
from .sources import AdapterError, NoResultError, Source, default_sources

logger = logging.getLogger(__name__)

class DictionaryService:
    """Ordered fallback over the dictionary sources.

    Sources are awaited one at a time, in priority order, and the first one
    that returns entries wins. A source that fails for any reason (no entry,
    network trouble, garbage body) is skipped rather than retried, so a flaky
    primary source degrades to the next one instead of surfacing an error.
    """

    def __init__(self, sources: Optional[Iterable[Source]] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 timeout: Optional[float] = None):
        self._sources: List[Source] = list(sources) if sources is not None else default_sources()
        self._transport = transport
        self._timeout = config.HTTP_TIMEOUT if timeout is None else timeout

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport, follow_redirects=True)

    async def lookup(self, term: str) -> LookupResult:
        # term is already trimmed and non-empty; keep its casing for NotFound
        async with self.client() as client:
            for source in self._sources:
                try:
                    entries = await source.fetch(term, client)
                except NoResultError as exc:
                    logger.debug('No result from %s: %s', source.key, exc)
                    continue
                except AdapterError as exc:
                    # Not retried and not reported separately
                    logger.warning('Source %s failed, falling through: %s', source.key, exc)
                    continue
                if entries:
                    logger.info('Lookup %r answered by %s', term, source.key)
                    return LookupFound(term=term, source=source.name, entries=entries)
        logger.info('Lookup %r not found in %d source(s)', term, len(self._sources))
        return LookupNotFound(word=term)

# Singleton instance
service = DictionaryService()

from __future__ import annotations
import logging
from typing import List, Optional

import httpx

from . import config

logger = logging.getLogger(__name__)

class SpellingService:
    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None,
                 timeout: Optional[float] = None):
        self._transport = transport
        self._timeout = config.HTTP_TIMEOUT if timeout is None else timeout

    async def suggest(self, term: str) -> List[str]:
        """Up to SUGGESTION_LIMIT spellings close to term, best match first.

        Never raises: any failure talking to the provider yields an empty list
        so the not-found state can still be shown.
        """
        params = {'sp': term, 'max': config.SUGGESTION_MAX}
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(config.DATAMUSE_URL, params=params)
            if not response.is_success:
                logger.warning('Suggestion lookup for %r returned HTTP %d', term, response.status_code)
                return []
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning('Suggestion lookup for %r failed: %s', term, exc)
            return []
        if not isinstance(data, list):
            logger.warning('Suggestion lookup for %r returned %s, expected a list', term, type(data).__name__)
            return []

        needle = term.lower()
        suggestions: List[str] = []
        for item in data:
            word = item.get('word') if isinstance(item, dict) else None
            if not isinstance(word, str) or word.lower() == needle:
                continue
            suggestions.append(word)
            if len(suggestions) == config.SUGGESTION_LIMIT:
                break
        return suggestions

# Singleton instance
speller = SpellingService()

from __future__ import annotations
import asyncio
import logging
from typing import Awaitable, Callable, Dict, Optional, Set, Union

from ..dictionary import DictionaryService, service as dict_service
from ..schemas import LookupFailed, LookupFound, LookupNotFound
from ..spelling import SpellingService, speller as default_speller

logger = logging.getLogger(__name__)

Emit = Callable[[str, dict], Awaitable[None]]
Outcome = Union[LookupFound, LookupNotFound, LookupFailed]

EVENT_FOR_STATUS = {
    'found': 'search:result',
    'notFound': 'search:notFound',
    'error': 'search:error',
}

class SearchSession:
    """Display state of one connected client.

    Only the most recently started search may write the displayed result.
    Every search and every clear bumps ``seq``; a lookup that resolves with an
    older token is dropped instead of emitted.
    """

    def __init__(self, sid: str, emit: Emit,
                 dictionary: Optional[DictionaryService] = None,
                 speller: Optional[SpellingService] = None):
        self.sid = sid
        self._emit = emit
        self.dictionary = dictionary or dict_service
        self.speller = speller or default_speller
        self.term: Optional[str] = None
        self.seq: int = 0
        self.loading: bool = False
        self.result: Optional[Outcome] = None
        self._tasks: Set[asyncio.Task] = set()

    def is_current(self, token: int) -> bool:
        return token == self.seq

    async def search(self, raw_term: str) -> Optional[Outcome]:
        term = (raw_term or '').strip()
        if not term:
            return None
        self.seq += 1
        token = self.seq
        self.term = term
        self.loading = True
        self.result = None
        await self._emit('search:loading', {'term': term, 'seq': token})

        try:
            outcome: Outcome = await self.dictionary.lookup(term)
            if isinstance(outcome, LookupNotFound) and self.is_current(token):
                suggestions = await self.speller.suggest(term)
                outcome = outcome.model_copy(update={'suggestions': suggestions})
        except Exception:
            logger.exception('Lookup for %r failed unexpectedly (sid=%s)', term, self.sid)
            outcome = LookupFailed()

        if not self.is_current(token):
            logger.debug('Dropping stale %s result for %r (seq %d, now %d)', outcome.status, term, token, self.seq)
            return None
        self.loading = False
        self.result = outcome
        payload = outcome.model_dump(by_alias=True)
        payload['seq'] = token
        await self._emit(EVENT_FOR_STATUS[outcome.status], payload)
        return outcome

    def start_search(self, raw_term: str) -> asyncio.Task:
        # Searches run as tasks so a newer query is accepted while one is in flight
        task = asyncio.create_task(self.search(raw_term))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def choose_suggestion(self, word: str) -> Optional[Outcome]:
        return await self.search(word)

    async def clear(self):
        # Bumping the token makes any in-flight lookup moot on arrival
        self.seq += 1
        self.term = None
        self.loading = False
        self.result = None
        await self._emit('search:cleared', {'seq': self.seq})

    def close(self):
        for task in list(self._tasks):
            task.cancel()
        self._tasks.clear()

class SearchManager:
    def __init__(self, sio,
                 dictionary: Optional[DictionaryService] = None,
                 speller: Optional[SpellingService] = None):
        self.sio = sio
        self.dictionary = dictionary
        self.speller = speller
        self.sessions: Dict[str, SearchSession] = {}

    def get_or_create(self, sid: str) -> SearchSession:
        if sid not in self.sessions:
            async def emit(event: str, data: dict):
                await self.sio.emit(event, data, to=sid)
            self.sessions[sid] = SearchSession(sid, emit, self.dictionary, self.speller)
        return self.sessions[sid]

    def search(self, sid: str, term: str) -> asyncio.Task:
        return self.get_or_create(sid).start_search(term)

    def choose_suggestion(self, sid: str, word: str) -> asyncio.Task:
        return self.get_or_create(sid).start_search(word)

    async def clear(self, sid: str):
        await self.get_or_create(sid).clear()

    def remove(self, sid: str):
        session = self.sessions.pop(sid, None)
        if session:
            session.close()

from __future__ import annotations
from dataclasses import dataclass
from typing import Awaitable, Callable, List
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from . import config
from .schemas import Definition, DictionaryEntry, Meaning, SLANG_PART_OF_SPEECH

class AdapterError(Exception):
    """A source could not produce entries for a term."""

    def __init__(self, source: str, term: str, reason: str = ''):
        self.source = source
        self.term = term
        self.reason = reason
        super().__init__(f"{source}: {reason or 'no result'} ({term!r})")

class NoResultError(AdapterError):
    """The source answered but has no entry for the term."""

class TransientError(AdapterError):
    """Network, decode or shape failure talking to the source."""

Fetcher = Callable[[str, httpx.AsyncClient], Awaitable[List[DictionaryEntry]]]

@dataclass(frozen=True)
class Source:
    key: str
    name: str
    fetch: Fetcher

_entries = TypeAdapter(List[DictionaryEntry])

async def _get(source: str, term: str, client: httpx.AsyncClient, url: str, **kwargs) -> httpx.Response:
    try:
        return await client.get(url, **kwargs)
    except httpx.HTTPError as exc:
        raise TransientError(source, term, f'request failed: {exc.__class__.__name__}') from exc

async def fetch_free_dictionary(term: str, client: httpx.AsyncClient) -> List[DictionaryEntry]:
    # Provider payload already matches DictionaryEntry; only validate it
    url = f"{config.FREE_DICTIONARY_URL}/{quote(term, safe='')}"
    response = await _get('free_dictionary', term, client, url)
    if not response.is_success:
        raise NoResultError('free_dictionary', term, f'HTTP {response.status_code}')
    try:
        entries = _entries.validate_python(response.json())
    except (ValueError, ValidationError) as exc:
        raise TransientError('free_dictionary', term, 'unexpected response body') from exc
    if not entries:
        raise NoResultError('free_dictionary', term, 'empty entry list')
    return entries

async def fetch_urban_dictionary(term: str, client: httpx.AsyncClient) -> List[DictionaryEntry]:
    response = await _get('urban_dictionary', term, client, config.URBAN_DICTIONARY_URL, params={'term': term})
    if not response.is_success:
        raise NoResultError('urban_dictionary', term, f'HTTP {response.status_code}')
    try:
        data = response.json()
    except ValueError as exc:
        raise TransientError('urban_dictionary', term, 'response is not JSON') from exc

    candidates = data.get('list') if isinstance(data, dict) else None
    if not isinstance(candidates, list):
        candidates = []
    definitions: List[Definition] = []
    # Provider ranks by votes; keep its order
    for item in candidates[:config.SLANG_DEFINITION_LIMIT]:
        if not isinstance(item, dict):
            continue
        body = item.get('definition')
        if not isinstance(body, str) or not body.strip():
            continue
        example = item.get('example')
        definitions.append(Definition(
            definition=body,
            example=example if isinstance(example, str) and example.strip() else None,
            synonyms=[],
        ))
    if not definitions:
        raise NoResultError('urban_dictionary', term, 'no candidate definitions')

    return [DictionaryEntry(
        word=term,
        phonetic='',
        phonetics=[],
        meanings=[Meaning(partOfSpeech=SLANG_PART_OF_SPEECH, definitions=definitions)],
    )]

_FETCHERS = {
    'free_dictionary': fetch_free_dictionary,
    'urban_dictionary': fetch_urban_dictionary,
}

def default_sources() -> List[Source]:
    """Enabled sources in priority order. Premium slots have no fetcher and are skipped."""
    chain: List[Source] = []
    for key, info in config.SOURCES.items():
        fetch = _FETCHERS.get(key)
        if info['enabled'] and fetch is not None:
            chain.append(Source(key=key, name=info['name'], fetch=fetch))
    return chain

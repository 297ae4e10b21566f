"""Pytest configuration and fixtures."""

import copy

import httpx
import pytest

from wordlookup.dictionary import DictionaryService
from wordlookup.spelling import SpellingService

FREE_DICTIONARY_HOST = "api.dictionaryapi.dev"
URBAN_DICTIONARY_HOST = "api.urbandictionary.com"
DATAMUSE_HOST = "api.datamuse.com"

HELLO_ENTRY = {
    "word": "hello",
    "phonetic": "həˈləʊ",
    "phonetics": [
        {"text": "həˈləʊ", "audio": "https://api.dictionaryapi.dev/media/pronunciations/en/hello-uk.mp3"},
        {"text": "hɛˈləʊ"},
    ],
    "origin": "early 19th century: variant of earlier hollo",
    "meanings": [
        {
            "partOfSpeech": "exclamation",
            "definitions": [
                {
                    "definition": "used as a greeting or to begin a phone conversation.",
                    "example": "hello there, Katie!",
                    "synonyms": [],
                    "antonyms": [],
                }
            ],
        },
        {
            "partOfSpeech": "noun",
            "definitions": [
                {
                    "definition": "an utterance of ‘hello’; a greeting.",
                    "example": "she was getting polite nods and hellos from people",
                    "synonyms": ["greeting"],
                }
            ],
        },
    ],
    "license": {"name": "CC BY-SA 3.0", "url": "https://creativecommons.org/licenses/by-sa/3.0"},
    "sourceUrls": ["https://en.wiktionary.org/wiki/hello"],
}

NOT_FOUND_BODY = {
    "title": "No Definitions Found",
    "message": "Sorry pal, we couldn't find definitions for the word you were looking for.",
    "resolution": "You can try the search again at later time or head to the web instead.",
}


class FakeProviders:
    """Canned responses per provider host, served through httpx.MockTransport.

    Hosts without a canned response answer 404. A canned exception class is
    raised as a transport failure.
    """

    def __init__(self):
        self.responses = {}
        self.calls = []

    def respond(self, host, status=200, json=None, content=None):
        self.responses[host] = (status, json, content)

    def fail(self, host, exc_class=httpx.ConnectError):
        self.responses[host] = exc_class

    def handler(self, request):
        self.calls.append(request)
        canned = self.responses.get(request.url.host)
        if canned is None:
            return httpx.Response(404, json=NOT_FOUND_BODY)
        if isinstance(canned, type):
            raise canned("simulated failure", request=request)
        status, json, content = canned
        if content is not None:
            return httpx.Response(status, content=content)
        return httpx.Response(status, json=json)

    def calls_to(self, host):
        return [r for r in self.calls if r.url.host == host]

    @property
    def transport(self):
        return httpx.MockTransport(self.handler)


@pytest.fixture
def providers():
    return FakeProviders()


@pytest.fixture
def hello_entry():
    return copy.deepcopy(HELLO_ENTRY)


@pytest.fixture
def dictionary(providers):
    return DictionaryService(transport=providers.transport)


@pytest.fixture
def speller(providers):
    return SpellingService(transport=providers.transport)

from __future__ import annotations
import os
from typing import Dict, List

# Provider endpoints (overridable for staging or local mocks)
FREE_DICTIONARY_URL = os.environ.get('WORDLOOKUP_FREE_DICTIONARY_URL', 'https://api.dictionaryapi.dev/api/v2/entries/en')
URBAN_DICTIONARY_URL = os.environ.get('WORDLOOKUP_URBAN_DICTIONARY_URL', 'https://api.urbandictionary.com/v0/define')
DATAMUSE_URL = os.environ.get('WORDLOOKUP_DATAMUSE_URL', 'https://api.datamuse.com/words')

HTTP_TIMEOUT = float(os.environ.get('WORDLOOKUP_HTTP_TIMEOUT', '10.0'))  # seconds
LOG_LEVEL = os.environ.get('WORDLOOKUP_LOG_LEVEL', 'INFO').upper()

SLANG_DEFINITION_LIMIT = 3
SUGGESTION_MAX = 5  # asked from the provider
SUGGESTION_LIMIT = 3  # returned to the client

# Static source table. Free sources are always on; premium slots are
# placeholders with no adapter behind them.
SOURCES: Dict[str, dict] = {
    'free_dictionary': {'name': 'Free Dictionary API', 'tier': 'free', 'enabled': True},
    'urban_dictionary': {'name': 'Urban Dictionary', 'tier': 'free', 'enabled': True},
    'oxford': {'name': 'Oxford Dictionaries', 'tier': 'premium', 'enabled': False, 'app_id': '', 'app_key': ''},
    'merriam_webster': {'name': 'Merriam-Webster', 'tier': 'premium', 'enabled': False, 'key': ''},
    'words_api': {'name': 'WordsAPI', 'tier': 'premium', 'enabled': False, 'key': ''},
}


def available_sources() -> List[str]:
    return [s['name'] for s in SOURCES.values() if s['enabled']]


def has_premium_sources() -> bool:
    # No premium adapter is wired up yet, keys or not
    return False

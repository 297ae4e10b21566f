from __future__ import annotations
from pydantic import BaseModel, Field, computed_field
from typing import List, Literal, Optional, Union

# Part of speech used to badge crowd-sourced content; only the slang adapter sets it
SLANG_PART_OF_SPEECH = 'slang/modern'

NOT_FOUND_MESSAGE = 'Word not found'
GENERIC_ERROR_MESSAGE = 'An error occurred while fetching the definition'

class Phonetic(BaseModel):
    text: Optional[str] = None
    audio: Optional[str] = None

class Definition(BaseModel):
    definition: str
    example: Optional[str] = None
    # empty means none supplied
    synonyms: List[str] = []

class Meaning(BaseModel):
    partOfSpeech: str
    definitions: List[Definition] = Field(..., min_length=1)

class DictionaryEntry(BaseModel):
    word: str
    phonetic: Optional[str] = None
    phonetics: List[Phonetic] = []
    meanings: List[Meaning] = Field(..., min_length=1)
    sourceUrls: Optional[List[str]] = None

    # Derived display fields, serialized alongside the provider fields
    @computed_field
    @property
    def phoneticText(self) -> Optional[str]:
        if self.phonetic:
            return self.phonetic
        return next((p.text for p in self.phonetics if p.text), None)

    @computed_field
    @property
    def audioUrl(self) -> Optional[str]:
        return next((p.audio for p in self.phonetics if p.audio), None)

    @computed_field
    @property
    def isSlang(self) -> bool:
        return any(m.partOfSpeech == SLANG_PART_OF_SPEECH for m in self.meanings)

class LookupFound(BaseModel):
    status: Literal['found'] = 'found'
    term: str
    source: str
    entries: List[DictionaryEntry] = Field(..., min_length=1)

class LookupNotFound(BaseModel):
    status: Literal['notFound'] = 'notFound'
    # the query exactly as the user typed it (after trimming)
    word: str
    message: str = NOT_FOUND_MESSAGE
    suggestions: List[str] = []

class LookupFailed(BaseModel):
    status: Literal['error'] = 'error'
    message: str = GENERIC_ERROR_MESSAGE

LookupResult = Union[LookupFound, LookupNotFound]

class Suggestions(BaseModel):
    word: str
    suggestions: List[str] = []

class SourceInfo(BaseModel):
    key: str
    name: str
    tier: Literal['free', 'premium']
    enabled: bool

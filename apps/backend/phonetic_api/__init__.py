"""Phonetic transcription service: dictionary lookup plus IPA to English sound mapping."""

from .dictionary import PronunciationDictionary
from .symbols import STANDARD_SYMBOL_TABLE, SymbolMapper, ipa_to_english_sound
from .transcription import (
    TranscriptionMode,
    TranscriptionService,
    WordTranscription,
    phonetic_string,
    strip_delimiters,
)

__all__ = [
    "PronunciationDictionary",
    "STANDARD_SYMBOL_TABLE",
    "SymbolMapper",
    "TranscriptionMode",
    "TranscriptionService",
    "WordTranscription",
    "ipa_to_english_sound",
    "phonetic_string",
    "strip_delimiters",
]

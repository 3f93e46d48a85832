"""Pydantic request/response models."""

from .convert import ConvertRequest, ConvertResponse, DictionaryStats, WordPhonetic

__all__ = [
    "ConvertRequest",
    "ConvertResponse",
    "DictionaryStats",
    "WordPhonetic",
]

"""Word and text transcription on top of the dictionary and symbol mapper."""

from __future__ import annotations

from concurrent.futures import Executor
from dataclasses import dataclass
from enum import Enum

from .dictionary import PronunciationDictionary
from .symbols import SymbolMapper

_DELIMITER_PAIRS = frozenset({("/", "/"), ("[", "]")})


class TranscriptionMode(str, Enum):
    """Pipeline selector.

    - ipa: 辞書の登録値（IPA）をそのまま返す
    - english: IPA の区切り記号を外し、英語風の音綴りへ変換する
    """

    ipa = "ipa"
    english = "english"


@dataclass(frozen=True)
class WordTranscription:
    word: str
    phonetic: str


def strip_delimiters(transcription: str) -> str:
    """Remove one wrapping ``/…/`` or ``[…]`` pair when present.

    区切り記号で囲まれていない値や、開き・閉じが対応しない値はそのまま返す。
    """
    if (
        len(transcription) >= 2
        and (transcription[0], transcription[-1]) in _DELIMITER_PAIRS
    ):
        return transcription[1:-1]
    return transcription


class TranscriptionService:
    """Compose dictionary lookup with optional symbol mapping.

    辞書と記号表はいずれも構築後に変更されないため、ロックなしで
    複数スレッドから同時に呼び出してよい。
    """

    def __init__(
        self,
        dictionary: PronunciationDictionary,
        mapper: SymbolMapper | None = None,
        *,
        default_mode: TranscriptionMode | str = TranscriptionMode.english,
    ) -> None:
        self.dictionary = dictionary
        self.mapper = mapper or SymbolMapper()
        self.default_mode = TranscriptionMode(default_mode)

    def _resolve_mode(self, mode: TranscriptionMode | str | None) -> TranscriptionMode:
        if mode is None:
            return self.default_mode
        return TranscriptionMode(mode)

    def transcribe(self, word: str, mode: TranscriptionMode | str | None = None) -> str:
        """Transcribe one word; unknown words are returned unchanged."""
        resolved = self._resolve_mode(mode)
        if word not in self.dictionary:
            return word
        transcription = self.dictionary.lookup(word)
        if resolved is TranscriptionMode.ipa:
            return transcription
        return self.mapper.translate(strip_delimiters(transcription))

    def transcribe_text(
        self,
        text: str,
        mode: TranscriptionMode | str | None = None,
        *,
        executor: Executor | None = None,
    ) -> list[WordTranscription]:
        """Transcribe every whitespace-separated token of ``text`` in input order.

        ``executor`` が渡された場合は単語ごとにタスクを投入し、
        完了順ではなく入力順（インデックス）で結果を組み立て直す。
        """
        resolved = self._resolve_mode(mode)
        words = text.split()
        if executor is None or len(words) < 2:
            phonetics = [self.transcribe(word, resolved) for word in words]
        else:
            futures = [executor.submit(self.transcribe, word, resolved) for word in words]
            phonetics = [future.result() for future in futures]
        return [
            WordTranscription(word=word, phonetic=phonetic)
            for word, phonetic in zip(words, phonetics)
        ]


def phonetic_string(results: list[WordTranscription]) -> str:
    """Join per-word results with single spaces."""
    return " ".join(item.phonetic for item in results)

"""Read-only pronunciation dictionary (word -> IPA transcription).

起動時に一度だけ構築し、以降は読み取り専用で全リクエストから共有する。
辞書ファイルが存在しない場合でも起動は止めず、空辞書として扱う
（未登録語はすべてそのまま返る）。
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from .logging import logger


class PronunciationDictionary:
    """Immutable mapping from lowercase word to its stored transcription."""

    def __init__(
        self, entries: Mapping[str, str] | None = None, *, source: str | None = None
    ) -> None:
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries or {}))
        self._source = source

    @classmethod
    def build(
        cls, records: Iterable[str], *, source: str | None = None
    ) -> "PronunciationDictionary":
        """Build from ``<word> <ipa> [<ipa> ...]`` records.

        フィールドが 2 未満の行（単語のみ・空行）は黙って読み飛ばす。
        同じ見出し語が複数回現れた場合は後勝ち。
        """
        entries: dict[str, str] = {}
        for record in records:
            fields = record.split()
            if len(fields) < 2:
                continue
            entries[fields[0].lower()] = " ".join(fields[1:])
        return cls(entries, source=source)

    @classmethod
    def load(
        cls, path: str | Path, *, encoding: str = "utf-8"
    ) -> "PronunciationDictionary":
        """Build from a line-oriented file, or return an empty dictionary.

        ファイルが読めない場合は警告ログを出して空辞書を返す。
        """
        source = str(path)
        try:
            with open(path, encoding=encoding) as handle:
                dictionary = cls.build(handle, source=source)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "pronunciation_dictionary_unavailable",
                source=source,
                error=repr(exc),
            )
            return cls(source=source)
        logger.info(
            "pronunciation_dictionary_loaded",
            source=source,
            entries=len(dictionary),
        )
        return dictionary

    @property
    def source(self) -> str | None:
        return self._source

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries

    def lookup(self, word: str) -> str:
        """Return the transcription of ``word`` (case-insensitive) or ``word`` itself."""
        return self._entries.get(word.lower(), word)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

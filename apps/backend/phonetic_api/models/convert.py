from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..transcription import TranscriptionMode


class ConvertRequest(BaseModel):
    """Request model for text-to-phonetic conversion.

    空白区切りの単語列を受け取り、単語ごとの発音表記を要求するリクエスト。
    `mode` 未指定時はサーバ設定の既定パイプラインを使う。
    """

    model_config = ConfigDict(json_schema_extra={
        "examples": [{"text": "the cat sat", "mode": "english"}]
    })

    text: str = Field(description="変換対象のテキスト（空白区切り）")
    mode: Optional[TranscriptionMode] = Field(
        default=None, description="ipa: 辞書のみ / english: 英語風の音綴りへ変換"
    )


class WordPhonetic(BaseModel):
    word: str
    phonetic: str


class ConvertResponse(BaseModel):
    """Response model for text-to-phonetic conversion.

    `phonetic` は単語ごとの結果を半角スペースで連結したもの、
    `words` は入力順の (単語, 結果) の組。
    """

    model_config = ConfigDict(json_schema_extra={
        "examples": [
            {
                "phonetic": "k-a-t",
                "words": [{"word": "cat", "phonetic": "k-a-t"}],
                "mode": "english",
            }
        ]
    })

    phonetic: str
    words: List[WordPhonetic] = Field(default_factory=list)
    mode: TranscriptionMode


class DictionaryStats(BaseModel):
    entries: int
    source: Optional[str] = None
    loaded: bool

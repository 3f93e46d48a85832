from __future__ import annotations

from concurrent.futures import Executor
from functools import partial

import anyio  # オフロード用
from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError

from ..logging import logger
from ..models.convert import ConvertRequest, ConvertResponse, DictionaryStats, WordPhonetic
from ..transcription import TranscriptionService, phonetic_string

router = APIRouter(tags=["convert"])


def get_transcription_service(request: Request) -> TranscriptionService:
    """Return the service built during application startup."""
    return request.app.state.transcription_service


def get_transcription_executor(request: Request) -> Executor | None:
    return getattr(request.app.state, "transcription_executor", None)


@router.post("/convert", response_model=ConvertResponse, summary="テキストを発音表記へ変換")
async def convert_text(
    req: ConvertRequest,
    request: Request,
    service: TranscriptionService = Depends(get_transcription_service),
    executor: Executor | None = Depends(get_transcription_executor),
) -> ConvertResponse:
    """Convert whitespace-separated words into their phonetic forms.

    辞書に無い単語はそのまま返す。結果は常に入力順。
    """
    max_length = request.app.state.max_text_length
    if len(req.text) > max_length:
        # 上限は設定値で決まるためモデル側では検証できない。
        # 他の入力エラーと同じ 422 の形式で返す。
        raise RequestValidationError(
            [
                {
                    "type": "string_too_long",
                    "loc": ("body", "text"),
                    "msg": f"String should have at most {max_length} characters",
                    "input": req.text,
                    "ctx": {"max_length": max_length},
                }
            ]
        )
    mode = req.mode or service.default_mode
    # 同期実装の変換処理をスレッドにオフロードし、イベントループのブロッキングを防ぐ
    # anyio.to_thread.run_sync はキーワード引数を転送しないため partial で包む
    results = await anyio.to_thread.run_sync(
        partial(service.transcribe_text, req.text, mode, executor=executor)
    )
    logger.info("convert_request", words=len(results), mode=mode.value)
    return ConvertResponse(
        phonetic=phonetic_string(results),
        words=[WordPhonetic(word=item.word, phonetic=item.phonetic) for item in results],
        mode=mode,
    )


@router.get("/api/dictionary/stats", response_model=DictionaryStats)
def dictionary_stats(
    service: TranscriptionService = Depends(get_transcription_service),
) -> DictionaryStats:
    """Report the size and origin of the loaded pronunciation dictionary."""
    dictionary = service.dictionary
    return DictionaryStats(
        entries=len(dictionary),
        source=dictionary.source,
        loaded=len(dictionary) > 0,
    )

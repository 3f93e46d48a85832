from __future__ import annotations

from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from .config import Settings, settings
from .dictionary import PronunciationDictionary
from .logging import configure_logging, logger
from .middleware import AccessLogMiddleware, RequestIDMiddleware
from .routers import convert, health
from .symbols import SymbolMapper
from .transcription import TranscriptionService


def build_transcription_service(
    config: Settings, dictionary: PronunciationDictionary | None = None
) -> TranscriptionService:
    """Load the dictionary once and wrap it in a shared service.

    辞書ファイルが無くても起動は継続する（全単語がそのまま返る）。
    """
    if dictionary is None:
        dictionary = PronunciationDictionary.load(
            config.dictionary_path, encoding=config.dictionary_encoding
        )
    return TranscriptionService(
        dictionary,
        SymbolMapper(),
        default_mode=config.transcription_mode,
    )


def create_app(
    config: Settings | None = None,
    *,
    dictionary: PronunciationDictionary | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application instance.

    辞書と記号表はここで一度だけ構築し、`app.state` 経由で各リクエストへ注入する。
    """
    config = config or settings
    configure_logging(config.log_level.upper())

    @asynccontextmanager
    async def lifespan(application: FastAPI) -> AsyncIterator[None]:
        # 起動ごとにプールを作り直す。停止済みのプールは再利用できない。
        executor: ThreadPoolExecutor | None = None
        if config.transcription_workers > 0:
            executor = ThreadPoolExecutor(
                max_workers=config.transcription_workers,
                thread_name_prefix="transcribe",
            )
        application.state.transcription_executor = executor
        try:
            yield
        finally:
            application.state.transcription_executor = None
            if executor is not None:
                executor.shutdown(wait=False)

    app = FastAPI(title="Phonetic API", version="0.1.0", lifespan=lifespan)
    app.state.transcription_service = build_transcription_service(config, dictionary)
    # lifespan 外（起動前）のリクエストは逐次処理になる
    app.state.transcription_executor = None
    app.state.max_text_length = config.max_text_length

    configured_origins = list(config.allowed_cors_origins)
    allow_credentials = bool(configured_origins)
    if not configured_origins:
        configured_origins = ["*"]

    # なぜ: ワイルドカード許可時に資格情報を無効化し、設定で明示された場合のみ
    # クレデンシャル付き CORS を許可する。
    app.add_middleware(
        CORSMiddleware,
        allow_origins=configured_origins,
        allow_credentials=allow_credentials,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    # Starlette では後から追加したミドルウェアが外側で実行される。
    # AccessLog を最外周に置き、RequestID より先に request_id を採番する。
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(AccessLogMiddleware)

    app.include_router(convert.router)
    app.include_router(health.router)

    logger.info(
        "app_created",
        environment=config.environment,
        dictionary_entries=len(app.state.transcription_service.dictionary),
        transcription_mode=config.transcription_mode,
        transcription_workers=config.transcription_workers,
    )
    return app

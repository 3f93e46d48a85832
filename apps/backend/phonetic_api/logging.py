"""Structured logging setup.

構造化ログ（JSON）の初期化を一元化する。リクエスト ID などの
ContextVar に束縛した値は、同一リクエスト内の全ログへ自動付与される。
"""

import logging

import structlog
from structlog import contextvars as structlog_contextvars


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure structlog for application-wide logging.

    標準 logging を初期化し、structlog で ISO タイムスタンプと
    JSON 形式の出力を有効化する。
    """
    # stdlib 側の出力に "INFO:logger:" のようなプレフィックスを付けない。
    # force=True で既存ハンドラ（uvicorn 等）を上書きして一貫化。
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog_contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


logger = structlog.get_logger()

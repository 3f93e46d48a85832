from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


DEFAULT_DICTIONARY_PATH = "en_UK.txt"
_TRANSCRIPTION_MODES = frozenset({"ipa", "english"})
_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    環境変数から読み込まれるアプリ設定クラス。
    - dictionary_path: 発音辞書ファイル（1 行 1 語、`<word> <IPA>` 形式）
    - transcription_mode: 既定の変換パイプライン（ipa / english）
    - transcription_workers: 単語単位の並列変換に使うスレッド数
    """

    environment: str = Field(
        default="development",
        description="Runtime environment / 実行環境",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level / ルートロガーのレベル",
    )

    # --- 発音辞書 ---
    dictionary_path: str = Field(
        default=DEFAULT_DICTIONARY_PATH,
        description="Path to the pronunciation dictionary / 発音辞書ファイルのパス",
    )
    dictionary_encoding: str = Field(
        default="utf-8",
        description="Text encoding of the dictionary file / 発音辞書ファイルの文字コード",
    )

    # --- 変換 ---
    transcription_mode: str = Field(
        default="english",
        description=(
            "Default pipeline: 'ipa' (dictionary only) or 'english' (IPA re-mapped) / "
            "既定の変換パイプライン"
        ),
    )
    transcription_workers: int = Field(
        default=4,
        ge=0,
        description=(
            "Thread pool size for per-word transcription (0 disables the pool) / "
            "単語単位の並列変換スレッド数（0 で逐次処理）"
        ),
    )
    max_text_length: int = Field(
        default=10000,
        ge=1,
        description="Max characters accepted by /convert / 1 リクエストの最大文字数",
    )

    # --- HTTP ---
    host: str = Field(default="127.0.0.1", description="Bind host / 待受ホスト")
    port: int = Field(default=3005, description="Bind port / 待受ポート")
    # 未設定の場合はワイルドカード（認証クッキー非許可）にフォールバックする。
    allowed_cors_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(),
        description=(
            "Comma separated CORS origins / CORS で許可するオリジンのカンマ区切り一覧"
        ),
        validation_alias=AliasChoices("allowed_cors_origins", "cors_allowed_origins"),
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        """Reject unknown level names before `logging.basicConfig` sees them."""

        normalised = value.strip().upper()
        if normalised not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return normalised

    @field_validator("transcription_mode", mode="after")
    @classmethod
    def _validate_transcription_mode(cls, value: str) -> str:
        """Reject unknown pipeline names at startup instead of per request."""

        normalised = value.strip().lower()
        if normalised not in _TRANSCRIPTION_MODES:
            raise ValueError(
                f"transcription_mode must be one of {sorted(_TRANSCRIPTION_MODES)}"
            )
        return normalised

    @field_validator("allowed_cors_origins", mode="before")
    @classmethod
    def _normalise_allowed_cors_origins(
        cls, raw_origins: object
    ) -> tuple[str, ...] | object:  # pragma: no cover - pydantic handles typing
        """Convert environment input into a deduplicated tuple of origins.

        なぜ: CORS 設定を `.env` で管理するときに空白や重複が混ざりやすいため、
        FastAPI へ渡す前にトリムと重複排除を行って安全な配列へ正規化する。
        """

        if raw_origins is None:
            candidates: list[str] = []
        elif isinstance(raw_origins, str):
            candidates = raw_origins.split(",")
        else:
            try:
                candidates = list(raw_origins)
            except TypeError:
                return raw_origins

        normalised: list[str] = []
        seen: set[str] = set()
        for candidate in candidates:
            if not isinstance(candidate, str):
                continue
            trimmed = candidate.strip()
            if not trimmed or trimmed in seen:
                continue
            seen.add(trimmed)
            normalised.append(trimmed)

        return tuple(normalised)


settings = Settings()

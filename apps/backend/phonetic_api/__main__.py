"""Command line entry point: run the HTTP API or transcribe text directly."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from .config import Settings, settings
from .dictionary import PronunciationDictionary
from .logging import configure_logging
from .symbols import SymbolMapper
from .transcription import TranscriptionMode, TranscriptionService


def _build_parser(config: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="phonetic_api", description=__doc__)
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="HTTP API を起動する。")
    serve.add_argument(
        "--host",
        default=config.host,
        help=f"待受ホスト（既定: {config.host}）。",
    )
    serve.add_argument(
        "--port",
        default=config.port,
        type=int,
        help=f"待受ポート（既定: {config.port}）。",
    )

    transcribe = subparsers.add_parser(
        "transcribe", help="テキストを変換して JSON を標準出力へ書き出す。"
    )
    transcribe.add_argument("text", help="空白区切りの変換対象テキスト。")
    transcribe.add_argument(
        "--mode",
        choices=[mode.value for mode in TranscriptionMode],
        default=config.transcription_mode,
        help="ipa: 辞書のみ / english: 英語風の音綴り（既定は設定値）。",
    )
    transcribe.add_argument(
        "--dictionary",
        default=config.dictionary_path,
        help=f"発音辞書ファイル（既定: {config.dictionary_path}）。",
    )
    return parser


def _run_transcribe(args: argparse.Namespace, config: Settings) -> int:
    dictionary = PronunciationDictionary.load(
        args.dictionary, encoding=config.dictionary_encoding
    )
    service = TranscriptionService(dictionary, SymbolMapper(), default_mode=args.mode)
    results = service.transcribe_text(args.text)
    payload = [{"word": item.word, "phonetic": item.phonetic} for item in results]
    sys.stdout.write(json.dumps(payload, ensure_ascii=False) + "\n")
    return 0


def _run_serve(args: argparse.Namespace, config: Settings) -> int:
    import uvicorn

    from .main import create_app

    uvicorn.run(create_app(config), host=args.host, port=args.port, log_config=None)
    return 0


def main(argv: Sequence[str] | None = None, config: Settings | None = None) -> int:
    config = config or settings
    args = _build_parser(config).parse_args(argv)
    if args.command == "serve":
        return _run_serve(args, config)
    # ログは stderr、結果 JSON は stdout に分離する
    configure_logging(config.log_level.upper())
    return _run_transcribe(args, config)


if __name__ == "__main__":
    sys.exit(main())

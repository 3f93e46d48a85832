import json
from pathlib import Path

import pytest

from phonetic_api.__main__ import main
from phonetic_api.config import Settings


@pytest.fixture()
def dictionary_file(tmp_path: Path) -> Path:
    path = tmp_path / "en_UK.txt"
    path.write_text("the\t/ðə/\ncat\t/kæt/\n", encoding="utf-8")
    return path


def test_transcribe_prints_json(dictionary_file, capsys):
    code = main(
        ["transcribe", "the cat purrs", "--dictionary", str(dictionary_file)],
        config=Settings(_env_file=None),
    )

    assert code == 0
    payload = json.loads(capsys.readouterr().out.strip())
    assert payload == [
        {"word": "the", "phonetic": "dh-uh"},
        {"word": "cat", "phonetic": "k-a-t"},
        {"word": "purrs", "phonetic": "purrs"},
    ]


def test_transcribe_ipa_mode(dictionary_file, capsys):
    main(
        ["transcribe", "Cat", "--mode", "ipa", "--dictionary", str(dictionary_file)],
        config=Settings(_env_file=None),
    )

    payload = json.loads(capsys.readouterr().out.strip())
    assert payload == [{"word": "Cat", "phonetic": "/kæt/"}]


def test_unknown_mode_is_a_usage_error(dictionary_file):
    with pytest.raises(SystemExit) as excinfo:
        main(
            ["transcribe", "cat", "--mode", "klingon"],
            config=Settings(_env_file=None),
        )
    assert excinfo.value.code == 2


def test_serve_runs_uvicorn_with_configured_address(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    import uvicorn

    monkeypatch.setattr(uvicorn, "run", fake_run)

    code = main(
        ["serve", "--port", "4010"],
        config=Settings(_env_file=None, dictionary_path="does-not-exist.txt"),
    )

    assert code == 0
    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 4010
    assert calls["app"].state.transcription_service is not None

"""辞書検索と記号変換を合成した変換サービスの検証。"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from phonetic_api.dictionary import PronunciationDictionary
from phonetic_api.symbols import SymbolMapper
from phonetic_api.transcription import (
    TranscriptionMode,
    TranscriptionService,
    WordTranscription,
    phonetic_string,
    strip_delimiters,
)


@pytest.fixture()
def dictionary() -> PronunciationDictionary:
    return PronunciationDictionary.build(
        [
            "cat /kæt/",
            "the /ðə/",
            "chew [tʃuː]",
            "hat hæt",
            "slash /",
        ]
    )


@pytest.fixture()
def service(dictionary) -> TranscriptionService:
    return TranscriptionService(dictionary, SymbolMapper())


def test_english_mode_strips_delimiters_and_maps(service):
    assert service.transcribe("cat") == "k-a-t"
    assert service.transcribe("CAT") == "k-a-t"
    assert service.transcribe("chew") == "ch-oo-:"


def test_ipa_mode_returns_raw_dictionary_value(service):
    assert service.transcribe("cat", TranscriptionMode.ipa) == "/kæt/"
    assert service.transcribe("Cat", "ipa") == "/kæt/"


def test_unknown_words_pass_through_in_both_modes(service):
    assert service.transcribe("xylophone") == "xylophone"
    assert service.transcribe("Xylophone", TranscriptionMode.ipa) == "Xylophone"


def test_undelimited_entries_are_mapped_without_stripping(service):
    assert service.transcribe("hat") == "h-a-t"
    assert service.transcribe("slash") == "/"


def test_default_mode_is_configurable(dictionary):
    ipa_service = TranscriptionService(dictionary, default_mode="ipa")
    assert ipa_service.default_mode is TranscriptionMode.ipa
    assert ipa_service.transcribe("the") == "/ðə/"
    assert ipa_service.transcribe("the", "english") == "dh-uh"


def test_unknown_mode_is_rejected(service):
    with pytest.raises(ValueError):
        service.transcribe("cat", "klingon")
    with pytest.raises(ValueError):
        TranscriptionService(PronunciationDictionary(), default_mode="klingon")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/kæt/", "kæt"),
        ("[kæt]", "kæt"),
        ("kæt", "kæt"),
        ("/kæt", "/kæt"),
        ("[kæt/", "[kæt/"),
        ("/kæt]", "/kæt]"),
        ("]kæt[", "]kæt["),
        ("//", ""),
        ("/", "/"),
        ("", ""),
    ],
)
def test_strip_delimiters(raw, expected):
    assert strip_delimiters(raw) == expected


def test_transcribe_text_empty_and_whitespace_only(service):
    assert service.transcribe_text("") == []
    assert service.transcribe_text(" \t\n ") == []


def test_transcribe_text_single_word(service):
    assert service.transcribe_text("cat") == [WordTranscription("cat", "k-a-t")]


def test_transcribe_text_preserves_order_and_punctuation(service):
    results = service.transcribe_text("the  cat\tsat, the")
    assert [item.word for item in results] == ["the", "cat", "sat,", "the"]
    assert [item.phonetic for item in results] == ["dh-uh", "k-a-t", "sat,", "dh-uh"]
    assert phonetic_string(results) == "dh-uh k-a-t sat, dh-uh"


def test_transcribe_text_with_executor_matches_sequential(service):
    text = "a b c the cat chew hat"
    with ThreadPoolExecutor(max_workers=4) as executor:
        parallel = service.transcribe_text(text, executor=executor)
    assert parallel == service.transcribe_text(text)
    assert [item.word for item in parallel] == text.split()


def test_results_follow_input_order_not_completion_order(dictionary):
    release_first = threading.Event()

    class SlowFirstService(TranscriptionService):
        def transcribe(self, word, mode=None):
            if word == "a":
                # 後続の単語が先に完了するまで待つ
                release_first.wait(timeout=2)
            elif word == "c":
                release_first.set()
            time.sleep(0.01)
            return super().transcribe(word, mode)

    slow = SlowFirstService(dictionary)
    with ThreadPoolExecutor(max_workers=3) as executor:
        results = slow.transcribe_text("a b c", executor=executor)

    assert [item.word for item in results] == ["a", "b", "c"]


def test_phonetic_string_of_empty_results():
    assert phonetic_string([]) == ""

# tests/test_resolve.py
"""Tests for turning tokens into a validated translation request."""

import pytest

from tarjimly.core.languages import Vocabulary
from tarjimly.core.resolve import (
    MissingParameterError,
    RequestError,
    SameLanguageError,
    TranslationRequest,
    UnknownLanguageError,
    resolve_request,
)


# === Valid requests ===

def test_codes():
    request = resolve_request(["hello", "en", "it"])
    assert request == TranslationRequest("hello", "en", "it", "English", "Italian")


def test_names_any_case():
    request = resolve_request(["hello", "ENGLISH", "ItaLian"])
    assert (request.source, request.target) == ("en", "it")


def test_mixed_code_and_name():
    request = resolve_request(["hello", "eN", "ItaLian"])
    assert (request.source, request.target) == ("en", "it")


def test_multi_word_language():
    request = resolve_request(["hello", "scots", "gaelic", "italian"])
    assert request.source == "gd"
    assert request.source_name == "Scots Gaelic"
    assert request.text == "hello"


def test_special_characters_and_numbers():
    assert resolve_request(["hello!@#", "en", "it"]).text == "hello!@#"
    assert resolve_request(["12345", "en", "it"]).text == "12345"


def test_to_dict():
    request = resolve_request(["hello", "world", "en", "it"])
    assert request.to_dict() == {
        "text": "hello world",
        "source": "en",
        "target": "it",
        "source_name": "English",
        "target_name": "Italian",
    }


def test_custom_vocabulary():
    vocab = Vocabulary({"tlh": "Klingon", "en": "English"})
    request = resolve_request(["qapla'", "klingon", "en"], vocab)
    assert (request.source, request.target) == ("tlh", "en")


# === Errors ===

@pytest.mark.parametrize("tokens", [
    [],
    ["hello"],
    ["hello", "en"],
    ["en", "it"],
])
def test_missing_parameter(tokens):
    with pytest.raises(MissingParameterError, match="A parameter is missing"):
        resolve_request(tokens)


def test_unknown_from():
    with pytest.raises(UnknownLanguageError) as exc:
        resolve_request(["hello", "klingon", "italian"])
    assert exc.value.designators == ["klingon"]
    assert "'from' and/or 'to' language is required and must be valid" in str(exc.value)
    assert "'klingon' is not a recognized language code or name." in str(exc.value)


def test_unknown_code():
    with pytest.raises(UnknownLanguageError) as exc:
        resolve_request(["hello", "qq", "it"])
    assert exc.value.designators == ["qq"]


def test_code_lookalike_is_unknown():
    with pytest.raises(UnknownLanguageError) as exc:
        resolve_request(["hello", "en-gb", "it"])
    assert exc.value.designators == ["en-gb"]


def test_both_unknown():
    with pytest.raises(UnknownLanguageError) as exc:
        resolve_request(["hello", "klingon", "vulcan"])
    assert exc.value.designators == ["klingon", "vulcan"]


def test_same_language():
    with pytest.raises(SameLanguageError, match="must be different") as exc:
        resolve_request(["hello", "en", "en"])
    assert exc.value.code == "en"


def test_same_language_code_and_name():
    with pytest.raises(SameLanguageError):
        resolve_request(["hello", "english", "EN"])


def test_errors_are_value_errors():
    assert issubclass(RequestError, ValueError)
    for cls in (MissingParameterError, UnknownLanguageError, SameLanguageError):
        assert issubclass(cls, RequestError)

"""Split '<text> <from language> <to language>' arguments into a translation request."""

from tarjimly.core.languages import LANGUAGE_NAMES, Vocabulary, VocabularyError, default_vocabulary
from tarjimly.core.resolve import (
    MissingParameterError,
    RequestError,
    SameLanguageError,
    TranslationRequest,
    UnknownLanguageError,
    resolve_request,
)
from tarjimly.core.segment import Segmentation, Segmenter, SplitStatus, segment, split_args

__version__ = "0.1.0"

__all__ = [
    "LANGUAGE_NAMES",
    "MissingParameterError",
    "RequestError",
    "SameLanguageError",
    "Segmentation",
    "Segmenter",
    "SplitStatus",
    "TranslationRequest",
    "UnknownLanguageError",
    "Vocabulary",
    "VocabularyError",
    "default_vocabulary",
    "resolve_request",
    "segment",
    "split_args",
]

# src/tarjimly/core/resolve.py
"""
Turn positional tokens into a validated translation request.

Segmentation only guesses where the languages are; this step maps
each designator back to a code and rejects anything unusable.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Sequence

from tarjimly.core.languages import Vocabulary, default_vocabulary
from tarjimly.core.segment import Segmenter, SplitStatus


logger = logging.getLogger(__name__)

USAGE = "<word or phrase> <from language> <to language>"


class RequestError(ValueError):
    """Base class for unusable text/from/to arguments."""


class MissingParameterError(RequestError):
    def __init__(self):
        super().__init__(f"A parameter is missing. Correct command should be {USAGE}")


class UnknownLanguageError(RequestError):
    def __init__(self, designators: list[str]):
        self.designators = designators
        lines = ["'from' and/or 'to' language is required and must be valid."]
        for d in designators:
            lines.append(f"'{d}' is not a recognized language code or name.")
        super().__init__("\n".join(lines))


class SameLanguageError(RequestError):
    def __init__(self, code: str):
        self.code = code
        super().__init__("'from' and 'to' languages must be different.")


@dataclass(frozen=True)
class TranslationRequest:
    text: str
    source: str        # language code
    target: str        # language code
    source_name: str
    target_name: str

    def to_dict(self) -> dict:
        return asdict(self)


def resolve_request(
    tokens: Sequence[str],
    vocabulary: Vocabulary | None = None,
) -> TranslationRequest:
    """
    Segment tokens and validate the result.

    Raises:
        MissingParameterError: fewer than 3 tokens, or no text left
        UnknownLanguageError: a designator is not a known code or name
        SameLanguageError: both designators name the same language
    """
    vocabulary = vocabulary if vocabulary is not None else default_vocabulary()

    if len(tokens) < 3:
        raise MissingParameterError()

    seg = Segmenter(vocabulary).segment(tokens)
    if seg.status is SplitStatus.INSUFFICIENT or not seg.text:
        raise MissingParameterError()

    source = vocabulary.code_for(seg.from_designator)
    target = vocabulary.code_for(seg.to_designator)

    unknown = []
    if source is None:
        unknown.append(seg.from_designator)
    if target is None:
        unknown.append(seg.to_designator)
    if unknown:
        logger.debug("Unresolved designators %r (%s)", unknown, seg.status.value)
        raise UnknownLanguageError(unknown)

    if source == target:
        raise SameLanguageError(source)

    return TranslationRequest(
        text=seg.text,
        source=source,
        target=target,
        source_name=vocabulary.names[source],
        target_name=vocabulary.names[target],
    )

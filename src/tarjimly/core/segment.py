# src/tarjimly/core/segment.py
"""
Split positional tokens into text, source language and target language.

    hello world scots gaelic italian
    └─ text ──┘ └─ from ───┘ └ to ┘

There are no delimiters, and a language may span several tokens, so
the split is found by trying every (to, from) span pair from the
right and checking both against the vocabulary.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from tarjimly.core.languages import Vocabulary, default_vocabulary


logger = logging.getLogger(__name__)


class SplitStatus(Enum):
    RESOLVED = "resolved"          # both designators found in the vocabulary
    FALLBACK = "fallback"          # last two tokens guessed, unvalidated
    INSUFFICIENT = "insufficient"  # fewer than two tokens


@dataclass(frozen=True)
class Segmentation:
    text: str
    from_designator: str
    to_designator: str
    status: SplitStatus

    @property
    def resolved(self) -> bool:
        return self.status is SplitStatus.RESOLVED


def split_args(args: Iterable[str]) -> list[str]:
    """Collapse argv-style strings into single whitespace-free tokens."""
    tokens = []
    for arg in args:
        tokens.extend(arg.split())
    return tokens


class Segmenter:
    def __init__(self, vocabulary: Vocabulary | None = None):
        self.vocabulary = vocabulary if vocabulary is not None else default_vocabulary()

    def segment(self, tokens: Sequence[str]) -> Segmentation:
        """
        Find (text, from, to) in tokens.

        The to span is tried shortest first (i from n-1 down), and for
        each known to, the from span is grown leftwards (j from i-1
        down to 1). The first pair where both are known wins.

        Note this prefers a one-token `to` over a longer one: with
        "scots" and "gaelic" both known, "hi en scots gaelic" splits as
        ("hi en", "scots", "gaelic") rather than ("hi", "en", "scots gaelic").
        """
        tokens = list(tokens)
        n = len(tokens)

        if n < 2:
            logger.debug("Only %d token(s), cannot split", n)
            return Segmentation(" ".join(tokens), "", "", SplitStatus.INSUFFICIENT)

        known = self.vocabulary.designators

        for i in range(n - 1, 0, -1):
            to_candidate = " ".join(tokens[i:]).lower()
            if to_candidate not in known:
                continue
            for j in range(i - 1, 0, -1):
                from_candidate = " ".join(tokens[j:i]).lower()
                if from_candidate in known:
                    logger.debug(
                        "Split at j=%d i=%d: from=%r to=%r", j, i, from_candidate, to_candidate
                    )
                    return Segmentation(
                        " ".join(tokens[:j]),
                        from_candidate,
                        to_candidate,
                        SplitStatus.RESOLVED,
                    )

        logger.debug("No known split in %r, falling back to last two tokens", tokens)
        return Segmentation(
            " ".join(tokens[: n - 2]),
            tokens[n - 2],
            tokens[n - 1],
            SplitStatus.FALLBACK,
        )


def segment(tokens: Sequence[str], vocabulary: Vocabulary | None = None) -> Segmentation:
    return Segmenter(vocabulary).segment(tokens)

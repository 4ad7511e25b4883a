"""
Chirpy Backend — Chirp Moderation Service
===========================================

What:  Length validation and banned-word redaction for chirp bodies.
How:   ChirpModerator splits the body on single spaces and asks a
       WordClassifier about each lowercased token; banned tokens are
       replaced with "****" and the tokens are joined back together.
Who:   Called by POST /api/validate_chirp.

Tokenization rules:
    - The delimiter is exactly one U+0020 space. "a  b" yields ["a", "", "b"]
      and re-joins to "a  b"; str.split() with no argument would collapse it.
    - Tabs and newlines are part of a token.
    - A token with any Unicode punctuation character is never redacted, so
      "kerfuffle!" passes through while "kerfuffle" becomes "****".

    Input:  "This is a kerfuffle opinion I need to share with the world"
    Output: "This is a **** opinion I need to share with the world" (flagged)
"""

import logging
import unicodedata
from dataclasses import dataclass
from typing import FrozenSet, Iterable

from chirpy.config import settings
from chirpy.exceptions import ChirpTooLongError

logger = logging.getLogger(__name__)

REDACTION_MASK = "****"
TOKEN_DELIMITER = " "


def has_punctuation(token: str) -> bool:
    """True if any character is in a Unicode punctuation category (Pc, Pd, Ps, Pe, Pi, Pf, Po)."""
    return any(unicodedata.category(ch).startswith("P") for ch in token)


class WordClassifier:
    """
    Decides whether a single token is a banned term.

    The banned set is lowercased once at construction and never mutated.
    """

    def __init__(self, banned_terms: Iterable[str]):
        self._banned: FrozenSet[str] = frozenset(term.lower() for term in banned_terms)

    @property
    def banned_terms(self) -> FrozenSet[str]:
        return self._banned

    def is_banned(self, token: str) -> bool:
        if has_punctuation(token):
            return False
        return token.lower() in self._banned


@dataclass(frozen=True)
class ModerationResult:
    """Outcome of moderating one chirp. Built per request, never stored."""

    cleaned_body: str
    flagged: bool


class ChirpModerator:
    """
    Validates chirp length and redacts banned words.

    Stateless apart from its read-only classifier, so a single instance is
    shared by all concurrent requests.
    """

    def __init__(self, classifier: WordClassifier, max_length: int = 140):
        self.classifier = classifier
        self.max_length = max_length

    def moderate(self, body: str) -> ModerationResult:
        """
        Validate and clean a chirp body.

        Returns:
            ModerationResult with the redacted body and whether anything
            was redacted.

        Raises:
            ChirpTooLongError: body is longer than max_length characters.
        """
        if len(body) > self.max_length:
            raise ChirpTooLongError(length=len(body), max_length=self.max_length)

        original_tokens = body.split(TOKEN_DELIMITER)
        lower_tokens = body.lower().split(TOKEN_DELIMITER)

        cleaned_tokens = []
        flagged = False
        for original, lowered in zip(original_tokens, lower_tokens):
            if self.classifier.is_banned(lowered):
                cleaned_tokens.append(REDACTION_MASK)
                flagged = True
            else:
                cleaned_tokens.append(original)

        cleaned_body = TOKEN_DELIMITER.join(cleaned_tokens)
        if flagged:
            logger.debug("Redacted banned words from chirp (%d chars)", len(body))
        return ModerationResult(cleaned_body=cleaned_body, flagged=flagged)


# Singleton instance: configured from settings at import time
chirp_moderator = ChirpModerator(
    classifier=WordClassifier(settings.banned_words_set),
    max_length=settings.max_chirp_length,
)

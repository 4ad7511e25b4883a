"""
Chirpy Backend — Moderation Service Unit Tests
================================================

What:  Tests for WordClassifier and ChirpModerator.
How:   Pure in-memory calls; no HTTP, no database.

What we test:
    ✅ Case-insensitive exact matching of banned terms
    ✅ Punctuation-bearing tokens are never banned
    ✅ Length limit (140 characters) and its boundary
    ✅ Single-space tokenization preserves repeated spaces exactly
    ✅ Clean input passes through unchanged; re-moderation is stable
"""

import pytest

from chirpy.exceptions import ChirpTooLongError, ValidationError
from chirpy.services.moderation import (
    ChirpModerator,
    ModerationResult,
    WordClassifier,
    chirp_moderator,
    has_punctuation,
)

BANNED = {"kerfuffle", "sharbert", "fornax"}


class TestWordClassifier:
    """Tests for single-token classification."""

    def setup_method(self):
        self.classifier = WordClassifier(BANNED)

    def test_exact_match_is_banned(self):
        assert self.classifier.is_banned("kerfuffle")
        assert self.classifier.is_banned("sharbert")
        assert self.classifier.is_banned("fornax")

    def test_match_is_case_insensitive(self):
        assert self.classifier.is_banned("KerFuffle")
        assert self.classifier.is_banned("FORNAX")

    def test_substring_is_not_banned(self):
        """No stemming or fuzzy matching: plurals and compounds pass."""
        assert not self.classifier.is_banned("kerfuffles")
        assert not self.classifier.is_banned("sharbertfornax")

    def test_punctuation_excludes_token(self):
        assert not self.classifier.is_banned("kerfuffle!")
        assert not self.classifier.is_banned("fornax.")
        assert not self.classifier.is_banned("'sharbert'")
        assert not self.classifier.is_banned("¿fornax")

    def test_empty_token_is_not_banned(self):
        assert not self.classifier.is_banned("")

    def test_banned_terms_are_lowercased(self):
        classifier = WordClassifier({"Kerfuffle"})
        assert classifier.banned_terms == frozenset({"kerfuffle"})
        assert classifier.is_banned("KERFUFFLE")


class TestHasPunctuation:

    def test_ascii_punctuation(self):
        assert has_punctuation("a,b")
        assert has_punctuation("-")

    def test_unicode_punctuation(self):
        assert has_punctuation("«word»")

    def test_symbols_are_not_punctuation(self):
        """Currency and math symbols are Unicode symbols (S*), not punctuation."""
        assert not has_punctuation("$5+3")

    def test_plain_word(self):
        assert not has_punctuation("chirp")


class TestChirpModerator:
    """Tests for the moderate() pipeline."""

    def setup_method(self):
        self.moderator = ChirpModerator(WordClassifier(BANNED))

    # ── Redaction ─────────────────────────────────────────────────────────

    def test_redacts_banned_word_in_sentence(self):
        result = self.moderator.moderate(
            "This is a kerfuffle opinion I need to share with the world"
        )
        assert result == ModerationResult(
            cleaned_body="This is a **** opinion I need to share with the world",
            flagged=True,
        )

    def test_redacts_regardless_of_case(self):
        result = self.moderator.moderate("KerFuffle")
        assert result.cleaned_body == "****"
        assert result.flagged is True

    def test_redacts_multiple_words_keeping_other_casing(self):
        result = self.moderator.moderate("Sharbert is FORNAX but Kerfuffle. stays")
        assert result.cleaned_body == "**** is **** but Kerfuffle. stays"
        assert result.flagged is True

    def test_punctuation_adjacent_word_is_kept(self):
        result = self.moderator.moderate("kerfuffle!")
        assert result.cleaned_body == "kerfuffle!"
        assert result.flagged is False

    def test_tab_is_not_a_delimiter(self):
        result = self.moderator.moderate("kerfuffle\tfornax")
        assert result.cleaned_body == "kerfuffle\tfornax"
        assert result.flagged is False

    # ── Clean Input ───────────────────────────────────────────────────────

    @pytest.mark.parametrize(
        "body",
        [
            "I had something interesting for breakfast",
            "a  b",
            "  leading and trailing  ",
            "   ",
            "",
            "unicode ✨ emoji 🐦 ok",
        ],
    )
    def test_clean_input_is_unchanged(self, body):
        result = self.moderator.moderate(body)
        assert result.cleaned_body == body
        assert result.flagged is False

    def test_repeated_spaces_survive_redaction(self):
        result = self.moderator.moderate("a  fornax   b")
        assert result.cleaned_body == "a  ****   b"

    def test_remoderation_is_stable(self):
        first = self.moderator.moderate("fornax and sharbert walk into a bar")
        second = self.moderator.moderate(first.cleaned_body)
        assert second.cleaned_body == first.cleaned_body
        assert second.flagged is False

    # ── Length Validation ─────────────────────────────────────────────────

    def test_exactly_140_characters_is_accepted(self):
        body = "a" * 140
        assert self.moderator.moderate(body).cleaned_body == body

    def test_141_characters_is_rejected(self):
        with pytest.raises(ChirpTooLongError, match="Chirp is too long") as exc_info:
            self.moderator.moderate("a" * 141)
        assert exc_info.value.context == {"field": "body", "length": 141, "max_length": 140}

    def test_too_long_is_a_validation_error(self):
        """Over-length chirps map to 400 through the ValidationError handler."""
        with pytest.raises(ValidationError):
            self.moderator.moderate("kerfuffle " * 20)

    def test_length_counts_characters_not_bytes(self):
        """140 two-byte characters are still 140 characters."""
        body = "é" * 140
        assert self.moderator.moderate(body).cleaned_body == body

    def test_custom_max_length(self):
        moderator = ChirpModerator(WordClassifier(BANNED), max_length=5)
        assert moderator.moderate("hello").flagged is False
        with pytest.raises(ChirpTooLongError):
            moderator.moderate("hello!")


class TestConfiguredModerator:
    """The module-level moderator is built from default settings."""

    def test_defaults(self):
        assert chirp_moderator.max_length == 140
        assert chirp_moderator.classifier.banned_terms == frozenset(BANNED)

"""Test text normalization."""

from fuzzyrank.core.text import (
    fold_case,
    is_special_char,
    is_word_boundary,
    normalize_text,
)


class TestNormalizeText:
    """Test comparison-string normalization."""

    def test_lowercases(self):
        """Should lower-case the text."""
        assert normalize_text("UserAccount") == "useraccount"

    def test_hyphen_becomes_space(self):
        """Should rewrite hyphens as spaces."""
        assert normalize_text("first-name") == "first name"

    def test_whitespace_becomes_space(self):
        """Should rewrite tabs and newlines as spaces."""
        assert normalize_text("a\tb\nc") == "a b c"

    def test_preserves_length(self):
        """Each boundary character maps to exactly one space."""
        text = "Some -- Mixed\t\tText"
        assert len(normalize_text(text)) == len(text)

    def test_special_chars_untouched(self):
        """Should leave identifier separators alone."""
        assert normalize_text("schema.user_id") == "schema.user_id"

    def test_empty(self):
        """Should return empty string for empty input."""
        assert normalize_text("") == ""


class TestFoldCase:
    """Test length-preserving case folding."""

    def test_ascii(self):
        assert fold_case("PostGres") == "postgres"

    def test_expanding_lowercase_kept(self):
        """Characters whose lower form is longer stay unchanged."""
        text = "İstanbul"
        folded = fold_case(text)
        assert len(folded) == len(text)
        assert folded == "İstanbul"


class TestCharClasses:
    """Test boundary character predicates."""

    def test_special_chars(self):
        for char in '\\/_+.#"@[({&':
            assert is_special_char(char)

    def test_not_special(self):
        for char in "a1 -)]}":
            assert not is_special_char(char)

    def test_word_boundary(self):
        assert is_word_boundary(" ")
        assert is_word_boundary("-")
        assert is_word_boundary("\t")
        assert not is_word_boundary("_")
        assert not is_word_boundary("")

"""Tests for text sanitization."""

from discovery_mcp.utils.sanitize import (
    LABEL_MAX_LENGTH,
    STATEMENT_MAX_LENGTH,
    sanitize_label,
    sanitize_text,
)


class TestSanitizeText:
    """Tests for sanitize_text function."""

    def test_sanitize_none(self) -> None:
        """Test sanitize returns None for None input."""
        assert sanitize_text(None) is None

    def test_sanitize_statement(self) -> None:
        """Test a purpose statement passes through trimmed."""
        text = "  My money exists to give my family options.  "
        assert sanitize_text(text) == "My money exists to give my family options."

    def test_sanitize_removes_control_chars(self) -> None:
        """Test control characters, including newlines, are removed."""
        assert sanitize_text("Protect\x00 my\r\n family\x7f\x9f") == "Protect my family"

    def test_sanitize_truncates_long_text(self) -> None:
        """Test long statements are truncated with an ellipsis."""
        result = sanitize_text("A" * (STATEMENT_MAX_LENGTH + 50), max_length=STATEMENT_MAX_LENGTH)
        assert len(result) == STATEMENT_MAX_LENGTH + 3
        assert result.endswith("...")

    def test_sanitize_exact_max_length(self) -> None:
        """Test text at exact max length is untouched."""
        assert sanitize_text("Retire", max_length=6) == "Retire"

    def test_sanitize_preserves_unicode(self) -> None:
        """Test Unicode characters are preserved."""
        assert sanitize_text("Épargne retraite 🌍") == "Épargne retraite 🌍"

    def test_sanitize_whitespace_only(self) -> None:
        """Test whitespace-only string becomes empty."""
        assert sanitize_text("   ") == ""


class TestSanitizeLabel:
    """Tests for sanitize_label function."""

    def test_label_cleaned(self) -> None:
        """Test a goal label is cleaned and trimmed."""
        assert sanitize_label(" College\x00 fund ") == "College fund"

    def test_non_string_is_none(self) -> None:
        """Test non-string labels are rejected."""
        assert sanitize_label(42) is None
        assert sanitize_label(None) is None
        assert sanitize_label(["Retire"]) is None

    def test_blank_is_none(self) -> None:
        """Test blank labels become None so callers can default them."""
        assert sanitize_label("  \t ") is None

    def test_label_truncated(self) -> None:
        """Test labels are capped at the label length."""
        result = sanitize_label("B" * 500)
        assert result == "B" * LABEL_MAX_LENGTH + "..."

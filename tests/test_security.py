"""Tests for log sanitization."""

from meilisearch_keys.security import sanitize_for_logging


class TestSanitizeForLogging:
    """Test masking of key values."""

    def test_sanitize_api_key(self):
        """Test that only the last characters of a key stay readable."""
        key = "d0552b41536279a0ad88bd595327b96f"
        result = sanitize_for_logging(key)
        assert result.endswith("b96f")
        assert result.count("*") == len(key) - 4

    def test_sanitize_short_string(self):
        """Test that short values are fully masked."""
        assert sanitize_for_logging("abc123") == "******"

    def test_sanitize_none(self):
        """Test sanitization of None value."""
        assert sanitize_for_logging(None) == "None"

    def test_sanitize_empty(self):
        """Test sanitization of empty value."""
        assert sanitize_for_logging("") == ""

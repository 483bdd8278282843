"""Tests for object key sanitization."""
from __future__ import annotations

from s3_path_resolver.sanitize import sanitize_object_key


class TestSanitizeObjectKey:
    """Test sanitize_object_key function."""

    def test_safe_keys_unchanged(self):
        for key in ["file.zip", "folder/sub-folder/file_1.tar.gz", "A-Z_0-9/x.y"]:
            assert sanitize_object_key(key) == key

    def test_unsafe_characters_stripped(self):
        """Test that characters outside the safe class are removed."""
        assert sanitize_object_key("my file (1).zip") == "myfile1.zip"
        assert sanitize_object_key("folder/na?me#&.pdf") == "folder/name.pdf"
        assert sanitize_object_key("path\\with\\backslashes.txt") == "pathwithbackslashes.txt"

    def test_non_ascii_stripped(self):
        assert sanitize_object_key("résumé.pdf") == "rsum.pdf"

    def test_no_percent_encoding(self):
        """Test that unsafe characters are dropped, not encoded."""
        assert sanitize_object_key("a b.zip") == "ab.zip"
        assert "%" not in sanitize_object_key("a b.zip")

    def test_all_unsafe_yields_empty(self):
        assert sanitize_object_key("!@#$ ()") == ""
        assert sanitize_object_key("") == ""

    def test_idempotent(self):
        """Test that sanitizing twice equals sanitizing once."""
        samples = ["my file (1).zip", "ok/key.txt", "!!", "ünï/cödé.bin", "a:b//c.d"]
        for raw in samples:
            once = sanitize_object_key(raw)
            assert sanitize_object_key(once) == once

"""
Tests for stateless validation rules.

Covers bucket naming, extension extraction and matching, and protocol
deny-list checks.
"""
from __future__ import annotations

import pytest

from s3_path_resolver.errors import InvalidBucketName
from s3_path_resolver.validate import (
    file_extension,
    find_disallowed_protocol,
    has_disallowed_protocol,
    has_valid_extension,
    is_valid_bucket,
    validate_bucket,
)


class TestValidateBucket:
    """Test validate_bucket function."""

    def test_valid_names_pass(self):
        """Test that names following the rules are accepted."""
        for name in ["abc", "my-bucket.1", "a" * 63, "123", "logs.example.com"]:
            validate_bucket(name)
            assert is_valid_bucket(name)

    def test_too_short_rejected(self):
        """Test that names shorter than 3 characters are rejected."""
        with pytest.raises(InvalidBucketName, match="between 3 and 63"):
            validate_bucket("ab")

        with pytest.raises(InvalidBucketName, match="between 3 and 63"):
            validate_bucket("")

    def test_too_long_rejected(self):
        """Test that names of 64 or more characters are rejected."""
        with pytest.raises(InvalidBucketName, match="between 3 and 63"):
            validate_bucket("a" * 64)

        assert not is_valid_bucket("a" * 100)

    def test_invalid_characters_rejected(self):
        """Test that uppercase, underscores and spaces are rejected."""
        for name in ["MyBucket", "my_bucket", "my bucket", "bucket!", "buck/et"]:
            with pytest.raises(InvalidBucketName, match="invalid characters"):
                validate_bucket(name)

    def test_error_carries_bucket(self):
        """Test that the rejected name is available on the error."""
        with pytest.raises(InvalidBucketName) as exc_info:
            validate_bucket("Bad_Bucket")
        assert exc_info.value.bucket == "Bad_Bucket"

    def test_error_is_value_error(self):
        """Test that bucket errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            validate_bucket("x")


class TestFileExtension:
    """Test file_extension function."""

    def test_simple_extension(self):
        assert file_extension("file.zip") == "zip"
        assert file_extension("/bucket/folder/file.pdf") == "pdf"

    def test_last_dot_wins(self):
        """Test that only the text after the last dot is the extension."""
        assert file_extension("archive.tar.gz") == "gz"

    def test_dots_in_directories_ignored(self):
        """Test that dots in earlier segments do not count."""
        assert file_extension("/my.bucket/folder/readme") == ""

    def test_trailing_slash_ignored(self):
        assert file_extension("/bucket/file.zip/") == "zip"

    def test_no_extension(self):
        assert file_extension("bucket/file") == ""
        assert file_extension("file.") == ""

    def test_case_preserved(self):
        assert file_extension("FILE.ZIP") == "ZIP"


class TestHasValidExtension:
    """Test has_valid_extension function."""

    def test_any_extension_without_allow_list(self):
        """Test that any non-empty extension passes when no allow-list is set."""
        assert has_valid_extension("file.exe")
        assert has_valid_extension("file.zip", [])
        assert not has_valid_extension("file")

    def test_allow_list_membership(self):
        """Test that the extension must be in a non-empty allow-list."""
        assert has_valid_extension("file.zip", ["zip", "rar"])
        assert not has_valid_extension("file.exe", ["zip", "rar"])
        assert not has_valid_extension("file", ["zip"])

    def test_allow_list_is_case_sensitive(self):
        """Test that matching against the allow-list is exact."""
        assert not has_valid_extension("file.ZIP", ["zip"])
        assert has_valid_extension("file.ZIP", ["ZIP"])


class TestDisallowedProtocol:
    """Test protocol deny-list helpers."""

    def test_protocol_found_anywhere(self):
        """Test that protocols are matched as substrings anywhere in the path."""
        protocols = ["http://", "ftp://"]
        assert has_disallowed_protocol("http://example.com/file.zip", protocols)
        assert has_disallowed_protocol("/bucket/redirect/ftp://x.zip", protocols)
        assert not has_disallowed_protocol("/bucket/file.zip", protocols)

    def test_first_match_returned(self):
        assert find_disallowed_protocol("ftp://host/file.zip", ["http://", "ftp://"]) == "ftp://"
        assert find_disallowed_protocol("/bucket/file.zip", ["http://"]) is None

    def test_empty_protocol_entries_ignored(self):
        """Test that blank deny-list entries never match every path."""
        assert not has_disallowed_protocol("/bucket/file.zip", [""])

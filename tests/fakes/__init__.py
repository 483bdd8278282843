"""Test fakes for s3-path-resolver."""

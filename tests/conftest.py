"""Root pytest configuration for s3-path-resolver tests."""
import pytest

from s3_path_resolver.resolver import PathResolver
from .fakes.fake_lookup import FakeDownloadLookup


ENV_VARS = (
    "S3_PATH_DEFAULT_BUCKET",
    "S3_PATH_ALLOWED_EXTENSIONS",
    "S3_PATH_DISALLOWED_PROTOCOLS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure no S3_PATH_* settings leak in from the outer environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def resolver():
    """Resolver with no default bucket, no allow-list and default protocols."""
    return PathResolver()


@pytest.fixture
def default_resolver():
    """Resolver with a default bucket configured."""
    return PathResolver(default_bucket="default-bucket-name")


@pytest.fixture
def lookup():
    """Fake download lookup seeded with a few records."""
    return FakeDownloadLookup({
        (1, 10): "/my-bucket/downloads/file.zip",
        (1, 11): "https://example.com/file.zip",
        (2, 20): "file.pdf",
        (3, 30): "   ",
    })

"""
Data models for resolved storage paths.

These Pydantic models give resolution results type safety and a stable
JSON shape for the CLI.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ResolvedPath(BaseModel):
    """
    A path split into its bucket and object key.

    Returned by PathResolver.resolve. Carries no identity beyond the call
    that produced it.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bucket: str = Field(..., description="Bucket name (passes the naming rules)")
    object_key: str = Field(..., alias="objectKey", description="Sanitized object key within the bucket")

    @computed_field
    @property
    def path(self) -> str:
        """
        Canonical leading-slash path for this bucket and key.

        Resolves back to the same pair whenever the original extension
        survived key sanitization.
        """
        return f"/{self.bucket}/{self.object_key}"

    def __str__(self) -> str:
        return self.path


__all__ = ["ResolvedPath"]

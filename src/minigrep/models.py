"""Resolved configuration for a single search invocation."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Config(BaseModel):
    """What to search for, where, and how to compare characters."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(description="Substring to search for")
    file_path: Path = Field(description="File whose lines are searched")
    case_insensitive: bool = Field(
        default=False, description="Lowercase query and lines before matching"
    )

    @property
    def case_sensitive(self) -> bool:
        """Whether characters are compared exactly."""
        return not self.case_insensitive

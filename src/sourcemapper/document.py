"""Pydantic model for the source map document."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    field_validator,
)

SUPPORTED_VERSION = 3
"""The only source map revision this package reads."""


class SourceMapDocument(BaseModel):
    """Top-level fields of a version 3 source map.

    Unknown keys are ignored. `file` and `sourceRoot` fall back to their
    defaults when present with a non-string value, and `mappings` is None
    unless it is a string. `sources` and `names` must hold strings only.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    version: StrictInt
    file: str = ""
    source_root: str = Field(default="", alias="sourceRoot")
    sources: tuple[StrictStr, ...] = ()
    names: tuple[StrictStr, ...] = ()
    mappings: str | None = None

    @field_validator("file", "source_root", mode="before")
    @classmethod
    def default_non_strings(cls, v: object) -> object:
        """Replace non-string values with the empty default."""
        return v if isinstance(v, str) else ""

    @field_validator("mappings", mode="before")
    @classmethod
    def drop_non_string_mappings(cls, v: object) -> object:
        """Treat non-string mappings as absent."""
        return v if isinstance(v, str) else None

    @field_validator("sources", "names", mode="before")
    @classmethod
    def default_null_lists(cls, v: object) -> object:
        """Treat an explicit null as an empty list."""
        return () if v is None else v

    @property
    def resolved_sources(self) -> tuple[str, ...]:
        """Sources with `sourceRoot` prefixed to every entry."""
        return tuple(self.source_root + source for source in self.sources)

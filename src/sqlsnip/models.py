from enum import Enum, StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ObjectKind(StrEnum):
    TABLE = "table"
    VIEW = "view"
    FUNCTION = "function"
    PROCEDURE = "procedure"
    TRIGGER = "trigger"


class LineRange(BaseModel):
    """Inclusive, 1-indexed line range. A missing bound is open."""

    model_config = ConfigDict(frozen=True)

    start: int | None = Field(default=None, ge=1)
    stop: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _check_order(self) -> Self:
        if self.start is not None and self.stop is not None and self.start > self.stop:
            raise ValueError(f"start line {self.start} is after stop line {self.stop}")
        return self

    def before(self, lineno: int) -> bool:
        return self.start is not None and lineno < self.start

    def past(self, lineno: int) -> bool:
        return self.stop is not None and lineno > self.stop


class SelectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    lines: tuple[str, ...] = ()
    search_path: str | None = None


class SearchPathMode(Enum):
    EXPLICIT = "explicit"
    SUPPRESSED = "suppressed"
    UNSET = "unset"


class SearchPathDirective(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: SearchPathMode
    schema_name: str | None = None

    @model_validator(mode="after")
    def _check_schema(self) -> Self:
        if (self.mode is SearchPathMode.EXPLICIT) != bool(self.schema_name):
            raise ValueError("an explicit search path needs a non-empty schema name, and only then")
        return self

    @classmethod
    def from_option(cls, value: str | None) -> "SearchPathDirective":
        """Map a raw option: None is unset, "" suppresses, anything else is explicit."""
        if value is None:
            return cls(mode=SearchPathMode.UNSET)
        if value == "":
            return cls(mode=SearchPathMode.SUPPRESSED)
        return cls(mode=SearchPathMode.EXPLICIT, schema_name=value)

    @property
    def given(self) -> bool:
        return self.mode is not SearchPathMode.UNSET

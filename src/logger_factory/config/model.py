from pathlib import Path
from typing import Literal, TypeAlias

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

Level: TypeAlias = Literal["debug", "info", "warn", "error"]
LevelSelection: TypeAlias = Literal["all", "none", "*"]

LEVELS: tuple[Level, ...] = ("debug", "info", "warn", "error")


class Templates(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    debug: str
    info: str
    warn: str
    error: str

    def for_level(self, level: Level) -> str:
        return getattr(self, level)


class Requirements(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    debug: bool = True
    info: bool = True
    warn: bool = True
    error: bool = True

    def allows(self, level: Level) -> bool:
        return getattr(self, level) is not False


class WriteSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    write: bool = False
    file: Path | None = None
    levels_to_write: list[Level] | LevelSelection = Field(
        default="all", validation_alias=AliasChoices("levels_to_write", "levelsToWrite")
    )

    @field_validator("file", mode="before")
    @classmethod
    def _blank_file_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def resolve_levels(self) -> frozenset[Level]:
        if self.levels_to_write in ("all", "*"):
            return frozenset(LEVELS)
        if self.levels_to_write == "none":
            return frozenset()
        return frozenset(self.levels_to_write)


class LoggerConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    templates: Templates
    levels_to_write: frozenset[Level] = Field(default_factory=lambda: frozenset(LEVELS))
    write_enabled: bool = False
    file_path: Path | None = None
    caller_replacements: dict[str, str] = Field(default_factory=dict)
    requirements: Requirements = Field(default_factory=Requirements)

    @model_validator(mode="after")
    def _file_required_when_writing(self) -> "LoggerConfig":
        if self.write_enabled and self.file_path is None:
            raise ValueError("file_path must be provided when write_enabled is true.")
        return self

    @classmethod
    def from_settings(
        cls,
        templates: Templates,
        write: WriteSettings,
        caller_replacements: dict[str, str],
        requirements: Requirements,
    ) -> "LoggerConfig":
        return cls(
            templates=templates,
            levels_to_write=write.resolve_levels(),
            write_enabled=write.write,
            file_path=write.file,
            caller_replacements=caller_replacements,
            requirements=requirements,
        )


class LoggerDefinition(BaseModel):
    """A named logger as it appears in a JSON definition file."""

    model_config = ConfigDict(extra="forbid")

    name: str
    templates: Templates
    write: WriteSettings = Field(default_factory=WriteSettings)
    caller_replacements: dict[str, str] = Field(
        default_factory=dict, validation_alias=AliasChoices("caller_replacements", "callerReplacements")
    )
    requirements: Requirements = Field(default_factory=Requirements)

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import ValidationError

from ..config import LoggerConfig, LoggerDefinition, Requirements, Templates, WriteSettings
from ..diagnostics import get_logger
from ..errors import ConfigurationError
from .instance import Logger

logger = get_logger()


class LoggerRegistry:
    """Owns the loggers of one application, keyed by name.

    Create one at startup and hand it to whatever needs to look loggers up.
    """

    def __init__(self):
        self._loggers: dict[str, Logger] = {}

    def create(
        self,
        name: str,
        templates: Templates | Mapping[str, str],
        write_settings: WriteSettings | Mapping | None = None,
        caller_replacements: Mapping[str, str] | None = None,
        requirements: Requirements | Mapping[str, bool] | None = None,
    ) -> Logger:
        try:
            templates = Templates.model_validate(templates)
            write = WriteSettings.model_validate({} if write_settings is None else write_settings)
            requirements = Requirements.model_validate({} if requirements is None else requirements)

            if write.write and write.file is None:
                raise ConfigurationError(f"Logger '{name}': a file is required when write is true.")

            config = LoggerConfig.from_settings(
                templates=templates,
                write=write,
                caller_replacements=dict(caller_replacements or {}),
                requirements=requirements,
            )
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration for logger '{name}': {exc}") from exc

        instance = Logger(config)

        if name in self._loggers:
            logger.debug(f"Replacing logger '{name}'.", extra={"logger_name": name})
        self._loggers[name] = instance
        logger.debug(
            f"Registered logger '{name}'.",
            extra={"logger_name": name, "levels_to_write": sorted(config.levels_to_write)},
        )
        return instance

    def create_from_definition(self, definition: LoggerDefinition) -> Logger:
        return self.create(
            definition.name,
            definition.templates,
            definition.write,
            definition.caller_replacements,
            definition.requirements,
        )

    def get(self, name: str) -> Logger | None:
        return self._loggers.get(name)

    def delete(self, name: str) -> None:
        if self._loggers.pop(name, None) is not None:
            logger.debug(f"Deleted logger '{name}'.", extra={"logger_name": name})

    def list(self) -> Mapping[str, Logger]:
        return MappingProxyType(self._loggers)

    def __contains__(self, name: object) -> bool:
        return name in self._loggers

    def __len__(self) -> int:
        return len(self._loggers)

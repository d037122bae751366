from .config import LEVELS, Level, LoggerConfig, LoggerDefinition, Requirements, Templates, WriteSettings
from .errors import ConfigurationError
from .logger import Logger, LoggerRegistry

__all__ = [
    "LEVELS",
    "ConfigurationError",
    "Level",
    "Logger",
    "LoggerConfig",
    "LoggerDefinition",
    "LoggerRegistry",
    "Requirements",
    "Templates",
    "WriteSettings",
]

from .entries import colored_templates, plain_templates
from .model import LEVELS, Level, LevelSelection, LoggerConfig, LoggerDefinition, Requirements, Templates, WriteSettings

__all__ = [
    "LEVELS",
    "Level",
    "LevelSelection",
    "LoggerConfig",
    "LoggerDefinition",
    "Requirements",
    "Templates",
    "WriteSettings",
    "colored_templates",
    "plain_templates",
]

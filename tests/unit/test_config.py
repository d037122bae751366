import pytest

from pydantic import ValidationError
from logger_factory.config import LEVELS, LoggerConfig, LoggerDefinition, Requirements, Templates, WriteSettings, plain_templates

TEMPLATES = Templates(debug="d", info="i", warn="w", error="e")


def test_templates_per_level():
    assert [TEMPLATES.for_level(level) for level in LEVELS] == ["d", "i", "w", "e"]


def test_requirements_default_to_enabled():
    requirements = Requirements(info=False)
    assert requirements.allows("debug")
    assert not requirements.allows("info")


def test_write_settings_defaults():
    settings = WriteSettings()
    assert not settings.write
    assert settings.file is None
    assert settings.resolve_levels() == frozenset(LEVELS)


def test_logger_config_requires_file_when_writing():
    with pytest.raises(ValidationError):
        LoggerConfig(templates=TEMPLATES, write_enabled=True)


def test_logger_config_is_frozen():
    config = LoggerConfig(templates=TEMPLATES)
    with pytest.raises(ValidationError):
        config.write_enabled = True


def test_definition_from_json():
    definition = LoggerDefinition.model_validate_json(
        '{"name": "app", "templates": {"debug": "d", "info": "i", "warn": "w", "error": "e"},'
        ' "write": {"write": true, "file": "app.log", "levels_to_write": "*"},'
        ' "requirements": {"debug": false}}'
    )
    assert definition.name == "app"
    assert definition.write.resolve_levels() == frozenset(LEVELS)
    assert not definition.requirements.allows("debug")
    assert definition.caller_replacements == {}


def test_plain_templates_include_caller_and_error():
    templates = plain_templates()
    assert templates.error == "[$[caller]] $[message] $[err]"
    assert all("$[caller]" in templates.for_level(level) for level in LEVELS)


def test_definition_accepts_camel_case_keys():
    definition = LoggerDefinition.model_validate(
        {
            "name": "app",
            "templates": {"debug": "d", "info": "i", "warn": "w", "error": "e"},
            "write": {"levelsToWrite": "none"},
            "callerReplacements": {"Index": "Main"},
        }
    )
    assert definition.write.resolve_levels() == frozenset()
    assert definition.caller_replacements == {"Index": "Main"}

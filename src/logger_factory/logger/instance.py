import sys

from email.utils import formatdate
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from ..config import Level, LoggerConfig, Requirements, Templates
from ..diagnostics import get_logger
from .fields import RuntimeFields
from .formatter import caller_label, render
from .stack import get_caller_from_stack

logger = get_logger()

# frames above _render: _log, the public level method, then the user's code
_CALLER_DEPTH = 3


class Logger:
    """A configured logger: renders a per-level template and sends it to stdout and, optionally, a file.

    Instances are created by :class:`LoggerRegistry` and are not changed afterwards.
    Concurrent writers to the same file rely on the platform's append semantics;
    nothing here serialises them.
    """

    def __init__(self, config: LoggerConfig):
        self._config = config

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def templates(self) -> Templates:
        return self._config.templates

    @property
    def levels_to_write(self) -> frozenset[Level]:
        return self._config.levels_to_write

    @property
    def write_enabled(self) -> bool:
        return self._config.write_enabled

    @property
    def file_path(self) -> Path | None:
        return self._config.file_path

    @property
    def caller_replacements(self) -> Mapping[str, str]:
        return MappingProxyType(self._config.caller_replacements)

    @property
    def requirements(self) -> Requirements:
        return self._config.requirements

    def debug(self, message: str, error: object | None = None) -> None:
        self._log("debug", message, error)

    def info(self, message: str, error: object | None = None) -> None:
        self._log("info", message, error)

    def warn(self, message: str, error: object | None = None) -> None:
        self._log("warn", message, error)

    def error(self, message: str, error: object | None = None) -> None:
        self._log("error", message, error)

    def _log(self, level: Level, message: str, error: object | None) -> None:
        if not self._config.requirements.allows(level):
            return

        rendered = self._render(level, message, error)

        if level in self._config.levels_to_write:
            self._write(rendered)

        self._print(rendered)

    def _render(self, level: Level, message: str, error: object | None) -> str:
        try:
            filename = get_caller_from_stack(_CALLER_DEPTH)
        except Exception as exc:
            logger.debug("Could not inspect the call stack.", exc_info=exc)
            filename = None

        fields = RuntimeFields(
            message=message,
            error=error,
            caller=caller_label(filename, self._config.caller_replacements),
        )
        return render(self._config.templates.for_level(level), fields)

    def _write(self, rendered: str) -> None:
        path = self._config.file_path
        if not self._config.write_enabled or path is None:
            return

        line = f"{formatdate(usegmt=True)} - {rendered}\n"
        try:
            if not path.exists():
                path.touch()
            with path.open("a", encoding="utf-8", errors="backslashreplace") as handle:
                handle.write(line)
        except Exception as exc:
            logger.warning(f"Failed to append to log file '{path}'.", exc_info=exc, extra={"file_path": str(path)})

    def _print(self, rendered: str) -> None:
        try:
            print(rendered)
        except UnicodeEncodeError:
            encoding = getattr(sys.stdout, "encoding", None) or "utf-8"
            print(rendered.encode(encoding, "backslashreplace").decode(encoding))
        except Exception as exc:
            logger.warning("Failed to write to standard output.", exc_info=exc)

    def __repr__(self) -> str:
        return (
            f"Logger(levels_to_write={sorted(self.levels_to_write)}, "
            f"write_enabled={self.write_enabled}, file_path={self.file_path})"
        )

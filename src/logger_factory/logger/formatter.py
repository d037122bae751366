import re

from .fields import TOKENS, RuntimeFields
from ..diagnostics import get_logger

logger = get_logger()

_PLACEHOLDER = re.compile(r"\$\[([A-Za-z0-9_-]+)\]")


def caller_label(filename: str | None, replacements: dict[str, str] | None = None) -> str:
    if not filename:
        return ""

    segment = filename.replace("\\", "/").rsplit("/", 1)[-1]
    if "." in segment:
        segment = segment[:segment.rindex(".")]
    label = segment[:1].upper() + segment[1:]

    if replacements and label in replacements:
        return replacements[label]
    return label


def render(template: str, fields: RuntimeFields) -> str:
    def substitute(match: re.Match) -> str:
        token = match.group(1)
        if token not in TOKENS:
            return match.group(0)
        try:
            value = fields.resolve(token)
        except Exception as exc:
            logger.debug(f"Could not resolve placeholder '$[{token}]'.", exc_info=exc, extra={"token": token})
            return ""
        return "" if value is None else value

    return _PLACEHOLDER.sub(substitute, template)

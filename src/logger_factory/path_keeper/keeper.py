import re

from pathlib import Path
from typing import Any
from ..diagnostics import get_logger

logger = get_logger()


class PathKeeper:

    _LOG = "logs/{log_id}.log"

    def __init__(self, base_dir: Path | str | None = None):
        self.base_dir = Path.cwd() if base_dir is None else Path(base_dir)
        self.params: dict[str, str] = {}

    def set_params(self, params: dict[str, Any]):
        for key, value in params.items():
            if key != "log_id" or value is None:
                logger.warning(f"Ignoring log path parameter '{key}'.", extra={"value": value})
                continue
            self.params[key] = _safe_segment(str(value))

    @property
    def LOG(self) -> Path:
        if "log_id" not in self.params:
            raise KeyError(f"'log_id' is required to build '{PathKeeper._LOG}'.")
        path = self.base_dir / PathKeeper._LOG.format(**self.params)
        path.parent.mkdir(parents=True, exist_ok=True)
        return path


def _safe_segment(value: str) -> str:
    # ISO timestamps carry ':' which Windows rejects in file names
    return re.sub(r'[<>:"/\\|?*]', "-", value)
